"""
Main parser entry point for prattlang.

This module defines the `Parser` class, which owns the token window and the
diagnostic list and coordinates the precedence-climbing parse. The parsing
routines themselves are split across `prattlang.parser.expressions` and
`prattlang.parser.statements`.

Expression parsing is table driven: each token kind may own a prefix handler
(the token starts an expression) and an infix handler (the token continues
one). Both tables are plain dicts filled in the constructor, so supporting a
new operator means registering a handler and, for infix operators, giving it
a precedence.

The parser never raises on malformed input. Problems are recorded as
:class:`Diagnostic` entries and parsing resumes with the next statement.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from prattlang.config import DEFAULT_MAX_NESTING
from prattlang.nodes import (
    BlockStatement,
    Expression,
    ExpressionStatement,
    Identifier,
    LetStatement,
    Program,
    ReturnStatement,
    Statement,
)
from prattlang.tokens import Token, TokenKind

from . import expressions as _expr
from . import statements as _stmt
from .expressions import Priority

logger = logging.getLogger(__name__)

PrefixParseFn = Callable[[], Optional[Expression]]
InfixParseFn = Callable[[Expression], Optional[Expression]]


@dataclass(frozen=True)
class Diagnostic:
    """A parse error message and the source line it was raised on."""

    message: str
    line: int

    def __str__(self) -> str:
        return self.message


class Parser:
    """prattlang parser."""

    def __init__(self, lexer, file: str = "<input>", max_depth: Optional[int] = None):
        """
        Initialize the parser over a token stream.

        Parameters:
            lexer: Any object with a ``next_token() -> Token`` method.
            file (str): The name of the source, used in log messages.
            max_depth (int | None): Maximum combined nesting of expressions
                and blocks.
        """
        self.lexer = lexer
        self.source_file = file
        self.max_depth = max_depth if max_depth is not None else DEFAULT_MAX_NESTING
        self.depth = 0
        self.diagnostics: list[Diagnostic] = []

        self.curr_token: Token = Token(TokenKind.EOF, "")
        self.peek_token: Token = Token(TokenKind.EOF, "")

        self.prefix_parse_fns: dict[TokenKind, PrefixParseFn] = {}
        self.infix_parse_fns: dict[TokenKind, InfixParseFn] = {}

        self.register_prefix(TokenKind.IDENTIFIER, self.parse_identifier)
        self.register_prefix(TokenKind.INT, self.parse_integer_literal)
        self.register_prefix(TokenKind.BANG, self.parse_prefix_expression)
        self.register_prefix(TokenKind.MINUS, self.parse_prefix_expression)
        self.register_prefix(TokenKind.TRUE, self.parse_boolean)
        self.register_prefix(TokenKind.FALSE, self.parse_boolean)
        self.register_prefix(TokenKind.LPAREN, self.parse_grouped_expression)
        self.register_prefix(TokenKind.IF, self.parse_if_expression)
        self.register_prefix(TokenKind.FUNCTION, self.parse_function_literal)

        for kind in (
            TokenKind.PLUS,
            TokenKind.MINUS,
            TokenKind.PRODUCT,
            TokenKind.DIVIDE,
            TokenKind.EQUAL,
            TokenKind.NOTEQUAL,
            TokenKind.LESS,
            TokenKind.GREATER,
            TokenKind.LESSEQUAL,
            TokenKind.GREATEREQUAL,
        ):
            self.register_infix(kind, self.parse_infix_expression)
        self.register_infix(TokenKind.LPAREN, self.parse_call_expression)

        # Fill both current and peek.
        self.next_token()
        self.next_token()

    def register_prefix(self, kind: TokenKind, fn: PrefixParseFn) -> None:
        """
        Register the handler used when ``kind`` starts an expression.
        """
        self.prefix_parse_fns[kind] = fn

    def register_infix(self, kind: TokenKind, fn: InfixParseFn) -> None:
        """
        Register the handler used when ``kind`` follows a complete expression.
        """
        self.infix_parse_fns[kind] = fn


    # Token window
    def next_token(self) -> Token:
        """
        Slide the two-token window forward by one token.
        """
        self.curr_token = self.peek_token
        self.peek_token = self.lexer.next_token()
        return self.curr_token

    def curr_token_is(self, kind: TokenKind) -> bool:
        return self.curr_token.kind == kind

    def peek_token_is(self, kind: TokenKind) -> bool:
        return self.peek_token.kind == kind

    def expect_peek(self, kind: TokenKind) -> bool:
        """
        Advance if the peek token is of ``kind``.

        Otherwise record a diagnostic and leave the window where it is; the
        caller decides whether to abandon the construct.
        """
        if self.peek_token_is(kind):
            self.next_token()
            return True
        self.peek_error(kind)
        return False

    def peek_precedence(self) -> Priority:
        return _expr.precedence_of(self.peek_token.kind)

    def curr_precedence(self) -> Priority:
        return _expr.precedence_of(self.curr_token.kind)


    # Diagnostics
    def record_error(self, message: str, line: Optional[int] = None) -> None:
        """
        Append a diagnostic. Recording never interrupts parsing.
        """
        if line is None:
            line = self.curr_token.line
        logger.debug("%s:%s: %s", self.source_file, line, message)
        self.diagnostics.append(Diagnostic(message, line))

    def peek_error(self, kind: TokenKind) -> None:
        self.record_error(
            f"expected next token to be {kind.value}, "
            f"got {self.peek_token.kind.value} instead",
            self.peek_token.line,
        )

    def no_prefix_parse_fn_error(self, kind: TokenKind) -> None:
        self.record_error(f"no prefix parse function for {kind.value} found")

    def nesting_error(self) -> None:
        self.record_error(f"maximum nesting depth of {self.max_depth} exceeded")

    def depth_exceeded(self) -> bool:
        """
        Return ``True``, after recording a diagnostic, if entering one more
        expression or block would pass ``max_depth``.
        """
        if self.depth < self.max_depth:
            return False
        self.nesting_error()
        return True

    @property
    def errors(self) -> list[str]:
        """
        Diagnostic messages in the order they were recorded.
        """
        return [d.message for d in self.diagnostics]

    def get_errors(self) -> list[str]:
        return self.errors


    # Expression wrappers
    def parse_expression(self, precedence: Priority) -> Optional[Expression]:
        """
        Parse an expression whose operators bind tighter than ``precedence``.
        """
        return _expr.parse_expression(self, precedence)

    def parse_identifier(self) -> Optional[Expression]:
        """
        Parse an identifier reference.
        """
        return _expr.parse_identifier(self)

    def parse_integer_literal(self) -> Optional[Expression]:
        """
        Parse an integer literal.
        """
        return _expr.parse_integer_literal(self)

    def parse_boolean(self) -> Optional[Expression]:
        """
        Parse ``true`` or ``false``.
        """
        return _expr.parse_boolean(self)

    def parse_prefix_expression(self) -> Optional[Expression]:
        """
        Parse a prefix operator applied to its operand.
        """
        return _expr.parse_prefix_expression(self)

    def parse_infix_expression(self, left: Expression) -> Optional[Expression]:
        """
        Parse a binary operator and its right-hand side.
        """
        return _expr.parse_infix_expression(self, left)

    def parse_grouped_expression(self) -> Optional[Expression]:
        """
        Parse a parenthesized expression.
        """
        return _expr.parse_grouped_expression(self)

    def parse_if_expression(self) -> Optional[Expression]:
        """
        Parse an ``if`` expression with an optional ``else`` block.
        """
        return _expr.parse_if_expression(self)

    def parse_function_literal(self) -> Optional[Expression]:
        """
        Parse an ``fn`` literal.
        """
        return _expr.parse_function_literal(self)

    def parse_function_parameters(self) -> Optional[list[Identifier]]:
        """
        Parse the parameter list of a function literal.
        """
        return _expr.parse_function_parameters(self)

    def parse_call_expression(self, function: Expression) -> Optional[Expression]:
        """
        Parse a call applied to ``function``.
        """
        return _expr.parse_call_expression(self, function)

    def parse_call_arguments(self) -> Optional[list[Expression]]:
        """
        Parse the argument list of a call.
        """
        return _expr.parse_call_arguments(self)


    # Statement wrappers
    def parse_statement(self) -> Optional[Statement]:
        """
        Parse a single statement.
        """
        return _stmt.parse_statement(self)

    def parse_let_statement(self) -> Optional[LetStatement]:
        """
        Parse a ``let`` binding.
        """
        return _stmt.parse_let_statement(self)

    def parse_return_statement(self) -> Optional[ReturnStatement]:
        """
        Parse a ``return`` statement.
        """
        return _stmt.parse_return_statement(self)

    def parse_expression_statement(self) -> Optional[ExpressionStatement]:
        """
        Parse an expression used as a statement.
        """
        return _stmt.parse_expression_statement(self)

    def parse_block_statement(self) -> Optional[BlockStatement]:
        """
        Parse a block of statements enclosed in braces.
        """
        return _stmt.parse_block_statement(self)


    def parse_program(self) -> Program:
        """
        Parse the full input into a program.

        Statements that fail to parse are left out; their diagnostics are
        available through :attr:`errors`. Input nested too deeply for the
        Python stack ends the parse with a nesting diagnostic.
        """
        statements = []
        while not self.curr_token_is(TokenKind.EOF):
            try:
                stmt = self.parse_statement()
            except RecursionError:
                self.nesting_error()
                break
            if stmt is not None:
                statements.append(stmt)
            self.next_token()
        return Program(tuple(statements))
