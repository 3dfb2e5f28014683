"""Statement parsing utilities for prattlang.

These functions operate on a `prattlang.parser.parser.Parser` instance and
handle the statement forms of the language: ``let`` bindings, ``return``,
bare expressions and brace-delimited blocks.

On entry the parser's current token is the first token of the statement; on
exit it is the last token the statement consumed, so the caller advances
once before parsing the next statement.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING, Optional

from prattlang.nodes import (
    BlockStatement,
    ExpressionStatement,
    Identifier,
    LetStatement,
    ReturnStatement,
    Statement,
)
from prattlang.parser.expressions import Priority
from prattlang.tokens import TokenKind

if TYPE_CHECKING:
    from prattlang.parser import Parser


def parse_statement(parser: 'Parser') -> Optional[Statement]:
    """
    Parse a single statement.

    Syntax:
        <statement>

    Args:
        parser: The parser instance.

    Returns:
        Statement | None: The parsed node, or ``None`` if it was malformed.
    """
    kind = parser.curr_token.kind
    if kind == TokenKind.LET:
        return parser.parse_let_statement()
    if kind == TokenKind.RETURN:
        return parser.parse_return_statement()
    return parser.parse_expression_statement()


def parse_let_statement(parser: 'Parser') -> Optional[LetStatement]:
    """
    Parse a ``let`` binding.

    Syntax:
        let <identifier> = <expression> ;?

    Args:
        parser: The parser instance.

    Returns:
        LetStatement | None: The parsed node, or ``None`` on failure.
    """
    tok = parser.curr_token
    if not parser.expect_peek(TokenKind.IDENTIFIER):
        return None
    name = Identifier(parser.curr_token.literal, line=parser.curr_token.line)
    if not parser.expect_peek(TokenKind.ASSIGN):
        return None

    parser.next_token()
    value = parser.parse_expression(Priority.LOWEST)
    if parser.peek_token_is(TokenKind.SEMICOLON):
        parser.next_token()
    if value is None:
        return None
    return LetStatement(name, value, line=tok.line)


def parse_return_statement(parser: 'Parser') -> Optional[ReturnStatement]:
    """
    Parse a ``return`` statement.

    Syntax:
        return <expression> ;?
    """
    tok = parser.curr_token
    parser.next_token()
    value = parser.parse_expression(Priority.LOWEST)
    if parser.peek_token_is(TokenKind.SEMICOLON):
        parser.next_token()
    if value is None:
        return None
    return ReturnStatement(value, line=tok.line)


def parse_expression_statement(parser: 'Parser') -> Optional[ExpressionStatement]:
    """
    Parse an expression used as a statement.

    Syntax:
        <expression> ;?
    """
    tok = parser.curr_token
    expression = parser.parse_expression(Priority.LOWEST)
    if parser.peek_token_is(TokenKind.SEMICOLON):
        parser.next_token()
    if expression is None:
        return None
    return ExpressionStatement(expression, line=tok.line)


def parse_block_statement(parser: 'Parser') -> Optional[BlockStatement]:
    """
    Parse a block of statements enclosed in braces. The current token is the
    opening brace; on success it is the closing one.

    Syntax:
        { <statement>* }

    Args:
        parser: The parser instance.

    Returns:
        BlockStatement | None: The parsed node, or ``None`` if the block is
        nested too deeply or the input ends before it is closed.
    """
    if parser.depth_exceeded():
        return None

    parser.depth += 1
    try:
        tok = parser.curr_token
        parser.next_token()
        statements = []
        while not parser.curr_token_is(TokenKind.RBRACE):
            if parser.curr_token_is(TokenKind.EOF):
                parser.record_error(
                    f"expected next token to be {TokenKind.RBRACE.value}, "
                    f"got {TokenKind.EOF.value} instead"
                )
                return None
            stmt = parser.parse_statement()
            if stmt is not None:
                statements.append(stmt)
            elif parser.curr_token_is(TokenKind.RBRACE):
                # A failed statement stopped on the closing brace.
                break
            parser.next_token()
        return BlockStatement(tuple(statements), line=tok.line)
    finally:
        parser.depth -= 1
