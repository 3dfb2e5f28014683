"""
Expression parsing utilities for prattlang.

These functions operate on a `prattlang.parser.parser.Parser` instance and
implement precedence climbing. `parse_expression` looks up a prefix handler
for the current token, then keeps folding infix operators into the left-hand
side for as long as the next operator binds tighter than the precedence it
was called with. Calling back into `parse_expression` with an operator's own
precedence for the right-hand side makes binary operators left-associative.

Handlers return ``None`` when their construct cannot be completed, after the
failure has been recorded on the parser.


File: expressions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enum import IntEnum
from typing import TYPE_CHECKING, Optional

from prattlang.nodes import (
    BooleanLiteral,
    CallExpression,
    Expression,
    FunctionLiteral,
    Identifier,
    IfExpression,
    InfixExpression,
    IntegerLiteral,
    PrefixExpression,
)
from prattlang.tokens import TokenKind

if TYPE_CHECKING:
    from prattlang.parser import Parser


class Priority(IntEnum):
    """
    Binding strength of operators, weakest first.
    """

    LOWEST = 1
    EQUALS = 2       # == !=
    LESSGREATER = 3  # < > <= >=
    SUM = 4          # + -
    PRODUCT = 5      # * /
    PREFIX = 6       # -x !x
    CALL = 7         # f(x)


PRECEDENCES: dict[TokenKind, Priority] = {
    TokenKind.EQUAL: Priority.EQUALS,
    TokenKind.NOTEQUAL: Priority.EQUALS,
    TokenKind.LESS: Priority.LESSGREATER,
    TokenKind.GREATER: Priority.LESSGREATER,
    TokenKind.LESSEQUAL: Priority.LESSGREATER,
    TokenKind.GREATEREQUAL: Priority.LESSGREATER,
    TokenKind.PLUS: Priority.SUM,
    TokenKind.MINUS: Priority.SUM,
    TokenKind.PRODUCT: Priority.PRODUCT,
    TokenKind.DIVIDE: Priority.PRODUCT,
    TokenKind.LPAREN: Priority.CALL,
}


def precedence_of(kind: TokenKind) -> Priority:
    """Return the precedence of ``kind``; kinds not in the table rank lowest."""
    return PRECEDENCES.get(kind, Priority.LOWEST)


# ---- Entry point ----

def parse_expression(parser: 'Parser', precedence: Priority) -> Optional[Expression]:
    """
    Parse an expression starting at the current token.

    Args:
        parser: The parser instance.
        precedence: Only operators binding tighter than this are consumed.

    Returns:
        Expression | None: The parsed expression, or ``None`` on failure.
    """
    if parser.depth_exceeded():
        return None

    parser.depth += 1
    try:
        prefix = parser.prefix_parse_fns.get(parser.curr_token.kind)
        if prefix is None:
            parser.no_prefix_parse_fn_error(parser.curr_token.kind)
            return None
        left = prefix()

        while (
            left is not None
            and not parser.peek_token_is(TokenKind.SEMICOLON)
            and precedence < parser.peek_precedence()
        ):
            infix = parser.infix_parse_fns.get(parser.peek_token.kind)
            if infix is None:
                return left
            parser.next_token()
            left = infix(left)

        return left
    finally:
        parser.depth -= 1


# ---- Prefix handlers ----

def parse_identifier(parser: 'Parser') -> Identifier:
    """Parse an identifier reference."""
    tok = parser.curr_token
    return Identifier(tok.literal, line=tok.line)


def parse_integer_literal(parser: 'Parser') -> Optional[IntegerLiteral]:
    """Parse an integer literal."""
    tok = parser.curr_token
    try:
        value = int(tok.literal)
    except ValueError:
        parser.record_error(f"could not parse '{tok.literal}' as integer")
        return None
    return IntegerLiteral(value, line=tok.line)


def parse_boolean(parser: 'Parser') -> BooleanLiteral:
    """Parse ``true`` or ``false``."""
    tok = parser.curr_token
    return BooleanLiteral(tok.kind == TokenKind.TRUE, line=tok.line)


def parse_prefix_expression(parser: 'Parser') -> Optional[PrefixExpression]:
    """
    Parse a prefix operator and its operand.

    Syntax:
        ! <expression> | - <expression>
    """
    tok = parser.curr_token
    parser.next_token()
    operand = parser.parse_expression(Priority.PREFIX)
    if operand is None:
        return None
    return PrefixExpression(tok.literal, operand, line=tok.line)


def parse_grouped_expression(parser: 'Parser') -> Optional[Expression]:
    """
    Parse a parenthesized expression. Grouping leaves no node behind; it
    only changes how operators are nested.

    Syntax:
        ( <expression> )
    """
    parser.next_token()
    node = parser.parse_expression(Priority.LOWEST)
    if node is None:
        return None
    if not parser.expect_peek(TokenKind.RPAREN):
        return None
    return node


def parse_if_expression(parser: 'Parser') -> Optional[IfExpression]:
    """
    Parse a conditional expression.

    Syntax:
        if ( <condition> ) { <block> }
        if ( <condition> ) { <block> } else { <block> }

    Args:
        parser: The parser instance.

    Returns:
        IfExpression | None: The parsed node, or ``None`` on failure.
    """
    tok = parser.curr_token
    if not parser.expect_peek(TokenKind.LPAREN):
        return None
    parser.next_token()
    condition = parser.parse_expression(Priority.LOWEST)
    if condition is None:
        return None
    if not parser.expect_peek(TokenKind.RPAREN):
        return None
    if not parser.expect_peek(TokenKind.LBRACE):
        return None
    consequence = parser.parse_block_statement()
    if consequence is None:
        return None

    alternative = None
    if parser.peek_token_is(TokenKind.ELSE):
        parser.next_token()
        if not parser.expect_peek(TokenKind.LBRACE):
            return None
        alternative = parser.parse_block_statement()
        if alternative is None:
            return None

    return IfExpression(condition, consequence, alternative, line=tok.line)


def parse_function_literal(parser: 'Parser') -> Optional[FunctionLiteral]:
    """
    Parse a function literal.

    Syntax:
        fn ( <params> ) { <block> }

    Args:
        parser: The parser instance.

    Returns:
        FunctionLiteral | None: The parsed node, or ``None`` on failure.
    """
    tok = parser.curr_token
    if not parser.expect_peek(TokenKind.LPAREN):
        return None
    parameters = parser.parse_function_parameters()
    if parameters is None:
        return None
    if not parser.expect_peek(TokenKind.LBRACE):
        return None
    body = parser.parse_block_statement()
    if body is None:
        return None
    return FunctionLiteral(tuple(parameters), body, line=tok.line)


def parse_function_parameters(parser: 'Parser') -> Optional[list[Identifier]]:
    """
    Parse a comma-separated parameter list. The current token is the
    opening parenthesis; on success it is the closing one.
    """
    params: list[Identifier] = []
    if parser.peek_token_is(TokenKind.RPAREN):
        parser.next_token()
        return params

    if not parser.expect_peek(TokenKind.IDENTIFIER):
        return None
    params.append(parse_identifier(parser))
    while parser.peek_token_is(TokenKind.COMMA):
        parser.next_token()
        if not parser.expect_peek(TokenKind.IDENTIFIER):
            return None
        params.append(parse_identifier(parser))

    if not parser.expect_peek(TokenKind.RPAREN):
        return None
    return params


# ---- Infix handlers ----

def parse_infix_expression(parser: 'Parser', left: Expression) -> Optional[InfixExpression]:
    """
    Parse a binary operator whose left operand has already been parsed.

    Syntax:
        <left> <op> <expression>
    """
    tok = parser.curr_token
    precedence = parser.curr_precedence()
    parser.next_token()
    right = parser.parse_expression(precedence)
    if right is None:
        return None
    return InfixExpression(left, tok.literal, right, line=tok.line)


def parse_call_expression(parser: 'Parser', function: Expression) -> Optional[CallExpression]:
    """
    Parse a call whose callee has already been parsed.

    Syntax:
        <callee> ( <args> )
    """
    tok = parser.curr_token
    arguments = parser.parse_call_arguments()
    if arguments is None:
        return None
    return CallExpression(function, tuple(arguments), line=tok.line)


def parse_call_arguments(parser: 'Parser') -> Optional[list[Expression]]:
    """
    Parse a comma-separated argument list. The current token is the opening
    parenthesis; on success it is the closing one.
    """
    args: list[Expression] = []
    if parser.peek_token_is(TokenKind.RPAREN):
        parser.next_token()
        return args

    parser.next_token()
    arg = parser.parse_expression(Priority.LOWEST)
    if arg is None:
        return None
    args.append(arg)
    while parser.peek_token_is(TokenKind.COMMA):
        parser.next_token()
        parser.next_token()
        arg = parser.parse_expression(Priority.LOWEST)
        if arg is None:
            return None
        args.append(arg)

    if not parser.expect_peek(TokenKind.RPAREN):
        return None
    return args
