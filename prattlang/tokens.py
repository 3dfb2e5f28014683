"""Token kinds shared by the lexer and the parser.

Keeping the kinds in one place prevents the two components from drifting
apart when new operators or keywords are added.


File: tokens.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from dataclasses import dataclass
from enum import Enum


class TokenKind(str, Enum):
    """
    Enumeration of token kinds produced by the lexer.
    """

    ILLEGAL = "ILLEGAL"
    EOF = "EOF"

    # Identifiers and literals
    IDENTIFIER = "IDENTIFIER"
    INT = "INT"

    # Keywords
    LET = "LET"
    RETURN = "RETURN"
    IF = "IF"
    ELSE = "ELSE"
    FUNCTION = "FUNCTION"
    TRUE = "TRUE"
    FALSE = "FALSE"

    # Operators
    ASSIGN = "ASSIGN"
    PLUS = "PLUS"
    MINUS = "MINUS"
    BANG = "BANG"
    PRODUCT = "PRODUCT"
    DIVIDE = "DIVIDE"

    # Comparison
    EQUAL = "EQUAL"
    NOTEQUAL = "NOTEQUAL"
    LESS = "LESS"
    GREATER = "GREATER"
    LESSEQUAL = "LESSEQUAL"
    GREATEREQUAL = "GREATEREQUAL"

    # Delimiters
    LPAREN = "LPAREN"
    RPAREN = "RPAREN"
    LBRACE = "LBRACE"
    RBRACE = "RBRACE"
    COMMA = "COMMA"
    SEMICOLON = "SEMICOLON"

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying string value for nicer diagnostics.
        """
        return self.value


KEYWORDS: dict[str, TokenKind] = {
    "let": TokenKind.LET,
    "return": TokenKind.RETURN,
    "if": TokenKind.IF,
    "else": TokenKind.ELSE,
    "fn": TokenKind.FUNCTION,
    "true": TokenKind.TRUE,
    "false": TokenKind.FALSE,
}


@dataclass(frozen=True)
class Token:
    """
    A lexical token: its kind, the source text it was read from and the
    line it appeared on.
    """

    kind: TokenKind
    literal: str
    line: int = 1

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.literal!r}, line={self.line})"


__all__ = ["KEYWORDS", "Token", "TokenKind"]
