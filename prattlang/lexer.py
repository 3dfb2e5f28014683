"""Lexer for prattlang.

This lexer performs a single pass over the source code using a combined
regular expression of named groups. Each match yields a :class:`Token`
containing its kind, literal text and source line number.

Tokens cover integer literals, keywords (``let``, ``return``, ``if``, ``fn`` …),
identifiers, operators and delimiters. Comment text beginning with ``#`` is
skipped. Characters the language does not know are not fatal here: they are
emitted as ``ILLEGAL`` tokens so the parser can report them alongside its
other diagnostics.

:class:`Lexer` exposes the pull-based ``next_token()`` interface the parser
consumes.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import re

from prattlang.tokens import KEYWORDS, Token, TokenKind


token_specification: list[tuple[str, str]] = [
    # Keywords
    *((kind.value, rf'\b{word}\b') for word, kind in KEYWORDS.items()),

    # Identifiers and literals
    ('IDENTIFIER',   r'[A-Za-z_][A-Za-z0-9_]*'),
    ('INT',          r'\d+'),

    # Comparison operators
    ('EQUAL',        r'=='),
    ('NOTEQUAL',     r'!='),
    ('LESSEQUAL',    r'<='),
    ('GREATEREQUAL', r'>='),
    ('LESS',         r'<'),
    ('GREATER',      r'>'),

    # Assignment
    ('ASSIGN',       r'='),

    # Arithmetic and logical operators
    ('PLUS',         r'\+'),
    ('MINUS',        r'-'),
    ('BANG',         r'!'),
    ('PRODUCT',      r'\*'),
    ('DIVIDE',       r'/'),

    # Delimiters
    ('LPAREN',       r'\('),
    ('RPAREN',       r'\)'),
    ('LBRACE',       r'\{'),
    ('RBRACE',       r'\}'),
    ('COMMA',        r','),
    ('SEMICOLON',    r';'),

    # Miscellaneous
    ('COMMENT',      r'\#[^\n]*'),
    ('NEWLINE',      r'\n'),
    ('SKIP',         r'[ \t\r]+'),
    ('MISMATCH',     r'.'),
]

tok_regex = re.compile(
    '|'.join(f'(?P<{name}>{pattern})' for name, pattern in token_specification)
)


def tokenize(code: str) -> list[Token]:
    """
    Convert a string of source code into a list of tokens.

    Parameters:
        code (str): The source code to tokenize.

    Returns:
        list[Token]: A list of Token instances, always terminated by ``EOF``.
    """
    tokens = []
    line_num = 1

    for match_obj in tok_regex.finditer(code):
        kind = match_obj.lastgroup
        value = match_obj.group()

        if kind == 'NEWLINE':
            line_num += 1
            continue
        if kind in ('SKIP', 'COMMENT'):
            continue
        if kind == 'MISMATCH':
            tokens.append(Token(TokenKind.ILLEGAL, value, line_num))
        else:
            tokens.append(Token(TokenKind(kind), value, line_num))

    tokens.append(Token(TokenKind.EOF, "", line_num))
    return tokens


class Lexer:
    """
    Token stream over a piece of source code.
    """

    def __init__(self, code: str):
        """
        Tokenize ``code`` up front and prepare to hand tokens out one at a time.

        Parameters:
            code (str): The source code to tokenize.
        """
        self.tokens = tokenize(code)
        self.position = 0

    def next_token(self) -> Token:
        """
        Return the next token. Once the stream is exhausted, the trailing
        ``EOF`` token is returned on every call.
        """
        tok = self.tokens[self.position]
        if self.position < len(self.tokens) - 1:
            self.position += 1
        return tok
