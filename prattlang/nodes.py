"""AST node definitions for prattlang.

The tree is a closed set of frozen dataclasses: four statement variants,
eight expression variants and the :class:`Program` root. Nodes are created
once by the parser and never mutated afterwards.

Every node renders to a canonical string through :func:`render` (also used by
``str(node)``). Binary and prefix expressions are fully parenthesized, so the
rendering shows exactly how the parser grouped the operators, and the output
can be fed back to the parser to produce the same tree again.

Each node records the source line of its first token. Lines are excluded from
equality so trees parsed from differently formatted sources compare equal.


File: nodes.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


class Node:
    """Base class for every AST node."""

    def __str__(self) -> str:
        return render(self)


class Statement(Node):
    """Base class for statement nodes."""


class Expression(Node):
    """Base class for expression nodes."""


# ---- Expressions ----

@dataclass(frozen=True)
class Identifier(Expression):
    name: str
    line: int = field(default=0, compare=False, repr=False)


@dataclass(frozen=True)
class IntegerLiteral(Expression):
    value: int
    line: int = field(default=0, compare=False, repr=False)


@dataclass(frozen=True)
class BooleanLiteral(Expression):
    value: bool
    line: int = field(default=0, compare=False, repr=False)


@dataclass(frozen=True)
class PrefixExpression(Expression):
    operator: str
    operand: Expression
    line: int = field(default=0, compare=False, repr=False)


@dataclass(frozen=True)
class InfixExpression(Expression):
    left: Expression
    operator: str
    right: Expression
    line: int = field(default=0, compare=False, repr=False)


@dataclass(frozen=True)
class IfExpression(Expression):
    condition: Expression
    consequence: BlockStatement
    alternative: Optional[BlockStatement] = None
    line: int = field(default=0, compare=False, repr=False)


@dataclass(frozen=True)
class FunctionLiteral(Expression):
    parameters: tuple[Identifier, ...]
    body: BlockStatement
    line: int = field(default=0, compare=False, repr=False)


@dataclass(frozen=True)
class CallExpression(Expression):
    function: Expression
    arguments: tuple[Expression, ...]
    line: int = field(default=0, compare=False, repr=False)


# ---- Statements ----

@dataclass(frozen=True)
class LetStatement(Statement):
    name: Identifier
    value: Expression
    line: int = field(default=0, compare=False, repr=False)


@dataclass(frozen=True)
class ReturnStatement(Statement):
    value: Expression
    line: int = field(default=0, compare=False, repr=False)


@dataclass(frozen=True)
class ExpressionStatement(Statement):
    expression: Expression
    line: int = field(default=0, compare=False, repr=False)


@dataclass(frozen=True)
class BlockStatement(Statement):
    statements: tuple[Statement, ...]
    line: int = field(default=0, compare=False, repr=False)


@dataclass(frozen=True)
class Program(Node):
    statements: tuple[Statement, ...]


def _render_sequence(statements) -> str:
    """
    Render statements in order. Expression statements get a trailing ``;``
    so neighbouring expressions cannot fuse when the text is parsed again.
    """
    parts = []
    for stmt in statements:
        text = render(stmt)
        if isinstance(stmt, ExpressionStatement):
            text += ";"
        parts.append(text)
    return " ".join(parts)


def render(node: Node) -> str:
    """
    Render a node in its canonical form.

    Parameters:
        node (Node): Any AST node.

    Returns:
        str: The canonical source text for ``node``.

    Raises:
        TypeError: If ``node`` is not an AST node.
    """
    match node:
        case Program(statements=statements):
            return _render_sequence(statements)
        case LetStatement(name=name, value=value):
            return f"let {render(name)} = {render(value)};"
        case ReturnStatement(value=value):
            return f"return {render(value)};"
        case ExpressionStatement(expression=expression):
            return render(expression)
        case BlockStatement(statements=statements):
            if not statements:
                return "{ }"
            return f"{{ {_render_sequence(statements)} }}"
        case Identifier(name=name):
            return name
        case IntegerLiteral(value=value):
            return str(value)
        case BooleanLiteral(value=value):
            return "true" if value else "false"
        case PrefixExpression(operator=operator, operand=operand):
            return f"({operator}{render(operand)})"
        case InfixExpression(left=left, operator=operator, right=right):
            return f"({render(left)} {operator} {render(right)})"
        case IfExpression(condition=condition, consequence=consequence, alternative=alternative):
            text = f"if ({render(condition)}) {render(consequence)}"
            if alternative is not None:
                text += f" else {render(alternative)}"
            return text
        case FunctionLiteral(parameters=parameters, body=body):
            params = ", ".join(render(p) for p in parameters)
            return f"fn({params}) {render(body)}"
        case CallExpression(function=function, arguments=arguments):
            args = ", ".join(render(a) for a in arguments)
            return f"{render(function)}({args})"
        case _:
            raise TypeError(f"Cannot render {type(node).__name__} as an AST node")
