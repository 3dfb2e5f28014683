"""Runtime object model for prattlang.

Evaluation produces instances of the classes below. Every object answers two
questions for its host: ``is_true()`` (truthiness in a conditional context)
and ``inspect()`` (its display form). The evaluator relies on nothing else,
so the representation of each value stays private to its class.

Truthiness: ``null`` and ``false`` are falsy, everything else is truthy,
including the integer ``0``.

Two variants are control signals rather than user values.
:class:`ReturnValueObject` wraps the result of a ``return`` statement and
:class:`ErrorObject` carries an evaluation failure; both make enclosing
blocks stop and hand them upward untouched.


File: objects.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from prattlang.nodes import BlockStatement, Identifier, render

if TYPE_CHECKING:
    from prattlang.environment import Environment


INTEGER_OBJ = "INTEGER"
BOOLEAN_OBJ = "BOOLEAN"
NULL_OBJ = "NULL"
RETURN_VALUE_OBJ = "RETURN_VALUE"
ERROR_OBJ = "ERROR"
FUNCTION_OBJ = "FUNCTION"


class Object:
    """Base class for runtime values."""

    type_name = ""

    def is_true(self) -> bool:
        return True

    def inspect(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class IntegerObject(Object):
    value: int

    type_name = INTEGER_OBJ

    def inspect(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class BooleanObject(Object):
    value: bool

    type_name = BOOLEAN_OBJ

    def is_true(self) -> bool:
        return self.value

    def inspect(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class NullObject(Object):
    type_name = NULL_OBJ

    def is_true(self) -> bool:
        return False

    def inspect(self) -> str:
        return "null"


NULL = NullObject()


@dataclass(frozen=True)
class ReturnValueObject(Object):
    """
    Marks a value produced by ``return``. Blocks stop at the first one they
    see and pass it up unchanged; the program and call boundaries unwrap it.
    """

    value: Object

    type_name = RETURN_VALUE_OBJ

    def inspect(self) -> str:
        return self.value.inspect()


@dataclass(frozen=True)
class ErrorObject(Object):
    """An evaluation failure, propagated like a return value."""

    message: str

    type_name = ERROR_OBJ

    def inspect(self) -> str:
        return f"ERROR: {self.message}"


@dataclass(frozen=True, eq=False)
class FunctionObject(Object):
    """
    A closure: parameters and body from a function literal, plus the
    environment the literal was evaluated in.
    """

    parameters: tuple[Identifier, ...]
    body: BlockStatement
    env: Environment = field(repr=False)

    type_name = FUNCTION_OBJ

    def inspect(self) -> str:
        params = ", ".join(p.name for p in self.parameters)
        return f"fn({params}) {render(self.body)}"


def is_error(obj: Object) -> bool:
    """Return ``True`` if ``obj`` is an :class:`ErrorObject`."""
    return isinstance(obj, ErrorObject)
