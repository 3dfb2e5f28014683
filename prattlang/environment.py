"""Lexical environments for prattlang.

An :class:`Environment` maps identifiers to runtime objects and links to the
scope it was created in. ``let`` binds into the current scope; lookups walk
outward until a binding is found. Function calls evaluate their body in a
fresh child of the closure's defining scope, so parameters and locals never
leak into the caller.


File: environment.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from prattlang.objects import Object


class Environment:
    """Variable environment with a parent-scope link."""

    def __init__(self, outer: Optional[Environment] = None):
        self.store: dict[str, Object] = {}
        self.outer = outer

    def get(self, name: str) -> Optional[Object]:
        """
        Look up ``name`` in this scope, then in each enclosing scope.

        Returns:
            Object | None: The bound value, or ``None`` if unbound.
        """
        env: Optional[Environment] = self
        while env is not None:
            if name in env.store:
                return env.store[name]
            env = env.outer
        return None

    def set(self, name: str, value: Object) -> Object:
        """Bind ``name`` in this scope, shadowing any outer binding."""
        self.store[name] = value
        return value

    def enclosed(self) -> Environment:
        """Return a new child scope of this one."""
        return Environment(outer=self)

    def __contains__(self, name: str) -> bool:
        return self.get(name) is not None

    def __repr__(self) -> str:
        return f"Environment({sorted(self.store)}, outer={self.outer is not None})"
