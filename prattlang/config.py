"""Runtime configuration for prattlang.

Settings are read from environment variables:

    PRATTDEBUG             any non-empty value enables debug output
    PRATT_MAX_NESTING      maximum expression and block nesting in the parser
    PRATT_MAX_CALL_DEPTH   maximum function call depth in the evaluator
    PRATT_MAX_EVAL_DEPTH   maximum node nesting while evaluating

Each unit of parser nesting costs up to six Python frames and each unit of
evaluation depth up to two. The defaults stay below the interpreter's
default recursion limit of 1000.


File: config.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_MAX_NESTING = 100
DEFAULT_MAX_CALL_DEPTH = 64
DEFAULT_MAX_EVAL_DEPTH = 300


@dataclass(frozen=True)
class Settings:
    """Resolved runtime settings."""

    debug: bool = False
    max_nesting: int = DEFAULT_MAX_NESTING
    max_call_depth: int = DEFAULT_MAX_CALL_DEPTH
    max_eval_depth: int = DEFAULT_MAX_EVAL_DEPTH


def _read_limit(environ: Mapping[str, str], name: str, default: int) -> int:
    """
    Read a positive integer limit from ``environ``.

    Raises:
        ValueError: If the variable is set but is not a positive integer.
    """
    raw = environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{raw}'") from None
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build :class:`Settings` from environment variables.

    Parameters:
        environ (Mapping[str, str] | None): Variables to read. Defaults to
            ``os.environ``.

    Returns:
        Settings: The resolved settings.
    """
    if environ is None:
        environ = os.environ
    return Settings(
        debug=bool(environ.get("PRATTDEBUG")),
        max_nesting=_read_limit(environ, "PRATT_MAX_NESTING", DEFAULT_MAX_NESTING),
        max_call_depth=_read_limit(environ, "PRATT_MAX_CALL_DEPTH", DEFAULT_MAX_CALL_DEPTH),
        max_eval_depth=_read_limit(environ, "PRATT_MAX_EVAL_DEPTH", DEFAULT_MAX_EVAL_DEPTH),
    )
