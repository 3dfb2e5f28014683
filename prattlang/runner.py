"""Program driver for prattlang.

Ties the stages together:

1. The lexer turns source text into a token stream.
2. The parser builds a :class:`~prattlang.nodes.Program` and collects
   diagnostics.
3. If the parse was clean, the evaluator walks the program and produces the
   value of the last top-level statement.

Diagnostics and values are reported separately: a run with parser errors is
never evaluated, so a caller can always tell a malformed program from one
that evaluated to an error object.


File: runner.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from prattlang.config import Settings, load_settings
from prattlang.environment import Environment
from prattlang.evaluator import Evaluator
from prattlang.lexer import Lexer
from prattlang.nodes import Program
from prattlang.objects import Object
from prattlang.parser import Parser

logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    """Outcome of running a piece of source code."""

    program: Program
    errors: list[str] = field(default_factory=list)
    value: Optional[Object] = None

    @property
    def ok(self) -> bool:
        return not self.errors


def parse(source: str, file: str = "<input>",
          settings: Optional[Settings] = None) -> tuple[Program, list[str]]:
    """
    Parse ``source`` into a program.

    Parameters:
        source (str): The source code.
        file (str): The name of the source.
        settings (Settings | None): Limits to apply; read from the
            environment if omitted.

    Returns:
        tuple[Program, list[str]]: The (possibly partial) program and the
        parser diagnostics.
    """
    if settings is None:
        settings = load_settings()
    parser = Parser(Lexer(source), file, max_depth=settings.max_nesting)
    program = parser.parse_program()
    return program, parser.errors


def run(source: str, file: str = "<input>", env: Optional[Environment] = None,
        settings: Optional[Settings] = None) -> RunResult:
    """
    Parse and evaluate ``source``.

    Parameters:
        source (str): The source code.
        file (str): The name of the source.
        env (Environment | None): Scope to evaluate in. Passing the same
            environment to several runs keeps their bindings.
        settings (Settings | None): Limits to apply; read from the
            environment if omitted.

    Returns:
        RunResult: The program, its diagnostics and, for a clean parse, its
        value.
    """
    if settings is None:
        settings = load_settings()
    program, errors = parse(source, file, settings)
    if errors:
        logger.debug("%s: %d parser error(s), skipping evaluation", file, len(errors))
        return RunResult(program, errors)

    if env is None:
        env = Environment()
    evaluator = Evaluator(file, max_call_depth=settings.max_call_depth,
                          max_depth=settings.max_eval_depth)
    value = evaluator.evaluate(program, env)
    return RunResult(program, [], value)
