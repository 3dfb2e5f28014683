"""
Utility functions shared across prattlang tests.
"""
from prattlang.environment import Environment
from prattlang.evaluator import Evaluator
from prattlang.lexer import Lexer
from prattlang.parser import Parser


def parse_source(source: str):
    """
    Parse source code and return the program and the parser diagnostics.
    """
    parser = Parser(Lexer(source), "<test>")
    program = parser.parse_program()
    return program, parser.errors


def parse_clean(source: str):
    """
    Parse source code that is expected to be valid and return the program.
    """
    program, errors = parse_source(source)
    assert errors == [], f"unexpected parser errors: {errors}"
    return program


def eval_source(source: str, env: Environment | None = None):
    """
    Parse and evaluate source code, returning the resulting object.
    """
    program = parse_clean(source)
    return Evaluator("<test>").evaluate(program, env if env is not None else Environment())
