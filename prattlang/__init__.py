"""prattlang.

A small expression-oriented language: a regex lexer, a precedence-climbing
(Pratt) parser and a tree-walking evaluator.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
