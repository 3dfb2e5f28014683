"""Errors.

Language-level failures are not exceptions in prattlang: the parser collects
diagnostics and the evaluator returns error objects. The exceptions here
signal misuse of the library itself.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


class UnknownNodeException(Exception):
    """
    Error for values handed to the evaluator that are not AST nodes.
    """
    def __init__(self, node, line=None, file=None):
        self.node = node
        self.line = line
        message = f"Cannot evaluate {type(node).__name__}: not an AST node"
        if line is not None:
            message += f" on line {line}"
        if file is not None:
            message += f" in {file}"
        super().__init__(message)
