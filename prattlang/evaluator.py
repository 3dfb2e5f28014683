"""Evaluator.

This is a tree-walk evaluator for the AST nodes produced by the parser. It
supports integer and boolean arithmetic and comparison, ``let`` bindings,
conditionals, closures, calls and early ``return``.

1. Execution Model
The evaluator maps a node to a runtime object in a single recursive walk.
`Evaluator.evaluate()` is one exhaustive ``match`` over the closed set of
node classes; each arm evaluates its children first and then combines them.
The tree is never modified.

2. Environment
Bindings live in `prattlang.environment.Environment` objects. ``let`` binds
into the current scope. A function literal captures the scope it is
evaluated in, and each call evaluates the body in a fresh child of that
scope with the parameters bound to the arguments.

3. Control Flow
``return`` wraps its value in a `ReturnValueObject`. Blocks stop at the first
statement that produces one and hand it upward unchanged, so a ``return``
nested in any number of blocks leaves all of them. The wrapper is removed
at the call boundary and at the top of the program.

4. Error Handling
Type mismatches, unknown operators, unbound identifiers, bad calls and
division by zero produce an `ErrorObject` rather than raising. Every site
that uses an operand checks for one first and passes it upward, exactly like
a return value, so the first failure is what the program evaluates to.
Call depth and the nesting of nodes being evaluated are both bounded, so
runaway recursion yields an error object instead of exhausting the Python
stack. A `RecursionError` that still escapes is turned into an error object
at the outermost `evaluate()`.


File: evaluator.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging
from typing import Optional

from prattlang.config import DEFAULT_MAX_CALL_DEPTH, DEFAULT_MAX_EVAL_DEPTH
from prattlang.environment import Environment
from prattlang.exceptions import UnknownNodeException
from prattlang.nodes import (
    BlockStatement,
    BooleanLiteral,
    CallExpression,
    ExpressionStatement,
    FunctionLiteral,
    Identifier,
    IfExpression,
    InfixExpression,
    IntegerLiteral,
    LetStatement,
    Node,
    PrefixExpression,
    Program,
    ReturnStatement,
)
from prattlang.objects import (
    NULL,
    BooleanObject,
    ErrorObject,
    FunctionObject,
    IntegerObject,
    Object,
    ReturnValueObject,
    is_error,
)

logger = logging.getLogger(__name__)


def _is_signal(obj: Object) -> bool:
    """
    Return ``True`` for objects that must stop evaluation and travel
    upward: errors and return values.
    """
    return isinstance(obj, (ErrorObject, ReturnValueObject))


class Evaluator:
    """Tree-walk evaluator for prattlang."""

    def __init__(self, file: str = "<input>", max_call_depth: Optional[int] = None,
                 max_depth: Optional[int] = None):
        """
        Initialize the evaluator.

        Parameters:
            file (str): The name of the source, used in log messages.
            max_call_depth (int | None): Maximum nesting of function calls.
            max_depth (int | None): Maximum nesting of nodes being evaluated.
        """
        self.file = file
        self.max_call_depth = (
            max_call_depth if max_call_depth is not None else DEFAULT_MAX_CALL_DEPTH
        )
        self.max_depth = max_depth if max_depth is not None else DEFAULT_MAX_EVAL_DEPTH
        self.call_depth = 0
        self.depth = 0

    def error(self, message: str) -> ErrorObject:
        """
        Build an error object for ``message``.
        """
        logger.debug("%s: %s", self.file, message)
        return ErrorObject(message)

    def evaluate(self, node: Node, env: Environment) -> Object:
        """
        Recursively evaluate ``node`` in ``env`` and return its value.

        Parameters:
            node (Node): Any AST node.
            env (Environment): The scope to resolve identifiers in.

        Returns:
            Object: The resulting runtime object.

        Raises:
            UnknownNodeException: If ``node`` is not an AST node.
        """
        if self.depth >= self.max_depth:
            return self.error(f"maximum evaluation depth of {self.max_depth} exceeded")

        self.depth += 1
        try:
            match node:
                # Statements
                case Program():
                    return self.eval_program(node, env)
                case BlockStatement():
                    return self.eval_block(node, env)
                case ExpressionStatement(expression=expression):
                    return self.evaluate(expression, env)
                case ReturnStatement(value=value_node):
                    value = self.evaluate(value_node, env)
                    if _is_signal(value):
                        return value
                    return ReturnValueObject(value)
                case LetStatement(name=name, value=value_node):
                    value = self.evaluate(value_node, env)
                    if _is_signal(value):
                        return value
                    env.set(name.name, value)
                    return NULL

                # Literals
                case IntegerLiteral(value=value):
                    return IntegerObject(value)
                case BooleanLiteral(value=value):
                    return BooleanObject(value)
                case FunctionLiteral(parameters=parameters, body=body):
                    return FunctionObject(parameters, body, env)

                # Variables
                case Identifier(name=name):
                    value = env.get(name)
                    if value is None:
                        return self.error(f"unbound identifier: {name}")
                    return value

                # Operators
                case PrefixExpression(operator=operator, operand=operand_node):
                    operand = self.evaluate(operand_node, env)
                    if _is_signal(operand):
                        return operand
                    return self.eval_prefix(operator, operand)
                case InfixExpression(left=left_node, operator=operator, right=right_node):
                    left = self.evaluate(left_node, env)
                    if _is_signal(left):
                        return left
                    right = self.evaluate(right_node, env)
                    if _is_signal(right):
                        return right
                    return self.eval_infix(operator, left, right)

                # Control flow
                case IfExpression(condition=condition_node, consequence=consequence,
                                  alternative=alternative):
                    condition = self.evaluate(condition_node, env)
                    if _is_signal(condition):
                        return condition
                    if condition.is_true():
                        return self.evaluate(consequence, env)
                    if alternative is not None:
                        return self.evaluate(alternative, env)
                    return NULL

                # Calls
                case CallExpression(function=function_node, arguments=argument_nodes):
                    function = self.evaluate(function_node, env)
                    if _is_signal(function):
                        return function
                    args = []
                    for arg_node in argument_nodes:
                        arg = self.evaluate(arg_node, env)
                        if _is_signal(arg):
                            return arg
                        args.append(arg)
                    return self.apply_function(function, args)

            raise UnknownNodeException(node, getattr(node, "line", None), self.file)
        except RecursionError:
            if self.depth > 1:
                raise
            return self.error("maximum recursion depth exceeded")
        finally:
            self.depth -= 1

    def eval_program(self, program: Program, env: Environment) -> Object:
        """
        Evaluate top-level statements in order. A ``return`` ends the program
        with its unwrapped value; an error ends it with the error.
        """
        result: Object = NULL
        for stmt in program.statements:
            result = self.evaluate(stmt, env)
            if isinstance(result, ReturnValueObject):
                return result.value
            if is_error(result):
                return result
        return result

    def eval_block(self, block: BlockStatement, env: Environment) -> Object:
        """
        Evaluate a block's statements in order. Return values and errors are
        passed up still wrapped so every enclosing block stops too.
        """
        result: Object = NULL
        for stmt in block.statements:
            result = self.evaluate(stmt, env)
            if _is_signal(result):
                return result
        return result

    def eval_prefix(self, operator: str, operand: Object) -> Object:
        """
        Apply a prefix operator to an evaluated operand.
        """
        match operator:
            case "!":
                return BooleanObject(not operand.is_true())
            case "-":
                if not isinstance(operand, IntegerObject):
                    return self.error(f"unknown operator: -{operand.type_name}")
                return IntegerObject(-operand.value)
        return self.error(f"unknown operator: {operator}{operand.type_name}")

    def eval_infix(self, operator: str, left: Object, right: Object) -> Object:
        """
        Apply a binary operator to two evaluated operands.
        """
        if isinstance(left, IntegerObject) and isinstance(right, IntegerObject):
            return self.eval_integer_infix(operator, left, right)
        if left.type_name != right.type_name:
            return self.error(
                f"type mismatch: {left.type_name} {operator} {right.type_name}"
            )
        if isinstance(left, BooleanObject) and isinstance(right, BooleanObject):
            match operator:
                case "==":
                    return BooleanObject(left.value == right.value)
                case "!=":
                    return BooleanObject(left.value != right.value)
        return self.error(
            f"unknown operator: {left.type_name} {operator} {right.type_name}"
        )

    def eval_integer_infix(self, operator: str, left: IntegerObject,
                           right: IntegerObject) -> Object:
        """
        Apply an arithmetic or comparison operator to two integers.
        """
        lhs, rhs = left.value, right.value
        match operator:
            # Arithmetic
            case "+":
                return IntegerObject(lhs + rhs)
            case "-":
                return IntegerObject(lhs - rhs)
            case "*":
                return IntegerObject(lhs * rhs)
            case "/":
                if rhs == 0:
                    return self.error(f"division by zero: {lhs} / {rhs}")
                # Truncate toward zero.
                quotient = abs(lhs) // abs(rhs)
                if (lhs < 0) != (rhs < 0):
                    quotient = -quotient
                return IntegerObject(quotient)
            # Comparison
            case "<":
                return BooleanObject(lhs < rhs)
            case ">":
                return BooleanObject(lhs > rhs)
            case "<=":
                return BooleanObject(lhs <= rhs)
            case ">=":
                return BooleanObject(lhs >= rhs)
            case "==":
                return BooleanObject(lhs == rhs)
            case "!=":
                return BooleanObject(lhs != rhs)
        return self.error(f"unknown operator: INTEGER {operator} INTEGER")

    def apply_function(self, function: Object, args: list[Object]) -> Object:
        """
        Call ``function`` with already evaluated arguments.

        The body runs in a fresh scope enclosed by the closure's environment.
        A return value produced by the body is unwrapped here so it does not
        end the caller's block as well.
        """
        if not isinstance(function, FunctionObject):
            return self.error(f"not a function: {function.type_name}")
        if len(args) != len(function.parameters):
            return self.error(
                f"wrong number of arguments: want={len(function.parameters)}, got={len(args)}"
            )
        if self.call_depth >= self.max_call_depth:
            return self.error(f"maximum call depth of {self.max_call_depth} exceeded")

        call_env = function.env.enclosed()
        for param, arg in zip(function.parameters, args):
            call_env.set(param.name, arg)

        self.call_depth += 1
        try:
            result = self.evaluate(function.body, call_env)
        finally:
            self.call_depth -= 1

        if isinstance(result, ReturnValueObject):
            return result.value
        return result


def evaluate(node: Node, env: Optional[Environment] = None) -> Object:
    """
    Evaluate ``node`` with a default :class:`Evaluator`.

    Parameters:
        node (Node): Any AST node.
        env (Environment | None): Scope to evaluate in; a fresh one if omitted.

    Returns:
        Object: The resulting runtime object.
    """
    if env is None:
        env = Environment()
    return Evaluator().evaluate(node, env)
