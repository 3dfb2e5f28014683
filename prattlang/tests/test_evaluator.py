"""
Tests for the prattlang tree-walk evaluator.
"""
import pytest

from prattlang.environment import Environment
from prattlang.evaluator import Evaluator, evaluate
from prattlang.exceptions import UnknownNodeException
from prattlang.nodes import (
    BlockStatement,
    ExpressionStatement,
    IntegerLiteral,
    ReturnStatement,
)
from prattlang.objects import (
    NULL,
    BooleanObject,
    ErrorObject,
    FunctionObject,
    IntegerObject,
    ReturnValueObject,
)
from prattlang.tests.utils import eval_source, parse_clean


@pytest.mark.parametrize("source, expected", [
    ("5", 5),
    ("10", 10),
    ("-5;", -5),
    ("-10", -10),
    ("5 + 5 + 5 + 5 - 10", 10),
    ("2 * 2 * 2 * 2 * 2", 32),
    ("-50 + 100 + -50", 0),
    ("20 + 2 * -10", 0),
    ("50 / 2 * 2 + 10", 60),
    ("3 * (3 * 3) + 10", 37),
    ("(5 + 10 * 2 + 15 / 3) * 2 + -10", 50),
    ("7 / 2", 3),
    ("-7 / 2", -3),
    ("7 / -2", -3),
])
def test_integer_expressions(source, expected):
    assert eval_source(source) == IntegerObject(expected)


@pytest.mark.parametrize("source, expected", [
    ("true", True),
    ("false", False),
    ("5 < 10;", True),
    ("1 < 2", True),
    ("1 > 2", False),
    ("1 <= 1", True),
    ("2 >= 3", False),
    ("1 == 1;", True),
    ("1 != 2;", True),
    ("1 == 2", False),
    ("true == true", True),
    ("true != false", True),
    ("false == true", False),
    ("(1 < 2) == true", True),
    ("(1 > 2) == true", False),
])
def test_boolean_expressions(source, expected):
    assert eval_source(source) == BooleanObject(expected)


@pytest.mark.parametrize("source, expected", [
    ("!true;", False),
    ("!false", True),
    ("!5", False),
    ("!0", False),
    ("!!true", True),
    ("!!5", True),
    ("!if (false) { 1 }", True),
])
def test_bang_operator(source, expected):
    assert eval_source(source) == BooleanObject(expected)


@pytest.mark.parametrize("source, expected", [
    ("if (true) { 10 }", IntegerObject(10)),
    ("if (false) { 10 }", NULL),
    ("if (1) { 10 }", IntegerObject(10)),
    ("if (0) { 10 } else { 20 }", IntegerObject(10)),
    ("if (1 < 2) { 10 }", IntegerObject(10)),
    ("if (1 > 2) { 10 }", NULL),
    ("if (true) { 10 } else { 20 }", IntegerObject(10)),
    ("if (1 > 2) { 10 } else { 20 }", IntegerObject(20)),
    ("if (true) { }", NULL),
])
def test_if_expressions(source, expected):
    assert eval_source(source) == expected


@pytest.mark.parametrize("source, expected", [
    ("return 10;", 10),
    ("return 10; 9;", 10),
    ("return 2 * 5; 9;", 10),
    ("9; return 2 * 5; 9;", 10),
    ("if (10 > 1) { if (10 > 1) { return 10; } return 1; }", 10),
    ("if (true) { if (true) { if (true) { return 10; } 8; } 9; } 7;", 10),
])
def test_return_statements(source, expected):
    assert eval_source(source) == IntegerObject(expected)


def test_block_stops_at_return_and_keeps_it_wrapped():
    block = BlockStatement((
        ReturnStatement(IntegerLiteral(10)),
        ExpressionStatement(IntegerLiteral(9)),
    ))
    assert evaluate(block) == ReturnValueObject(IntegerObject(10))


def test_return_propagates_through_nested_blocks_unchanged():
    inner = BlockStatement((
        ReturnStatement(IntegerLiteral(10)),
        ExpressionStatement(IntegerLiteral(8)),
    ))
    outer = BlockStatement((
        inner,
        ExpressionStatement(IntegerLiteral(9)),
    ))
    assert evaluate(outer) == ReturnValueObject(IntegerObject(10))


def test_program_value_is_last_statement():
    assert eval_source("1; 2; 3") == IntegerObject(3)
    assert eval_source("") == NULL


@pytest.mark.parametrize("source, message", [
    ("5 + true;", "type mismatch: INTEGER + BOOLEAN"),
    ("5 + true; 5;", "type mismatch: INTEGER + BOOLEAN"),
    ("1 == true", "type mismatch: INTEGER == BOOLEAN"),
    ("-true", "unknown operator: -BOOLEAN"),
    ("true + false;", "unknown operator: BOOLEAN + BOOLEAN"),
    ("true < false", "unknown operator: BOOLEAN < BOOLEAN"),
    ("5; true + false; 5", "unknown operator: BOOLEAN + BOOLEAN"),
    ("if (10 > 1) { true + false; }", "unknown operator: BOOLEAN + BOOLEAN"),
    ("if (10 > 1) { if (10 > 1) { return true + false; } return 1; }",
     "unknown operator: BOOLEAN + BOOLEAN"),
    ("if (1 > 2) { 1 } == if (1 > 2) { 2 }", "unknown operator: NULL == NULL"),
    ("foobar", "unbound identifier: foobar"),
    ("-foobar + 1", "unbound identifier: foobar"),
    ("if (x) { 1 }", "unbound identifier: x"),
    ("1 / 0", "division by zero: 1 / 0"),
    ("5(1)", "not a function: INTEGER"),
    ("let f = fn(x) { x }; f(1, 2)", "wrong number of arguments: want=1, got=2"),
    ("let f = fn(x, y) { x }; f(1)", "wrong number of arguments: want=2, got=1"),
    ("let f = fn(x) { x }; f(y)", "unbound identifier: y"),
    ("let a = -true; 5", "unknown operator: -BOOLEAN"),
])
def test_error_handling(source, message):
    assert eval_source(source) == ErrorObject(message)


def test_error_stops_evaluation_before_later_bindings():
    env = Environment()
    eval_source("let a = 1; a + true; let b = 2;", env)
    assert env.get("a") == IntegerObject(1)
    assert env.get("b") is None


@pytest.mark.parametrize("source, expected", [
    ("let a = 5; a;", 5),
    ("let a = 5 * 5; a;", 25),
    ("let a = 5; let b = a; b;", 5),
    ("let a = 5; let b = a; let c = a + b + 5; c;", 15),
    ("let a = 1; let a = a + 1; a", 2),
])
def test_let_statements(source, expected):
    assert eval_source(source) == IntegerObject(expected)


def test_let_yields_null_and_binds():
    env = Environment()
    assert eval_source("let a = 5;", env) == NULL
    assert env.get("a") == IntegerObject(5)


def test_function_object():
    result = eval_source("fn(x) { x + 2; };")
    assert isinstance(result, FunctionObject)
    assert [p.name for p in result.parameters] == ["x"]
    assert str(result.body) == "{ (x + 2); }"
    assert result.inspect() == "fn(x) { (x + 2); }"


@pytest.mark.parametrize("source, expected", [
    ("let identity = fn(x) { x; }; identity(5);", 5),
    ("let identity = fn(x) { return x; }; identity(5);", 5),
    ("let double = fn(x) { x * 2; }; double(5);", 10),
    ("let add = fn(x, y) { x + y; }; add(5, 5);", 10),
    ("let add = fn(x, y) { x + y; }; add(5 + 5, add(5, 5));", 20),
    ("fn(x) { x; }(5)", 5),
    ("let f = fn() { return 1; 2; }; f() + 10", 11),
    ("let f = fn() { return 1; }; f(); 2;", 2),
])
def test_function_application(source, expected):
    assert eval_source(source) == IntegerObject(expected)


def test_empty_function_body_yields_null():
    assert eval_source("fn() { }()") == NULL


def test_closures():
    source = (
        "let newAdder = fn(x) { fn(y) { x + y }; };\n"
        "let addTwo = newAdder(2);\n"
        "addTwo(2);\n"
    )
    assert eval_source(source) == IntegerObject(4)


def test_recursion():
    source = (
        "let fact = fn(n) { if (n < 2) { 1 } else { n * fact(n - 1) } };\n"
        "fact(5);\n"
    )
    assert eval_source(source) == IntegerObject(120)


def test_higher_order_functions():
    source = (
        "let twice = fn(f, x) { f(f(x)) };\n"
        "twice(fn(n) { n * 3 }, 2);\n"
    )
    assert eval_source(source) == IntegerObject(18)


def test_function_scope_does_not_leak():
    env = Environment()
    result = eval_source("let x = 1; let f = fn() { let x = 2; x }; f(); x", env)
    assert result == IntegerObject(1)
    assert env.get("x") == IntegerObject(1)


def test_call_depth_limit():
    program = parse_clean("let f = fn(n) { f(n + 1) }; f(0);")
    result = Evaluator("<test>", max_call_depth=10).evaluate(program, Environment())
    assert result == ErrorObject("maximum call depth of 10 exceeded")


def test_default_call_depth_limit_guards_runaway_recursion():
    result = eval_source("let f = fn(n) { f(n + 1) }; f(0);")
    assert isinstance(result, ErrorObject)
    assert result.message.startswith("maximum call depth")


def test_call_depth_is_restored_after_calls():
    evaluator = Evaluator("<test>", max_call_depth=3)
    env = Environment()
    program = parse_clean("let f = fn(n) { if (n < 1) { 0 } else { f(n - 1) } }; f(2); f(2);")
    assert evaluator.evaluate(program, env) == IntegerObject(0)
    assert evaluator.call_depth == 0


def test_deep_recursion_through_nested_operators_yields_error():
    source = (
        "let f = fn(n) { if (n < 1) { 0 } else { " + "-" * 10 + "f(n - 1) } };\n"
        "f(63);\n"
    )
    result = eval_source(source)
    assert result == ErrorObject("maximum evaluation depth of 300 exceeded")


def test_recursion_within_the_evaluation_limit():
    source = (
        "let fact = fn(n) { if (n < 2) { 1 } else { n * fact(n - 1) } };\n"
        "fact(20);\n"
    )
    assert eval_source(source) == IntegerObject(2432902008176640000)


def test_stack_exhaustion_yields_error():
    evaluator = Evaluator("<test>", max_call_depth=10_000, max_depth=100_000)
    program = parse_clean("let f = fn(n) { f(n + 1) }; f(0);")
    result = evaluator.evaluate(program, Environment())
    assert result == ErrorObject("maximum recursion depth exceeded")
    assert evaluator.depth == 0
    assert evaluator.call_depth == 0


def test_evaluation_does_not_mutate_the_tree():
    program = parse_clean("let a = 1; if (a < 2) { return a + 1; }")
    before = str(program)
    eval_source(str(program))
    Evaluator().evaluate(program, Environment())
    assert str(program) == before


def test_unknown_node_raises():
    with pytest.raises(UnknownNodeException):
        Evaluator("<test>").evaluate("not a node", Environment())
