"""
Tests for lexical environments.
"""
from prattlang.environment import Environment
from prattlang.objects import IntegerObject


def test_lookup_walks_outer_scopes():
    outer = Environment()
    outer.set("a", IntegerObject(1))
    inner = outer.enclosed()
    inner.set("b", IntegerObject(2))

    assert inner.get("a") == IntegerObject(1)
    assert inner.get("b") == IntegerObject(2)
    assert outer.get("b") is None
    assert "a" in inner
    assert "b" not in outer


def test_inner_bindings_shadow_outer_ones():
    outer = Environment()
    outer.set("x", IntegerObject(1))
    inner = outer.enclosed()
    inner.set("x", IntegerObject(2))

    assert inner.get("x") == IntegerObject(2)
    assert outer.get("x") == IntegerObject(1)


def test_unbound_is_none():
    assert Environment().get("missing") is None
