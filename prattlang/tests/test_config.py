"""
Tests for reading prattlang settings from environment variables.
"""
import pytest

from prattlang.config import (
    DEFAULT_MAX_CALL_DEPTH,
    DEFAULT_MAX_EVAL_DEPTH,
    DEFAULT_MAX_NESTING,
    Settings,
    load_settings,
)


def test_defaults_when_unset():
    settings = load_settings({})
    assert settings == Settings()
    assert settings.debug is False
    assert settings.max_nesting == DEFAULT_MAX_NESTING
    assert settings.max_call_depth == DEFAULT_MAX_CALL_DEPTH
    assert settings.max_eval_depth == DEFAULT_MAX_EVAL_DEPTH


def test_reads_all_variables():
    settings = load_settings({
        "PRATTDEBUG": "1",
        "PRATT_MAX_NESTING": "32",
        "PRATT_MAX_CALL_DEPTH": "16",
        "PRATT_MAX_EVAL_DEPTH": "200",
    })
    assert settings == Settings(
        debug=True, max_nesting=32, max_call_depth=16, max_eval_depth=200
    )


def test_empty_values_fall_back_to_defaults():
    settings = load_settings({"PRATTDEBUG": "", "PRATT_MAX_NESTING": "  "})
    assert settings.debug is False
    assert settings.max_nesting == DEFAULT_MAX_NESTING


@pytest.mark.parametrize("value, message", [
    ("abc", "PRATT_MAX_NESTING must be an integer, got 'abc'"),
    ("0", "PRATT_MAX_NESTING must be positive, got 0"),
    ("-3", "PRATT_MAX_NESTING must be positive, got -3"),
])
def test_invalid_limit_raises(value, message):
    with pytest.raises(ValueError) as exc:
        load_settings({"PRATT_MAX_NESTING": value})
    assert str(exc.value) == message


def test_reads_process_environment_by_default(monkeypatch):
    monkeypatch.setenv("PRATT_MAX_CALL_DEPTH", "7")
    monkeypatch.delenv("PRATT_MAX_NESTING", raising=False)
    assert load_settings().max_call_depth == 7
