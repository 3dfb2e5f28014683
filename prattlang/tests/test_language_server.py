"""
Tests for the prattlang language server helpers.
"""
from lsprotocol.types import DiagnosticSeverity, SymbolKind

from vscode.server.main import collect_diagnostics, collect_symbols, parse_document

URI = "file:///workspace/example.pratt"


def test_clean_document_has_no_diagnostics():
    _, parser = parse_document(URI, "let a = 1;\nlet b = a + 1;\n")
    assert collect_diagnostics(parser) == []


def test_diagnostics_use_zero_based_lines():
    _, parser = parse_document(URI, "let x 5;\nlet y = ;\n")
    diagnostics = collect_diagnostics(parser)
    assert [d.message for d in diagnostics] == [
        "expected next token to be ASSIGN, got INT instead",
        "no prefix parse function for SEMICOLON found",
    ]
    assert [d.range.start.line for d in diagnostics] == [0, 1]
    assert all(d.severity == DiagnosticSeverity.Error for d in diagnostics)
    assert all(d.source == "prattlang" for d in diagnostics)


def test_symbols_index_top_level_bindings():
    program, _ = parse_document(
        URI,
        "let limit = 10;\n"
        "\n"
        "let add = fn(a, b) { a + b };\n"
        "add(limit, 1);\n",
    )
    symbols = collect_symbols(URI, program)
    assert [s.name for s in symbols] == ["limit", "add"]
    assert [s.kind for s in symbols] == [SymbolKind.Variable, SymbolKind.Function]
    assert [s.line for s in symbols] == [0, 2]
    assert symbols[0].detail == "let limit = 10;"
    assert symbols[1].detail == "let add = fn(a, b)"
    assert all(s.uri == URI for s in symbols)


def test_symbols_skip_nested_bindings():
    program, _ = parse_document(URI, "let f = fn() { let inner = 1; inner };")
    assert [s.name for s in collect_symbols(URI, program)] == ["f"]
