"""
prattlang Language Server entry point.

This server provides basic language features for prattlang source files
using `pygls`. It reuses the prattlang lexer and parser to publish parser
diagnostics on every edit and to build a simple symbol index of top-level
``let`` bindings supporting definition lookup, hover information, and
document symbols.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from pygls.server import LanguageServer
from lsprotocol.types import (
    TEXT_DOCUMENT_DEFINITION,
    TEXT_DOCUMENT_HOVER,
    TEXT_DOCUMENT_DOCUMENT_SYMBOL,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_DID_CHANGE,
    DefinitionParams,
    Diagnostic,
    DiagnosticSeverity,
    DidOpenTextDocumentParams,
    DidChangeTextDocumentParams,
    DocumentSymbol,
    DocumentSymbolParams,
    Hover,
    HoverParams,
    Location,
    MarkupContent,
    MarkupKind,
    Position,
    Range,
    SymbolKind,
)

from prattlang.lexer import Lexer
from prattlang.nodes import FunctionLiteral, LetStatement, Program
from prattlang.parser import Parser

logger = logging.getLogger(__name__)


@dataclass
class PrattSymbol:
    """Represents a top-level binding in a prattlang file."""

    name: str
    kind: SymbolKind
    uri: str
    line: int
    detail: str


def parse_document(uri: str, text: str) -> tuple[Program, Parser]:
    """Parse ``text`` and return the program with the parser that built it."""
    parser = Parser(Lexer(text), uri)
    return parser.parse_program(), parser


def collect_diagnostics(parser: Parser) -> List[Diagnostic]:
    """Convert parser diagnostics into LSP diagnostics (0-based lines)."""
    result: List[Diagnostic] = []
    for diag in parser.diagnostics:
        line = max(diag.line - 1, 0)
        rng = Range(Position(line, 0), Position(line + 1, 0))
        result.append(
            Diagnostic(
                range=rng,
                message=diag.message,
                severity=DiagnosticSeverity.Error,
                source="prattlang",
            )
        )
    return result


def collect_symbols(uri: str, program: Program) -> List[PrattSymbol]:
    """Extract top-level ``let`` bindings from ``program``."""
    symbols: List[PrattSymbol] = []
    for node in program.statements:
        if not isinstance(node, LetStatement):
            continue
        if isinstance(node.value, FunctionLiteral):
            kind = SymbolKind.Function
            params = ", ".join(p.name for p in node.value.parameters)
            detail = f"let {node.name.name} = fn({params})"
        else:
            kind = SymbolKind.Variable
            detail = str(node)
        symbols.append(PrattSymbol(node.name.name, kind, uri, max(node.line - 1, 0), detail))
    return symbols


class PrattLanguageServer(LanguageServer):
    """Language server for prattlang source files."""

    def __init__(self) -> None:
        super().__init__("pratt-ls", "v0.1")
        self.symbols_by_uri: Dict[str, List[PrattSymbol]] = {}
        self.global_symbols: Dict[str, List[PrattSymbol]] = {}

    def update_document(self, uri: str, text: str) -> None:
        """Parse ``text``, publish its diagnostics and re-index ``uri``."""
        program, parser = parse_document(uri, text)
        logger.debug("%s: %d diagnostic(s)", uri, len(parser.diagnostics))
        self.publish_diagnostics(uri, collect_diagnostics(parser))
        self.symbols_by_uri[uri] = collect_symbols(uri, program)
        self._rebuild_global_index()

    def _rebuild_global_index(self) -> None:
        self.global_symbols.clear()
        for syms in self.symbols_by_uri.values():
            for sym in syms:
                self.global_symbols.setdefault(sym.name, []).append(sym)

    def lookup(self, uri: str, position: Position) -> Optional[PrattSymbol]:
        """Return the symbol named by the word at ``position``, if indexed."""
        doc = self.workspace.get_text_document(uri)
        word = doc.word_at_position(position)
        if not word:
            return None
        matches = self.global_symbols.get(word)
        if not matches:
            return None
        return matches[0]


lang_server = PrattLanguageServer()


@lang_server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: PrattLanguageServer, params: DidOpenTextDocumentParams) -> None:
    """Check and index a document when it is opened."""
    ls.update_document(params.text_document.uri, params.text_document.text)


@lang_server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: PrattLanguageServer, params: DidChangeTextDocumentParams) -> None:
    """Re-check and re-index a document when it changes."""
    if params.content_changes:
        ls.update_document(params.text_document.uri, params.content_changes[0].text)


@lang_server.feature(TEXT_DOCUMENT_DEFINITION)
def definition(ls: PrattLanguageServer, params: DefinitionParams):
    """Return the definition location for the symbol under the cursor."""
    sym = ls.lookup(params.text_document.uri, params.position)
    if sym is None:
        return None
    rng = Range(Position(sym.line, 0), Position(sym.line, len(sym.name)))
    return Location(uri=sym.uri, range=rng)


@lang_server.feature(TEXT_DOCUMENT_HOVER)
def hover(ls: PrattLanguageServer, params: HoverParams) -> Optional[Hover]:
    """Return hover information for the symbol under the cursor."""
    sym = ls.lookup(params.text_document.uri, params.position)
    if sym is None:
        return None
    contents = MarkupContent(kind=MarkupKind.PlainText, value=sym.detail)
    return Hover(contents=contents)


@lang_server.feature(TEXT_DOCUMENT_DOCUMENT_SYMBOL)
def document_symbols(ls: PrattLanguageServer, params: DocumentSymbolParams):
    """Return top-level symbols for the given document."""
    symbols = ls.symbols_by_uri.get(params.text_document.uri, [])
    result: List[DocumentSymbol] = []
    for sym in symbols:
        rng = Range(Position(sym.line, 0), Position(sym.line, len(sym.name)))
        result.append(
            DocumentSymbol(
                name=sym.name,
                kind=sym.kind,
                range=rng,
                selection_range=rng,
                detail=sym.detail,
            )
        )
    return result


def main() -> None:
    """Start the language server."""
    logging.basicConfig(level=logging.INFO)
    lang_server.start_io()


if __name__ == "__main__":
    main()
