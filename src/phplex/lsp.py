"""Minimal LSP server for phplex — lexer diagnostics only."""

from __future__ import annotations

import logging

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    Position,
    PublishDiagnosticsParams,
    Range,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer

from phplex import __version__
from phplex.errors import LexError
from phplex.lexer import Lexer

log = logging.getLogger(__name__)

server = LanguageServer(
    "phplex-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full
)


def _to_diagnostic(exc: LexError) -> Diagnostic:
    # phplex positions are 1-based, LSP positions 0-based
    return Diagnostic(
        range=Range(
            start=Position(line=exc.span.start.line - 1, character=exc.span.start.column - 1),
            end=Position(line=exc.span.end.line - 1, character=exc.span.end.column - 1),
        ),
        message=exc.message,
        severity=DiagnosticSeverity.Error,
        source="phplex",
    )


def _validate(ls: LanguageServer, uri: str) -> None:
    """Lex the document and publish one diagnostic per unrecognized character."""
    doc = ls.workspace.get_text_document(uri)
    filename = uri.rsplit("/", 1)[-1] if "/" in uri else uri

    _, errors = Lexer(doc.source, filename).tokenize_with_errors()
    log.debug("%s: %d lex errors", filename, len(errors))

    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=[_to_diagnostic(e) for e in errors])
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


def main() -> None:
    server.start_io()
