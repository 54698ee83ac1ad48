"""Tests for the LSP server — diagnostic generation."""

from __future__ import annotations

import pytest
from lsprotocol.types import (
    DiagnosticSeverity,
    PublishDiagnosticsParams,
    TextDocumentItem,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer
from pygls.workspace import Workspace

from phplex.lsp import _validate


@pytest.fixture
def lsp_env():
    """Create a LanguageServer with an initialized workspace and captured diagnostics."""
    ls = LanguageServer("test", "v0", text_document_sync_kind=TextDocumentSyncKind.Full)
    ws = Workspace(None)
    ls.protocol._workspace = ws

    published: list[PublishDiagnosticsParams] = []
    ls.text_document_publish_diagnostics = lambda params: published.append(params)

    def put(source: str, uri: str = "file:///test.php") -> None:
        ws.put_text_document(TextDocumentItem(uri=uri, language_id="php", version=0, text=source))

    return ls, published, put


# ---------------------------------------------------------------------------
# Lex errors → Error severity
# ---------------------------------------------------------------------------


class TestLexErrors:
    def test_unexpected_character(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put("$a = @b;")
        _validate(ls, "file:///test.php")

        assert len(published) == 1
        diags = published[0].diagnostics
        assert len(diags) == 1
        d = diags[0]
        assert d.severity == DiagnosticSeverity.Error
        assert "@" in d.message
        assert d.source == "phplex"
        # @ is at column 6 (1-based) → character 5 (0-based)
        assert d.range.start.line == 0
        assert d.range.start.character == 5
        assert d.range.end.character == 6

    def test_every_error_reported(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put("!x # y")
        _validate(ls, "file:///test.php")

        diags = published[0].diagnostics
        assert [d.range.start.character for d in diags] == [0, 3]


# ---------------------------------------------------------------------------
# Clean document → empty diagnostics
# ---------------------------------------------------------------------------


class TestCleanDocument:
    def test_valid_document(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put("<?php\nfunction f() { return 1; }\n")
        _validate(ls, "file:///test.php")

        assert len(published) == 1
        assert published[0].diagnostics == []


# ---------------------------------------------------------------------------
# Position conversion (1-based → 0-based)
# ---------------------------------------------------------------------------


class TestPositionConversion:
    def test_error_on_second_line(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put("$ok = 1;\n@oops")
        _validate(ls, "file:///test.php")

        diags = published[0].diagnostics
        assert len(diags) == 1
        assert diags[0].range.start.line == 1
        assert diags[0].range.start.character == 0
