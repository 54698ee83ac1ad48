"""Human-readable and JSON token dumps."""

from __future__ import annotations

import json
import sys
from typing import Any, TextIO

from phplex.tokens import Token, TokenType

TRIVIA = frozenset({TokenType.WHITESPACE, TokenType.COMMENT})


def dump_tokens(tokens: list[Token], *, file: TextIO = sys.stderr) -> None:
    """Print one line per token to *file*: position, type, kind and value."""
    for tok in tokens:
        file.write(_format_token(tok))
        file.write("\n")


def _format_token(tok: Token) -> str:
    start = tok.span.start
    where = f"{start.line}:{start.column}"
    label = tok.type.name
    if tok.kind is not None:
        label += f"({tok.kind.name})"
    return f"{where:<8} {label:<24} {tok.value!r}"


def token_to_dict(tok: Token) -> dict[str, Any]:
    return {
        "type": tok.type.name,
        "kind": tok.kind.name if tok.kind is not None else None,
        "value": tok.value,
        "raw": tok.raw,
        "start": [tok.span.start.line, tok.span.start.column, tok.span.start.offset],
        "end": [tok.span.end.line, tok.span.end.column, tok.span.end.offset],
    }


def dump_tokens_json(tokens: list[Token], *, file: TextIO = sys.stdout) -> None:
    json.dump([token_to_dict(t) for t in tokens], file, indent=2)
    file.write("\n")


def strip_trivia(tokens: list[Token]) -> list[Token]:
    """Drop whitespace and comment tokens."""
    return [t for t in tokens if t.type not in TRIVIA]
