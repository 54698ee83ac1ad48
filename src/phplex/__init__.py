"""PHP source lexer producing a lossless, span-annotated token stream."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from phplex.tokens import Token

__version__ = "0.1.0"


def tokenize(source: str, filename: str = "input.php") -> list[Token]:
    """Tokenize PHP source with the default keyword table."""
    from phplex.lexer import tokenize as _tokenize

    return _tokenize(source, filename)
