"""phplex lexer — converts PHP source text into a lossless token stream."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from enum import Enum, auto

from phplex.cursor import Cursor
from phplex.errors import LexError
from phplex.recognizers import RecognizerSet
from phplex.tokens import Position, Span, Token

log = logging.getLogger(__name__)


class _State(Enum):
    SCANNING = auto()
    EXHAUSTED = auto()


class Lexer:
    """Tokenize PHP source text one token at a time.

    Whitespace and comments are emitted as tokens, so concatenating the
    ``raw`` text of every token reproduces the source exactly.
    """

    def __init__(
        self,
        source: str,
        filename: str = "input.php",
        recognizers: RecognizerSet | None = None,
    ) -> None:
        self._source = source
        self._filename = filename
        self._cursor = Cursor(source)
        self._recognizers = recognizers if recognizers is not None else RecognizerSet()
        self._state = _State.SCANNING

    @property
    def exhausted(self) -> bool:
        return self._state == _State.EXHAUSTED

    def next_token(self) -> Token | None:
        """Return the next token, or None once the input is used up.

        Raises LexError when a character starts no token. The offending
        character has been consumed by then, so calling next_token() again
        resumes right after it.
        """
        if self._state == _State.EXHAUSTED:
            return None
        if self._cursor.is_eof():
            self._state = _State.EXHAUSTED
            return None

        start = self._cursor.position
        found = self._recognizers.match(self._cursor)
        if found is None:
            ch = self._cursor.advance()
            raise self._error(f"unexpected character {ch!r}", start)

        end = self._cursor.position
        return Token(found.type, found.value, self._cursor.text(start), Span(start, end), found.kind)

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        tok = self.next_token()
        if tok is None:
            raise StopIteration
        return tok

    def tokenize(self) -> list[Token]:
        """Tokenize the rest of the source and return the token list."""
        return list(self)

    def tokenize_with_errors(self) -> tuple[list[Token], list[LexError]]:
        """Tokenize the rest of the source, collecting errors instead of raising."""
        tokens: list[Token] = []
        errors: list[LexError] = []
        while True:
            try:
                tok = self.next_token()
            except LexError as exc:
                errors.append(exc)
                continue
            if tok is None:
                return tokens, errors
            tokens.append(tok)

    def _error(self, message: str, start: Position) -> LexError:
        span = Span(start, self._cursor.position)
        log.debug("%s at %s:%d:%d", message, self._filename, start.line, start.column)
        return LexError(message, span, self._source, self._filename)


def tokenize(
    source: str,
    filename: str = "input.php",
    recognizers: RecognizerSet | None = None,
) -> list[Token]:
    """Convenience function: tokenize source text and return token list."""
    return Lexer(source, filename, recognizers).tokenize()
