"""Forward-only scanning cursor with bounded lookahead."""

from __future__ import annotations

from collections.abc import Callable

from phplex.tokens import Position

# Returned by lookahead past the end of the buffer. Fails every character
# class predicate in phplex.tokens.
EOF_CHAR = ""


class Cursor:
    """Read-only view of source text plus the current scan position."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._line = 1
        self._col = 1

    @property
    def offset(self) -> int:
        return self._pos

    @property
    def position(self) -> Position:
        return Position(self._line, self._col, self._pos)

    def is_eof(self) -> bool:
        return self._pos >= len(self._source)

    # ------------------------------------------------------------------
    # Lookahead
    # ------------------------------------------------------------------

    def nth(self, i: int) -> str:
        idx = self._pos + i
        if idx < len(self._source):
            return self._source[idx]
        return EOF_CHAR

    def first(self) -> str:
        return self.nth(0)

    def second(self) -> str:
        return self.nth(1)

    # ------------------------------------------------------------------
    # Consumption
    # ------------------------------------------------------------------

    def advance(self) -> str:
        """Consume one character and return it, or EOF_CHAR if exhausted."""
        if self._pos >= len(self._source):
            return EOF_CHAR
        ch = self._source[self._pos]
        self._pos += 1
        # \n, \r\n and a lone \r each end a line
        if ch == "\n" or (ch == "\r" and self.first() != "\n"):
            self._line += 1
            self._col = 1
        else:
            self._col += 1
        return ch

    def advance_by(self, n: int) -> str:
        """Consume n characters and return them (fewer at end of input)."""
        start = self._pos
        for _ in range(n):
            if not self.advance():
                break
        return self._source[start : self._pos]

    def consume_while(self, predicate: Callable[[str], bool]) -> str:
        """Consume while predicate(first()) holds; return the consumed run."""
        start = self._pos
        while self._pos < len(self._source) and predicate(self._source[self._pos]):
            self.advance()
        return self._source[start : self._pos]

    def consume_while_inspecting(self, predicate: Callable[[Cursor], bool]) -> str:
        """Like consume_while, but predicate gets the cursor itself.

        The predicate may peek further ahead and consume characters of its
        own before returning False; those characters are part of the run.
        """
        start = self._pos
        while self._pos < len(self._source) and predicate(self):
            self.advance()
        return self._source[start : self._pos]

    def text(self, start: Position, end: Position | None = None) -> str:
        """Return the source text between two positions (default: up to here)."""
        stop = self._pos if end is None else end.offset
        return self._source[start.offset : stop]
