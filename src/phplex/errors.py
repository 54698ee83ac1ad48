"""Error types with formatted source context."""

from __future__ import annotations

import re

from phplex.tokens import Span

# Same line ends the cursor counts: \r\n, \r, \n
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def _source_line(source: str, line: int) -> str:
    lines = _LINE_BREAK.split(source)
    if 0 < line <= len(lines):
        return lines[line - 1]
    return ""


def render_snippet(filename: str, line: int, column: int, text: str, width: int) -> str:
    """Render a source line with a caret underline, rustc style.

      --> index.php:3:6
      |
    3 | $a = @b;
      |      ^
    """
    number = str(line)
    gutter = " " * (len(number) + 1)
    return "\n".join(
        [
            f"{gutter}--> {filename}:{line}:{column}",
            f"{gutter}|",
            f"{number} | {text}",
            f"{gutter}| {' ' * (column - 1)}{'^' * width}",
        ]
    )


class LexError(Exception):
    """Raised when no recognizer matches, with the offending span and source context."""

    def __init__(self, message: str, span: Span, source: str, filename: str = "input.php") -> None:
        self.message = message
        self.span = span
        self.source = source
        self.filename = filename
        super().__init__(self.format())

    @property
    def offsets(self) -> tuple[int, int]:
        return self.span.start.offset, self.span.end.offset

    def format(self, filename: str | None = None) -> str:
        start, end = self.span.start, self.span.end
        text = _source_line(self.source, start.line)

        # Underline the whole span on one line, otherwise to end of line
        if end.line == start.line:
            width = max(1, end.column - start.column)
        else:
            width = max(1, len(text) - start.column + 1)

        snippet = render_snippet(filename or self.filename, start.line, start.column, text, width)
        return f"error: {self.message}\n{snippet}"
