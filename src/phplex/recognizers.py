"""Token recognizers, tried in a fixed priority order against a Cursor.

Each recognizer either consumes a prefix of the remaining input and returns
a Match, or consumes nothing and returns None. The order of
RecognizerSet.order encodes precedence: comments are tried before the
operator recognizer can claim a leading ``/``, and the word recognizers
(word operators, keywords, booleans) are tried before identifiers.

The word recognizers all look at the same candidate word, the maximal run of
identifier characters at the cursor, and match only when the whole word
qualifies. ``ifx`` is therefore one identifier, and ``if(`` is the keyword
``if`` followed by a parenthesis.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from phplex.cursor import Cursor
from phplex.keywords import DEFAULT_KEYWORDS, Keyword, KeywordTable
from phplex.tokens import (
    BOOLEANS,
    OPERATOR_CHARS,
    PUNCTUATION,
    WORD_OPERATORS,
    AccessKind,
    NumericKind,
    StringDelimiter,
    TokenType,
    is_digit,
    is_ident_char,
    is_ident_start,
    is_number_char,
    is_quote,
    is_whitespace,
)


@dataclass(frozen=True, slots=True)
class Match:
    """A recognized fragment, before the driver attaches span and raw text."""

    type: TokenType
    value: str | int | float | None
    kind: Keyword | StringDelimiter | AccessKind | NumericKind | None = None


Recognizer = Callable[[Cursor], Match | None]


def peek_word(cursor: Cursor) -> str:
    """Return the identifier-character run at the cursor without consuming it."""
    if not is_ident_start(cursor.first()):
        return ""
    chars = [cursor.first()]
    i = 1
    while is_ident_char(cursor.nth(i)):
        chars.append(cursor.nth(i))
        i += 1
    return "".join(chars)


# ----------------------------------------------------------------------
# Trivia
# ----------------------------------------------------------------------


def recognize_whitespace(cursor: Cursor) -> Match | None:
    text = cursor.consume_while(is_whitespace)
    if not text:
        return None
    return Match(TokenType.WHITESPACE, text)


def _close_block_comment(cursor: Cursor) -> bool:
    # Consumes the closing */ itself, then stops the run.
    if cursor.first() == "*" and cursor.second() == "/":
        cursor.advance_by(2)
        return False
    return True


def recognize_comment(cursor: Cursor) -> Match | None:
    """``//`` up to the newline, or ``/* ... */`` including the closer."""
    if cursor.first() != "/":
        return None
    if cursor.second() == "/":
        return Match(TokenType.COMMENT, cursor.consume_while(lambda ch: ch != "\n"))
    if cursor.second() == "*":
        opener = cursor.advance_by(2)
        body = cursor.consume_while_inspecting(_close_block_comment)
        return Match(TokenType.COMMENT, opener + body)
    return None


# ----------------------------------------------------------------------
# Words
# ----------------------------------------------------------------------


def recognize_operator(cursor: Cursor) -> Match | None:
    ch = cursor.first()
    if ch in OPERATOR_CHARS:
        return Match(TokenType.OPERATOR, cursor.advance())
    word = peek_word(cursor)
    if word in WORD_OPERATORS:
        return Match(TokenType.OPERATOR, cursor.advance_by(len(word)))
    return None


def recognize_boolean(cursor: Cursor) -> Match | None:
    word = peek_word(cursor)
    if word in BOOLEANS:
        return Match(TokenType.BOOLEAN, cursor.advance_by(len(word)))
    return None


def recognize_identifier(cursor: Cursor) -> Match | None:
    if not is_ident_start(cursor.first()):
        return None
    return Match(TokenType.IDENTIFIER, cursor.consume_while(is_ident_char))


# ----------------------------------------------------------------------
# Literals
# ----------------------------------------------------------------------


def decode_number(text: str) -> tuple[int | float | None, NumericKind]:
    """Decode a scanned run of digits and dots.

    Runs with more than one dot are not numbers; their value is None and
    rejecting them is left to the parser. So are integers too long for
    int() to convert.
    """
    dots = text.count(".")
    if dots == 0:
        try:
            return int(text), NumericKind.INT
        except ValueError:
            return None, NumericKind.INT
    if dots == 1:
        return float(text), NumericKind.FLOAT
    return None, NumericKind.FLOAT


def recognize_number(cursor: Cursor) -> Match | None:
    if not is_digit(cursor.first()):
        return None
    text = cursor.consume_while(is_number_char)
    value, kind = decode_number(text)
    return Match(TokenType.NUMBER, value, kind)


def recognize_string(cursor: Cursor) -> Match | None:
    """Quoted string; the value is the body, escapes are not interpreted.

    An unterminated string runs to the end of input.
    """
    quote = cursor.first()
    if not is_quote(quote):
        return None
    cursor.advance()
    body = cursor.consume_while(lambda ch: ch != quote)
    cursor.advance()  # closing delimiter
    return Match(TokenType.STRING, body, StringDelimiter(quote))


# ----------------------------------------------------------------------
# Punctuation
# ----------------------------------------------------------------------


def recognize_colon(cursor: Cursor) -> Match | None:
    if cursor.first() != ":":
        return None
    if cursor.second() == ":":
        return Match(TokenType.ACCESSOR, cursor.advance_by(2), AccessKind.STATIC_MEMBER)
    return Match(TokenType.COLON, cursor.advance())


def recognize_punctuation(cursor: Cursor) -> Match | None:
    tt = PUNCTUATION.get(cursor.first())
    if tt is None:
        return None
    return Match(tt, cursor.advance())


# ----------------------------------------------------------------------
# Ordered set
# ----------------------------------------------------------------------


class RecognizerSet:
    """The ordered recognizers, with the keyword table injected."""

    def __init__(
        self,
        keywords: KeywordTable = DEFAULT_KEYWORDS,
        max_keyword_length: int | None = None,
    ) -> None:
        if max_keyword_length is None:
            max_keyword_length = keywords.max_length
        if max_keyword_length < 0:
            raise ValueError(f"max_keyword_length must be >= 0, got {max_keyword_length}")
        self.keywords = keywords
        self.max_keyword_length = max_keyword_length
        self.order: tuple[Recognizer, ...] = (
            recognize_whitespace,
            recognize_comment,
            recognize_operator,
            self.recognize_keyword,
            recognize_boolean,
            recognize_identifier,
            recognize_number,
            recognize_string,
            recognize_colon,
            recognize_punctuation,
        )

    def recognize_keyword(self, cursor: Cursor) -> Match | None:
        word = peek_word(cursor)
        if not word or len(word) > self.max_keyword_length:
            return None
        keyword = self.keywords.parse(word)
        if keyword is None:
            return None
        return Match(TokenType.KEYWORD, cursor.advance_by(len(word)), keyword)

    def match(self, cursor: Cursor) -> Match | None:
        """Return the first recognizer's match at the cursor, or None."""
        for recognize in self.order:
            found = recognize(cursor)
            if found is not None:
                return found
        return None
