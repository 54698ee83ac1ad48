"""Token types, data structures, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from phplex.keywords import Keyword


class TokenType(Enum):
    # Trivia (kept in the stream so the tokens partition the source)
    WHITESPACE = auto()
    COMMENT = auto()  # // line or /* block */

    # Words
    OPERATOR = auto()  # + - * / % = < > & | ^ ~ and the words `or`, `and`
    KEYWORD = auto()  # kind is the Keyword
    BOOLEAN = auto()  # true | false
    IDENTIFIER = auto()

    # Literals
    NUMBER = auto()  # kind is the NumericKind, value the decoded number
    STRING = auto()  # kind is the StringDelimiter, value the body

    # Value-bearing punctuation
    ACCESSOR = auto()  # ::  kind is the AccessKind
    COLON = auto()  # :

    # Single-character punctuation
    LBRACKET = auto()  # [
    RBRACKET = auto()  # ]
    LPAREN = auto()  # (
    RPAREN = auto()  # )
    LBRACE = auto()  # {
    RBRACE = auto()  # }
    SEMICOLON = auto()  # ;
    COMMA = auto()  # ,
    BACKSLASH = auto()  # \  namespace separator
    DOT = auto()  # .
    VARIABLE = auto()  # $
    QUESTION = auto()  # ?


class StringDelimiter(Enum):
    DOUBLE = '"'
    SINGLE = "'"
    BACKTICK = "`"


class AccessKind(Enum):
    STATIC_MEMBER = "::"


class NumericKind(Enum):
    INT = auto()
    FLOAT = auto()


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """Source position, 1-based line and column, 0-based character offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Span:
    """Source range from start to end position."""

    start: Position
    end: Position


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexer token with decoded value and original source text."""

    type: TokenType
    value: str | int | float | None
    raw: str
    span: Span
    kind: Keyword | StringDelimiter | AccessKind | NumericKind | None = None


# Characters that each map to exactly one punctuation token
PUNCTUATION: dict[str, TokenType] = {
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    ";": TokenType.SEMICOLON,
    ",": TokenType.COMMA,
    "\\": TokenType.BACKSLASH,
    ".": TokenType.DOT,
    "$": TokenType.VARIABLE,
    "?": TokenType.QUESTION,
}

OPERATOR_CHARS = frozenset("+-*/%=<>&|^~")
WORD_OPERATORS = frozenset({"or", "and"})
BOOLEANS = frozenset({"true", "false"})

_ASCII_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
_DECIMAL_DIGITS = frozenset("0123456789")
_QUOTES = frozenset(d.value for d in StringDelimiter)


def is_whitespace(ch: str) -> bool:
    """Return True if ch is whitespace. The EOF sentinel is not."""
    return ch.isspace()


def is_ident_start(ch: str) -> bool:
    """Return True if ch may begin an identifier."""
    return ch == "_" or ch in _ASCII_LETTERS


def is_ident_char(ch: str) -> bool:
    """Return True if ch may continue an identifier."""
    return ch == "_" or ch.isalnum()


def is_digit(ch: str) -> bool:
    return ch in _DECIMAL_DIGITS


def is_number_char(ch: str) -> bool:
    return ch in _DECIMAL_DIGITS or ch == "."


def is_quote(ch: str) -> bool:
    return ch in _QUOTES
