"""PHP reserved-word vocabulary used as the keyword lookup table."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum


class Keyword(Enum):
    ABSTRACT = "abstract"
    ARRAY = "array"
    AS = "as"
    BREAK = "break"
    CALLABLE = "callable"
    CASE = "case"
    CATCH = "catch"
    CLASS = "class"
    CLONE = "clone"
    CONST = "const"
    CONTINUE = "continue"
    DECLARE = "declare"
    DEFAULT = "default"
    DO = "do"
    ECHO = "echo"
    ELSE = "else"
    ELSEIF = "elseif"
    EMPTY = "empty"
    ENDDECLARE = "enddeclare"
    ENDFOR = "endfor"
    ENDFOREACH = "endforeach"
    ENDIF = "endif"
    ENDSWITCH = "endswitch"
    ENDWHILE = "endwhile"
    EXIT = "exit"
    EXTENDS = "extends"
    FINAL = "final"
    FINALLY = "finally"
    FN = "fn"
    FOR = "for"
    FOREACH = "foreach"
    FUNCTION = "function"
    GLOBAL = "global"
    GOTO = "goto"
    IF = "if"
    IMPLEMENTS = "implements"
    INCLUDE = "include"
    INCLUDE_ONCE = "include_once"
    INSTANCEOF = "instanceof"
    INSTEADOF = "insteadof"
    INTERFACE = "interface"
    ISSET = "isset"
    LIST = "list"
    MATCH = "match"
    NAMESPACE = "namespace"
    NEW = "new"
    PRINT = "print"
    PRIVATE = "private"
    PROTECTED = "protected"
    PUBLIC = "public"
    READONLY = "readonly"
    REQUIRE = "require"
    REQUIRE_ONCE = "require_once"
    RETURN = "return"
    STATIC = "static"
    SWITCH = "switch"
    THROW = "throw"
    TRAIT = "trait"
    TRY = "try"
    UNSET = "unset"
    USE = "use"
    VAR = "var"
    WHILE = "while"
    XOR = "xor"
    YIELD = "yield"


class KeywordTable:
    """Lookup oracle mapping candidate words to keywords.

    The lexer only ever calls ``parse`` and reads ``max_length``; it knows
    nothing about the vocabulary itself.
    """

    def __init__(self, keywords: Iterable[Keyword] = Keyword) -> None:
        self._by_text = {kw.value: kw for kw in keywords}
        self.max_length = max((len(text) for text in self._by_text), default=0)

    def parse(self, candidate: str) -> Keyword | None:
        """Return the keyword spelled by candidate, or None."""
        return self._by_text.get(candidate)

    def __contains__(self, candidate: str) -> bool:
        return candidate in self._by_text

    def __len__(self) -> int:
        return len(self._by_text)


DEFAULT_KEYWORDS = KeywordTable()
MAX_KEYWORD_LENGTH = DEFAULT_KEYWORDS.max_length
