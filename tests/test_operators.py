"""Test operator tokens, including the word operators `or` and `and`."""

import pytest

from phplex.tokens import TokenType

from .conftest import assert_types, assert_values


class TestSingleCharacterOperators:
    @pytest.mark.parametrize("op", list("+-*/%=<>&|^~"))
    def test_isolated_operator(self, lex, op):
        tokens = lex(f" {op} ")
        assert_types(tokens, [TokenType.WHITESPACE, TokenType.OPERATOR, TokenType.WHITESPACE])
        assert tokens[1].value == op
        assert tokens[1].span.end.offset - tokens[1].span.start.offset == 1

    def test_compound_operators_are_split(self, lex):
        tokens = lex("==")
        assert_types(tokens, [TokenType.OPERATOR, TokenType.OPERATOR])
        assert_values(tokens, ["=", "="])

    def test_arrow_is_two_operators(self, lex):
        assert_values(lex("->"), ["-", ">"])

    def test_expression(self, lex):
        tokens = lex("$a+1")
        assert_types(tokens, [TokenType.VARIABLE, TokenType.IDENTIFIER, TokenType.OPERATOR, TokenType.NUMBER])


class TestWordOperators:
    def test_or(self, lex):
        tokens = lex("a or b")
        assert tokens[2].type == TokenType.OPERATOR
        assert tokens[2].value == "or"

    def test_and(self, lex):
        tokens = lex("a and b")
        assert tokens[2].type == TokenType.OPERATOR
        assert tokens[2].value == "and"

    def test_and_before_paren(self, lex):
        assert_types(lex("and("), [TokenType.OPERATOR, TokenType.LPAREN])

    def test_word_starting_with_or_is_identifier(self, lex):
        tokens = lex("order")
        assert_types(tokens, [TokenType.IDENTIFIER])
        assert tokens[0].value == "order"

    def test_word_starting_with_and_is_identifier(self, lex):
        assert_types(lex("android"), [TokenType.IDENTIFIER])

    def test_prefix_of_word_operator_is_identifier(self, lex):
        assert_types(lex("an"), [TokenType.IDENTIFIER])

    def test_uppercase_is_identifier(self, lex):
        assert_types(lex("OR"), [TokenType.IDENTIFIER])
