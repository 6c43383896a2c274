import pytest

from permc.span import Span
from permc.token import Permission, Token, TokenType


def test_token_length_counts_characters():
    lexeme = "héllo"
    token = Token(TokenType.IDENTIFIER, lexeme, 1, 1)
    assert token.length == len(lexeme)


def test_token_span_covers_lexeme():
    token = Token(TokenType.IDENTIFIER, "counter", 3, 9)
    span = token.span()
    assert span.start_line == span.end_line == 3
    assert span.start_column == 9
    assert span.end_column - span.start_column + 1 == len("counter")


def test_single_character_token_span_is_point():
    token = Token(TokenType.PLUS, "+", 2, 4)
    assert token.span() == Span.point(2, 4)


def test_token_literal_defaults_to_none():
    token = Token(TokenType.COMMA, ",", 1, 1)
    assert token.literal is None
    number = Token(TokenType.NUMBER, "42", 1, 1, 42)
    assert number.literal == 42


def test_tokens_compare_by_value():
    assert Token(TokenType.NUMBER, "7", 1, 2, 7) == Token(TokenType.NUMBER, "7", 1, 2, 7)
    assert Token(TokenType.NUMBER, "7", 1, 2, 7) != Token(TokenType.NUMBER, "7", 1, 3, 7)


@pytest.mark.parametrize("word", ["read", "write", "reads", "writes"])
def test_permission_round_trips_through_keyword(word):
    permission = Permission(word)
    assert str(permission) == word
    assert permission.value == word


def test_unknown_permission_rejected():
    with pytest.raises(ValueError):
        Permission("execute")


def test_token_is_immutable():
    token = Token(TokenType.EOF, "", 1, 1)
    with pytest.raises(AttributeError):
        token.line = 2
    assert token.line == 1
    assert token.span() == Span.point(1, 1) or token.span().start_line == 1