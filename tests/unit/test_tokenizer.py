"""Tests for the Slate tokenizer."""

from __future__ import annotations

import pytest

from slate.core.errors import InvalidCharacterError
from slate.core.language.tokenizer import tokenize


class TestTokenizer:
    """Tokenizer splits source into raw substrings."""

    def test_brackets_and_symbols(self) -> None:
        assert tokenize("( hello ) mate") == ["(", "hello", ")", "mate"]

    def test_brackets_without_spaces(self) -> None:
        assert tokenize("(hello ) mate") == ["(", "hello", ")", "mate"]

    def test_if_statement(self) -> None:
        assert tokenize("if x > y then") == ["if", "x", ">", "y", "then"]

    def test_not_equal_is_one_token(self) -> None:
        assert tokenize("x != y") == ["x", "!=", "y"]

    def test_equal_is_one_token(self) -> None:
        assert tokenize("x == y") == ["x", "==", "y"]

    def test_assign_then_equal(self) -> None:
        assert tokenize("x===y") == ["x", "==", "=", "y"]

    def test_single_glyphs(self) -> None:
        assert tokenize("<>[]{}(),:") == list("<>[]{}(),:")
        assert tokenize("+-*/&|!%$@=^") == list("+-*/&|!%$@=^")

    def test_bang_alone(self) -> None:
        assert tokenize("! x") == ["!", "x"]

    def test_digit_run(self) -> None:
        assert tokenize("12345+6") == ["12345", "+", "6"]

    def test_letters_and_digits_split(self) -> None:
        # Identifiers are purely alphabetic
        assert tokenize("abc123def") == ["abc", "123", "def"]

    def test_leading_minus_is_separate(self) -> None:
        assert tokenize("-5") == ["-", "5"]

    def test_no_fractional_literals(self) -> None:
        with pytest.raises(InvalidCharacterError):
            tokenize("3.14")

    def test_newlines_dropped(self) -> None:
        source = """
            if x > y then
                5
        """
        assert tokenize(source) == ["if", "x", ">", "y", "then", "5"]

    def test_empty_source(self) -> None:
        assert tokenize("") == []
        assert tokenize("   \n\t ") == []

    def test_invalid_character(self) -> None:
        with pytest.raises(InvalidCharacterError, match="Invalid character") as exc_info:
            tokenize("x = 1 ; y")
        assert exc_info.value.char == ";"
        assert exc_info.value.pos == 6

    def test_invalid_character_position_ignores_trim(self) -> None:
        with pytest.raises(InvalidCharacterError) as exc_info:
            tokenize("   x # y")
        assert exc_info.value.pos == 5

    def test_invalid_character_context(self) -> None:
        with pytest.raises(InvalidCharacterError) as exc_info:
            tokenize("x = 1\ny = _")
        context = exc_info.value.context
        assert context is not None
        assert context.line == 2
        assert context.column == 5
        assert "y = _" in str(exc_info.value)

    def test_deterministic(self) -> None:
        source = "x = 10\nif x > 5 then y = 2 else y = 3 end"
        assert tokenize(source) == tokenize(source)
