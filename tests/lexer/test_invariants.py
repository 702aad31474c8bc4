"""Property-based tests for lexer invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from qtpl.lexer import Lexer
from qtpl.parsing.charsets import WHITESPACE
from qtpl.tokens import TokenType


class TestBasicInvariants:
    """Test basic invariants that should always hold."""

    @given(st.text(max_size=500))
    @settings(max_examples=200)
    def test_always_ends_with_eof(self, source: str) -> None:
        """Every tokenization must end with exactly one EOF token."""
        tokens = list(Lexer(source).tokenize())

        assert tokens[-1].type == TokenType.EOF
        assert sum(1 for t in tokens if t.type == TokenType.EOF) == 1

    @given(st.text(max_size=500))
    @settings(max_examples=200)
    def test_spans_ordered_and_in_bounds(self, source: str) -> None:
        """Top-level spans never overlap and never leave the source."""
        tokens = list(Lexer(source).tokenize())

        prev_end = 0
        for token in tokens:
            assert 0 <= token.span.start <= token.span.end <= len(source)
            assert token.span.start >= prev_end
            prev_end = token.span.end

    @given(st.text(max_size=500))
    @settings(max_examples=200)
    def test_plain_tokens_match_source(self, source: str) -> None:
        """Non-group tokens are exact source slices."""
        for token in Lexer(source).tokenize():
            if token.type != TokenType.GROUP:
                assert source[token.span.start : token.span.end] == token.value

    @given(st.text(max_size=500))
    @settings(max_examples=100)
    def test_only_whitespace_is_skipped(self, source: str) -> None:
        """Everything between top-level tokens is whitespace."""
        prev_end = 0
        for token in Lexer(source).tokenize():
            skipped = source[prev_end : token.span.start]
            assert all(char in WHITESPACE for char in skipped)
            prev_end = token.span.end


class TestSpecialCharacterHandling:
    """Test handling of template-significant characters."""

    @given(st.text(alphabet="<>/{}!\"' \n=ab", max_size=200))
    @settings(max_examples=200)
    def test_no_exceptions_on_special_chars(self, source: str) -> None:
        """Lexer should handle any combination of special chars without crashing."""
        tokens = list(Lexer(source).tokenize())
        assert tokens[-1].type == TokenType.EOF
