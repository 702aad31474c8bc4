"""Tests for spans and the gap predicate."""

import pytest

from qtpl.location import Span, gap


class TestGap:
    """gap() decides whether whitespace separated two fragments."""

    def test_adjacent(self) -> None:
        assert gap(4, 4) is False

    def test_separated(self) -> None:
        assert gap(4, 7) is True

    def test_any_mismatch_is_a_gap(self) -> None:
        # Out-of-order offsets never count as adjacency
        assert gap(7, 4) is True


class TestSpan:
    """Span construction and helpers."""

    def test_rejects_inverted_span(self) -> None:
        with pytest.raises(ValueError, match="after end"):
            Span(5, 2)

    def test_empty_span_allowed(self) -> None:
        assert len(Span(3, 3)) == 0

    def test_adjacent_to(self) -> None:
        assert Span(0, 3).adjacent_to(Span(3, 5))
        assert not Span(0, 3).adjacent_to(Span(4, 5))

    def test_join(self) -> None:
        assert Span(0, 3).join(Span(4, 9)) == Span(0, 9)

    def test_locate_first_line(self) -> None:
        assert Span(4, 5).locate("abc def") == (1, 5)

    def test_locate_later_line(self) -> None:
        assert Span(6, 7).locate("ab\ncd\nef") == (3, 1)

    def test_frozen(self) -> None:
        span = Span(0, 1)
        with pytest.raises(AttributeError):
            span.start = 2  # type: ignore[misc]
