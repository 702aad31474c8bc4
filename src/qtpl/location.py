"""Source spans and adjacency tracking.

Provides the Span dataclass for positions in template source and the
gap() predicate used to reconstruct whitespace the lexer discarded.

Whitespace is never a token. Two tokens were written next to each other in
the source iff the first one ends exactly where the second one starts, so
every whitespace decision downstream reduces to an integer comparison.

Thread Safety:
Span is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


def gap(prev_end: int, next_start: int) -> bool:
    """Return True if source whitespace separated two fragments.

    Args:
        prev_end: End offset of the earlier fragment
        next_start: Start offset of the later fragment

    Examples:
        >>> gap(3, 3)
        False
        >>> gap(3, 4)
        True
    """
    return prev_end != next_start


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open ``[start, end)`` range of character offsets in the source.

    Attributes:
        start: Offset of the first character (0-indexed)
        end: Offset one past the last character

    Examples:
        >>> Span(0, 3).adjacent_to(Span(3, 5))
        True
        >>> Span(0, 3).join(Span(4, 6))
        Span(start=0, end=6)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(f"span start {self.start} is after end {self.end}")

    def __len__(self) -> int:
        return self.end - self.start

    def adjacent_to(self, following: Span) -> bool:
        """Check that ``following`` starts exactly where this span ends."""
        return not gap(self.end, following.start)

    def join(self, end: Span) -> Span:
        """Create a new span from this span's start to ``end``'s end."""
        return Span(self.start, max(self.end, end.end))

    def locate(self, source: str) -> tuple[int, int]:
        """Convert the start offset into a 1-indexed ``(lineno, col)`` pair.

        Args:
            source: The template source the span points into

        Returns:
            Line and column of ``start``, both starting at 1
        """
        offset = min(self.start, len(source))
        lineno = source.count("\n", 0, offset) + 1
        line_start = source.rfind("\n", 0, offset) + 1
        return lineno, offset - line_start + 1
