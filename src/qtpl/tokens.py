"""Token and TokenType definitions for the qtpl lexer.

The lexer produces a stream of Token objects that the item parser consumes.
Each Token has a type, its raw source text, and a source span. Brace groups
are a single GROUP token whose nested tokens live in ``children``.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from qtpl.location import Span, gap


class TokenType(Enum):
    """Token types produced by the lexer."""

    EOF = auto()

    IDENT = auto()  # name, _private, h1
    NUMBER = auto()  # 42, 1.5
    STRING = auto()  # "icon", 'x' (inside braces only)
    PUNCT = auto()  # any other single character: < > / ! = , ...

    GROUP = auto()  # { ... }


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        value: Raw source text. For GROUP tokens this is the opening ``{``;
            use ``text`` to get the reconstructed group.
        span: Source span of the whole token (braces included for groups)
        children: Nested tokens of a GROUP, empty otherwise

    """

    type: TokenType
    value: str
    span: Span
    children: tuple[Token, ...] = ()

    @property
    def text(self) -> str:
        """Token text, with groups rebuilt from their children."""
        if self.type is TokenType.GROUP:
            return "{" + join_tokens(self.children) + "}"
        return self.value

    @property
    def first_char(self) -> str:
        return self.value[:1]

    def is_punct(self, char: str) -> bool:
        return self.type is TokenType.PUNCT and self.value == char

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.text
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self.span.start}:{self.span.end})"


def join_tokens(tokens: tuple[Token, ...] | list[Token]) -> str:
    """Rebuild source text from tokens, one space per gap.

    Examples:
        >>> from qtpl.lexer import Lexer
        >>> join_tokens(list(Lexer("f( a,b )").tokenize())[:-1])
        'f( a,b )'
    """
    parts: list[str] = []
    prev_end: int | None = None
    for token in tokens:
        if token.type is TokenType.EOF:
            break
        if prev_end is not None and gap(prev_end, token.span.start):
            parts.append(" ")
        parts.append(token.text)
        prev_end = token.span.end
    return "".join(parts)
