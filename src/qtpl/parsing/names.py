"""Tag name scanning.

A tag name may span several adjacent tokens: ``!DOCTYPE`` is punctuation
followed by an identifier, and a self-closing ``br/`` ends in ``/``. After
the first token, the scanner glues on each adjacent token that starts with
a letter or ``/``. Any whitespace, or a token such as ``-``, ends the name.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from qtpl.items import Name
from qtpl.location import Span, gap
from qtpl.parsing.charsets import is_name_start
from qtpl.tokens import Token, TokenType

if TYPE_CHECKING:
    from qtpl.parsing.token_nav import TokenNavigationMixin

    _Base = TokenNavigationMixin
else:
    _Base = object

# Token types that can begin a tag name, and punctuation that never can
_NAME_START_TYPES = frozenset({TokenType.IDENT, TokenType.NUMBER, TokenType.STRING})
_NON_NAME_PUNCT = frozenset("<>")


class NameScanningMixin(_Base):
    """Mixin scanning tag names out of the token stream."""

    @staticmethod
    def _can_start_name(token: Token | None) -> bool:
        """Check if ``token`` may be the first token of a tag name.

        Any token but a brace group or another ``<`` or ``>`` will do, so
        ``<!DOCTYPE`` and ``<3`` open tags named ``!DOCTYPE`` and ``3``.
        """
        if token is None:
            return False
        if token.type in _NAME_START_TYPES:
            return True
        return token.type == TokenType.PUNCT and token.value not in _NON_NAME_PUNCT

    def _scan_name(self) -> Name:
        """Consume the name starting at the current token.

        Continues while the next token is adjacent and begins with an
        alphabetic character or ``/``. Leaves the cursor after the name.
        """
        first = self._current
        assert first is not None
        parts = [first.value]
        span = first.span
        self._advance()

        while (token := self._current) is not None and self._adjacent_span(span, token):
            if not is_name_start(token.first_char):
                break
            parts.append(token.value)
            span = span.join(token.span)
            self._advance()

        return Name("".join(parts), span)

    @staticmethod
    def _adjacent_span(span: Span, token: Token) -> bool:
        return token.type != TokenType.EOF and not gap(span.end, token.span.start)
