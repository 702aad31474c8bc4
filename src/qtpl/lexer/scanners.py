"""Single-token scanners for the lexer.

Each scanner starts at ``self._pos`` on a character it has already
classified, consumes the token, and returns it. Scanners always advance.
"""

from __future__ import annotations

from collections.abc import Callable

from qtpl.errors import Diagnostic
from qtpl.location import Span
from qtpl.parsing.charsets import is_ident_char
from qtpl.tokens import Token, TokenType


class ScannerMixin:
    """Mixin providing token scanners.

    Required Host Attributes:
        - _source: str
        - _source_len: int
        - _pos: int
        - diagnostics: list[Diagnostic]

    """

    _source: str
    _source_len: int
    _pos: int
    diagnostics: list[Diagnostic]

    def _make_token(self, token_type: TokenType, start: int) -> Token:
        """Create a token covering ``source[start:pos]``."""
        return Token(token_type, self._source[start : self._pos], Span(start, self._pos))

    def _scan_while(self, token_type: TokenType, accept: Callable[[str], bool]) -> Token:
        start = self._pos
        self._pos += 1
        source = self._source
        while self._pos < self._source_len and accept(source[self._pos]):
            self._pos += 1
        return self._make_token(token_type, start)

    def _scan_ident(self) -> Token:
        return self._scan_while(TokenType.IDENT, is_ident_char)

    def _scan_number(self) -> Token:
        return self._scan_while(TokenType.NUMBER, lambda c: c == "." or is_ident_char(c))

    def _scan_punct(self) -> Token:
        start = self._pos
        self._pos += 1
        return self._make_token(TokenType.PUNCT, start)

    def _scan_string(self, quote: str) -> Token:
        """Scan a quoted string, honouring backslash escapes.

        An unterminated string runs to the end of the source and is reported.
        """
        start = self._pos
        self._pos += 1
        source = self._source
        while self._pos < self._source_len:
            char = source[self._pos]
            if char == "\\":
                self._pos += 2
                continue
            self._pos += 1
            if char == quote:
                return self._make_token(TokenType.STRING, start)

        self._pos = self._source_len
        self.diagnostics.append(
            Diagnostic(Span(start, start + 1), "unterminated string literal")
        )
        return self._make_token(TokenType.STRING, start)
