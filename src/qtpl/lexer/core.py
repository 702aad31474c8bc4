"""State-machine lexer with O(n) guaranteed performance.

Every scanner consumes at least one character, so the lexer always makes
forward progress. Lexical problems never stop tokenization: they are
recorded in ``diagnostics`` and the offending text is still tokenized.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from qtpl.errors import Diagnostic
from qtpl.lexer.modes import LexerMode
from qtpl.lexer.scanners import ScannerMixin
from qtpl.location import Span
from qtpl.parsing.charsets import WHITESPACE, is_ident_start
from qtpl.tokens import Token, TokenType


class Lexer(ScannerMixin):
    """Template lexer.

    Usage:
            >>> lexer = Lexer("Hello, {name}!")
            >>> [t.text for t in lexer.tokenize()]
            ['Hello', ',', '{name}', '!', '']

    Thread Safety:
        Lexer instances are single-use. Create one per source string.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source) to avoid repeated calls
        "_pos",
        "_mode",
        "diagnostics",
    )

    def __init__(self, source: str) -> None:
        """Initialize lexer with source text.

        Args:
            source: Template source text
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._mode = LexerMode.TEXT
        self.diagnostics: list[Diagnostic] = []

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into token stream.

        Yields:
            Token objects one at a time, then exactly one EOF token

        Complexity: O(n) where n = len(source)
        """
        while True:
            self._skip_whitespace()
            if self._pos >= self._source_len:
                break
            yield self._scan_token()

        yield Token(TokenType.EOF, "", Span(self._pos, self._pos))

    def _skip_whitespace(self) -> None:
        source = self._source
        while self._pos < self._source_len and source[self._pos] in WHITESPACE:
            self._pos += 1

    def _scan_token(self) -> Token:
        """Dispatch on the current character. Caller guarantees one exists."""
        char = self._source[self._pos]
        if char == "{":
            return self._scan_group()
        if char == "}":
            self.diagnostics.append(
                Diagnostic(Span(self._pos, self._pos + 1), "unmatched '}'")
            )
            return self._scan_punct()
        if char in self._mode.quotes:
            return self._scan_string(char)
        if is_ident_start(char):
            return self._scan_ident()
        if char.isdigit():
            return self._scan_number()
        return self._scan_punct()

    def _scan_group(self) -> Token:
        """Scan a brace group, including nested groups, into one GROUP token."""
        start = self._pos
        self._pos += 1
        saved_mode = self._mode
        self._mode = LexerMode.EXPRESSION

        children: list[Token] = []
        try:
            while True:
                self._skip_whitespace()
                if self._pos >= self._source_len:
                    self.diagnostics.append(
                        Diagnostic(Span(start, start + 1), "unclosed '{'")
                    )
                    break
                if self._source[self._pos] == "}":
                    self._pos += 1
                    break
                children.append(self._scan_token())
        finally:
            self._mode = saved_mode

        return Token(TokenType.GROUP, "{", Span(start, self._pos), tuple(children))
