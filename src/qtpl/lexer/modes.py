"""Lexer operating modes.

This module defines the finite state machine modes for the lexer.
"""

from __future__ import annotations

from enum import Enum, auto

from qtpl.parsing.charsets import EXPRESSION_QUOTES, TEXT_QUOTES


class LexerMode(Enum):
    """Lexer operating modes.

    The lexer switches between modes based on context:
    - TEXT: Template markup, only double quotes delimit strings
      (so apostrophes in prose stay ordinary punctuation)
    - EXPRESSION: Inside ``{ ... }``, Python quoting rules apply

    """

    TEXT = auto()
    EXPRESSION = auto()

    @property
    def quotes(self) -> frozenset[str]:
        return EXPRESSION_QUOTES if self is LexerMode.EXPRESSION else TEXT_QUOTES
