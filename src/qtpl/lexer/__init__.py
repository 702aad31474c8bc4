"""State-machine lexer for qtpl templates.

The lexer splits template source into tokens and records each token's span.
Whitespace is discarded; the spans are what later passes use to put it back.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, LexerMode
├── core.py              # Lexer class (dispatch + group nesting)
├── modes.py             # LexerMode enum
└── scanners.py          # Scanners for strings, numbers, identifiers

Usage:
    >>> from qtpl.lexer import Lexer
    >>> for token in Lexer("<a>{name}</a>").tokenize():
    ...     print(token)
Token(PUNCT, '<', 0:1)
Token(IDENT, 'a', 1:2)
Token(PUNCT, '>', 2:3)
Token(GROUP, '{name}', 3:9)
Token(PUNCT, '<', 9:10)
Token(PUNCT, '/', 10:11)
Token(IDENT, 'a', 11:12)
Token(PUNCT, '>', 12:13)
Token(EOF, '', 13:13)

"""

from qtpl.lexer.core import Lexer
from qtpl.lexer.modes import LexerMode

__all__ = ["Lexer", "LexerMode"]
