"""Item parser: token stream to typed template items.

Recognizes tag markers, directive groups and literal tokens. One item is
produced per grammar production; literal tokens stay separate here and are
merged by the whitespace normalizer.

Grammar:
    item      := open_tag | close_tag | tag_end | directive | literal_token
    open_tag  := '<' name                     -> TagOpen(name)
    close_tag := '<' '/' name                 -> TagClose(name)
    tag_end   := '>'                          -> TagEnd
    directive := '{' ['!' modifier] expr '}'  -> DirectiveItem(kind, expr)
    literal_token := any other single token   -> Literal(token.text)

Thread Safety:
Parser instances are single-use. The items produced are immutable.

"""

from __future__ import annotations

from collections.abc import Iterable

from qtpl.errors import Diagnostic
from qtpl.items import Item, Literal, TagClose, TagEnd, TagOpen
from qtpl.parsing import DirectiveParsingMixin, NameScanningMixin, TokenNavigationMixin
from qtpl.tokens import Token, TokenType


class Parser(
    TokenNavigationMixin,
    NameScanningMixin,
    DirectiveParsingMixin,
):
    """Recursive descent parser for template items.

    Usage:
            >>> from qtpl.lexer import Lexer
            >>> parser = Parser(Lexer("<a>{name}</a>").tokenize())
            >>> [type(item).__name__ for item in parser.parse()]
            ['TagOpen', 'TagEnd', 'DirectiveItem', 'TagClose', 'TagEnd']

    Errors are collected in ``diagnostics``; parsing always runs to the end
    of the stream so a single pass reports every problem.

    """

    __slots__ = (
        "_tokens",
        "_tokens_len",
        "_pos",
        "_current",
        "_items",
        "_filename",
        "diagnostics",
    )

    def __init__(self, tokens: Iterable[Token], source_file: str | None = None) -> None:
        """Initialize parser with a token stream.

        Args:
            tokens: Tokens from the lexer (a trailing EOF is optional)
            source_file: Optional source file path, used as the filename of
                compiled expressions
        """
        self._tokens: list[Token] = list(tokens)
        self._tokens_len = len(self._tokens)
        self._pos = 0
        self._current: Token | None = self._tokens[0] if self._tokens else None
        self._items: list[Item] = []
        self._filename = source_file or "<template>"
        self.diagnostics: list[Diagnostic] = []

    def parse(self) -> list[Item]:
        """Parse the whole token stream into items."""
        while not self._at_end():
            token = self._current
            assert token is not None
            match token.type:
                case TokenType.GROUP:
                    self._parse_directive(token)
                    self._advance()
                case TokenType.PUNCT if token.value == "<":
                    self._parse_tag(token)
                case TokenType.PUNCT if token.value == ">":
                    self._items.append(TagEnd(token.span))
                    self._advance()
                case _:
                    self._items.append(Literal(token.span, token.text))
                    self._advance()
        return self._items

    def _parse_tag(self, lt: Token) -> None:
        """Parse ``<name`` or ``</name`` starting at ``lt``.

        A ``<`` with no adjacent name is reported and kept as literal text.
        """
        following = self._peek()
        if self._adjacent(lt, following) and following is not None and following.is_punct("/"):
            after = self._peek(2)
            if self._adjacent(following, after) and self._can_start_name(after):
                self._advance()
                self._advance()
                name = self._scan_name()
                self._items.append(TagClose(lt.span.join(name.span), name))
                return
        elif self._adjacent(lt, following) and self._can_start_name(following):
            self._advance()
            name = self._scan_name()
            self._items.append(TagOpen(lt.span.join(name.span), name))
            return

        self._error(lt.span, "expected tag name after '<'")
        self._items.append(Literal(lt.span, "<"))
        self._advance()
