"""Whitespace normalization: parsed items to the final template sequence.

The lexer threw raw whitespace away; this pass puts back exactly one space
wherever the source had a gap between two items, then applies the rules:

* Whitespace at the beginning and end of the template is stripped.
* Whitespace around whitespace-insensitive (block-level) tags is stripped.
* Every run of whitespace in literal text, newlines included, becomes one
  space.
* Only template text is touched. Directive values are never modified.

Example:
    >>> from qtpl.lexer import Lexer
    >>> from qtpl.parser import Parser
    >>> items = Parser(Lexer("<div> <a>Go</a> </div>").tokenize()).parse()
    >>> WhitespaceNormalizer().normalize(items)
    (Literal(span=Span(start=0, end=22), text='<div><a>Go</a></div>'),)

"""

from __future__ import annotations

from collections.abc import Iterable

from qtpl.config import TemplateConfig, get_template_config
from qtpl.items import (
    DirectiveItem,
    Item,
    Literal,
    TagClose,
    TagEnd,
    TagOpen,
    TemplateItem,
)
from qtpl.location import Span, gap
from qtpl.parsing.charsets import WHITESPACE_CHARS
from qtpl.utils.text import collapse_whitespace


class WhitespaceNormalizer:
    """Merge literal items and apply the whitespace rules.

    Usage:
        >>> normalizer = WhitespaceNormalizer()
        >>> template = normalizer.normalize(items)

    Thread Safety:
        All per-run state lives in local variables of ``normalize``; one
        instance may be shared across threads.

    """

    __slots__ = ("_config",)

    def __init__(self, config: TemplateConfig | None = None) -> None:
        """Initialize normalizer.

        Args:
            config: Configuration to use (reads the context config if None)
        """
        self._config = config or get_template_config()

    def normalize(self, items: Iterable[Item]) -> tuple[TemplateItem, ...]:
        """Normalize ``items`` into literals and directives, in source order."""
        config = self._config
        result: list[TemplateItem] = []
        out: list[str] = []
        out_span: Span | None = None
        current_tag: str | None = None
        prev_end: int | None = None
        # Armed at the start so the leading gap is dropped
        skip_gap = True

        def flush() -> None:
            nonlocal out_span
            if out_span is not None:
                text = "".join(out)
                if config.collapse_whitespace:
                    text = collapse_whitespace(text)
                result.append(Literal(out_span, text))
            out.clear()
            out_span = None

        def trim_out() -> None:
            text = "".join(out).rstrip(WHITESPACE_CHARS)
            out.clear()
            out.append(text)

        for item in items:
            if prev_end is not None and gap(prev_end, item.span.start) and not skip_gap:
                out.append(" ")
                gap_span = Span(prev_end, item.span.start)
                out_span = gap_span if out_span is None else out_span.join(gap_span)
            skip_gap = False
            prev_end = item.span.end

            if isinstance(item, DirectiveItem):
                flush()
                result.append(item)
                continue

            out_span = item.span if out_span is None else out_span.join(item.span)
            match item:
                case Literal():
                    out.append(item.text)
                case TagOpen():
                    current_tag = item.name.value
                    if config.is_insensitive(current_tag):
                        trim_out()
                    out.append("<" + current_tag)
                case TagClose():
                    current_tag = item.name.value
                    if config.is_insensitive(current_tag):
                        trim_out()
                    out.append("</" + current_tag)
                case TagEnd():
                    out.append(">")
                    if config.is_insensitive(current_tag):
                        skip_gap = True

        flush()

        if config.strip_boundaries:
            strip_boundaries(result)
        return tuple(
            item for item in result if not (isinstance(item, Literal) and not item.text)
        )


def strip_boundaries(result: list[TemplateItem]) -> None:
    """Strip leading whitespace of the first item and trailing of the last.

    Only applies when those items are literals; text next to a directive in
    the middle of the template is left alone.
    """
    if result and isinstance(result[0], Literal):
        first = result[0]
        result[0] = Literal(first.span, first.text.lstrip(WHITESPACE_CHARS))
    if result and isinstance(result[-1], Literal):
        last = result[-1]
        result[-1] = Literal(last.span, last.text.rstrip(WHITESPACE_CHARS))


def normalize(
    items: Iterable[Item], config: TemplateConfig | None = None
) -> tuple[TemplateItem, ...]:
    """Convenience wrapper around ``WhitespaceNormalizer().normalize``."""
    return WhitespaceNormalizer(config).normalize(items)
