"""Character and tag sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Usage:
    from qtpl.parsing.charsets import INSENSITIVE_TAGS

    if name in INSENSITIVE_TAGS:  # O(1) lookup
        ...
"""

# ASCII only: a non-breaking space is content, not layout
WHITESPACE_CHARS = " \t\n\r\f\v"
WHITESPACE: frozenset[str] = frozenset(WHITESPACE_CHARS)

# Opening quote characters for string tokens, by lexer mode
TEXT_QUOTES: frozenset[str] = frozenset('"')
EXPRESSION_QUOTES: frozenset[str] = frozenset("\"'")

# Block-level HTML elements (the CommonMark HTML block type 6 list plus a few
# document-level elements). Whitespace next to these tags never renders, so
# the normalizer drops it instead of keeping a single space.
INSENSITIVE_TAGS: frozenset[str] = frozenset(
    {
        "address",
        "article",
        "aside",
        "base",
        "basefont",
        "blockquote",
        "body",
        "br",
        "caption",
        "center",
        "col",
        "colgroup",
        "dd",
        "details",
        "dialog",
        "dir",
        "div",
        "dl",
        "dt",
        "fieldset",
        "figcaption",
        "figure",
        "footer",
        "form",
        "frame",
        "frameset",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "head",
        "header",
        "hr",
        "html",
        "iframe",
        "legend",
        "li",
        "link",
        "main",
        "menu",
        "menuitem",
        "meta",
        "nav",
        "noframes",
        "ol",
        "optgroup",
        "option",
        "p",
        "param",
        "script",
        "search",
        "section",
        "style",
        "summary",
        "table",
        "tbody",
        "td",
        "tfoot",
        "th",
        "thead",
        "title",
        "tr",
        "track",
        "ul",
    }
)


def is_name_start(char: str) -> bool:
    """Check if a token starting with ``char`` may continue a tag name."""
    return char == "/" or char.isalpha()


def is_ident_start(char: str) -> bool:
    return char == "_" or char.isalpha()


def is_ident_char(char: str) -> bool:
    return char == "_" or char.isalnum()
