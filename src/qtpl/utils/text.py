"""Text processing utilities for qtpl.

Provides the HTML escaping applied to default directives and the whitespace
collapsing applied to literal template text.

Example:
    >>> from qtpl.utils.text import escape
    >>> escape("<b>")
    '&lt;b&gt;'
"""

from __future__ import annotations

import re

# Exactly six characters are replaced; everything else, including non-ASCII,
# passes through unchanged.
_ESCAPE_TABLE = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#x27;",
        "/": "&#x2f;",
    }
)

_WHITESPACE_RUN = re.compile(r"[ \t\n\r\f\v]+")


def escape(text: str) -> str:
    """Escape HTML special characters.

    Converts special characters to HTML entities:
    - & becomes &amp;
    - < becomes &lt;
    - > becomes &gt;
    - " becomes &quot;
    - ' becomes &#x27;
    - / becomes &#x2f;

    Each character is replaced in a single pass, so entities produced by the
    replacement are never escaped again.

    Examples:
        >>> escape("<script>alert('xss')</script>")
        '&lt;script&gt;alert(&#x27;xss&#x27;)&lt;&#x2f;script&gt;'
    """
    return text.translate(_ESCAPE_TABLE)


def collapse_whitespace(text: str) -> str:
    """Reduce every run of whitespace, newlines included, to one space.

    Idempotent: ``collapse_whitespace(collapse_whitespace(x))`` equals
    ``collapse_whitespace(x)``.

    Examples:
        >>> collapse_whitespace("a \\n\\t  b")
        'a b'
    """
    return _WHITESPACE_RUN.sub(" ", text)
