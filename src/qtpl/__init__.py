"""
qtpl: HTML templates compiled to byte-writing programs.

Templates mix markup and ``{expression}`` placeholders. They compile once
into a flat list of write instructions that stream bytes into any sink with
a ``write`` method.

Quick Start:
    >>> from qtpl import Template
    >>> hello = Template("Hello, <strong>{name}</strong>!", params=("name",))
    >>> hello.render_string("<world>")
    'Hello, <strong>&lt;world&gt;</strong>!'

Template functions:
    >>> from qtpl import tplfn, render_string
    >>> @tplfn("<a class={!q cls}>Hello!</a>")
    ... def link(cls):
    ...     pass
    >>> render_string(link, "world")
    '<a class="world">Hello!</a>'

Directives:
    {expr}      str(value), HTML-escaped
    {!q expr}   str(value) in double quotes, NOT escaped
    {!b expr}   bytes written as-is
    {!t f(x)}   call f(sink, x), a child template function
    {!c child}  child.render(sink) or child(sink)

Whitespace:
    * Whitespace at the beginning and end of the template is stripped.
    * Whitespace around block-level tags (div, p, li, ...) is stripped.
    * All whitespace, including newlines, is collapsed into a single space.
    * Rules only apply to template text; values are never modified.

Installation:
    pip install qtpl              # zero runtime dependencies
"""

from qtpl.compiler import CompileResult, compile_template, compile_tokens
from qtpl.config import (
    TemplateConfig,
    get_template_config,
    reset_template_config,
    set_template_config,
    template_config_context,
)
from qtpl.errors import Diagnostic, QtplError, RenderError, TemplateSyntaxError
from qtpl.instructions import (
    Finish,
    Instruction,
    InvokeChild,
    Program,
    WriteEscaped,
    WriteLiteral,
    WriteQuoted,
    WriteRawBytes,
)
from qtpl.items import DirectiveKind
from qtpl.lexer import Lexer
from qtpl.location import Span, gap
from qtpl.parser import Parser
from qtpl.renderers import Render, Sink, execute
from qtpl.sinks import BufferSink
from qtpl.template import Template, child, render_bytes, render_string, tplfn
from qtpl.tokens import Token, TokenType
from qtpl.utils.text import collapse_whitespace, escape
from qtpl.whitespace import WhitespaceNormalizer

__version__ = "0.1.0"


def render(source: str, sink: Sink, values: dict | None = None) -> None:
    """Compile ``source`` and execute it once.

    Convenience for one-off templates; compile once with ``Template`` or
    ``compile_template`` when rendering repeatedly.
    """
    execute(compile_template(source), sink, values)


__all__ = [  # noqa: RUF022 (grouped by category for maintainability)
    # Version
    "__version__",
    # Core API
    "compile_template",
    "compile_tokens",
    "execute",
    "render",
    "CompileResult",
    # Template functions
    "Template",
    "tplfn",
    "child",
    "render_bytes",
    "render_string",
    # Runtime
    "BufferSink",
    "Render",
    "Sink",
    # Program
    "Program",
    "Instruction",
    "WriteLiteral",
    "WriteEscaped",
    "WriteQuoted",
    "WriteRawBytes",
    "InvokeChild",
    "Finish",
    "DirectiveKind",
    # Parser components
    "Lexer",
    "Parser",
    "WhitespaceNormalizer",
    "Token",
    "TokenType",
    "Span",
    "gap",
    # Text
    "escape",
    "collapse_whitespace",
    # Configuration (ContextVar-based)
    "TemplateConfig",
    "get_template_config",
    "set_template_config",
    "reset_template_config",
    "template_config_context",
    # Errors
    "Diagnostic",
    "QtplError",
    "RenderError",
    "TemplateSyntaxError",
]
