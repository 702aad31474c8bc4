"""Compile pipeline: tokens to items to template to Program.

Two entry points:

* ``compile_tokens`` takes an existing token stream and returns the program
  together with every diagnostic found. The program is best-effort when
  diagnostics exist and must not be used for output.
* ``compile_template`` lexes source text and raises TemplateSyntaxError if
  anything was wrong, reporting all errors at once.

Thread Safety:
Compilation holds no shared state. Configuration is read from the
ContextVar of the calling thread.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from qtpl.config import TemplateConfig, get_template_config
from qtpl.emitter import Emitter
from qtpl.errors import Diagnostic, TemplateSyntaxError
from qtpl.instructions import Program
from qtpl.lexer import Lexer
from qtpl.parser import Parser
from qtpl.tokens import Token
from qtpl.utils.logger import get_logger
from qtpl.whitespace import WhitespaceNormalizer

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class CompileResult:
    """Program plus the diagnostics collected while building it."""

    program: Program
    diagnostics: tuple[Diagnostic, ...] = field(default=())

    @property
    def ok(self) -> bool:
        return not self.diagnostics


def compile_tokens(
    tokens: Iterable[Token],
    *,
    source_file: str | None = None,
    config: TemplateConfig | None = None,
) -> CompileResult:
    """Compile a token stream.

    Args:
        tokens: Token stream (from ``Lexer.tokenize`` or any producer of Token)
        source_file: Optional template path for diagnostics and tracebacks
        config: Configuration to use (reads the context config if None)

    Returns:
        CompileResult; ``ok`` is False if any diagnostic was recorded
    """
    config = config or get_template_config()
    parser = Parser(tokens, source_file=source_file)
    items = parser.parse()
    template = WhitespaceNormalizer(config).normalize(items)
    program = Emitter(config, source_file=source_file).emit(template)

    logger.debug(
        "Compiled %s: %d items, %d instructions, %d diagnostics",
        source_file or "<template>",
        len(items),
        len(program),
        len(parser.diagnostics),
    )
    return CompileResult(program, tuple(parser.diagnostics))


def compile_template(
    source: str,
    *,
    source_file: str | None = None,
    config: TemplateConfig | None = None,
) -> Program:
    """Compile template source text into a Program.

    Args:
        source: Template source text
        source_file: Optional template path for error messages
        config: Configuration to use (reads the context config if None)

    Returns:
        The compiled Program

    Raises:
        TemplateSyntaxError: If the lexer or parser reported any error

    Example:
        >>> program = compile_template("<a>Hello, {name}!</a>")
        >>> len(program)
        4
    """
    lexer = Lexer(source)
    result = compile_tokens(lexer.tokenize(), source_file=source_file, config=config)
    diagnostics = sorted(
        [*lexer.diagnostics, *result.diagnostics], key=lambda d: d.span.start
    )
    if diagnostics:
        raise TemplateSyntaxError(
            diagnostics, program=result.program, source=source, source_file=source_file
        )
    return result.program
