"""Exception classes for qtpl.

Provides standardized exceptions for error handling throughout qtpl.

Compile-time problems are first collected as Diagnostic records so that one
pass reports every error in a template; TemplateSyntaxError bundles them.
Errors raised by a sink (or by a child template writing to it) are never
wrapped: they reach the caller unmodified.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from qtpl.location import Span

if TYPE_CHECKING:
    from qtpl.instructions import Program


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A single compile error at a source span."""

    span: Span
    message: str

    def format(self, source: str | None = None, source_file: str | None = None) -> str:
        """Format as ``file:line:col message``.

        Without source text only the raw offset can be shown.
        """
        if source is not None:
            lineno, col = self.span.locate(source)
            location = f"{lineno}:{col}"
        else:
            location = f"@{self.span.start}"
        if source_file:
            location = f"{source_file}:{location}"
        return f"{location} {self.message}"


class QtplError(Exception):
    """Base exception for all qtpl errors.

    Subclass this for specific error categories.
    """

    pass


class TemplateSyntaxError(QtplError):
    """Template failed to compile.

    Carries every diagnostic found in the pass, plus the best-effort program
    built while recovering from them (useful for tooling, never for output).
    """

    def __init__(
        self,
        diagnostics: list[Diagnostic],
        program: Program | None = None,
        source: str | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize syntax error.

        Args:
            diagnostics: Non-empty list of collected diagnostics, in order
            program: Best-effort program built despite the errors
            source: Template source, used to report line and column
            source_file: Template file path (optional)
        """
        self.diagnostics = list(diagnostics)
        self.program = program
        self.source_file = source_file

        lines = [d.format(source, source_file) for d in self.diagnostics]
        count = len(lines)
        header = "1 error in template" if count == 1 else f"{count} errors in template"
        super().__init__(header + ":\n  " + "\n  ".join(lines))

    @property
    def messages(self) -> list[str]:
        return [d.message for d in self.diagnostics]


class RenderError(QtplError):
    """Error while executing a compiled template.

    Raised when a directive's value cannot be written: an undefined name, a
    non-bytes value for ``!b``, or a child that is not renderable.
    """

    pass
