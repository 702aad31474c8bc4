"""Render instructions: the compiled form of a template.

A Program is an ordered, branch-free tuple of instructions ending in Finish.
Executing it means running each instruction against one sink, in order.

Thread Safety:
Instructions and programs are frozen and safe to share across threads;
one program may be executed concurrently against different sinks.

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from qtpl.items import Expression

# Name injected into the evaluation namespace of every directive expression.
# A child call ``f(a, b=c)`` compiles to ``DEFER_CALL_NAME(f, a, b=c)``, which
# only collects the callee and its arguments; the executor makes the call.
DEFER_CALL_NAME = "__qtpl_defer_call__"


@dataclass(frozen=True, slots=True)
class Instruction:
    """Base class for all instructions."""


@dataclass(frozen=True, slots=True)
class WriteLiteral(Instruction):
    """Write fixed bytes."""

    data: bytes


@dataclass(frozen=True, slots=True)
class WriteEscaped(Instruction):
    """Write ``escape(str(value))``."""

    expression: Expression


@dataclass(frozen=True, slots=True)
class WriteQuoted(Instruction):
    """Write ``"str(value)"`` without escaping.

    The value is trusted: callers must escape untrusted input themselves
    before using it in a quoted attribute.
    """

    expression: Expression


@dataclass(frozen=True, slots=True)
class WriteRawBytes(Instruction):
    """Write a bytes-like value unchanged."""

    expression: Expression


@dataclass(frozen=True, slots=True)
class InvokeChild(Instruction):
    """Render a child template into the same sink.

    With ``call`` set, the expression evaluates to the deferred callee and
    its arguments, and the callee is called with the sink first. Otherwise
    the expression evaluates to a child capability.
    """

    expression: Expression
    call: bool = False


@dataclass(frozen=True, slots=True)
class Finish(Instruction):
    """Terminal success marker."""


@dataclass(frozen=True, slots=True)
class Program:
    """A compiled template.

    Attributes:
        instructions: Instructions in execution order, Finish last
        source_file: Template file path, if known
        encoding: Encoding of literal bytes, reused for directive values

    """

    instructions: tuple[Instruction, ...]
    source_file: str | None = None
    encoding: str = "utf-8"

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self.instructions)

    def __len__(self) -> int:
        return len(self.instructions)

