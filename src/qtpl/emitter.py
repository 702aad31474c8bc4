"""Instruction emitter: normalized template items to a Program.

Literal text is encoded once here, so executing a program never encodes
template text again. A Finish marker always ends the instruction list.
"""

from __future__ import annotations

from collections.abc import Iterable

from qtpl.config import TemplateConfig, get_template_config
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
from qtpl.items import DirectiveItem, DirectiveKind, Literal, TemplateItem


class Emitter:
    """Convert a normalized template into a Program.

    Usage:
        >>> program = Emitter().emit(normalize(items))
        >>> program.instructions[-1]
        Finish()

    """

    __slots__ = ("_encoding", "_source_file")

    def __init__(
        self,
        config: TemplateConfig | None = None,
        source_file: str | None = None,
    ) -> None:
        self._encoding = (config or get_template_config()).encoding
        self._source_file = source_file

    def emit(self, template: Iterable[TemplateItem]) -> Program:
        instructions = [self._emit_item(item) for item in template]
        instructions.append(Finish())
        return Program(tuple(instructions), self._source_file, self._encoding)

    def _emit_item(self, item: TemplateItem) -> Instruction:
        match item:
            case Literal():
                return WriteLiteral(item.text.encode(self._encoding))
            case DirectiveItem(kind=DirectiveKind.DEFAULT):
                return WriteEscaped(item.expression)
            case DirectiveItem(kind=DirectiveKind.QUOTE):
                return WriteQuoted(item.expression)
            case DirectiveItem(kind=DirectiveKind.BYTES):
                return WriteRawBytes(item.expression)
            case DirectiveItem(kind=DirectiveKind.CHILD_CALL):
                return InvokeChild(item.expression, call=True)
            case DirectiveItem(kind=DirectiveKind.CHILD_CAPABILITY):
                return InvokeChild(item.expression)
        raise TypeError(f"cannot emit {type(item).__name__}")
