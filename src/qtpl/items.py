"""Typed template items for qtpl.

All items are frozen dataclasses with slots for:
- Type safety: IDE autocomplete, catch errors at dev time
- Immutability: Safe sharing across threads
- Pattern matching: Python 3.10+ match statements work naturally

Item Hierarchy:
Item (base)
├── Literal         plain template text
├── DirectiveItem   {expr}, {!q expr}, {!b expr}, {!t call()}, {!c child}
├── TagOpen         <name
├── TagClose        </name
└── TagEnd          >

Spans on items decide adjacency between neighbours (whitespace
reconstruction). They are never written to the output.

Thread Safety:
All items are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import CodeType
from typing import TypeAlias

from qtpl.location import Span


class DirectiveKind(Enum):
    """How a directive's value is written to the sink."""

    DEFAULT = ""  # str(value), HTML-escaped
    QUOTE = "q"  # "str(value)", NOT escaped
    BYTES = "b"  # raw bytes-like value
    CHILD_CALL = "t"  # call with the sink inserted as first argument
    CHILD_CAPABILITY = "c"  # value.render(sink) or value(sink)

    @property
    def is_child(self) -> bool:
        return self in (DirectiveKind.CHILD_CALL, DirectiveKind.CHILD_CAPABILITY)


# Modifier name -> kind. Absent modifier means DEFAULT.
MODIFIERS: dict[str, DirectiveKind] = {
    kind.value: kind for kind in DirectiveKind if kind is not DirectiveKind.DEFAULT
}


@dataclass(frozen=True, slots=True)
class Name:
    """A tag name scanned from adjacent tokens."""

    value: str
    span: Span


@dataclass(frozen=True, slots=True)
class Expression:
    """A directive's embedded Python expression.

    Attributes:
        source: Expression text rebuilt from its tokens
        span: Source span of the expression tokens
        code: Code object evaluated at render time

    """

    source: str
    span: Span
    code: CodeType = field(repr=False, compare=False)


@dataclass(frozen=True, slots=True)
class Item:
    """Base class for all template items."""

    span: Span


@dataclass(frozen=True, slots=True)
class Literal(Item):
    """Literal template text."""

    text: str


@dataclass(frozen=True, slots=True)
class DirectiveItem(Item):
    """An embedded expression and how to write it."""

    kind: DirectiveKind
    expression: Expression


@dataclass(frozen=True, slots=True)
class TagOpen(Item):
    """``<name`` of an opening tag."""

    name: Name


@dataclass(frozen=True, slots=True)
class TagClose(Item):
    """``</name`` of a closing tag."""

    name: Name


@dataclass(frozen=True, slots=True)
class TagEnd(Item):
    """``>`` ending either kind of tag."""


# Type aliases
TemplateItem: TypeAlias = Literal | DirectiveItem
