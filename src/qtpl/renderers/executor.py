"""Program executor.

Runs a compiled Program against one sink, instruction by instruction.
Execution is strictly sequential: the first failing write (or failing child)
stops the program and its exception reaches the caller unmodified. Bytes
already written are not rolled back.

Thread Safety:
All per-execution state is local to ``execute``. Programs are immutable,
so one program may run concurrently against different sinks.
"""

from __future__ import annotations

import builtins
from collections.abc import Mapping
from typing import Any

from qtpl.config import get_template_config
from qtpl.errors import RenderError
from qtpl.instructions import (
    DEFER_CALL_NAME,
    Finish,
    InvokeChild,
    Program,
    WriteEscaped,
    WriteLiteral,
    WriteQuoted,
    WriteRawBytes,
)
from qtpl.items import Expression
from qtpl.renderers.protocol import Sink
from qtpl.utils.text import escape

_BYTES_LIKE = (bytes, bytearray, memoryview)


def render_child(child: Any, sink: Sink) -> None:
    """Render a child capability into ``sink``.

    Objects with a ``render`` method are preferred; plain callables are
    called with the sink.
    """
    render = getattr(child, "render", None)
    if callable(render):
        render(sink)
    elif callable(child):
        child(sink)
    else:
        raise RenderError(f"{type(child).__name__!r} object is not renderable")


def defer_call(
    fn: Any, /, *args: Any, **kwargs: Any
) -> tuple[Any, tuple[Any, ...], dict[str, Any]]:
    """Collect a child call's callee and arguments without calling it."""
    return fn, args, kwargs


def _evaluate(expression: Expression, scope: dict[str, Any]) -> Any:
    try:
        return eval(expression.code, scope)
    except NameError as exc:
        raise RenderError(f"undefined value in {{{expression.source}}}: {exc}") from exc


def _text(value: Any) -> str:
    return value if isinstance(value, str) else str(value)


def execute(
    program: Program,
    sink: Sink,
    values: Mapping[str, Any] | None = None,
) -> None:
    """Execute ``program``, writing its output to ``sink``.

    Args:
        program: Compiled program
        sink: Destination exposing ``write(bytes)``
        values: Names available to directive expressions

    Raises:
        RenderError: A directive value could not be written
        Exception: Anything raised by the sink or a child, unchanged

    Example:
        >>> from qtpl.compiler import compile_template
        >>> from qtpl.sinks import BufferSink
        >>> sink = BufferSink()
        >>> execute(compile_template("Hi {who}!"), sink, {"who": "<you>"})
        >>> sink.getvalue()
        b'Hi &lt;you&gt;!'
    """
    config = get_template_config()
    scope: dict[str, Any] = {"__builtins__": builtins if config.builtins else {}}
    if values:
        scope.update(values)
    scope[DEFER_CALL_NAME] = defer_call

    encoding = program.encoding
    write = sink.write
    for instruction in program.instructions:
        match instruction:
            case WriteLiteral():
                write(instruction.data)
            case WriteEscaped():
                value = _evaluate(instruction.expression, scope)
                write(escape(_text(value)).encode(encoding))
            case WriteQuoted():
                value = _evaluate(instruction.expression, scope)
                write(b'"' + _text(value).encode(encoding) + b'"')
            case WriteRawBytes():
                value = _evaluate(instruction.expression, scope)
                if not isinstance(value, _BYTES_LIKE):
                    raise RenderError(
                        f"{{!b {instruction.expression.source}}} expects bytes, "
                        f"got {type(value).__name__}"
                    )
                write(bytes(value))
            case InvokeChild(call=True):
                # Errors raised by the child itself propagate unwrapped
                fn, args, kwargs = _evaluate(instruction.expression, scope)
                fn(sink, *args, **kwargs)
            case InvokeChild():
                render_child(_evaluate(instruction.expression, scope), sink)
            case Finish():
                return
