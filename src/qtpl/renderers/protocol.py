"""Sink and Render protocols: the runtime's only interfaces.

A sink is anything with ``write(bytes)``: a file opened in binary mode, a
socket file, ``io.BytesIO`` or ``BufferSink``. Errors it raises propagate
to the caller unchanged.

A child is anything offering ``render(sink)``, or any callable taking the
sink. Both are structural: no base class is needed.

Example:
    from qtpl.renderers.protocol import Render, Sink

    class Banner:
        def render(self, sink: Sink) -> None:
            sink.write(b"<b>banner</b>")

"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Sink(Protocol):
    """Destination for rendered bytes."""

    def write(self, data: bytes, /) -> object:
        """Write all of ``data`` or raise."""
        ...


@runtime_checkable
class Render(Protocol):
    """Something that renders itself into a sink."""

    def render(self, sink: Sink, /) -> None:
        """Write this child's output to ``sink``.

        Args:
            sink: The parent's sink; output is streamed straight into it.

        """
        ...
