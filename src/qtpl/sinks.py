"""In-memory byte sink.

Adopts the StringBuilder pattern for rendered output: appends chunks to a
list and joins once at the end. O(n) total vs O(n²) for repeated bytes
concatenation.

Thread Safety:
BufferSink instances are local to one render call.
No shared mutable state.

"""

from __future__ import annotations


class BufferSink:
    """Sink collecting written bytes in memory.

    Usage:
            >>> sink = BufferSink()
            >>> sink.write(b"<h1>")
            4
            >>> sink.write(b"Hello")
            5
            >>> sink.getvalue()
            b'<h1>Hello'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        """Initialize empty sink."""
        self._parts: list[bytes] = []

    def write(self, data: bytes) -> int:
        """Append bytes (empty chunks are skipped).

        Returns:
            Number of bytes written, like ``io.RawIOBase.write``
        """
        if data:
            self._parts.append(bytes(data))
        return len(data)

    def getvalue(self) -> bytes:
        """Join all chunks into the final output."""
        return b"".join(self._parts)

    def clear(self) -> BufferSink:
        """Discard all written chunks.

        Returns:
            self for method chaining
        """
        self._parts.clear()
        return self

    def __len__(self) -> int:
        """Return number of chunks (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        """Return True if anything has been written."""
        return bool(self._parts)
