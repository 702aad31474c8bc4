"""Runtime for compiled templates.

- executor: execute(program, sink, values)
- protocol: Sink and Render structural protocols
"""

from qtpl.renderers.executor import execute, render_child
from qtpl.renderers.protocol import Render, Sink

__all__ = [
    "Render",
    "Sink",
    "execute",
    "render_child",
]
