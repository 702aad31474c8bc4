"""Template objects and template functions.

Connects compiled programs to ordinary Python calls. Every render entry
point takes the sink as its first argument, so templates compose: a child
call ``{!t page(body)}`` becomes ``page(sink, body)``.

Example:
    >>> @tplfn("<b>Hello, {name}!</b>")
    ... def hello(name):
    ...     pass
    >>> render_string(hello, "world")
    '<b>Hello, world!</b>'

"""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from qtpl.compiler import compile_template
from qtpl.config import TemplateConfig, get_template_config
from qtpl.instructions import Program
from qtpl.renderers.executor import execute
from qtpl.renderers.protocol import Sink
from qtpl.sinks import BufferSink


class Template:
    """A compiled template with named parameters.

    Usage:
        >>> page = Template("<body>{!c body}</body>", params=("body",))
        >>> page.render_string(child(Template("hi").render))
        '<body>hi</body>'

    Positional arguments bind to ``params`` in order; keyword arguments may
    name anything the template refers to.

    Thread Safety:
        The compiled program is immutable. One Template may render
        concurrently into different sinks.

    """

    __slots__ = ("_program", "_params", "_name")

    def __init__(
        self,
        source: str,
        *,
        params: Iterable[str] = (),
        name: str | None = None,
        config: TemplateConfig | None = None,
    ) -> None:
        """Compile ``source``.

        Args:
            source: Template source text
            params: Names bound to positional arguments, in order
            name: Template name or path, used in error messages
            config: Configuration to compile with (context config if None)

        Raises:
            TemplateSyntaxError: If the source does not compile
        """
        self._program = compile_template(source, source_file=name, config=config)
        self._params = tuple(params)
        self._name = name

    @property
    def program(self) -> Program:
        return self._program

    @property
    def params(self) -> tuple[str, ...]:
        return self._params

    def render(self, sink: Sink, /, *args: Any, **values: Any) -> None:
        """Render into ``sink``."""
        execute(self._program, sink, self._bind(args, values))

    def __call__(self, sink: Sink, /, *args: Any, **values: Any) -> None:
        self.render(sink, *args, **values)

    def render_bytes(self, *args: Any, **values: Any) -> bytes:
        sink = BufferSink()
        self.render(sink, *args, **values)
        return sink.getvalue()

    def render_string(self, *args: Any, **values: Any) -> str:
        return self.render_bytes(*args, **values).decode(self._program.encoding)

    def _bind(self, args: tuple[Any, ...], values: dict[str, Any]) -> dict[str, Any]:
        if len(args) > len(self._params):
            raise TypeError(
                f"{self!r} takes {len(self._params)} positional arguments "
                f"but {len(args)} were given"
            )
        for param, arg in zip(self._params, args):
            if param in values:
                raise TypeError(f"{self!r} got multiple values for argument {param!r}")
            values[param] = arg
        return values

    def __repr__(self) -> str:
        return f"<Template {self._name or '<template>'}>"


def tplfn(
    source: str,
    *,
    name: str | None = None,
    config: TemplateConfig | None = None,
) -> Callable[[Callable[..., Mapping[str, Any] | None]], Callable[..., None]]:
    """Turn a function into a template function.

    The decorated function gains a leading ``sink`` parameter. Its bound
    arguments, plus any mapping its body returns, are the template values.

    Example:
        >>> @tplfn("{greeting}, {name}!")
        ... def hello(name):
        ...     return {"greeting": "Hello"}
        >>> render_string(hello, "world")
        'Hello, world!'
    """

    def decorator(fn: Callable[..., Mapping[str, Any] | None]) -> Callable[..., None]:
        program = compile_template(source, source_file=name or fn.__qualname__, config=config)
        signature = inspect.signature(fn)

        @functools.wraps(fn)
        def wrapper(sink: Sink, /, *args: Any, **kwargs: Any) -> None:
            bound = signature.bind(*args, **kwargs)
            bound.apply_defaults()
            values = dict(bound.arguments)
            extra = fn(*args, **kwargs)
            if extra is not None:
                values.update(extra)
            execute(program, sink, values)

        wrapper.program = program  # type: ignore[attr-defined]
        return wrapper

    return decorator


def child(fn: Callable[..., None], /, *args: Any, **kwargs: Any) -> Callable[[Sink], None]:
    """Defer a template call, producing a capability for ``{!c ...}``.

    Example:
        >>> body = child(hello, "world")
        >>> page.render_string(body)
    """

    def render(sink: Sink) -> None:
        fn(sink, *args, **kwargs)

    return render


def render_bytes(fn: Callable[..., None], /, *args: Any, **kwargs: Any) -> bytes:
    """Render a template function into memory and return the bytes."""
    sink = BufferSink()
    fn(sink, *args, **kwargs)
    return sink.getvalue()


def render_string(fn: Callable[..., None], /, *args: Any, **kwargs: Any) -> str:
    """Render a template function into memory and decode it.

    Decodes with the encoding ``fn`` was compiled with, so the result matches
    ``Template.render_string``. Plain callables use the context config.

    Convenience for tests and documentation; production code should render
    straight into its sink.
    """
    return render_bytes(fn, *args, **kwargs).decode(_encoding_of(fn))


def _encoding_of(fn: Callable[..., None]) -> str:
    program = getattr(fn, "program", None)
    if program is None:
        # Bound methods such as Template.render
        program = getattr(getattr(fn, "__self__", None), "program", None)
    if isinstance(program, Program):
        return program.encoding
    return get_template_config().encoding
