"""ContextVar-based template configuration for qtpl.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is read by the normalizer, emitter and executor in the current context.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from qtpl.config import TemplateConfig, template_config_context

    with template_config_context(TemplateConfig(collapse_whitespace=False)):
        program = compile_template(source)

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

from qtpl.parsing.charsets import INSENSITIVE_TAGS


@dataclass(frozen=True, slots=True)
class TemplateConfig:
    """Immutable template configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        insensitive_tags: Tag names whose surrounding whitespace is dropped
        collapse_whitespace: Reduce whitespace runs in literal text to one space
        strip_boundaries: Strip whitespace at the start and end of the template
        encoding: Encoding used to turn text into bytes for the sink
        builtins: Expose Python builtins to directive expressions

    """

    insensitive_tags: frozenset[str] = INSENSITIVE_TAGS
    collapse_whitespace: bool = True
    strip_boundaries: bool = True
    encoding: str = "utf-8"
    builtins: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict) -> "TemplateConfig":
        """Create TemplateConfig from dictionary.

        Only includes keys that are valid TemplateConfig fields; unknown keys
        are silently ignored. Tag collections are frozen.

        Example:
            >>> config = TemplateConfig.from_dict({
            ...     "collapse_whitespace": False,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.collapse_whitespace
            False

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if "insensitive_tags" in filtered:
            filtered["insensitive_tags"] = frozenset(
                tag.lower() for tag in filtered["insensitive_tags"]
            )
        return cls(**filtered)

    def is_insensitive(self, tag: str | None) -> bool:
        """Check whether whitespace around ``tag`` is insignificant."""
        if not tag:
            return False
        return tag.rstrip("/").lower() in self.insensitive_tags


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: TemplateConfig = TemplateConfig()

_template_config: ContextVar[TemplateConfig] = ContextVar(
    "template_config",
    default=_DEFAULT_CONFIG,
)


def get_template_config() -> TemplateConfig:
    """Get current template configuration (thread-local)."""
    return _template_config.get()


def set_template_config(config: TemplateConfig) -> None:
    """Set template configuration for current context.

    Args:
        config: TemplateConfig instance to use for this context.

    """
    _template_config.set(config)


def reset_template_config() -> None:
    """Reset to default configuration."""
    _template_config.set(_DEFAULT_CONFIG)


@contextmanager
def template_config_context(config: TemplateConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: TemplateConfig to use within the context.

    Example:
        >>> with template_config_context(TemplateConfig(strip_boundaries=False)):
        ...     program = compile_template("  <b>x</b>")
        >>> # Automatically reset to previous config

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _template_config.get()
    _template_config.set(config)
    try:
        yield
    finally:
        _template_config.set(previous)


__all__ = [
    "TemplateConfig",
    "get_template_config",
    "set_template_config",
    "reset_template_config",
    "template_config_context",
]
