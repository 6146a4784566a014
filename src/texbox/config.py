"""ContextVar-based render configuration for Texbox.

Provides thread-local configuration using Python's ContextVars (PEP 567).
The only setting today is the document class a Preamble falls back to when
none was set explicitly.

Usage:
    from texbox.config import RenderConfig, render_config_context, DocumentClass

    with render_config_context(RenderConfig(default_document_class=DocumentClass.REPORT)):
        output = doc.render()  # \\documentclass{report} unless the preamble says otherwise

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from texbox.errors import ConfigError


class DocumentClass(StrEnum):
    """Document classes accepted by ``\\documentclass``."""

    ARTICLE = "article"
    REPORT = "report"
    BOOK = "book"
    LETTER = "letter"


def coerce_document_class(value: DocumentClass | str) -> DocumentClass:
    """Convert a document class name to a DocumentClass member.

    Raises:
        ConfigError: If ``value`` is not a known document class.

    """
    if isinstance(value, DocumentClass):
        return value
    try:
        return DocumentClass(value)
    except ValueError:
        known = ", ".join(member.value for member in DocumentClass)
        raise ConfigError(
            "document_class",
            value,
            f"Unknown document class {value!r} (expected one of: {known})",
        ) from None


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Attributes:
        default_document_class: Class emitted by a Preamble with no type set

    """

    default_document_class: DocumentClass = DocumentClass.ARTICLE

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "RenderConfig":
        """Create RenderConfig from dictionary.

        Only includes keys that are valid RenderConfig fields; unknown keys
        are silently ignored. Document class names are converted to
        DocumentClass members.

        Example:
            >>> RenderConfig.from_dict({"default_document_class": "book", "x": 1})
            RenderConfig(default_document_class=<DocumentClass.BOOK: 'book'>)

        Raises:
            ConfigError: If the document class name is unknown.

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if "default_document_class" in filtered:
            filtered["default_document_class"] = coerce_document_class(
                filtered["default_document_class"]
            )
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: RenderConfig = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get current render configuration (thread-local)."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set render configuration for current context."""
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset to the default configuration."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with render_config_context(RenderConfig(default_document_class=DocumentClass.BOOK)):
        ...     get_render_config().default_document_class
        <DocumentClass.BOOK: 'book'>

    """
    previous = _render_config.get()
    _render_config.set(config)
    try:
        yield
    finally:
        _render_config.set(previous)


__all__ = [
    "DocumentClass",
    "RenderConfig",
    "coerce_document_class",
    "get_render_config",
    "render_config_context",
    "reset_render_config",
    "set_render_config",
]
