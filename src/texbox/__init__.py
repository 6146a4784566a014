"""
Texbox — Composable LaTeX Document Builder for Python

Builds a tree of typed element nodes and renders it to a single LaTeX-like
string. Generation only: there is no parser, no escaping and no validation
of command names.

Quick Start:
    >>> from texbox import Command, Document, Literal, render
    >>> doc = Document.new()
    >>> _ = doc.preamble.set_title(Command("LaTeX")).set_author("Maxim Zhiburt")
    >>> doc = doc.with_(Literal("something"))
    >>> print(render(doc), end="")
    \\documentclass{article}
    \\title{\\LaTeX}
    \\author{Maxim Zhiburt}
    <BLANKLINE>
    \\begin{document}
    something
    \\end{document}

Environments:
    >>> from texbox import Boxed, command
    >>> items = Boxed.environment("itemize").with_(command("item")).with_(Literal(" One"))
    >>> doc = Document.new().with_(items)

Installation:
    pip install texbox              # Core builder (zero deps)
"""

from texbox.config import (
    DocumentClass,
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from texbox.errors import ConfigError, SerializationError, TexboxError
from texbox.nodes import (
    Area,
    Boxed,
    Command,
    Document,
    Literal,
    Parameter,
    Preamble,
    as_parameter,
    command,
    render_parameter,
    text,
)
from texbox.protocols import Container, Renderable
from texbox.serialization import from_dict, from_json, to_dict, to_json

__version__ = "0.1.0"


def render(node: Renderable, *, config: RenderConfig | None = None) -> str:
    """Render any element node to markup text.

    Args:
        node: Node to render (usually a Document)
        config: Optional render configuration, active only for this call

    Returns:
        Rendered string

    Example:
        >>> render(Command("section").param("Intro"))
        '\\\\section{Intro}'
    """
    if config is None:
        return node.render()
    with render_config_context(config):
        return node.render()


__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "render",
    # Protocols
    "Renderable",
    "Container",
    # Nodes
    "Literal",
    "Command",
    "Parameter",
    "Area",
    "Boxed",
    "Preamble",
    "Document",
    # Helpers
    "as_parameter",
    "render_parameter",
    "command",
    "text",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Configuration (ContextVar-based)
    "DocumentClass",
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
    # Errors
    "TexboxError",
    "ConfigError",
    "SerializationError",
]
