"""Typed element nodes for Texbox.

Element nodes are small value objects that know how to render themselves
into LaTeX-like markup. Leaf and builder nodes are frozen dataclasses with
slots; every builder step returns a new node instead of mutating the
receiver, so a half-built tree can be kept and extended twice without the
two branches interfering.

Node Kinds:
Renderable (protocol)
├── Literal      raw text, rendered verbatim
├── Command      \\name or \\name{p1p2...}
├── Area         ordered, append-only sequence of children
├── Boxed        prep / middle / after regions (begin/end wrappers)
├── Preamble     \\documentclass, \\title, \\author
└── Document     preamble + boxed body

Parameter is not a node kind of its own: it is either plain text or a
nested Command (see ``Parameter``).

Example:
    >>> doc = Document.new()
    >>> _ = doc.preamble.set_title(Command("LaTeX")).set_author("Maxim Zhiburt")
    >>> doc = doc.with_(Literal("something"))
    >>> print(doc.render(), end="")
    \\documentclass{article}
    \\title{\\LaTeX}
    \\author{Maxim Zhiburt}
    <BLANKLINE>
    \\begin{document}
    something
    \\end{document}

Thread Safety:
Frozen nodes are safe to share across threads. Preamble (and therefore the
Document that owns it) is mutable and belongs to a single caller.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Self

from texbox.config import DocumentClass, coerce_document_class, get_render_config
from texbox.protocols import Renderable
from texbox.utils.logger import get_logger

logger = get_logger(__name__)

# =============================================================================
# Leaf Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Literal:
    """Raw text, rendered verbatim.

    No escaping is applied: ``Literal("\\\\LaTeX")`` renders as ``\\LaTeX``.

    """

    text: str

    def render(self) -> str:
        return self.text


# =============================================================================
# Commands and Parameters
# =============================================================================


# PEP 695 type alias for command arguments: literal text or a nested command
type Parameter = str | Command


def as_parameter(value: str | Literal | Command) -> Parameter:
    """Convert a value into a command parameter.

    Plain text (and a Literal node's text) becomes the literal case;
    a Command is kept as the nested case.
    """
    if isinstance(value, Literal):
        return value.text
    return value


def render_parameter(parameter: Parameter) -> str:
    """Render a single parameter without any surrounding braces."""
    match parameter:
        case str():
            return parameter
        case Command():
            return parameter.render()
    raise TypeError(f"Not a parameter: {parameter!r}")


@dataclass(frozen=True, slots=True)
class Command:
    """Named directive with ordered parameters.

    Markup: ``\\name`` with no parameters, ``\\name{p1p2...}`` otherwise.
    All parameters share one brace pair and are concatenated with no
    delimiter, so ``Command("x").param("a").param("b")`` renders ``\\x{ab}``.

    """

    name: str
    parameters: tuple[Parameter, ...] = ()

    def param(self, value: str | Literal | Command) -> Command:
        """Return a copy of this command with ``value`` appended as a parameter."""
        return Command(self.name, (*self.parameters, as_parameter(value)))

    def render(self) -> str:
        if not self.parameters:
            return f"\\{self.name}"
        inner = "".join(render_parameter(p) for p in self.parameters)
        return f"\\{self.name}{{{inner}}}"


# =============================================================================
# Containers
# =============================================================================


@dataclass(frozen=True, slots=True)
class Area:
    """Ordered, append-only sequence of heterogeneous children.

    Renders as the concatenation of the children's renders, in the order
    they were appended, with no separator.

    """

    children: tuple[Renderable, ...] = ()

    def with_(self, element: Renderable) -> Self:
        """Return a new Area with ``element`` appended at the end."""
        return type(self)((*self.children, element))

    def render(self) -> str:
        return "".join(child.render() for child in self.children)


@dataclass(frozen=True, slots=True)
class Boxed:
    """Three-region wrapper: ``prep``, ``middle`` and ``after``.

    Renders as ``prep + "\\n" + middle + "\\n" + after``. The newlines are
    emitted even when a region is empty. ``prep`` and ``after`` are fixed
    when the box is built; ``with_`` only ever appends to ``middle``.

    """

    prep: Area = field(default_factory=Area)
    middle: Area = field(default_factory=Area)
    after: Area = field(default_factory=Area)

    @classmethod
    def environment(cls, name: str, *params: str | Literal | Command) -> Boxed:
        """Build a box bracketed by ``\\begin{name}`` and ``\\end{name}``.

        Each extra parameter gets its own brace group after the opening
        command, so ``Boxed.environment("tabular", "lc")`` opens with
        ``\\begin{tabular}{lc}``.
        """
        prep = Area().with_(Command("begin").param(name))
        for param in params:
            prep = prep.with_(Literal(f"{{{render_parameter(as_parameter(param))}}}"))
        return cls(prep=prep, after=Area().with_(Command("end").param(name)))

    def with_(self, element: Renderable) -> Self:
        """Return a new box with ``element`` appended to ``middle``."""
        return type(self)(self.prep, self.middle.with_(element), self.after)

    def render(self) -> str:
        return f"{self.prep.render()}\n{self.middle.render()}\n{self.after.render()}"


# =============================================================================
# Document
# =============================================================================


@dataclass(slots=True)
class Preamble:
    """Document metadata rendered before the body.

    Each setter replaces the previous value (last write wins) and returns
    the preamble so calls can be chained.

    Markup:
        \\documentclass{article}
        \\title{...}      (only when set)
        \\author{...}     (only when set)

    """

    document_type: DocumentClass | None = None
    title: Parameter | None = None
    author: Parameter | None = None

    def set_type(self, value: DocumentClass | str) -> Self:
        self.document_type = coerce_document_class(value)
        return self

    def set_title(self, value: str | Literal | Command) -> Self:
        self.title = as_parameter(value)
        return self

    def set_author(self, value: str | Literal | Command) -> Self:
        self.author = as_parameter(value)
        return self

    def copy(self) -> Preamble:
        """Independent copy; parameters are immutable and shared safely."""
        return Preamble(self.document_type, self.title, self.author)

    def render(self) -> str:
        document_type = self.document_type or get_render_config().default_document_class
        lines = [Command("documentclass").param(document_type.value).render()]
        if self.title is not None:
            lines.append(Command("title").param(self.title).render())
        if self.author is not None:
            lines.append(Command("author").param(self.author).render())
        return "\n".join(lines)


@dataclass(frozen=True, slots=True)
class Document:
    """Root node: one preamble and one ``document`` environment body.

    Build with ``Document.new()``, configure ``doc.preamble`` in place, then
    rebind through ``with_`` to append body content::

        doc = Document.new()
        doc.preamble.set_author("Ada")
        doc = doc.with_(Literal("Hello")).with_(Command("newpage"))

    ``render()`` does not change the tree and may be called repeatedly.
    Documents are unhashable because the preamble is mutable.

    """

    preamble: Preamble = field(default_factory=Preamble)
    body: Boxed = field(default_factory=lambda: Boxed.environment("document"))

    __hash__ = None  # type: ignore[assignment]

    @classmethod
    def new(cls) -> Document:
        """Create an empty document with default metadata."""
        return cls()

    def with_(self, element: Renderable) -> Self:
        """Return a new document with ``element`` appended to the body.

        The preamble is copied so the returned document never shares mutable
        state with the receiver.
        """
        return type(self)(self.preamble.copy(), self.body.with_(element))

    def render(self) -> str:
        output = f"{self.preamble.render()}\n\n{self.body.render()}\n"
        logger.debug("Rendered document: %d chars", len(output))
        return output


# =============================================================================
# Convenience Constructors
# =============================================================================


def text(value: str) -> Literal:
    """Wrap raw text as a Literal node."""
    return Literal(value)


def command(name: str, *params: str | Literal | Command) -> Command:
    """Build a Command with the given parameters in order.

    Example:
        >>> command("textbf", "bold").render()
        '\\\\textbf{bold}'
    """
    cmd = Command(name)
    for param in params:
        cmd = cmd.param(param)
    return cmd


__all__ = [
    "Area",
    "Boxed",
    "Command",
    "Document",
    "Literal",
    "Parameter",
    "Preamble",
    "as_parameter",
    "command",
    "render_parameter",
    "text",
]
