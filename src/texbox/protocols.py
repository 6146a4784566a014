"""Protocols for Texbox.

Defines the two contracts every element tree is built from:

- ``Renderable``: produce the markup text for a node and its children.
- ``Container``: accept a Renderable child and return the updated container.

Any object with a matching ``render()`` can be placed in an Area, so callers
can plug their own node kinds into a tree without subclassing anything.
"""

from __future__ import annotations

from typing import Protocol, Self, runtime_checkable


@runtime_checkable
class Renderable(Protocol):
    """Protocol for element nodes.

    Thread Safety:
        Implementations must be pure: the same node always renders to the
        same string and rendering never changes the node.

    """

    def render(self) -> str:
        """Render this node (and its children) to markup text.

        Returns:
            Rendered string output. Never raises for well-formed nodes.

        """
        ...


@runtime_checkable
class Container(Protocol):
    """Protocol for nodes that hold an ordered sequence of children."""

    def with_(self, element: Renderable) -> Self:
        """Return a container with ``element`` appended after existing children.

        Args:
            element: Node to append.

        Returns:
            The updated container. Callers must rebind or chain the result.

        """
        ...


__all__ = ["Container", "Renderable"]
