"""Minimal logging utilities for Texbox.

Every module logs under the ``texbox.`` namespace, so a single level
setting controls the whole library:

    >>> import logging
    >>> logging.getLogger("texbox").setLevel(logging.DEBUG)
    >>> from texbox.utils.logger import get_logger
    >>> get_logger("serialization").debug("Deserialized %s node", "Area")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a standard library logger namespaced under ``texbox.``.

    Names that already start with ``texbox`` (module ``__name__`` values
    inside the package) are used unchanged.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("nodes").name
        'texbox.nodes'
        >>> get_logger("texbox.serialization").name
        'texbox.serialization'
    """
    if not (name == "texbox" or name.startswith("texbox.")):
        name = f"texbox.{name}"
    return logging.getLogger(name)
