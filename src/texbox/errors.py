"""Exception classes for Texbox.

Building and rendering element trees never fails. Errors are raised only
where outside data enters the library: configuration values and
serialized trees.
"""

from __future__ import annotations


class TexboxError(Exception):
    """Base exception for all Texbox errors.
    
    Subclass this for specific error categories.
    """

    pass


class ConfigError(TexboxError, ValueError):
    """Invalid configuration value.
    
    Raised when a document class name is not one of the known classes.
    """

    def __init__(self, key: str, value: object, message: str | None = None) -> None:
        """Initialize config error.
        
        Args:
            key: Name of the offending setting (e.g., "document_class")
            value: The rejected value
            message: Optional description overriding the default
        """
        self.key = key
        self.value = value
        super().__init__(message or f"Invalid value for '{key}': {value!r}")


class SerializationError(TexboxError, ValueError):
    """Error converting an element tree to or from a dict/JSON.
    
    Raised for unknown or missing ``_type`` discriminators and for nodes
    outside the built-in node kinds.
    """

    def __init__(self, message: str, node_type: str | None = None) -> None:
        """Initialize serialization error.
        
        Args:
            message: Error description
            node_type: Name of the node type involved (optional)
        """
        self.node_type = node_type
        super().__init__(message)
