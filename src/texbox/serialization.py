"""Element tree serialization — JSON round-trip for Texbox nodes.

Converts element trees to/from JSON-compatible dicts. Useful for caching a
half-built document, shipping it between processes, or inspecting it.

Each node becomes a dict with a ``_type`` discriminator plus its fields.
Parameters stay as plain strings (literal case) or nested Command dicts.
Output is deterministic (sorted keys) for cache-key stability.

Example:
    from texbox import Document, Literal
    from texbox.serialization import to_json, from_json

    doc = Document.new().with_(Literal("Hello"))
    restored = from_json(to_json(doc))
    assert restored.render() == doc.render()

Only the built-in node kinds can be serialized. A caller-defined Renderable
placed inside an Area raises SerializationError.

Thread Safety:
    All functions are pure — safe to call from any thread.

"""

import json
from dataclasses import fields
from typing import Any

from texbox.config import coerce_document_class
from texbox.errors import SerializationError
from texbox.nodes import Area, Boxed, Command, Document, Literal, Preamble, as_parameter
from texbox.utils.logger import get_logger

logger = get_logger(__name__)

# Registry of node type names to classes for deserialization
_NODE_TYPES: dict[str, type] = {
    "Literal": Literal,
    "Command": Command,
    "Area": Area,
    "Boxed": Boxed,
    "Preamble": Preamble,
    "Document": Document,
}

_NODE_CLASSES = tuple(_NODE_TYPES.values())

# Expected kind of every field, checked while deserializing
_FIELD_KINDS: dict[str, dict[str, str | type]] = {
    "Literal": {"text": "text"},
    "Command": {"name": "text", "parameters": "parameters"},
    "Area": {"children": "nodes"},
    "Boxed": {"prep": Area, "middle": Area, "after": Area},
    "Preamble": {"document_type": "document_class", "title": "parameter", "author": "parameter"},
    "Document": {"preamble": Preamble, "body": Boxed},
}


def to_dict(node: Any) -> dict[str, Any]:
    """Convert an element node to a JSON-compatible dict.

    Args:
        node: Any built-in Texbox node.

    Returns:
        Dict with ``_type`` and all node fields.

    Raises:
        SerializationError: If ``node`` is not a built-in node kind.

    """
    type_name = type(node).__name__
    if _NODE_TYPES.get(type_name) is not type(node):
        msg = f"Cannot serialize node of type {type_name!r}"
        raise SerializationError(msg, node_type=type_name)

    result: dict[str, Any] = {"_type": type_name}
    for f in fields(node):
        result[f.name] = _serialize_value(getattr(node, f.name))
    return result


def _serialize_value(value: Any) -> Any:
    """Serialize a single field value."""
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    if value is None:
        return None
    if isinstance(value, str):
        # DocumentClass is a StrEnum: store its plain value
        return str(value)
    return to_dict(value)


def from_dict(data: dict[str, Any]) -> Any:
    """Reconstruct an element node from a dict.

    Every field is checked while the tree is rebuilt, so a successfully
    restored tree always renders.

    Args:
        data: Dict with ``_type`` and node fields (as produced by to_dict).

    Returns:
        Element node.

    Raises:
        SerializationError: If ``data`` is not a dict, ``_type`` is missing or
            unknown, a required field is missing, or a field holds a value of
            the wrong kind.
        ConfigError: If a Preamble carries an unknown document class.

    """
    if not isinstance(data, dict):
        msg = f"Expected a serialized node (dict), got {type(data).__name__}"
        raise SerializationError(msg)

    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized node"
        raise SerializationError(msg)

    node_cls = _NODE_TYPES.get(type_name) if isinstance(type_name, str) else None
    if node_cls is None:
        msg = f"Unknown node type: {type_name!r}"
        raise SerializationError(msg, node_type=str(type_name))

    kwargs: dict[str, Any] = {}
    for f in fields(node_cls):
        if f.name not in data:
            continue
        value = _deserialize_value(data[f.name])
        kwargs[f.name] = _check_field(type_name, f.name, value)

    try:
        node = node_cls(**kwargs)
    except TypeError as e:
        msg = f"Incomplete {type_name} node: {e}"
        raise SerializationError(msg, node_type=type_name) from e

    logger.debug("Deserialized %s node", type_name)
    return node


def _deserialize_value(value: Any) -> Any:
    """Deserialize a single field value."""
    if isinstance(value, dict):
        return from_dict(value)
    if isinstance(value, list):
        return tuple(_deserialize_value(item) for item in value)
    return value


def _check_field(type_name: str, field_name: str, value: Any) -> Any:
    """Validate (and normalize) a rebuilt field value for its node type."""
    match _FIELD_KINDS[type_name][field_name]:
        case "text":
            if isinstance(value, str):
                return value
        case "document_class":
            if value is None:
                return None
            if isinstance(value, str):
                return coerce_document_class(value)
        case "parameter":
            if value is None:
                return None
            if _is_parameter(value):
                return as_parameter(value)
        case "parameters":
            if isinstance(value, tuple) and all(_is_parameter(p) for p in value):
                return tuple(as_parameter(p) for p in value)
        case "nodes":
            if isinstance(value, tuple) and all(isinstance(v, _NODE_CLASSES) for v in value):
                return value
        case type() as expected:
            if isinstance(value, expected):
                return value

    msg = f"Invalid value for {type_name}.{field_name}: {value!r}"
    raise SerializationError(msg, node_type=type_name)


def _is_parameter(value: Any) -> bool:
    return isinstance(value, str | Literal | Command)


def to_json(doc: Document, *, indent: int | None = None) -> str:
    """Serialize a Document to a JSON string.

    Args:
        doc: Document to serialize.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    return json.dumps(to_dict(doc), sort_keys=True, indent=indent)


def from_json(data: str) -> Document:
    """Deserialize a Document from a JSON string.

    Raises:
        SerializationError: If the JSON doesn't represent a Document.

    """
    node = from_dict(json.loads(data))
    if not isinstance(node, Document):
        msg = f"Expected Document, got {type(node).__name__}"
        raise SerializationError(msg, node_type=type(node).__name__)
    return node


__all__ = ["from_dict", "from_json", "to_dict", "to_json"]
