"""Error hierarchy and formatting tests.

The element model itself never raises; these cover the configuration and
serialization edges where outside data enters the library.
"""

import pytest

from texbox.config import coerce_document_class
from texbox.errors import ConfigError, SerializationError, TexboxError


class TestConfigError:
    """Verify ConfigError formatting and hierarchy."""

    def test_default_message(self) -> None:
        err = ConfigError("document_class", "pamphlet")
        assert str(err) == "Invalid value for 'document_class': 'pamphlet'"
        assert err.key == "document_class"
        assert err.value == "pamphlet"

    def test_custom_message(self) -> None:
        err = ConfigError("document_class", 3, "bad")
        assert str(err) == "bad"

    def test_hierarchy(self) -> None:
        err = ConfigError("k", "v")
        assert isinstance(err, TexboxError)
        assert isinstance(err, ValueError)

    def test_coerce_lists_known_classes(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            coerce_document_class("pamphlet")
        message = str(exc_info.value)
        assert "article" in message
        assert "book" in message

    def test_coerce_does_not_chain_value_error(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            coerce_document_class("pamphlet")
        assert exc_info.value.__cause__ is None
        assert exc_info.value.__suppress_context__ is True


class TestSerializationError:
    """Verify SerializationError attributes."""

    def test_node_type_optional(self) -> None:
        assert SerializationError("x").node_type is None
        assert SerializationError("x", node_type="Foo").node_type == "Foo"

    def test_is_texbox_error(self) -> None:
        assert isinstance(SerializationError("x"), TexboxError)
