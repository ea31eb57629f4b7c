"""Errors raised while reading objects from their wire form."""

from __future__ import annotations


class DeserializationError(Exception):
    """Base class for wire-form deserialization failures."""

    def nested_under(self, parent_key: str) -> DeserializationError:
        """Return the same failure with its key prefixed by the enclosing wire key."""
        return DeserializationError(f"{parent_key}: {self}")


class MissingRequiredField(DeserializationError):
    """Raised when a required wire key is absent from the input."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"Missing required field: {field_name}")

    def nested_under(self, parent_key: str) -> MissingRequiredField:
        return MissingRequiredField(_join_key(parent_key, self.field_name))


class SchemaTypeMismatch(DeserializationError):
    """Raised when a recognized wire key carries a value of the wrong type."""

    def __init__(self, key: str, expected_type: str, actual_value: object):
        self.key = key
        self.expected_type = expected_type
        self.actual_value = actual_value
        location = f"'{key}'" if key else "document root"
        super().__init__(
            f"Expected {expected_type} at {location}, got {type(actual_value).__name__}: "
            f"{actual_value!r}"
        )

    def nested_under(self, parent_key: str) -> SchemaTypeMismatch:
        return SchemaTypeMismatch(
            _join_key(parent_key, self.key), self.expected_type, self.actual_value
        )


def _join_key(parent_key: str, key: str) -> str:
    if not key:
        return parent_key
    return f"{parent_key}.{key}"
