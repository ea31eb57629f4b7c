"""Declarative wire-field tables shared by serialization and deserialization."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from .wire_errors import DeserializationError, SchemaTypeMismatch

if TYPE_CHECKING:
    from .extension_map import ExtensionPolicy
    from .object_contract import ExtensibleObject


class WireKind(str, Enum):
    """Value shapes a typed field can take on the wire."""

    STRING = "string"
    STRING_LIST = "array of strings"
    OBJECT = "object"
    OBJECT_MAP = "map of objects"


@dataclass(frozen=True)
class WireField:
    """One typed field: semantic attribute name, wire key and value shape."""

    attribute: str
    wire_key: str
    kind: WireKind = WireKind.STRING
    required: bool = False
    object_type: type[ExtensibleObject] | None = None

    def encode(self, value: Any) -> Any:
        """Convert an in-memory value to its wire representation."""
        if self.kind is WireKind.OBJECT:
            return value.to_wire()
        if self.kind is WireKind.OBJECT_MAP:
            return {key: item.to_wire() for key, item in value.items()}
        if self.kind is WireKind.STRING_LIST:
            return list(value)
        return value

    def decode(self, raw_value: Any, extension_policy: ExtensionPolicy) -> Any:
        """Convert a wire value to the field's semantic type."""
        if self.kind is WireKind.STRING:
            if not isinstance(raw_value, str):
                raise SchemaTypeMismatch(self.wire_key, self.kind.value, raw_value)
            return raw_value
        if self.kind is WireKind.STRING_LIST:
            return self._decode_string_list(raw_value)
        if self.kind is WireKind.OBJECT:
            if not isinstance(raw_value, Mapping):
                raise SchemaTypeMismatch(self.wire_key, self.kind.value, raw_value)
            return self._decode_nested(raw_value, self.wire_key, extension_policy)
        if not isinstance(raw_value, Mapping):
            raise SchemaTypeMismatch(self.wire_key, self.kind.value, raw_value)
        decoded = {}
        for key, item in raw_value.items():
            item_key = f"{self.wire_key}.{key}"
            if not isinstance(item, Mapping):
                raise SchemaTypeMismatch(item_key, WireKind.OBJECT.value, item)
            decoded[str(key)] = self._decode_nested(item, item_key, extension_policy)
        return decoded

    def _decode_string_list(self, raw_value: Any) -> tuple[str, ...]:
        if isinstance(raw_value, str) or not isinstance(raw_value, Sequence):
            raise SchemaTypeMismatch(self.wire_key, self.kind.value, raw_value)
        for item in raw_value:
            if not isinstance(item, str):
                raise SchemaTypeMismatch(self.wire_key, self.kind.value, raw_value)
        return tuple(raw_value)

    def _decode_nested(
        self, raw_value: Mapping[str, Any], key: str, extension_policy: ExtensionPolicy
    ) -> ExtensibleObject:
        if self.object_type is None:
            raise TypeError(f"Wire field '{self.wire_key}' declares no object type.")
        try:
            return self.object_type.from_wire(raw_value, extension_policy=extension_policy)
        except DeserializationError as exc:
            raise exc.nested_under(key) from exc


class WireFieldTable:
    """Ordered, read-only table of an object kind's typed fields."""

    def __init__(self, *fields: WireField):
        self._fields = tuple(fields)
        self._by_wire_key = {field.wire_key: field for field in self._fields}
        self._by_attribute = {field.attribute: field for field in self._fields}
        if len(self._by_wire_key) != len(self._fields):
            raise ValueError("Wire keys must be unique within one object kind.")
        if len(self._by_attribute) != len(self._fields):
            raise ValueError("Attributes must be unique within one object kind.")
        first_optional = next(
            (index for index, field in enumerate(self._fields) if not field.required),
            len(self._fields),
        )
        if any(field.required for field in self._fields[first_optional:]):
            raise ValueError("Required fields must precede optional fields in a wire table.")

    def __iter__(self) -> Iterator[WireField]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    @property
    def wire_keys(self) -> frozenset[str]:
        """Every recognized wire key of the object kind."""
        return frozenset(self._by_wire_key)

    def for_wire_key(self, wire_key: str) -> WireField | None:
        return self._by_wire_key.get(wire_key)

    def for_attribute(self, attribute: str) -> WireField:
        return self._by_attribute[attribute]

    def required_fields(self) -> tuple[WireField, ...]:
        return tuple(field for field in self._fields if field.required)
