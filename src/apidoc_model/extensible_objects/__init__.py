"""Extensible object contract exports."""

from .extension_map import (
    VENDOR_EXTENSION_PREFIX,
    ExtensionKeyConflict,
    ExtensionMap,
    ExtensionPolicy,
)
from .object_contract import ExtensibleObject, WireInput
from .wire_errors import DeserializationError, MissingRequiredField, SchemaTypeMismatch
from .wire_fields import WireField, WireFieldTable, WireKind

__all__ = [
    "DeserializationError",
    "ExtensibleObject",
    "ExtensionKeyConflict",
    "ExtensionMap",
    "ExtensionPolicy",
    "MissingRequiredField",
    "SchemaTypeMismatch",
    "VENDOR_EXTENSION_PREFIX",
    "WireField",
    "WireFieldTable",
    "WireInput",
    "WireKind",
]
