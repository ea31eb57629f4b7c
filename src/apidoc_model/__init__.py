"""Typed OpenAPI document objects with vendor extensions."""

from .extensible_objects import (
    DeserializationError,
    ExtensibleObject,
    ExtensionKeyConflict,
    ExtensionMap,
    ExtensionPolicy,
    MissingRequiredField,
    SchemaTypeMismatch,
)
from .openapi_objects import (
    Contact,
    ExternalDocumentation,
    Info,
    License,
    Server,
    ServerVariable,
    Tag,
)

__all__ = [
    "Contact",
    "DeserializationError",
    "ExtensibleObject",
    "ExtensionKeyConflict",
    "ExtensionMap",
    "ExtensionPolicy",
    "ExternalDocumentation",
    "Info",
    "License",
    "MissingRequiredField",
    "SchemaTypeMismatch",
    "Server",
    "ServerVariable",
    "Tag",
]
