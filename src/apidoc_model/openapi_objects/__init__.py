"""OpenAPI object kinds built on the extensible object contract."""

from .external_documentation import ExternalDocumentation
from .info import Contact, Info, License
from .registry import OBJECT_KINDS, ObjectKindError, resolve_object_kind
from .server import Server, ServerVariable
from .tag import Tag

__all__ = [
    "Contact",
    "ExternalDocumentation",
    "Info",
    "License",
    "OBJECT_KINDS",
    "ObjectKindError",
    "Server",
    "ServerVariable",
    "Tag",
    "resolve_object_kind",
]
