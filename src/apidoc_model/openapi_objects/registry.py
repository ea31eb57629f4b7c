"""Lookup of object kinds by their command-line name."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from apidoc_model.extensible_objects import ExtensibleObject

from .external_documentation import ExternalDocumentation
from .info import Contact, Info, License
from .server import Server, ServerVariable
from .tag import Tag


class ObjectKindError(Exception):
    """Raised when an object kind name is not registered."""


OBJECT_KINDS: Mapping[str, type[ExtensibleObject]] = MappingProxyType(
    {
        "tag": Tag,
        "external-docs": ExternalDocumentation,
        "contact": Contact,
        "license": License,
        "info": Info,
        "server": Server,
        "server-variable": ServerVariable,
    }
)


def resolve_object_kind(kind_name: str) -> type[ExtensibleObject]:
    """Return the object class registered under ``kind_name``."""
    normalized = kind_name.strip().lower()
    try:
        return OBJECT_KINDS[normalized]
    except KeyError as exc:
        available = ", ".join(OBJECT_KINDS)
        raise ObjectKindError(
            f"Unknown object kind '{kind_name}'. Available kinds: {available}"
        ) from exc
