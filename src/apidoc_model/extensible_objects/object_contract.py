"""Shared construction, serialization and deserialization for extensible objects."""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable, Mapping
from dataclasses import replace
from types import MappingProxyType
from typing import Any, ClassVar, Self

from .extension_map import ExtensionKeyConflict, ExtensionMap, ExtensionPairs, ExtensionPolicy
from .wire_errors import MissingRequiredField, SchemaTypeMismatch
from .wire_fields import WireFieldTable, WireKind

WireInput = Mapping[str, Any] | Iterable[tuple[str, Any]]

_LOGGER = logging.getLogger("apidoc_model.wire")
_LOGGER.addHandler(logging.NullHandler())


class ExtensibleObject:
    """Mixin for frozen dataclasses with typed fields plus vendor extensions.

    Subclasses declare their typed fields once in ``WIRE_FIELDS`` and end their
    field list with ``extensions``. The table drives both ``to_wire`` and
    ``from_wire`` so the two directions cannot drift apart.
    """

    WIRE_FIELDS: ClassVar[WireFieldTable]
    extensions: ExtensionMap

    def __post_init__(self) -> None:
        for wire_field in self.WIRE_FIELDS:
            value = getattr(self, wire_field.attribute)
            if value is None:
                continue
            if wire_field.kind is WireKind.STRING_LIST and not isinstance(value, tuple):
                object.__setattr__(self, wire_field.attribute, tuple(value))
            elif wire_field.kind is WireKind.OBJECT_MAP:
                object.__setattr__(self, wire_field.attribute, MappingProxyType(dict(value)))

        extensions = self.extensions
        if not isinstance(extensions, ExtensionMap):
            extensions = ExtensionMap(extensions)
            object.__setattr__(self, "extensions", extensions)
        conflict = extensions.first_conflict(self.WIRE_FIELDS.wire_keys)
        if conflict is not None:
            raise ExtensionKeyConflict(conflict, type(self).__name__)

    def with_extensions(self, extensions: ExtensionPairs) -> Self:
        """Return a copy with the pairs merged into the extensions (last write wins).

        Raises:
          ExtensionKeyConflict: If a key equals one of this kind's typed wire keys.
        """
        return replace(self, extensions=self.extensions.merged(extensions))  # type: ignore[type-var]

    def _with_field(self, attribute: str, value: Any) -> Self:
        return replace(self, **{attribute: value})  # type: ignore[type-var]

    def to_wire(self) -> dict[str, Any]:
        """Serialize to an ordered mapping of wire keys.

        Required fields come first as declared, absent optional fields are
        omitted, and extensions follow every typed field in insertion order.
        """
        wire: dict[str, Any] = {}
        for wire_field in self.WIRE_FIELDS:
            value = getattr(self, wire_field.attribute)
            if value is None and not wire_field.required:
                continue
            wire[wire_field.wire_key] = wire_field.encode(value)
        for key, value in self.extensions.items():
            wire[key] = copy.deepcopy(value)
        return wire

    @classmethod
    def from_wire(
        cls,
        data: WireInput,
        *,
        extension_policy: ExtensionPolicy = ExtensionPolicy.KEEP_ALL,
    ) -> Self:
        """Deserialize from a mapping or an ordered sequence of key/value pairs.

        Duplicate keys resolve to their last occurrence. Recognized keys are
        decoded in input order and the first failure is raised; required keys
        are checked afterwards in declaration order. ``null`` for an optional
        key leaves that field absent.

        Raises:
          SchemaTypeMismatch: If the input or a recognized value has the wrong type.
          MissingRequiredField: If a required wire key is absent.
        """
        values: dict[str, Any] = {}
        extensions: dict[str, Any] = {}
        for key, raw_value in _collapse_wire_pairs(data).items():
            wire_field = cls.WIRE_FIELDS.for_wire_key(key)
            if wire_field is not None:
                if raw_value is None and not wire_field.required:
                    continue
                values[wire_field.attribute] = wire_field.decode(raw_value, extension_policy)
            elif extension_policy.admits(key):
                _LOGGER.debug("%s: keeping unknown key '%s' as extension", cls.__name__, key)
                extensions[key] = raw_value
            else:
                _LOGGER.debug(
                    "%s: dropping unknown key '%s' under %s policy",
                    cls.__name__,
                    key,
                    extension_policy.value,
                )

        for wire_field in cls.WIRE_FIELDS.required_fields():
            if wire_field.attribute not in values:
                raise MissingRequiredField(wire_field.wire_key)
        return cls(**values, extensions=ExtensionMap(extensions))  # type: ignore[call-arg]


def _collapse_wire_pairs(data: WireInput) -> dict[str, Any]:
    """Flatten the input into a dict where later duplicates replace earlier values."""
    if isinstance(data, Mapping):
        pairs: Iterable[Any] = data.items()
    elif isinstance(data, (list, tuple)):
        pairs = data
    else:
        raise SchemaTypeMismatch("", WireKind.OBJECT.value, data)

    entries: dict[str, Any] = {}
    for pair in pairs:
        if not isinstance(pair, (tuple, list)) or len(pair) != 2:
            raise SchemaTypeMismatch("", WireKind.OBJECT.value, data)
        key, value = pair
        if not isinstance(key, str):
            raise SchemaTypeMismatch(str(key), "string key", key)
        entries[key] = value
    return entries
