"""Server objects and their URL template variables."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import ClassVar

from apidoc_model.extensible_objects import (
    ExtensibleObject,
    ExtensionMap,
    WireField,
    WireFieldTable,
    WireKind,
)


@dataclass(frozen=True)
class ServerVariable(ExtensibleObject):
    """Substitution variable for a server URL template.

    ``enumeration`` is read from and written to the ``enum`` wire key.
    """

    default: str = ""
    enumeration: tuple[str, ...] | None = None
    description: str | None = None
    extensions: ExtensionMap = field(default_factory=ExtensionMap)

    WIRE_FIELDS: ClassVar[WireFieldTable] = WireFieldTable(
        WireField("default", "default", required=True),
        WireField("enumeration", "enum", kind=WireKind.STRING_LIST),
        WireField("description", "description"),
    )

    def with_enumeration(self, values: Iterable[str]) -> ServerVariable:
        return self._with_field("enumeration", tuple(values))

    def with_description(self, description: str) -> ServerVariable:
        return self._with_field("description", description)


@dataclass(frozen=True)
class Server(ExtensibleObject):
    """A server hosting the API, optionally with URL template variables."""

    url: str = ""
    description: str | None = None
    variables: Mapping[str, ServerVariable] | None = None
    extensions: ExtensionMap = field(default_factory=ExtensionMap)

    WIRE_FIELDS: ClassVar[WireFieldTable] = WireFieldTable(
        WireField("url", "url", required=True),
        WireField("description", "description"),
        WireField(
            "variables",
            "variables",
            kind=WireKind.OBJECT_MAP,
            object_type=ServerVariable,
        ),
    )

    def with_description(self, description: str) -> Server:
        return self._with_field("description", description)

    def with_variables(self, variables: Mapping[str, ServerVariable]) -> Server:
        return self._with_field("variables", dict(variables))

    def with_variable(self, name: str, variable: ServerVariable) -> Server:
        """Return a copy with one variable added or replaced, keeping the others."""
        variables = dict(self.variables or {})
        variables[name] = variable
        return self._with_field("variables", variables)
