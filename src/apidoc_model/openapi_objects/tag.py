"""Tag object used to group operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from apidoc_model.extensible_objects import (
    ExtensibleObject,
    ExtensionMap,
    WireField,
    WireFieldTable,
    WireKind,
)

from .external_documentation import ExternalDocumentation


@dataclass(frozen=True)
class Tag(ExtensibleObject):
    """Metadata for a single tag referenced by operations.

    A tag object is not mandatory for every tag an operation uses.

    Example:
      >>> Tag("pet").with_description("Pets operations").to_wire()
      {'name': 'pet', 'description': 'Pets operations'}
    """

    name: str = ""
    description: str | None = None
    external_docs: ExternalDocumentation | None = None
    extensions: ExtensionMap = field(default_factory=ExtensionMap)

    WIRE_FIELDS: ClassVar[WireFieldTable] = WireFieldTable(
        WireField("name", "name", required=True),
        WireField("description", "description"),
        WireField(
            "external_docs",
            "externalDocs",
            kind=WireKind.OBJECT,
            object_type=ExternalDocumentation,
        ),
    )

    def with_description(self, description: str) -> Tag:
        """Return a copy with the description set."""
        return self._with_field("description", description)

    def with_external_docs(self, external_docs: ExternalDocumentation) -> Tag:
        """Return a copy with external documentation attached."""
        return self._with_field("external_docs", external_docs)
