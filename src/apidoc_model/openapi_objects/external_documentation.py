"""External documentation object."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from apidoc_model.extensible_objects import (
    ExtensibleObject,
    ExtensionMap,
    WireField,
    WireFieldTable,
)


@dataclass(frozen=True)
class ExternalDocumentation(ExtensibleObject):
    """Reference to an external resource for extended documentation."""

    url: str = ""
    description: str | None = None
    extensions: ExtensionMap = field(default_factory=ExtensionMap)

    WIRE_FIELDS: ClassVar[WireFieldTable] = WireFieldTable(
        WireField("url", "url", required=True),
        WireField("description", "description"),
    )

    def with_url(self, url: str) -> ExternalDocumentation:
        return self._with_field("url", url)

    def with_description(self, description: str) -> ExternalDocumentation:
        """Set a description; CommonMark may be used for rich text."""
        return self._with_field("description", description)
