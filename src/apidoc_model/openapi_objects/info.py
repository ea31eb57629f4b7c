"""API metadata objects: info, contact and license."""

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


@dataclass(frozen=True)
class Contact(ExtensibleObject):
    """Contact information for the exposed API. Every field is optional."""

    name: str | None = None
    url: str | None = None
    email: str | None = None
    extensions: ExtensionMap = field(default_factory=ExtensionMap)

    WIRE_FIELDS: ClassVar[WireFieldTable] = WireFieldTable(
        WireField("name", "name"),
        WireField("url", "url"),
        WireField("email", "email"),
    )

    def with_name(self, name: str) -> Contact:
        return self._with_field("name", name)

    def with_url(self, url: str) -> Contact:
        return self._with_field("url", url)

    def with_email(self, email: str) -> Contact:
        return self._with_field("email", email)


@dataclass(frozen=True)
class License(ExtensibleObject):
    """License information for the exposed API.

    ``identifier`` holds an SPDX expression and is an alternative to ``url``;
    both are kept as given.
    """

    name: str = ""
    identifier: str | None = None
    url: str | None = None
    extensions: ExtensionMap = field(default_factory=ExtensionMap)

    WIRE_FIELDS: ClassVar[WireFieldTable] = WireFieldTable(
        WireField("name", "name", required=True),
        WireField("identifier", "identifier"),
        WireField("url", "url"),
    )

    def with_identifier(self, identifier: str) -> License:
        return self._with_field("identifier", identifier)

    def with_url(self, url: str) -> License:
        return self._with_field("url", url)


@dataclass(frozen=True)
class Info(ExtensibleObject):  # pylint: disable=too-many-instance-attributes
    """Metadata about the API: title and version plus optional descriptive fields."""

    title: str = ""
    version: str = ""
    summary: str | None = None
    description: str | None = None
    terms_of_service: str | None = None
    contact: Contact | None = None
    license: License | None = None
    extensions: ExtensionMap = field(default_factory=ExtensionMap)

    WIRE_FIELDS: ClassVar[WireFieldTable] = WireFieldTable(
        WireField("title", "title", required=True),
        WireField("version", "version", required=True),
        WireField("summary", "summary"),
        WireField("description", "description"),
        WireField("terms_of_service", "termsOfService"),
        WireField("contact", "contact", kind=WireKind.OBJECT, object_type=Contact),
        WireField("license", "license", kind=WireKind.OBJECT, object_type=License),
    )

    def with_summary(self, summary: str) -> Info:
        return self._with_field("summary", summary)

    def with_description(self, description: str) -> Info:
        return self._with_field("description", description)

    def with_terms_of_service(self, terms_of_service: str) -> Info:
        """Set the URL of the terms of service."""
        return self._with_field("terms_of_service", terms_of_service)

    def with_contact(self, contact: Contact) -> Info:
        return self._with_field("contact", contact)

    def with_license(self, license: License) -> Info:  # pylint: disable=redefined-builtin
        return self._with_field("license", license)
