"""Info, contact and license object tests."""

from __future__ import annotations

import pytest
from apidoc_model.extensible_objects import MissingRequiredField, SchemaTypeMismatch
from apidoc_model.openapi_objects import Contact, Info, License


def _sample_info() -> Info:
    return (
        Info(title="Petstore", version="1.0.0")
        .with_summary("A pet store")
        .with_terms_of_service("https://example.com/terms")
        .with_contact(Contact().with_name("API Support").with_email("support@example.com"))
        .with_license(License("Apache 2.0").with_identifier("Apache-2.0"))
        .with_extensions({"x-logo": {"url": "https://example.com/logo.png"}})
    )


def test_info_serializes_in_declaration_order_with_renamed_keys() -> None:
    wire = _sample_info().to_wire()

    assert list(wire) == [
        "title",
        "version",
        "summary",
        "termsOfService",
        "contact",
        "license",
        "x-logo",
    ]
    assert wire["contact"] == {"name": "API Support", "email": "support@example.com"}
    assert wire["license"] == {"name": "Apache 2.0", "identifier": "Apache-2.0"}
    assert "terms_of_service" not in wire


def test_info_round_trip() -> None:
    info = _sample_info()

    assert Info.from_wire(info.to_wire()) == info


def test_info_reports_first_missing_required_field_in_declaration_order() -> None:
    with pytest.raises(MissingRequiredField) as exc_info:
        Info.from_wire({"description": "no title or version"})

    assert exc_info.value.field_name == "title"


def test_info_requires_version() -> None:
    with pytest.raises(MissingRequiredField) as exc_info:
        Info.from_wire({"title": "Petstore"})

    assert exc_info.value.field_name == "version"


def test_contact_has_no_required_fields() -> None:
    contact = Contact.from_wire({"x-team": "platform"})

    assert contact == Contact().with_extensions({"x-team": "platform"})
    assert contact.to_wire() == {"x-team": "platform"}


def test_license_type_mismatch_inside_info_is_prefixed() -> None:
    with pytest.raises(SchemaTypeMismatch) as exc_info:
        Info.from_wire({"title": "t", "version": "1", "license": {"name": ["MIT"]}})

    assert exc_info.value.key == "license.name"
    assert exc_info.value.expected_type == "string"


def test_required_fields_are_written_before_optional_fields() -> None:
    wire = Info(title="t", version="1").with_summary("s").to_wire()

    assert list(wire) == ["title", "version", "summary"]
