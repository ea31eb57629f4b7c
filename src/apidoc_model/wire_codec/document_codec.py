"""JSON/YAML text codec for wire-form objects."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

from apidoc_model.extensible_objects import (
    DeserializationError,
    ExtensibleObject,
    ExtensionPolicy,
)

_SUFFIX_FORMATS = {
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
}


class DocumentCodecError(Exception):
    """Raised when document text cannot be parsed or rendered."""


class DocumentFormat(str, Enum):
    """Supported document text formats."""

    JSON = "json"
    YAML = "yaml"


def detect_format(path: Path | str) -> DocumentFormat:
    """Infer the document format from the file suffix."""
    suffix = Path(path).suffix.lower()
    try:
        return DocumentFormat(_SUFFIX_FORMATS[suffix])
    except KeyError as exc:
        raise DocumentCodecError(
            f"Cannot infer document format from '{path}'; use a .json, .yaml or .yml file."
        ) from exc


def parse_document_text(text: str, document_format: DocumentFormat) -> Any:
    """Parse document text; duplicate mapping keys keep their last value."""
    if document_format is DocumentFormat.JSON:
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise DocumentCodecError(f"Invalid JSON document: {exc}") from exc
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DocumentCodecError(f"Invalid YAML document: {exc}") from exc


def render_document_text(payload: Any, document_format: DocumentFormat, *, indent: int = 2) -> str:
    """Render a wire payload, keeping key order as produced by serialization."""
    if document_format is DocumentFormat.JSON:
        try:
            return json.dumps(payload, indent=indent, ensure_ascii=False) + "\n"
        except (TypeError, ValueError) as exc:
            raise DocumentCodecError(f"Cannot render JSON document: {exc}") from exc
    try:
        return yaml.safe_dump(
            payload,
            sort_keys=False,
            allow_unicode=True,
            indent=indent,
            default_flow_style=False,
        )
    except yaml.YAMLError as exc:
        raise DocumentCodecError(f"Cannot render YAML document: {exc}") from exc


def decode_objects(
    payload: Any,
    object_type: type[ExtensibleObject],
    *,
    extension_policy: ExtensionPolicy = ExtensionPolicy.KEEP_ALL,
) -> tuple[ExtensibleObject, ...]:
    """Deserialize one object (mapping payload) or several (list payload).

    Errors from a list entry are re-raised with the entry index as key prefix.
    """
    if isinstance(payload, Mapping):
        return (object_type.from_wire(payload, extension_policy=extension_policy),)
    if isinstance(payload, Sequence) and not isinstance(payload, str):
        objects = []
        for index, entry in enumerate(payload):
            try:
                objects.append(object_type.from_wire(entry, extension_policy=extension_policy))
            except DeserializationError as exc:
                raise exc.nested_under(f"[{index}]") from exc
        return tuple(objects)
    raise DocumentCodecError("Document root must be a mapping or a list of mappings.")


def encode_objects(objects: Sequence[ExtensibleObject], *, as_list: bool) -> Any:
    """Serialize objects back to a payload shaped like the one they were read from."""
    if as_list:
        return [item.to_wire() for item in objects]
    if len(objects) != 1:
        raise DocumentCodecError("A mapping document must hold exactly one object.")
    return objects[0].to_wire()
