"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from apidoc_model.extensible_objects import ExtensionPolicy
from apidoc_model.wire_codec import DocumentFormat


@dataclass(frozen=True)
class OutputSettings:
    """How normalized documents are rendered."""

    document_format: DocumentFormat | None = None
    indent: int = 2


@dataclass(frozen=True)
class DeserializationSettings:
    """How unknown wire keys are treated while reading objects."""

    extension_policy: ExtensionPolicy = ExtensionPolicy.KEEP_ALL


@dataclass(frozen=True)
class LoggingSettings:
    """Log level applied by the command line entry point."""

    level: str = "WARNING"


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path | None = None
    output: OutputSettings = field(default_factory=OutputSettings)
    deserialization: DeserializationSettings = field(default_factory=DeserializationSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)
