"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from apidoc_model.extensible_objects import ExtensionPolicy
from apidoc_model.wire_codec import DocumentFormat

from .runtime_settings import (
    Configuration,
    DeserializationSettings,
    LoggingSettings,
    OutputSettings,
)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def default_configuration() -> Configuration:
    """Return the configuration used when no file is given."""
    return Configuration()


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    return Configuration(
        path=path,
        output=_parse_output_section(parsed.get("output")),
        deserialization=_parse_deserialization_section(parsed.get("deserialization")),
        logging=_parse_logging_section(parsed.get("logging")),
    )


def _parse_output_section(value: Any) -> OutputSettings:
    section = _optional_mapping(value, "output")
    format_value = _optional_string(section.get("format"), "output.format")
    document_format = None
    if format_value is not None:
        document_format = _require_choice(
            format_value.lower(), DocumentFormat, "output.format"
        )
    indent = _require_positive_int(section.get("indent", 2), "output.indent")
    return OutputSettings(document_format=document_format, indent=indent)


def _parse_deserialization_section(value: Any) -> DeserializationSettings:
    section = _optional_mapping(value, "deserialization")
    policy_value = _require_non_empty_string(
        section.get("extension_policy", ExtensionPolicy.KEEP_ALL.value),
        "deserialization.extension_policy",
    )
    policy = _require_choice(
        policy_value.lower(), ExtensionPolicy, "deserialization.extension_policy"
    )
    return DeserializationSettings(extension_policy=policy)


def _parse_logging_section(value: Any) -> LoggingSettings:
    section = _optional_mapping(value, "logging")
    level = _require_non_empty_string(section.get("level", "WARNING"), "logging.level").upper()
    if level not in _LOG_LEVELS:
        raise ConfigurationError(f"logging.level must be one of: {', '.join(_LOG_LEVELS)}.")
    return LoggingSettings(level=level)


def _require_choice(value: str, choices: Any, field_name: str) -> Any:
    try:
        return choices(value)
    except ValueError as exc:
        allowed = ", ".join(choice.value for choice in choices)
        raise ConfigurationError(f"{field_name} must be one of: {allowed}.") from exc


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
