"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "apidoc-model.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration template for apidoc-model.
# Every setting is optional; the values below are the defaults.

output:
  # Output document format (json or yaml). Omit to reuse the input format.
  # format: "json"
  # Indentation width for rendered documents.
  indent: 2

deserialization:
  # keep_all keeps every unknown key as an extension.
  # vendor_prefixed keeps only keys starting with "x-" and drops the rest.
  extension_policy: "keep_all"

logging:
  # One of DEBUG, INFO, WARNING, ERROR, CRITICAL.
  level: "WARNING"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with defaults and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
