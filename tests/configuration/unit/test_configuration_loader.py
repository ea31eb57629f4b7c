"""Configuration loader tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from apidoc_model.configuration.loader import (
    ConfigurationError,
    default_configuration,
    load_configuration,
)
from apidoc_model.extensible_objects import ExtensionPolicy
from apidoc_model.wire_codec import DocumentFormat


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_loads_yaml_configuration(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "config.yaml",
        """
output:
  format: YAML
  indent: 4
deserialization:
  extension_policy: vendor_prefixed
logging:
  level: debug
""",
    )

    configuration = load_configuration(config_path)

    assert configuration.path == config_path
    assert configuration.output.document_format is DocumentFormat.YAML
    assert configuration.output.indent == 4
    assert configuration.deserialization.extension_policy is ExtensionPolicy.VENDOR_PREFIXED
    assert configuration.logging.level == "DEBUG"


def test_empty_file_uses_defaults(tmp_path: Path) -> None:
    configuration = load_configuration(_write_file(tmp_path / "config.yaml", ""))

    assert configuration.output.document_format is None
    assert configuration.output.indent == 2
    assert configuration.deserialization.extension_policy is ExtensionPolicy.KEEP_ALL
    assert configuration.logging.level == "WARNING"
    assert configuration.output == default_configuration().output


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="not found"):
        load_configuration(tmp_path / "missing.yaml")


def test_root_must_be_mapping(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="root must be a mapping"):
        load_configuration(_write_file(tmp_path / "config.yaml", "- a\n- b\n"))


def test_unknown_extension_policy_lists_allowed_values(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "config.yaml", "deserialization:\n  extension_policy: strict\n"
    )

    with pytest.raises(ConfigurationError, match="keep_all, vendor_prefixed"):
        load_configuration(config_path)


def test_unknown_output_format_is_rejected(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "config.yaml", "output:\n  format: toml\n")

    with pytest.raises(ConfigurationError, match="output.format must be one of"):
        load_configuration(config_path)


@pytest.mark.parametrize("indent", ["0", "true", "'2'"])
def test_indent_must_be_positive_integer(tmp_path: Path, indent: str) -> None:
    config_path = _write_file(tmp_path / "config.yaml", f"output:\n  indent: {indent}\n")

    with pytest.raises(ConfigurationError, match="output.indent"):
        load_configuration(config_path)


def test_section_must_be_mapping(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "config.yaml", "logging: loud\n")

    with pytest.raises(ConfigurationError, match="'logging' must be a mapping"):
        load_configuration(config_path)


def test_unknown_log_level_is_rejected(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "config.yaml", "logging:\n  level: chatty\n")

    with pytest.raises(ConfigurationError, match="logging.level"):
        load_configuration(config_path)
