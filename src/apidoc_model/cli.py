"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping
from pathlib import Path

import click

from apidoc_model.configuration import (
    DEFAULT_CONFIG_FILENAME,
    Configuration,
    ConfigurationError,
    default_configuration,
    load_configuration,
    write_placeholder_configuration,
)
from apidoc_model.extensible_objects import DeserializationError
from apidoc_model.openapi_objects import OBJECT_KINDS, ObjectKindError, resolve_object_kind
from apidoc_model.wire_codec import (
    DocumentCodecError,
    DocumentFormat,
    decode_objects,
    detect_format,
    encode_objects,
    parse_document_text,
    render_document_text,
)

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
_LOGGER = logging.getLogger("apidoc_model.cli")


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="apidoc-model")
@click.option(
    "--log-level",
    "log_level",
    required=False,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    help="Override the configured log level",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """Typed OpenAPI document objects with vendor extensions."""
    ctx.ensure_object(dict)
    ctx.obj["log_level"] = log_level.upper() if log_level else None


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML configuration template with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="kinds")
def list_kinds() -> None:
    """List object kinds and their wire keys (required keys marked with *)."""
    for kind_name, object_type in OBJECT_KINDS.items():
        wire_keys = ", ".join(
            f"{wire_field.wire_key}*" if wire_field.required else wire_field.wire_key
            for wire_field in object_type.WIRE_FIELDS
        )
        click.echo(f"{kind_name}: {wire_keys}")


@cli.command(name="normalize")
@click.option(
    "--kind",
    "kind_name",
    required=True,
    help="Object kind to read, e.g. tag, info or server (see `kinds`)",
)
@click.option(
    "--input",
    "input_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to a JSON/YAML document holding one object or a list of objects",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional path for the normalized document; printed to stdout otherwise",
)
@click.option(
    "--format",
    "output_format",
    required=False,
    type=click.Choice([item.value for item in DocumentFormat], case_sensitive=False),
    help="Output format; defaults to the configured format, then the input format",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to YAML configuration file",
)
@click.pass_context
def normalize(  # pylint: disable=too-many-arguments
    ctx: click.Context,
    kind_name: str,
    input_path: str,
    output_path: str | None,
    output_format: str | None,
    config_path: str | None,
) -> None:
    """Read objects, then write them back in canonical wire form."""
    try:
        configuration = _load_configuration(config_path)
        _configure_logging(ctx.obj.get("log_level") or configuration.logging.level)
        object_type = resolve_object_kind(kind_name)
        input_format = detect_format(input_path)
        payload = parse_document_text(Path(input_path).read_text(encoding="utf-8"), input_format)
        objects = decode_objects(
            payload,
            object_type,
            extension_policy=configuration.deserialization.extension_policy,
        )
        _LOGGER.info("read %d %s object(s) from %s", len(objects), kind_name, input_path)
        target_format = _resolve_output_format(output_format, configuration, input_format)
        text = render_document_text(
            encode_objects(objects, as_list=not isinstance(payload, Mapping)),
            target_format,
            indent=configuration.output.indent,
        )
        if output_path:
            Path(output_path).write_text(text, encoding="utf-8")
    except (
        ConfigurationError,
        ObjectKindError,
        DocumentCodecError,
        DeserializationError,
        OSError,
    ) as exc:
        raise CliError(str(exc)) from exc

    if output_path:
        click.echo(str(Path(output_path).resolve()))
    else:
        click.echo(text, nl=False)


def _load_configuration(config_path: str | None) -> Configuration:
    if config_path is None:
        return default_configuration()
    return load_configuration(config_path)


def _resolve_output_format(
    output_format: str | None, configuration: Configuration, input_format: DocumentFormat
) -> DocumentFormat:
    if output_format:
        return DocumentFormat(output_format.lower())
    return configuration.output.document_format or input_format


def _configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format=_LOG_FORMAT, stream=sys.stderr)
    logging.getLogger("apidoc_model").setLevel(level)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
