"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from tuple_schema.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    load_schema_catalog,
    resolve_descriptor,
    write_placeholder_configuration,
)
from tuple_schema.layout_reporting import write_layout_workbook
from tuple_schema.schema_descriptor import (
    SchemaComparison,
    SchemaDescriptor,
    SchemaDescriptorError,
)


class CliError(Exception):
    """Custom CLI error."""


_CONFIG_OPTION = click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the YAML/JSON schema definition file",
)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="tuple-schema")
@click.option("--verbose", is_flag=True, default=False, help="Enable debug logging on stderr.")
def cli(verbose: bool) -> None:
    """Fixed-layout row schema utility."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(name)s - %(levelname)s - %(message)s",
        )


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the schema definition file to write",
)
def generate_config(output_path: str) -> None:
    """Generate an example schema definition file with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="describe")
@_CONFIG_OPTION
@click.option("--schema", "schema_name", required=True, help="Name of the schema to describe")
def describe(config_path: str, schema_name: str) -> None:
    """Print the descriptor and row size of one schema."""
    descriptor = _load_descriptor(config_path, schema_name)
    _echo_descriptor(descriptor)


@cli.command(name="merge")
@_CONFIG_OPTION
@click.option("--left", "left_name", required=True, help="Schema providing the leading fields")
@click.option("--right", "right_name", required=True, help="Schema providing the trailing fields")
def merge(config_path: str, left_name: str, right_name: str) -> None:
    """Print the concatenation of two schemas."""
    left = _load_descriptor(config_path, left_name)
    right = _load_descriptor(config_path, right_name)
    _echo_descriptor(SchemaDescriptor.merge(left, right))


@cli.command(name="compare")
@_CONFIG_OPTION
@click.option("--left", "left_name", required=True, help="First schema name")
@click.option("--right", "right_name", required=True, help="Second schema name")
@click.option(
    "--mode",
    type=click.Choice([mode.value for mode in SchemaComparison]),
    default=SchemaComparison.BYTE_WIDTH.value,
    show_default=True,
    help="Compare per-position byte widths or exact field types",
)
def compare(config_path: str, left_name: str, right_name: str, mode: str) -> None:
    """Report whether two schemas are equal under the chosen comparison."""
    left = _load_descriptor(config_path, left_name)
    right = _load_descriptor(config_path, right_name)
    click.echo("equal" if left.equals(right, SchemaComparison(mode)) else "different")


@cli.command(name="export-layout")
@_CONFIG_OPTION
@click.option("--schema", "schema_name", required=True, help="Name of the schema to export")
@click.option(
    "--output",
    "output_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the layout workbook to write",
)
def export_layout(config_path: str, schema_name: str, output_path: str) -> None:
    """Write a workbook listing each field's width and byte offset."""
    descriptor = _load_descriptor(config_path, schema_name)
    try:
        written = write_layout_workbook(schema_name, descriptor, output_path)
    except (OSError, ValueError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(written))


def _load_descriptor(config_path: str, schema_name: str) -> SchemaDescriptor:
    try:
        return resolve_descriptor(load_schema_catalog(config_path), schema_name)
    except (ConfigurationError, SchemaDescriptorError, OSError) as exc:
        raise CliError(str(exc)) from exc


def _echo_descriptor(descriptor: SchemaDescriptor) -> None:
    click.echo(f"fields: {descriptor.num_fields()}")
    click.echo(f"size: {descriptor.get_size()}")
    click.echo(f"descriptor: {descriptor}")


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
