"""Schema definition loader service."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from tuple_schema.field_types import FieldType, UnknownFieldTypeError
from tuple_schema.schema_descriptor import SchemaDescriptor

from .runtime_settings import ColumnDefinition, SchemaCatalog, SchemaDefinition

logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Raised when the schema definition file is invalid."""


def load_schema_catalog(config_path: Path | str) -> SchemaCatalog:
    """Load and validate a YAML/JSON file of schema definitions."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigurationError(f"Configuration file is not valid UTF-8: {path}") from exc
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    schemas_section = _require_mapping(parsed.get("schemas"), "schemas")
    schemas: dict[str, SchemaDefinition] = {}
    for raw_name, raw_definition in schemas_section.items():
        schema_name = _require_non_empty_string(raw_name, "schema name")
        schemas[schema_name] = _parse_schema_definition(schema_name, raw_definition)

    logger.debug("Loaded schemas %s from %s", sorted(schemas), path)
    return SchemaCatalog(path=path, schemas=schemas)


def resolve_descriptor(catalog: SchemaCatalog, schema_name: str) -> SchemaDescriptor:
    """Return the descriptor of one configured schema."""
    definition = catalog.schemas.get(schema_name)
    if definition is None:
        known = ", ".join(sorted(catalog.schemas)) or "<none>"
        raise ConfigurationError(
            f"Schema '{schema_name}' is not defined in {catalog.path} (known: {known})."
        )
    return definition.to_descriptor()


def _parse_schema_definition(schema_name: str, value: Any) -> SchemaDefinition:
    section = _require_mapping(value, f"schemas.{schema_name}")
    raw_fields = section.get("fields")
    if raw_fields is None:
        raw_fields = []
    if isinstance(raw_fields, str) or not isinstance(raw_fields, Sequence):
        raise ConfigurationError(f"schemas.{schema_name}.fields must be a list.")

    columns = tuple(
        _parse_column(raw_field, f"schemas.{schema_name}.fields[{index}]")
        for index, raw_field in enumerate(raw_fields)
    )
    return SchemaDefinition(name=schema_name, columns=columns)


def _parse_column(value: Any, label: str) -> ColumnDefinition:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"{label} must be a mapping.")
    type_label = _require_non_empty_string(value.get("type"), f"{label}.type")
    try:
        field_type = FieldType.from_label(type_label)
    except UnknownFieldTypeError as exc:
        raise ConfigurationError(f"{label}.type: {exc}") from exc
    name = _optional_name(value.get("name"), f"{label}.name")
    return ColumnDefinition(name=name, field_type=field_type)


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_name(value: Any, field_name: str) -> str | None:
    """Return the name exactly as configured; only null means absent."""
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    return value
