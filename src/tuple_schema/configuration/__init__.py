"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_schema_catalog, resolve_descriptor
from .runtime_settings import ColumnDefinition, SchemaCatalog, SchemaDefinition

__all__ = [
    "ColumnDefinition",
    "SchemaCatalog",
    "SchemaDefinition",
    "ConfigurationError",
    "load_schema_catalog",
    "resolve_descriptor",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
