"""Schema definition entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from tuple_schema.field_types import FieldType
from tuple_schema.schema_descriptor import SchemaDescriptor


@dataclass(frozen=True)
class ColumnDefinition:
    """One configured column: a field type and an optional name."""

    name: str | None
    field_type: FieldType


@dataclass(frozen=True)
class SchemaDefinition:
    """Named, ordered list of column definitions."""

    name: str
    columns: tuple[ColumnDefinition, ...]

    def to_descriptor(self) -> SchemaDescriptor:
        """Build the schema descriptor for these columns."""
        return SchemaDescriptor.create(
            [column.field_type for column in self.columns],
            [column.name for column in self.columns],
        )


@dataclass(frozen=True)
class SchemaCatalog:
    """Top-level configuration aggregate."""

    path: Path
    schemas: Mapping[str, SchemaDefinition]
