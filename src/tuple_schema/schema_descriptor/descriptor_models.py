"""Schema descriptor entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from tuple_schema.field_types import FieldType


@dataclass(frozen=True)
class FieldDescriptor:
    """One (type, optional name) pair within a schema descriptor."""

    field_type: FieldType
    name: str | None

    def __str__(self) -> str:
        return f"{self.field_type}({_render_name(self.name)})"


class SchemaComparison(Enum):
    """How two schema descriptors are compared position by position."""

    BYTE_WIDTH = "byte-width"
    EXACT_TYPE = "exact-type"


def _render_name(name: str | None) -> str:
    return "null" if name is None else name
