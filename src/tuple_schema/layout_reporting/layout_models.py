"""Layout reporting entities."""

from __future__ import annotations

from dataclasses import dataclass

from tuple_schema.field_types import FieldType

LAYOUT_SHEET_NAME = "Layout"
SUMMARY_SHEET_NAME = "Summary"
LAYOUT_COLUMNS: tuple[str, ...] = ("Index", "Name", "Type", "Width", "Offset")
MAX_CELL_TEXT_LENGTH = 32767


@dataclass(frozen=True)
class FieldLayout:
    """Byte placement of one field inside a row."""

    index: int
    name: str | None
    field_type: FieldType
    width: int
    offset: int
