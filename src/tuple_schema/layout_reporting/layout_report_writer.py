"""Row layout computation and workbook export."""

from __future__ import annotations

from pathlib import Path

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from tuple_schema.schema_descriptor import SchemaDescriptor

from .layout_models import (
    LAYOUT_COLUMNS,
    LAYOUT_SHEET_NAME,
    MAX_CELL_TEXT_LENGTH,
    SUMMARY_SHEET_NAME,
    FieldLayout,
)


def describe_layout(descriptor: SchemaDescriptor) -> tuple[FieldLayout, ...]:
    """Return each field with its width and byte offset inside a row."""
    layout: list[FieldLayout] = []
    offset = 0
    for index, field in enumerate(descriptor):
        width = field.field_type.length
        layout.append(
            FieldLayout(
                index=index,
                name=field.name,
                field_type=field.field_type,
                width=width,
                offset=offset,
            )
        )
        offset += width
    return tuple(layout)


def write_layout_workbook(
    schema_name: str,
    descriptor: SchemaDescriptor,
    output_path: Path | str,
) -> Path:
    """Write a workbook with the per-field layout and a summary sheet."""
    workbook = Workbook()
    sheet = workbook.active
    if sheet is None:
        raise RuntimeError("Workbook active sheet is not available.")
    assert isinstance(sheet, Worksheet)
    sheet.title = LAYOUT_SHEET_NAME

    for column_index, header in enumerate(LAYOUT_COLUMNS, start=1):
        sheet.cell(row=1, column=column_index, value=header).style = "Headline 3"
        sheet.column_dimensions[get_column_letter(column_index)].width = 14

    for row_index, entry in enumerate(describe_layout(descriptor), start=2):
        values = (entry.index, entry.name, str(entry.field_type), entry.width, entry.offset)
        for column_index, value in enumerate(values, start=1):
            sheet.cell(row=row_index, column=column_index, value=value)

    _write_summary_sheet(workbook, schema_name, descriptor)

    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(output)
    return output.resolve()


def _write_summary_sheet(workbook: Workbook, schema_name: str, descriptor: SchemaDescriptor) -> None:
    sheet = workbook.create_sheet(SUMMARY_SHEET_NAME)
    rendering = descriptor.to_string()
    truncated = len(rendering) > MAX_CELL_TEXT_LENGTH
    entries: list[tuple[str, object]] = [
        ("schema_name", schema_name),
        ("num_fields", descriptor.num_fields()),
        ("total_size", descriptor.get_size()),
        ("descriptor", rendering[:MAX_CELL_TEXT_LENGTH]),
        ("descriptor_truncated", truncated),
    ]
    for row_index, (key, value) in enumerate(entries, start=1):
        sheet.cell(row=row_index, column=1, value=key)
        sheet.cell(row=row_index, column=2, value=value)
