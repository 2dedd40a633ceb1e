"""Layout reporting exports."""

from .layout_models import (
    LAYOUT_COLUMNS,
    LAYOUT_SHEET_NAME,
    MAX_CELL_TEXT_LENGTH,
    SUMMARY_SHEET_NAME,
    FieldLayout,
)
from .layout_report_writer import describe_layout, write_layout_workbook

__all__ = [
    "LAYOUT_COLUMNS",
    "LAYOUT_SHEET_NAME",
    "MAX_CELL_TEXT_LENGTH",
    "SUMMARY_SHEET_NAME",
    "FieldLayout",
    "describe_layout",
    "write_layout_workbook",
]
