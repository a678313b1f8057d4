"""
Reusable worksheet cell/row formatting helpers.
"""
from __future__ import annotations

from openpyxl.cell.cell import Cell
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from histobook.excel.styles import (
    HEADER_FONT, HEADER_FILL, HEADER_BORDER,
    DATA_FONT, THIN_BORDER,
    LEFT, RIGHT,
    INTEGER_FORMAT,
)


# ---------------------------------------------------------------------------
# Number formats
# ---------------------------------------------------------------------------

def decimal_format(precision: int) -> str:
    """Excel number format showing exactly ``precision`` fractional digits."""
    if precision <= 0:
        return "###0"
    return "###0." + "0" * precision


# ---------------------------------------------------------------------------
# Header row
# ---------------------------------------------------------------------------

def format_header_row(ws: Worksheet, row_num: int, num_cols: int, table_mode: bool = False) -> None:
    """Apply header styling to an entire row.

    Tables carry their own header look from the table style, so in table
    mode the header cells are only left-aligned.
    """
    for col in range(1, num_cols + 1):
        cell = ws.cell(row=row_num, column=col)
        cell.alignment = LEFT
        if not table_mode:
            cell.font = HEADER_FONT
            cell.fill = HEADER_FILL
            cell.border = HEADER_BORDER


# ---------------------------------------------------------------------------
# Data cells
# ---------------------------------------------------------------------------

def format_number_cell(cell: Cell, number_format: str, table_mode: bool = False) -> None:
    """Style a numeric data cell: right-aligned, with the given number format."""
    cell.number_format = number_format
    cell.alignment = RIGHT
    if not table_mode:
        cell.font = DATA_FONT
        cell.border = THIN_BORDER


def format_integer_cell(cell: Cell, table_mode: bool = False) -> None:
    format_number_cell(cell, INTEGER_FORMAT, table_mode)


# ---------------------------------------------------------------------------
# Auto column width
# ---------------------------------------------------------------------------

def _display_length(cell: Cell) -> int:
    value = cell.value
    if value is None:
        return 0
    if isinstance(value, float):
        # Approximate what the number format shows rather than repr() noise
        fmt = cell.number_format or ""
        digits = len(fmt.split(".", 1)[1]) if "." in fmt else 0
        return len(f"{value:.{digits}f}")
    return len(str(value))


def auto_column_width(
    ws: Worksheet,
    min_width: int = 8,
    max_width: int = 55,
    header_padding: int = 0,
) -> None:
    """Auto-fit column widths based on content length.

    ``header_padding`` is added to the header cell's length only (room for a
    table's filter arrow).
    """
    for column in ws.columns:
        column_letter = get_column_letter(column[0].column)
        max_length = 0
        for cell in column:
            length = _display_length(cell)
            if cell.row == 1:
                length += header_padding
            if length > max_length:
                max_length = length
        adjusted = min(max(max_length + 2, min_width), max_width)
        ws.column_dimensions[column_letter].width = adjusted
