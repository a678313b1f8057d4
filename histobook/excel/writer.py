"""
WorkbookSink — streaming builder for styled, table-formatted Excel workbooks.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from openpyxl import Workbook
from openpyxl.cell.cell import Cell
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.filters import AutoFilter
from openpyxl.worksheet.table import Table, TableStyleInfo
from openpyxl.worksheet.worksheet import Worksheet

from histobook.config import (
    DEFAULT_PRECISION,
    MIN_COLUMN_WIDTH,
    MAX_COLUMN_WIDTH,
    TABLE_HEADER_PADDING,
    TABLE_STYLE,
)
from histobook.errors import SinkStateError
from histobook.excel.formatters import (
    decimal_format,
    format_header_row,
    format_number_cell,
    format_integer_cell,
    auto_column_width,
)

log = logging.getLogger(__name__)


class WorkbookSink:
    """Styled workbook built one row at a time.

    Each ``begin_table`` starts a new worksheet whose first row holds the
    headers. Data rows are added sequentially and cells left to right, so
    callers can stream data straight into the sheet. The workbook is written
    to disk by ``close()`` (also called on leaving a ``with`` block, even when
    the block raised).
    """

    def __init__(
        self,
        path: str | Path,
        precision: int = DEFAULT_PRECISION,
        max_width: int = MAX_COLUMN_WIDTH,
    ) -> None:
        self.path = Path(path)
        self.wb = Workbook()
        self.ws: Worksheet | None = None
        self.max_width = max_width
        self._first_sheet = True
        self._table_mode = False
        self._row = 0           # current 1-based row; 1 is the header row
        self._col = 0           # last column written in the current row
        self._max_cols = 0
        self._closed = False
        self.set_precision(precision)

    @classmethod
    def open(cls, path: str | Path, **kwargs) -> "WorkbookSink":
        """Create a sink for ``path``, failing early if it cannot be written."""
        path = Path(path)
        if path.is_dir():
            raise IsADirectoryError(f"Cannot write workbook: {path} is a directory.")
        path.parent.mkdir(parents=True, exist_ok=True)
        return cls(path, **kwargs)

    def __enter__(self) -> "WorkbookSink":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.close()
        return False

    # ------------------------------------------------------------------
    # Sheet management
    # ------------------------------------------------------------------

    def begin_table(self, name: str, table_mode: bool = True) -> Worksheet:
        """Start a new worksheet (re-uses the default sheet for the first call).

        ``name`` becomes the sheet title and, in table mode, the table's
        display name, so it must be valid as both.
        """
        self._check_open()
        self._finish_sheet()
        if self._first_sheet:
            ws = self.wb.active
            ws.title = name
            self._first_sheet = False
        else:
            ws = self.wb.create_sheet(title=name)
        log.debug("Started sheet %s (table mode %s).", ws.title, table_mode)
        self.ws = ws
        self._table_mode = table_mode
        self._row = 1
        self._col = 0
        self._max_cols = 0
        return ws

    def set_precision(self, digits: int) -> None:
        """Digits past the decimal point for numeric cells written from now on."""
        self.precision = max(0, int(digits))
        self._num_format = decimal_format(self.precision)

    def set_headers(self, headers: Iterable[str]) -> None:
        """Store the header row of the current sheet."""
        ws = self._require_sheet()
        headers = list(headers)
        for col_num, label in enumerate(headers, 1):
            ws.cell(row=1, column=col_num).value = label
        format_header_row(ws, 1, len(headers), self._table_mode)
        self._max_cols = max(self._max_cols, len(headers))

    # ------------------------------------------------------------------
    # Rows and cells
    # ------------------------------------------------------------------

    def begin_row(self) -> None:
        """Start a new data row below the last one."""
        self._require_sheet()
        self._row += 1
        self._col = 0

    def _next_cell(self) -> Cell:
        ws = self._require_sheet()
        if self._row < 2:
            raise SinkStateError("begin_row() must be called before writing cells.")
        self._col += 1
        self._max_cols = max(self._max_cols, self._col)
        return ws.cell(row=self._row, column=self._col)

    def write_numeric_cell(self, value: float) -> None:
        """Store a floating-point value at the current precision."""
        cell = self._next_cell()
        cell.value = float(value)
        format_number_cell(cell, self._num_format, self._table_mode)

    def write_integer_cell(self, value: int) -> None:
        cell = self._next_cell()
        cell.value = int(value)
        format_integer_cell(cell, self._table_mode)

    # ------------------------------------------------------------------
    # Finishing
    # ------------------------------------------------------------------

    def _finish_sheet(self) -> None:
        ws = self.ws
        if ws is None:
            return
        if self._table_mode and self._max_cols > 0:
            # Excel tables need at least one body row under the header
            last_row = max(self._row, 2)
            ref = f"A1:{get_column_letter(self._max_cols)}{last_row}"
            table = Table(displayName=ws.title, ref=ref, autoFilter=AutoFilter(ref=ref))
            table.tableStyleInfo = TableStyleInfo(
                name=TABLE_STYLE,
                showFirstColumn=False,
                showLastColumn=False,
                showRowStripes=True,
                showColumnStripes=False,
            )
            ws.add_table(table)
            log.debug("Created table %s over %s.", ws.title, ref)
        padding = TABLE_HEADER_PADDING if self._table_mode else 0
        auto_column_width(ws, MIN_COLUMN_WIDTH, self.max_width, padding)
        ws.freeze_panes = "A2"
        self.ws = None

    def close(self) -> Path:
        """Finish the current sheet and save the workbook to disk."""
        if self._closed:
            return self.path
        self._finish_sheet()
        log.info("Saving workbook to %s.", self.path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.wb.save(self.path)
        self._closed = True
        return self.path

    # ------------------------------------------------------------------
    # State checks
    # ------------------------------------------------------------------

    def _check_open(self) -> None:
        if self._closed:
            raise SinkStateError(f"Workbook {self.path} has already been saved.")

    def _require_sheet(self) -> Worksheet:
        self._check_open()
        if self.ws is None:
            raise SinkStateError("begin_table() must be called before writing to the workbook.")
        return self.ws
