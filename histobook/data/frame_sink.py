"""
FrameSink — collects a streamed table into a pandas DataFrame (optionally CSV).
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

import pandas as pd

from histobook.config import DEFAULT_PRECISION
from histobook.errors import SinkStateError

log = logging.getLogger(__name__)


class FrameSink:
    """In-memory tabular sink.

    Only the most recent table is kept; ``close()`` builds ``self.frame`` and,
    when a path was given, writes it as CSV.
    """

    def __init__(self, path: str | Path | None = None, precision: int = DEFAULT_PRECISION) -> None:
        self.path = Path(path) if path is not None else None
        self.precision = precision
        self.name: Optional[str] = None
        self.frame: pd.DataFrame = pd.DataFrame()
        self._headers: list[str] = []
        self._rows: list[list] = []
        self._int_cols: set[int] = set()
        self._closed = False

    def __enter__(self) -> "FrameSink":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.close()
        return False

    def begin_table(self, name: str) -> None:
        if self._closed:
            raise SinkStateError("FrameSink has already been closed.")
        self.name = name
        self._headers = []
        self._rows = []
        self._int_cols = set()

    def set_precision(self, digits: int) -> None:
        self.precision = max(0, int(digits))

    def set_headers(self, headers: Iterable[str]) -> None:
        self._require_table()
        self._headers = list(headers)

    def begin_row(self) -> None:
        self._require_table()
        self._rows.append([])

    def _current_row(self) -> list:
        self._require_table()
        if not self._rows:
            raise SinkStateError("begin_row() must be called before writing cells.")
        return self._rows[-1]

    def write_numeric_cell(self, value: float) -> None:
        self._current_row().append(round(float(value), self.precision))

    def write_integer_cell(self, value: int) -> None:
        row = self._current_row()
        self._int_cols.add(len(row))
        row.append(int(value))

    def _require_table(self) -> None:
        if self._closed:
            raise SinkStateError("FrameSink has already been closed.")
        if self.name is None:
            raise SinkStateError("begin_table() must be called before writing rows.")

    def close(self) -> pd.DataFrame:
        """Build the DataFrame (and write the CSV, if a path was given)."""
        if self._closed:
            return self.frame
        self._closed = True
        df = pd.DataFrame(self._rows, columns=self._headers or None)
        for idx in sorted(self._int_cols):
            if idx < len(df.columns):
                # by position: header names need not be unique
                df.isetitem(idx, df.iloc[:, idx].astype("int64"))
        self.frame = df
        if self.path is not None:
            log.info("Saving %s table to %s.", self.name, self.path)
            self.path.parent.mkdir(parents=True, exist_ok=True)
            df.to_csv(self.path, index=False)
        return df
