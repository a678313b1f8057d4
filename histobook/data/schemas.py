"""
Tabular output sink contract shared by the workbook and DataFrame writers.
"""
from __future__ import annotations

from typing import Iterable, Protocol, runtime_checkable


@runtime_checkable
class TabularSink(Protocol):
    """Receives a table as a stream: headers, then rows of typed cells.

    Cells are written left to right, once per column per row, in the order
    declared by ``set_headers``. ``close()`` persists the result and must be
    safe to call on every exit path.
    """

    def begin_table(self, name: str) -> object: ...

    def set_precision(self, digits: int) -> None: ...

    def set_headers(self, headers: Iterable[str]) -> None: ...

    def begin_row(self) -> None: ...

    def write_numeric_cell(self, value: float) -> None: ...

    def write_integer_cell(self, value: int) -> None: ...

    def close(self) -> object: ...
