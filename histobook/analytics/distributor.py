"""
Distributor — bucketed value distributions for named series.

The constructor takes a minimum, a maximum, and a number of buckets. Each
value added carries a series name and is counted in the bucket covering it.
The result renders as a table with one row per bucket and one column per
series, either into a styled workbook (``save``) or a DataFrame
(``to_frame``).
"""
from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Iterable, Optional

import numpy as np
import pandas as pd
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE

from histobook.config import BUCKET_MIN_HEADER, DISTRIBUTION_TABLE
from histobook.data.frame_sink import FrameSink
from histobook.data.schemas import TabularSink
from histobook.errors import InvalidParameterError, InvalidSeriesNameError, ValueOutOfRangeError
from histobook.excel.writer import WorkbookSink

log = logging.getLogger(__name__)


def suggested_precision(maximum: float, n: int) -> int:
    """Fractional digits worth showing for bucket edges of ``n`` buckets up to ``maximum``.

    Large maxima with few buckets need no decimals; small maxima split into
    many buckets need more.
    """
    magnitude = math.ceil(math.log10(abs(maximum))) if maximum != 0 else 0
    digits = magnitude + 1
    divisor = math.ceil(math.log10(abs(n))) + 1
    return max(0, divisor - digits)


def check_series_name(name: str) -> None:
    """Reject names that cannot become a distinct, writable column header."""
    if name == BUCKET_MIN_HEADER:
        raise InvalidSeriesNameError(f"'{BUCKET_MIN_HEADER}' is reserved for the bucket boundary column.")
    if ILLEGAL_CHARACTERS_RE.search(name):
        raise InvalidSeriesNameError(f"Series name {name!r} contains control characters.")


class Distributor:
    """Counts values into ``n`` equal-width buckets spanning [minimum, maximum].

    The last bucket is closed at ``maximum``; anything at or above it is
    counted there. Values below ``minimum`` (and NaN) are rejected with
    ``ValueOutOfRangeError``. Series names must differ from ``bucket_min``
    and be free of control characters (``InvalidSeriesNameError``).

    Not thread-safe: concurrent producers must serialize their calls.
    """

    def __init__(self, minimum: float, maximum: float, n: int) -> None:
        if not float(n).is_integer():
            raise InvalidParameterError(f"Bucket count must be a whole number, not {n!r}.")
        if n <= 1:
            raise InvalidParameterError("Cannot create a distribution with less than 2 buckets.")
        if not (math.isfinite(minimum) and math.isfinite(maximum)):
            raise InvalidParameterError("Range limits must be finite numbers.")
        if minimum >= maximum:
            raise InvalidParameterError("Minimum of range must be less than maximum.")
        self._minimum = float(minimum)
        self._maximum = float(maximum)
        self._n = int(n)
        self._width = (self._maximum - self._minimum) / self._n
        self._precision = suggested_precision(self._maximum, self._n)
        self._buckets: dict[str, np.ndarray] = {}

    # ------------------------------------------------------------------
    # Parameters
    # ------------------------------------------------------------------

    @property
    def minimum(self) -> float:
        return self._minimum

    @property
    def maximum(self) -> float:
        return self._maximum

    @property
    def bucket_count(self) -> int:
        return self._n

    @property
    def bucket_width(self) -> float:
        return self._width

    @property
    def precision(self) -> int:
        """Recommended display precision for bucket boundaries."""
        return self._precision

    # ------------------------------------------------------------------
    # Ingestion
    # ------------------------------------------------------------------

    def _series(self, name: str) -> np.ndarray:
        buckets = self._buckets.get(name)
        if buckets is None:
            check_series_name(name)
            buckets = np.zeros(self._n, dtype=np.int64)
            self._buckets[name] = buckets
        return buckets

    def _indices(self, name: str, values: np.ndarray) -> np.ndarray:
        """Bucket index for each value, clamped to the last bucket at the top."""
        bad = np.isnan(values) | (values < self._minimum)
        if bad.any():
            raise ValueOutOfRangeError(name, float(values[bad][0]), self._minimum)
        with np.errstate(over="ignore", invalid="ignore"):
            raw = np.floor((values - self._minimum) / self._width)
        # +inf and anything that rounds past the top lands in the last bucket
        raw = np.where(values >= self._maximum, self._n - 1, raw)
        return np.minimum(raw, self._n - 1).astype(np.int64)

    def add_value(self, name: str, value: float) -> None:
        """Count one value in a series."""
        self.add_values(name, value)

    def add_values(self, name: str, *values: float) -> None:
        """Count several values in a series."""
        self.add_array(name, values)

    def add_array(self, name: str, values: Iterable[float] | np.ndarray | pd.Series) -> None:
        """Count an array-like of values in a series.

        Every value is checked before anything is counted, so a rejected
        batch leaves the series unchanged (though it is still created).
        """
        arr = np.asarray(values, dtype=float).ravel()
        buckets = self._series(name)
        if arr.size == 0:
            return
        idx = self._indices(name, arr)
        np.add.at(buckets, idx, 1)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_buckets(self, name: str) -> Optional[np.ndarray]:
        """Read-only view of a series' counts, or None if it was never added."""
        buckets = self._buckets.get(name)
        if buckets is None:
            return None
        view = buckets.view()
        view.flags.writeable = False
        return view

    def lower_bound(self, idx: int) -> float:
        """Inclusive lower edge of bucket ``idx``."""
        return self._minimum + idx * self._width

    def series_names(self) -> list[str]:
        return sorted(self._buckets)

    def total(self, name: str) -> int:
        """Number of values counted for a series (0 if it does not exist)."""
        buckets = self._buckets.get(name)
        return int(buckets.sum()) if buckets is not None else 0

    def __contains__(self, name: object) -> bool:
        return name in self._buckets

    def __len__(self) -> int:
        return len(self._buckets)

    def __repr__(self) -> str:
        return (f"Distributor(minimum={self._minimum!r}, maximum={self._maximum!r}, "
                f"n={self._n}, series={len(self._buckets)})")

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def render(self, sink: TabularSink) -> None:
        """Write the distribution table into an open sink.

        One header row (``bucket_min`` then the series names, sorted), then
        one row per bucket. Does not close the sink.
        """
        names = self.series_names()
        columns = [self._buckets[name] for name in names]
        sink.begin_table(DISTRIBUTION_TABLE)
        sink.set_precision(self._precision)
        sink.set_headers([BUCKET_MIN_HEADER, *names])
        for idx in range(self._n):
            sink.begin_row()
            sink.write_numeric_cell(self.lower_bound(idx))
            for buckets in columns:
                sink.write_integer_cell(int(buckets[idx]))

    def save(self, path: str | Path) -> Path:
        """Save the distribution as a styled workbook."""
        log.info("Saving distribution data to %s.", path)
        with WorkbookSink.open(path) as workbook:
            self.render(workbook)
        return workbook.path

    def to_frame(self) -> pd.DataFrame:
        """The distribution table as a DataFrame (bucket lower bounds in ``bucket_min``)."""
        with FrameSink() as sink:
            self.render(sink)
        return sink.frame
