"""
Exception types raised by histobook.
"""
from __future__ import annotations


class HistobookError(Exception):
    """Base class for all histobook errors."""


class InvalidParameterError(HistobookError, ValueError):
    """A distribution was constructed with an unusable range or bucket count."""


class InvalidSeriesNameError(HistobookError, ValueError):
    """A series name cannot be written as a column header."""


class ValueOutOfRangeError(HistobookError, ValueError):
    """A value fell below the distribution minimum (or was NaN)."""

    def __init__(self, series: str, value: float, minimum: float) -> None:
        self.series = series
        self.value = value
        self.minimum = minimum
        super().__init__(f"Value {value!r} for series '{series}' is below the distribution minimum {minimum!r}.")


class SinkStateError(HistobookError, RuntimeError):
    """A tabular sink was driven out of order (cell before row, row before table)."""
