"""
CSV loading for series/value data.
"""
from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from histobook.analytics.distributor import Distributor
from histobook.config import SERIES_COLUMN, VALUE_COLUMN

log = logging.getLogger(__name__)


def load_values(
    path: str | Path,
    series_col: str = SERIES_COLUMN,
    value_col: str = VALUE_COLUMN,
) -> pd.DataFrame:
    """Read a CSV of (series, value) rows.

    Series names are read as text; rows whose value is missing or not
    numeric are dropped.
    """
    path = Path(path)
    df = pd.read_csv(path, dtype={series_col: str})
    missing = [c for c in (series_col, value_col) if c not in df.columns]
    if missing:
        raise KeyError(f"{path.name}: missing column(s) {', '.join(missing)}")

    df = df[[series_col, value_col]].copy()
    df[value_col] = pd.to_numeric(df[value_col], errors="coerce")
    before = len(df)
    df = df.dropna(subset=[series_col, value_col])
    if len(df) < before:
        log.debug("Dropped %d row(s) with no usable value from %s.", before - len(df), path.name)
    return df


def distribute_frame(
    df: pd.DataFrame,
    distributor: Distributor,
    series_col: str = SERIES_COLUMN,
    value_col: str = VALUE_COLUMN,
) -> Distributor:
    """Count every row of ``df`` into ``distributor``, one series per group."""
    for name, group in df.groupby(series_col, sort=True):
        distributor.add_array(str(name), group[value_col].to_numpy(dtype=float))
    return distributor
