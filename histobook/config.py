"""
histobook — Configuration: output paths, sheet names, formatting limits.
"""
import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths — override with HISTOBOOK_OUTPUT_DIR for batch / container runs
# ---------------------------------------------------------------------------
OUTPUT_FOLDER = Path(os.environ.get("HISTOBOOK_OUTPUT_DIR", "data"))

# ---------------------------------------------------------------------------
# Distribution table layout
# ---------------------------------------------------------------------------
DISTRIBUTION_TABLE = "Distribution"
BUCKET_MIN_HEADER = "bucket_min"

# ---------------------------------------------------------------------------
# Workbook formatting
# ---------------------------------------------------------------------------
# Digits past the decimal point for numeric cells until a sink is told otherwise
DEFAULT_PRECISION = int(os.environ.get("HISTOBOOK_DEFAULT_PRECISION", "2"))

# Auto-sized columns never get narrower / wider than these (in characters)
MIN_COLUMN_WIDTH = 8
MAX_COLUMN_WIDTH = int(os.environ.get("HISTOBOOK_MAX_COLUMN_WIDTH", "55"))

# Extra room for the auto-filter dropdown arrow on table headers
TABLE_HEADER_PADDING = 4

TABLE_STYLE = "TableStyleMedium9"

# ---------------------------------------------------------------------------
# CSV input defaults (cli distribute)
# ---------------------------------------------------------------------------
SERIES_COLUMN = "series"
VALUE_COLUMN = "value"
