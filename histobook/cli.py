#!/usr/bin/env python3
"""
histobook CLI — bucket series values from a CSV into a distribution workbook.

USAGE:
  python -m histobook.cli distribute scores.csv --min 0 --max 1 --buckets 10
  python -m histobook.cli distribute scores.csv --min 0 --max 100 --buckets 20 --output out/scores.xlsx
  python -m histobook.cli distribute scores.csv --min 0 --max 1 --buckets 10 --csv
  python -m histobook.cli distribute data.csv --series-col group --value-col score --min 0 --max 1 --buckets 5
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from histobook.analytics.distributor import Distributor
from histobook.config import OUTPUT_FOLDER, SERIES_COLUMN, VALUE_COLUMN
from histobook.data.frame_sink import FrameSink
from histobook.data.loader import load_values, distribute_frame
from histobook.errors import HistobookError


def _default_output(input_path: Path, as_csv: bool) -> Path:
    suffix = ".csv" if as_csv else ".xlsx"
    return OUTPUT_FOLDER / f"{input_path.stem}_distribution{suffix}"


def cmd_distribute(args) -> int:
    """Build a distribution from a CSV and save it."""
    print("\n" + "=" * 70)
    print("  HISTOBOOK — DISTRIBUTION BUILDER")
    print("=" * 70)

    input_path = Path(args.input)
    try:
        dist = Distributor(args.min, args.max, args.buckets)
        df = load_values(input_path, args.series_col, args.value_col)
        distribute_frame(df, dist, args.series_col, args.value_col)
    except (HistobookError, KeyError, OSError) as e:
        print(f"\n  ERROR: {e}\n", file=sys.stderr)
        return 2

    print(f"\n  {len(df):,} values, {len(dist)} series, "
          f"{dist.bucket_count} buckets of width {dist.bucket_width:.{dist.precision}f}\n")
    for name in dist.series_names():
        print(f"   {name[:40]:<42}{dist.total(name):>10,}")

    out = Path(args.output) if args.output else _default_output(input_path, args.csv)
    try:
        if args.csv:
            with FrameSink(out) as sink:
                dist.render(sink)
        else:
            dist.save(out)
    except (HistobookError, OSError) as e:
        print(f"\n  ERROR: {e}\n", file=sys.stderr)
        return 2

    print(f"\nDistribution saved to: {out}\n")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="histobook — bucketed value distributions in styled workbooks",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Command")

    # distribute subcommand
    dist_parser = subparsers.add_parser("distribute", help="Bucket CSV values into a distribution")
    dist_parser.add_argument("input", help="CSV file with series and value columns")
    dist_parser.add_argument("--min", type=float, required=True, help="Minimum possible value")
    dist_parser.add_argument("--max", type=float, required=True, help="Maximum possible value")
    dist_parser.add_argument("--buckets", type=int, required=True, help="Number of buckets (>= 2)")
    dist_parser.add_argument("--series-col", default=SERIES_COLUMN, help=f"Series column (default: {SERIES_COLUMN})")
    dist_parser.add_argument("--value-col", default=VALUE_COLUMN, help=f"Value column (default: {VALUE_COLUMN})")
    dist_parser.add_argument("--output", help="Output file (default: under HISTOBOOK_OUTPUT_DIR)")
    dist_parser.add_argument("--csv", action="store_true", help="Write CSV instead of a workbook")
    dist_parser.set_defaults(func=cmd_distribute)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if not args.command:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
