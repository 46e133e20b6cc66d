#!/usr/bin/env python3
"""
Command-line front end for the Weather Observation Table Analyzer.

Loads a weatherAUS-style CSV file, runs one query, prints the text table
and saves the selected rows to a CSV export.

Usage:
    python cli.py weatherAUS location
    python cli.py weatherAUS.csv location --location Perth --years 2010 2011
    python cli.py weatherAUS.csv rainfall --output rain.csv
    python cli.py weatherAUS.csv sunshine --output sunny_days.csv
    python cli.py weatherAUS.csv stats
"""

import sys
import os
import argparse
import logging

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from config import (
    DEFAULT_LOCATION,
    DEFAULT_YEARS,
    FormatConfig,
    GROUP_HEAD_TAIL,
    LOCATION_EXPORT_NAME,
    RAINFALL_EXPORT_NAME,
    SUNSHINE_EXPORT_NAME,
    TABLE_HEAD_TAIL,
)
from data.loader import normalize_input_path, read_lines, write_export
from models.table import Table

logger = logging.getLogger("cli")

DEFAULT_OUTPUTS = {
    "location": LOCATION_EXPORT_NAME,
    "rainfall": RAINFALL_EXPORT_NAME,
    "sunshine": SUNSHINE_EXPORT_NAME,
}


def run_command(table: Table, args: argparse.Namespace) -> int:
    """Run the selected query, print it and save its export.

    Returns:
        Process exit status.
    """
    if args.command == "stats":
        print(table.statistics_report())
        return 0

    if args.command == "location":
        result = table.filter_by_location_and_years(args.location, args.years, args.rows)
    elif args.command == "rainfall":
        result = table.rainfall_by_location(args.rows)
    else:
        result = table.longest_sunshine(args.rows)

    print()
    print(result.text)

    output = args.output or DEFAULT_OUTPUTS[args.command]
    try:
        path = write_export(output, result.csv, table.fmt.encoding)
    except (OSError, ValueError) as e:
        logger.error("Could not write %s: %s", output, e)
        print("An error occurred while writing data to the file")
        return 1
    print(f"Data was saved in the file: {path}\n")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Weather observation table analyzer")
    parser.add_argument("file", help="CSV file name or path (.csv is appended when missing)")
    parser.add_argument(
        "command",
        choices=["location", "rainfall", "sunshine", "stats"],
        help="Query to run",
    )
    parser.add_argument("--location", default=DEFAULT_LOCATION, help="Location for the location query")
    parser.add_argument("--years", type=int, nargs="+", default=list(DEFAULT_YEARS),
                        help="Years for the location query (e.g., --years 2009 2010)")
    parser.add_argument("--output", default=None, help="Export file (default depends on the query)")
    parser.add_argument("--rows", type=int, default=None,
                        help="Rows shown from each end before truncating (0 shows all)")
    parser.add_argument("--encoding", default=None, help="Input encoding (sniffed from BOM by default)")
    parser.add_argument("--decimal-separator", default=".", help="Decimal separator in reports")
    parser.add_argument("--precision", type=int, default=None, help="Fraction digits in reports")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.rows is None:
        args.rows = GROUP_HEAD_TAIL if args.command == "rainfall" else TABLE_HEAD_TAIL

    try:
        fmt = FormatConfig(decimal_separator=args.decimal_separator, precision=args.precision)
        path = normalize_input_path(args.file)
        lines = read_lines(path, args.encoding)
    except FileNotFoundError:
        print(f"File not found: {args.file}")
        return 1
    except (OSError, ValueError, LookupError) as e:
        print(f"Could not load {args.file}: {e}")
        return 1

    table = Table(lines, fmt)
    if table.rejected_count:
        print(f"Skipped {table.rejected_count} blank rows")
    return run_command(table, args)


if __name__ == "__main__":
    sys.exit(main())
