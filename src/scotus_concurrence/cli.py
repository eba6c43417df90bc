"""Command-line interface: SCDB preprocessing and a text concurrence viewer."""

import argparse
import sys
from pathlib import Path

from tqdm import tqdm

from scotus_concurrence.aggregate import compute_view, view_to_frame
from scotus_concurrence.canonicalize import Canonicalizer
from scotus_concurrence.config import (
    DEFAULT_MIN_SAMPLE,
    DEFAULT_OUTPUT_PATH,
    DEFAULT_START_PERIOD,
    SOURCE_LABEL,
)
from scotus_concurrence.filters import FilterState
from scotus_concurrence.output import load_dataset, write_dataset
from scotus_concurrence.parser import read_records
from scotus_concurrence.report import print_dataset_summary, print_view


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="scotus-preprocess",
        description="Convert SCDB justice-centered CSV files to the compact JSON artifact.",
        epilog=(
            "Download the 'Justice Centered - Organized by Supreme Court Citation' CSVs from "
            "https://scdb.la.psu.edu/ (legacy 1791-1945 and modern 1946-present releases)."
        ),
    )
    parser.add_argument("legacy_csv", type=Path, help="Legacy SCDB CSV (folded first)")
    parser.add_argument(
        "modern_csv", type=Path, help="Modern SCDB CSV (overwrites overlapping votes)"
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=DEFAULT_OUTPUT_PATH,
        help=f"Output JSON path (default: {DEFAULT_OUTPUT_PATH})",
    )

    args = parser.parse_args(argv)

    print("SCDB Data Preprocessing")
    print("=" * 60)

    sources = [("Legacy", args.legacy_csv), ("Modern", args.modern_csv)]
    for label, path in sources:
        if not path.exists():
            print(f"Error: {label} CSV file not found: {path}", file=sys.stderr)
            sys.exit(1)

    canon = Canonicalizer()
    parsed: list[tuple[str, list[dict[str, str]]]] = []
    for label, path in sources:
        print(f"\nReading {label.lower()} data from: {path}")
        rows = list(read_records(path))
        print(f"  Parsed {len(rows)} rows from {label.lower()} data")
        parsed.append((label, rows))

    print(f"\nProcessing {sum(len(rows) for _, rows in parsed)} total rows...")
    for label, rows in parsed:
        canon.add_source(tqdm(rows, desc=f"Folding {label.lower()}", unit="row"), label)

    dataset = canon.build(source=SOURCE_LABEL)
    print(f"  Found {dataset.total_cases} unique cases")
    print(f"  Found {dataset.total_members} unique justices")

    size = write_dataset(dataset, args.output)
    print_dataset_summary(
        dataset, output_path=args.output, file_size=size, rejected=dict(canon.rejected)
    )
    print("\nDone!")


def view_main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="scotus-concurrence",
        description="Print pairwise justice agreement for a range of terms.",
    )
    parser.add_argument(
        "--data",
        type=Path,
        default=DEFAULT_OUTPUT_PATH,
        help=f"Artifact written by scotus-preprocess (default: {DEFAULT_OUTPUT_PATH})",
    )
    parser.add_argument(
        "--start",
        type=int,
        default=None,
        help=(
            f"First term, inclusive (default: {DEFAULT_START_PERIOD}, or the earliest"
            " term when --end is earlier)"
        ),
    )
    parser.add_argument("--end", type=int, default=None, help="Last term (default: latest)")
    parser.add_argument(
        "--members",
        nargs="+",
        default=None,
        metavar="ID",
        help="Restrict to these justice identifiers, e.g. JGRoberts CThomas",
    )
    parser.add_argument(
        "--min-sample",
        type=int,
        default=DEFAULT_MIN_SAMPLE,
        help=(
            "Shared cases a pair needs to count toward the color scale "
            f"(default: {DEFAULT_MIN_SAMPLE})"
        ),
    )
    parser.add_argument(
        "--pairs-out",
        type=Path,
        default=None,
        help="Also write one row per justice pair to this CSV file",
    )

    args = parser.parse_args(argv)

    if args.start is not None and args.end is not None and args.start > args.end:
        parser.error(f"--start {args.start} is after --end {args.end}")
    if args.min_sample < 0:
        parser.error("--min-sample must be non-negative")

    if not args.data.exists():
        print(
            f"Error: data file not found: {args.data}. Run scotus-preprocess first.",
            file=sys.stderr,
        )
        sys.exit(1)

    dataset = load_dataset(args.data)
    if dataset.total_cases == 0:
        print(f"Error: no cases in {args.data}", file=sys.stderr)
        sys.exit(1)

    state = FilterState.for_dataset(dataset)
    if args.start is not None:
        state.set_start(args.start)
    elif args.end is not None and args.end < state.start:
        # An end before the default start opens the window from the first term
        state.set_start(state.lower)
    if args.end is not None:
        state.set_end(args.end)
    if args.members:
        state.select(args.members)
    state.set_min_sample(args.min_sample)

    filt = state.snapshot()
    print(f"Terms {filt.period_start} - {filt.period_end}")
    view = compute_view(dataset, filt)
    print_view(view, dataset)

    if args.pairs_out is not None:
        args.pairs_out.parent.mkdir(parents=True, exist_ok=True)
        view_to_frame(view, dataset).write_csv(args.pairs_out)
        print(f"\n  Saved: {args.pairs_out}")
