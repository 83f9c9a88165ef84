#!/usr/bin/env python3
"""Zero-padding census for numbered names and numeric columns.

Classifies each numbered sequence's padding convention:
- CONSISTENT: fixed zero-padded width (with unpadded overflow allowed)
- UNPADDED: plain numbers, no padding
- INCONSISTENT: same-magnitude numbers padded differently
- INCONCLUSIVE: not enough signal to decide
- EMPTY: no samples

Usage:
    python3 scripts/padding_census.py --dir renders/shot_010
    python3 scripts/padding_census.py --dir renders --recursive --min-count 3
    python3 scripts/padding_census.py --samples frames.txt
    python3 scripts/padding_census.py --db corpus.duckdb --table sections \\
        --column section_suffix --group-column doc_id

Structured JSON output goes to stdout; human messages go to stderr.
"""
from __future__ import annotations

import argparse
import importlib
import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from padcheck.census import CensusSummary, census_from_groups, census_from_names
from padcheck.io_utils import dumps_json, read_samples, save_json

log = logging.getLogger("padding_census")

UNGROUPED_KEY = "*"


@dataclass(frozen=True, slots=True)
class CensusConfig:
    """Resolved command-line configuration."""

    dir: Path | None = None
    recursive: bool = False
    samples: Path | None = None
    db: Path | None = None
    table: str | None = None
    column: str | None = None
    group_column: str | None = None
    min_count: int = 1
    output: Path | None = None


class CensusInputError(RuntimeError):
    """Raised when the requested input source cannot be read."""


# ---------------------------------------------------------------------------
# Input sources
# ---------------------------------------------------------------------------


def list_names(root: Path, *, recursive: bool = False) -> list[str]:
    """File paths relative to ``root``, sorted for stable output.

    Subdirectories stay in the path so sequences in sibling directories
    are never merged.
    """
    if not root.is_dir():
        raise CensusInputError(f"directory not found: {root}")
    files = root.rglob("*") if recursive else root.iterdir()
    return sorted(p.relative_to(root).as_posix() for p in files if p.is_file())


def quote_identifier(name: str) -> str:
    return '"' + name.replace('"', '""') + '"'


def fetch_groups(
    db_path: Path,
    *,
    table: str,
    column: str,
    group_column: str | None = None,
) -> dict[str, list[str]]:
    """Read a numeric column from DuckDB, optionally grouped by another."""
    if not db_path.exists():
        raise CensusInputError(f"database not found at {db_path}")

    duckdb = importlib.import_module("duckdb")
    value_sql = f"CAST({quote_identifier(column)} AS VARCHAR)"
    if group_column:
        select = f"CAST({quote_identifier(group_column)} AS VARCHAR), {value_sql}"
    else:
        select = f"'{UNGROUPED_KEY}', {value_sql}"
    sql = (
        f"SELECT {select} FROM {quote_identifier(table)} "
        f"WHERE {quote_identifier(column)} IS NOT NULL"
    )

    try:
        con = duckdb.connect(str(db_path), read_only=True)
    except duckdb.Error as exc:
        raise CensusInputError(f"cannot open database {db_path}: {exc}") from exc
    try:
        rows = con.execute(sql).fetchall()
    except duckdb.Error as exc:
        raise CensusInputError(f"query failed on {db_path}: {exc}") from exc
    finally:
        con.close()

    groups: dict[str, list[str]] = {}
    for key, value in rows:
        groups.setdefault(str(key), []).append(str(value))
    return groups


def run_census(config: CensusConfig) -> CensusSummary:
    """Dispatch to the configured source and classify every sequence."""
    if config.dir is not None:
        names = list_names(config.dir, recursive=config.recursive)
        log.info("Scanning %d files in %s", len(names), config.dir)
        return census_from_names(names, min_count=config.min_count)

    if config.samples is not None:
        if not config.samples.is_file():
            raise CensusInputError(f"samples file not found: {config.samples}")
        samples = read_samples(config.samples)
        log.info("Read %d samples from %s", len(samples), config.samples)
        return census_from_groups(
            {UNGROUPED_KEY: samples}, min_count=config.min_count,
        )

    if config.db is None:
        raise CensusInputError("one of --dir, --samples or --db is required")
    if not config.table or not config.column:
        raise CensusInputError("--db requires --table and --column")
    groups = fetch_groups(
        config.db,
        table=config.table,
        column=config.column,
        group_column=config.group_column,
    )
    log.info("Fetched %d groups from %s.%s", len(groups), config.table, config.column)
    return census_from_groups(groups, min_count=config.min_count)


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Zero-padding census for numbered names and numeric columns."
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--dir", type=Path,
        help="Directory whose file names form numbered sequences",
    )
    source.add_argument(
        "--samples", type=Path,
        help="File of numeric strings (.json, .jsonl, or one per line)",
    )
    source.add_argument(
        "--db", type=Path,
        help="Path to a DuckDB database",
    )
    parser.add_argument(
        "--recursive", action="store_true",
        help="Walk --dir recursively",
    )
    parser.add_argument("--table", help="Table to read with --db")
    parser.add_argument("--column", help="Numeric string column to classify")
    parser.add_argument(
        "--group-column",
        help="Classify --column separately per value of this column",
    )
    parser.add_argument(
        "--min-count", type=int, default=1,
        help="Skip sequences with fewer samples (default: 1)",
    )
    parser.add_argument(
        "--output", type=Path,
        help="Also write the JSON report to this path",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Verbose logging",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> CensusConfig:
    return CensusConfig(
        dir=args.dir,
        recursive=args.recursive,
        samples=args.samples,
        db=args.db,
        table=args.table,
        column=args.column,
        group_column=args.group_column,
        min_count=args.min_count,
        output=args.output,
    )


def log_summary(summary: CensusSummary) -> None:
    log.info(
        "Padding census (%d sequences, %d samples):",
        summary.total_sequences, summary.total_samples,
    )
    log.info("  Verdicts: %s", summary.kind_distribution)
    log.info("  Widths: %s", summary.width_distribution)
    for report in summary.reports:
        log.debug(
            "  %s: %s (n=%d, next=%s)",
            report.key, report.verdict.describe(), report.count, report.next_name,
        )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    if args.min_count < 0:
        parser.error("--min-count must be non-negative")

    config = config_from_args(args)
    try:
        summary = run_census(config)
    except (CensusInputError, ValueError) as exc:
        log.error("ERROR: %s", exc)
        return 1

    log_summary(summary)
    report = summary.to_dict()
    if config.output is not None:
        save_json(report, config.output)
        log.info("Wrote report to %s", config.output)

    sys.stdout.buffer.write(dumps_json(report))
    sys.stdout.buffer.write(b"\n")
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
