import argparse
import asyncio
import sys
from datetime import date
from pathlib import Path

from clover_reader.config import settings
from clover_reader.datasource.base import DataSourceError
from clover_reader.datasource.file_source import FileSummaryDataSource
from clover_reader.observability.logging import configure_logging
from clover_reader.render import render_json, render_table
from clover_reader.services.summary_service import SummaryService
from clover_reader.summary.cache import SlabCache
from clover_reader.summary.slabs import InvalidSlabError, SlabSet

DATE_FORMAT = "%Y-%m-%d"


def _parse_date(value: str) -> date:
    return date.fromisoformat(value)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Print the Clover transaction summary for the last N months "
        "(plus the current month) as a table and as JSON."
    )
    parser.add_argument(
        "months",
        nargs="?",
        type=int,
        default=settings.default_months,
        help=f"Window size in months, one of {settings.slabs} "
        f"(default: {settings.default_months})",
    )
    parser.add_argument(
        "--data-path",
        default=settings.data_path,
        help=f"Path to the clover.json export (default: {settings.data_path})",
    )
    parser.add_argument(
        "--as-of",
        type=_parse_date,
        default=None,
        help=f"Reference date in {DATE_FORMAT} (default: today).",
    )
    parser.add_argument(
        "--json-only",
        action="store_true",
        help="Print only the JSON document.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging(json_logs=False)

    slabs = SlabSet.of(settings.slabs)
    months = args.months
    if months not in slabs:
        supported = ", ".join(str(s) for s in slabs)
        print(f"Error: '{months}' is not a valid slab. Use one of: {supported}", file=sys.stderr)
        return 1

    data_path = Path(args.data_path).resolve()
    if not data_path.is_file():
        print(f"Error: File not found at {data_path}", file=sys.stderr)
        return 1

    as_of = args.as_of
    today = (lambda: as_of) if as_of else date.today
    service = SummaryService(
        FileSummaryDataSource(data_path, today=today),
        SlabCache(slabs=slabs, ttl_seconds=settings.cache_ttl_seconds),
        today=today,
    )

    try:
        entries = asyncio.run(service.get_data(months))
    except (InvalidSlabError, DataSourceError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not entries:
        print("Error: No data returned.", file=sys.stderr)
        return 1

    if not args.json_only:
        print()
        print(render_table(entries, months))
        print()
        print("=== JSON Output ===")
        print()
    print(render_json(entries))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
