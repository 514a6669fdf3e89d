import asyncio
import json
from datetime import date
from pathlib import Path

import pytest

from clover_reader.datasource.base import DataSourceError
from clover_reader.datasource.file_source import FileSummaryDataSource
from helpers import labels, settled

SAMPLE_DATA = Path(__file__).resolve().parents[1] / "data" / "clover.json"


def _document(rows: list[tuple[str, int, int]]) -> dict:
    return {
        "data": {
            "cloverSummary": [
                {
                    "index": i,
                    "month": month,
                    "summary": {
                        "settledTransactionsTotal": s,
                        "authorizedTransactionsTota": a,
                    },
                }
                for i, (month, s, a) in enumerate(rows, start=1)
            ]
        }
    }


def test_fetch_returns_normalized_window(tmp_path):
    path = tmp_path / "clover.json"
    path.write_text(json.dumps(_document([("Feb 26", 3, 1), ("Dec 25", 2, 1), ("Jan 24", 9, 9)])))
    source = FileSummaryDataSource(path, today=lambda: date(2026, 2, 17))

    result = asyncio.run(source.fetch(3))

    assert labels(result) == ["Nov 25", "Dec 25", "Jan 26", "Feb 26"]
    assert settled(result) == [0, 2, 0, 3]
    assert [e.index for e in result] == [1, 2, 3, 4]


def test_fetch_reads_shipped_sample_data():
    source = FileSummaryDataSource(SAMPLE_DATA, today=lambda: date(2026, 10, 16))

    result = asyncio.run(source.fetch(6))

    assert labels(result) == ["Apr 26", "May 26", "Jun 26", "Jul 26", "Aug 26", "Sep 26", "Oct 26"]
    # Jun 26 is absent from the sample export
    assert result[2].summary.settled_transactions_total == 0
    assert all(e.summary.settled_transactions_total > 0 for i, e in enumerate(result) if i != 2)


def test_fetch_missing_file_raises(tmp_path):
    source = FileSummaryDataSource(tmp_path / "nope.json")

    with pytest.raises(DataSourceError, match="File not found"):
        asyncio.run(source.fetch(6))


def test_fetch_invalid_json_raises(tmp_path):
    path = tmp_path / "clover.json"
    path.write_text("{not json")

    with pytest.raises(DataSourceError, match="Invalid summary document"):
        asyncio.run(FileSummaryDataSource(path).fetch(6))


def test_fetch_negative_total_raises(tmp_path):
    path = tmp_path / "clover.json"
    path.write_text(json.dumps(_document([("Feb 26", -1, 0)])))

    with pytest.raises(DataSourceError):
        asyncio.run(FileSummaryDataSource(path).fetch(1))


def test_fetch_empty_document_yields_zero_window(tmp_path):
    path = tmp_path / "clover.json"
    path.write_text("{}")
    source = FileSummaryDataSource(path, today=lambda: date(2026, 2, 17))

    result = asyncio.run(source.fetch(1))

    assert labels(result) == ["Jan 26", "Feb 26"]
    assert settled(result) == [0, 0]


def test_aclose_is_a_no_op(tmp_path):
    source = FileSummaryDataSource(tmp_path / "clover.json")

    assert asyncio.run(source.aclose()) is None
