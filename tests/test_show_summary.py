import json
from pathlib import Path

from scripts.show_summary import main

SAMPLE_DATA = Path(__file__).resolve().parents[1] / "data" / "clover.json"


def test_main_prints_table_and_json(capsys):
    code = main(["3", "--data-path", str(SAMPLE_DATA), "--as-of", "2026-02-17"])

    out = capsys.readouterr().out
    assert code == 0
    assert "=== Clover Transaction Summary (last 3 months) ===" in out
    assert "Nov 25" in out
    assert "=== JSON Output ===" in out
    assert '"cloverSummary"' in out


def test_main_json_only(capsys):
    code = main(["1", "--data-path", str(SAMPLE_DATA), "--as-of", "2026-02-17", "--json-only"])

    doc = json.loads(capsys.readouterr().out)
    assert code == 0
    assert [r["month"] for r in doc["data"]["cloverSummary"]] == ["Jan 26", "Feb 26"]


def test_main_rejects_invalid_slab(capsys):
    code = main(["5", "--data-path", str(SAMPLE_DATA)])

    assert code == 1
    assert "not a valid slab" in capsys.readouterr().err


def test_main_missing_file(tmp_path, capsys):
    code = main(["6", "--data-path", str(tmp_path / "missing.json")])

    assert code == 1
    assert "File not found" in capsys.readouterr().err
