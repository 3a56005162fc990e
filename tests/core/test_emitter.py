# ABOUTME: Tests for the CSV record emitter
# ABOUTME: Checks header, column order and quoting of multi-line bodies

import csv
from datetime import datetime
from pathlib import Path

import pytest

from wikirights_export.core.emitter import CSV_COLUMNS, CsvRecordEmitter, build_output_path
from wikirights_export.core.models import NormalizedRecord


def _record(**overrides) -> NormalizedRecord:
    values = {
        "page_id": 7,
        "title": "דמי אבטלה",
        "url": "https://www.kolzchut.org.il/he/דמי_אבטלה",
        "article_type_label": "זכות",
        "content_area_label": "תעסוקה",
        "summary_text": "Short summary",
        "body_text": 'Line one, with comma\nLine "two"',
        "body_html": None,
        "category_labels": ["זכויות עובדים", "ביטוח לאומי"],
    }
    values.update(overrides)
    return NormalizedRecord(**values)


def _read_rows(path: Path) -> list[list[str]]:
    with open(path, newline="", encoding="utf-8-sig") as f:
        return list(csv.reader(f))


def test_build_output_path():
    path = build_output_path(Path("exports"), now=datetime(2024, 1, 31, 14, 25, 0))
    assert path == Path("exports") / "wiki_pages_20240131-142500.csv"


def test_header_written_on_enter(tmp_path):
    path = tmp_path / "out.csv"
    with CsvRecordEmitter(path):
        pass

    assert _read_rows(path) == [CSV_COLUMNS]


def test_rows_round_trip_with_quoting(tmp_path):
    path = tmp_path / "nested" / "out.csv"
    with CsvRecordEmitter(path) as emitter:
        emitter.emit(_record())
        emitter.emit(_record(page_id=8, body_html="<p>x</p>", category_labels=[]))

    rows = _read_rows(path)
    assert len(rows) == 3
    assert rows[1] == [
        "7",
        "דמי אבטלה",
        "https://www.kolzchut.org.il/he/דמי_אבטלה",
        "זכות",
        "תעסוקה",
        "Short summary",
        'Line one, with comma\nLine "two"',
        "",
        "זכויות עובדים\nביטוח לאומי",
    ]
    assert rows[2][7] == "<p>x</p>"
    assert rows[2][8] == ""
    assert emitter.rows_written == 2


def test_rows_flushed_before_close(tmp_path):
    path = tmp_path / "out.csv"
    with CsvRecordEmitter(path) as emitter:
        emitter.emit(_record())
        assert len(_read_rows(path)) == 2


def test_emit_outside_context_raises(tmp_path):
    emitter = CsvRecordEmitter(tmp_path / "out.csv")
    with pytest.raises(RuntimeError):
        emitter.emit(_record())
