# ABOUTME: CSV writer that appends one row per normalized record as the run progresses
# ABOUTME: Rows are flushed immediately so an aborted run keeps what it already wrote

from __future__ import annotations

import csv
from datetime import datetime
from pathlib import Path
from typing import IO

from wikirights_export.core.models import NormalizedRecord

CSV_COLUMNS = [
    "id",
    "title",
    "url",
    "articleType",
    "contentArea",
    "summary",
    "body",
    "bodyHtml",
    "categories",
]

CATEGORY_SEPARATOR = "\n"


def build_output_path(output_dir: Path, now: datetime | None = None) -> Path:
    """Timestamped export file name, e.g. ``wiki_pages_20240131-142500.csv``."""
    now = now or datetime.now()
    return Path(output_dir) / f"wiki_pages_{now:%Y%m%d-%H%M%S}.csv"


def record_to_row(record: NormalizedRecord) -> list[str | int]:
    """Flatten a record into the column order of CSV_COLUMNS."""
    return [
        record.page_id,
        record.title,
        record.url,
        record.article_type_label,
        record.content_area_label,
        record.summary_text,
        record.body_text,
        record.body_html or "",
        CATEGORY_SEPARATOR.join(record.category_labels),
    ]


class CsvRecordEmitter:
    """Append-only CSV sink for export records.

    Use as a context manager: the header is written on enter and the file is
    closed on exit, also when the run fails.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self.rows_written = 0
        self._file: IO[str] | None = None
        self._writer = None

    def __enter__(self) -> CsvRecordEmitter:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # utf-8-sig so spreadsheet tools detect the Hebrew text
        self._file = open(self.path, "w", newline="", encoding="utf-8-sig")
        self._writer = csv.writer(self._file)
        self._writer.writerow(CSV_COLUMNS)
        self._file.flush()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def emit(self, record: NormalizedRecord) -> None:
        if self._writer is None or self._file is None:
            raise RuntimeError("CsvRecordEmitter used outside of its context")
        self._writer.writerow(record_to_row(record))
        self._file.flush()
        self.rows_written += 1

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None
            self._writer = None
