from pathlib import Path

from rich.console import Console

from wikirights_export.core.models import ExportStats
from wikirights_export.utils.rich_tables import create_export_summary_table, print_rich_table


def _render(table) -> str:
    console = Console(record=True, width=120)
    print_rich_table(console, table)
    return console.export_text()


def test_export_summary_table_complete():
    stats = ExportStats(listed=3, exported=2, skipped_language=1, output_path=Path("wiki_pages.csv"))

    output = _render(create_export_summary_table(stats))

    assert "wiki_pages.csv" in output
    assert "Complete" in output


def test_export_summary_table_aborted():
    output = _render(create_export_summary_table(ExportStats(failed=1), aborted=True))

    assert "Aborted" in output
    assert "N/A" in output


def test_stats_bump_returns_new_instance():
    stats = ExportStats()
    bumped = stats.bump(listed=2, exported=1)

    assert stats.listed == 0
    assert bumped.listed == 2
    assert bumped.exported == 1
