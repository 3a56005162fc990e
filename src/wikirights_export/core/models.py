# ABOUTME: Domain models for normalized article content and exported rows
# ABOUTME: Includes the run statistics threaded through the export loop

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class NormalizedContent(BaseModel):
    """Clean text forms of one rendered article."""

    summary: str = Field(default="", description="Text of the article summary block")
    body_text: str = Field(default="", description="Plain-text body with links rendered as 'text (url)'")
    body_html: str | None = Field(default=None, description="Pruned body HTML, when retained")


class ArticleLabels(BaseModel):
    """Human-readable labels derived from page properties."""

    article_type_label: str
    content_area_label: str


class NormalizedRecord(BaseModel):
    """One exported row. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    page_id: int
    title: str
    url: str
    article_type_label: str
    content_area_label: str
    summary_text: str = ""
    body_text: str = ""
    body_html: str | None = None
    category_labels: list[str] = Field(default_factory=list)


class ExportStats(BaseModel):
    """Counters for one export run."""

    model_config = ConfigDict(frozen=True)

    listed: int = 0
    exported: int = 0
    skipped_language: int = 0
    failed: int = 0
    batches: int = 0
    output_path: Path | None = None

    def bump(self, **increments: int) -> "ExportStats":
        """Return a copy with the given counters increased."""
        return self.model_copy(update={name: getattr(self, name) + value for name, value in increments.items()})
