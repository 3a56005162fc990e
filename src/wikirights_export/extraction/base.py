# ABOUTME: Raw page models and errors for reading articles out of a wiki
# ABOUTME: Shared between the MediaWiki client and the export service

from typing import Any

from pydantic import BaseModel, Field


class ExportError(Exception):
    """Base class for failures that stop or degrade an export run."""

    pass


class ListingError(ExportError):
    """Raised when the page enumeration query fails. Always fatal to the run."""

    pass


class FetchError(ExportError):
    """Raised when a single page could not be fetched or parsed by the API."""

    def __init__(self, page_id: int, message: str):
        super().__init__(f"Failed to fetch page {page_id}: {message}")
        self.page_id = page_id


class PageListing(BaseModel):
    """One page returned by the bulk page enumeration."""

    page_id: int
    title: str
    full_url: str
    language: str
    namespace: int = 0

    @classmethod
    def from_api(cls, page: dict[str, Any]) -> "PageListing":
        return cls(
            page_id=page["pageid"],
            title=page.get("title", ""),
            full_url=page.get("fullurl", ""),
            language=page.get("pagelanguage", ""),
            namespace=page.get("ns", 0),
        )


class ListingBatch(BaseModel):
    """A single page of enumeration results plus the token to request the next one."""

    pages: list[PageListing] = Field(default_factory=list)
    continuation: dict[str, Any] | None = None

    @property
    def has_more(self) -> bool:
        return bool(self.continuation)


class ParsedPage(BaseModel):
    """Rendered article body with its visible categories and page properties."""

    page_id: int
    raw_html: str = ""
    categories: list[str] = Field(default_factory=list)
    properties: dict[str, str] = Field(default_factory=dict)
