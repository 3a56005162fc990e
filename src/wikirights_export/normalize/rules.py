# ABOUTME: Named selector rules for the structural regions of a rendered article
# ABOUTME: Each rule maps a parsed document to the subtrees it targets

from enum import Enum

from bs4 import BeautifulSoup, Tag


class ExtractionRule(str, Enum):
    """Structural regions of an article, keyed by their CSS selector."""

    SUMMARY = ".article-summary"
    TOC_BOX = ".toc-box"
    MAP = ".maps-map, .mw-kartographer-map"

    @property
    def selector(self) -> str:
        return self.value

    def first(self, document: BeautifulSoup | Tag) -> Tag | None:
        """Return the first element the rule matches, or None."""
        return document.select_one(self.selector)

    def matches(self, document: BeautifulSoup | Tag) -> list[Tag]:
        """Return every element the rule matches, in document order."""
        return document.select(self.selector)


# Regions dropped from the body before it is converted to text
REMOVAL_RULES: tuple[ExtractionRule, ...] = (
    ExtractionRule.SUMMARY,
    ExtractionRule.TOC_BOX,
    ExtractionRule.MAP,
)
