# ABOUTME: Maps page properties (ArticleType, ArticleContentArea) to Hebrew labels
# ABOUTME: Closed code table for article types; unknown codes fall back to a fixed label

from collections.abc import Mapping

from wikirights_export.core.models import ArticleLabels

UNKNOWN_LABEL = "לא ידוע"

ARTICLE_TYPE_PROPERTY = "ArticleType"
CONTENT_AREA_PROPERTY = "ArticleContentArea"

ARTICLE_TYPE_LABELS: dict[str, str] = {
    "right": "זכות",
    "term": "מושג",
    "service": "שירות",
    "organization": "ארגון",
    "government": "גוף ממשלתי",
    "proceeding": "הליך",
    "guide": "מדריך",
    "portal": "פורטל",
    "lifeEvent": "מצב בחיים",
    "event": "אירוע",
    "law": "חוק",
    "ruling": "פסק דין",
    "newsItem": "חדשות",
    "landingPage": "דף נחיתה",
    "ask": "שאלה ותשובה",
    "location": "מקום",
    "checklist": "רשימת בדיקה",
    "faq": "שאלות נפוצות",
    "other": "אחר",
}


def article_type_label(code: str | None) -> str:
    if not code:
        return UNKNOWN_LABEL
    return ARTICLE_TYPE_LABELS.get(code.strip(), UNKNOWN_LABEL)


def content_area_label(value: str | None) -> str:
    if value is None or not value.strip():
        return UNKNOWN_LABEL
    return value


def map_labels(properties: Mapping[str, str] | None) -> ArticleLabels:
    """Derive the article type and content area labels for a page.

    Args:
        properties: Page properties as returned by the parse API (may be empty)

    Returns:
        Labels, using UNKNOWN_LABEL for anything missing or unrecognised
    """
    properties = properties or {}
    return ArticleLabels(
        article_type_label=article_type_label(properties.get(ARTICLE_TYPE_PROPERTY)),
        content_area_label=content_area_label(properties.get(CONTENT_AREA_PROPERTY)),
    )
