# ABOUTME: Converts rendered article HTML into a summary, a plain-text body and cleaned HTML
# ABOUTME: Two ordered passes: structural DOM pruning, then anchor rewriting and tag stripping

import re
from urllib.parse import unquote

from bs4 import BeautifulSoup, ParserRejectedMarkup, Tag

from wikirights_export.core.models import NormalizedContent
from wikirights_export.normalize.rules import REMOVAL_RULES, ExtractionRule
from wikirights_export.utils.logging import get_logger

logger = get_logger(__name__)

CONTACT_LINK_PATTERN = re.compile(r"^(?:mailto|tel):(?P<address>.*)$", re.IGNORECASE | re.DOTALL)
MAILTO_PREFIX_PATTERN = re.compile(r"^mailto:", re.IGNORECASE)


def parse_fragment(raw_html: str) -> BeautifulSoup:
    """Parse an HTML fragment leniently.

    Malformed markup never raises; if the parser gives up entirely an empty
    document is returned.
    """
    try:
        return BeautifulSoup(raw_html or "", "html.parser")
    except (ParserRejectedMarkup, AssertionError) as e:
        logger.debug("HTML parser rejected markup, using empty document", error=str(e))
        return BeautifulSoup("", "html.parser")


def extract_summary(document: BeautifulSoup) -> str:
    """Text of the designated summary block, or an empty string when there is none."""
    summary = ExtractionRule.SUMMARY.first(document)
    if summary is None:
        return ""
    return html_to_text(str(summary))


def _is_empty_element(tag: Tag) -> bool:
    return not tag.attrs and tag.find(True) is None and not tag.get_text().strip()


def remove_empty_elements(document: BeautifulSoup) -> None:
    """Remove attribute-less elements with no children and no text, until none are left.

    Removing a leaf can leave its parent empty, so this runs to a fixed point.
    """
    while True:
        empty = [tag for tag in document.find_all(True) if _is_empty_element(tag)]
        if not empty:
            return
        for tag in empty:
            tag.decompose()


def prune_document(document: BeautifulSoup) -> BeautifulSoup:
    """Drop the summary, table-of-contents and map regions, then empty elements.

    Mutates and returns ``document``. Running it twice is a no-op the second time.
    """
    for rule in REMOVAL_RULES:
        for element in rule.matches(document):
            # Nested matches are already gone with their ancestor
            if not element.decomposed:
                element.decompose()

    remove_empty_elements(document)
    return document


def format_link(anchor: Tag) -> str:
    """Render one anchor as plain text.

    - ``<a href="mailto:x@y.com">x@y.com</a>`` -> ``(x@y.com)``
    - ``<a href="mailto:x@y.com">mailto:x@y.com</a>`` -> ``(x@y.com)``
    - ``<a href="https://e.com/a%20b">Label</a>`` -> ``Label (https://e.com/a b)``
    """
    text = anchor.get_text()
    href = anchor.get("href")
    if not href:
        return text
    if isinstance(href, list):
        href = " ".join(href)

    contact = CONTACT_LINK_PATTERN.match(href)
    if contact:
        address = contact.group("address")
        if text.strip() in (href, address, unquote(address)):
            return f"({unquote(address)})"

    target = MAILTO_PREFIX_PATTERN.sub("", href)
    return f"{text} ({unquote(target)})"


def html_to_text(html: str) -> str:
    """Rewrite anchors as ``text (url)``, strip every other tag and trim."""
    fragment = parse_fragment(html)
    for anchor in fragment.find_all("a"):
        anchor.replace_with(format_link(anchor))
    return fragment.get_text().strip()


def normalize(raw_html: str, keep_html: bool = False) -> NormalizedContent:
    """Turn one page's rendered HTML into its summary, body text and optional body HTML."""
    document = parse_fragment(raw_html)

    # The summary must be read before pruning removes it
    summary = extract_summary(document)

    prune_document(document)
    body_html = str(document).strip()

    return NormalizedContent(
        summary=summary,
        body_text=html_to_text(body_html),
        body_html=body_html if keep_html else None,
    )
