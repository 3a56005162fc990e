# ABOUTME: HTML normalization of rendered wiki articles
# ABOUTME: Pipeline Stage 2: raw HTML → summary, plain text and cleaned HTML

from .html import extract_summary, html_to_text, normalize, parse_fragment, prune_document
from .rules import REMOVAL_RULES, ExtractionRule

__all__ = [
    "REMOVAL_RULES",
    "ExtractionRule",
    "extract_summary",
    "html_to_text",
    "normalize",
    "parse_fragment",
    "prune_document",
]
