# ABOUTME: Data extraction from the wiki API
# ABOUTME: Pipeline Stage 1: page listings and rendered page content

"""
Extraction Layer: Get raw pages out of the wiki

This layer handles:
- Paginated enumeration of main-namespace articles
- Fetching rendered HTML, visible categories and page properties

Data Flow: MediaWiki API → PageListing / ParsedPage → Normalization layer
"""

from .base import ExportError, FetchError, ListingBatch, ListingError, PageListing, ParsedPage

__all__ = [
    "ExportError",
    "FetchError",
    "ListingBatch",
    "ListingError",
    "PageListing",
    "ParsedPage",
]
