from .api import MediaWikiAPIError, MediaWikiClient, clean_category_label

__all__ = ["MediaWikiAPIError", "MediaWikiClient", "clean_category_label"]
