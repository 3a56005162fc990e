# ABOUTME: wikirights-export - dump every article of a MediaWiki site to CSV
# ABOUTME: Lists pages, fetches rendered HTML, normalizes it to text and writes one row per article

__version__ = "1.0.0"
