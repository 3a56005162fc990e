# ABOUTME: httpx-based client for the MediaWiki action API (page enumeration and parse)
# ABOUTME: Walks all main-namespace articles and fetches their rendered HTML with metadata

import re
from collections.abc import AsyncIterator
from typing import Any

import httpx
from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from wikirights_export.extraction.base import FetchError, ListingBatch, ListingError, PageListing, ParsedPage
from wikirights_export.utils.logging import get_logger, log_api_call

MAIN_NAMESPACE = 0

# Both the canonical and the localized (Hebrew) category namespace
CATEGORY_PREFIX_PATTERN = re.compile(r"^\s*(?:Category|קטגוריה)\s*:\s*", re.IGNORECASE)


class MediaWikiAPIError(Exception):
    """The API answered, but with an error payload."""

    def __init__(self, code: str, info: str):
        super().__init__(f"{code}: {info}")
        self.code = code
        self.info = info


class MediaWikiClient:
    """Client for the handful of api.php queries an export needs.

    Every request is awaited before the next one is issued. Transport errors are
    retried only when ``attempts`` is greater than one.
    """

    def __init__(
        self,
        api_url: str,
        batch_size: int = 50,
        client: httpx.AsyncClient | None = None,
        user_agent: str = "wikirights-export/1.0",
        verify_tls: bool = True,
        timeout: float = 30.0,
        attempts: int = 1,
    ):
        self.api_url = api_url
        self.batch_size = batch_size
        self.attempts = attempts
        self.logger = get_logger(__name__)

        if not verify_tls:
            self.logger.warning("TLS certificate verification is disabled", api_url=api_url)

        self.http_client = client or httpx.AsyncClient(  # Allow for dependency injection
            headers={"User-Agent": user_agent},
            verify=verify_tls,
            timeout=timeout,
            follow_redirects=True,
        )

    async def _get_json(self, params: dict[str, Any]) -> dict[str, Any]:
        """Issue one GET against api.php and return the decoded payload."""
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self.attempts),
            wait=wait_exponential(multiplier=0.5, min=0.5, max=8),
            retry=retry_if_exception_type(httpx.TransportError),
            reraise=True,
        ):
            with attempt:
                response = await self.http_client.get(self.api_url, params=params)

        response.raise_for_status()
        data = response.json()

        if "error" in data:
            error = data["error"]
            raise MediaWikiAPIError(error.get("code", "unknown"), error.get("info", ""))

        return data

    @log_api_call("query.allpages")
    async def list_pages(
        self, continuation: dict[str, Any] | None = None, start_from: str | None = None
    ) -> ListingBatch:
        """Fetch one batch of main-namespace, non-redirect pages.

        Args:
            continuation: The ``continue`` object of the previous batch, if any
            start_from: Title to start the walk from (only used for the first batch)

        Returns:
            The listed pages and the continuation for the next batch

        Raises:
            ListingError: If the request or the API fails
        """
        params: dict[str, Any] = {
            "action": "query",
            "generator": "allpages",
            "gaplimit": self.batch_size,
            "gapnamespace": MAIN_NAMESPACE,
            "gapfilterredir": "nonredirects",
            "prop": "info",
            "inprop": "url",
            "format": "json",
            "formatversion": 2,
        }
        if continuation:
            params.update(continuation)
        elif start_from:
            params["gapfrom"] = start_from

        try:
            data = await self._get_json(params)
        except (httpx.HTTPError, ValueError, MediaWikiAPIError) as e:
            raise ListingError(f"Page listing failed: {e}") from e

        pages = data.get("query", {}).get("pages", [])
        if isinstance(pages, dict):  # formatversion=1 keys pages by id
            pages = list(pages.values())

        batch = ListingBatch(
            pages=[PageListing.from_api(page) for page in pages if "pageid" in page],
            continuation=data.get("continue") or None,
        )

        self.logger.info("Got page listing batch", pages=len(batch.pages), has_more=batch.has_more)
        return batch

    async def iter_listing_batches(self, start_from: str | None = None) -> AsyncIterator[ListingBatch]:
        """Lazily walk the whole page enumeration, one batch per request.

        Stops after the first response that carries no continuation.
        """
        batch = await self.list_pages(start_from=start_from)
        yield batch

        while batch.has_more:
            batch = await self.list_pages(continuation=batch.continuation)
            yield batch

    @log_api_call("parse")
    async def fetch_parsed_page(self, page_id: int) -> ParsedPage:
        """Fetch the rendered body, visible categories and properties of one page.

        Raises:
            FetchError: If no usable response came back for the page
        """
        params: dict[str, Any] = {
            "action": "parse",
            "pageid": page_id,
            "prop": "text|categories|properties",
            "disabletoc": 1,
            "disableeditsection": 1,
            "disablelimitreport": 1,
            "format": "json",
            "formatversion": 2,
        }

        try:
            data = await self._get_json(params)
        except (httpx.HTTPError, ValueError, MediaWikiAPIError) as e:
            raise FetchError(page_id, str(e)) from e

        parse = data.get("parse")
        if not parse:
            raise FetchError(page_id, "response carried no parse payload")

        text = parse.get("text", "")
        if isinstance(text, dict):  # formatversion=1
            text = text.get("*", "")

        return ParsedPage(
            page_id=page_id,
            raw_html=text or "",
            categories=self._visible_categories(parse.get("categories", [])),
            properties=self._page_properties(parse.get("properties", {})),
        )

    @staticmethod
    def _visible_categories(categories: list[dict[str, Any]]) -> list[str]:
        """Drop hidden categories and clean up the remaining labels."""
        labels = []
        for category in categories:
            # formatversion=2 sends hidden=true, formatversion=1 sends hidden=""
            if "hidden" in category and category["hidden"] is not False:
                continue
            label = clean_category_label(category.get("category") or category.get("*") or "")
            if label:
                labels.append(label)
        return labels

    @staticmethod
    def _page_properties(properties: dict[str, Any] | list[dict[str, Any]]) -> dict[str, str]:
        if isinstance(properties, list):  # formatversion=1
            return {prop["name"]: str(prop.get("*", "")) for prop in properties if "name" in prop}
        return {name: str(value) for name, value in properties.items()}

    async def close(self) -> None:
        await self.http_client.aclose()


def clean_category_label(label: str) -> str:
    """Strip the category namespace prefix and turn underscores into spaces.

    Example: "קטגוריה:זכויות_עובדים" -> "זכויות עובדים"
    """
    return CATEGORY_PREFIX_PATTERN.sub("", label).replace("_", " ").strip()
