# ABOUTME: High-level service that runs a full export: list, fetch, normalize, label, write
# ABOUTME: Folds run statistics over listing batches and applies the fetch failure policy

from __future__ import annotations

from contextlib import aclosing
from pathlib import Path

from wikirights_export.config import Config, get_config
from wikirights_export.core.emitter import CsvRecordEmitter, build_output_path
from wikirights_export.core.labels import map_labels
from wikirights_export.core.models import ExportStats, NormalizedRecord
from wikirights_export.extraction.base import ExportError, FetchError, ListingBatch, ListingError, PageListing
from wikirights_export.extraction.wiki.api import MediaWikiClient
from wikirights_export.normalize import normalize
from wikirights_export.utils.logging import get_logger, with_export_context, with_page_context


class ExportAborted(ExportError):
    """Raised when a run stops before the page walk is exhausted."""

    def __init__(self, message: str, stats: ExportStats):
        super().__init__(message)
        self.stats = stats


class ExportService:
    """Service for exporting every article of a wiki into one CSV file."""

    def __init__(self, config: Config | None = None, client: MediaWikiClient | None = None):
        self.config = config or get_config()
        self.client = client or MediaWikiClient(
            api_url=self.config.api_url,
            batch_size=self.config.batch_size,
            user_agent=self.config.user_agent,
            verify_tls=self.config.verify_tls,
            timeout=self.config.request_timeout,
            attempts=self.config.request_attempts,
        )
        self.logger = get_logger(__name__)

    async def run(self, output_path: Path | None = None) -> ExportStats:
        """Run the export to completion.

        Returns:
            Counters for the run, including the output file path

        Raises:
            ExportAborted: If listing fails, or a page fetch fails under the "abort" policy.
                Rows written before the failure stay in the output file.
        """
        output_path = output_path or build_output_path(self.config.output_dir)
        stats = ExportStats(output_path=output_path)

        with with_export_context(self.config.api_url, output_path=str(output_path)) as logger:
            logger.info(
                "Starting export",
                batch_size=self.config.batch_size,
                start_from=self.config.start_from,
                language=self.config.language,
                include_html=self.config.include_html,
                on_fetch_error=self.config.on_fetch_error,
            )

            with CsvRecordEmitter(output_path) as emitter:
                batches = self.client.iter_listing_batches(start_from=self.config.start_from)
                try:
                    async with aclosing(batches):
                        async for batch in batches:
                            stats = await self._export_batch(batch, stats, emitter)
                            if self._limit_reached(stats):
                                logger.info("Page limit reached", max_pages=self.config.max_pages)
                                break
                except ListingError as e:
                    raise ExportAborted(str(e), stats) from e

            logger.info(
                "Export finished",
                listed=stats.listed,
                exported=stats.exported,
                skipped_language=stats.skipped_language,
                failed=stats.failed,
                batches=stats.batches,
            )

        return stats

    async def _export_batch(
        self, batch: ListingBatch, stats: ExportStats, emitter: CsvRecordEmitter
    ) -> ExportStats:
        """Export every page of one listing batch and return the updated counters."""
        stats = stats.bump(batches=1)
        self.logger.info("Processing listing batch", batch_number=stats.batches, pages=len(batch.pages))

        for listing in batch.pages:
            if self._limit_reached(stats):
                break
            stats = stats.bump(listed=1)

            if listing.language != self.config.language:
                self.logger.debug(
                    "Skipping page in another language", page_id=listing.page_id, language=listing.language
                )
                stats = stats.bump(skipped_language=1)
                continue

            try:
                record = await self.build_record(listing)
            except FetchError as e:
                stats = stats.bump(failed=1)
                if self.config.on_fetch_error == "abort":
                    self.logger.error("Page fetch failed, aborting export", page_id=listing.page_id, error=str(e))
                    raise ExportAborted(str(e), stats) from e
                self.logger.warning("Page fetch failed, skipping", page_id=listing.page_id, error=str(e))
                continue

            emitter.emit(record)
            stats = stats.bump(exported=1)

        return stats

    async def build_record(self, listing: PageListing) -> NormalizedRecord:
        """Fetch, normalize and label a single listed page."""
        with with_page_context(listing.page_id, listing.title) as logger:
            parsed = await self.client.fetch_parsed_page(listing.page_id)
            content = normalize(parsed.raw_html, keep_html=self.config.include_html)
            labels = map_labels(parsed.properties)

            logger.debug(
                "Normalized page",
                summary_length=len(content.summary),
                body_length=len(content.body_text),
                categories=len(parsed.categories),
            )

            return NormalizedRecord(
                page_id=listing.page_id,
                title=listing.title,
                url=listing.full_url,
                article_type_label=labels.article_type_label,
                content_area_label=labels.content_area_label,
                summary_text=content.summary,
                body_text=content.body_text,
                body_html=content.body_html,
                category_labels=parsed.categories,
            )

    def _limit_reached(self, stats: ExportStats) -> bool:
        return self.config.max_pages is not None and stats.listed >= self.config.max_pages

    async def close(self) -> None:
        """Release the HTTP client."""
        await self.client.close()
