from __future__ import annotations

import logging
from typing import Callable, Optional

from models import CrawlReport, ProgressSummary
from pipelines.runner import Pipeline, RunContext
from pipelines.steps import AdvancePage, EnrichPendingEmails, ListConnectionsPage, PageBreak, PersistConnections
from ports.browser import NavigatorPort
from ports.pacing import PacerPort
from ports.repos import ConnectionStorePort
from services.enrichment_service import EnrichmentProcessor
from services.pagination import PaginationDriver


logger = logging.getLogger(__name__)


class CrawlOrchestrator:
    """Walk result pages in order: list, merge, enrich, then advance or stop.

    Holds no persisted state of its own; a rerun resumes from whatever the
    store already contains.
    """

    def __init__(
        self,
        store: ConnectionStorePort,
        driver: PaginationDriver,
        processor: EnrichmentProcessor,
        pacer: PacerPort,
        navigator: NavigatorPort,
        source_profile: str,
        on_summary: Optional[Callable[[ProgressSummary], None]] = None,
        max_pages: Optional[int] = None,
    ) -> None:
        self.store = store
        self.driver = driver
        self.source_profile = source_profile
        self.on_summary = on_summary
        self.max_pages = max_pages
        self.pipeline = Pipeline([
            ListConnectionsPage(driver),
            PersistConnections(store),
            EnrichPendingEmails(processor),
            PageBreak(pacer, navigator),
            AdvancePage(driver),
        ])

    def progress(self) -> ProgressSummary:
        return self.store.progress_summary()

    def run(self) -> CrawlReport:
        summary = self.progress()
        if self.on_summary:
            self.on_summary(summary)
        logger.info(
            "Resuming with %d connections, %d emails processed, last page %d",
            summary.total_connections, summary.processed_emails, summary.last_page,
            extra={"step": "crawl", "status": "start"},
        )

        ctx = RunContext(source_profile=self.source_profile, page_number=self.driver.page_number)
        ctx.exhausted = self.driver.exhausted or not self.driver.await_listing()
        while not ctx.exhausted:
            logger.info("=== Processing Page %d ===", ctx.page_number, extra={"page": ctx.page_number, "step": "crawl"})
            ctx = self.pipeline.run(ctx)
            if self.max_pages is not None and ctx.report.pages_processed >= self.max_pages and not ctx.exhausted:
                logger.info("Page limit %d reached, stopping", self.max_pages, extra={"page": ctx.page_number, "step": "crawl"})
                break

        logger.info(
            "Completed processing all pages. Total pages processed: %d", ctx.report.pages_processed,
            extra={"step": "crawl", "status": "done"},
        )
        return ctx.report
