from __future__ import annotations

import logging
import time
from typing import Optional

from models import ERROR_VALUE, NOT_AVAILABLE, EmailStatus, EnrichmentReport
from ports.browser import NavigatorPort, PageExtractorPort
from ports.pacing import PacerPort
from ports.repos import ConnectionStorePort
from services.url_utils import contact_info_url


logger = logging.getLogger(__name__)


class EnrichmentProcessor:
    """Resolve the contact email of every pending connection found on a page.

    Each item is written back through the store as soon as it is resolved, so
    a crash mid-batch leaves finished items completed/error and the rest
    pending for the next run.
    """

    def __init__(
        self,
        store: ConnectionStorePort,
        navigator: NavigatorPort,
        extractor: PageExtractorPort,
        pacer: PacerPort,
        base_url: str = "https://www.linkedin.com/feed/",
        contact_info_suffix: str = "overlay/contact-info/",
    ) -> None:
        self.store = store
        self.navigator = navigator
        self.extractor = extractor
        self.pacer = pacer
        self.base_url = base_url
        self.contact_info_suffix = contact_info_suffix

    def process_page(self, page_number: int) -> EnrichmentReport:
        report = EnrichmentReport()
        pending = self.store.pending_for_page(page_number)
        if not pending:
            logger.info("No pending email processing for page %d", page_number, extra={"page": page_number, "step": "enrich"})
            return report

        logger.info(
            "Processing emails for %d connections from page %d", len(pending), page_number,
            extra={"page": page_number, "step": "enrich"},
        )
        # Refresh the authenticated context once per batch
        self.pacer.pause(300, 800)
        self.navigator.goto(self.base_url)
        self.pacer.pause(800, 1500)
        self.pacer.interact(self.navigator)

        total = len(pending)
        for idx, record in enumerate(pending):
            logger.info("[%d/%d] Processing: %s", idx + 1, total, record.full_name, extra={"page": page_number, "step": "enrich"})
            report.attempted += 1
            started = time.monotonic()
            try:
                email = self._fetch_email(record.canonical_id)
            except Exception as exc:
                logger.warning(
                    "Error processing %s: %s", record.full_name, exc,
                    extra={
                        "page": page_number,
                        "step": "enrich",
                        "status": "error",
                        "error": type(exc).__name__,
                        "duration_ms": int((time.monotonic() - started) * 1000),
                    },
                )
                self.store.mark_enrichment(record.canonical_id, ERROR_VALUE, EmailStatus.ERROR)
                report.errors += 1
            else:
                value = email or NOT_AVAILABLE
                self.store.mark_enrichment(record.canonical_id, value, EmailStatus.COMPLETED)
                report.completed += 1
                if email:
                    report.emails_found += 1
                logger.info(
                    "Email for %s: %s", record.full_name, value,
                    extra={
                        "page": page_number,
                        "step": "enrich",
                        "status": "ok",
                        "duration_ms": int((time.monotonic() - started) * 1000),
                    },
                )

            self.pacer.item_delay()
            if self.pacer.long_pause_due(idx):
                self.pacer.long_pause()
                self.pacer.interact(self.navigator)

        logger.info("Completed email processing for page %d", page_number, extra={"page": page_number, "step": "enrich", "status": "ok"})
        return report

    def _fetch_email(self, canonical_id: str) -> Optional[str]:
        url = contact_info_url(canonical_id, self.contact_info_suffix)
        self.pacer.pause(300, 800)
        if not self.navigator.goto(url):
            raise RuntimeError(f"navigation to {url} failed")
        self.pacer.pause(1000, 2500)
        self.pacer.interact(self.navigator)
        self.pacer.pause(200, 600)
        email = self.extractor.extract_email()
        if email is None:
            return None
        email = email.strip()
        return email or None
