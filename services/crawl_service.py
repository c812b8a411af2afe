from __future__ import annotations

import logging
from typing import Callable, Optional

from playwright.sync_api import sync_playwright

from config.settings import Settings
from db.repos.connections_repo import ConnectionsRepo
from db.repos.emails_repo import EmailsRepo
from models import CrawlReport, ProgressSummary
from pipelines.crawl_connections import CrawlOrchestrator
from services.enrichment_service import EnrichmentProcessor
from services.pacing import HumanPacer
from services.pagination import PaginationDriver
from sources.browser import first_page, launch_persistent_context
from sources.connections_listing import ConnectionsUnavailable, open_connections_listing
from sources.linkedin_extractor import LinkedInExtractor
from sources.linkedin_session import LinkedInSession
from sources.playwright_navigator import PlaywrightNavigator
from utils.debug_dump import save_debug_files


logger = logging.getLogger(__name__)


def build_repos(settings: Settings) -> ConnectionsRepo:
    storage = settings.storage()
    return ConnectionsRepo(storage, EmailsRepo(storage))


def run_browser_crawl(
    profile_url: str,
    settings: Settings,
    headless: Optional[bool] = None,
    debug: bool = False,
    max_pages: Optional[int] = None,
    on_summary: Optional[Callable[[ProgressSummary], None]] = None,
) -> CrawlReport:
    """Drive a real browser session through the whole crawl for one start profile.

    Store problems (StoreCorrupt) in either table surface before the browser
    is launched.
    """
    store = build_repos(settings)
    store.progress_summary()
    store.emails.load_all()

    playwright = sync_playwright().start()
    context = None
    try:
        context = launch_persistent_context(
            playwright,
            settings.user_data_dir,
            headless=settings.headless if headless is None else headless,
        )
        page = first_page(context)
        page.set_default_timeout(settings.navigation_timeout_ms)
        navigator = PlaywrightNavigator(page, settings.navigation_timeout_ms)
        pacer = HumanPacer(settings.pacing())
        extractor = LinkedInExtractor(navigator, limit=settings.page_size)

        LinkedInSession(navigator, pacer, settings.feed_url, settings.login_url).ensure_authenticated()
        try:
            open_connections_listing(
                navigator, pacer, profile_url,
                attempts=settings.profile_nav_attempts,
                timeout_ms=settings.navigation_timeout_ms,
            )
        except ConnectionsUnavailable:
            if debug:
                save_debug_files(page, settings.debug_dir, prefix="connections_unavailable")
            raise

        driver = PaginationDriver(
            navigator,
            extractor,
            pacer,
            page_size=settings.page_size,
            selector_timeout_ms=settings.selector_timeout_ms,
            page_button_timeout_ms=settings.page_button_timeout_ms,
            next_button_timeout_ms=settings.next_button_timeout_ms,
            listing_change_timeout_ms=settings.listing_change_timeout_ms,
            poll_interval_ms=settings.listing_poll_interval_ms,
        )
        # Contact lookups run in their own tab so the results listing stays put
        contact_page = context.new_page()
        contact_page.set_default_timeout(settings.navigation_timeout_ms)
        contact_navigator = PlaywrightNavigator(contact_page, settings.navigation_timeout_ms)
        processor = EnrichmentProcessor(
            store, contact_navigator, LinkedInExtractor(contact_navigator), pacer,
            base_url=settings.feed_url,
            contact_info_suffix=settings.contact_info_suffix,
        )
        orchestrator = CrawlOrchestrator(
            store, driver, processor, pacer, navigator,
            source_profile=profile_url,
            on_summary=on_summary,
            max_pages=max_pages,
        )
        report = orchestrator.run()
        if debug and report.pages_processed == 0:
            save_debug_files(page, settings.debug_dir, prefix="no_results")
        return report
    finally:
        if context is not None:
            context.close()
        playwright.stop()
