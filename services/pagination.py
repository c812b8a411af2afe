"""Pagination state machine over the connections search results.

States: LISTING(N) -> PAGINATING(N) -> LISTING(N+1) ... -> EXHAUSTED.

Two failure modes are guarded here. A click that did not actually refresh the
list would re-scrape page N under page N+1's label, so every advance waits for
proof (new first-result id or a page/offset URL) and stops otherwise. A list
container that has not rendered yet is waited for (with a fallback locator)
before LISTING runs, so a slow render is not read as an empty page.
"""
from __future__ import annotations

import logging
import re
from enum import Enum
from typing import List, Optional

from config.selectors import RESULT_ID_ATTRIBUTE, SELECTORS
from models import DiscoveredConnection
from ports.browser import NavigatorPort, PageExtractorPort
from ports.pacing import PacerPort


logger = logging.getLogger(__name__)


class PageState(str, Enum):
    LISTING = "listing"
    PAGINATING = "paginating"
    EXHAUSTED = "exhausted"


class _Control(str, Enum):
    CLICKED = "clicked"
    DISABLED = "disabled"
    MISSING = "missing"


class PaginationDriver:
    def __init__(
        self,
        navigator: NavigatorPort,
        extractor: PageExtractorPort,
        pacer: PacerPort,
        page_size: int = 10,
        list_selector: Optional[str] = None,
        selector_timeout_ms: int = 20000,
        page_button_timeout_ms: int = 7000,
        next_button_timeout_ms: int = 10000,
        listing_change_timeout_ms: int = 20000,
        poll_interval_ms: int = 250,
    ) -> None:
        self.navigator = navigator
        self.extractor = extractor
        self.pacer = pacer
        self.page_size = page_size
        self.list_selector = list_selector or SELECTORS["list_item"]
        self.selector_timeout_ms = selector_timeout_ms
        self.page_button_timeout_ms = page_button_timeout_ms
        self.next_button_timeout_ms = next_button_timeout_ms
        self.listing_change_timeout_ms = listing_change_timeout_ms
        self.poll_interval_ms = max(1, poll_interval_ms)
        self.page_number = 1
        self.state = PageState.LISTING

    @property
    def exhausted(self) -> bool:
        return self.state is PageState.EXHAUSTED

    def _exhaust(self, reason: str) -> None:
        logger.info(reason, extra={"page": self.page_number, "step": "paginate", "status": "exhausted"})
        self.state = PageState.EXHAUSTED

    def await_listing(self) -> bool:
        """Wait for the result list, switching to the result-card locator if needed."""
        if self.navigator.wait_for_selector(self.list_selector, self.selector_timeout_ms):
            return True
        fallback = SELECTORS["result_card"]
        if self.list_selector != fallback:
            logger.info("Fallback to result card selector...", extra={"page": self.page_number, "step": "listing"})
            if self.navigator.wait_for_selector(fallback, self.selector_timeout_ms):
                self.list_selector = fallback
                return True
        self._exhaust("Results list did not render, stopping pagination")
        return False

    def list_page(self) -> List[DiscoveredConnection]:
        if self.state is not PageState.LISTING:
            raise RuntimeError(f"list_page() called in state {self.state.value}")

        logger.info("Scrolling to load items...", extra={"page": self.page_number, "step": "listing"})
        self.navigator.scroll_through()
        self.pacer.pause(800, 1500)
        self.pacer.interact(self.navigator)
        self.pacer.pause(300, 700)

        items = list(self.extractor.extract_list_items(self.list_selector))[: self.page_size]
        logger.info(
            "Collected %d connections from page %d.", len(items), self.page_number,
            extra={"page": self.page_number, "step": "listing", "status": "ok"},
        )
        if not items:
            self._exhaust("No connections found on this page, stopping pagination")
            return []
        self.state = PageState.PAGINATING
        return items

    def advance(self) -> bool:
        """Move to the next page; returns False once no further page can be trusted."""
        if self.state is not PageState.PAGINATING:
            raise RuntimeError(f"advance() called in state {self.state.value}")
        target = self.page_number + 1
        logger.info("Attempting to navigate to page %d...", target, extra={"page": self.page_number, "step": "paginate"})
        try:
            return self._advance_to(target)
        except Exception as exc:
            logger.warning(
                "Error navigating to page %d: %s", target, exc,
                extra={"page": self.page_number, "step": "paginate", "status": "error", "error": type(exc).__name__},
            )
            self.state = PageState.EXHAUSTED
            return False

    def _advance_to(self, target: int) -> bool:
        self.navigator.scroll_through()
        self.pacer.pause(500, 1200)
        self.pacer.interact(self.navigator)

        previous_id = self.navigator.attribute(SELECTORS["result_card"], RESULT_ID_ATTRIBUTE)
        previous_address = self.navigator.current_address()

        if not self.navigator.wait_for_selector(SELECTORS["pagination"], self.selector_timeout_ms):
            self._exhaust("No pagination controls found, likely on last page")
            return False

        self.pacer.pause(800, 1500)
        self.pacer.interact(self.navigator)

        outcome = self._click_page_button(target)
        if outcome is _Control.MISSING:
            logger.info("Page %d button not found, trying Next button...", target, extra={"page": self.page_number, "step": "paginate"})
            outcome = self._click_next()
        if outcome is _Control.DISABLED:
            self._exhaust("Next button is disabled, no more pages available")
            return False
        if outcome is _Control.MISSING:
            self._exhaust("No pagination controls found, likely on last page")
            return False

        if not self._listing_changed(previous_id, previous_address, target):
            self._exhaust("Failed to detect page change")
            return False

        self.page_number = target
        self.state = PageState.LISTING
        logger.info("Successfully navigated to page %d", target, extra={"page": target, "step": "paginate", "status": "ok"})
        self.pacer.pause(1500, 3000)
        return self.await_listing()

    def _click_page_button(self, target: int) -> _Control:
        locator = SELECTORS["page_button"].format(page=target)
        if not self.navigator.wait_for_selector(locator, self.page_button_timeout_ms):
            return _Control.MISSING
        self._hover_and_click(locator)
        logger.info("Clicked page %d button.", target, extra={"page": self.page_number, "step": "paginate"})
        return _Control.CLICKED

    def _click_next(self) -> _Control:
        locator = SELECTORS["next_button"]
        if not self.navigator.wait_for_selector(locator, self.next_button_timeout_ms):
            return _Control.MISSING
        if self.navigator.is_disabled(locator):
            return _Control.DISABLED
        self._hover_and_click(locator)
        logger.info("Clicked Next button.", extra={"page": self.page_number, "step": "paginate"})
        return _Control.CLICKED

    def _hover_and_click(self, locator: str) -> None:
        self.navigator.hover(locator)
        self.pacer.pause(200, 600)
        self.navigator.click(locator)

    def _listing_changed(self, previous_id: Optional[str], previous_address: str, target: int) -> bool:
        page_marker = re.compile(r"[?&](page=%d|start=\d+)(&|$)" % target)
        attempts = max(1, self.listing_change_timeout_ms // self.poll_interval_ms)
        for attempt in range(attempts):
            current_id = self.navigator.attribute(SELECTORS["result_card"], RESULT_ID_ATTRIBUTE)
            if current_id and current_id != previous_id:
                return True
            address = self.navigator.current_address()
            if address != previous_address and page_marker.search(address):
                return True
            if attempt < attempts - 1:
                self.pacer.wait(self.poll_interval_ms)
        return False
