from __future__ import annotations

import logging

from config.selectors import SELECTORS
from ports.browser import NavigatorPort
from ports.pacing import PacerPort
from services.url_utils import first_degree_filter_url


logger = logging.getLogger(__name__)


SEARCH_RESULTS_PATH = "/search/results/people/"


class ConnectionsUnavailable(RuntimeError):
    """The start profile or its connections search could not be opened."""


def open_profile(navigator: NavigatorPort, pacer: PacerPort, profile_url: str, attempts: int = 3) -> None:
    for attempt in range(1, attempts + 1):
        logger.info(
            "Attempting to navigate to profile page (attempt %d/%d): %s", attempt, attempts, profile_url,
            extra={"step": "bootstrap"},
        )
        if navigator.goto(profile_url):
            logger.info("Successfully navigated to profile page for %s", profile_url, extra={"step": "bootstrap", "status": "ok"})
            return
        if attempt < attempts:
            logger.info("Retrying in a few seconds...", extra={"step": "bootstrap"})
            pacer.pause(5000, 7000)
    raise ConnectionsUnavailable(f"Failed to navigate to profile page after {attempts} attempts: {profile_url}")


def open_connections_search(
    navigator: NavigatorPort,
    pacer: PacerPort,
    timeout_ms: int = 30000,
    poll_interval_ms: int = 250,
) -> str:
    """Click through from the profile to its connections search; returns the search URL."""
    link = SELECTORS["connections_link"]
    logger.info("Finding and clicking connections link...", extra={"step": "bootstrap"})
    if not navigator.wait_for_selector(link, timeout_ms):
        raise ConnectionsUnavailable(
            "Connections link not found: the profile may hide its connections, be private, "
            "not be connected to you, or the page structure has changed"
        )
    pacer.interact(navigator)
    pacer.pause(500, 1200)
    navigator.hover(link)
    pacer.pause(200, 600)
    navigator.click(link)

    for _ in range(max(1, timeout_ms // max(1, poll_interval_ms))):
        address = navigator.current_address()
        if SEARCH_RESULTS_PATH in address:
            logger.info("Successfully navigated to connections page", extra={"step": "bootstrap", "status": "ok"})
            return address
        pacer.wait(poll_interval_ms)
    raise ConnectionsUnavailable("Clicking the connections link did not open the connections search")


def restrict_to_first_degree(navigator: NavigatorPort, search_url: str) -> None:
    filtered = first_degree_filter_url(search_url)
    if filtered is None:
        logger.info("Already showing 1st degree connections.", extra={"step": "bootstrap"})
        return
    logger.info("Filtering URL to: %s", filtered, extra={"step": "bootstrap"})
    if not navigator.goto(filtered):
        raise ConnectionsUnavailable(f"Could not open filtered connections search: {filtered}")


def open_connections_listing(
    navigator: NavigatorPort,
    pacer: PacerPort,
    profile_url: str,
    attempts: int = 3,
    timeout_ms: int = 30000,
) -> None:
    open_profile(navigator, pacer, profile_url, attempts)
    search_url = open_connections_search(navigator, pacer, timeout_ms)
    restrict_to_first_degree(navigator, search_url)
