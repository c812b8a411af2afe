from __future__ import annotations

import logging
from typing import List, Optional
from urllib.parse import unquote, urljoin

from bs4 import BeautifulSoup
from pydantic import ValidationError

from config.selectors import SELECTORS
from models import NOT_AVAILABLE, DiscoveredConnection
from ports.browser import NavigatorPort


logger = logging.getLogger(__name__)


def parse_list_items(html: str, locator: str, base_url: str = "", limit: int = 10) -> List[DiscoveredConnection]:
    """Parse result cards out of a search results page snapshot.

    Cards without a name container inside a link are skipped (ads, upsells).
    """
    soup = BeautifulSoup(html or "", "html.parser")
    results: List[DiscoveredConnection] = []
    for item in soup.select(locator):
        name_container = item.select_one(SELECTORS["name_container"])
        if name_container is None:
            continue
        link = name_container.find_parent("a")
        if link is None or not link.get("href"):
            continue
        name_el = name_container.select_one(SELECTORS["name_text"])
        full_name = (name_el or name_container).get_text(" ", strip=True)
        employer_el = item.select_one(SELECTORS["employer"])
        employer = employer_el.get_text(" ", strip=True) if employer_el else NOT_AVAILABLE
        profile_url = urljoin(base_url, link["href"])
        try:
            results.append(DiscoveredConnection(full_name=full_name, profile_url=profile_url, current_employer=employer))
        except ValidationError:
            continue
        if len(results) >= limit:
            break
    return results


def parse_email(html: str) -> Optional[str]:
    soup = BeautifulSoup(html or "", "html.parser")
    for anchor in soup.select(SELECTORS["mailto"]):
        address = unquote(anchor.get("href", "")[len("mailto:"):]).split("?", 1)[0].strip()
        if address:
            return address
    return None


class LinkedInExtractor:
    """PageExtractorPort reading the navigator's current HTML snapshot."""

    def __init__(self, navigator: NavigatorPort, limit: int = 10) -> None:
        self.navigator = navigator
        self.limit = limit

    def extract_list_items(self, locator: str) -> List[DiscoveredConnection]:
        logger.info("Scraping connections...", extra={"step": "extract"})
        return parse_list_items(self.navigator.content(), locator, self.navigator.current_address(), self.limit)

    def extract_email(self) -> Optional[str]:
        return parse_email(self.navigator.content())
