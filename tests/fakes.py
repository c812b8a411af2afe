from __future__ import annotations

from typing import Callable, Dict, List, Optional, Sequence, Tuple

from config.selectors import RESULT_ID_ATTRIBUTE, SELECTORS
from models import DiscoveredConnection
from services.pacing import NoDelayPacer


SEARCH_URL = "https://www.linkedin.com/search/results/people/?connectionOf=%5B%22abc%22%5D&network=%5B%22F%22%5D"


def person(handle: str, name: Optional[str] = None, employer: str = "Acme") -> DiscoveredConnection:
    return DiscoveredConnection(
        full_name=name or handle.title(),
        profile_url=f"https://www.linkedin.com/in/{handle}?miniProfileUrn=urn%3Ali%3A{handle}",
        current_employer=employer,
    )


class FakeNavigator:
    """In-memory NavigatorPort; records every call that touches the page."""

    def __init__(self, present: Sequence[str] = (), address: str = "about:blank") -> None:
        self.present = set(present)
        self.disabled: set = set()
        self.address = address
        self.attributes: Dict[Tuple[str, str], str] = {}
        self.fail_goto: set = set()
        self.on_click: Dict[str, Callable[["FakeNavigator"], None]] = {}
        self.html = ""
        self.visited: List[str] = []
        self.clicks: List[str] = []
        self.hovers: List[str] = []
        self.scrolls = 0

    def goto(self, address: str) -> bool:
        self.visited.append(address)
        if address in self.fail_goto:
            return False
        self.address = address
        return True

    def wait_for_selector(self, locator: str, timeout_ms: int) -> bool:
        return locator in self.present

    def click(self, locator: str) -> None:
        if locator not in self.present:
            raise RuntimeError(f"no element for {locator}")
        self.clicks.append(locator)
        handler = self.on_click.get(locator)
        if handler:
            handler(self)

    def hover(self, locator: str) -> None:
        self.hovers.append(locator)

    def current_address(self) -> str:
        return self.address

    def attribute(self, locator: str, name: str) -> Optional[str]:
        return self.attributes.get((locator, name))

    def is_disabled(self, locator: str) -> bool:
        return locator in self.disabled

    def scroll_through(self) -> None:
        self.scrolls += 1

    def move_pointer(self, x: int, y: int, steps: int) -> None:
        return None

    def viewport_size(self) -> Tuple[int, int]:
        return 1280, 800

    def content(self) -> str:
        return self.html


class FakeResultsSite(FakeNavigator):
    """Paged search results with working pagination controls.

    ``stale`` makes clicks land without the list ever changing.
    """

    def __init__(
        self,
        pages: List[List[DiscoveredConnection]],
        page_buttons: bool = True,
        next_button: bool = True,
        stale: bool = False,
        list_selector: str = SELECTORS["list_item"],
    ) -> None:
        super().__init__(present=[list_selector, SELECTORS["pagination"]], address=SEARCH_URL)
        self.pages = pages
        self.page_buttons = page_buttons
        self.next_button = next_button
        self.stale = stale
        self.current = 1
        self.locators_used: List[str] = []
        self._render()

    def _render(self) -> None:
        self.attributes[(SELECTORS["result_card"], RESULT_ID_ATTRIBUTE)] = f"urn:li:result:{self.current}"
        target = self.current + 1
        if self.page_buttons and target <= len(self.pages):
            locator = SELECTORS["page_button"].format(page=target)
            self.present.add(locator)
            self.on_click[locator] = lambda nav, page=target: nav._show(page)
        if self.next_button:
            self.present.add(SELECTORS["next_button"])
            self.on_click[SELECTORS["next_button"]] = lambda nav: nav._show(nav.current + 1)
            if self.current >= len(self.pages):
                self.disabled.add(SELECTORS["next_button"])

    def _show(self, page: int) -> None:
        if self.stale:
            return
        self.current = page
        self.address = f"{SEARCH_URL}&page={page}"
        self._render()

    def extract_list_items(self, locator: str) -> List[DiscoveredConnection]:
        self.locators_used.append(locator)
        if self.current > len(self.pages):
            return []
        return list(self.pages[self.current - 1])

    def extract_email(self) -> Optional[str]:
        return None


class FakeContactExtractor:
    """Answers extract_email from the contact overlay address currently open.

    Values may be an email, None, or an exception instance to raise.
    """

    def __init__(self, navigator: FakeNavigator, emails: Dict[str, object], suffix: str = "overlay/contact-info/") -> None:
        self.navigator = navigator
        self.emails = emails
        self.suffix = suffix
        self.calls: List[str] = []

    def extract_list_items(self, locator: str) -> List[DiscoveredConnection]:
        return []

    def extract_email(self) -> Optional[str]:
        canonical_id = self.navigator.current_address()[: -len(self.suffix)].rstrip("/")
        self.calls.append(canonical_id)
        value = self.emails.get(canonical_id)
        if isinstance(value, Exception):
            raise value
        return value  # type: ignore[return-value]


class RecordingPacer(NoDelayPacer):
    def __init__(self, long_pause_at: Sequence[int] = ()) -> None:
        self.long_pause_at = set(long_pause_at)
        self.events: List[str] = []

    def item_delay(self) -> None:
        self.events.append("item_delay")

    def long_pause_due(self, index: int) -> bool:
        return index in self.long_pause_at

    def long_pause(self) -> None:
        self.events.append("long_pause")

    def page_break(self) -> None:
        self.events.append("page_break")
