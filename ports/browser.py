from __future__ import annotations

from typing import List, Optional, Protocol, Tuple

from models import DiscoveredConnection


class SessionPort(Protocol):
    def is_authenticated(self) -> bool:
        ...

    def await_manual_authentication(self) -> None:
        ...


class NavigatorPort(Protocol):
    """Synchronous navigation primitive over a single browsing context.

    ``goto`` and ``wait_for_selector`` report failure as False; ``click`` and
    ``hover`` may raise on a missing element.
    """

    def goto(self, address: str) -> bool:
        ...

    def wait_for_selector(self, locator: str, timeout_ms: int) -> bool:
        ...

    def click(self, locator: str) -> None:
        ...

    def hover(self, locator: str) -> None:
        ...

    def current_address(self) -> str:
        ...

    def attribute(self, locator: str, name: str) -> Optional[str]:
        ...

    def is_disabled(self, locator: str) -> bool:
        ...

    def scroll_through(self) -> None:
        ...

    def move_pointer(self, x: int, y: int, steps: int) -> None:
        ...

    def viewport_size(self) -> Tuple[int, int]:
        ...

    def content(self) -> str:
        ...


class PageExtractorPort(Protocol):
    def extract_list_items(self, locator: str) -> List[DiscoveredConnection]:
        ...

    def extract_email(self) -> Optional[str]:
        ...
