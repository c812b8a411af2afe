from __future__ import annotations

from typing import Protocol

from .browser import NavigatorPort


class PacerPort(Protocol):
    def pause(self, min_ms: int, max_ms: int) -> None:
        ...

    def wait(self, ms: int) -> None:
        ...

    def item_delay(self) -> None:
        ...

    def long_pause_due(self, index: int) -> bool:
        ...

    def long_pause(self) -> None:
        ...

    def page_break(self) -> None:
        ...

    def interact(self, navigator: NavigatorPort) -> None:
        ...
