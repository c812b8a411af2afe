from __future__ import annotations

import logging
from typing import Optional, Tuple

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page


logger = logging.getLogger(__name__)


# Incremental 80-120px steps every 150-300ms until the page height stops
# growing three times in a row at the bottom.
_HUMANIZED_SCROLL_JS = """
() => new Promise((resolve) => {
  let totalHeight = 0;
  let lastHeight = 0;
  let stableHits = 0;
  const maxStableHits = 3;
  const step = () => {
    const distance = 80 + Math.floor(Math.random() * 40);
    const scrollHeight = document.body.scrollHeight;
    window.scrollBy(0, distance);
    totalHeight += distance;
    if (totalHeight >= scrollHeight - window.innerHeight) {
      if (scrollHeight === lastHeight) {
        stableHits++;
        if (stableHits >= maxStableHits) {
          resolve();
          return;
        }
      } else {
        lastHeight = scrollHeight;
        stableHits = 0;
      }
    }
    setTimeout(step, 150 + Math.floor(Math.random() * 150));
  };
  step();
})
"""

_IS_DISABLED_JS = "el => el.disabled || el.getAttribute('aria-disabled') === 'true'"


class PlaywrightNavigator:
    """NavigatorPort over a Playwright sync ``Page``."""

    def __init__(self, page: Page, navigation_timeout_ms: int = 45000) -> None:
        self.page = page
        self.navigation_timeout_ms = navigation_timeout_ms

    def goto(self, address: str) -> bool:
        try:
            self.page.goto(address, wait_until="domcontentloaded", timeout=self.navigation_timeout_ms)
            return True
        except PlaywrightError as exc:
            logger.warning("Navigation to %s failed: %s", address, exc, extra={"step": "goto", "status": "error", "error": type(exc).__name__})
            return False

    def wait_for_selector(self, locator: str, timeout_ms: int) -> bool:
        try:
            self.page.wait_for_selector(locator, timeout=timeout_ms)
            return True
        except PlaywrightError:
            # TimeoutError subclasses Error
            return False

    def click(self, locator: str) -> None:
        self.page.click(locator)

    def hover(self, locator: str) -> None:
        self.page.hover(locator)

    def current_address(self) -> str:
        return self.page.url

    def attribute(self, locator: str, name: str) -> Optional[str]:
        try:
            handle = self.page.query_selector(locator)
            if handle is None:
                return None
            return handle.get_attribute(name)
        except PlaywrightError:
            return None

    def is_disabled(self, locator: str) -> bool:
        return bool(self.page.eval_on_selector(locator, _IS_DISABLED_JS))

    def scroll_through(self) -> None:
        try:
            self.page.evaluate(_HUMANIZED_SCROLL_JS)
        except PlaywrightError as exc:
            logger.debug("Scroll interrupted: %s", exc, extra={"step": "scroll"})

    def move_pointer(self, x: int, y: int, steps: int) -> None:
        self.page.mouse.move(x, y, steps=steps)

    def viewport_size(self) -> Tuple[int, int]:
        size = self.page.viewport_size or {"width": 1280, "height": 800}
        return int(size["width"]), int(size["height"])

    def content(self) -> str:
        return self.page.content()
