from __future__ import annotations

import random
from typing import Optional, Tuple

from playwright.sync_api import BrowserContext, Page, Playwright


DESKTOP_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/119.0.0.0 Safari/537.36"
)

LAUNCH_ARGS = [
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-blink-features=AutomationControlled",
    "--disable-web-security",
]


def random_viewport(rng: Optional[random.Random] = None) -> Tuple[int, int]:
    """Desktop viewport in 1200-1800 x 800-1200, varied per run."""
    r = rng or random
    return 1200 + r.randint(0, 600), 800 + r.randint(0, 400)


def launch_persistent_context(
    playwright: Playwright,
    user_data_dir: str,
    headless: bool = False,
    user_agent: str = DESKTOP_USER_AGENT,
) -> BrowserContext:
    """Launch Chromium on a persistent profile directory.

    Cookies and local storage survive between runs, so an operator only logs
    in once per profile directory.
    """
    width, height = random_viewport()
    return playwright.chromium.launch_persistent_context(
        user_data_dir,
        headless=headless,
        user_agent=user_agent,
        viewport={"width": width, "height": height},
        locale="en-US",
        args=LAUNCH_ARGS,
    )


def first_page(context: BrowserContext) -> Page:
    # Persistent contexts usually open with one blank tab already
    if context.pages:
        return context.pages[0]
    return context.new_page()
