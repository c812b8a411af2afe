from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Dict, Optional

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page

from config.selectors import SELECTORS


logger = logging.getLogger(__name__)


def save_debug_files(page: Page, directory: str, prefix: str = "debug") -> Optional[Dict[str, str]]:
    """Save a full-page screenshot and the page HTML for diagnostics.

    Returns the written paths, or None when the page could not be captured.
    """
    out_dir = Path(directory)
    out_dir.mkdir(parents=True, exist_ok=True)
    stamp = time.strftime("%Y%m%d_%H%M%S")
    screenshot_path = out_dir / f"{prefix}_{stamp}.png"
    html_path = out_dir / f"{prefix}_{stamp}.html"
    try:
        page.screenshot(path=str(screenshot_path), full_page=True)
        main = page.query_selector(SELECTORS["main_content"])
        html = main.inner_html() if main is not None else page.content()
        html_path.write_text(html, encoding="utf-8")
    except PlaywrightError as exc:
        logger.warning("Could not capture debug artifacts: %s", exc, extra={"step": "debug", "status": "error"})
        return None
    logger.info("Debug artifacts saved to %s", out_dir, extra={"step": "debug", "status": "ok"})
    return {"screenshot": str(screenshot_path), "html": str(html_path)}
