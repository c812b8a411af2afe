from __future__ import annotations

import logging
from typing import Callable

from config.selectors import SELECTORS
from ports.browser import NavigatorPort
from ports.pacing import PacerPort


logger = logging.getLogger(__name__)


class LinkedInSession:
    """SessionPort backed by the persistent browser profile.

    Login itself is left to the operator in the opened window.
    """

    def __init__(
        self,
        navigator: NavigatorPort,
        pacer: PacerPort,
        feed_url: str = "https://www.linkedin.com/feed/",
        login_url: str = "https://www.linkedin.com/login",
        prompt: Callable[[str], str] = input,
    ) -> None:
        self.navigator = navigator
        self.pacer = pacer
        self.feed_url = feed_url
        self.login_url = login_url
        self.prompt = prompt

    def is_authenticated(self) -> bool:
        self.navigator.goto(self.feed_url)
        self.pacer.pause(1000, 2500)
        return self.navigator.wait_for_selector(SELECTORS["global_nav"], 5000)

    def await_manual_authentication(self) -> None:
        logger.info("You are not logged in. Please log in to LinkedIn...", extra={"step": "session", "status": "waiting"})
        self.navigator.goto(self.login_url)
        self.prompt("Please log in to LinkedIn in the browser window, then press Enter to continue...")

    def ensure_authenticated(self) -> None:
        if self.is_authenticated():
            logger.info("You are already logged in.", extra={"step": "session", "status": "ok"})
            return
        self.await_manual_authentication()
