from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv


def _load_env() -> None:
    # Centralized dotenv loading; safe if .env missing
    load_dotenv()


def _as_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class StorageConfig:
    """Locations of the two durable tables."""

    connections_path: str
    emails_path: str


@dataclass(frozen=True)
class PacingConfig:
    """Delay bands (milliseconds) used by the humanized pacer."""

    item_delay_min_ms: int = 1500
    item_delay_max_ms: int = 4000
    long_pause_every_min: int = 3
    long_pause_every_max: int = 7
    long_pause_min_ms: int = 8000
    long_pause_max_ms: int = 15000
    page_break_min_ms: int = 3000
    page_break_max_ms: int = 8000


@dataclass(frozen=True)
class Settings:
    connections_csv: str
    emails_csv: str

    log_level: str
    run_env: str

    # Source surface
    profile_url_prefix: str
    feed_url: str
    login_url: str
    contact_info_suffix: str
    page_size: int

    # Pacing
    item_delay_min_ms: int
    item_delay_max_ms: int
    long_pause_every_min: int
    long_pause_every_max: int
    long_pause_min_ms: int
    long_pause_max_ms: int
    page_break_min_ms: int
    page_break_max_ms: int

    # Timeouts
    navigation_timeout_ms: int
    selector_timeout_ms: int
    page_button_timeout_ms: int
    next_button_timeout_ms: int
    listing_change_timeout_ms: int
    listing_poll_interval_ms: int
    profile_nav_attempts: int

    # Browser
    user_data_dir: str
    headless: bool
    debug_dir: str = "debug"

    def storage(self) -> StorageConfig:
        return StorageConfig(connections_path=self.connections_csv, emails_path=self.emails_csv)

    def pacing(self) -> PacingConfig:
        return PacingConfig(
            item_delay_min_ms=self.item_delay_min_ms,
            item_delay_max_ms=self.item_delay_max_ms,
            long_pause_every_min=self.long_pause_every_min,
            long_pause_every_max=self.long_pause_every_max,
            long_pause_min_ms=self.long_pause_min_ms,
            long_pause_max_ms=self.long_pause_max_ms,
            page_break_min_ms=self.page_break_min_ms,
            page_break_max_ms=self.page_break_max_ms,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_env()
    every_min = int(os.getenv("LONG_PAUSE_EVERY_MIN", "3"))
    every_max = int(os.getenv("LONG_PAUSE_EVERY_MAX", "7"))
    if every_min < 1 or every_max < every_min:
        raise RuntimeError(
            "LONG_PAUSE_EVERY_MIN must be >= 1 and <= LONG_PAUSE_EVERY_MAX"
        )
    return Settings(
        connections_csv=os.getenv("CONNECTIONS_CSV", "master_connections.csv"),
        emails_csv=os.getenv("EMAILS_CSV", "connections_emails.csv"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        run_env=os.getenv("RUN_ENV", "local"),
        profile_url_prefix=os.getenv("PROFILE_URL_PREFIX", "https://www.linkedin.com/in/"),
        feed_url=os.getenv("FEED_URL", "https://www.linkedin.com/feed/"),
        login_url=os.getenv("LOGIN_URL", "https://www.linkedin.com/login"),
        contact_info_suffix=os.getenv("CONTACT_INFO_SUFFIX", "overlay/contact-info/"),
        page_size=int(os.getenv("PAGE_SIZE", "10")),
        item_delay_min_ms=int(os.getenv("ITEM_DELAY_MIN_MS", "1500")),
        item_delay_max_ms=int(os.getenv("ITEM_DELAY_MAX_MS", "4000")),
        long_pause_every_min=every_min,
        long_pause_every_max=every_max,
        long_pause_min_ms=int(os.getenv("LONG_PAUSE_MIN_MS", "8000")),
        long_pause_max_ms=int(os.getenv("LONG_PAUSE_MAX_MS", "15000")),
        page_break_min_ms=int(os.getenv("PAGE_BREAK_MIN_MS", "3000")),
        page_break_max_ms=int(os.getenv("PAGE_BREAK_MAX_MS", "8000")),
        navigation_timeout_ms=int(os.getenv("NAVIGATION_TIMEOUT_MS", "45000")),
        selector_timeout_ms=int(os.getenv("SELECTOR_TIMEOUT_MS", "20000")),
        page_button_timeout_ms=int(os.getenv("PAGE_BUTTON_TIMEOUT_MS", "7000")),
        next_button_timeout_ms=int(os.getenv("NEXT_BUTTON_TIMEOUT_MS", "10000")),
        listing_change_timeout_ms=int(os.getenv("LISTING_CHANGE_TIMEOUT_MS", "20000")),
        listing_poll_interval_ms=int(os.getenv("LISTING_POLL_INTERVAL_MS", "250")),
        profile_nav_attempts=int(os.getenv("PROFILE_NAV_ATTEMPTS", "3")),
        user_data_dir=os.getenv("USER_DATA_DIR", "linkedin-session"),
        headless=_as_bool(os.getenv("HEADLESS"), default=False),
        debug_dir=os.getenv("DEBUG_DIR", "debug"),
    )
