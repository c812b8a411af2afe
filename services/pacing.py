"""Humanized pacing: randomized delays, long-pause schedule and pointer hints.

The module-level functions are pure (apart from the random source they are
handed) and hold no state between calls. ``HumanPacer`` sleeps for real and is
used in production; ``NoDelayPacer`` has the same surface and never sleeps.
"""
from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from typing import Callable, Optional

from config.settings import PacingConfig
from ports.browser import NavigatorPort


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LongPauseBand:
    every_min: int
    every_max: int
    pause_min_ms: int
    pause_max_ms: int


@dataclass(frozen=True)
class PointerHint:
    x: int
    y: int
    steps: int


def jitter_delay(min_ms: int, max_ms: int, rng: Optional[random.Random] = None) -> int:
    """Uniform integer delay in [min_ms, max_ms], both ends inclusive."""
    if max_ms < min_ms:
        min_ms, max_ms = max_ms, min_ms
    r = rng or random
    return r.randint(int(min_ms), int(max_ms))


def short_break_schedule(config: Optional[PacingConfig] = None) -> LongPauseBand:
    cfg = config or PacingConfig()
    return LongPauseBand(
        every_min=cfg.long_pause_every_min,
        every_max=cfg.long_pause_every_max,
        pause_min_ms=cfg.long_pause_min_ms,
        pause_max_ms=cfg.long_pause_max_ms,
    )


def should_take_long_pause(index: int, band: LongPauseBand, rng: Optional[random.Random] = None) -> bool:
    # The divisor is redrawn per item, so pauses land every 3-7 items on average
    if index <= 0:
        return False
    return index % jitter_delay(band.every_min, band.every_max, rng) == 0


def micro_interaction_hint(width: int, height: int, rng: Optional[random.Random] = None) -> PointerHint:
    r = rng or random
    return PointerHint(
        x=r.randint(0, max(0, int(width) - 1)),
        y=r.randint(0, max(0, int(height) - 1)),
        steps=r.randint(5, 15),
    )


class HumanPacer:
    def __init__(
        self,
        config: PacingConfig,
        rng: Optional[random.Random] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.config = config
        self.rng = rng or random.Random()
        self.band = short_break_schedule(config)
        self._sleep = sleep

    def pause(self, min_ms: int, max_ms: int) -> None:
        self._sleep(jitter_delay(min_ms, max_ms, self.rng) / 1000.0)

    def wait(self, ms: int) -> None:
        self._sleep(max(0, ms) / 1000.0)

    def item_delay(self) -> None:
        self.pause(self.config.item_delay_min_ms, self.config.item_delay_max_ms)

    def long_pause_due(self, index: int) -> bool:
        return should_take_long_pause(index, self.band, self.rng)

    def long_pause(self) -> None:
        logger.info("Taking a longer break to appear more human...", extra={"step": "pacing"})
        self.pause(self.band.pause_min_ms, self.band.pause_max_ms)

    def page_break(self) -> None:
        logger.info("Taking a break between pages...", extra={"step": "pacing"})
        self.pause(self.config.page_break_min_ms, self.config.page_break_max_ms)

    def interact(self, navigator: NavigatorPort) -> None:
        try:
            width, height = navigator.viewport_size()
            hint = micro_interaction_hint(width, height, self.rng)
            navigator.move_pointer(hint.x, hint.y, hint.steps)
        except Exception as exc:
            # Best effort; a closed or navigating page must not fail the caller
            logger.debug("Pointer movement skipped: %s", exc, extra={"step": "pacing"})


class NoDelayPacer:
    """Drop-in pacer for tests and dry runs: no sleeps, no pointer moves."""

    def pause(self, min_ms: int, max_ms: int) -> None:
        return None

    def wait(self, ms: int) -> None:
        return None

    def item_delay(self) -> None:
        return None

    def long_pause_due(self, index: int) -> bool:
        return False

    def long_pause(self) -> None:
        return None

    def page_break(self) -> None:
        return None

    def interact(self, navigator: NavigatorPort) -> None:
        return None
