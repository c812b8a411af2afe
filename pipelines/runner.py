from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import List, Protocol

from models import CrawlReport, DiscoveredConnection
from utils.logging_setup import init_logging


logger = logging.getLogger(__name__)


@dataclass
class RunContext:
    """State handed from step to step for one result page."""

    source_profile: str = ""
    page_number: int = 1
    discovered: List[DiscoveredConnection] = field(default_factory=list)
    exhausted: bool = False
    report: CrawlReport = field(default_factory=CrawlReport)


class Step(Protocol):
    def run(self, ctx: RunContext) -> RunContext:
        ...


class Pipeline:
    def __init__(self, steps: List[Step]):
        self.steps = steps

    def run(self, ctx: RunContext) -> RunContext:
        # Make logging idempotent for any direct runner use
        init_logging()
        for step in self.steps:
            started = time.monotonic()
            ctx = step.run(ctx)
            logger.debug(
                "%s done", type(step).__name__,
                extra={
                    "page": ctx.page_number,
                    "step": type(step).__name__,
                    "status": "exhausted" if ctx.exhausted else "ok",
                    "duration_ms": int((time.monotonic() - started) * 1000),
                },
            )
        return ctx
