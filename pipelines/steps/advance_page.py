from __future__ import annotations

from pipelines.runner import RunContext
from ports.browser import NavigatorPort
from ports.pacing import PacerPort
from services.pagination import PaginationDriver


class PageBreak:
    """Longer pause between pages, skipped after the first one."""

    def __init__(self, pacer: PacerPort, navigator: NavigatorPort) -> None:
        self.pacer = pacer
        self.navigator = navigator

    def run(self, ctx: RunContext) -> RunContext:
        if ctx.exhausted or ctx.page_number <= 1:
            return ctx
        self.pacer.page_break()
        self.pacer.interact(self.navigator)
        return ctx


class AdvancePage:
    """PAGINATING step: move the driver on or mark the run exhausted."""

    def __init__(self, driver: PaginationDriver) -> None:
        self.driver = driver

    def run(self, ctx: RunContext) -> RunContext:
        if ctx.exhausted:
            return ctx
        ctx.report.pages_processed += 1
        if self.driver.advance():
            ctx.page_number = self.driver.page_number
        else:
            ctx.exhausted = True
        return ctx
