from __future__ import annotations

from pipelines.runner import RunContext
from services.pagination import PaginationDriver


class ListConnectionsPage:
    """LISTING step: pull the current page's connections into the context."""

    def __init__(self, driver: PaginationDriver) -> None:
        self.driver = driver

    def run(self, ctx: RunContext) -> RunContext:
        if ctx.exhausted:
            return ctx
        ctx.page_number = self.driver.page_number
        ctx.discovered = self.driver.list_page()
        if self.driver.exhausted:
            ctx.exhausted = True
        return ctx
