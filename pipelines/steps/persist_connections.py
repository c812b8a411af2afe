from __future__ import annotations

import logging

from pipelines.runner import RunContext
from ports.repos import ConnectionStorePort


logger = logging.getLogger(__name__)


class PersistConnections:
    def __init__(self, store: ConnectionStorePort) -> None:
        self.store = store

    def run(self, ctx: RunContext) -> RunContext:
        if ctx.exhausted or not ctx.discovered:
            return ctx
        result = self.store.merge_discovered(ctx.discovered, ctx.source_profile, ctx.page_number)
        ctx.report.new_connections += result.new_count
        ctx.report.duplicates += result.duplicate_count
        logger.info(
            "Page %d: %d new, %d duplicates", ctx.page_number, result.new_count, result.duplicate_count,
            extra={"page": ctx.page_number, "step": "merge", "status": "ok"},
        )
        return ctx
