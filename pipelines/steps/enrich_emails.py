from __future__ import annotations

from pipelines.runner import RunContext
from services.enrichment_service import EnrichmentProcessor


class EnrichPendingEmails:
    def __init__(self, processor: EnrichmentProcessor) -> None:
        self.processor = processor

    def run(self, ctx: RunContext) -> RunContext:
        if ctx.exhausted:
            return ctx
        report = self.processor.process_page(ctx.page_number)
        ctx.report.emails_found += report.emails_found
        ctx.report.errors += report.errors
        return ctx
