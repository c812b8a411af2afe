from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MergeResult:
    new_count: int = 0
    duplicate_count: int = 0


@dataclass(frozen=True)
class ProgressSummary:
    last_page: int = 0
    total_connections: int = 0
    processed_emails: int = 0


@dataclass
class EnrichmentReport:
    attempted: int = 0
    completed: int = 0
    emails_found: int = 0
    errors: int = 0


@dataclass
class CrawlReport:
    pages_processed: int = 0
    new_connections: int = 0
    duplicates: int = 0
    emails_found: int = 0
    errors: int = 0
