from __future__ import annotations

from typing import Dict, Iterable, List, Protocol

from models import (
    ConnectionRecord,
    DiscoveredConnection,
    EmailRecord,
    EmailStatus,
    MergeResult,
    ProgressSummary,
)


class ConnectionStorePort(Protocol):
    def load_all(self) -> Dict[str, ConnectionRecord]:
        ...

    def merge_discovered(
        self,
        discovered: Iterable[DiscoveredConnection],
        source_profile: str,
        page_number: int,
    ) -> MergeResult:
        ...

    def mark_enrichment(self, canonical_id: str, email: str, status: EmailStatus) -> bool:
        ...

    def pending_for_page(self, page_number: int) -> List[ConnectionRecord]:
        ...

    def progress_summary(self) -> ProgressSummary:
        ...


class EmailLedgerPort(Protocol):
    def load_all(self) -> Dict[str, EmailRecord]:
        ...

    def has(self, canonical_id: str) -> bool:
        ...

    def insert_if_absent(
        self,
        canonical_id: str,
        full_name: str,
        profile_url: str,
        email: str,
        source_profile: str,
    ) -> bool:
        ...
