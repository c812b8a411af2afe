from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Dict, Iterable, List

from pydantic import ValidationError

from config.settings import StorageConfig
from db.csv_table import read_table, write_table
from db.schema import CONNECTION_COLUMNS, StoreCorrupt, connection_columns
from models import (
    ConnectionRecord,
    DiscoveredConnection,
    EmailStatus,
    MergeResult,
    ProcessingStatus,
    ProgressSummary,
    is_sentinel,
)
from ports.repos import EmailLedgerPort
from services.url_utils import canonical_profile_url


logger = logging.getLogger(__name__)


class ConnectionsRepo:
    """Durable table of discovered connections keyed by canonical profile URL.

    Every mutation is a full read-modify-write of the CSV table, replaced
    atomically. A single crawl process is assumed to own the file.
    """

    def __init__(
        self,
        config: StorageConfig,
        emails: EmailLedgerPort,
        today: Callable[[], date] = date.today,
    ):
        self.path = config.connections_path
        self.emails = emails
        self.today = today

    def load_all(self) -> Dict[str, ConnectionRecord]:
        """Return canonical_id -> record in storage (first discovery) order."""
        _header, rows = read_table(self.path, CONNECTION_COLUMNS)
        records: Dict[str, ConnectionRecord] = {}
        for line_no, row in enumerate(rows, start=2):
            profile_url = (row.get("Profile URL") or "").strip()
            if not profile_url:
                raise StoreCorrupt(f"{self.path}: row {line_no} has no Profile URL")
            # The key is always re-derived, never trusted from the Base URL column
            row = dict(row, **{"Base URL": canonical_profile_url(profile_url)})
            try:
                rec = ConnectionRecord.model_validate(row)
            except ValidationError as exc:
                err = exc.errors()[0]
                field = ".".join(str(p) for p in err.get("loc", ()))
                raise StoreCorrupt(f"{self.path}: invalid row {line_no} ({field}): {err['msg']}") from exc
            records.setdefault(rec.canonical_id, rec)
        return records

    def _save(self, records: Dict[str, ConnectionRecord]) -> None:
        with_last_processed = any(r.last_processed is not None for r in records.values())
        write_table(
            self.path,
            connection_columns(with_last_processed),
            (r.to_row() for r in records.values()),
        )

    def merge_discovered(
        self,
        discovered: Iterable[DiscoveredConnection],
        source_profile: str,
        page_number: int,
    ) -> MergeResult:
        records = self.load_all()
        new_count = 0
        duplicate_count = 0
        today = self.today()
        for conn in discovered:
            canonical_id = canonical_profile_url(conn.profile_url)
            if canonical_id in records:
                duplicate_count += 1
                logger.info(
                    "Duplicate found: %s (%s)", conn.full_name, canonical_id,
                    extra={"page": page_number, "step": "merge", "status": "duplicate"},
                )
                continue
            records[canonical_id] = ConnectionRecord(
                full_name=conn.full_name,
                profile_url=conn.profile_url,
                current_employer=conn.current_employer,
                canonical_id=canonical_id,
                source_profile=source_profile,
                page_found=page_number,
                date_added=today,
                email_status=EmailStatus.PENDING,
                processing_status=ProcessingStatus.NEW,
            )
            new_count += 1
        self._save(records)
        logger.info(
            "Connections table updated: %d new connections, %d duplicates skipped",
            new_count, duplicate_count,
            extra={"page": page_number, "step": "merge", "status": "ok"},
        )
        return MergeResult(new_count=new_count, duplicate_count=duplicate_count)

    def mark_enrichment(self, canonical_id: str, email: str, status: EmailStatus) -> bool:
        """Record the outcome of one enrichment attempt.

        Unknown ids are a logged no-op and return False. A completed attempt
        with a real email is appended to the email ledger before the row
        leaves pending, so a failed ledger write keeps the row retryable.
        """
        records = self.load_all()
        current = records.get(canonical_id)
        if current is None:
            logger.warning(
                "No connection stored for %s; enrichment result dropped", canonical_id,
                extra={"step": "mark_enrichment", "status": "unknown"},
            )
            return False
        status = EmailStatus(status)
        if status is EmailStatus.COMPLETED and not is_sentinel(email):
            self.emails.insert_if_absent(
                canonical_id=canonical_id,
                full_name=current.full_name,
                profile_url=current.profile_url,
                email=email.strip(),
                source_profile=current.source_profile,
            )
        records[canonical_id] = current.with_enrichment(status, self.today())
        self._save(records)
        return True

    def pending_for_page(self, page_number: int) -> List[ConnectionRecord]:
        return [
            r for r in self.load_all().values()
            if r.page_found == page_number and r.email_status is EmailStatus.PENDING
        ]

    def error_rows(self) -> List[ConnectionRecord]:
        return [r for r in self.load_all().values() if r.email_status is EmailStatus.ERROR]

    def get(self, canonical_id: str) -> ConnectionRecord | None:
        return self.load_all().get(canonical_id)

    def progress_summary(self) -> ProgressSummary:
        records = list(self.load_all().values())
        return ProgressSummary(
            last_page=max((r.page_found for r in records), default=0),
            total_connections=len(records),
            processed_emails=sum(1 for r in records if r.email_status is EmailStatus.COMPLETED),
        )
