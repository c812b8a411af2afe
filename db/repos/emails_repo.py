from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Dict

from pydantic import ValidationError

from config.settings import StorageConfig
from db.csv_table import read_table, write_table
from db.schema import EMAIL_COLUMNS, StoreCorrupt
from models import EmailRecord


logger = logging.getLogger(__name__)


class EmailsRepo:
    """Append-only ledger of resolved emails keyed by canonical profile URL."""

    def __init__(self, config: StorageConfig, today: Callable[[], date] = date.today):
        self.path = config.emails_path
        self.today = today

    def load_all(self) -> Dict[str, EmailRecord]:
        _header, rows = read_table(self.path, EMAIL_COLUMNS)
        records: Dict[str, EmailRecord] = {}
        for line_no, row in enumerate(rows, start=2):
            try:
                rec = EmailRecord.model_validate(row)
            except ValidationError as exc:
                raise StoreCorrupt(f"{self.path}: invalid row {line_no}: {exc.errors()[0]['msg']}") from exc
            # First write wins
            records.setdefault(rec.canonical_id, rec)
        return records

    def has(self, canonical_id: str) -> bool:
        return canonical_id in self.load_all()

    def insert_if_absent(
        self,
        canonical_id: str,
        full_name: str,
        profile_url: str,
        email: str,
        source_profile: str,
    ) -> bool:
        """Append an email row unless one exists for ``canonical_id``.

        Returns True when a row was written. The duplicate path is a no-op,
        not an error.
        """
        records = self.load_all()
        if canonical_id in records:
            logger.debug("Email already recorded for %s", canonical_id, extra={"step": "ledger", "status": "duplicate"})
            return False
        records[canonical_id] = EmailRecord(
            full_name=full_name,
            profile_url=profile_url,
            canonical_id=canonical_id,
            email=email,
            date_extracted=self.today(),
            source_profile=source_profile,
        )
        write_table(self.path, EMAIL_COLUMNS, (r.to_row() for r in records.values()))
        logger.info("Email saved for %s: %s", full_name, email, extra={"step": "ledger", "status": "ok"})
        return True
