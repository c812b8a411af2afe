from __future__ import annotations

from typing import Iterable, List, Sequence


class StoreCorrupt(RuntimeError):
    """A durable table exists but cannot be read as the expected schema."""


CONNECTION_COLUMNS: List[str] = [
    "Full Name",
    "Profile URL",
    "Current Employer",
    "Base URL",
    "Source Profile",
    "Page Found",
    "Date Added",
    "Email Status",
    "Processing Status",
]

# Appended once the first enrichment result has been recorded
LAST_PROCESSED_COLUMN = "Last Processed"

EMAIL_COLUMNS: List[str] = [
    "Full Name",
    "Profile URL",
    "Base URL",
    "Email",
    "Date Extracted",
    "Source Profile",
]


def connection_columns(with_last_processed: bool) -> List[str]:
    if with_last_processed:
        return CONNECTION_COLUMNS + [LAST_PROCESSED_COLUMN]
    return list(CONNECTION_COLUMNS)


def check_header(path: str, header: Sequence[str] | None, required: Iterable[str]) -> None:
    """Raise StoreCorrupt when any required column is absent from the header."""
    present = set(header or [])
    missing = [col for col in required if col not in present]
    if missing:
        raise StoreCorrupt(f"{path}: missing required column(s): {', '.join(missing)}")
