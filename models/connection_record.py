from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator


NOT_AVAILABLE = "Not available"
ERROR_VALUE = "Error"


def is_sentinel(value: str | None) -> bool:
    """True for empty values and the placeholder strings written on no-email/error."""
    if not value or not value.strip():
        return True
    return value.strip().lower() in (NOT_AVAILABLE.lower(), ERROR_VALUE.lower())


class EmailStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    ERROR = "error"


class ProcessingStatus(str, Enum):
    NEW = "new"
    PROCESSED = "processed"


class ConnectionRecord(BaseModel):
    """One discovered connection, as persisted in the connections table.

    Frozen: status transitions go through ``with_enrichment`` which returns a
    copy, so the discovery fields can never be rewritten in place.
    """

    full_name: str = Field(alias="Full Name", min_length=1)
    profile_url: str = Field(alias="Profile URL")
    current_employer: str = Field(default=NOT_AVAILABLE, alias="Current Employer")
    canonical_id: str = Field(alias="Base URL")
    source_profile: str = Field(alias="Source Profile")
    page_found: int = Field(alias="Page Found", ge=1)
    date_added: date = Field(alias="Date Added")
    email_status: EmailStatus = Field(default=EmailStatus.PENDING, alias="Email Status")
    processing_status: ProcessingStatus = Field(default=ProcessingStatus.NEW, alias="Processing Status")
    last_processed: date | None = Field(default=None, alias="Last Processed")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @field_validator("last_processed", mode="before")
    @classmethod
    def _blank_is_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("current_employer", mode="before")
    @classmethod
    def _blank_employer(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            return NOT_AVAILABLE
        return value

    def with_enrichment(self, status: EmailStatus, processed_on: date) -> "ConnectionRecord":
        return self.model_copy(
            update={
                "email_status": status,
                "processing_status": ProcessingStatus.PROCESSED,
                "last_processed": processed_on,
            }
        )

    def to_row(self) -> Dict[str, str]:
        row = self.model_dump(by_alias=True, mode="json")
        return {key: "" if value is None else str(value) for key, value in row.items()}
