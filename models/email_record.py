from __future__ import annotations

from datetime import date
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field


class EmailRecord(BaseModel):
    """Resolved contact value for one connection; written once, never updated."""

    full_name: str = Field(alias="Full Name")
    profile_url: str = Field(alias="Profile URL")
    canonical_id: str = Field(alias="Base URL")
    email: str = Field(alias="Email", min_length=1)
    date_extracted: date = Field(alias="Date Extracted")
    source_profile: str = Field(alias="Source Profile")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    def to_row(self) -> Dict[str, str]:
        row = self.model_dump(by_alias=True, mode="json")
        return {key: str(value) for key, value in row.items()}
