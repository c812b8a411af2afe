from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from .connection_record import NOT_AVAILABLE


class DiscoveredConnection(BaseModel):
    """Raw list-item tuple handed over by the page extractor."""

    full_name: str
    profile_url: str
    current_employer: str = NOT_AVAILABLE

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    @field_validator("full_name", "profile_url")
    @classmethod
    def _required(cls, value: str) -> str:
        if not value:
            raise ValueError("must not be empty")
        return value

    @field_validator("current_employer", mode="before")
    @classmethod
    def _employer_default(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            return NOT_AVAILABLE
        return value
