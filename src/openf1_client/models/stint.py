"""Stint model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

UNKNOWN_COMPOUND = "UNKNOWN"


class Stint(BaseModel):
    """A run of consecutive laps on one set of tyres."""

    model_config = ConfigDict(frozen=True)

    driver_number: int | None = None
    stint_number: int | None = None
    compound: str = UNKNOWN_COMPOUND
    lap_start: int | None = None
    lap_end: int | None = None
    tyre_age_at_start: int | None = None

    @field_validator("compound", mode="before")
    @classmethod
    def _normalize_compound(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            return UNKNOWN_COMPOUND
        return value.strip().upper() if isinstance(value, str) else value
