"""Lap model."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class Lap(BaseModel):
    """Timing for one lap of one driver."""

    model_config = ConfigDict(frozen=True)

    date_start: datetime | None = None
    driver_number: int | None = None
    duration_sector_1: float | None = None
    duration_sector_2: float | None = None
    duration_sector_3: float | None = None
    is_pit_out_lap: bool | None = None
    lap_duration: float | None = None
    lap_number: int | None = None
    meeting_key: int | None = None
    session_key: int | None = None
