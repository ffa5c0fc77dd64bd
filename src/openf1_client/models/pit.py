"""Pit stop model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


class Pit(BaseModel):
    """One pit lane visit; only the count and lap matter to the standings."""

    model_config = ConfigDict(frozen=True)

    driver_number: int | None = None
    lap_number: int | None = None
    pit_duration: float | None = None

    @model_validator(mode="before")
    @classmethod
    def _lane_duration_fallback(cls, data: Any) -> Any:
        # Newer records carry lane_duration and leave pit_duration null
        if isinstance(data, dict) and data.get("pit_duration") is None and "lane_duration" in data:
            return {**data, "pit_duration": data["lane_duration"]}
        return data
