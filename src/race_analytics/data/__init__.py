"""Data layer: repository factory and re-exports."""

from __future__ import annotations

from ..config import Settings
from .base import F1DataRepository
from .errors import DriverNotFoundError, F1DataError, InvalidSelectionError, RaceNotFoundError
from .types import (
    DriverInfo,
    LapData,
    MeetingData,
    PitData,
    PositionData,
    SessionData,
    SessionResultData,
    StintData,
)


def get_repository(cached: bool = True, settings: Settings | None = None) -> F1DataRepository:
    """Return the repository the pages should use.

    The cached variant needs a Streamlit runtime; scripts and tests ask for
    ``cached=False``.
    """
    if cached:
        from .cached_repo import CachedRepository

        return CachedRepository(settings)
    from .openf1_repo import OpenF1Repository

    return OpenF1Repository(settings)


__all__ = [
    "DriverInfo",
    "DriverNotFoundError",
    "F1DataError",
    "F1DataRepository",
    "InvalidSelectionError",
    "LapData",
    "MeetingData",
    "PitData",
    "PositionData",
    "RaceNotFoundError",
    "SessionData",
    "SessionResultData",
    "StintData",
    "get_repository",
]
