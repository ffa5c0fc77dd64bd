"""Abstract repository for OpenF1-backed data access."""

from __future__ import annotations

from abc import ABC, abstractmethod

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


class F1DataRepository(ABC):
    """Read-only access to meetings, sessions and per-session records.

    Implementations return an empty list (``None`` for single lookups) when
    upstream data is unavailable and raise :class:`F1DataError` only when
    asked to be strict.
    """

    @abstractmethod
    def get_meetings(self, year: int) -> list[MeetingData]: ...

    @abstractmethod
    def get_sessions(
        self,
        year: int,
        country_name: str | None = None,
        session_name: str | None = None,
    ) -> list[SessionData]: ...

    @abstractmethod
    def get_sessions_between(
        self, first_year: int, last_year: int, session_name: str | None = None,
    ) -> list[SessionData]: ...

    @abstractmethod
    def get_session(self, session_key: int) -> SessionData | None: ...

    @abstractmethod
    def get_drivers(self, session_key: int) -> list[DriverInfo]: ...

    @abstractmethod
    def get_positions(
        self, session_key: int, driver_number: int | None = None,
    ) -> list[PositionData]: ...

    @abstractmethod
    def get_laps(self, session_key: int, driver_number: int | None = None) -> list[LapData]: ...

    @abstractmethod
    def get_session_results(self, session_key: int) -> list[SessionResultData]: ...

    @abstractmethod
    def get_stints(self, session_key: int) -> list[StintData]: ...

    @abstractmethod
    def get_pits(self, session_key: int) -> list[PitData]: ...
