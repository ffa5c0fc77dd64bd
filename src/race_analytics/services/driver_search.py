"""Locate a driver in the most recent race sessions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from ..api_logging import log_service_call, log_skip
from ..constants import RACE_SESSION_NAME
from ..data.base import F1DataRepository
from ..data.errors import DriverNotFoundError, F1DataError, InvalidSelectionError
from ..data.types import DriverInfo, SessionData
from .common import session_start

DEFAULT_LOOKBACK = 5


@dataclass(frozen=True)
class DriverMatch:
    driver: DriverInfo
    session: SessionData


def matches_query(driver: DriverInfo, query: str) -> bool:
    """True if *query* is a case-insensitive substring of the driver's name,
    broadcast name or acronym, or exactly equals the car number."""
    needle = query.casefold()
    for field in ("full_name", "broadcast_name", "name_acronym"):
        value = driver.get(field)
        if value and needle in value.casefold():
            return True
    return str(driver.get("driver_number")) == query


def recent_race_sessions(sessions: list[SessionData], limit: int | None = None) -> list[SessionData]:
    """Race sessions, newest first, optionally truncated to *limit*."""
    races = [s for s in sessions if s.get("session_name") == RACE_SESSION_NAME]
    races.sort(key=session_start, reverse=True)
    return races if limit is None else races[:limit]


class DriverSearchService:
    """Finds a driver by scanning the driver lists of recent races.

    Sessions are scanned newest first and the scan stops at the first
    session that lists a match. A session whose driver list cannot be
    fetched is skipped.
    """

    def __init__(self, repo: F1DataRepository, lookback: int = DEFAULT_LOOKBACK) -> None:
        self._repo = repo
        self._lookback = lookback

    def _scan(
        self,
        race_sessions: list[SessionData],
        predicate: Callable[[DriverInfo], bool],
    ) -> DriverMatch | None:
        for session in recent_race_sessions(race_sessions, self._lookback):
            session_key = session["session_key"]
            try:
                drivers = self._repo.get_drivers(session_key)
            except F1DataError as exc:
                log_skip(f"drivers for session {session_key}", exc)
                continue
            for driver in drivers:
                if predicate(driver):
                    return DriverMatch(driver=driver, session=session)
        return None

    @log_service_call
    def find_driver(self, query: str, race_sessions: list[SessionData]) -> DriverMatch:
        """Find a driver by name, broadcast name, acronym or car number."""
        query = query.strip()
        if not query:
            raise InvalidSelectionError("Enter a driver name, acronym or number.")
        if not race_sessions:
            raise DriverNotFoundError("No race sessions available.")

        match = self._scan(race_sessions, lambda d: matches_query(d, query))
        if match is None:
            raise DriverNotFoundError(f"No driver found matching '{query}'.")
        return match

    @log_service_call
    def find_driver_by_number(
        self, driver_number: int, race_sessions: list[SessionData],
    ) -> DriverMatch:
        """Find the driver racing with *driver_number* most recently."""
        match = self._scan(race_sessions, lambda d: d.get("driver_number") == driver_number)
        if match is None:
            raise DriverNotFoundError("Driver not found in any recent race sessions.")
        return match
