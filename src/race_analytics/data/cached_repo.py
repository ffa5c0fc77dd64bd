"""Streamlit-cached repository used by the dashboard pages."""

from __future__ import annotations

from typing import Any, Callable

import streamlit as st

from ..api_logging import log_skip
from ..config import Settings, get_settings
from .base import F1DataRepository
from .errors import F1DataError
from .openf1_repo import OpenF1Repository
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

_TTL = get_settings().cache_ttl

# ── Cached fetch helpers ─────────────────────────────────────────────────────
# The leading underscore keeps the repository out of Streamlit's cache key.
# The wrapped repository is strict, so failures raise and are never cached.


@st.cache_data(ttl=_TTL, show_spinner=False)
def _fetch_meetings(_repo: OpenF1Repository, year: int) -> list[MeetingData]:
    return _repo.get_meetings(year)


@st.cache_data(ttl=_TTL, show_spinner=False)
def _fetch_sessions(
    _repo: OpenF1Repository, year: int, country_name: str | None, session_name: str | None,
) -> list[SessionData]:
    return _repo.get_sessions(year, country_name, session_name)


@st.cache_data(ttl=_TTL, show_spinner=False)
def _fetch_sessions_between(
    _repo: OpenF1Repository, first_year: int, last_year: int, session_name: str | None,
) -> list[SessionData]:
    return _repo.get_sessions_between(first_year, last_year, session_name)


@st.cache_data(ttl=_TTL, show_spinner=False)
def _fetch_session(_repo: OpenF1Repository, session_key: int) -> SessionData | None:
    return _repo.get_session(session_key)


@st.cache_data(ttl=_TTL, show_spinner=False)
def _fetch_drivers(_repo: OpenF1Repository, session_key: int) -> list[DriverInfo]:
    return _repo.get_drivers(session_key)


@st.cache_data(ttl=_TTL, show_spinner=False)
def _fetch_positions(
    _repo: OpenF1Repository, session_key: int, driver_number: int | None,
) -> list[PositionData]:
    return _repo.get_positions(session_key, driver_number)


@st.cache_data(ttl=_TTL, show_spinner=False)
def _fetch_laps(
    _repo: OpenF1Repository, session_key: int, driver_number: int | None,
) -> list[LapData]:
    return _repo.get_laps(session_key, driver_number)


@st.cache_data(ttl=_TTL, show_spinner=False)
def _fetch_session_results(_repo: OpenF1Repository, session_key: int) -> list[SessionResultData]:
    return _repo.get_session_results(session_key)


@st.cache_data(ttl=_TTL, show_spinner=False)
def _fetch_stints(_repo: OpenF1Repository, session_key: int) -> list[StintData]:
    return _repo.get_stints(session_key)


@st.cache_data(ttl=_TTL, show_spinner=False)
def _fetch_pits(_repo: OpenF1Repository, session_key: int) -> list[PitData]:
    return _repo.get_pits(session_key)


# ── Repository class ─────────────────────────────────────────────────────────


class CachedRepository(F1DataRepository):
    """Memoises OpenF1 fetches for the lifetime of the Streamlit server."""

    def __init__(self, settings: Settings | None = None) -> None:
        settings = settings or get_settings()
        self._strict = settings.strict_fetch
        self._repo = OpenF1Repository(settings.model_copy(update={"strict_fetch": True}))

    def _call(self, fetch: Callable[..., Any], empty: Any, *args: Any) -> Any:
        try:
            return fetch(self._repo, *args)
        except F1DataError as exc:
            if self._strict:
                raise
            log_skip(f"cached {getattr(fetch, '__name__', 'fetch')}{args}", exc)
            return empty

    def get_meetings(self, year: int) -> list[MeetingData]:
        return self._call(_fetch_meetings, [], year)

    def get_sessions(
        self,
        year: int,
        country_name: str | None = None,
        session_name: str | None = None,
    ) -> list[SessionData]:
        return self._call(_fetch_sessions, [], year, country_name, session_name)

    def get_sessions_between(
        self, first_year: int, last_year: int, session_name: str | None = None,
    ) -> list[SessionData]:
        return self._call(_fetch_sessions_between, [], first_year, last_year, session_name)

    def get_session(self, session_key: int) -> SessionData | None:
        return self._call(_fetch_session, None, session_key)

    def get_drivers(self, session_key: int) -> list[DriverInfo]:
        return self._call(_fetch_drivers, [], session_key)

    def get_positions(
        self, session_key: int, driver_number: int | None = None,
    ) -> list[PositionData]:
        return self._call(_fetch_positions, [], session_key, driver_number)

    def get_laps(self, session_key: int, driver_number: int | None = None) -> list[LapData]:
        return self._call(_fetch_laps, [], session_key, driver_number)

    def get_session_results(self, session_key: int) -> list[SessionResultData]:
        return self._call(_fetch_session_results, [], session_key)

    def get_stints(self, session_key: int) -> list[StintData]:
        return self._call(_fetch_stints, [], session_key)

    def get_pits(self, session_key: int) -> list[PitData]:
        return self._call(_fetch_pits, [], session_key)
