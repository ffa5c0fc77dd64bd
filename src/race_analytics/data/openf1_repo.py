"""OpenF1 API repository: the fetch boundary of the dashboard."""

from __future__ import annotations

import threading
import time
from typing import Callable, TypeVar

from openf1_client import Filter, OpenF1Client, OpenF1Error
from openf1_client.models import Driver, Lap, Meeting, Pit, Position, Session, SessionResult, Stint

from ..api_logging import log_api_call, log_skip
from ..config import Settings, get_settings
from .base import F1DataRepository
from .errors import F1DataError
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

ClientFactory = Callable[[], OpenF1Client]

T = TypeVar("T")

# ── Rate limiting ────────────────────────────────────────────────────────────

_last_request_time: float = 0.0
_rate_limit_lock = threading.Lock()


def _rate_limit(min_interval: float) -> None:
    """Sleep until *min_interval* seconds have passed since the previous request."""
    global _last_request_time
    with _rate_limit_lock:
        elapsed = time.monotonic() - _last_request_time
        if elapsed < min_interval:
            time.sleep(min_interval - elapsed)
        _last_request_time = time.monotonic()


# ── Record conversion ───────────────────────────────────────────────────────


def _to_meeting(m: Meeting) -> MeetingData:
    return {
        "meeting_key": m.meeting_key,  # type: ignore[typeddict-item]
        "meeting_name": m.meeting_name,
        "meeting_official_name": m.meeting_official_name,
        "circuit_short_name": m.circuit_short_name,
        "country_name": m.country_name,
        "country_code": m.country_code,
        "location": m.location,
        "date_start": m.date_start,
        "year": m.year if m.year is not None else (m.date_start.year if m.date_start else None),
    }


def _to_session(s: Session) -> SessionData:
    return {
        "session_key": s.session_key,  # type: ignore[typeddict-item]
        "session_name": s.session_name,
        "session_type": s.session_type,
        "meeting_key": s.meeting_key,
        "circuit_short_name": s.circuit_short_name,
        "country_name": s.country_name,
        "country_code": s.country_code,
        "location": s.location,
        "date_start": s.date_start,
        "date_end": s.date_end,
        "year": s.year if s.year is not None else (s.date_start.year if s.date_start else None),
    }


def _to_driver(d: Driver) -> DriverInfo:
    return {
        "driver_number": d.driver_number,  # type: ignore[typeddict-item]
        "full_name": d.full_name,
        "broadcast_name": d.broadcast_name,
        "name_acronym": d.name_acronym,
        "team_name": d.team_name,
        "team_colour": d.team_colour,
        "headshot_url": d.headshot_url,
        "country_code": d.country_code,
    }


def _to_position(p: Position) -> PositionData:
    return {
        "driver_number": p.driver_number,  # type: ignore[typeddict-item]
        "position": p.position,
        "date": p.date,
    }


def _to_lap(lap: Lap) -> LapData:
    return {
        "driver_number": lap.driver_number,  # type: ignore[typeddict-item]
        "lap_number": lap.lap_number,
        "lap_duration": lap.lap_duration,
        "is_pit_out_lap": bool(lap.is_pit_out_lap),
    }


def _to_stint(s: Stint) -> StintData:
    return {
        "driver_number": s.driver_number,  # type: ignore[typeddict-item]
        "stint_number": s.stint_number,
        "compound": s.compound,
        "lap_start": s.lap_start,
        "lap_end": s.lap_end,
        "tyre_age_at_start": s.tyre_age_at_start,
    }


def _to_pit(p: Pit) -> PitData:
    return {
        "driver_number": p.driver_number,  # type: ignore[typeddict-item]
        "lap_number": p.lap_number,
        "pit_duration": p.pit_duration,
    }


def _to_result(r: SessionResult) -> SessionResultData:
    return {
        "driver_number": r.driver_number,  # type: ignore[typeddict-item]
        "position": r.position,
        "points": r.points,
        "number_of_laps": r.number_of_laps,
        "classified": r.classified,
    }


# ── Repository class ─────────────────────────────────────────────────────────


class OpenF1Repository(F1DataRepository):
    """Repository over the live OpenF1 API.

    Calls are spaced by ``settings.request_interval``. Upstream failures are
    logged and come back as empty results, unless ``settings.strict_fetch``
    is set, in which case they raise :class:`F1DataError`.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._client_factory = client_factory or self._default_client

    def _default_client(self) -> OpenF1Client:
        return OpenF1Client(
            base_url=self._settings.api_base_url,
            timeout=self._settings.api_timeout,
        )

    def _fetch(self, what: str, call: Callable[[OpenF1Client], list[T]]) -> list[T]:
        _rate_limit(self._settings.request_interval)
        try:
            with self._client_factory() as f1:
                return call(f1)
        except OpenF1Error as exc:
            if self._settings.strict_fetch:
                raise F1DataError(f"Failed to fetch {what}: {exc}") from exc
            log_skip(f"fetch {what}", exc)
            return []

    @log_api_call
    def get_meetings(self, year: int) -> list[MeetingData]:
        raw = self._fetch(f"meetings for {year}", lambda f1: f1.meetings(year=year))
        return [_to_meeting(m) for m in raw if m.meeting_key is not None]

    @log_api_call
    def get_sessions(
        self,
        year: int,
        country_name: str | None = None,
        session_name: str | None = None,
    ) -> list[SessionData]:
        raw = self._fetch(
            f"sessions for {year}",
            lambda f1: f1.sessions(year=year, country_name=country_name, session_name=session_name),
        )
        return [_to_session(s) for s in raw if s.session_key is not None]

    @log_api_call
    def get_sessions_between(
        self, first_year: int, last_year: int, session_name: str | None = None,
    ) -> list[SessionData]:
        raw = self._fetch(
            f"sessions for {first_year}-{last_year}",
            lambda f1: f1.sessions(
                year=Filter(gte=first_year, lte=last_year), session_name=session_name,
            ),
        )
        return [_to_session(s) for s in raw if s.session_key is not None]

    @log_api_call
    def get_session(self, session_key: int) -> SessionData | None:
        raw = self._fetch(
            f"session {session_key}", lambda f1: f1.sessions(session_key=session_key),
        )
        sessions = [_to_session(s) for s in raw if s.session_key is not None]
        return sessions[0] if sessions else None

    @log_api_call
    def get_drivers(self, session_key: int) -> list[DriverInfo]:
        raw = self._fetch(
            f"drivers for session {session_key}",
            lambda f1: f1.drivers(session_key=session_key),
        )
        return [_to_driver(d) for d in raw if d.driver_number is not None]

    @log_api_call
    def get_positions(
        self, session_key: int, driver_number: int | None = None,
    ) -> list[PositionData]:
        raw = self._fetch(
            f"positions for session {session_key}",
            lambda f1: f1.position(session_key=session_key, driver_number=driver_number),
        )
        return [_to_position(p) for p in raw if p.driver_number is not None]

    @log_api_call
    def get_laps(self, session_key: int, driver_number: int | None = None) -> list[LapData]:
        raw = self._fetch(
            f"laps for session {session_key}",
            lambda f1: f1.laps(session_key=session_key, driver_number=driver_number),
        )
        return [_to_lap(lap) for lap in raw if lap.driver_number is not None]

    @log_api_call
    def get_session_results(self, session_key: int) -> list[SessionResultData]:
        raw = self._fetch(
            f"results for session {session_key}",
            lambda f1: f1.session_result(session_key=session_key),
        )
        return [_to_result(r) for r in raw if r.driver_number is not None]

    @log_api_call
    def get_stints(self, session_key: int) -> list[StintData]:
        raw = self._fetch(
            f"stints for session {session_key}",
            lambda f1: f1.stints(session_key=session_key),
        )
        return [_to_stint(s) for s in raw if s.driver_number is not None]

    @log_api_call
    def get_pits(self, session_key: int) -> list[PitData]:
        raw = self._fetch(
            f"pit stops for session {session_key}",
            lambda f1: f1.pit(session_key=session_key),
        )
        return [_to_pit(p) for p in raw if p.driver_number is not None]
