"""Seasons, their meetings, and the Grand Prix race session of each meeting."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from ..api_logging import log_service_call
from ..constants import COUNTRY_CODES, FLAG_URL_TEMPLATE, RACE_SESSION_TYPE
from ..data.base import F1DataRepository
from ..data.errors import F1DataError, InvalidSelectionError, RaceNotFoundError
from ..data.types import MeetingData, SessionData
from .common import session_start


@dataclass(frozen=True)
class TrackInfo:
    meeting_key: int
    meeting_name: str
    meeting_official_name: str
    circuit_short_name: str
    country_name: str
    year: int
    date_start: datetime | None
    flag_url: str


@dataclass(frozen=True)
class SeasonCalendar:
    tracks_by_year: dict[int, list[TrackInfo]] = field(default_factory=dict)
    race_sessions: list[SessionData] = field(default_factory=list)

    @property
    def years(self) -> list[int]:
        return sorted(self.tracks_by_year, reverse=True)


def flag_url(country_name: str | None) -> str:
    """flagcdn.com image for a country, or '' when it is not in the map."""
    if not country_name:
        return ""
    lowered = country_name.casefold()
    for name, code in COUNTRY_CODES.items():
        if name.casefold() in lowered:
            return FLAG_URL_TEMPLATE.format(code=code)
    return ""


def is_grand_prix_race(session: SessionData) -> bool:
    """A main race session; sprint races share the 'Race' type and are excluded."""
    if session.get("session_type") != RACE_SESSION_TYPE:
        return False
    name = session.get("session_name") or ""
    return "sprint" not in name.casefold()


def to_track(meeting: MeetingData, year: int) -> TrackInfo:
    return TrackInfo(
        meeting_key=meeting["meeting_key"],
        meeting_name=meeting.get("meeting_name") or "",
        meeting_official_name=meeting.get("meeting_official_name") or meeting.get("meeting_name") or "",
        circuit_short_name=meeting.get("circuit_short_name") or "",
        country_name=meeting.get("country_name") or "",
        year=meeting.get("year") or year,
        date_start=meeting.get("date_start"),
        flag_url=flag_url(meeting.get("country_name")),
    )


class SeasonCalendarService:
    """Loads the meetings and race sessions of a window of seasons."""

    def __init__(self, repo: F1DataRepository, first_season: int, last_season: int) -> None:
        self._repo = repo
        self.first_season = first_season
        self.last_season = last_season

    @property
    def seasons(self) -> list[int]:
        return list(range(self.first_season, self.last_season + 1))

    @log_service_call
    def load_calendar(self) -> SeasonCalendar:
        """Meetings grouped by season and every Grand Prix race session."""
        tracks_by_year: dict[int, list[TrackInfo]] = {}
        race_sessions: list[SessionData] = []

        for year in self.seasons:
            meetings = self._repo.get_meetings(year)
            sessions = self._repo.get_sessions(year)

            tracks = [to_track(m, year) for m in meetings]
            if tracks:
                tracks.sort(key=lambda t: (t.date_start is None, t.date_start or datetime.min))
                tracks_by_year[year] = tracks
            race_sessions.extend(s for s in sessions if is_grand_prix_race(s))

        if not tracks_by_year and not race_sessions:
            raise F1DataError(
                f"Error loading data: no seasons between {self.first_season} and {self.last_season}.",
            )
        race_sessions.sort(key=session_start)
        return SeasonCalendar(tracks_by_year=tracks_by_year, race_sessions=race_sessions)

    @log_service_call
    def meetings_for_year(self, year: int) -> list[TrackInfo]:
        """Meetings of one season, for the year/race selectors."""
        if not self.first_season <= year <= self.last_season:
            raise InvalidSelectionError(
                f"Please select a year between {self.first_season} and {self.last_season}.",
            )
        return [to_track(m, year) for m in self._repo.get_meetings(year)]

    @staticmethod
    def race_session_for_meeting(calendar: SeasonCalendar, meeting_key: int) -> SessionData:
        """The Grand Prix race session of a meeting."""
        for session in calendar.race_sessions:
            if session.get("meeting_key") == meeting_key:
                return session

        circuit = next(
            (
                t.circuit_short_name or t.meeting_name
                for tracks in calendar.tracks_by_year.values()
                for t in tracks
                if t.meeting_key == meeting_key
            ),
            str(meeting_key),
        )
        raise RaceNotFoundError(f"No race session found for {circuit}")
