"""Season and career statistics for one driver, folded from race positions."""

from __future__ import annotations

import statistics
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable

from ..api_logging import log_service_call, log_skip
from ..constants import PODIUM_POSITIONS, RACE_SESSION_NAME
from ..data.base import F1DataRepository
from ..data.errors import DriverNotFoundError, F1DataError
from ..data.types import DriverInfo, PositionData, SessionData
from .common import race_name
from .driver_search import DEFAULT_LOOKBACK, DriverSearchService, recent_race_sessions
from .points import race_points

# (1-based index, total, race name), called before each race is fetched
ProgressCallback = Callable[[int, int, str], None]


@dataclass(frozen=True)
class RaceResult:
    session_key: int
    season: int
    race_name: str
    race_date: datetime | None
    start_position: int
    finish_position: int
    position_change: int
    points: int


@dataclass(frozen=True)
class DriverStats:
    total_races: int = 0
    podiums: int = 0
    best_position: int | None = None
    worst_position: int | None = None
    average_position: float | None = None
    points: int = 0


@dataclass(frozen=True)
class DriverProfile:
    driver: DriverInfo
    career: DriverStats
    seasons: dict[int, DriverStats] = field(default_factory=dict)
    season_races: dict[int, list[RaceResult]] = field(default_factory=dict)
    sessions_checked: int = 0
    skipped_sessions: int = 0

    @property
    def has_results(self) -> bool:
        return self.career.total_races > 0

    @property
    def years(self) -> list[int]:
        """Seasons with at least one result, latest first."""
        return sorted(self.seasons, reverse=True)


def _season_of(session: SessionData) -> int:
    if session.get("year") is not None:
        return session["year"]  # type: ignore[return-value]
    start = session.get("date_start")
    return start.year if start is not None else 0


def race_result_from_positions(
    session: SessionData, positions: list[PositionData],
) -> RaceResult | None:
    """Derive start/finish from a driver's position records in one race.

    The start is the position at the earliest timestamp and the finish the
    position at the latest. Records without a date or position are ignored;
    ``None`` means nothing usable was left.
    """
    timed = [p for p in positions if p.get("date") is not None and p.get("position") is not None]
    if not timed:
        return None
    timed.sort(key=lambda p: p["date"])  # type: ignore[arg-type, return-value]
    start: int = timed[0]["position"]  # type: ignore[assignment]
    finish: int = timed[-1]["position"]  # type: ignore[assignment]
    return RaceResult(
        session_key=session["session_key"],
        season=_season_of(session),
        race_name=race_name(session),
        race_date=session.get("date_start"),
        start_position=start,
        finish_position=finish,
        position_change=start - finish,
        points=race_points(finish),
    )


def aggregate_stats(results: list[RaceResult]) -> DriverStats:
    """Fold race results into counts, extremes, mean finish and points."""
    if not results:
        return DriverStats()
    finishes = [r.finish_position for r in results]
    return DriverStats(
        total_races=len(results),
        podiums=sum(1 for f in finishes if f <= PODIUM_POSITIONS),
        best_position=min(finishes),
        worst_position=max(finishes),
        average_position=statistics.mean(finishes),
        points=sum(r.points for r in results),
    )


class DriverStatsService:
    """Builds a driver's profile from every race in a season window."""

    def __init__(self, repo: F1DataRepository) -> None:
        self._repo = repo

    @log_service_call
    def collect_race_results(
        self,
        driver_number: int,
        race_sessions: list[SessionData],
        on_progress: ProgressCallback | None = None,
    ) -> tuple[list[RaceResult], int]:
        """Return (results, skipped) over *race_sessions*.

        A race is skipped when its positions cannot be fetched or hold no
        usable record for the driver.
        """
        results: list[RaceResult] = []
        skipped = 0
        total = len(race_sessions)
        for index, session in enumerate(race_sessions, start=1):
            if on_progress is not None:
                on_progress(index, total, race_name(session))
            session_key = session["session_key"]
            try:
                positions = self._repo.get_positions(session_key, driver_number)
            except F1DataError as exc:
                log_skip(f"positions of #{driver_number} in session {session_key}", exc)
                skipped += 1
                continue

            own = [p for p in positions if p.get("driver_number") == driver_number]
            result = race_result_from_positions(session, own)
            if result is None:
                skipped += 1
                continue
            results.append(result)
        return results, skipped

    @log_service_call
    def build_profile(
        self,
        driver: DriverInfo,
        race_sessions: list[SessionData],
        on_progress: ProgressCallback | None = None,
    ) -> DriverProfile:
        """Aggregate per-season and career statistics for *driver*."""
        results, skipped = self.collect_race_results(
            driver["driver_number"], race_sessions, on_progress,
        )

        season_races: dict[int, list[RaceResult]] = {}
        for result in results:
            season_races.setdefault(result.season, []).append(result)
        for races in season_races.values():
            races.sort(key=lambda r: (r.race_date is None, r.race_date or datetime.min))

        return DriverProfile(
            driver=driver,
            career=aggregate_stats(results),
            seasons={year: aggregate_stats(races) for year, races in season_races.items()},
            season_races=season_races,
            sessions_checked=len(race_sessions),
            skipped_sessions=skipped,
        )

    @log_service_call
    def load_profile(
        self,
        driver_number: int,
        first_season: int,
        last_season: int,
        lookback: int = DEFAULT_LOOKBACK,
        on_progress: ProgressCallback | None = None,
    ) -> DriverProfile:
        """Locate the driver in recent races, then aggregate every race in the window."""
        sessions = self._repo.get_sessions_between(
            first_season, last_season, session_name=RACE_SESSION_NAME,
        )
        races = recent_race_sessions(sessions)
        if not races:
            raise DriverNotFoundError("No race sessions available.")

        match = DriverSearchService(self._repo, lookback).find_driver_by_number(driver_number, races)
        return self.build_profile(match.driver, races, on_progress)

