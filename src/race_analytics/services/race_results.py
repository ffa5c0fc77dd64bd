"""Per-race standings: finishing order, pit stops, best laps and tyre stints."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..api_logging import log_service_call
from ..data.base import F1DataRepository
from ..data.errors import RaceNotFoundError
from ..data.types import (
    DriverInfo,
    LapData,
    PitData,
    PositionData,
    SessionData,
    SessionResultData,
    StintData,
)
from .common import normalize_team_color, race_name


@dataclass(frozen=True)
class TireStint:
    stint_number: int | None
    compound: str
    lap_start: int | None
    lap_end: int | None

    @property
    def laps(self) -> int:
        if self.lap_start is None or self.lap_end is None:
            return 0
        return self.lap_end - self.lap_start + 1


@dataclass(frozen=True)
class DriverStanding:
    position: int | None
    driver_number: int
    driver_name: str
    name_acronym: str
    team_name: str
    team_colour: str
    headshot_url: str | None
    pit_stops: int
    best_lap_time: float | None
    grid_position: int | None
    position_delta: int
    has_fastest_lap: bool = False
    classified: bool = True
    tire_stints: tuple[TireStint, ...] = ()


@dataclass(frozen=True)
class LapChartEntry:
    driver_name: str
    name_acronym: str
    lap_time: float
    gap_to_fastest: float
    team_colour: str


@dataclass(frozen=True)
class RaceStandings:
    session: SessionData
    race_name: str
    standings: list[DriverStanding]
    lap_chart: list[LapChartEntry] = field(default_factory=list)

    @property
    def fastest_lap(self) -> DriverStanding | None:
        return next((s for s in self.standings if s.has_fastest_lap), None)


def _grid_and_last(positions: list[PositionData]) -> dict[int, tuple[int, int]]:
    """Map driver number -> (earliest, latest) recorded position."""
    by_driver: dict[int, list[PositionData]] = {}
    for p in positions:
        if p.get("date") is None or p.get("position") is None:
            continue
        by_driver.setdefault(p["driver_number"], []).append(p)

    out: dict[int, tuple[int, int]] = {}
    for number, records in by_driver.items():
        records.sort(key=lambda p: p["date"])  # type: ignore[arg-type, return-value]
        out[number] = (records[0]["position"], records[-1]["position"])  # type: ignore[assignment]
    return out


def _best_laps(laps: list[LapData]) -> dict[int, float]:
    best: dict[int, float] = {}
    for lap in laps:
        duration = lap.get("lap_duration")
        if duration is None:
            continue
        number = lap["driver_number"]
        if number not in best or duration < best[number]:
            best[number] = duration
    return best


def _stints_by_driver(stints: list[StintData]) -> dict[int, tuple[TireStint, ...]]:
    grouped: dict[int, list[StintData]] = {}
    for s in stints:
        grouped.setdefault(s["driver_number"], []).append(s)
    return {
        number: tuple(
            TireStint(
                stint_number=s.get("stint_number"),
                compound=s.get("compound") or "UNKNOWN",
                lap_start=s.get("lap_start"),
                lap_end=s.get("lap_end"),
            )
            for s in sorted(
                records,
                key=lambda s: (s.get("stint_number") is None, s.get("stint_number") or 0),
            )
        )
        for number, records in grouped.items()
    }


def _pit_counts(pits: list[PitData]) -> dict[int, int]:
    counts: dict[int, int] = {}
    for p in pits:
        counts[p["driver_number"]] = counts.get(p["driver_number"], 0) + 1
    return counts


def build_lap_chart(standings: list[DriverStanding]) -> list[LapChartEntry]:
    """Best lap per driver, fastest first, with the gap to the fastest."""
    timed = sorted(
        (s for s in standings if s.best_lap_time is not None),
        key=lambda s: s.best_lap_time,  # type: ignore[arg-type, return-value]
    )
    if not timed:
        return []
    fastest: float = timed[0].best_lap_time  # type: ignore[assignment]
    return [
        LapChartEntry(
            driver_name=s.driver_name,
            name_acronym=s.name_acronym,
            lap_time=s.best_lap_time,  # type: ignore[arg-type]
            gap_to_fastest=s.best_lap_time - fastest,  # type: ignore[operator]
            team_colour=s.team_colour,
        )
        for s in timed
    ]


class RaceResultsService:
    """Assembles the standings table of one race session."""

    def __init__(self, repo: F1DataRepository) -> None:
        self._repo = repo

    @log_service_call
    def build_standings(self, session_key: int) -> RaceStandings:
        """Fetch everything a race page shows and join it by driver number.

        The finishing order comes from the official session result. Drivers it
        leaves unplaced (DNF, DNS, DSQ) are listed last. Only when the session
        has no result at all does each driver's last recorded position stand in.
        """
        session = self._repo.get_session(session_key)
        if session is None:
            raise RaceNotFoundError(f"Race session {session_key} not found.")

        drivers = self._repo.get_drivers(session_key)
        results = self._repo.get_session_results(session_key)
        positions = self._repo.get_positions(session_key)
        laps = self._repo.get_laps(session_key)
        stints = self._repo.get_stints(session_key)
        pits = self._repo.get_pits(session_key)

        standings = self._join(drivers, results, positions, laps, stints, pits)
        if not standings:
            raise RaceNotFoundError(f"No results available for {race_name(session)}.")

        return RaceStandings(
            session=session,
            race_name=race_name(session),
            standings=standings,
            lap_chart=build_lap_chart(standings),
        )

    @staticmethod
    def _join(
        drivers: list[DriverInfo],
        results: list[SessionResultData],
        positions: list[PositionData],
        laps: list[LapData],
        stints: list[StintData],
        pits: list[PitData],
    ) -> list[DriverStanding]:
        info = {d["driver_number"]: d for d in drivers}
        official = {r["driver_number"]: r for r in results}
        tracked = _grid_and_last(positions)
        best_laps = _best_laps(laps)
        tyre_stints = _stints_by_driver(stints)
        pit_counts = _pit_counts(pits)

        numbers = set(info) | set(official) | set(tracked)
        fastest = min(
            (n for n in numbers if n in best_laps),
            key=lambda n: best_laps[n],
            default=None,
        )

        standings: list[DriverStanding] = []
        for number in numbers:
            driver = info.get(number)
            result = official.get(number)
            grid, last = tracked.get(number, (None, None))
            # Tracked positions stand in only when the session has no official result
            if official:
                finish = result["position"] if result is not None else None
            else:
                finish = last
            name = (driver or {}).get("full_name") or f"#{number}"

            standings.append(DriverStanding(
                position=finish,
                driver_number=number,
                driver_name=name,
                name_acronym=(driver or {}).get("name_acronym") or str(number),
                team_name=(driver or {}).get("team_name") or "",
                team_colour=normalize_team_color((driver or {}).get("team_colour")),
                headshot_url=(driver or {}).get("headshot_url"),
                pit_stops=pit_counts.get(number, 0),
                best_lap_time=best_laps.get(number),
                grid_position=grid,
                position_delta=grid - finish if grid is not None and finish is not None else 0,
                has_fastest_lap=number == fastest,
                classified=result["classified"] if result is not None else True,
                tire_stints=tyre_stints.get(number, ()),
            ))

        standings.sort(key=lambda s: (s.position is None, s.position or 0, s.driver_number))
        return standings
