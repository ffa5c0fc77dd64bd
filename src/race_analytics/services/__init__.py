"""Service layer: orchestration and aggregation for the dashboard pages."""

from .calendar import (
    SeasonCalendar,
    SeasonCalendarService,
    TrackInfo,
    flag_url,
    is_grand_prix_race,
)
from .common import normalize_team_color, race_name
from .driver_search import DriverMatch, DriverSearchService, matches_query, recent_race_sessions
from .driver_stats import (
    DriverProfile,
    DriverStats,
    DriverStatsService,
    RaceResult,
    aggregate_stats,
    race_result_from_positions,
)
from .points import race_points
from .race_results import (
    DriverStanding,
    LapChartEntry,
    RaceResultsService,
    RaceStandings,
    TireStint,
    build_lap_chart,
)

__all__ = [
    "DriverMatch",
    "DriverProfile",
    "DriverSearchService",
    "DriverStanding",
    "DriverStats",
    "DriverStatsService",
    "LapChartEntry",
    "RaceResult",
    "RaceResultsService",
    "RaceStandings",
    "SeasonCalendar",
    "SeasonCalendarService",
    "TireStint",
    "TrackInfo",
    "aggregate_stats",
    "build_lap_chart",
    "flag_url",
    "is_grand_prix_race",
    "matches_query",
    "normalize_team_color",
    "race_name",
    "race_points",
    "race_result_from_positions",
    "recent_race_sessions",
]
