"""F1 Race Analytics: OpenF1-backed race and driver statistics."""

# --- Constants, config & formatting ---
from .config import Settings, get_settings
from .constants import COMPOUND_COLORS, F1_RED, PLOTLY_LAYOUT_DEFAULTS, POINTS_TABLE
from .formatters import (
    format_average_position,
    format_gap,
    format_lap_time,
    format_position,
    format_position_change,
)

# --- Data layer ---
from .data import F1DataError, F1DataRepository, get_repository

# --- Service layer ---
from .services import (
    DriverSearchService,
    DriverStatsService,
    RaceResultsService,
    SeasonCalendarService,
    normalize_team_color,
    race_points,
)

__all__ = [
    "COMPOUND_COLORS",
    "DriverSearchService",
    "DriverStatsService",
    "F1DataError",
    "F1DataRepository",
    "F1_RED",
    "PLOTLY_LAYOUT_DEFAULTS",
    "POINTS_TABLE",
    "RaceResultsService",
    "SeasonCalendarService",
    "Settings",
    "format_average_position",
    "format_gap",
    "format_lap_time",
    "format_position",
    "format_position_change",
    "get_repository",
    "get_settings",
    "normalize_team_color",
    "race_points",
]

__version__ = "0.1.0"
