"""Shared constants for the race analytics dashboard."""

from __future__ import annotations

F1_RED = "#E10600"

# Championship points for a Grand Prix finish, positions 1-10
POINTS_TABLE: tuple[int, ...] = (25, 18, 15, 12, 10, 8, 6, 4, 2, 1)

PODIUM_POSITIONS = 3

RACE_SESSION_NAME = "Race"
RACE_SESSION_TYPE = "Race"

COMPOUND_COLORS: dict[str, str] = {
    "SOFT": "#FF3333",
    "MEDIUM": "#FFC700",
    "HARD": "#FFFFFF",
    "INTERMEDIATE": "#39B54A",
    "WET": "#0067FF",
    "UNKNOWN": "#888888",
}

PLOTLY_LAYOUT_DEFAULTS = dict(
    paper_bgcolor="rgba(0,0,0,0)",
    plot_bgcolor="rgba(0,0,0,0)",
    font_color="#F0F0F0",
    margin=dict(l=40, r=20, t=40, b=40),
)

FLAG_URL_TEMPLATE = "https://flagcdn.com/w320/{code}.png"

# Matched by case-insensitive containment against OpenF1's country_name
COUNTRY_CODES: dict[str, str] = {
    "Australia": "au",
    "Austria": "at",
    "Azerbaijan": "az",
    "Bahrain": "bh",
    "Belgium": "be",
    "Brazil": "br",
    "Canada": "ca",
    "China": "cn",
    "Netherlands": "nl",
    "Emilia Romagna": "it",
    "France": "fr",
    "Great Britain": "gb",
    "United Kingdom": "gb",
    "Hungary": "hu",
    "Italy": "it",
    "Japan": "jp",
    "Mexico": "mx",
    "Monaco": "mc",
    "Qatar": "qa",
    "Saudi Arabia": "sa",
    "Singapore": "sg",
    "Spain": "es",
    "United States": "us",
    "USA": "us",
    "United Arab Emirates": "ae",
    "UAE": "ae",
    "Abu Dhabi": "ae",
    "Las Vegas": "us",
    "Miami": "us",
}
