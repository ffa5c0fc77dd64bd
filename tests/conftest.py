"""Shared test fixtures and sample API responses."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest

import race_analytics.api_logging as api_logging
from race_analytics.config import Settings
from race_analytics.data.base import F1DataRepository

BASE_URL = "https://api.openf1.org/v1"


SAMPLE_MEETING = {
    "circuit_key": 63,
    "circuit_short_name": "Sakhir",
    "country_code": "BRN",
    "country_key": 36,
    "country_name": "Bahrain",
    "date_start": "2024-02-29T11:30:00+00:00",
    "gmt_offset": "03:00:00",
    "location": "Sakhir",
    "meeting_key": 1229,
    "meeting_name": "Bahrain Grand Prix",
    "meeting_official_name": "FORMULA 1 GULF AIR BAHRAIN GRAND PRIX 2024",
    "year": 2024,
}

SAMPLE_SESSION = {
    "circuit_key": 63,
    "circuit_short_name": "Sakhir",
    "country_code": "BRN",
    "country_key": 36,
    "country_name": "Bahrain",
    "date_end": "2024-03-02T17:00:00+00:00",
    "date_start": "2024-03-02T15:00:00+00:00",
    "gmt_offset": "03:00:00",
    "location": "Sakhir",
    "meeting_key": 1229,
    "session_key": 9472,
    "session_name": "Race",
    "session_type": "Race",
    "year": 2024,
}

SAMPLE_DRIVER = {
    "broadcast_name": "M VERSTAPPEN",
    "country_code": "NED",
    "driver_number": 1,
    "first_name": "Max",
    "full_name": "Max VERSTAPPEN",
    "headshot_url": "https://example.com/ver.png",
    "last_name": "Verstappen",
    "meeting_key": 1229,
    "name_acronym": "VER",
    "session_key": 9472,
    "team_colour": "3671C6",
    "team_name": "Red Bull Racing",
}

SAMPLE_POSITION = {
    "date": "2024-03-02T15:03:12.345000+00:00",
    "driver_number": 1,
    "meeting_key": 1229,
    "position": 1,
    "session_key": 9472,
}

SAMPLE_LAP = {
    "date_start": "2024-03-02T15:10:00+00:00",
    "driver_number": 1,
    "duration_sector_1": 28.5,
    "duration_sector_2": 35.2,
    "duration_sector_3": 30.1,
    "i1_speed": 305,
    "i2_speed": 280,
    "is_pit_out_lap": False,
    "lap_duration": 93.8,
    "lap_number": 5,
    "meeting_key": 1229,
    "segments_sector_1": [2048, 2049, 2051],
    "session_key": 9472,
    "st_speed": 310,
}

SAMPLE_STINT = {
    "compound": "SOFT",
    "driver_number": 1,
    "lap_end": 17,
    "lap_start": 1,
    "meeting_key": 1229,
    "session_key": 9472,
    "stint_number": 1,
    "tyre_age_at_start": 3,
}

SAMPLE_PIT = {
    "date": "2024-03-02T15:30:00+00:00",
    "driver_number": 1,
    "lap_number": 17,
    "meeting_key": 1229,
    "pit_duration": 23.5,
    "session_key": 9472,
}

SAMPLE_SESSION_RESULT = {
    "dnf": False,
    "dns": False,
    "dsq": False,
    "driver_number": 1,
    "duration": 5504.742,
    "gap_to_leader": 0,
    "meeting_key": 1229,
    "number_of_laps": 57,
    "points": 26.0,
    "position": 1,
    "session_key": 9472,
}


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings with no request spacing and logs under tmp_path."""
    return Settings(
        api_base_url=BASE_URL,
        request_interval=0,
        first_season=2023,
        last_season=2024,
        log_dir=tmp_path,
    )


@pytest.fixture(autouse=True)
def _isolated_api_log(tmp_path):
    """Send the API log to tmp_path and reset the cached logger around each test."""
    named_logger = logging.getLogger(api_logging.LOGGER_NAME)
    old_logger = api_logging._logger
    old_dir = api_logging._log_dir

    named_logger.handlers.clear()
    api_logging._logger = None
    api_logging._log_dir = tmp_path

    yield tmp_path

    for h in named_logger.handlers[:]:
        h.close()
        named_logger.removeHandler(h)
    api_logging._logger = old_logger
    api_logging._log_dir = old_dir


# ── Repository doubles for the services and pages ───────────────────────────

_RACE_START = datetime(2024, 3, 2, 15, 0, tzinfo=timezone.utc)


def _make_session(
    session_key: int,
    date_start: datetime | None = _RACE_START,
    country_name: str | None = "Bahrain",
    session_name: str = "Race",
    session_type: str = "Race",
    meeting_key: int | None = None,
    year: int | None = None,
) -> dict:
    return {
        "session_key": session_key,
        "session_name": session_name,
        "session_type": session_type,
        "meeting_key": meeting_key if meeting_key is not None else session_key // 10,
        "circuit_short_name": country_name,
        "country_name": country_name,
        "country_code": None,
        "location": country_name,
        "date_start": date_start,
        "date_end": None,
        "year": year if year is not None else (date_start.year if date_start else None),
    }


def _make_driver(
    driver_number: int,
    full_name: str,
    name_acronym: str,
    team_name: str = "Red Bull Racing",
    team_colour: str | None = "3671C6",
    broadcast_name: str | None = None,
) -> dict:
    return {
        "driver_number": driver_number,
        "full_name": full_name,
        "broadcast_name": broadcast_name or full_name.upper(),
        "name_acronym": name_acronym,
        "team_name": team_name,
        "team_colour": team_colour,
        "headshot_url": f"https://example.com/{name_acronym.lower()}.png",
        "country_code": None,
    }


def _make_positions(driver_number: int, *positions: int) -> list[dict]:
    """Position records one minute apart, in race order."""
    return [
        {
            "driver_number": driver_number,
            "position": position,
            "date": _RACE_START + timedelta(minutes=i),
        }
        for i, position in enumerate(positions)
    ]


@pytest.fixture
def make_session():
    """Factory fixture for session dicts."""
    return _make_session


@pytest.fixture
def make_driver():
    """Factory fixture for driver dicts."""
    return _make_driver


@pytest.fixture
def make_positions():
    """Factory fixture for a driver's position records."""
    return _make_positions


@pytest.fixture
def sample_drivers() -> list[dict]:
    return [
        _make_driver(1, "Max VERSTAPPEN", "VER"),
        _make_driver(11, "Sergio PEREZ", "PER"),
        _make_driver(44, "Lewis HAMILTON", "HAM", team_name="Ferrari", team_colour="E80020"),
        _make_driver(16, "Charles LECLERC", "LEC", team_name="Ferrari", team_colour=None),
    ]


@pytest.fixture
def five_races() -> list[dict]:
    """Five race sessions two weeks apart, oldest first."""
    return [
        _make_session(
            9000 + i,
            date_start=_RACE_START + timedelta(weeks=2 * i),
            country_name=country,
        )
        for i, country in enumerate(["Bahrain", "Saudi Arabia", "Australia", "Japan", "China"])
    ]


@pytest.fixture
def mock_repo() -> MagicMock:
    repo = MagicMock(spec=F1DataRepository)
    repo.get_meetings.return_value = []
    repo.get_sessions.return_value = []
    repo.get_sessions_between.return_value = []
    repo.get_session.return_value = None
    repo.get_drivers.return_value = []
    repo.get_positions.return_value = []
    repo.get_laps.return_value = []
    repo.get_session_results.return_value = []
    repo.get_stints.return_value = []
    repo.get_pits.return_value = []
    return repo
