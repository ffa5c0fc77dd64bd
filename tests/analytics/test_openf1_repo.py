"""Tests for data/openf1_repo.py against a mocked OpenF1 API."""

from __future__ import annotations

from unittest.mock import patch

import httpx
import pytest
import respx

from race_analytics.data import get_repository
from race_analytics.data.errors import F1DataError
from race_analytics.data.openf1_repo import OpenF1Repository, _rate_limit
from tests.conftest import (
    BASE_URL,
    SAMPLE_DRIVER,
    SAMPLE_LAP,
    SAMPLE_MEETING,
    SAMPLE_PIT,
    SAMPLE_POSITION,
    SAMPLE_SESSION,
    SAMPLE_SESSION_RESULT,
    SAMPLE_STINT,
)


@pytest.fixture
def repo(settings) -> OpenF1Repository:
    return OpenF1Repository(settings)


@pytest.fixture
def strict_repo(settings) -> OpenF1Repository:
    return OpenF1Repository(settings.model_copy(update={"strict_fetch": True}))


class TestConversion:
    @respx.mock
    def test_meetings(self, repo):
        respx.get(f"{BASE_URL}/meetings").mock(
            return_value=httpx.Response(200, json=[SAMPLE_MEETING])
        )
        meetings = repo.get_meetings(2024)
        assert meetings[0]["meeting_key"] == 1229
        assert meetings[0]["meeting_name"] == "Bahrain Grand Prix"
        assert meetings[0]["year"] == 2024

    @respx.mock
    def test_session_year_from_date(self, repo):
        respx.get(f"{BASE_URL}/sessions").mock(
            return_value=httpx.Response(200, json=[{**SAMPLE_SESSION, "year": None}])
        )
        sessions = repo.get_sessions(2024)
        assert sessions[0]["year"] == 2024
        assert sessions[0]["date_start"].tzinfo is not None

    @respx.mock
    def test_drivers(self, repo):
        respx.get(f"{BASE_URL}/drivers").mock(
            return_value=httpx.Response(200, json=[SAMPLE_DRIVER, {"full_name": "No Number"}])
        )
        drivers = repo.get_drivers(9472)
        assert len(drivers) == 1
        assert drivers[0]["name_acronym"] == "VER"
        assert drivers[0]["team_colour"] == "3671C6"

    @respx.mock
    def test_positions(self, repo):
        route = respx.get(f"{BASE_URL}/position").mock(
            return_value=httpx.Response(200, json=[SAMPLE_POSITION])
        )
        positions = repo.get_positions(9472, 1)
        assert positions[0]["position"] == 1
        params = route.calls.last.request.url.params
        assert params["session_key"] == "9472"
        assert params["driver_number"] == "1"

    @respx.mock
    def test_positions_whole_field(self, repo):
        route = respx.get(f"{BASE_URL}/position").mock(
            return_value=httpx.Response(200, json=[SAMPLE_POSITION])
        )
        repo.get_positions(9472)
        assert "driver_number" not in route.calls.last.request.url.params

    @respx.mock
    def test_laps(self, repo):
        respx.get(f"{BASE_URL}/laps").mock(
            return_value=httpx.Response(200, json=[SAMPLE_LAP])
        )
        laps = repo.get_laps(9472)
        assert laps[0] == {
            "driver_number": 1,
            "lap_number": 5,
            "lap_duration": 93.8,
            "is_pit_out_lap": False,
        }

    @respx.mock
    def test_stint_compound_normalized(self, repo):
        respx.get(f"{BASE_URL}/stints").mock(
            return_value=httpx.Response(200, json=[
                {**SAMPLE_STINT, "compound": "medium"},
                {**SAMPLE_STINT, "stint_number": 2, "compound": None},
            ])
        )
        stints = repo.get_stints(9472)
        assert [s["compound"] for s in stints] == ["MEDIUM", "UNKNOWN"]

    @respx.mock
    def test_pits(self, repo):
        respx.get(f"{BASE_URL}/pit").mock(
            return_value=httpx.Response(200, json=[SAMPLE_PIT])
        )
        assert repo.get_pits(9472)[0]["pit_duration"] == 23.5

    @respx.mock
    def test_session_results(self, repo):
        respx.get(f"{BASE_URL}/session_result").mock(
            return_value=httpx.Response(200, json=[
                SAMPLE_SESSION_RESULT,
                {**SAMPLE_SESSION_RESULT, "driver_number": 16, "position": None, "dnf": True},
            ])
        )
        results = repo.get_session_results(9472)
        assert results[0]["classified"] is True
        assert results[1]["classified"] is False
        assert results[1]["position"] is None


class TestSessionQueries:
    @respx.mock
    def test_sessions_between_uses_range_filter(self, repo):
        route = respx.get(f"{BASE_URL}/sessions").mock(
            return_value=httpx.Response(200, json=[SAMPLE_SESSION])
        )
        sessions = repo.get_sessions_between(2023, 2025, session_name="Race")
        assert len(sessions) == 1
        params = route.calls.last.request.url.params
        assert params["year>="] == "2023"
        assert params["year<="] == "2025"
        assert params["session_name"] == "Race"

    @respx.mock
    def test_sessions_filters(self, repo):
        route = respx.get(f"{BASE_URL}/sessions").mock(
            return_value=httpx.Response(200, json=[])
        )
        repo.get_sessions(2024, country_name="Bahrain", session_name="Race")
        params = route.calls.last.request.url.params
        assert params["year"] == "2024"
        assert params["country_name"] == "Bahrain"

    @respx.mock
    def test_get_session(self, repo):
        respx.get(f"{BASE_URL}/sessions").mock(
            return_value=httpx.Response(200, json=[SAMPLE_SESSION])
        )
        session = repo.get_session(9472)
        assert session is not None
        assert session["country_name"] == "Bahrain"

    @respx.mock
    def test_get_session_missing(self, repo):
        respx.get(f"{BASE_URL}/sessions").mock(return_value=httpx.Response(200, json=[]))
        assert repo.get_session(1) is None


class TestFetchFailures:
    @respx.mock
    def test_http_error_returns_empty(self, repo):
        respx.get(f"{BASE_URL}/drivers").mock(return_value=httpx.Response(500, text="boom"))
        assert repo.get_drivers(9472) == []

    @respx.mock
    def test_timeout_returns_empty(self, repo):
        respx.get(f"{BASE_URL}/laps").mock(side_effect=httpx.ReadTimeout("slow"))
        assert repo.get_laps(9472) == []

    @respx.mock
    def test_missing_session_on_error(self, repo):
        respx.get(f"{BASE_URL}/sessions").mock(side_effect=httpx.ConnectError("down"))
        assert repo.get_session(9472) is None

    @respx.mock
    def test_failure_is_logged_as_skip(self, repo, _isolated_api_log):
        respx.get(f"{BASE_URL}/pit").mock(return_value=httpx.Response(503, text="busy"))
        repo.get_pits(9472)
        content = (_isolated_api_log / "api_calls.log").read_text()
        assert "SKIP: fetch pit stops for session 9472" in content
        assert "HTTP 503" in content

    @respx.mock
    def test_strict_raises(self, strict_repo):
        respx.get(f"{BASE_URL}/drivers").mock(return_value=httpx.Response(500, text="boom"))
        with pytest.raises(F1DataError, match="Failed to fetch drivers for session 9472"):
            strict_repo.get_drivers(9472)

    @respx.mock
    def test_strict_validation_error(self, strict_repo):
        respx.get(f"{BASE_URL}/position").mock(
            return_value=httpx.Response(200, json={"unexpected": "shape"})
        )
        with pytest.raises(F1DataError):
            strict_repo.get_positions(9472)


class TestRateLimit:
    def test_sleeps_when_called_too_soon(self):
        with patch("race_analytics.data.openf1_repo.time.sleep") as sleep:
            _rate_limit(0)
            _rate_limit(10.0)
        sleep.assert_called_once()
        assert 0 < sleep.call_args.args[0] <= 10.0

    def test_no_sleep_without_interval(self):
        with patch("race_analytics.data.openf1_repo.time.sleep") as sleep:
            _rate_limit(0)
            _rate_limit(0)
        sleep.assert_not_called()


class TestGetRepository:
    def test_uncached(self, settings):
        assert isinstance(get_repository(cached=False, settings=settings), OpenF1Repository)

    @respx.mock
    def test_uses_configured_base_url(self, settings):
        route = respx.get("http://localhost:9000/v1/meetings").mock(
            return_value=httpx.Response(200, json=[])
        )
        local = settings.model_copy(update={"api_base_url": "http://localhost:9000/v1"})
        get_repository(cached=False, settings=local).get_meetings(2024)
        assert route.called
