"""Tests for config.py."""

from __future__ import annotations

import datetime
from pathlib import Path

import pytest
from pydantic import ValidationError

from race_analytics.config import Settings, get_settings


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestDefaults:
    def test_values(self, monkeypatch):
        for name in ("FIRST_SEASON", "LAST_SEASON", "REQUEST_INTERVAL", "SEARCH_LOOKBACK"):
            monkeypatch.delenv(f"F1_ANALYTICS_{name}", raising=False)
        settings = Settings()
        assert settings.api_base_url == "https://api.openf1.org/v1"
        assert settings.request_interval == 0.35
        assert settings.first_season == 2023
        assert settings.last_season == datetime.date.today().year
        assert settings.search_lookback == 5
        assert settings.strict_fetch is False
        assert settings.log_dir == Path("logs")

    def test_seasons(self):
        assert Settings(first_season=2023, last_season=2025).seasons == [2023, 2024, 2025]


class TestEnvironment:
    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("F1_ANALYTICS_FIRST_SEASON", "2024")
        monkeypatch.setenv("F1_ANALYTICS_LAST_SEASON", "2025")
        monkeypatch.setenv("F1_ANALYTICS_STRICT_FETCH", "true")
        settings = Settings()
        assert settings.seasons == [2024, 2025]
        assert settings.strict_fetch is True

    def test_get_settings_cached(self, monkeypatch):
        monkeypatch.setenv("F1_ANALYTICS_SEARCH_LOOKBACK", "3")
        first = get_settings()
        monkeypatch.setenv("F1_ANALYTICS_SEARCH_LOOKBACK", "8")
        assert get_settings() is first
        assert first.search_lookback == 3


class TestValidation:
    def test_inverted_window(self):
        with pytest.raises(ValidationError, match="first_season"):
            Settings(first_season=2025, last_season=2023)

    def test_bad_type(self, monkeypatch):
        monkeypatch.setenv("F1_ANALYTICS_REQUEST_INTERVAL", "fast")
        with pytest.raises(ValidationError):
            Settings()
