"""Tests for data/cached_repo.py: memoised fetches, failures never cached."""

from __future__ import annotations

import httpx
import pytest
import respx
import streamlit as st

from race_analytics.data.cached_repo import CachedRepository
from race_analytics.data.errors import F1DataError
from tests.conftest import BASE_URL, SAMPLE_DRIVER


@pytest.fixture(autouse=True)
def _clear_cache():
    st.cache_data.clear()
    yield
    st.cache_data.clear()


class TestCachedRepository:
    @respx.mock
    def test_second_call_served_from_cache(self, settings):
        route = respx.get(f"{BASE_URL}/drivers").mock(
            return_value=httpx.Response(200, json=[SAMPLE_DRIVER])
        )
        repo = CachedRepository(settings)
        first = repo.get_drivers(9472)
        second = repo.get_drivers(9472)
        assert first == second
        assert first[0]["name_acronym"] == "VER"
        assert route.call_count == 1

    @respx.mock
    def test_failure_not_cached(self, settings):
        route = respx.get(f"{BASE_URL}/drivers").mock(
            side_effect=[
                httpx.Response(500, text="boom"),
                httpx.Response(200, json=[SAMPLE_DRIVER]),
            ]
        )
        repo = CachedRepository(settings)
        assert repo.get_drivers(9472) == []
        assert len(repo.get_drivers(9472)) == 1
        assert route.call_count == 2

    @respx.mock
    def test_no_results_404_cached_as_empty(self, settings):
        route = respx.get(f"{BASE_URL}/session_result").mock(
            return_value=httpx.Response(404, json={"detail": "No results found."})
        )
        repo = CachedRepository(settings.model_copy(update={"strict_fetch": True}))
        assert repo.get_session_results(9472) == []
        assert repo.get_session_results(9472) == []
        assert route.call_count == 1

    @respx.mock
    def test_missing_session_is_none(self, settings):
        respx.get(f"{BASE_URL}/sessions").mock(side_effect=httpx.ConnectError("down"))
        assert CachedRepository(settings).get_session(9472) is None

    @respx.mock
    def test_strict_raises(self, settings):
        respx.get(f"{BASE_URL}/pit").mock(return_value=httpx.Response(500, text="boom"))
        repo = CachedRepository(settings.model_copy(update={"strict_fetch": True}))
        with pytest.raises(F1DataError):
            repo.get_pits(9472)
