"""Streamlit routing and widgets shared by the dashboard pages."""

from __future__ import annotations

import streamlit as st

from .constants import F1_RED
from .data import DriverNotFoundError, F1DataError, F1DataRepository, InvalidSelectionError
from .data.types import SessionData
from .services import DriverSearchService

HOME_PAGE = "app.py"
RACE_PAGE = "pages/1_Race_Results.py"
DRIVER_PAGE = "pages/2_Driver_Profile.py"

SESSION_KEY_PARAM = "session_key"
DRIVER_NUMBER_PARAM = "driver_number"


def configure_page(title: str) -> None:
    st.set_page_config(
        page_title=title,
        page_icon="\U0001f3ce\ufe0f",
        layout="wide",
    )


def open_race(session_key: int) -> None:
    """Navigate to the race results page for *session_key*."""
    st.session_state[SESSION_KEY_PARAM] = session_key
    st.switch_page(RACE_PAGE)


def open_driver(driver_number: int) -> None:
    """Navigate to the driver profile page for *driver_number*."""
    st.session_state[DRIVER_NUMBER_PARAM] = driver_number
    st.switch_page(DRIVER_PAGE)


def route_param(name: str) -> int | None:
    """Read an integer route parameter from the navigation handoff or the URL.

    The value is written back to the URL so the page can be bookmarked and
    survives reruns.
    """
    raw = st.session_state.pop(name, None)
    if raw is None:
        raw = st.query_params.get(name)
    try:
        value = int(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    st.query_params[name] = str(value)
    return value


def accent_bar(color: str = F1_RED) -> None:
    st.markdown(
        f'<div style="height:4px;background:{color};border-radius:2px;'
        f'margin-bottom:1rem"></div>',
        unsafe_allow_html=True,
    )


def home_link() -> None:
    st.page_link(HOME_PAGE, label="Home", icon="\U0001f3e0")


def render_driver_search(
    repo: F1DataRepository,
    race_sessions: list[SessionData],
    lookback: int,
    key: str = "driver_search",
) -> None:
    """Search box that opens the profile of the first matching driver."""
    with st.form(key):
        query = st.text_input(
            "Find a driver",
            placeholder="Name, acronym or car number (e.g. Verstappen, HAM, 16)",
        )
        submitted = st.form_submit_button("Search")

    if not submitted:
        return

    with st.spinner("Searching recent races..."):
        try:
            match = DriverSearchService(repo, lookback).find_driver(query, race_sessions)
        except (DriverNotFoundError, InvalidSelectionError) as exc:
            st.warning(str(exc))
            return
        except F1DataError as exc:
            st.error(f"Error searching driver: {exc}")
            return
    open_driver(match.driver["driver_number"])
