"""F1 Race Analytics — home page: seasons, races and driver search."""

from __future__ import annotations

import streamlit as st

from race_analytics import F1DataError, SeasonCalendarService, get_repository, get_settings
from race_analytics.ui import accent_bar, configure_page, open_race, render_driver_search

# ── Page config ──────────────────────────────────────────────────────────────

configure_page("F1 Race Analytics")

settings = get_settings()
repo = get_repository()
calendar_service = SeasonCalendarService(repo, settings.first_season, settings.last_season)

st.title("F1 Race Analytics")
accent_bar()


# ── Load seasons ─────────────────────────────────────────────────────────────

with st.spinner("Loading seasons..."):
    try:
        calendar = calendar_service.load_calendar()
    except F1DataError as exc:
        st.error(str(exc))
        st.stop()


# ── Driver search ────────────────────────────────────────────────────────────

st.subheader("Driver Search")
render_driver_search(repo, calendar.race_sessions, settings.search_lookback)


# ── Year / race selector ─────────────────────────────────────────────────────

st.subheader("Find a Race")

year_col, race_col, button_col = st.columns([1, 3, 1], vertical_alignment="bottom")

with year_col:
    selected_year = st.selectbox("Year", calendar_service.seasons[::-1])

races = []
try:
    races = calendar_service.meetings_for_year(selected_year)
except F1DataError as exc:
    st.error(f"Error loading races: {exc}")

race_options = {t.meeting_name or t.meeting_official_name: t.meeting_key for t in races}

with race_col:
    selected_race = st.selectbox(
        "Race",
        list(race_options.keys()),
        index=None,
        placeholder="Select a race",
    )

with button_col:
    load_clicked = st.button("Load Race", use_container_width=True)

if load_clicked:
    if selected_race is None:
        st.warning("Please select both year and race.")
    else:
        try:
            race_session = calendar_service.race_session_for_meeting(
                calendar, race_options[selected_race],
            )
        except F1DataError as exc:
            st.warning(str(exc))
        else:
            open_race(race_session["session_key"])


# ── Seasons accordion ────────────────────────────────────────────────────────

st.subheader("Seasons")

latest_year = calendar.years[0] if calendar.years else None

for year in calendar.years:
    tracks = calendar.tracks_by_year[year]
    with st.expander(f"{year} — {len(tracks)} events", expanded=year == latest_year):
        for track in tracks:
            flag_col, name_col, action_col = st.columns([1, 6, 2], vertical_alignment="center")
            with flag_col:
                if track.flag_url:
                    st.image(track.flag_url, width=48)
            with name_col:
                date = track.date_start.strftime("%d %b") if track.date_start else ""
                st.markdown(
                    f"**{track.meeting_official_name}**  \n"
                    f"{track.circuit_short_name}, {track.country_name} · {date}"
                )
            with action_col:
                if st.button("View Results", key=f"view_{track.meeting_key}"):
                    try:
                        race_session = calendar_service.race_session_for_meeting(
                            calendar, track.meeting_key,
                        )
                    except F1DataError as exc:
                        st.warning(str(exc))
                    else:
                        open_race(race_session["session_key"])
