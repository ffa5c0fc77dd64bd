"""F1 Race Analytics — driver profile: career and per-season statistics."""

from __future__ import annotations

import plotly.graph_objects as go
import streamlit as st

from race_analytics import (
    PLOTLY_LAYOUT_DEFAULTS,
    DriverStatsService,
    F1DataError,
    format_average_position,
    format_position,
    format_position_change,
    get_repository,
    get_settings,
    normalize_team_color,
)
from race_analytics.constants import RACE_SESSION_NAME
from race_analytics.services import DriverStats, recent_race_sessions
from race_analytics.ui import (
    DRIVER_NUMBER_PARAM,
    accent_bar,
    configure_page,
    home_link,
    open_race,
    render_driver_search,
    route_param,
)

configure_page("Driver Profile")
home_link()

settings = get_settings()
repo = get_repository()

driver_number = route_param(DRIVER_NUMBER_PARAM)
if driver_number is None:
    st.title("Driver Profile")
    accent_bar()
    sessions = repo.get_sessions_between(
        settings.first_season, settings.last_season, session_name=RACE_SESSION_NAME,
    )
    render_driver_search(repo, recent_race_sessions(sessions), settings.search_lookback)
    st.stop()


def _stat_row(stats: DriverStats) -> None:
    c1, c2, c3, c4, c5, c6 = st.columns(6)
    c1.metric("Races", stats.total_races)
    c2.metric("Points", stats.points)
    c3.metric("Podiums", stats.podiums)
    c4.metric("Best Finish", format_position(stats.best_position))
    c5.metric("Worst Finish", format_position(stats.worst_position))
    c6.metric("Avg Finish", format_average_position(stats.average_position))


# ── Load profile ─────────────────────────────────────────────────────────────

progress = st.progress(0.0, text="Finding driver...")


def _on_progress(index: int, total: int, race: str) -> None:
    progress.progress(index / total, text=f"Loading {race} ({index}/{total})")


try:
    profile = DriverStatsService(repo).load_profile(
        driver_number,
        settings.first_season,
        settings.last_season,
        lookback=settings.search_lookback,
        on_progress=_on_progress,
    )
except F1DataError as exc:
    progress.empty()
    st.error(str(exc))
    st.stop()

progress.empty()

driver = profile.driver
team_colour = normalize_team_color(driver.get("team_colour"))


# ── Header ───────────────────────────────────────────────────────────────────

photo_col, info_col = st.columns([1, 5], vertical_alignment="center")
with photo_col:
    if driver.get("headshot_url"):
        st.image(driver["headshot_url"], width=120)
with info_col:
    st.title(driver.get("full_name") or f"#{driver['driver_number']}")
    st.markdown(
        f"**#{driver['driver_number']}** · {driver.get('name_acronym') or ''} · "
        f"{driver.get('team_name') or 'Unknown team'}"
        + (f" · {driver['country_code']}" if driver.get("country_code") else "")
    )
accent_bar(team_colour)

if profile.skipped_sessions:
    st.caption(
        f"{profile.skipped_sessions} of {profile.sessions_checked} races had no data "
        "for this driver and were left out."
    )

if not profile.has_results:
    st.info("No race data found for this driver in the selected seasons.")
    st.stop()


# ── Career ───────────────────────────────────────────────────────────────────

st.subheader(f"Career ({profile.years[-1]}–{profile.years[0]})")
_stat_row(profile.career)


# ── Seasons ──────────────────────────────────────────────────────────────────

st.subheader("Seasons")

for year in profile.years:
    races = profile.season_races[year]
    with st.expander(f"{year} — {len(races)} races", expanded=year == profile.years[0]):
        _stat_row(profile.seasons[year])

        st.dataframe(
            [
                {
                    "Race": r.race_name,
                    "Date": r.race_date.strftime("%d %b") if r.race_date else "",
                    "Start": format_position(r.start_position),
                    "Finish": format_position(r.finish_position),
                    "+/-": format_position_change(r.position_change),
                    "Points": r.points,
                }
                for r in races
            ],
            hide_index=True,
            use_container_width=True,
        )

        fig = go.Figure(go.Scatter(
            x=[r.race_name for r in races],
            y=[r.finish_position for r in races],
            mode="lines+markers",
            line=dict(color=team_colour, width=2),
            marker=dict(size=8),
            customdata=[r.points for r in races],
            hovertemplate="%{x}<br>P%{y} · %{customdata} pts<extra></extra>",
        ))
        fig.update_layout(
            **PLOTLY_LAYOUT_DEFAULTS,
            yaxis=dict(title="Finish Position", autorange="reversed", dtick=1),
            height=320,
            showlegend=False,
        )
        st.plotly_chart(fig, use_container_width=True, key=f"season_chart_{year}")

        race_labels = {r.race_name: r.session_key for r in races}
        pick_col, go_col = st.columns([3, 1], vertical_alignment="bottom")
        with pick_col:
            picked = st.selectbox("Race", list(race_labels), key=f"race_pick_{year}")
        with go_col:
            if st.button("View Race", key=f"view_race_{year}", use_container_width=True):
                open_race(race_labels[picked])
