"""F1 Race Analytics — standings, best laps and tyre strategy of one race."""

from __future__ import annotations

import plotly.graph_objects as go
import streamlit as st

from race_analytics import (
    COMPOUND_COLORS,
    PLOTLY_LAYOUT_DEFAULTS,
    F1DataError,
    RaceResultsService,
    format_gap,
    format_lap_time,
    format_position,
    format_position_change,
    get_repository,
)
from race_analytics.ui import (
    SESSION_KEY_PARAM,
    accent_bar,
    configure_page,
    home_link,
    open_driver,
    route_param,
)

configure_page("Race Results")
home_link()

session_key = route_param(SESSION_KEY_PARAM)
if session_key is None:
    st.info("Pick a race from the home page to see its results.")
    st.stop()


# ── Fetch race data ──────────────────────────────────────────────────────────

with st.spinner("Loading race data..."):
    try:
        race = RaceResultsService(get_repository()).build_standings(session_key)
    except F1DataError as exc:
        st.error(str(exc))
        st.stop()

session = race.session

st.title("Race Results")
st.markdown(
    f"### {race.race_name}"
    f"  \n{session.get('circuit_short_name') or ''} · "
    f"{session['date_start'].strftime('%d %B %Y') if session.get('date_start') else ''}"
)
accent_bar()


# ── KPI metrics ──────────────────────────────────────────────────────────────

winner = race.standings[0]
fastest = race.fastest_lap
kpi1, kpi2, kpi3 = st.columns(3)
kpi1.metric("Winner", winner.driver_name if winner.position == 1 else "—")
kpi2.metric(
    "Fastest Lap",
    format_lap_time(fastest.best_lap_time) if fastest else "—",
    delta=fastest.name_acronym if fastest else None,
    delta_color="off",
)
kpi3.metric("Pit Stops", sum(s.pit_stops for s in race.standings))


# ── Standings table ──────────────────────────────────────────────────────────

st.subheader("Driver Standings")

rows = [
    {
        "Pos": format_position(s.position),
        "Photo": s.headshot_url,
        "#": s.driver_number,
        "Driver": s.driver_name + (" \U0001f7e3" if s.has_fastest_lap else ""),
        "Team": s.team_name,
        "Grid": format_position(s.grid_position),
        "+/-": format_position_change(s.position_delta),
        "Pit Stops": s.pit_stops,
        "Best Lap": format_lap_time(s.best_lap_time),
        "Tyres": " → ".join(t.compound[0] for t in s.tire_stints),
        "Status": "" if s.classified else "DNF",
    }
    for s in race.standings
]
st.dataframe(
    rows,
    hide_index=True,
    use_container_width=True,
    column_config={"Photo": st.column_config.ImageColumn("", width="small")},
)
st.caption("\U0001f7e3 fastest lap of the race")

profile_options = {f"{s.name_acronym} — {s.driver_name}": s.driver_number for s in race.standings}
profile_col, button_col = st.columns([3, 1], vertical_alignment="bottom")
with profile_col:
    chosen = st.selectbox("Driver profile", list(profile_options.keys()))
with button_col:
    if st.button("Open Profile", use_container_width=True) and chosen is not None:
        open_driver(profile_options[chosen])


# ── Best lap comparison ─────────────────────────────────────────────────────

st.subheader("Best Lap Gap to Fastest")

if not race.lap_chart:
    st.warning("No lap time data available.")
else:
    fig_laps = go.Figure(go.Bar(
        x=[e.gap_to_fastest for e in race.lap_chart],
        y=[e.name_acronym for e in race.lap_chart],
        orientation="h",
        marker_color=[e.team_colour for e in race.lap_chart],
        text=[format_gap(e.gap_to_fastest) for e in race.lap_chart],
        textposition="outside",
        customdata=[format_lap_time(e.lap_time) for e in race.lap_chart],
        hovertemplate="%{y}<br>Best lap %{customdata}<br>Gap %{text}<extra></extra>",
    ))
    fig_laps.update_layout(
        **PLOTLY_LAYOUT_DEFAULTS,
        xaxis_title="Gap to fastest lap (s)",
        yaxis=dict(autorange="reversed"),
        height=max(300, 26 * len(race.lap_chart)),
        showlegend=False,
    )
    st.plotly_chart(fig_laps, use_container_width=True)


# ── Tire strategy timeline ──────────────────────────────────────────────────

st.subheader("Tire Strategy")

strategy = [s for s in race.standings if s.tire_stints]
if not strategy:
    st.warning("No stint data available.")
else:
    fig_tires = go.Figure()
    seen_compounds: set[str] = set()
    for standing in strategy:
        for stint in standing.tire_stints:
            if stint.lap_start is None or stint.lap_end is None:
                continue
            color = COMPOUND_COLORS.get(stint.compound, COMPOUND_COLORS["UNKNOWN"])
            fig_tires.add_trace(go.Bar(
                x=[stint.laps],
                y=[standing.name_acronym],
                base=[stint.lap_start - 1],
                orientation="h",
                name=stint.compound,
                legendgroup=stint.compound,
                showlegend=stint.compound not in seen_compounds,
                marker_color=color,
                marker_line=dict(color="#333333", width=1),
                hovertemplate=(
                    f"{standing.name_acronym} · stint {stint.stint_number}<br>"
                    f"{stint.compound}<br>"
                    f"Laps {stint.lap_start}–{stint.lap_end}"
                    "<extra></extra>"
                ),
            ))
            seen_compounds.add(stint.compound)

    fig_tires.update_layout(
        **PLOTLY_LAYOUT_DEFAULTS,
        barmode="overlay",
        xaxis_title="Lap Number",
        yaxis=dict(autorange="reversed"),
        height=max(300, 26 * len(strategy)),
    )
    st.plotly_chart(fig_tires, use_container_width=True)
