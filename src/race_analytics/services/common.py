"""Shared pure helpers for the service layer (no Streamlit dependency)."""

from __future__ import annotations

import re
from datetime import datetime, timezone

from ..constants import F1_RED
from ..data.types import SessionData

_HEX_COLOR_RE = re.compile(r"^#[0-9a-fA-F]{3,8}$")

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


def normalize_team_color(team_colour: str | None) -> str:
    """Return a validated hex color string with '#' prefix, defaulting to F1_RED."""
    if team_colour:
        candidate = f"#{team_colour.lstrip('#')}"
        if _HEX_COLOR_RE.match(candidate):
            return candidate.upper()
    return F1_RED


def session_start(session: SessionData) -> datetime:
    """Sort key for sessions; undated sessions sort before everything else."""
    start = session.get("date_start")
    if start is None:
        return _EPOCH
    if start.tzinfo is None:
        return start.replace(tzinfo=timezone.utc)
    return start


def race_name(session: SessionData) -> str:
    """Display name of the Grand Prix a race session belongs to."""
    country = session.get("country_name") or session.get("location") or "Unknown"
    return f"{country} Grand Prix"
