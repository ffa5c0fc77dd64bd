"""Formatting helpers for the dashboard tables and metrics."""

from __future__ import annotations

DASH = "—"


def format_lap_time(seconds: float | None) -> str:
    """Format seconds as m:ss.fff or '—' if None."""
    if seconds is None:
        return DASH
    mins, secs = divmod(seconds, 60)
    return f"{int(mins)}:{secs:06.3f}"


def format_gap(seconds: float | None) -> str:
    """Gap to the fastest lap as +s.fff; zero gap reads 'Fastest'."""
    if seconds is None:
        return DASH
    if abs(seconds) < 0.0005:
        return "Fastest"
    return f"+{seconds:.3f}s"


def format_position(position: int | None) -> str:
    return f"P{position}" if position is not None else DASH


def format_position_change(delta: int) -> str:
    """Places gained as '+3', lost as '-2', unchanged as '—'."""
    if delta > 0:
        return f"+{delta}"
    if delta < 0:
        return str(delta)
    return DASH


def format_average_position(average: float | None) -> str:
    return f"{average:.1f}" if average is not None else DASH
