"""Championship points for a finishing position."""

from __future__ import annotations

from ..constants import POINTS_TABLE


def race_points(position: int | None) -> int:
    """Points for finishing *position* in a Grand Prix; 0 outside the top ten."""
    if position is None or not 1 <= position <= len(POINTS_TABLE):
        return 0
    return POINTS_TABLE[position - 1]
