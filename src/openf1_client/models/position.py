"""Position model."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class Position(BaseModel):
    """A driver's running position, recorded each time it changes.

    The earliest record of a race is taken as the grid slot and the latest
    as the finish when no official classification exists.
    """

    model_config = ConfigDict(frozen=True)

    driver_number: int | None = None
    position: int | None = None
    date: datetime | None = None
