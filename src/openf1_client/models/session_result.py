"""Session result model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class SessionResult(BaseModel):
    """Classified result of one driver at the end of a session."""

    model_config = ConfigDict(frozen=True)

    dnf: bool | None = None
    dns: bool | None = None
    dsq: bool | None = None
    driver_number: int | None = None
    # Qualifying reports one value per segment, races a single value
    duration: float | list[float | None] | None = None
    gap_to_leader: float | str | list[float | str | None] | None = None
    meeting_key: int | None = None
    number_of_laps: int | None = None
    points: float | None = None
    position: int | None = None
    session_key: int | None = None

    @property
    def classified(self) -> bool:
        """True unless the driver did not finish, start, or was disqualified."""
        return not (self.dnf or self.dns or self.dsq)
