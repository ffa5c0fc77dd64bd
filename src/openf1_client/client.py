"""Client for the OpenF1 endpoints."""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from openf1_client._filters import build_query_params
from openf1_client._http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, SyncTransport
from openf1_client.exceptions import OpenF1ValidationError
from openf1_client.models.driver import Driver
from openf1_client.models.lap import Lap
from openf1_client.models.meeting import Meeting
from openf1_client.models.pit import Pit
from openf1_client.models.position import Position
from openf1_client.models.session import Session
from openf1_client.models.session_result import SessionResult
from openf1_client.models.stint import Stint

T = TypeVar("T")


def _validate_list(model_type: type[T], data: list[dict[str, Any]]) -> list[T]:
    try:
        return TypeAdapter(list[model_type]).validate_python(data)
    except ValidationError as exc:
        raise OpenF1ValidationError(
            f"Failed to validate {model_type.__name__} response: {exc}"
        ) from exc


class OpenF1Client:
    """Blocking OpenF1 client.

    Every endpoint method takes the API's query fields as keyword arguments;
    plain values filter by equality and :class:`~openf1_client.Filter`
    values by comparison::

        with OpenF1Client() as f1:
            races = f1.sessions(year=Filter(gte=2023), session_name="Race")
            grid = f1.drivers(session_key=races[-1].session_key)
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._transport = SyncTransport(base_url=base_url, timeout=timeout)

    def __enter__(self) -> OpenF1Client:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        self._transport.close()

    def _get(self, endpoint: str, model: type[T], **kwargs: Any) -> list[T]:
        data = self._transport.get(endpoint, build_query_params(**kwargs))
        return _validate_list(model, data)

    # ── Endpoints ──────────────────────────────────────────────

    def meetings(self, **kwargs: Any) -> list[Meeting]:
        """Grand Prix weekends and test events."""
        return self._get("/meetings", Meeting, **kwargs)

    def sessions(self, **kwargs: Any) -> list[Session]:
        """Sessions of one or more meetings."""
        return self._get("/sessions", Session, **kwargs)

    def drivers(self, **kwargs: Any) -> list[Driver]:
        """Drivers entered in a session."""
        return self._get("/drivers", Driver, **kwargs)

    def position(self, **kwargs: Any) -> list[Position]:
        """Running-position changes during a session."""
        return self._get("/position", Position, **kwargs)

    def laps(self, **kwargs: Any) -> list[Lap]:
        """Per-lap timing."""
        return self._get("/laps", Lap, **kwargs)

    def session_result(self, **kwargs: Any) -> list[SessionResult]:
        """Final classification of a session."""
        return self._get("/session_result", SessionResult, **kwargs)

    def stints(self, **kwargs: Any) -> list[Stint]:
        """Tyre stints."""
        return self._get("/stints", Stint, **kwargs)

    def pit(self, **kwargs: Any) -> list[Pit]:
        """Pit lane visits."""
        return self._get("/pit", Pit, **kwargs)
