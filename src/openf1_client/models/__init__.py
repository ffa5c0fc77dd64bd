"""Typed records returned by the OpenF1 endpoints the dashboard uses."""

from openf1_client.models.driver import Driver
from openf1_client.models.lap import Lap
from openf1_client.models.meeting import Meeting
from openf1_client.models.pit import Pit
from openf1_client.models.position import Position
from openf1_client.models.session import Session
from openf1_client.models.session_result import SessionResult
from openf1_client.models.stint import Stint

__all__ = [
    "Driver",
    "Lap",
    "Meeting",
    "Pit",
    "Position",
    "Session",
    "SessionResult",
    "Stint",
]
