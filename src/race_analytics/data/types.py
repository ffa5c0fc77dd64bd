"""Data contracts between the repository and the service layer."""

from __future__ import annotations

from datetime import datetime
from typing import TypedDict


class MeetingData(TypedDict):
    meeting_key: int
    meeting_name: str | None
    meeting_official_name: str | None
    circuit_short_name: str | None
    country_name: str | None
    country_code: str | None
    location: str | None
    date_start: datetime | None
    year: int | None


class SessionData(TypedDict):
    session_key: int
    session_name: str | None
    session_type: str | None
    meeting_key: int | None
    circuit_short_name: str | None
    country_name: str | None
    country_code: str | None
    location: str | None
    date_start: datetime | None
    date_end: datetime | None
    year: int | None


class DriverInfo(TypedDict):
    driver_number: int
    full_name: str | None
    broadcast_name: str | None
    name_acronym: str | None
    team_name: str | None
    team_colour: str | None
    headshot_url: str | None
    country_code: str | None


class PositionData(TypedDict):
    driver_number: int
    position: int | None
    date: datetime | None


class LapData(TypedDict):
    driver_number: int
    lap_number: int | None
    lap_duration: float | None
    is_pit_out_lap: bool


class StintData(TypedDict):
    driver_number: int
    stint_number: int | None
    compound: str
    lap_start: int | None
    lap_end: int | None
    tyre_age_at_start: int | None


class PitData(TypedDict):
    driver_number: int
    lap_number: int | None
    pit_duration: float | None


class SessionResultData(TypedDict):
    driver_number: int
    position: int | None
    points: float | None
    number_of_laps: int | None
    classified: bool
