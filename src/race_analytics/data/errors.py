"""Errors the dashboard pages are allowed to see."""

from __future__ import annotations


class F1DataError(Exception):
    """Data could not be assembled. UI catches only this (and subclasses)."""


class DriverNotFoundError(F1DataError):
    """No recent race session lists a matching driver."""


class RaceNotFoundError(F1DataError):
    """The requested race session does not exist or returned no data."""


class InvalidSelectionError(F1DataError):
    """User input (search text, year, race) cannot be acted on."""
