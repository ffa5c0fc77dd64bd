"""Exceptions raised by the OpenF1 client."""

from __future__ import annotations


class OpenF1Error(Exception):
    """Base class for every client-side failure talking to OpenF1."""


class OpenF1ConnectionError(OpenF1Error):
    """The API host could not be reached."""


class OpenF1TimeoutError(OpenF1Error):
    """The request did not complete within the configured timeout."""


class OpenF1APIError(OpenF1Error):
    """The API answered with a 4xx/5xx status."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


class OpenF1ValidationError(OpenF1Error):
    """The response body was not a JSON array of the expected records."""
