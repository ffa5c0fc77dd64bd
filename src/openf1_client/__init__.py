"""Typed client for the subset of the OpenF1 API used by F1 Race Analytics."""

from openf1_client._filters import Filter
from openf1_client.client import OpenF1Client
from openf1_client.exceptions import (
    OpenF1APIError,
    OpenF1ConnectionError,
    OpenF1Error,
    OpenF1TimeoutError,
    OpenF1ValidationError,
)

__all__ = [
    "Filter",
    "OpenF1APIError",
    "OpenF1Client",
    "OpenF1ConnectionError",
    "OpenF1Error",
    "OpenF1TimeoutError",
    "OpenF1ValidationError",
]

__version__ = "0.1.0"
