"""httpx-based transport for the OpenF1 REST API."""

from __future__ import annotations

from typing import Any

import httpx

from openf1_client.exceptions import (
    OpenF1APIError,
    OpenF1ConnectionError,
    OpenF1TimeoutError,
    OpenF1ValidationError,
)

DEFAULT_BASE_URL = "https://api.openf1.org/v1"
DEFAULT_TIMEOUT = 30.0

_HEADERS = {"Accept": "application/json"}

Params = list[tuple[str, str]]


def _is_no_results(payload: Any) -> bool:
    # OpenF1 answers "no data" with an object such as {"detail": "No results found."}
    return isinstance(payload, dict) and "detail" in payload and set(payload) <= {"detail", "error"}


def _parse_response(response: httpx.Response) -> list[dict[str, Any]]:
    """Check the status code and decode the body as a JSON array."""
    if response.status_code == 404:
        try:
            if _is_no_results(response.json()):
                return []
        except ValueError:
            pass
    if response.status_code >= 400:
        raise OpenF1APIError(
            status_code=response.status_code,
            message=response.text,
        )
    try:
        payload = response.json()
    except ValueError as exc:
        raise OpenF1ValidationError(f"Response is not valid JSON: {exc}") from exc
    if _is_no_results(payload):
        return []
    if not isinstance(payload, list):
        raise OpenF1ValidationError(
            f"Expected a JSON array, got {type(payload).__name__}",
        )
    return payload


class SyncTransport:
    """Blocking transport built on httpx.Client."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = httpx.Client(base_url=base_url, timeout=timeout, headers=_HEADERS)

    def get(self, endpoint: str, params: Params) -> list[dict[str, Any]]:
        """GET *endpoint* with *params* and return the decoded array."""
        try:
            response = self._client.get(endpoint, params=params)
        except httpx.TimeoutException as exc:
            raise OpenF1TimeoutError(str(exc)) from exc
        except httpx.TransportError as exc:
            raise OpenF1ConnectionError(str(exc)) from exc
        return _parse_response(response)

    def close(self) -> None:
        self._client.close()
