"""Call logging for the data and service layers.

Everything goes to ``<log_dir>/api_calls.log`` through one non-propagating
logger, so Streamlit's own console output stays clean.
"""

from __future__ import annotations

import functools
import logging
import threading
import time
from pathlib import Path
from typing import Any, Callable, TypeVar

from .config import get_settings

F = TypeVar("F", bound=Callable[..., Any])

LOGGER_NAME = "race_analytics.api"
LOG_FILE_NAME = "api_calls.log"

# None means "take log_dir from settings on first use"
_log_dir: Path | None = None

_logger: logging.Logger | None = None
_logger_lock = threading.Lock()


def get_logger() -> logging.Logger:
    """Return the API logger, creating the log directory and handler on first use."""
    global _logger
    if _logger is not None:
        return _logger

    with _logger_lock:
        if _logger is not None:
            return _logger

        log_dir = _log_dir if _log_dir is not None else get_settings().log_dir
        log_dir.mkdir(parents=True, exist_ok=True)

        logger = logging.getLogger(LOGGER_NAME)
        logger.setLevel(logging.DEBUG)
        logger.propagate = False

        if not logger.handlers:
            handler = logging.FileHandler(log_dir / LOG_FILE_NAME, encoding="utf-8")
            handler.setFormatter(
                logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"),
            )
            logger.addHandler(handler)

        _logger = logger

    return _logger


def _describe(value: Any) -> str:
    # Collections passed to services can hold whole race histories
    if isinstance(value, (list, tuple, set, dict)):
        return f"<{type(value).__name__} len={len(value)}>"
    return repr(value)


def _describe_args(args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    # args[0] is self
    parts = [_describe(a) for a in args[1:]]
    parts += [f"{k}={_describe(v)}" for k, v in kwargs.items() if not callable(v)]
    return ", ".join(parts)


def log_api_call(fn: F) -> F:
    """Log a repository method's arguments, result size and duration."""

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = get_logger()
        arg_str = _describe_args(args, kwargs)
        logger.info("CALL: %s(%s)", fn.__qualname__, arg_str)

        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            logger.error(
                "FAIL: %s(%s) -> %s: %s (%.3fs)",
                fn.__qualname__, arg_str, type(exc).__name__, exc, time.monotonic() - start,
            )
            raise
        if isinstance(result, list):
            count = len(result)
        else:
            count = 0 if result is None else 1
        logger.info(
            "OK: %s(%s) -> %d items (%.3fs)",
            fn.__qualname__, arg_str, count, time.monotonic() - start,
        )
        return result

    return wrapper  # type: ignore[return-value]


def log_service_call(fn: F) -> F:
    """Log a service method's entry, duration and failure."""

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = get_logger()
        logger.info("SERVICE CALL: %s(%s)", fn.__qualname__, _describe_args(args, kwargs))

        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            logger.error(
                "SERVICE FAIL: %s -> %s: %s (%.3fs)",
                fn.__qualname__, type(exc).__name__, exc, time.monotonic() - start,
            )
            raise
        logger.info("SERVICE OK: %s -> %.3fs", fn.__qualname__, time.monotonic() - start)
        return result

    return wrapper  # type: ignore[return-value]


def log_skip(what: str, reason: object) -> None:
    """Record a fetch or iteration that was dropped instead of failing the page."""
    get_logger().warning("SKIP: %s -> %s", what, reason)
