"""Runtime settings, overridable through ``F1_ANALYTICS_*`` environment variables."""

from __future__ import annotations

import datetime
import functools
from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from openf1_client._http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="F1_ANALYTICS_")

    api_base_url: str = DEFAULT_BASE_URL
    api_timeout: float = DEFAULT_TIMEOUT
    # OpenF1 allows 3 req/s; 350ms keeps us safe
    request_interval: float = 0.35

    # OpenF1 has no data before 2023
    first_season: int = 2023
    last_season: int = Field(default_factory=lambda: datetime.date.today().year)
    search_lookback: int = 5

    strict_fetch: bool = False
    cache_ttl: int = 600
    log_dir: Path = Path("logs")

    @model_validator(mode="after")
    def _check_season_window(self) -> Settings:
        if self.first_season > self.last_season:
            raise ValueError(
                f"first_season ({self.first_season}) is after last_season ({self.last_season})"
            )
        return self

    @property
    def seasons(self) -> list[int]:
        return list(range(self.first_season, self.last_season + 1))


@functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, read once from the environment."""
    return Settings()
