"""
wrike_search.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for the API, client and search layers.
- Hide the Wrike bearer token from repr/logging.
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Single settings object injected across layers.

    The token plays the part of a launcher preference value:
    one secret string, read from `WRIKE_SEARCH_WRIKE_API_TOKEN`.
    """

    model_config = SettingsConfigDict(env_prefix="WRIKE_SEARCH_", case_sensitive=False)

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "wrike-search"
    log_level: str = "INFO"
    # JSON lines for aggregation; False renders human-readable console output.
    log_json: bool = True

    api_host: str = "127.0.0.1"
    api_port: int = 8080

    # Wrike
    wrike_api_base_url: str = "https://www.wrike.com/api/v4"
    wrike_api_token: str = Field(default="", repr=False)
    http_timeout_seconds: float = 10.0

    # Search
    default_task_limit: int = Field(default=100, gt=0)

    @property
    def has_token(self) -> bool:
        return bool(self.wrike_api_token.strip())


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()
