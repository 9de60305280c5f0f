"""
Centralised settings loader.

Values come from the environment or a local `.env` file, e.g.

    ENV_NAME=staging
    LOG_LEVEL=DEBUG
    CORS_ORIGINS='["https://example.org"]'
"""

from __future__ import annotations
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# ------------------------------------------------------------------ #
#  Master settings model
# ------------------------------------------------------------------ #
class _Settings(BaseSettings):
    # ─── runtime ─────────────────────────────────────────────────────
    env_name: str = Field("local", validation_alias="ENV_NAME")
    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")

    # ─── HTTP surface ────────────────────────────────────────────────
    api_prefix: str = Field("/api/v1", validation_alias="API_PREFIX")
    cors_origins: list[str] = Field(["*"], validation_alias="CORS_ORIGINS")

    # allow other teammates’ env-vars without crashing
    model_config = SettingsConfigDict(
        extra="ignore", env_file=".env", env_file_encoding="utf-8"
    )


# ------------------------------------------------------------------ #
#  Cached singleton accessor
# ------------------------------------------------------------------ #
@lru_cache
def get_settings() -> _Settings:
    return _Settings()  # type: ignore[call-arg]


settings: _Settings = get_settings()
