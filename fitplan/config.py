from __future__ import annotations

import logging
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    APP_ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    # Engine defaults applied when the caller leaves an input unspecified
    DEFAULT_AVAILABLE_TIME: int = 60
    DEFAULT_DURATION_WEEKS: int = 4
    DEFAULT_WORKOUT_DAYS_PER_WEEK: int = 4
    MAX_TOP_RECOMMENDATIONS: int = 3
    PLAN_ID_PREFIX: str = "plan_"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()  # type: ignore[call-arg]


def configure_logging(level: str | None = None) -> None:
    """Apply LOG_LEVEL to the package logger. Handlers are left to the host application."""
    settings = get_settings()
    name = (level or settings.LOG_LEVEL).upper()
    logging.getLogger("fitplan").setLevel(getattr(logging, name, logging.INFO))
