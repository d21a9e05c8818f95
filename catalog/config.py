"""Application configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from typing import Any, Literal

import structlog
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    # Logging; LOG_LEVEL overrides the per-environment default
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] | None = None
    LOG_JSON: bool | None = None

    @field_validator("ENVIRONMENT", mode="before")
    @classmethod
    def normalize_environment(cls, value: object) -> object:
        """Accept environment names regardless of case and surrounding spaces."""
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @property
    def log_level(self) -> int:
        """Numeric stdlib level: DEBUG in development, INFO elsewhere unless overridden."""
        if self.LOG_LEVEL is not None:
            return logging.getLevelName(self.LOG_LEVEL)
        return logging.DEBUG if self.ENVIRONMENT == "development" else logging.INFO

    @property
    def use_json_logs(self) -> bool:
        """JSON lines in production, console rendering otherwise unless overridden."""
        if self.LOG_JSON is not None:
            return self.LOG_JSON
        return self.ENVIRONMENT == "production"


def configure_logging(settings: Settings | None = None) -> None:
    """
    Configure structured logging with structlog.

    Args:
        settings: Settings to read level and renderer from; defaults to get_settings()
    """
    settings = settings or get_settings()
    use_json = settings.use_json_logs

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=settings.log_level,
    )

    processors: list[Callable[..., Any]] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if use_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
