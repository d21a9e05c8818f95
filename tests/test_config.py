"""Tests for application configuration."""

import logging
from collections.abc import Generator

import pytest
import structlog

from catalog.config import Settings, configure_logging, get_settings


@pytest.fixture
def reset_structlog() -> Generator[None, None, None]:
    yield
    structlog.reset_defaults()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("ENVIRONMENT", "LOG_LEVEL", "LOG_JSON"):
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    """Test suite for Settings."""

    def test_defaults(self) -> None:
        settings = Settings(_env_file=None)  # type: ignore[call-arg]
        assert settings.ENVIRONMENT == "development"
        assert settings.log_level == logging.DEBUG
        assert settings.use_json_logs is False

    def test_environment_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", " Production ")
        settings = Settings(_env_file=None)  # type: ignore[call-arg]
        assert settings.ENVIRONMENT == "production"
        assert settings.log_level == logging.INFO
        assert settings.use_json_logs is True

    def test_unknown_environment_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "staging")
        with pytest.raises(ValueError):
            Settings(_env_file=None)  # type: ignore[call-arg]

    def test_log_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("LOG_LEVEL", "warning")
        monkeypatch.setenv("LOG_JSON", "false")
        settings = Settings(_env_file=None)  # type: ignore[call-arg]
        assert settings.log_level == logging.WARNING
        assert settings.use_json_logs is False

    def test_get_settings_is_cached(self) -> None:
        get_settings.cache_clear()
        assert get_settings() is get_settings()
        get_settings.cache_clear()


class TestConfigureLogging:
    """Test suite for configure_logging."""

    @pytest.mark.parametrize("environment", ["development", "production"])
    def test_renderer_follows_settings(self, environment: str, reset_structlog: None) -> None:
        configure_logging(Settings(_env_file=None, ENVIRONMENT=environment))  # type: ignore[call-arg]

        config = structlog.get_config()
        assert config["wrapper_class"] is structlog.stdlib.BoundLogger
        renderer = config["processors"][-1]
        if environment == "production":
            assert isinstance(renderer, structlog.processors.JSONRenderer)
        else:
            assert isinstance(renderer, structlog.dev.ConsoleRenderer)

    def test_defaults_to_cached_settings(
        self, monkeypatch: pytest.MonkeyPatch, reset_structlog: None
    ) -> None:
        monkeypatch.setenv("LOG_JSON", "true")
        get_settings.cache_clear()
        try:
            configure_logging()
        finally:
            get_settings.cache_clear()

        renderer = structlog.get_config()["processors"][-1]
        assert isinstance(renderer, structlog.processors.JSONRenderer)
