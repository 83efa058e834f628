"""Tests for environment settings and logging setup."""

from __future__ import annotations

import logging

import pytest

from boussole.config import Settings, configure_logging, get_settings


@pytest.fixture
def boussole_logger():
    logger = logging.getLogger("boussole")
    saved = logger.level
    yield logger
    logger.setLevel(saved)


class TestSettings:
    def test_defaults(self, monkeypatch) -> None:
        for name in ("APP_NAME", "DEBUG", "LOG_LEVEL", "TEMPLATE_CONFIG_PATH"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)
        assert settings.app_name == "Boussole"
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.template_config_path == ""

    def test_env_override(self, monkeypatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "warning")
        monkeypatch.setenv("TEMPLATE_CONFIG_PATH", "/etc/boussole/templates.yaml")
        settings = Settings(_env_file=None)
        assert settings.log_level == "warning"
        assert settings.template_config_path == "/etc/boussole/templates.yaml"

    def test_cached(self) -> None:
        assert get_settings() is get_settings()


class TestConfigureLogging:
    def test_level_from_settings(self, boussole_logger) -> None:
        configure_logging(Settings(_env_file=None, log_level="warning", debug=False))
        assert boussole_logger.level == logging.WARNING

    def test_debug_wins(self, boussole_logger) -> None:
        configure_logging(Settings(_env_file=None, log_level="ERROR", debug=True))
        assert boussole_logger.level == logging.DEBUG
