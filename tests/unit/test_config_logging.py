"""
Тесты для настроек и конфигурации логирования

Проверяет:
1. Значения по умолчанию StepRangeSettings
2. Чтение переменных окружения STEPRANGE_*
3. Кэширование и сброс настроек
4. configure_logging: формат и уровень
"""

import logging

import pytest

from src.core import logging as logging_config
from src.core.config import StepRangeSettings, get_settings, reset_settings


class TestSettings:
    """Тесты StepRangeSettings"""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("STEPRANGE_DEFAULT_TIMEZONE", raising=False)
        monkeypatch.delenv("STEPRANGE_LOG_LEVEL", raising=False)
        settings = StepRangeSettings()
        assert settings.default_timezone is None
        assert settings.log_level == "WARNING"

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STEPRANGE_DEFAULT_TIMEZONE", "Asia/Tokyo")
        monkeypatch.setenv("STEPRANGE_LOG_LEVEL", "DEBUG")
        settings = StepRangeSettings()
        assert settings.default_timezone == "Asia/Tokyo"
        assert settings.log_level == "DEBUG"

    def test_cached_until_reset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        first = get_settings()
        assert get_settings() is first

        monkeypatch.setenv("STEPRANGE_DEFAULT_TIMEZONE", "Asia/Tokyo")
        assert get_settings().default_timezone == "UTC"

        reset_settings()
        assert get_settings().default_timezone == "Asia/Tokyo"


class TestConfigureLogging:
    """Тесты configure_logging"""

    @pytest.fixture
    def recorded(self, monkeypatch: pytest.MonkeyPatch) -> dict:
        """Перехват logging.basicConfig, чтобы не трогать корневой логгер pytest"""
        calls: dict = {}
        monkeypatch.setattr(logging_config.logging, "basicConfig", lambda **kw: calls.update(kw))
        return calls

    def test_explicit_level(self, recorded: dict) -> None:
        logging_config.configure_logging("debug")
        assert recorded["level"] == logging.DEBUG
        assert recorded["format"] == logging_config.LOG_FORMAT
        assert recorded["force"] is True

    def test_level_from_settings(self, recorded: dict, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STEPRANGE_LOG_LEVEL", "ERROR")
        reset_settings()
        logging_config.configure_logging()
        assert recorded["level"] == logging.ERROR

    def test_unknown_level_falls_back(self, recorded: dict) -> None:
        logging_config.configure_logging("chatty")
        assert recorded["level"] == logging.WARNING
