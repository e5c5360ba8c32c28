"""
Общие фикстуры тестов.

Зона по умолчанию фиксируется как UTC, чтобы результаты не зависели
от системного часового пояса машины.
"""

import pytest

from src.core.config import reset_settings


@pytest.fixture(autouse=True)
def default_timezone_utc(monkeypatch: pytest.MonkeyPatch):
    """STEPRANGE_DEFAULT_TIMEZONE=UTC на время каждого теста"""
    monkeypatch.setenv("STEPRANGE_DEFAULT_TIMEZONE", "UTC")
    reset_settings()
    yield
    reset_settings()
