"""
Тесты для Positivity Validators

Проверяет:
1. TimeDelta: положительна iff > 0
2. CalendarPeriod: нулевой/отрицательный/смешанный знак через пробное сложение
3. CombinedPeriod: пробное сложение с 1970-01-01T00:00 через часовой пояс
4. Переполнение при пробном сложении → "не положителен"
"""

import pytest
from whenever import Date, LocalDateTime, TimeDelta, hours

from src.core.domain import CalendarPeriod, CombinedPeriod, TimeZone
from src.core.math import (
    EPOCH_REFERENCE_DATE,
    EPOCH_REFERENCE_DATETIME,
    is_positive,
    is_positive_combined,
    is_positive_duration,
    is_positive_period,
)


class TestReferencePoints:
    def test_epoch(self) -> None:
        assert EPOCH_REFERENCE_DATE == Date(1970, 1, 1)
        assert EPOCH_REFERENCE_DATETIME == LocalDateTime(1970, 1, 1)


class TestDurationPositivity:
    """Тесты для TimeDelta"""

    def test_positive(self) -> None:
        assert is_positive_duration(hours(1))
        assert is_positive_duration(TimeDelta(nanoseconds=1))

    def test_zero(self) -> None:
        assert not is_positive_duration(TimeDelta.ZERO)

    def test_negative(self) -> None:
        assert not is_positive_duration(hours(-1))


class TestPeriodPositivity:
    """Тесты для CalendarPeriod"""

    @pytest.mark.parametrize(
        "period",
        [
            CalendarPeriod(days=1),
            CalendarPeriod(months=1),
            CalendarPeriod(years=1),
            CalendarPeriod(months=1, days=-20),
            CalendarPeriod(years=1, months=-11),
        ],
    )
    def test_positive(self, period: CalendarPeriod) -> None:
        assert is_positive_period(period)

    @pytest.mark.parametrize(
        "period",
        [
            CalendarPeriod(),
            CalendarPeriod(days=-1),
            CalendarPeriod(months=-1),
            CalendarPeriod(months=1, days=-40),
            CalendarPeriod(months=1, days=-31),
            CalendarPeriod(years=1, months=-12),
        ],
    )
    def test_not_positive(self, period: CalendarPeriod) -> None:
        assert not is_positive_period(period)

    def test_overflow_is_not_positive(self) -> None:
        """Переполнение при пробном сложении — не положителен"""
        assert not is_positive_period(CalendarPeriod(years=1_000_000))


class TestCombinedPositivity:
    """Тесты для CombinedPeriod"""

    @pytest.mark.parametrize(
        "period",
        [
            CombinedPeriod(hours=1),
            CombinedPeriod(nanoseconds=1),
            CombinedPeriod(days=1),
            CombinedPeriod(days=1, hours=-23),
        ],
    )
    def test_positive(self, period: CombinedPeriod) -> None:
        assert is_positive_combined(period, TimeZone.of("UTC"))

    @pytest.mark.parametrize(
        "period",
        [
            CombinedPeriod(),
            CombinedPeriod(hours=-1),
            CombinedPeriod(days=1, hours=-24),
            CombinedPeriod(days=1, hours=-25),
        ],
    )
    def test_not_positive(self, period: CombinedPeriod) -> None:
        assert not is_positive_combined(period, TimeZone.of("UTC"))

    def test_default_timezone(self) -> None:
        assert is_positive_combined(CombinedPeriod(minutes=1))

    def test_overflow_is_not_positive(self) -> None:
        assert not is_positive_combined(CombinedPeriod(hours=10**9), TimeZone.of("UTC"))


class TestDispatch:
    """Тесты диспетчера is_positive"""

    def test_dispatch(self) -> None:
        assert is_positive(hours(1))
        assert is_positive(CalendarPeriod(days=1))
        assert is_positive(CombinedPeriod(hours=1), TimeZone.of("UTC"))
        assert not is_positive(CalendarPeriod(days=-1))

    def test_unsupported(self) -> None:
        with pytest.raises(TypeError, match="Unsupported step type"):
            is_positive(1)  # type: ignore[arg-type]
