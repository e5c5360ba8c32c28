"""
Periods — Календарные периоды и комбинированные периоды

Шаги прогрессий бывают трёх видов:
- ElapsedDuration: реальное прошедшее время (whenever.TimeDelta, наносекунды)
- CalendarPeriod: (years, months, days) по правилам календаря, без абсолютного смысла
- CombinedPeriod: CalendarPeriod + суб-дневная длительность (hours/minutes/seconds/nanoseconds)

Компоненты периодов могут иметь разные знаки (например, +1 месяц и -40 дней).
Итоговый эффект такого периода зависит от календаря, поэтому знак периода
определяется только пробным сложением (см. src.core.math.positivity).
"""

from typing import Final

from pydantic import BaseModel, Field
from whenever import TimeDelta

# Псевдоним для читаемости сигнатур: прошедшее время
ElapsedDuration = TimeDelta

HOURS_PER_DAY: Final[int] = 24


def elapsed_days(days: int) -> TimeDelta:
    """
    Длительность в "прошедших сутках" (ровно 24 часа каждые).

    В отличие от CalendarPeriod(days=n), не зависит от DST-переходов
    при сложении через часовой пояс.

    Args:
        days: Количество суток (может быть отрицательным)

    Returns:
        TimeDelta длиной days * 24 часа
    """
    return TimeDelta(hours=days * HOURS_PER_DAY)


# =============================================================================
# CALENDAR PERIOD
# =============================================================================


class CalendarPeriod(BaseModel):
    """
    Календарный период (years, months, days).

    Immutable модель (frozen=True). Компоненты знаковые и независимые.
    Сложение с датой: сначала years+months (с обрезкой дня до конца месяца),
    затем days.
    """

    years: int = Field(0, description="Годы")
    months: int = Field(0, description="Месяцы")
    days: int = Field(0, description="Дни")

    model_config = {"frozen": True}

    def total_months(self) -> int:
        """Годы и месяцы, приведённые к месяцам."""
        return self.years * 12 + self.months

    def is_zero(self) -> bool:
        """True если все компоненты равны нулю."""
        return self.years == 0 and self.months == 0 and self.days == 0

    def __neg__(self) -> "CalendarPeriod":
        return CalendarPeriod(years=-self.years, months=-self.months, days=-self.days)


# =============================================================================
# COMBINED PERIOD
# =============================================================================


class CombinedPeriod(BaseModel):
    """
    Комбинированный период: календарная часть + суб-дневная длительность.

    Immutable модель (frozen=True).

    Применяется в фиксированном порядке:
    1. date_part() — к дате, без часового пояса
    2. time_part() — как прошедшее время, через часовой пояс
    """

    years: int = Field(0, description="Годы")
    months: int = Field(0, description="Месяцы")
    days: int = Field(0, description="Дни")
    hours: int = Field(0, description="Часы (прошедшее время)")
    minutes: int = Field(0, description="Минуты (прошедшее время)")
    seconds: int = Field(0, description="Секунды (прошедшее время)")
    nanoseconds: int = Field(0, description="Наносекунды (прошедшее время)")

    model_config = {"frozen": True}

    def date_part(self) -> CalendarPeriod:
        """Календарная часть (years, months, days)."""
        return CalendarPeriod(years=self.years, months=self.months, days=self.days)

    def time_part(self) -> TimeDelta:
        """
        Суб-дневная часть как прошедшее время.

        Raises:
            ValueError: Если длительность вне диапазона TimeDelta
        """
        return TimeDelta(
            hours=self.hours,
            minutes=self.minutes,
            seconds=self.seconds,
            nanoseconds=self.nanoseconds,
        )

    def is_zero(self) -> bool:
        """True если все компоненты равны нулю."""
        return self.date_part().is_zero() and (
            self.hours == 0 and self.minutes == 0 and self.seconds == 0 and self.nanoseconds == 0
        )

    def __neg__(self) -> "CombinedPeriod":
        return CombinedPeriod(
            years=-self.years,
            months=-self.months,
            days=-self.days,
            hours=-self.hours,
            minutes=-self.minutes,
            seconds=-self.seconds,
            nanoseconds=-self.nanoseconds,
        )
