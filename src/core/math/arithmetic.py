"""
Arithmetic Adapters — сложение точек во времени с шагами

Единственный допустимый способ продвигать точку на шаг:
- Instant + ElapsedDuration → Instant (без часового пояса)
- Date + CalendarPeriod → Date (календарные правила, без часового пояса)
- LocalDateTime + ElapsedDuration + TimeZone → LocalDateTime (через Instant)
- LocalDateTime + CalendarPeriod → LocalDateTime (меняется только дата)
- LocalDateTime + CombinedPeriod + TimeZone → LocalDateTime
  (сначала календарная часть, затем суб-дневная через часовой пояс)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Порядок применения CombinedPeriod фиксирован: date_part → time_part
2. Разрешение DST делегируется TimeZone, адаптеры своей политики не выбирают
3. Выход за пределы представимых дат всегда CalendarOverflowError
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional, Union

from whenever import Date, Instant, LocalDateTime, TimeDelta

from src.core.domain.periods import CalendarPeriod, CombinedPeriod
from src.core.domain.timezone import TimeZone
from src.core.errors import CalendarOverflowError

logger = logging.getLogger(__name__)

Point = Union[Instant, Date, LocalDateTime]
Step = Union[TimeDelta, CalendarPeriod, CombinedPeriod]


@contextmanager
def _calendar_domain(operation: str, point: object, step: object) -> Iterator[None]:
    """Перевод ошибок диапазона библиотеки в CalendarOverflowError."""
    try:
        yield
    except CalendarOverflowError:
        raise
    except (ValueError, OverflowError) as e:
        logger.warning("Calendar overflow in %s: %r + %r (%s)", operation, point, step, e)
        raise CalendarOverflowError(operation, point, step) from e


# =============================================================================
# INSTANT
# =============================================================================


def plus_instant_duration(instant: Instant, duration: TimeDelta) -> Instant:
    """
    Instant + прошедшее время.

    Raises:
        CalendarOverflowError: Если результат вне диапазона Instant
    """
    with _calendar_domain("plus_instant_duration", instant, duration):
        return instant + duration


def minus_instant_duration(instant: Instant, duration: TimeDelta) -> Instant:
    """Instant - прошедшее время."""
    with _calendar_domain("minus_instant_duration", instant, duration):
        return instant - duration


# =============================================================================
# DATE
# =============================================================================


def plus_date_period(date: Date, period: CalendarPeriod) -> Date:
    """
    Date + календарный период.

    Порядок: years+months (день обрезается до последнего дня месяца),
    затем days. Компоненты с разными знаками допустимы.

    Args:
        date: Исходная дата
        period: Календарный период

    Returns:
        Новая дата

    Raises:
        CalendarOverflowError: Если результат вне диапазона Date

    Examples:
        >>> plus_date_period(Date(2024, 1, 31), CalendarPeriod(months=1))
        Date(2024-02-29)
    """
    with _calendar_domain("plus_date_period", date, period):
        result = date
        if period.total_months():
            result = result.add(months=period.total_months())
        if period.days:
            result = result.add(days=period.days)
        return result


def minus_date_period(date: Date, period: CalendarPeriod) -> Date:
    """Date - календарный период (сложение с противоположным периодом)."""
    return plus_date_period(date, -period)


# =============================================================================
# LOCAL DATE-TIME
# =============================================================================


def plus_datetime_duration(
    dt: LocalDateTime, duration: TimeDelta, tz: Optional[TimeZone] = None
) -> LocalDateTime:
    """
    LocalDateTime + прошедшее время через часовой пояс.

    Локальное время переводится в Instant, к нему прибавляется длительность,
    результат переводится обратно в ту же зону.

    Args:
        dt: Локальное время
        duration: Прошедшее время
        tz: Часовой пояс (None = зона по умолчанию)

    Raises:
        CalendarOverflowError: Если результат вне диапазона
    """
    if tz is None:
        tz = TimeZone.current_system_default()
    with _calendar_domain("plus_datetime_duration", dt, duration):
        return tz.to_local(tz.to_instant(dt) + duration)


def minus_datetime_duration(
    dt: LocalDateTime, duration: TimeDelta, tz: Optional[TimeZone] = None
) -> LocalDateTime:
    """LocalDateTime - прошедшее время через часовой пояс."""
    if tz is None:
        tz = TimeZone.current_system_default()
    with _calendar_domain("minus_datetime_duration", dt, duration):
        return tz.to_local(tz.to_instant(dt) - duration)


def plus_datetime_period(dt: LocalDateTime, period: CalendarPeriod) -> LocalDateTime:
    """
    LocalDateTime + календарный период.

    Меняется только дата, время суток (включая наносекунды) копируется.
    Часовой пояс не нужен.
    """
    return dt.replace_date(plus_date_period(dt.date(), period))


def plus_datetime_combined(
    dt: LocalDateTime, period: CombinedPeriod, tz: Optional[TimeZone] = None
) -> LocalDateTime:
    """
    LocalDateTime + комбинированный период.

    Фиксированный порядок:
    1. Календарная часть — к дате, без часового пояса
    2. Суб-дневная часть — как прошедшее время через tz

    Обратный порядок даёт другой результат вблизи DST-переходов и не поддерживается.
    """
    after_date_part = plus_datetime_period(dt, period.date_part())
    with _calendar_domain("plus_datetime_combined", dt, period):
        time_part = period.time_part()
    return plus_datetime_duration(after_date_part, time_part, tz)


# =============================================================================
# DISPATCH
# =============================================================================


def advance(point: Point, step: Step, tz: Optional[TimeZone] = None) -> Point:
    """
    Продвинуть точку на шаг, выбирая адаптер по типам point и step.

    Args:
        point: Instant, Date или LocalDateTime
        step: TimeDelta, CalendarPeriod или CombinedPeriod
        tz: Часовой пояс для LocalDateTime с прошедшим временем

    Raises:
        TypeError: Если пара (точка, шаг) не поддерживается
            или tz передан для Instant/Date
        CalendarOverflowError: Если результат вне диапазона
    """
    if isinstance(point, Instant):
        if tz is not None:
            raise TypeError("Instant arithmetic does not take a timezone")
        if isinstance(step, TimeDelta):
            return plus_instant_duration(point, step)
    elif isinstance(point, Date):
        if tz is not None:
            raise TypeError("Date arithmetic does not take a timezone")
        if isinstance(step, CalendarPeriod):
            return plus_date_period(point, step)
    elif isinstance(point, LocalDateTime):
        if isinstance(step, TimeDelta):
            return plus_datetime_duration(point, step, tz)
        if isinstance(step, CalendarPeriod):
            return plus_datetime_period(point, step)
        if isinstance(step, CombinedPeriod):
            return plus_datetime_combined(point, step, tz)
    raise TypeError(
        f"Unsupported step {type(step).__name__} for point {type(point).__name__}"
    )
