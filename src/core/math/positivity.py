"""
Positivity Validators — проверка, что шаг продвигает время вперёд

Используются при конструировании прогрессий, чтобы отклонить нулевые,
отрицательные и вырожденные шаги до начала итерации.

Правила:
- TimeDelta: положительна iff строго больше нуля
- CalendarPeriod: нулевой период не положителен; иначе пробное сложение
  с опорной датой 1970-01-01 должно дать строго более позднюю дату
- CombinedPeriod: нулевой период не положителен; иначе пробное сложение
  с опорным 1970-01-01T00:00 (через часовой пояс) должно дать более позднее время

Покомпонентная проверка знаков невозможна: у периода (+1 месяц, -40 дней)
итоговый знак зависит от календаря. Любая ошибка пробного сложения = "не положителен".
"""

from typing import Final, Optional

from whenever import Date, LocalDateTime, TimeDelta

from src.core.domain.periods import CalendarPeriod, CombinedPeriod
from src.core.domain.timezone import TimeZone
from src.core.errors import ProgressionError
from src.core.math.arithmetic import Step, plus_date_period, plus_datetime_combined

# =============================================================================
# ОПОРНЫЕ ТОЧКИ
# =============================================================================

EPOCH_REFERENCE_DATE: Final[Date] = Date(1970, 1, 1)

EPOCH_REFERENCE_DATETIME: Final[LocalDateTime] = LocalDateTime(1970, 1, 1, 0, 0, 0)


def is_positive_duration(duration: TimeDelta) -> bool:
    """Длительность строго больше нуля."""
    return duration > TimeDelta.ZERO


def is_positive_period(period: CalendarPeriod) -> bool:
    """
    Календарный период продвигает дату вперёд.

    Args:
        period: Календарный период (компоненты любых знаков)

    Returns:
        True если EPOCH_REFERENCE_DATE + period > EPOCH_REFERENCE_DATE.
        False для нулевого периода и при переполнении.
    """
    if period.is_zero():
        return False
    try:
        return plus_date_period(EPOCH_REFERENCE_DATE, period) > EPOCH_REFERENCE_DATE
    except ProgressionError:
        return False


def is_positive_combined(period: CombinedPeriod, tz: Optional[TimeZone] = None) -> bool:
    """
    Комбинированный период продвигает локальное время вперёд в зоне tz.

    Один и тот же период может быть положительным в одной зоне
    и неположительным в другой (DST на границе), это допустимо.

    Args:
        period: Комбинированный период
        tz: Часовой пояс (None = зона по умолчанию)

    Returns:
        True если EPOCH_REFERENCE_DATETIME + period > EPOCH_REFERENCE_DATETIME.
    """
    if period.is_zero():
        return False
    try:
        result = plus_datetime_combined(EPOCH_REFERENCE_DATETIME, period, tz)
    except (ProgressionError, ValueError, OverflowError):
        return False
    return result > EPOCH_REFERENCE_DATETIME


def is_positive(step: Step, tz: Optional[TimeZone] = None) -> bool:
    """
    Диспетчер проверки положительности по типу шага.

    Raises:
        TypeError: Если тип шага не поддерживается
    """
    if isinstance(step, TimeDelta):
        return is_positive_duration(step)
    if isinstance(step, CalendarPeriod):
        return is_positive_period(step)
    if isinstance(step, CombinedPeriod):
        return is_positive_combined(step, tz)
    raise TypeError(f"Unsupported step type: {type(step).__name__}")
