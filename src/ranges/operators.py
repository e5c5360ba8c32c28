"""
Step Operators — диапазон + шаг → прогрессия нужного варианта

with_step(range, step, tz=None):
- выбирает вариант прогрессии по типам диапазона и шага
- положительность шага проверяется при конструировании прогрессии
- принадлежность точек диапазону не вычисляется

Часовой пояс принимается только там, где он используется:
DateTimeRange с TimeDelta или CombinedPeriod.
"""

from typing import Union

from whenever import TimeDelta

from src.core.domain.periods import CalendarPeriod, CombinedPeriod
from src.core.domain.timezone import TimeZone
from src.core.math.arithmetic import Step
from src.ranges.progressions import (
    DateProgression,
    DateTimeCombinedProgression,
    DateTimeDurationProgression,
    DateTimePeriodProgression,
    InstantProgression,
    Progression,
)
from src.ranges.ranges import AnyRange, DateRange, DateTimeRange, InstantRange


def _reject_timezone(range_: AnyRange, step: Step) -> None:
    raise TypeError(
        f"{type(range_).__name__} stepped by {type(step).__name__} does not take a timezone"
    )


def with_step(
    range_: AnyRange, step: Step, tz: Union[TimeZone, str, None] = None
) -> Progression:
    """
    Прогрессия по диапазону с заданным шагом.

    Args:
        range_: InstantRange, DateRange или DateTimeRange
        step: TimeDelta, CalendarPeriod или CombinedPeriod
        tz: Часовой пояс (TimeZone или IANA-строка) для DateTimeRange
            с TimeDelta/CombinedPeriod. None → зона по умолчанию.

    Returns:
        Прогрессия соответствующего варианта

    Raises:
        InvalidStepError: Если шаг нулевой или не продвигает время вперёд
        InvalidTimeZoneError: Если строка tz не найдена в базе tz
        TypeError: Если пара (диапазон, шаг) не поддерживается
            или tz передан там, где он не используется

    Examples:
        >>> with_step(DateRange(Date(2024, 2, 26), Date(2024, 3, 5)), CalendarPeriod(days=7)).to_list()
        [Date(2024-02-26), Date(2024-03-04)]
    """
    if isinstance(range_, InstantRange):
        if isinstance(step, TimeDelta):
            if tz is not None:
                _reject_timezone(range_, step)
            return InstantProgression(range_.start, range_.end_inclusive, step)
    elif isinstance(range_, DateRange):
        if isinstance(step, CalendarPeriod):
            if tz is not None:
                _reject_timezone(range_, step)
            return DateProgression(range_.start, range_.end_inclusive, step)
    elif isinstance(range_, DateTimeRange):
        if isinstance(step, TimeDelta):
            return DateTimeDurationProgression(
                range_.start, range_.end_inclusive, step, TimeZone.coerce(tz)
            )
        if isinstance(step, CalendarPeriod):
            if tz is not None:
                _reject_timezone(range_, step)
            return DateTimePeriodProgression(range_.start, range_.end_inclusive, step)
        if isinstance(step, CombinedPeriod):
            return DateTimeCombinedProgression(
                range_.start, range_.end_inclusive, step, TimeZone.coerce(tz)
            )
    raise TypeError(
        f"Unsupported step {type(step).__name__} for {type(range_).__name__}"
    )
