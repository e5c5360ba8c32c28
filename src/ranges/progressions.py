"""
Progressions — диапазон + шаг → упорядоченная последовательность точек

Варианты (точка × шаг):
- InstantProgression: Instant × TimeDelta
- DateProgression: Date × CalendarPeriod
- DateTimeDurationProgression: LocalDateTime × TimeDelta (+ TimeZone)
- DateTimePeriodProgression: LocalDateTime × CalendarPeriod
- DateTimeCombinedProgression: LocalDateTime × CombinedPeriod (+ TimeZone)

Все варианты:
- проверяют шаг при конструировании (InvalidStepError, объект не создаётся)
- неизменяемы и могут итерироваться повторно
- используют один ProgressionIterator, параметризованный функцией advance

Курсор живёт только внутри ProgressionIterator. Итератор нельзя делить
между потоками: каждый потребитель получает свой через iter(progression).
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar, Generic, List, Optional, TypeVar

from whenever import Date, Instant, LocalDateTime, TimeDelta

from src.core.domain.periods import CalendarPeriod, CombinedPeriod
from src.core.domain.timezone import TimeZone
from src.core.errors import ExhaustedSequenceError, InvalidStepError
from src.core.math.arithmetic import (
    plus_date_period,
    plus_datetime_combined,
    plus_datetime_duration,
    plus_datetime_period,
    plus_instant_duration,
)
from src.core.math.positivity import (
    is_positive_combined,
    is_positive_duration,
    is_positive_period,
)
from src.ranges.ranges import DateRange, DateTimeRange, InstantRange, _ClosedRange

logger = logging.getLogger(__name__)

T = TypeVar("T", Instant, Date, LocalDateTime)


# =============================================================================
# ITERATOR
# =============================================================================


class ProgressionIterator(Generic[T]):
    """
    Курсор по прогрессии.

    has_next(): cursor <= end_inclusive
    __next__(): запомнить cursor, продвинуть его через advance, вернуть запомненное

    Ошибка advance (CalendarOverflowError) прерывает только этот итератор,
    прогрессия остаётся валидной.
    """

    def __init__(self, start: T, end_inclusive: T, advance: Callable[[T], T]) -> None:
        self._current = start
        self._end_inclusive = end_inclusive
        self._advance = advance

    def __iter__(self) -> "ProgressionIterator[T]":
        return self

    def has_next(self) -> bool:
        return self._current <= self._end_inclusive

    def __next__(self) -> T:
        if not self.has_next():
            raise ExhaustedSequenceError(self._end_inclusive)
        value = self._current
        self._current = self._advance(value)
        return value


# =============================================================================
# BASE
# =============================================================================


@dataclass(frozen=True)
class Progression:
    """
    Общая часть всех прогрессий.

    Подклассы задают тип диапазона, проверку шага и функцию продвижения.
    """

    start: Any
    end_inclusive: Any
    step: Any

    invalid_step_reason: ClassVar[str] = "Step must represent a positive time progression."
    range_type: ClassVar[type] = _ClosedRange

    def __post_init__(self) -> None:
        if not self._is_positive_step():
            logger.warning(
                "Rejected step for %s: %r (%s)",
                type(self).__name__,
                self.step,
                self.invalid_step_reason,
            )
            raise InvalidStepError(self.step, self.invalid_step_reason)
        logger.debug(
            "Created %s: %r..%r step %r", type(self).__name__, self.start, self.end_inclusive, self.step
        )

    def _is_positive_step(self) -> bool:
        raise NotImplementedError

    def _advance(self, point: Any) -> Any:
        raise NotImplementedError

    @property
    def range(self) -> _ClosedRange:
        """Исходный диапазон прогрессии."""
        return self.range_type(self.start, self.end_inclusive)

    def is_empty(self) -> bool:
        return self.start > self.end_inclusive

    def iterator(self) -> ProgressionIterator[Any]:
        """Новый независимый курсор от start."""
        return ProgressionIterator(self.start, self.end_inclusive, self._advance)

    def __iter__(self) -> ProgressionIterator[Any]:
        return self.iterator()

    def to_list(self) -> List[Any]:
        return list(self)


# =============================================================================
# INSTANT
# =============================================================================


@dataclass(frozen=True)
class InstantProgression(Progression):
    """Instant × прошедшее время."""

    start: Instant
    end_inclusive: Instant
    step: TimeDelta

    invalid_step_reason: ClassVar[str] = "Step duration must be positive and non-zero."
    range_type: ClassVar[type] = InstantRange

    def _is_positive_step(self) -> bool:
        return is_positive_duration(self.step)

    def _advance(self, point: Instant) -> Instant:
        return plus_instant_duration(point, self.step)


# =============================================================================
# DATE
# =============================================================================


@dataclass(frozen=True)
class DateProgression(Progression):
    """Date × календарный период."""

    start: Date
    end_inclusive: Date
    step: CalendarPeriod

    range_type: ClassVar[type] = DateRange

    def _is_positive_step(self) -> bool:
        return is_positive_period(self.step)

    def _advance(self, point: Date) -> Date:
        return plus_date_period(point, self.step)


# =============================================================================
# LOCAL DATE-TIME
# =============================================================================


@dataclass(frozen=True)
class DateTimePeriodProgression(Progression):
    """LocalDateTime × календарный период (меняется только дата)."""

    start: LocalDateTime
    end_inclusive: LocalDateTime
    step: CalendarPeriod

    range_type: ClassVar[type] = DateTimeRange

    def _is_positive_step(self) -> bool:
        return is_positive_period(self.step)

    def _advance(self, point: LocalDateTime) -> LocalDateTime:
        return plus_datetime_period(point, self.step)


@dataclass(frozen=True)
class _ZonedDateTimeProgression(Progression):
    """
    LocalDateTime-прогрессия, которой нужен часовой пояс.

    tz фиксируется при конструировании (None → зона по умолчанию)
    и не меняется за время жизни прогрессии.
    """

    start: LocalDateTime
    end_inclusive: LocalDateTime
    step: Any
    tz: Optional[TimeZone] = field(default=None)

    range_type: ClassVar[type] = DateTimeRange

    def __post_init__(self) -> None:
        if self.tz is None:
            object.__setattr__(self, "tz", TimeZone.current_system_default())
        super().__post_init__()


@dataclass(frozen=True)
class DateTimeDurationProgression(_ZonedDateTimeProgression):
    """LocalDateTime × прошедшее время (через часовой пояс)."""

    step: TimeDelta

    invalid_step_reason: ClassVar[str] = "Step duration must be positive and non-zero."

    def _is_positive_step(self) -> bool:
        return is_positive_duration(self.step)

    def _advance(self, point: LocalDateTime) -> LocalDateTime:
        return plus_datetime_duration(point, self.step, self.tz)


@dataclass(frozen=True)
class DateTimeCombinedProgression(_ZonedDateTimeProgression):
    """LocalDateTime × комбинированный период (дата, затем время через часовой пояс)."""

    step: CombinedPeriod

    invalid_step_reason: ClassVar[str] = (
        "Step CombinedPeriod must represent a positive time progression."
    )

    def _is_positive_step(self) -> bool:
        return is_positive_combined(self.step, self.tz)

    def _advance(self, point: LocalDateTime) -> LocalDateTime:
        return plus_datetime_combined(point, self.step, self.tz)
