"""
Ranges — Замкнутые диапазоны над тремя типами точек

- InstantRange: Instant..Instant, шаг по умолчанию — 24 часа прошедшего времени
- DateRange: Date..Date, шаг по умолчанию — CalendarPeriod(days=1)
- DateTimeRange: LocalDateTime..LocalDateTime, шаг по умолчанию — CalendarPeriod(days=1)

Диапазон пуст iff start > end_inclusive. Конструирование ничего не проверяет:
перевёрнутый диапазон — это легальный пустой диапазон, а не ошибка.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Iterator, Union

from whenever import Date, Instant, LocalDateTime

from src.core.domain.periods import CalendarPeriod, elapsed_days
from src.core.domain.timezone import TimeZone
from src.core.math.arithmetic import Point, Step

if TYPE_CHECKING:
    from src.ranges.progressions import Progression


@dataclass(frozen=True)
class _ClosedRange:
    """Общая часть трёх диапазонов: границы, принадлежность, пустота."""

    start: Any
    end_inclusive: Any

    def contains(self, value: Point) -> bool:
        """start <= value <= end_inclusive"""
        return self.start <= value and value <= self.end_inclusive

    def __contains__(self, value: object) -> bool:
        return self.contains(value)  # type: ignore[arg-type]

    def is_empty(self) -> bool:
        """Диапазон пуст, если start > end_inclusive."""
        return self.start > self.end_inclusive

    def default_step(self) -> Step:
        raise NotImplementedError

    def step(self, step: Step, tz: Union[TimeZone, str, None] = None) -> "Progression":
        """Прогрессия с заданным шагом (см. src.ranges.operators.with_step)."""
        from src.ranges.operators import with_step

        return with_step(self, step, tz)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.step(self.default_step()))


@dataclass(frozen=True)
class InstantRange(_ClosedRange):
    """Диапазон абсолютных моментов времени."""

    start: Instant
    end_inclusive: Instant

    def default_step(self) -> Step:
        return elapsed_days(1)


@dataclass(frozen=True)
class DateRange(_ClosedRange):
    """Диапазон календарных дат."""

    start: Date
    end_inclusive: Date

    def default_step(self) -> Step:
        return CalendarPeriod(days=1)


@dataclass(frozen=True)
class DateTimeRange(_ClosedRange):
    """Диапазон локальных дат-времён (без часового пояса)."""

    start: LocalDateTime
    end_inclusive: LocalDateTime

    def default_step(self) -> Step:
        return CalendarPeriod(days=1)


# =============================================================================
# КОНСТРУКТОРЫ
# =============================================================================


def instant_range(start: Instant, end_inclusive: Instant) -> InstantRange:
    return InstantRange(start, end_inclusive)


def date_range(start: Date, end_inclusive: Date) -> DateRange:
    return DateRange(start, end_inclusive)


def datetime_range(start: LocalDateTime, end_inclusive: LocalDateTime) -> DateTimeRange:
    return DateTimeRange(start, end_inclusive)


def make_range(
    start: Point, end_inclusive: Point
) -> Union[InstantRange, DateRange, DateTimeRange]:
    """
    Диапазон по типу границ.

    Raises:
        TypeError: Если границы разных или неподдерживаемых типов
    """
    if type(start) is not type(end_inclusive):
        raise TypeError(
            f"Range bounds must have the same type: "
            f"{type(start).__name__} vs {type(end_inclusive).__name__}"
        )
    if isinstance(start, Instant):
        return InstantRange(start, end_inclusive)  # type: ignore[arg-type]
    if isinstance(start, Date):
        return DateRange(start, end_inclusive)  # type: ignore[arg-type]
    if isinstance(start, LocalDateTime):
        return DateTimeRange(start, end_inclusive)  # type: ignore[arg-type]
    raise TypeError(f"Unsupported range bound type: {type(start).__name__}")


AnyRange = Union[InstantRange, DateRange, DateTimeRange]
