"""
Ranges and progressions over Instant, Date and LocalDateTime.

Диапазоны (InstantRange, DateRange, DateTimeRange), прогрессии
(диапазон + проверенный шаг) и оператор with_step.
"""

from src.ranges.operators import with_step
from src.ranges.progressions import (
    DateProgression,
    DateTimeCombinedProgression,
    DateTimeDurationProgression,
    DateTimePeriodProgression,
    InstantProgression,
    Progression,
    ProgressionIterator,
)
from src.ranges.ranges import (
    AnyRange,
    DateRange,
    DateTimeRange,
    InstantRange,
    date_range,
    datetime_range,
    instant_range,
    make_range,
)

__all__ = [
    # Ranges
    "AnyRange",
    "DateRange",
    "DateTimeRange",
    "InstantRange",
    "date_range",
    "datetime_range",
    "instant_range",
    "make_range",
    # Progressions
    "DateProgression",
    "DateTimeCombinedProgression",
    "DateTimeDurationProgression",
    "DateTimePeriodProgression",
    "InstantProgression",
    "Progression",
    "ProgressionIterator",
    # Operators
    "with_step",
]
