"""
Domain models and value objects.

Contains step types (CalendarPeriod, CombinedPeriod, ElapsedDuration)
and the TimeZone capability.
"""

from src.core.domain.periods import (
    HOURS_PER_DAY,
    CalendarPeriod,
    CombinedPeriod,
    ElapsedDuration,
    elapsed_days,
)
from src.core.domain.timezone import (
    DEFAULT_DISAMBIGUATE,
    DISAMBIGUATE_POLICIES,
    SYSTEM_ZONE_NAME,
    TimeZone,
)

__all__ = [
    # Periods module
    "HOURS_PER_DAY",
    "CalendarPeriod",
    "CombinedPeriod",
    "ElapsedDuration",
    "elapsed_days",
    # TimeZone
    "DEFAULT_DISAMBIGUATE",
    "DISAMBIGUATE_POLICIES",
    "SYSTEM_ZONE_NAME",
    "TimeZone",
]
