"""
Core math modules

Арифметика точек во времени и проверки положительности шагов.
"""

# Arithmetic Adapters
from src.core.math.arithmetic import (
    Point,
    Step,
    advance,
    minus_date_period,
    minus_datetime_duration,
    minus_instant_duration,
    plus_date_period,
    plus_datetime_combined,
    plus_datetime_duration,
    plus_datetime_period,
    plus_instant_duration,
)

# Positivity Validators
from src.core.math.positivity import (
    EPOCH_REFERENCE_DATE,
    EPOCH_REFERENCE_DATETIME,
    is_positive,
    is_positive_combined,
    is_positive_duration,
    is_positive_period,
)

__all__ = [
    # Arithmetic — Types
    "Point",
    "Step",
    # Arithmetic — Functions
    "advance",
    "minus_date_period",
    "minus_datetime_duration",
    "minus_instant_duration",
    "plus_date_period",
    "plus_datetime_combined",
    "plus_datetime_duration",
    "plus_datetime_period",
    "plus_instant_duration",
    # Positivity — Constants
    "EPOCH_REFERENCE_DATE",
    "EPOCH_REFERENCE_DATETIME",
    # Positivity — Functions
    "is_positive",
    "is_positive_combined",
    "is_positive_duration",
    "is_positive_period",
]
