"""
TimeZone — часовой пояс для перевода LocalDateTime ↔ Instant

Обёртка над базой tz (через whenever/zoneinfo). Пакет не реализует
базу часовых поясов сам, а только выбирает зону и политику разрешения
неоднозначностей.

Политики DST (disambiguate):
- "later" (по умолчанию): gap → сдвиг вперёд на длину разрыва,
  overlap → более позднее смещение
- "compatible": gap → сдвиг вперёд, overlap → более раннее смещение
- "earlier": всегда более раннее смещение

Инвариант: при "later" шаг прошедшего времени строго увеличивает и момент
Instant, и локальное время, в том числе через осеннее перекрытие.
При "compatible"/"earlier" шаг короче перекрытия может не выйти
из повторяющегося часа.
"""

import logging
from dataclasses import dataclass
from typing import Final, Optional, Tuple, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from whenever import Instant, LocalDateTime

from src.core.config import get_settings
from src.core.errors import InvalidTimeZoneError

logger = logging.getLogger(__name__)

DEFAULT_DISAMBIGUATE: Final[str] = "later"

DISAMBIGUATE_POLICIES: Final[Tuple[str, ...]] = ("later", "compatible", "earlier")

SYSTEM_ZONE_NAME: Final[str] = "SYSTEM"


@dataclass(frozen=True)
class TimeZone:
    """
    Часовой пояс.

    key=None означает системный часовой пояс процесса.
    """

    key: Optional[str] = None
    disambiguate: str = DEFAULT_DISAMBIGUATE

    def __post_init__(self) -> None:
        if self.disambiguate not in DISAMBIGUATE_POLICIES:
            raise ValueError(
                f"disambiguate must be one of {DISAMBIGUATE_POLICIES}, got {self.disambiguate!r}"
            )

    @classmethod
    def of(cls, key: str, disambiguate: str = DEFAULT_DISAMBIGUATE) -> "TimeZone":
        """
        Зона по IANA-идентификатору (например, 'Europe/Berlin').

        Raises:
            InvalidTimeZoneError: Если идентификатор не найден в базе tz
        """
        try:
            ZoneInfo(key)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise InvalidTimeZoneError(key) from e
        return cls(key=key, disambiguate=disambiguate)

    @classmethod
    def system(cls, disambiguate: str = DEFAULT_DISAMBIGUATE) -> "TimeZone":
        """Системный часовой пояс процесса."""
        return cls(key=None, disambiguate=disambiguate)

    @classmethod
    def current_system_default(cls) -> "TimeZone":
        """
        Часовой пояс по умолчанию.

        STEPRANGE_DEFAULT_TIMEZONE, если задан, иначе системная зона.
        """
        key = get_settings().default_timezone
        logger.debug("Default timezone: %s", key or SYSTEM_ZONE_NAME)
        if key:
            return cls.of(key)
        return cls.system()

    @classmethod
    def coerce(cls, value: Union["TimeZone", str, None]) -> "TimeZone":
        """TimeZone, строка-идентификатор или None (зона по умолчанию)."""
        if value is None:
            return cls.current_system_default()
        if isinstance(value, TimeZone):
            return value
        return cls.of(value)

    @property
    def is_system(self) -> bool:
        return self.key is None

    def to_instant(self, local: LocalDateTime) -> Instant:
        """Локальное время → абсолютный момент (gap/overlap по политике disambiguate)."""
        if self.key is None:
            return local.assume_system_tz(disambiguate=self.disambiguate).instant()
        return local.assume_tz(self.key, disambiguate=self.disambiguate).instant()

    def to_local(self, instant: Instant) -> LocalDateTime:
        """Абсолютный момент → локальное время в этой зоне."""
        if self.key is None:
            return instant.to_system_tz().local()
        return instant.to_tz(self.key).local()

    def __str__(self) -> str:
        return self.key if self.key is not None else SYSTEM_ZONE_NAME
