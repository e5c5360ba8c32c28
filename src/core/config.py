"""
Configuration — настройки пакета из переменных окружения

Все параметры читаются с префиксом STEPRANGE_:
- STEPRANGE_DEFAULT_TIMEZONE: часовой пояс по умолчанию для прогрессий
  по LocalDateTime (если не задан — системный часовой пояс процесса)
- STEPRANGE_LOG_LEVEL: уровень логирования для configure_logging()
"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class StepRangeSettings(BaseSettings):
    """Настройки пакета, загружаемые из окружения.

    Attributes:
        default_timezone: IANA-идентификатор зоны по умолчанию (None = системная зона).
        log_level: Уровень логирования (DEBUG, INFO, WARNING, ERROR).
    """

    model_config = SettingsConfigDict(env_prefix="STEPRANGE_", extra="ignore")

    default_timezone: Optional[str] = None
    log_level: str = "WARNING"


@lru_cache(maxsize=1)
def get_settings() -> StepRangeSettings:
    """Закэшированный экземпляр настроек."""
    return StepRangeSettings()


def reset_settings() -> None:
    """Сбросить кэш настроек (перечитать окружение при следующем обращении)."""
    get_settings.cache_clear()
