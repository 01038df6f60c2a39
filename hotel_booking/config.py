"""
Настройки приложения.

Значения читаются из переменных окружения с префиксом HOTEL_,
например HOTEL_HOTEL_NAME или HOTEL_LOG_LEVEL.
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class HotelSettings(BaseSettings):
    """Настройки отеля."""

    model_config = SettingsConfigDict(env_prefix="HOTEL_")

    hotel_name: str = "Luxury Inn"
    # Диагностические сообщения ниже этого уровня не выводятся
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def log_level_is_known(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Неизвестный уровень логирования: {v}")
        return level


@lru_cache
def get_settings() -> HotelSettings:
    """Возвращает закэшированный экземпляр настроек."""
    return HotelSettings()
