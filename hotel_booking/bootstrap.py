from typing import Any, Dict, Optional

from hotel_booking.application.registry import HotelRegistry
from hotel_booking.config import HotelSettings, get_settings
from hotel_booking.domain.rooms import DoubleRoomFactory, SingleRoomFactory
from hotel_booking.infrastructure.cleaning import CleaningService
from hotel_booking.infrastructure.console import ConsoleLogger


def bootstrap_app(settings: Optional[HotelSettings] = None) -> Dict[str, Any]:
    """Создает и настраивает все компоненты приложения."""
    settings = settings or get_settings()
    logger = ConsoleLogger(level=settings.log_level)

    # 1. Реестр отеля, которым владеет точка входа
    registry = HotelRegistry(name=settings.hotel_name, logger=logger)

    # 2. Номера создаются фабриками
    registry.add_room(SingleRoomFactory())
    registry.add_room(DoubleRoomFactory())

    # 3. Подписываем службу уборки на бронирования
    cleaning_service = CleaningService()
    registry.subscribe(cleaning_service)

    return {
        "registry": registry,
        "cleaning_service": cleaning_service,
        "logger": logger,
    }
