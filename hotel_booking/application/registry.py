"""
Реестр отеля: список номеров и подписчиков на бронирования.

Реестр создается явно точкой входа и передается всем, кому он нужен.
Для совместимости с исходным сценарием есть общий экземпляр,
доступный через HotelRegistry.instance().
"""

from __future__ import annotations

import threading
from typing import ClassVar, List, Optional

from hotel_booking.application import ports
from hotel_booking.application.messages import room_line
from hotel_booking.config import get_settings
from hotel_booking.domain.reservations import Reservation
from hotel_booking.domain.rooms import Room, RoomFactory
from hotel_booking.infrastructure.console import ConsoleLogger


class HotelRegistry:
    """Реестр номеров и наблюдателей отеля."""

    _instance: ClassVar[Optional[HotelRegistry]] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(
        self, name: Optional[str] = None, logger: Optional[ports.ILogger] = None
    ):
        self.name = name or get_settings().hotel_name
        self._rooms: List[Room] = []
        self._observers: List[ports.ReservationObserver] = []
        self._logger = logger or ConsoleLogger(level=get_settings().log_level)

    @classmethod
    def instance(cls) -> HotelRegistry:
        """Возвращает общий экземпляр, создавая его при первом обращении."""
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls(name=get_settings().hotel_name)
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Сбрасывает общий экземпляр (используется в тестах)."""
        with cls._instance_lock:
            cls._instance = None

    @property
    def observers(self) -> List[ports.ReservationObserver]:
        return list(self._observers)

    def add_room(self, factory: RoomFactory) -> Room:
        """Создает номер фабрикой и добавляет его в конец списка.

        Дубликаты не проверяются.
        """
        room = factory.create_room()
        self._rooms.append(room)
        self._logger.debug(
            f"Room added to {self.name}", room_type=room.room_type, price=room.price
        )
        return room

    def subscribe(self, observer: ports.ReservationObserver) -> None:
        """Подписывает наблюдателя. Повторная подписка даст повторные уведомления."""
        self._observers.append(observer)
        self._logger.debug(
            f"Observer subscribed to {self.name}", observer=type(observer).__name__
        )

    def notify(self, reservation: Reservation) -> None:
        """Уведомляет наблюдателей в порядке подписки.

        Исключение из обработчика прерывает рассылку и уходит вызывающему.
        """
        self._logger.debug(
            "Notifying observers about reservation",
            room_type=reservation.room_type,
            observers=len(self._observers),
        )
        for observer in self._observers:
            observer.on_reservation(reservation)

    def find_room_by_type(self, room_type: str) -> Optional[Room]:
        """Возвращает первый номер указанного типа или None."""
        for room in self._rooms:
            if room.room_type == room_type:
                return room
        return None

    def list_rooms(self) -> List[Room]:
        return list(self._rooms)

    def room_listing(self) -> List[str]:
        return [room_line(room) for room in self._rooms]

    def print_available_rooms(self) -> None:
        for line in self.room_listing():
            print(line)
