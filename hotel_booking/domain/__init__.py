"""
Доменный слой: номера, фабрики номеров, бронирования и исключения.
"""

from .exceptions import DomainException, RoomUnavailableException
from .reservations import Reservation
from .rooms import DoubleRoomFactory, Room, RoomFactory, SingleRoomFactory

__all__ = [
    # Основные классы
    "Room",
    "Reservation",
    # Фабрики
    "RoomFactory",
    "SingleRoomFactory",
    "DoubleRoomFactory",
    # Исключения
    "DomainException",
    "RoomUnavailableException",
]
