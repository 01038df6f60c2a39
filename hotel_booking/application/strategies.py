"""
Стратегии бронирования.

Обе стратегии выполняют один и тот же сценарий (поиск номера,
уведомление наблюдателей, сообщение о результате) и различаются
только текстом сообщений.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

from hotel_booking.application import ports
from hotel_booking.application.messages import reservation_period
from hotel_booking.application.registry import HotelRegistry
from hotel_booking.config import get_settings
from hotel_booking.domain.exceptions import RoomUnavailableException
from hotel_booking.domain.reservations import Reservation
from hotel_booking.infrastructure.console import ConsoleLogger

Output = Callable[[str], None]


@dataclass(frozen=True)
class ReservationResult:
    """Результат попытки бронирования."""

    room_type: str
    message: str
    reservation: Optional[Reservation] = None

    @property
    def succeeded(self) -> bool:
        return self.reservation is not None

    def unwrap(self) -> Reservation:
        """Возвращает бронирование или выбрасывает RoomUnavailableException."""
        if self.reservation is None:
            raise RoomUnavailableException(self.room_type)
        return self.reservation


class ReservationStrategy(ABC):
    """Базовая стратегия бронирования."""

    def __init__(self, output: Output = print, logger: Optional[ports.ILogger] = None):
        self._output = output
        self._logger = logger or ConsoleLogger(level=get_settings().log_level)

    def reserve(
        self, registry: HotelRegistry, room_type: str, start: date, end: date
    ) -> ReservationResult:
        """Бронирует первый номер указанного типа.

        Отсутствие номера не является ошибкой: выводится сообщение,
        а результат не содержит бронирования. Наблюдатели уведомляются
        до вывода сообщения об успехе.
        """
        room = registry.find_room_by_type(room_type)
        if room is None:
            message = self.unavailable_message()
            self._logger.info("Room type not found", room_type=room_type)
            self._output(message)
            return ReservationResult(room_type=room_type, message=message)

        reservation = Reservation(
            hotel_name=registry.name, room=room, start_date=start, end_date=end
        )
        registry.notify(reservation)
        message = self.success_message(reservation)
        self._output(message)
        return ReservationResult(
            room_type=room_type, message=message, reservation=reservation
        )

    @abstractmethod
    def success_message(self, reservation: Reservation) -> str:
        raise NotImplementedError

    @abstractmethod
    def unavailable_message(self) -> str:
        raise NotImplementedError


class StandardReservationStrategy(ReservationStrategy):
    """Обычное бронирование."""

    def success_message(self, reservation: Reservation) -> str:
        return (
            f"Standard Reservation made for {reservation.room_type} "
            f"{reservation_period(reservation)}."
        )

    def unavailable_message(self) -> str:
        return "Room not available."


class VIPReservationStrategy(ReservationStrategy):
    """VIP-бронирование. Отличается от обычного только текстом сообщений."""

    def success_message(self, reservation: Reservation) -> str:
        return (
            f"VIP Reservation made for {reservation.room_type} "
            f"with exclusive benefits {reservation_period(reservation)}."
        )

    def unavailable_message(self) -> str:
        return "VIP Room not available."
