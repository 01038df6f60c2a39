"""
Интерфейсы (порты) прикладного слоя.
"""

from __future__ import annotations

from typing import Any, Protocol

from hotel_booking.domain.reservations import Reservation


class ILogger(Protocol):
    """Интерфейс для логгера."""

    def info(self, message: str, **kwargs: Any) -> None: ...
    def error(self, message: str, **kwargs: Any) -> None: ...
    def warning(self, message: str, **kwargs: Any) -> None: ...
    def debug(self, message: str, **kwargs: Any) -> None: ...


class ReservationObserver(Protocol):
    """Подписчик, которого реестр синхронно уведомляет о каждом бронировании."""

    def on_reservation(self, reservation: Reservation) -> None: ...
