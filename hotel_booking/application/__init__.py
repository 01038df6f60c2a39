"""
Прикладной слой: реестр отеля, стратегии бронирования и порты.
"""

from . import ports
from .registry import HotelRegistry
from .strategies import (
    ReservationResult,
    ReservationStrategy,
    StandardReservationStrategy,
    VIPReservationStrategy,
)

__all__ = [
    "ports",
    "HotelRegistry",
    "ReservationResult",
    "ReservationStrategy",
    "StandardReservationStrategy",
    "VIPReservationStrategy",
]
