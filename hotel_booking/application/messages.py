"""
Тексты сообщений, которые видит пользователь.
"""

from hotel_booking.domain.reservations import Reservation
from hotel_booking.domain.rooms import Room


def format_price(price: float) -> str:
    """Цена без дробной части, если она целая (100, а не 100.0)."""
    if float(price).is_integer():
        return str(int(price))
    return str(price)


def reservation_period(reservation: Reservation) -> str:
    return f"from {reservation.start_date} to {reservation.end_date}"


def room_line(room: Room) -> str:
    """Строка для вывода в списке номеров."""
    return f"Room: {room.room_type}, Price: {format_price(room.price)}"
