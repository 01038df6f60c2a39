from typing import Callable

from hotel_booking.application.messages import reservation_period
from hotel_booking.domain.reservations import Reservation


class CleaningService:
    """Служба уборки, получающая уведомления о новых бронированиях."""

    def __init__(self, output: Callable[[str], None] = print):
        self._output = output

    def on_reservation(self, reservation: Reservation) -> None:
        self._output(
            "Cleaning Service notified about the reservation for room: "
            f"{reservation.room_type} {reservation_period(reservation)}."
        )
