from datetime import date

from pydantic import BaseModel, ConfigDict

from hotel_booking.domain.rooms import Room


class Reservation(BaseModel):
    """Бронирование номера на период.

    Создается стратегией, передается наблюдателям и нигде не сохраняется.
    Пересечения периодов и порядок дат не проверяются.
    """

    model_config = ConfigDict(frozen=True)

    hotel_name: str
    room: Room
    start_date: date
    end_date: date

    @property
    def room_type(self) -> str:
        return self.room.room_type
