"""
Номера отеля и фабрики для их создания.

Новый тип номера добавляется новой фабрикой-наследником RoomFactory,
без таблиц соответствия по имени.
"""

from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict, Field


class Room(BaseModel):
    """Номер отеля (неизменяемый объект-значение)."""

    model_config = ConfigDict(frozen=True)

    room_type: str = Field(..., min_length=1, description="Тип номера")
    price: float = Field(..., ge=0, description="Цена за ночь")


class RoomFactory(ABC):
    """Абстрактная фабрика номеров."""

    @abstractmethod
    def create_room(self) -> Room:
        """Создает новый номер. Не имеет побочных эффектов."""
        raise NotImplementedError


class SingleRoomFactory(RoomFactory):
    def create_room(self) -> Room:
        return Room(room_type="Single", price=100)


class DoubleRoomFactory(RoomFactory):
    def create_room(self) -> Room:
        return Room(room_type="Double", price=200)
