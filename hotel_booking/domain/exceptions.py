"""
Доменные исключения.
"""


class DomainException(Exception):
    """Базовое исключение для доменных ошибок."""

    pass


class RoomUnavailableException(DomainException):
    """Исключение: номер запрошенного типа отсутствует в отеле."""

    def __init__(self, room_type: str):
        super().__init__(f"Номер типа '{room_type}' недоступен.")
        self.room_type = room_type
