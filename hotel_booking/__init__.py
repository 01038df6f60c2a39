"""
Демонстрационная система бронирования номеров в отеле.

Показывает четыре классических паттерна: общий реестр отеля,
фабрики номеров, уведомление наблюдателей о бронировании
и взаимозаменяемые стратегии бронирования.
"""

__version__ = "0.1.0"
