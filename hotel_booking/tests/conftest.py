"""
Общие фикстуры для тестов.
"""

from datetime import date
from typing import List
from unittest.mock import MagicMock

import pytest

from hotel_booking.application.registry import HotelRegistry
from hotel_booking.config import get_settings
from hotel_booking.domain.rooms import DoubleRoomFactory, SingleRoomFactory


@pytest.fixture(autouse=True)
def clean_global_state():
    """Сбрасывает общий экземпляр реестра и кэш настроек между тестами."""
    HotelRegistry.reset_instance()
    get_settings.cache_clear()
    yield
    HotelRegistry.reset_instance()
    get_settings.cache_clear()


@pytest.fixture
def registry() -> HotelRegistry:
    """Пустой реестр, независимый от общего экземпляра."""
    return HotelRegistry(name="Test Inn")


@pytest.fixture
def stocked_registry(registry: HotelRegistry) -> HotelRegistry:
    """Реестр с одним номером Single и одним Double."""
    registry.add_room(SingleRoomFactory())
    registry.add_room(DoubleRoomFactory())
    return registry


@pytest.fixture
def observer() -> MagicMock:
    return MagicMock()


@pytest.fixture
def start() -> date:
    return date(2024, 1, 1)


@pytest.fixture
def end() -> date:
    return date(2024, 1, 3)


@pytest.fixture
def output_lines() -> List[str]:
    """Список, в который стратегии и наблюдатели пишут сообщения."""
    return []
