"""
Точка входа демонстрационного сценария.

Выполняет одно обычное бронирование номера Single, одно VIP-бронирование
номера Double и выводит список номеров.
"""

from datetime import date, timedelta
from typing import Optional

from hotel_booking.application import ports
from hotel_booking.application.registry import HotelRegistry
from hotel_booking.application.strategies import (
    StandardReservationStrategy,
    VIPReservationStrategy,
)
from hotel_booking.bootstrap import bootstrap_app


def run_demo(
    registry: HotelRegistry,
    today: Optional[date] = None,
    logger: Optional[ports.ILogger] = None,
) -> None:
    """Проводит демонстрационные бронирования на переданном реестре."""
    today = today or date.today()

    standard_strategy = StandardReservationStrategy(logger=logger)
    standard_strategy.reserve(registry, "Single", today, today + timedelta(days=2))

    vip_strategy = VIPReservationStrategy(logger=logger)
    vip_strategy.reserve(registry, "Double", today, today + timedelta(days=3))

    registry.print_available_rooms()


def main() -> int:
    app = bootstrap_app()
    run_demo(app["registry"], logger=app["logger"])
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
