"""
Инфраструктурный слой: вывод в консоль и внешние сервисы-наблюдатели.
"""

from .cleaning import CleaningService
from .console import ConsoleLogger

__all__ = [
    "CleaningService",
    "ConsoleLogger",
]
