import json
import sys
from typing import Any, Dict

_LEVELS: Dict[str, int] = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}


class ConsoleLogger:
    """Простая реализация логгера, выводящая сообщения в консоль.

    INFO и DEBUG пишутся в stdout, WARNING и ERROR в stderr.
    Сообщения ниже уровня level отбрасываются.
    """

    def __init__(self, level: str = "INFO"):
        self._threshold = _LEVELS[level.upper()]

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log("DEBUG", message, kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log("INFO", message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log("WARNING", message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log("ERROR", message, kwargs)

    def _log(self, level: str, message: str, context: Dict[str, Any]) -> None:
        if _LEVELS[level] < self._threshold:
            return
        stream = sys.stdout if _LEVELS[level] < _LEVELS["WARNING"] else sys.stderr
        print(f"[{level}] {message}", file=stream, flush=True)
        if context:
            print(
                "  Context:",
                json.dumps(context, default=str, indent=2),
                file=stream,
                flush=True,
            )
