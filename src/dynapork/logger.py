"""Level-filtered logging wrapper used across the client."""

from __future__ import annotations

import logging
from typing import Any, Literal, Protocol

LogLevel = Literal["trace", "debug", "info", "warn", "error"]

LOG_LEVELS: tuple[LogLevel, ...] = ("trace", "debug", "info", "warn", "error")

TRACE_LEVEL = 5
logging.addLevelName(TRACE_LEVEL, "TRACE")

_STDLIB_LEVELS: dict[LogLevel, int] = {
    "trace": TRACE_LEVEL,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


class LoggerProtocol(Protocol):
    def log(self, level: int, msg: str, *args: Any, **kwargs: Any) -> None: ...


class BoundLogger:
    """Wraps a logging.Logger and drops records below the configured level."""

    def __init__(
        self,
        logger: LoggerProtocol | None = None,
        *,
        level: LogLevel = "info",
    ) -> None:
        self._logger = logger or _default_logger()
        self._level = level

    @property
    def level(self) -> LogLevel:
        return self._level

    def trace(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log("trace", msg, *args, **kwargs)

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log("debug", msg, *args, **kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log("info", msg, *args, **kwargs)

    def warn(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log("warn", msg, *args, **kwargs)

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log("error", msg, *args, **kwargs)

    def child(self, name: str) -> "BoundLogger":
        """Create a child logger anchored to the same Python logger."""
        if isinstance(self._logger, logging.Logger):
            base: LoggerProtocol = self._logger.getChild(name)
        else:
            base = self._logger
        return BoundLogger(base, level=self._level)

    def _enabled(self, level: LogLevel) -> bool:
        return LOG_LEVELS.index(level) >= LOG_LEVELS.index(self._level)

    def _log(self, level: LogLevel, msg: str, *args: Any, **kwargs: Any) -> None:
        if self._enabled(level):
            self._logger.log(_STDLIB_LEVELS[level], msg, *args, **kwargs)


def _default_logger() -> logging.Logger:
    logger = logging.getLogger("dynapork")
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(TRACE_LEVEL)
    return logger


def create_logger(*, logger: Any | None = None, level: LogLevel = "info") -> BoundLogger:
    if isinstance(logger, BoundLogger):
        return logger
    return BoundLogger(logger, level=level)


__all__ = ["LOG_LEVELS", "BoundLogger", "LogLevel", "LoggerProtocol", "create_logger"]
