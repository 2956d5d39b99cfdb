"""Engine and client loggers writing ``[HH:MM:SS] NAME: message`` lines."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

CORE_NAME = "ENGINE"
CLIENT_NAME = "APP"

_FORMAT = "[%(asctime)s] %(name)s: %(message)s"
_DATE_FORMAT = "%H:%M:%S"
_RESET = "\033[0m"
_COLORS = {
    TRACE: "\033[37m",
    logging.DEBUG: "\033[36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m\033[1m",
    logging.ERROR: "\033[31m\033[1m",
    logging.CRITICAL: "\033[1m\033[41m",
}

_loggers: dict[str, logging.Logger] = {}


class _ColorFormatter(logging.Formatter):
    """Wraps each line in the colour of its level."""

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        color = _COLORS.get(record.levelno)
        return f"{color}{text}{_RESET}" if color else text


def _make_logger(name: str, stream: TextIO) -> logging.Logger:
    logger = logging.getLogger(f"hazelette.{name}")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    handler = logging.StreamHandler(stream)
    is_tty = getattr(stream, "isatty", None)
    formatter_cls = _ColorFormatter if is_tty is not None and is_tty() else logging.Formatter
    formatter = formatter_cls(_FORMAT, _DATE_FORMAT)
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(TRACE)
    logger.propagate = False
    # Records show the short name, not the dotted logger path.
    handler.addFilter(_rename(name))
    return logger


def _rename(name: str):
    def apply(record: logging.LogRecord) -> bool:
        record.name = name
        return True

    return apply


def init(stream: TextIO | None = None) -> None:
    """Create the engine and client loggers, both at trace level, writing to ``stream``."""
    target = sys.stdout if stream is None else stream
    _loggers[CORE_NAME] = _make_logger(CORE_NAME, target)
    _loggers[CLIENT_NAME] = _make_logger(CLIENT_NAME, target)


def _get(name: str) -> logging.Logger:
    try:
        return _loggers[name]
    except KeyError:
        raise RuntimeError("logging is not initialised; call init() first") from None


def core_logger() -> logging.Logger:
    """The engine's own logger."""
    return _get(CORE_NAME)


def client_logger() -> logging.Logger:
    """The logger for the application built on the engine."""
    return _get(CLIENT_NAME)