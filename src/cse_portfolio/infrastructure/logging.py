from __future__ import annotations

import logging
import os
from typing import Final

RESET: Final[str] = "\033[0m"
COLOR_MAP: Final[dict[int, str]] = {
    logging.DEBUG: "\033[36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[41m",
}
LOG_FORMAT: Final[str] = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"


class ColorFormatter(logging.Formatter):
    def __init__(self, fmt: str, datefmt: str | None = None, use_color: bool = True) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if not self.use_color:
            return message
        color = COLOR_MAP.get(record.levelno)
        if not color:
            return message
        return f"{color}{message}{RESET}"


def _resolve_log_level() -> int:
    level = os.getenv("CSE_PORTFOLIO_LOG_LEVEL") or os.getenv("LOG_LEVEL", "WARNING")
    return getattr(logging, level.upper(), logging.WARNING)


def _use_color() -> bool:
    if os.getenv("NO_COLOR"):
        return False
    return os.getenv("TERM", "") != "dumb"


def get_logger(name: str) -> logging.Logger:
    """
    Return a module logger with a single coloured stream handler attached.

    The level defaults to WARNING rather than INFO: this package is imported as a
    library and only logs at debug and error, so nothing is printed unless
    ``CSE_PORTFOLIO_LOG_LEVEL`` (or ``LOG_LEVEL``) asks for it.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    logger.setLevel(_resolve_log_level())
    handler = logging.StreamHandler()
    handler.setFormatter(ColorFormatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT, use_color=_use_color()))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
