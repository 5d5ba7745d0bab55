"""Coloured console logging for motionframe.

Thin wrappers around a stdlib ``logging`` logger named ``motionframe``.
Each helper takes the message and an optional ANSI colour constant which is
only applied to the text written to the terminal.
"""

import logging
import sys

BOLD = "\033[1m"
UNDERLINE = "\033[4m"
ITALIC = "\033[3m"

RED = "\033[31m"
ORANGE = "\033[38;5;208m"
YELLOW = "\033[33m"
GREEN = "\033[32m"
BLUE = "\033[34m"
PURPLE = "\033[35m"

RESET_COLOR = "\033[0m"

LOGGER_NAME = "motionframe"


class _ColorFormatter(logging.Formatter):
    """Wrap the formatted record in the colour stored on the record, if any."""

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        color = getattr(record, "color", None)
        if color:
            return f"{color}{text}{RESET_COLOR}"
        return text


def get_logger() -> logging.Logger:
    """Return the package logger, attaching a coloured stderr handler once."""
    logger = logging.getLogger(LOGGER_NAME)
    if not any(getattr(h, "_motionframe", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(_ColorFormatter("%(message)s"))
        handler._motionframe = True
        logger.addHandler(handler)
        if logger.level == logging.NOTSET:
            logger.setLevel(logging.INFO)
    return logger


def set_level(level: int | str) -> None:
    get_logger().setLevel(level.upper() if isinstance(level, str) else level)


def _log(level: int, message: str, color: str | None) -> None:
    get_logger().log(level, message, extra={"color": color})


def debug(message: str, color: str | None = None) -> None:
    _log(logging.DEBUG, message, color)


def info(message: str, color: str | None = None) -> None:
    _log(logging.INFO, message, color)


def warning(message: str, color: str | None = YELLOW) -> None:
    _log(logging.WARNING, message, color)


def error(message: str, color: str | None = RED) -> None:
    _log(logging.ERROR, message, color)
