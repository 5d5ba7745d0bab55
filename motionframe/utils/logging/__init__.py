"""Logging utilities for motionframe."""

from .log import (
    BOLD, UNDERLINE, ITALIC,
    RED, ORANGE, YELLOW, GREEN, BLUE, PURPLE,
    RESET_COLOR,
    debug, info, warning, error,
    get_logger, set_level,
)

__all__ = [
    "BOLD", "UNDERLINE", "ITALIC",
    "RED", "ORANGE", "YELLOW", "GREEN", "BLUE", "PURPLE",
    "RESET_COLOR",
    "debug", "info", "warning", "error",
    "get_logger", "set_level",
]
