"""
Severity levels for formatted log entries
"""

import logging
from enum import IntEnum
from typing import Union


class Level(IntEnum):
    """Ordered severity levels, numerically aligned with the logging module"""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR
    FATAL = logging.CRITICAL
    PANIC = 60

    def __str__(self) -> str:
        return _LEVEL_NAMES[self]


_LEVEL_NAMES = {
    Level.DEBUG: "debug",
    Level.INFO: "info",
    Level.WARN: "warning",
    Level.ERROR: "error",
    Level.FATAL: "fatal",
    Level.PANIC: "panic",
}

LevelLike = Union[Level, int]


def to_level(levelno: int) -> LevelLike:
    """Return the matching Level member, or the raw number for custom levels"""
    try:
        return Level(levelno)
    except ValueError:
        return levelno


def level_name(level: LevelLike) -> str:
    """Lower-case name of a level"""
    if isinstance(level, Level):
        return str(level)
    return logging.getLevelName(level).lower()
