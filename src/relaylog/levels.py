"""
Numeric log levels.

relaylog shares the standard library scale and adds TRACE below DEBUG.
"""

from __future__ import annotations

import logging
from enum import Enum

from .exceptions import ConfigError

TRACE = 5
DEBUG = logging.DEBUG
INFO = logging.INFO
WARNING = logging.WARNING
ERROR = logging.ERROR
CRITICAL = logging.CRITICAL
OFF = CRITICAL + 10

logging.addLevelName(TRACE, "TRACE")


class LogLevel(str, Enum):
    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"
    OFF = "OFF"


_NAME_TO_LEVEL = {
    "trace": TRACE,
    "debug": DEBUG,
    "info": INFO,
    "warn": WARNING,
    "warning": WARNING,
    "error": ERROR,
    "critical": CRITICAL,
    "off": OFF,
}


def to_level(value: int | str | LogLevel) -> int:
    """Resolve a level name or number to its numeric value."""
    if isinstance(value, LogLevel):
        value = value.value
    if isinstance(value, int):
        return value
    try:
        return _NAME_TO_LEVEL[value.strip().lower()]
    except KeyError:
        raise ConfigError(f"Unknown log level: {value!r}") from None
