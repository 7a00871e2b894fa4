"""
relaylog: prefixing, level-gated logger delegation.

`DelegatingLogger` wraps any `Logger` implementation:
- debug/trace calls are dropped unless the delegate has the level enabled
- messages are tagged as "[prefix] message" when a prefix is given

Implementations: stdlib (default), console, rotating file, null.
Library: structlog + orjson for the sink-backed loggers.
"""

from .core import configure_from_settings, configure_logging, get_logger, get_logging, install_logging
from .delegating import DelegatingLogger
from .exceptions import ConfigError, ConstructionError, NullArgumentError, RelayLogError
from .interfaces import Logger, Logging
from .levels import TRACE, LogLevel
from .loggers import (
    NULL_LOGGER,
    ConsoleLogging,
    FileLogging,
    NullLogger,
    NullLogging,
    SinkLogger,
    StdlibLogger,
    StdlibLogging,
)

__all__ = [
    "configure_logging",
    "configure_from_settings",
    "install_logging",
    "get_logger",
    "get_logging",
    "DelegatingLogger",
    "Logger",
    "Logging",
    "NULL_LOGGER",
    "NullLogger",
    "NullLogging",
    "StdlibLogger",
    "StdlibLogging",
    "SinkLogger",
    "ConsoleLogging",
    "FileLogging",
    "LogLevel",
    "TRACE",
    "RelayLogError",
    "ConstructionError",
    "NullArgumentError",
    "ConfigError",
]
