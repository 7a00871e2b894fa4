"""
Process-wide logging configuration and logger lookup.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from .config import LoggingSettings, get_settings
from .delegating import DelegatingLogger
from .exceptions import ConfigError
from .formatters import ConsoleFormatter
from .interfaces import Logging
from .levels import to_level
from .loggers import ConsoleLogging, FileLogging, NullLogging, StdlibLogging

# =============================================================================
# Global State
# =============================================================================

_logging: Logging = StdlibLogging()


def get_logging() -> Logging:
    """Return the installed `Logging` factory."""
    return _logging


def get_logger(name: str | None = None, prefix: str | None = None) -> DelegatingLogger:
    """Get a logger for `name`, tagging its messages with `[prefix]` when given."""
    return DelegatingLogger(_logging.get_log(name or "root"), prefix)


# =============================================================================
# Configuration Logic
# =============================================================================


def _create_logging(
    sink: str,
    level: int | str,
    fmt: str,
    file_path: str | Path,
    max_bytes: int,
    backup_count: int,
    stream: Any,
) -> Logging:
    name = sink.strip().lower()
    if name == "stdlib":
        return StdlibLogging(level)
    if name == "console":
        return ConsoleLogging(level, fmt="json" if fmt.lower() == "json" else "console", stream=stream)
    if name == "file":
        return FileLogging(file_path, level, max_bytes=max_bytes, backup_count=backup_count)
    if name == "none":
        return NullLogging()
    raise ConfigError(f"Unknown log sink: {sink!r}")


def install_logging(factory: Logging) -> Logging:
    """Install `factory` process-wide, closing the previously installed one."""
    global _logging

    previous = _logging
    _logging = factory
    if previous is not factory:
        close = getattr(previous, "close", None)
        if close is not None:
            close()
    return factory


def configure_logging(
    *,
    level: int | str = "INFO",
    sink: str = "stdlib",
    fmt: str = "console",
    file_path: str | Path = "logs/relaylog.log",
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5,
    stream: Any = None,
) -> Logging:
    """
    Configure the process-wide logging factory.

    Args:
        level: Minimum level (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL, OFF)
        sink: One of stdlib, console, file, none
        fmt: Output format for the console sink (console, json)
        file_path: Path for the file sink
        max_bytes: Rotate the file sink above this size
        backup_count: Rotated files to keep
        stream: Output stream for the console sink (default: stderr)
    """
    to_level(level)
    return install_logging(_create_logging(sink, level, fmt, file_path, max_bytes, backup_count, stream))


def configure_from_settings(settings: LoggingSettings | None = None, *, stream: Any = None) -> Logging:
    """Configure logging from `LoggingSettings` (environment by default)."""
    settings = settings or get_settings()
    ConsoleFormatter.configure(
        timestamp_format=settings.console_timestamp_format,
        level_width=settings.console_level_width,
        logger_width=settings.console_logger_width,
        separator=settings.console_separator,
    )
    return configure_logging(
        level=settings.level.value,
        sink=settings.sink.value,
        fmt=settings.format.value,
        file_path=settings.file_path,
        max_bytes=settings.file_max_bytes,
        backup_count=settings.file_backup_count,
        stream=stream,
    )
