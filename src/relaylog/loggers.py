"""
Concrete `Logger` and `Logging` implementations.

- NullLogger / NullLogging: discard everything
- StdlibLogger / StdlibLogging: standard library `logging` tree
- SinkLogger / ConsoleLogging / FileLogging: structlog processor chain
  rendered by a relaylog sink (stdio or rotating file)
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import structlog
from structlog.typing import EventDict, WrappedLogger

from .formatters import render_message
from .interfaces import Logger, Logging
from .levels import DEBUG, ERROR, INFO, TRACE, WARNING, to_level
from .sinks import BaseSink, FileSink, LogFormat, StdioSink

# =============================================================================
# Null
# =============================================================================


class NullLogger(Logger):
    """Logger that discards every record."""

    def is_debug_enabled(self) -> bool:
        return False

    def is_trace_enabled(self) -> bool:
        return False

    def error(self, message: str, cause: BaseException | None, *args: Any) -> None:
        pass

    def info(self, message: str, *args: Any) -> None:
        pass

    def warn(self, message: str, *args: Any) -> None:
        pass

    def debug(self, message: str, *args: Any) -> None:
        pass

    def trace(self, message: str, *args: Any) -> None:
        pass


NULL_LOGGER = NullLogger()


class NullLogging(Logging):
    def get_log(self, name: str) -> Logger:
        return NULL_LOGGER


# =============================================================================
# Standard Library
# =============================================================================


class StdlibLogger(Logger):
    """Adapter over a `logging.Logger`. Enablement is read from it on every call."""

    def __init__(self, logger: logging.Logger):
        self._logger = logger

    @property
    def name(self) -> str:
        return self._logger.name

    def is_debug_enabled(self) -> bool:
        return self._logger.isEnabledFor(DEBUG)

    def is_trace_enabled(self) -> bool:
        return self._logger.isEnabledFor(TRACE)

    def error(self, message: str, cause: BaseException | None, *args: Any) -> None:
        self._logger.error(message, *args, exc_info=cause)

    def info(self, message: str, *args: Any) -> None:
        self._logger.info(message, *args)

    def warn(self, message: str, *args: Any) -> None:
        self._logger.warning(message, *args)

    def debug(self, message: str, *args: Any) -> None:
        self._logger.debug(message, *args)

    def trace(self, message: str, *args: Any) -> None:
        self._logger.log(TRACE, message, *args)


class StdlibLogging(Logging):
    """Hand out `StdlibLogger`s; sets `level` on each logger when given."""

    def __init__(self, level: int | str | None = None):
        self._level = None if level is None else to_level(level)

    def get_log(self, name: str) -> Logger:
        logger = logging.getLogger(name)
        if self._level is not None:
            logger.setLevel(self._level)
        return StdlibLogger(logger)


# =============================================================================
# Structlog Processors
# =============================================================================


def add_timestamp(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Add ISO 8601 timestamp to log event."""
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def add_logger_name(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Move the bound `_name` to the `logger` key."""
    event_dict["logger"] = event_dict.pop("_name", "root")
    return event_dict


def rename_event_key(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Rename 'event' to 'message'."""
    if "event" in event_dict:
        event_dict["message"] = event_dict.pop("event")
    return event_dict


def pass_to_sink(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> tuple[tuple[EventDict], dict]:
    """Hand the finished event dict to the wrapped `SinkWriter` unchanged."""
    return (event_dict,), {}


_PROCESSORS = [
    structlog.stdlib.add_log_level,
    add_timestamp,
    add_logger_name,
    rename_event_key,
    structlog.processors.format_exc_info,
    pass_to_sink,
]


class SinkWriter:
    """Wrapped logger at the end of the structlog chain; every level writes to the sink."""

    def __init__(self, sink: BaseSink):
        self._sink = sink

    def msg(self, event_dict: EventDict) -> None:
        self._sink.emit(event_dict)

    trace = debug = info = warning = error = msg


# =============================================================================
# Sink-backed Loggers
# =============================================================================


class SinkLogger(Logger):
    """Logger with a fixed minimum level, emitting through a relaylog sink.

    Records below `level` are dropped before the message is formatted.
    """

    def __init__(self, name: str, sink: BaseSink, level: int | str = INFO):
        self._name = name
        self._level = to_level(level)
        self._logger = structlog.wrap_logger(
            SinkWriter(sink),
            processors=_PROCESSORS,
            wrapper_class=structlog.BoundLogger,
            context_class=dict,
            _name=name,
        ).bind()

    @property
    def name(self) -> str:
        return self._name

    @property
    def level(self) -> int:
        return self._level

    def is_debug_enabled(self) -> bool:
        return self._level <= DEBUG

    def is_trace_enabled(self) -> bool:
        return self._level <= TRACE

    def error(self, message: str, cause: BaseException | None, *args: Any) -> None:
        if self._level > ERROR:
            return
        if cause is None:
            self._logger.error(render_message(message, args))
        else:
            self._logger.error(render_message(message, args), exc_info=cause)

    def info(self, message: str, *args: Any) -> None:
        if self._level <= INFO:
            self._logger.info(render_message(message, args))

    def warn(self, message: str, *args: Any) -> None:
        if self._level <= WARNING:
            self._logger.warning(render_message(message, args))

    def debug(self, message: str, *args: Any) -> None:
        if self._level <= DEBUG:
            self._logger.debug(render_message(message, args))

    def trace(self, message: str, *args: Any) -> None:
        if self._level <= TRACE:
            self._logger.trace(render_message(message, args))


class SinkLogging(Logging):
    """Hand out `SinkLogger`s sharing one sink. Owns the sink; call `close()`."""

    def __init__(self, sink: BaseSink, level: int | str = INFO):
        self._sink = sink
        self._level = to_level(level)

    @property
    def sink(self) -> BaseSink:
        return self._sink

    def get_log(self, name: str) -> Logger:
        return SinkLogger(name, self._sink, self._level)

    def close(self) -> None:
        self._sink.close()


class ConsoleLogging(SinkLogging):
    """Console output (stderr by default), aligned text or JSON lines."""

    def __init__(self, level: int | str = INFO, fmt: LogFormat = "console", stream: Any = None):
        super().__init__(StdioSink(fmt=fmt, stream=stream), level)


class FileLogging(SinkLogging):
    """JSON lines written to a rotating file."""

    def __init__(
        self,
        path: str | Path,
        level: int | str = INFO,
        max_bytes: int = 10 * 1024 * 1024,
        backup_count: int = 5,
    ):
        super().__init__(FileSink(path, max_bytes=max_bytes, backup_count=backup_count), level)
