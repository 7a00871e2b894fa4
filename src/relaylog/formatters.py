"""
Message rendering and console formatting.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from structlog.typing import EventDict


def render_message(message: Any, args: tuple[Any, ...]) -> str:
    """Apply %-style `args` to `message` the way the standard library does."""
    text = str(message)
    if args:
        if len(args) == 1 and isinstance(args[0], dict) and args[0]:
            return text % args[0]
        return text % args
    return text


# =============================================================================
# Console Formatter (Aligned Columns)
# =============================================================================


class ConsoleFormatter:
    """Render an event dict as one aligned line.

    Format: timestamp | LEVEL | logger | message
    A formatted exception, when present, follows on the next lines.
    """

    _RESET = "\x1b[0m"
    _LEVEL_COLORS = {
        "TRACE": "\x1b[2;36m",
        "DEBUG": "\x1b[36m",
        "INFO": "\x1b[32m",
        "WARNING": "\x1b[33m",
        "ERROR": "\x1b[31m",
        "CRITICAL": "\x1b[1;31m",
    }
    _TIMESTAMP_COLOR = "\x1b[90m"
    _LOGGER_COLOR = "\x1b[35m"

    TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
    TIMESTAMP_WIDTH = 19
    LEVEL_WIDTH = 8
    LOGGER_WIDTH = 32
    SEPARATOR = " | "

    @classmethod
    def configure(
        cls,
        *,
        timestamp_format: str | None = None,
        level_width: int | None = None,
        logger_width: int | None = None,
        separator: str | None = None,
    ) -> None:
        """Configure alignment and rendering parameters."""
        if timestamp_format:
            cls.TIMESTAMP_FORMAT = timestamp_format
            cls.TIMESTAMP_WIDTH = len(datetime.now().strftime(timestamp_format))
        if level_width:
            cls.LEVEL_WIDTH = level_width
        if logger_width:
            cls.LOGGER_WIDTH = logger_width
        if separator is not None:
            cls.SEPARATOR = separator

    @staticmethod
    def _fit_right(text: str, width: int) -> str:
        if width <= 0:
            return text
        if len(text) > width:
            if width <= 3:
                text = text[-width:]
            else:
                text = "..." + text[-(width - 3) :]
        return f"{text:>{width}}"

    @classmethod
    def _format_timestamp(cls, raw_timestamp: str | None) -> str:
        if raw_timestamp:
            try:
                dt = datetime.fromisoformat(raw_timestamp.replace("Z", "+00:00"))
                if dt.tzinfo is None:
                    dt = dt.replace(tzinfo=timezone.utc)
                return dt.astimezone().strftime(cls.TIMESTAMP_FORMAT)
            except (ValueError, TypeError):
                pass
        return datetime.now().strftime(cls.TIMESTAMP_FORMAT)

    @classmethod
    def _color(cls, text: str, color: str | None, use_color: bool) -> str:
        if not use_color or not color:
            return text
        return f"{color}{text}{cls._RESET}"

    @classmethod
    def format(cls, event_dict: EventDict, *, use_color: bool = False) -> str:
        """Format an event dict into an aligned string."""
        level_upper = str(event_dict.get("level", "info")).upper()
        message = str(event_dict.get("message", event_dict.get("event", "")))
        logger_name = str(event_dict.get("logger", "root"))
        timestamp = cls._format_timestamp(event_dict.get("timestamp"))

        line = cls.SEPARATOR.join(
            [
                cls._color(cls._fit_right(timestamp, cls.TIMESTAMP_WIDTH), cls._TIMESTAMP_COLOR, use_color),
                cls._color(cls._fit_right(level_upper, cls.LEVEL_WIDTH), cls._LEVEL_COLORS.get(level_upper), use_color),
                cls._color(cls._fit_right(logger_name, cls.LOGGER_WIDTH), cls._LOGGER_COLOR, use_color),
                message,
            ]
        )

        exception = event_dict.get("exception")
        if exception:
            line = f"{line}\n{str(exception).rstrip()}"
        return line
