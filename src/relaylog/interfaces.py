"""
Logger capability shared by every relaylog implementation.

Design Pattern: Strategy Pattern. Callers depend on `Logger`; console, file,
stdlib and no-op implementations are interchangeable behind it, and
`DelegatingLogger` wraps any of them (including another `DelegatingLogger`).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Logger(ABC):
    """Abstract logging capability.

    `args` are %-style format arguments applied to `message` by the
    implementation that finally emits the record.
    """

    @abstractmethod
    def is_debug_enabled(self) -> bool:
        """Return True if debug records would be emitted."""
        ...

    @abstractmethod
    def is_trace_enabled(self) -> bool:
        """Return True if trace records would be emitted."""
        ...

    @abstractmethod
    def error(self, message: str, cause: BaseException | None, *args: Any) -> None:
        """Log an error, optionally with the exception that caused it."""
        ...

    @abstractmethod
    def info(self, message: str, *args: Any) -> None:
        ...

    @abstractmethod
    def warn(self, message: str, *args: Any) -> None:
        ...

    @abstractmethod
    def debug(self, message: str, *args: Any) -> None:
        ...

    @abstractmethod
    def trace(self, message: str, *args: Any) -> None:
        ...


class Logging(ABC):
    """Factory handing out named `Logger` instances."""

    @abstractmethod
    def get_log(self, name: str) -> Logger:
        """Return the logger for the given component name."""
        ...
