"""
Delegating logger: enablement gating and message prefixing over any `Logger`.
"""

from __future__ import annotations

from typing import Any

from .exceptions import NullArgumentError
from .interfaces import Logger


class DelegatingLogger(Logger):
    """Forward every call to `delegate`, tagging messages with `[prefix]`.

    Debug and trace calls ask the delegate whether the level is enabled on
    every call and return early when it is not, so suppressed records cost one
    boolean check. Failures raised by the delegate propagate unchanged.

    Args:
        delegate: Logger receiving the forwarded calls. Borrowed, not owned.
        prefix: Tag placed in front of every message; None or "" disables it.
    """

    __slots__ = ("_delegate", "_prefix")

    def __init__(self, delegate: Logger, prefix: str | None = None):
        if delegate is None:
            raise NullArgumentError("delegate")
        self._delegate = delegate
        self._prefix = prefix

    @property
    def delegate(self) -> Logger:
        return self._delegate

    @property
    def prefix(self) -> str | None:
        return self._prefix

    def is_debug_enabled(self) -> bool:
        return self._delegate.is_debug_enabled()

    def is_trace_enabled(self) -> bool:
        return self._delegate.is_trace_enabled()

    def error(self, message: str, cause: BaseException | None, *args: Any) -> None:
        self._delegate.error(self._message_with_prefix(message), cause, *args)

    def info(self, message: str, *args: Any) -> None:
        self._delegate.info(self._message_with_prefix(message), *args)

    def warn(self, message: str, *args: Any) -> None:
        self._delegate.warn(self._message_with_prefix(message), *args)

    def debug(self, message: str, *args: Any) -> None:
        if self._delegate.is_debug_enabled():
            self._delegate.debug(self._message_with_prefix(message), *args)

    def trace(self, message: str, *args: Any) -> None:
        if self._delegate.is_trace_enabled():
            self._delegate.trace(self._message_with_prefix(message), *args)

    def _message_with_prefix(self, message: str) -> str:
        if not self._prefix:
            return message
        return f"[{self._prefix}] {message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(delegate={self._delegate!r}, prefix={self._prefix!r})"
