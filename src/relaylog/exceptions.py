"""
Error taxonomy for relaylog.

Failures raised by a delegate are never wrapped; they reach the caller as-is.
"""

from __future__ import annotations


class RelayLogError(Exception):
    """Base exception for relaylog failures."""


class ConstructionError(RelayLogError):
    """A logger could not be constructed from the given arguments."""


class NullArgumentError(ConstructionError, ValueError):
    """A mandatory constructor argument was None."""

    def __init__(self, argument: str) -> None:
        self.argument = argument
        super().__init__(f"{argument} must not be None")


class ConfigError(RelayLogError, ValueError):
    """Invalid logging configuration (unknown level or sink name)."""
