"""
Logging Configuration.

Loaded from `RELAYLOG_LOG_*` environment variables (and `.env`).
"""

from enum import Enum
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .levels import LogLevel


class LogFormat(str, Enum):
    CONSOLE = "console"
    JSON = "json"


class SinkKind(str, Enum):
    STDLIB = "stdlib"
    CONSOLE = "console"
    FILE = "file"
    NONE = "none"


class LoggingSettings(BaseSettings):
    """Logging infrastructure configuration."""

    model_config = SettingsConfigDict(
        env_prefix="RELAYLOG_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    level: LogLevel = Field(default=LogLevel.INFO, description="Minimum level")
    sink: SinkKind = Field(default=SinkKind.STDLIB, description="Sink name (stdlib, console, file, none)")
    format: LogFormat = Field(default=LogFormat.CONSOLE, description="Console output format")
    file_path: str = Field(default="logs/relaylog.log", description="Path for file sink")
    file_max_bytes: int = Field(default=10 * 1024 * 1024, ge=0, description="Rotate file sink above this size")
    file_backup_count: int = Field(default=5, ge=0, description="Rotated files to keep")
    console_timestamp_format: str = Field(
        default="%Y-%m-%d %H:%M:%S",
        description="Console timestamp format",
    )
    console_level_width: int = Field(default=8, description="Console level column width")
    console_logger_width: int = Field(default=32, description="Console logger column width")
    console_separator: str = Field(default=" | ", description="Console column separator")


@lru_cache
def get_settings() -> LoggingSettings:
    return LoggingSettings()
