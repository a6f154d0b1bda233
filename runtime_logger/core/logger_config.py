"""
Logger configuration management

Settings come from code or from the runtime's environment variables
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

from runtime_logger.core.log_level import LogLevel

# Environment variables set by the function runtime, most specific first
LOG_LEVEL_ENV_VARS = ("AWS_LAMBDA_HANDLER_LOG_LEVEL", "AWS_LAMBDA_LOG_LEVEL")
LOG_FORMAT_ENV_VARS = ("AWS_LAMBDA_HANDLER_LOG_FORMAT", "AWS_LAMBDA_LOG_FORMAT")


class LogFormat(Enum):
    """Output layout of the log stream."""

    DEFAULT = "Default"          # Prefixed with timestamp, request id and level
    UNFORMATTED = "Unformatted"  # Message only

    @classmethod
    def from_string(cls, format_str: str) -> "LogFormat":
        """
        Convert string to LogFormat.

        Args:
            format_str: Format name (case-insensitive); "Text" is
                        accepted as an alias of "Default"

        Returns:
            LogFormat enum value

        Raises:
            ValueError: If format_str is not valid
        """
        key = format_str.strip().upper()
        if key == "TEXT":
            return cls.DEFAULT
        if key in cls.__members__:
            return cls[key]
        raise ValueError(f"Invalid log format: {format_str}")

    @property
    def add_prefix(self) -> bool:
        return self is LogFormat.DEFAULT


def _first_set(environ: Mapping[str, str], names) -> Optional[str]:
    for name in names:
        value = environ.get(name)
        if value and value.strip():
            return value
    return None


@dataclass
class LoggerConfig:
    """Logger configuration."""

    # Basic settings
    name: str = "runtime"
    min_level: LogLevel = LogLevel.INFORMATION

    # Format settings
    log_format: LogFormat = LogFormat.DEFAULT

    # Console settings
    console_output: bool = True

    def __post_init__(self):
        """Validate configuration after initialization."""
        if isinstance(self.min_level, str):
            self.min_level = LogLevel.from_string(self.min_level)
        if isinstance(self.log_format, str):
            self.log_format = LogFormat.from_string(self.log_format)
        if not isinstance(self.min_level, LogLevel):
            raise ValueError("min_level must be a LogLevel")
        if not isinstance(self.log_format, LogFormat):
            raise ValueError("log_format must be a LogFormat")

    @property
    def add_prefix(self) -> bool:
        """Whether lines carry the timestamp, request id and level prefix."""
        return self.log_format.add_prefix

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "LoggerConfig":
        """Create configuration for debugging."""
        return cls(min_level=LogLevel.TRACE)

    @classmethod
    def unformatted_config(cls) -> "LoggerConfig":
        """Create configuration writing bare messages."""
        return cls(log_format=LogFormat.UNFORMATTED)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "LoggerConfig":
        """
        Create configuration from the runtime's environment variables.

        Args:
            environ: Mapping to read (default: os.environ)

        Returns:
            Configuration with unset variables left at their defaults

        Raises:
            ValueError: If a variable holds an unknown level or format
        """
        environ = os.environ if environ is None else environ
        config = cls()

        level = _first_set(environ, LOG_LEVEL_ENV_VARS)
        if level is not None:
            config.min_level = LogLevel.from_string(level)

        log_format = _first_set(environ, LOG_FORMAT_ENV_VARS)
        if log_format is not None:
            config.log_format = LogFormat.from_string(log_format)

        return config
