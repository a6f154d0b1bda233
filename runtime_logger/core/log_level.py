"""
Log level enumeration

Mirrors the Microsoft.Extensions.Logging levels used by the function runtime
"""

from enum import IntEnum
from typing import Any, Dict


class LogLevel(IntEnum):
    """
    Log level enumeration.

    Ordered from most to least verbose. NONE disables logging entirely
    and has no label of its own.
    """

    TRACE = 0        # Most verbose, detailed tracing
    DEBUG = 1        # Debug information
    INFORMATION = 2  # Informational messages
    WARNING = 3      # Warning messages
    ERROR = 4        # Error messages
    CRITICAL = 5     # Critical errors
    NONE = 6         # Logging disabled

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Accepts member names ("Information") as well as the console
        labels and common short forms ("info", "warn", "fail").

        Args:
            level_str: Level name (case-insensitive)

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        key = level_str.strip().upper()
        if key in cls.__members__:
            return cls[key]
        if key in LEVEL_ALIASES:
            return LEVEL_ALIASES[key]
        raise ValueError(f"Invalid log level: {level_str}")

    @property
    def label(self) -> str:
        """Four-character console label, or the level name if it has none."""
        return level_to_label(self)


# Console labels, matching the Microsoft.Extensions.Logging console provider
LEVEL_LABELS: Dict[LogLevel, str] = {
    LogLevel.TRACE: "trce",
    LogLevel.DEBUG: "dbug",
    LogLevel.INFORMATION: "info",
    LogLevel.WARNING: "warn",
    LogLevel.ERROR: "fail",
    LogLevel.CRITICAL: "crit",
}

# Upper-cased labels and short forms accepted by LogLevel.from_string
LEVEL_ALIASES: Dict[str, LogLevel] = {
    **{label.upper(): level for level, label in LEVEL_LABELS.items()},
    "INFO": LogLevel.INFORMATION,
    "WARN": LogLevel.WARNING,
    "FATAL": LogLevel.CRITICAL,
}


def level_to_label(level: Any) -> str:
    """
    Map a level to its four-character label.

    Values outside the table fall back to their own textual name.
    """
    if isinstance(level, LogLevel) and level in LEVEL_LABELS:
        return LEVEL_LABELS[level]
    return str(level)
