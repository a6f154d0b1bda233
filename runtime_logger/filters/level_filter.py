"""
Level-based filter

Filters messages based on log level range
"""

from typing import Optional
from runtime_logger.core.message_state import MessageState
from runtime_logger.core.log_level import LogLevel
from runtime_logger.filters.base_filter import BaseFilter


class LevelFilter(BaseFilter):
    """
    Filter messages based on log level.

    Allows filtering by minimum and/or maximum log level. Messages
    without a level are always logged.
    """

    def __init__(
        self,
        min_level: Optional[LogLevel] = None,
        max_level: Optional[LogLevel] = None
    ):
        """
        Initialize level filter.

        Args:
            min_level: Minimum log level (inclusive). If None, no minimum.
            max_level: Maximum log level (inclusive). If None, no maximum.

        Example:
            # Only log WARNING and above
            filter = LevelFilter(min_level=LogLevel.WARNING)

            # Only log DEBUG to INFORMATION
            filter = LevelFilter(min_level=LogLevel.DEBUG, max_level=LogLevel.INFORMATION)
        """
        self.min_level = min_level
        self.max_level = max_level

    def should_log(self, state: MessageState) -> bool:
        """
        Check if the message's level is within the specified range.

        Args:
            state: Message state to check

        Returns:
            True if level is within range or absent, False otherwise
        """
        if state.level is None:
            return True

        if self.min_level is not None and state.level < self.min_level:
            return False

        if self.max_level is not None and state.level > self.max_level:
            return False

        return True

    def __repr__(self) -> str:
        """String representation."""
        return f"LevelFilter(min={self.min_level}, max={self.max_level})"
