"""
Base filter interface
"""

from abc import ABC, abstractmethod
from runtime_logger.core.message_state import MessageState


class BaseFilter(ABC):
    """
    Abstract base class for log filters.

    Filters determine whether a message should be written or discarded.
    """

    @abstractmethod
    def should_log(self, state: MessageState) -> bool:
        """
        Determine if a message should be logged.

        Args:
            state: The message state to filter

        Returns:
            True if the message should be logged, False otherwise
        """
        pass

    def __call__(self, state: MessageState) -> bool:
        """Allow filters to be callable."""
        return self.should_log(state)
