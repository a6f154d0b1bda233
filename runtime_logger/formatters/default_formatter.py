"""
Default formatter for the function runtime log stream

Produces tab-separated lines: timestamp, request id, level label, message
"""

from typing import Optional

from runtime_logger.core.log_level import level_to_label
from runtime_logger.core.message_state import MessageState
from runtime_logger.formatters.base_formatter import BaseFormatter, TimestampFormatter


class DefaultLogMessageFormatter(BaseFormatter):
    """
    Format messages as plain text with message properties replaced.

    Unless disabled, every line is prefixed with the timestamp, request id
    and level label, separated by tabs.
    """

    def __init__(
        self,
        add_prefix: bool = True,
        timestamp_formatter: Optional[TimestampFormatter] = None
    ):
        """
        Initialize default formatter.

        Args:
            add_prefix: Prefix messages with timestamp, request id and level
            timestamp_formatter: Callable rendering the timestamp field

        Example:
            # "2024-05-01T12:00:00.000Z\treq-1\tinfo\tProcessed 3 items"
            formatter = DefaultLogMessageFormatter()

            # "Processed 3 items"
            formatter = DefaultLogMessageFormatter(add_prefix=False)
        """
        super().__init__(timestamp_formatter)
        self._add_prefix = add_prefix

    @property
    def add_prefix(self) -> bool:
        return self._add_prefix

    def format_message(self, state: MessageState) -> str:
        """
        Format message state, applying message properties and the prefix.

        Args:
            state: Message state to format

        Returns:
            Formatted line
        """
        arguments = state.arguments

        # Not a parameterized message, nothing to parse
        if arguments is not None and len(arguments) == 0:
            message = state.template
        else:
            properties = self.parse_properties(state.template)
            message = self.apply_message_properties(state.template, properties, arguments)

        if not self._add_prefix:
            return message or ""

        request_id = state.request_id or ""
        label = level_to_label(state.level) if state.level is not None else None

        if label:
            return f"{self.format_timestamp(state)}\t{request_id}\t{label}\t{message or ''}"
        return f"{self.format_timestamp(state)}\t{request_id}\t{message or ''}"

    def __repr__(self) -> str:
        """String representation."""
        return f"DefaultLogMessageFormatter(add_prefix={self._add_prefix})"
