"""
Base formatter interface

Shared template parsing and substitution for message formatters
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, List, Optional, Sequence

from runtime_logger.core.message_state import MessageState

# A brace-delimited, non-empty run without nested braces
PROPERTY_PATTERN = re.compile(r"\{([^{}]+)\}")

DEFAULT_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S.%f"

TimestampFormatter = Callable[[datetime], str]


@dataclass(frozen=True)
class MessageProperty:
    """A placeholder found in a message template."""

    start: int
    end: int
    name: str

    @property
    def text(self) -> str:
        """The placeholder as written in the template."""
        return "{" + self.name + "}"


def format_timestamp(timestamp: datetime) -> str:
    """
    Render a timestamp as UTC with millisecond precision.

    Naive datetimes are taken to already be in UTC.

    Example:
        2024-05-01T12:00:00.123Z
    """
    if not isinstance(timestamp, datetime):
        return str(timestamp)
    if timestamp.tzinfo is not None:
        timestamp = timestamp.astimezone(timezone.utc)
    return timestamp.strftime(DEFAULT_TIMESTAMP_FORMAT)[:-3] + "Z"


def stringify_argument(value: Any) -> str:
    """Default text of an argument; None renders empty."""
    if value is None:
        return ""
    try:
        return str(value)
    except Exception:
        return f"<unprintable {type(value).__name__}>"


class BaseFormatter(ABC):
    """
    Abstract base class for message formatters.

    Formatters convert MessageState objects into display strings.
    Subclasses decide the overall layout; parsing and substitution of
    message properties is shared here.
    """

    def __init__(self, timestamp_formatter: Optional[TimestampFormatter] = None):
        """
        Initialize formatter.

        Args:
            timestamp_formatter: Callable rendering a datetime
                                 (default: UTC ISO-8601 with milliseconds)
        """
        self.timestamp_formatter = timestamp_formatter or format_timestamp

    @abstractmethod
    def format_message(self, state: MessageState) -> str:
        """
        Format a message state into a string.

        Args:
            state: The message state to format

        Returns:
            Formatted string representation of the message
        """
        pass

    def format(self, state: MessageState) -> str:
        """Alias of format_message, matching the writer protocol."""
        return self.format_message(state)

    def __call__(self, state: MessageState) -> str:
        """Allow formatters to be callable."""
        return self.format_message(state)

    def format_timestamp(self, state: MessageState) -> str:
        """Render the state's timestamp with the configured formatter."""
        return self.timestamp_formatter(state.timestamp)

    @staticmethod
    def parse_properties(template: Optional[str]) -> List[MessageProperty]:
        """
        Find the message properties in a template, left to right.

        Unmatched braces and empty "{}" pairs are not properties.

        Args:
            template: Message template, may be None

        Returns:
            Properties in order of appearance
        """
        if not template:
            return []
        return [
            MessageProperty(match.start(), match.end(), match.group(1))
            for match in PROPERTY_PATTERN.finditer(template)
        ]

    @staticmethod
    def apply_message_properties(
        template: Optional[str],
        properties: Sequence[MessageProperty],
        arguments: Optional[Sequence[Any]]
    ) -> Optional[str]:
        """
        Replace properties with argument values by position.

        The first property takes the first argument and so on. Properties
        without an argument are left as written; extra arguments are unused.

        Args:
            template: Message template
            properties: Properties parsed from the template
            arguments: Argument values, may be None

        Returns:
            The message with properties substituted
        """
        if template is None or not properties or not arguments:
            return template

        parts = []
        position = 0
        for prop, value in zip(properties, arguments):
            parts.append(template[position:prop.start])
            parts.append(stringify_argument(value))
            position = prop.end
        parts.append(template[position:])
        return "".join(parts)
