"""
Log formatters module

Provides formatter implementations turning message state into log lines.
"""

from runtime_logger.formatters.base_formatter import (
    BaseFormatter,
    MessageProperty,
    format_timestamp,
)
from runtime_logger.formatters.default_formatter import DefaultLogMessageFormatter

__all__ = [
    "BaseFormatter",
    "MessageProperty",
    "DefaultLogMessageFormatter",
    "format_timestamp",
]
