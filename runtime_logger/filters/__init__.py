"""
Log filters module

Provides filter implementations for deciding which messages are written.
"""

from runtime_logger.filters.base_filter import BaseFilter
from runtime_logger.filters.level_filter import LevelFilter

__all__ = ["BaseFilter", "LevelFilter"]
