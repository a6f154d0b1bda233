"""
Core module for runtime logger

This module contains the fundamental classes:
- Logger: Front end for handler code
- LoggerBuilder: Builder pattern for logger construction
- MessageState: State of a single log call
- LogLevel: Log level enumeration
- LoggerConfig, LogFormat: Configuration management
"""

from runtime_logger.core.logger import Logger
from runtime_logger.core.logger_builder import LoggerBuilder
from runtime_logger.core.message_state import MessageState
from runtime_logger.core.log_level import LogLevel
from runtime_logger.core.logger_config import LoggerConfig, LogFormat

__all__ = ["Logger", "LoggerBuilder", "MessageState", "LogLevel", "LoggerConfig", "LogFormat"]
