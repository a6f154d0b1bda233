"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Runtime Logger - Log message formatting for serverless function runtimes
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from runtime_logger.core.logger import Logger
from runtime_logger.core.logger_builder import LoggerBuilder
from runtime_logger.core.message_state import MessageState
from runtime_logger.core.log_level import LogLevel
from runtime_logger.core.logger_config import LoggerConfig, LogFormat
from runtime_logger.formatters.default_formatter import DefaultLogMessageFormatter

# Import submodules (not all classes by default)
from runtime_logger import filters
from runtime_logger import formatters
from runtime_logger import writers

__all__ = [
    "Logger",
    "LoggerBuilder",
    "MessageState",
    "LogLevel",
    "LoggerConfig",
    "LogFormat",
    "DefaultLogMessageFormatter",
    "filters",
    "formatters",
    "writers",
]
