"""
Bridge to the standard library logging module

Lets code that logs through ``logging`` produce the runtime's line format.
"""

import logging
import sys
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Optional

from runtime_logger.core.log_level import LogLevel
from runtime_logger.core.logger import Logger
from runtime_logger.core.logger_config import LoggerConfig
from runtime_logger.core.message_state import MessageState
from runtime_logger.formatters.base_formatter import TimestampFormatter
from runtime_logger.formatters.default_formatter import DefaultLogMessageFormatter

TRACE_LEVEL_NUM = 5

# Standard library level numbers for each LogLevel
STDLIB_LEVELS = {
    LogLevel.TRACE: TRACE_LEVEL_NUM,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFORMATION: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.CRITICAL: logging.CRITICAL,
    LogLevel.NONE: logging.CRITICAL + 1,
}


def level_from_levelno(levelno: int) -> LogLevel:
    """Map a standard library level number to the nearest LogLevel at or below it."""
    if levelno < logging.DEBUG:
        return LogLevel.TRACE
    if levelno < logging.INFO:
        return LogLevel.DEBUG
    if levelno < logging.WARNING:
        return LogLevel.INFORMATION
    if levelno < logging.ERROR:
        return LogLevel.WARNING
    if levelno < logging.CRITICAL:
        return LogLevel.ERROR
    return LogLevel.CRITICAL


class RuntimeLogFormatter(logging.Formatter):
    """
    Format ``logging`` records the way DefaultLogMessageFormatter does.

    ``record.msg`` is the template and ``record.args`` its arguments, so
    ``log.info("Processed {count} items", 3)`` renders "Processed 3 items".
    Messages from libraries using %-style formatting still render their
    arguments.
    The request id is read from an ``aws_request_id`` attribute (pass it
    through ``extra=``), falling back to the current context's id.
    """

    def __init__(
        self,
        add_prefix: bool = True,
        timestamp_formatter: Optional[TimestampFormatter] = None
    ):
        super().__init__()
        self.message_formatter = DefaultLogMessageFormatter(
            add_prefix=add_prefix,
            timestamp_formatter=timestamp_formatter,
        )

    def to_message_state(self, record: logging.LogRecord) -> MessageState:
        """
        Build message state from a logging record.

        Records with arguments but no "{name}" properties are taken to be
        %-style and are rendered with ``record.getMessage()``.
        """
        template = record.msg if isinstance(record.msg, str) else str(record.msg)
        args = record.args
        if isinstance(args, Mapping):
            args = tuple(args.values())
        elif args is None:
            args = ()

        if args and not self.message_formatter.parse_properties(template):
            template = record.getMessage()
            args = ()

        request_id = getattr(record, "aws_request_id", None)
        if request_id is None:
            request_id = Logger.get_request_id()

        return MessageState(
            template=template,
            arguments=args,
            level=level_from_levelno(record.levelno),
            request_id=request_id,
            timestamp=datetime.fromtimestamp(record.created, timezone.utc),
        )

    def format(self, record: logging.LogRecord) -> str:
        line = self.message_formatter.format_message(self.to_message_state(record))

        if record.exc_info and not record.exc_text:
            record.exc_text = self.formatException(record.exc_info)
        if record.exc_text:
            line = f"{line}\n{record.exc_text}"
        if record.stack_info:
            line = f"{line}\n{self.formatStack(record.stack_info)}"
        return line


def configure_logging(
    logger: Optional[logging.Logger] = None,
    config: Optional[LoggerConfig] = None,
    stream=None
) -> logging.StreamHandler:
    """
    Attach a stream handler using RuntimeLogFormatter.

    Args:
        logger: Logger to configure (default: root logger)
        config: Level and format settings (default: from environment)
        stream: Output stream (default: sys.stdout)

    Returns:
        The handler that was added

    Example:
        configure_logging()
        logging.getLogger(__name__).info("Loaded {count} records", 12)
    """
    logger = logger or logging.getLogger()
    config = config or LoggerConfig.from_env()

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(RuntimeLogFormatter(add_prefix=config.add_prefix))
    logger.addHandler(handler)
    logger.setLevel(STDLIB_LEVELS[config.min_level])
    return handler
