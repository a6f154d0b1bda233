"""
Main Logger class - Synchronous logger for function handlers
"""

from __future__ import annotations
from contextvars import ContextVar
from datetime import datetime
from typing import Optional, List, Any
import sys
import threading

from runtime_logger.core.log_level import LogLevel
from runtime_logger.core.message_state import MessageState
from runtime_logger.core.logger_config import LoggerConfig
from runtime_logger.formatters.default_formatter import DefaultLogMessageFormatter
from runtime_logger.writers.console_writer import ConsoleWriter
from runtime_logger.writers.file_writer import FileWriter

# Request id of the invocation running in the current thread or task
_current_request_id: ContextVar[Optional[str]] = ContextVar("current_request_id", default=None)


class Logger:
    """Front end building message state for each call and passing it to writers."""

    def __init__(self, config: Optional[LoggerConfig] = None, formatter: Optional[Any] = None):
        """
        Initialize logger.

        Args:
            config: Logger configuration (default: LoggerConfig.default())
            formatter: Formatter for writers created by the logger
                       (default: DefaultLogMessageFormatter honoring config.add_prefix)
        """
        self._config = config or LoggerConfig.default()
        self._formatter = formatter or DefaultLogMessageFormatter(add_prefix=self._config.add_prefix)
        self._writers: List[Any] = []
        self._filters: List[Any] = []
        self._lock = threading.Lock()
        self._closed = False
        self._metrics = {"logged": 0, "filtered": 0, "errors": 0}

    @property
    def config(self) -> LoggerConfig:
        return self._config

    @property
    def formatter(self) -> Any:
        return self._formatter

    def add_writer(self, writer: Any) -> None:
        """Add a log writer."""
        self._writers.append(writer)

    def add_console_writer(self, stream=None) -> ConsoleWriter:
        """Add a console writer using the logger's formatter."""
        writer = ConsoleWriter(stream=stream, formatter=self._formatter)
        self.add_writer(writer)
        return writer

    def add_file_writer(self, filepath: str) -> FileWriter:
        """Add a file writer using the logger's formatter."""
        writer = FileWriter(filepath, formatter=self._formatter)
        self.add_writer(writer)
        return writer

    def add_filter(self, log_filter: Any) -> None:
        """
        Add a log filter.

        Args:
            log_filter: Filter instance with should_log(state) method
        """
        self._filters.append(log_filter)

    @staticmethod
    def set_request_id(request_id: Optional[str]) -> None:
        """Set the request id attached to messages logged from this context."""
        _current_request_id.set(request_id)

    @staticmethod
    def get_request_id() -> Optional[str]:
        """Request id of the current context, if any."""
        return _current_request_id.get()

    def is_enabled(self, level: LogLevel) -> bool:
        """Check whether messages at this level would be written."""
        if level >= LogLevel.NONE or self._config.min_level >= LogLevel.NONE:
            return False
        return level >= self._config.min_level

    def log(
        self,
        level: LogLevel,
        template: str,
        *args: Any,
        request_id: Optional[str] = None,
        timestamp: Optional[datetime] = None
    ) -> None:
        """
        Log a message.

        Args:
            level: Severity of the message
            template: Message template with "{name}" properties
            *args: Values for the properties, in template order
            request_id: Overrides the current context's request id
            timestamp: Time of the call (default: now, UTC)
        """
        if self._closed or not self.is_enabled(level):
            return

        state = MessageState(
            template=template,
            arguments=args,
            level=level,
            request_id=request_id if request_id is not None else self.get_request_id(),
        )
        if timestamp is not None:
            state.timestamp = timestamp

        # Apply filters
        for f in self._filters:
            if not f.should_log(state):
                self._metrics["filtered"] += 1
                return

        self._write(state)

    def _write(self, state: MessageState) -> None:
        """Write message state to all writers."""
        with self._lock:
            for writer in self._writers:
                try:
                    writer.write(state)
                except Exception as e:
                    self._metrics["errors"] += 1
                    print(f"Writer error: {e}", file=sys.stderr)
            self._metrics["logged"] += 1

    def trace(self, template: str, *args: Any, **kwargs) -> None:
        """Log trace message."""
        self.log(LogLevel.TRACE, template, *args, **kwargs)

    def debug(self, template: str, *args: Any, **kwargs) -> None:
        """Log debug message."""
        self.log(LogLevel.DEBUG, template, *args, **kwargs)

    def information(self, template: str, *args: Any, **kwargs) -> None:
        """Log informational message."""
        self.log(LogLevel.INFORMATION, template, *args, **kwargs)

    info = information

    def warning(self, template: str, *args: Any, **kwargs) -> None:
        """Log warning message."""
        self.log(LogLevel.WARNING, template, *args, **kwargs)

    warn = warning

    def error(self, template: str, *args: Any, **kwargs) -> None:
        """Log error message."""
        self.log(LogLevel.ERROR, template, *args, **kwargs)

    def critical(self, template: str, *args: Any, **kwargs) -> None:
        """Log critical message."""
        self.log(LogLevel.CRITICAL, template, *args, **kwargs)

    def flush(self):
        """Flush all writers."""
        with self._lock:
            for writer in self._writers:
                if hasattr(writer, 'flush'):
                    writer.flush()

    def shutdown(self):
        """Flush and close all writers."""
        if self._closed:
            return

        self._closed = True
        with self._lock:
            for writer in self._writers:
                if hasattr(writer, 'close'):
                    writer.close()

    def get_metrics(self) -> dict:
        """Get logging metrics."""
        return self._metrics.copy()
