"""Logger builder pattern"""

from typing import Optional
from pathlib import Path

from runtime_logger.core.logger import Logger
from runtime_logger.core.logger_config import LoggerConfig, LogFormat
from runtime_logger.core.log_level import LogLevel
from runtime_logger.formatters.base_formatter import TimestampFormatter
from runtime_logger.formatters.default_formatter import DefaultLogMessageFormatter


class LoggerBuilder:
    """Builder pattern for logger construction."""

    def __init__(self, config: Optional[LoggerConfig] = None):
        self._config = config or LoggerConfig()
        self._console_enabled = False
        self._console_stream = None
        self._file_path: Optional[Path] = None
        self._timestamp_formatter: Optional[TimestampFormatter] = None
        self._formatter = None
        self._custom_writers = []
        self._custom_filters = []

    @classmethod
    def from_env(cls, environ=None) -> "LoggerBuilder":
        """
        Start from the runtime's environment configuration.

        Console output is enabled, since the runtime captures stdout.

        Example:
            logger = LoggerBuilder.from_env().build()
        """
        return cls(LoggerConfig.from_env(environ)).with_console()

    def with_name(self, name: str) -> "LoggerBuilder":
        """Set logger name."""
        self._config.name = name
        return self

    def with_level(self, level: LogLevel) -> "LoggerBuilder":
        """Set minimum log level."""
        self._config.min_level = level
        return self

    def with_format(self, log_format: LogFormat) -> "LoggerBuilder":
        """Set output layout."""
        self._config.log_format = log_format
        return self

    def with_prefix(self, enabled: bool = True) -> "LoggerBuilder":
        """Enable/disable the timestamp, request id and level prefix."""
        self._config.log_format = LogFormat.DEFAULT if enabled else LogFormat.UNFORMATTED
        return self

    def with_console(self, stream=None) -> "LoggerBuilder":
        """Enable console output (default stream: sys.stdout)."""
        self._console_enabled = True
        self._console_stream = stream
        return self

    def with_file(self, filepath: str) -> "LoggerBuilder":
        """Enable file output."""
        self._file_path = Path(filepath)
        return self

    def with_timestamp_formatter(self, timestamp_formatter: TimestampFormatter) -> "LoggerBuilder":
        """
        Set how the prefix's timestamp field is rendered.

        Example:
            logger = (LoggerBuilder()
                .with_console()
                .with_timestamp_formatter(lambda ts: ts.strftime("%H:%M:%S"))
                .build())
        """
        self._timestamp_formatter = timestamp_formatter
        return self

    def with_formatter(self, formatter) -> "LoggerBuilder":
        """Use a custom formatter for the console and file writers."""
        self._formatter = formatter
        return self

    def with_filter(self, log_filter) -> "LoggerBuilder":
        """
        Add a log filter.

        Args:
            log_filter: Filter instance (BaseFilter subclass)

        Returns:
            Self for method chaining
        """
        self._custom_filters.append(log_filter)
        return self

    def add_writer(self, writer) -> "LoggerBuilder":
        """
        Add a custom writer.

        Args:
            writer: Writer instance

        Returns:
            Self for method chaining
        """
        self._custom_writers.append(writer)
        return self

    def build_formatter(self):
        """Create the formatter shared by the built-in writers."""
        if self._formatter is not None:
            return self._formatter
        return DefaultLogMessageFormatter(
            add_prefix=self._config.add_prefix,
            timestamp_formatter=self._timestamp_formatter,
        )

    def build(self) -> Logger:
        """Build and return configured logger."""
        logger = Logger(self._config, formatter=self.build_formatter())

        # Add console writer
        if self._console_enabled and self._config.console_output:
            logger.add_console_writer(self._console_stream)

        # Add file writer
        if self._file_path:
            logger.add_file_writer(str(self._file_path))

        # Add custom writers
        for writer in self._custom_writers:
            logger.add_writer(writer)

        # Add custom filters
        for log_filter in self._custom_filters:
            logger.add_filter(log_filter)

        return logger
