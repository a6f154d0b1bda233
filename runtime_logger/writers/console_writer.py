"""Console writer"""

import sys
from runtime_logger.core.message_state import MessageState
from runtime_logger.formatters.default_formatter import DefaultLogMessageFormatter


class ConsoleWriter:
    """Write formatted log lines to a console stream."""

    def __init__(self, stream=None, formatter=None):
        """
        Initialize console writer.

        Args:
            stream: Output stream (default: sys.stdout, captured by the runtime)
            formatter: Message formatter (default: prefixed DefaultLogMessageFormatter)
        """
        self.stream = stream or sys.stdout
        self.formatter = formatter or DefaultLogMessageFormatter()

    def write(self, state: MessageState):
        """Write message state to console."""
        self.stream.write(self.formatter.format(state) + "\n")
        self.stream.flush()

    def flush(self):
        """Flush stream."""
        self.stream.flush()

    def close(self):
        """Flush; the stream itself is not owned by the writer."""
        self.flush()
