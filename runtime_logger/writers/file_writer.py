"""File writer"""

from pathlib import Path
from runtime_logger.core.message_state import MessageState
from runtime_logger.formatters.default_formatter import DefaultLogMessageFormatter


class FileWriter:
    """Write formatted log lines to a file."""

    def __init__(
        self,
        filepath: str,
        mode: str = "a",
        encoding: str = "utf-8",
        formatter=None
    ):
        """
        Initialize file writer.

        Args:
            filepath: Path to log file
            mode: File open mode (default: 'a' for append)
            encoding: File encoding (default: 'utf-8')
            formatter: Message formatter (default: prefixed DefaultLogMessageFormatter)
        """
        self.filepath = Path(filepath)
        self.mode = mode
        self.encoding = encoding
        self.formatter = formatter or DefaultLogMessageFormatter()
        self._file = None
        self._open()

    def _open(self):
        """Open log file."""
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        self._file = open(self.filepath, self.mode, encoding=self.encoding)

    def write(self, state: MessageState):
        """Write message state to file."""
        if self._file:
            self._file.write(self.formatter.format(state) + "\n")

    def flush(self):
        """Flush file buffer."""
        if self._file:
            self._file.flush()

    def close(self):
        """Close file."""
        if self._file:
            self._file.close()
            self._file = None
