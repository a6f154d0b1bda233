"""Writers module - Log output sinks"""

from runtime_logger.writers.console_writer import ConsoleWriter
from runtime_logger.writers.file_writer import FileWriter

__all__ = ["ConsoleWriter", "FileWriter"]
