"""Module de logging."""

from ini_io.logging.base import Logger, NullLogger
from ini_io.logging.file_logger import FileLogger

__all__ = [
    "Logger",
    "NullLogger",
    "FileLogger",
]
