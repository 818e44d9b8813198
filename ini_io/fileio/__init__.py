"""Opérations sur fichiers INI (lecture, écriture, export JSON)."""

from ini_io.fileio.base import DocumentFileManager
from ini_io.fileio.manager import (
    IniFileManager,
    load_from_file,
    save_to_file,
)

__all__ = [
    "DocumentFileManager",
    "IniFileManager",
    "load_from_file",
    "save_to_file",
]
