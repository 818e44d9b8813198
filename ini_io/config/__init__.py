"""Module de configuration."""

from ini_io.config.loader import ConfigLoader, FileConfigLoader
from ini_io.config.settings import (
    IniIOSettings,
    LoggingSettings,
    load_settings
)

__all__ = [
    "ConfigLoader",
    "FileConfigLoader",
    "IniIOSettings",
    "LoggingSettings",
    "load_settings"
]
