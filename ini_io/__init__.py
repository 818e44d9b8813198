"""
ini-io - Modèle de document INI typé et conversions.

Modules disponibles:
- model: Document, Section, Entry et Value (types déduits des littéraux)
- codec: Lecture/écriture du texte INI et export JSON
- tabular: Tables Name/Value et CSV
- fileio: Lecture/écriture de fichiers (IniFileManager)
- config: Chargement des paramètres (TOML, JSON, INI, validation pydantic)
- logging: Gestion des logs (Logger, FileLogger)
- errors: Exceptions et handlers d'erreurs
"""

__version__ = "1.0.0"

from ini_io.logging import Logger, NullLogger, FileLogger
from ini_io.errors import (
    ApplicationError,
    ConfigurationError,
    IniError,
    EntityNotFoundError,
    DuplicateNameError,
    ElementIndexError,
    InvalidValueError,
    InvalidArgumentError,
    ErrorHandler,
    ErrorHandlerChain,
    ConsoleErrorHandler,
    LoggerErrorHandler,
)
from ini_io.model import (
    NamedCollection,
    Document,
    Section,
    Entry,
    Value,
    ValueKind,
)
from ini_io.codec import parse_text, render_text, render_json
from ini_io.tabular import (
    Table,
    section_to_table,
    section_from_table,
    document_to_tables,
    document_from_tables,
    table_to_csv,
    table_from_csv,
)
from ini_io.config import (
    ConfigLoader,
    FileConfigLoader,
    IniIOSettings,
    load_settings,
)
from ini_io.fileio import (
    DocumentFileManager,
    IniFileManager,
    load_from_file,
    save_to_file,
)

__all__ = [
    # Logging
    "Logger",
    "NullLogger",
    "FileLogger",
    # Errors - Exceptions
    "ApplicationError",
    "ConfigurationError",
    "IniError",
    "EntityNotFoundError",
    "DuplicateNameError",
    "ElementIndexError",
    "InvalidValueError",
    "InvalidArgumentError",
    # Errors - Handlers
    "ErrorHandler",
    "ErrorHandlerChain",
    "ConsoleErrorHandler",
    "LoggerErrorHandler",
    # Model
    "NamedCollection",
    "Document",
    "Section",
    "Entry",
    "Value",
    "ValueKind",
    # Codec
    "parse_text",
    "render_text",
    "render_json",
    # Tabular
    "Table",
    "section_to_table",
    "section_from_table",
    "document_to_tables",
    "document_from_tables",
    "table_to_csv",
    "table_from_csv",
    # Config
    "ConfigLoader",
    "FileConfigLoader",
    "IniIOSettings",
    "load_settings",
    # FileIO
    "DocumentFileManager",
    "IniFileManager",
    "load_from_file",
    "save_to_file",
]
