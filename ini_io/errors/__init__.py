"""Module de gestion des erreurs."""

from ini_io.errors.base import ErrorHandler, ErrorHandlerChain
from ini_io.errors.exceptions import (ApplicationError,
                                      ConfigurationError,
                                      IniError,
                                      EntityNotFoundError,
                                      DuplicateNameError,
                                      ElementIndexError,
                                      InvalidValueError,
                                      InvalidArgumentError)
from ini_io.errors.console_handler import ConsoleErrorHandler
from ini_io.errors.logger_handler import LoggerErrorHandler


__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "IniError",
    "EntityNotFoundError",
    "DuplicateNameError",
    "ElementIndexError",
    "InvalidValueError",
    "InvalidArgumentError",
    "ErrorHandler",
    "ConsoleErrorHandler",
    "LoggerErrorHandler",
    "ErrorHandlerChain",
]
