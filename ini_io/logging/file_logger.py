"""Implémentation concrète du logger avec fichier."""

import logging
import os
from typing import Any, Mapping, Optional

from ini_io.logging.base import Logger

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def _logging_options(config: Optional[Any]) -> tuple[str, str]:
    """Extrait le niveau et le format de log d'une configuration.

    Args:
        config: dict {"logging": {"level": ..., "format": ...}},
            IniIOSettings ou None.

    Returns:
        Tuple (niveau, format).
    """
    if config is None:
        return DEFAULT_LOG_LEVEL, DEFAULT_LOG_FORMAT

    # IniIOSettings (modèle pydantic)
    logging_cfg = getattr(config, "logging", None)
    if logging_cfg is not None and not isinstance(config, Mapping):
        return logging_cfg.level, logging_cfg.format

    if isinstance(config, Mapping):
        section = config.get("logging", {})
        return (
            section.get("level", DEFAULT_LOG_LEVEL),
            section.get("format", DEFAULT_LOG_FORMAT),
        )
    return DEFAULT_LOG_LEVEL, DEFAULT_LOG_FORMAT


class FileLogger(Logger):
    """
    Logger qui écrit dans un fichier avec option console.

    Caractéristiques:
    - Logger unique par instance (évite les conflits)
    - Encodage UTF-8 explicite
    - Flush immédiat après chaque log
    - Pas de propagation (évite les logs en double)
    - Support optionnel de la sortie console
    """

    def __init__(
        self,
        log_file: str,
        config: Optional[Any] = None,
        console_output: bool = False
    ) -> None:
        """
        Initialise le logger.

        Args:
            log_file: Chemin du fichier de log
            config: Configuration optionnelle (dict ou IniIOSettings)
                    Clés supportées: logging.level, logging.format
            console_output: Activer la sortie console en plus du fichier
        """
        self.log_file = log_file

        # Créer le répertoire de logs si nécessaire
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir, exist_ok=True)

        log_level_str, log_format = _logging_options(config)
        log_level = getattr(logging, str(log_level_str).upper(), logging.INFO)

        # Créer un logger unique par instance
        self.logger = logging.getLogger(f"ini_io.{log_file}")
        self.logger.setLevel(log_level)

        # Éviter les handlers dupliqués
        if not self.logger.handlers:
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(log_level)
            formatter = logging.Formatter(log_format)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)
            self.handler = file_handler

            if console_output:
                console_handler = logging.StreamHandler()
                console_handler.setLevel(log_level)
                console_handler.setFormatter(formatter)
                self.logger.addHandler(console_handler)
        else:
            self.handler = self.logger.handlers[0]

        # Ne pas propager pour éviter les logs en double
        self.logger.propagate = False

    def _flush(self) -> None:
        """Force l'écriture immédiate sur le disque."""
        if hasattr(self, 'handler') and self.handler:
            self.handler.flush()

    def log_info(self, message: str) -> None:
        """Log un message d'information."""
        self.logger.info(message)
        self._flush()

    def log_warning(self, message: str) -> None:
        """Log un avertissement."""
        self.logger.warning(message)
        self._flush()

    def log_error(self, message: str) -> None:
        """Log une erreur."""
        self.logger.error(message)
        self._flush()

    def close(self) -> None:
        """Ferme et détache les handlers du logger."""
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)
