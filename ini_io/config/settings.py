"""Paramètres d'exécution de ini_io.

Les paramètres couvrent uniquement les couches externes (fichiers,
export JSON, journalisation) ; le modèle et les codecs n'en dépendent pas.

Exemple de fichier ``ini_io.toml`` :

    encoding = "utf-8"
    json_indent = 4
    trailing_newline = true

    [logging]
    level = "DEBUG"
"""

import codecs
from pathlib import Path
from typing import Union

from pydantic import BaseModel, ValidationError, field_validator

from ini_io.config.loader import ConfigLoader, FileConfigLoader
from ini_io.errors.exceptions import ConfigurationError

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingSettings(BaseModel):
    """Options de journalisation."""

    level: str = "INFO"
    format: str = "%(asctime)s - %(levelname)s - %(message)s"

    model_config = {"extra": "forbid"}

    @field_validator("level")
    @classmethod
    def known_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"Niveau de log inconnu: {v}. Valeurs: {_LOG_LEVELS}"
            )
        return level


class IniIOSettings(BaseModel):
    """Paramètres des opérations sur fichiers et des exports.

    Attributes:
        encoding: Encodage des fichiers INI lus et écrits.
        json_indent: Indentation de l'export JSON (None pour compact).
        trailing_newline: Ajoute un saut de ligne final à l'écriture.
        logging: Options de journalisation.
    """

    encoding: str = "utf-8"
    json_indent: int | None = 2
    trailing_newline: bool = True
    logging: LoggingSettings = LoggingSettings()

    model_config = {"extra": "forbid"}

    @field_validator("encoding")
    @classmethod
    def known_encoding(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Encodage inconnu: {v}")
        return v

    @field_validator("json_indent")
    @classmethod
    def positive_indent(cls, v: int | None) -> int | None:
        if v is not None and v < 0:
            raise ValueError("json_indent doit être positif ou nul")
        return v


def load_settings(
    config_path: Union[str, Path],
    config_loader: ConfigLoader | None = None
) -> IniIOSettings:
    """Charge et valide les paramètres depuis un fichier TOML, JSON ou INI.

    Args:
        config_path: Chemin du fichier de paramètres.
        config_loader: Chargeur injectable (défaut: FileConfigLoader).

    Returns:
        Paramètres validés.

    Raises:
        FileNotFoundError: Si le fichier n'existe pas.
        ConfigurationError: Si le contenu est invalide.
    """
    loader = config_loader or FileConfigLoader()
    try:
        return loader.load(config_path, schema=IniIOSettings)
    except ValidationError as e:
        raise ConfigurationError(
            f"Paramètres invalides dans {config_path}: {e}"
        ) from e
    except ValueError as e:
        raise ConfigurationError(str(e)) from e
