"""Lecture des fichiers de paramètres de ini_io.

Trois formats sont acceptés, choisis d'après l'extension :

    ini_io.toml   encoding = "latin-1"
    ini_io.json   {"encoding": "latin-1"}
    ini_io.ini    [ini_io]
                  encoding = "latin-1"

Un fichier ``.ini`` est lu par le codec du projet : ses valeurs gardent
leur type, et la section ``[ini_io]`` porte les paramètres de premier
niveau.
"""

import json
import tomllib
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Callable, Dict, Union

from pydantic import BaseModel

ROOT_SECTION = "ini_io"


def _read_toml(path: Path) -> Dict[str, Any]:
    with open(path, "rb") as f:
        return tomllib.load(f)


def _read_json(path: Path) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _read_ini(path: Path) -> Dict[str, Any]:
    """Section -> sous-dictionnaire, sauf [ini_io] remontée à la racine."""
    from ini_io.codec.text import parse_text

    with open(path, "r", encoding="utf-8") as f:
        raw_config = parse_text(f.read()).to_dict()

    root = raw_config.pop(ROOT_SECTION, {})
    return {**raw_config, **root}


_READERS: Dict[str, Callable[[Path], Dict[str, Any]]] = {
    ".toml": _read_toml,
    ".json": _read_json,
    ".ini": _read_ini,
}


class ConfigLoader(ABC):
    """Source des paramètres, injectable dans load_settings."""

    @abstractmethod
    def load(
        self,
        config_path: Union[str, Path],
        schema: type | None = None
    ) -> Union[Dict[str, Any], Any]:
        """Lit un fichier de paramètres.

        Args:
            config_path: Fichier .toml, .json ou .ini.
            schema: Modèle pydantic appliqué au contenu lu, ou None
                pour obtenir le dictionnaire brut.

        Returns:
            Dictionnaire brut ou instance de schema.
        """


class FileConfigLoader(ConfigLoader):
    """Lit les paramètres depuis un fichier TOML, JSON ou INI typé."""

    def load(
        self,
        config_path: Union[str, Path],
        schema: type | None = None
    ) -> Union[Dict[str, Any], Any]:
        """Lit un fichier de paramètres.

        Raises:
            FileNotFoundError: Si le fichier n'existe pas.
            ValueError: Si l'extension n'est ni .toml, ni .json, ni .ini.
            IniError: Si un fichier .ini est mal formé.
            TypeError: Si schema n'est pas un modèle pydantic.
        """
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(
                f"Fichier de configuration non trouvé: {path}"
            )

        reader = _READERS.get(path.suffix.lower())
        if reader is None:
            raise ValueError(
                f"Extension non supportée: {path.suffix}. "
                "Utilisez .toml, .json ou .ini"
            )

        raw_config = reader(path)
        if schema is None:
            return raw_config
        return self._validate_with_schema(raw_config, schema)

    @staticmethod
    def _validate_with_schema(data: Dict[str, Any], schema: type) -> Any:
        if not (isinstance(schema, type) and issubclass(schema, BaseModel)):
            raise TypeError(
                f"Le schema doit être une sous-classe de "
                f"pydantic.BaseModel, reçu: {schema}"
            )
        return schema.model_validate(data)
