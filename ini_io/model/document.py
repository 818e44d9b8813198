"""Document INI : la racine ordonnée des sections."""

from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any, Optional, Union

from ini_io.errors.exceptions import InvalidArgumentError
from ini_io.model.collection import NamedCollection
from ini_io.model.section import Section


class Document(NamedCollection[Section]):
    """Document INI : sections à noms uniques, dans l'ordre du fichier.

    Attributes:
        loaded: True une fois un chargement (texte, fichier ou
            collection initiale) terminé, False pendant un chargement
            ou avant tout chargement. N'interdit aucune opération.

    Example:
        >>> document = Document.parse_text('[User]\\nName = "Ann"\\nAge = 30')
        >>> document["User"]["Age"].value
        Value.int32(30)
    """

    element_type = Section
    element_label = "section"

    def __init__(self, sections: Optional[Iterable[Section]] = None) -> None:
        """Initialise le document.

        Args:
            sections: Sections initiales ; si fourni, le document est
                considéré comme chargé.

        Raises:
            DuplicateNameError: Si deux sections portent le même nom.
        """
        self._loaded = False
        super().__init__(sections)
        self._loaded = sections is not None

    @property
    def loaded(self) -> bool:
        return self._loaded

    def _replace_with(self, other: "Document") -> None:
        sections = other._items
        other._items = []
        for section in sections:
            self._attach(section)
        self._items = sections
        self._loaded = True

    def _begin_load(self) -> None:
        self._loaded = False
        self.clear()

    # -- Chargement ----------------------------------------------------

    def read_text(self, text: str) -> None:
        """Remplace le contenu du document par le texte INI analysé.

        L'analyse est tout ou rien : en cas d'échec le document reste
        vide et non chargé.

        Raises:
            InvalidValueError: Si un littéral n'est pas reconnu.
            DuplicateNameError: Si une section ou une entrée est en double.
        """
        from ini_io.codec.text import parse_text

        self._begin_load()
        self._replace_with(parse_text(text))

    def read_file(self, file_path: Union[str, Path]) -> None:
        """Remplace le contenu du document par celui d'un fichier INI.

        Raises:
            FileNotFoundError: Si le fichier n'existe pas.
        """
        from ini_io.fileio.manager import IniFileManager

        self._begin_load()
        self._replace_with(IniFileManager().load(file_path))

    def save_file(self, file_path: Union[str, Path]) -> None:
        """Écrit le document dans un fichier (contenu écrasé)."""
        from ini_io.fileio.manager import IniFileManager

        IniFileManager().save(file_path, self)

    @classmethod
    def parse_text(cls, text: str) -> "Document":
        """Crée un document depuis un texte INI."""
        document = cls()
        document.read_text(text)
        return document

    @classmethod
    def from_file(cls, file_path: Union[str, Path]) -> "Document":
        """Crée un document depuis un fichier INI."""
        document = cls()
        document.read_file(file_path)
        return document

    @classmethod
    def from_dict(cls, data: Mapping[str, Mapping[str, Any]]) -> "Document":
        """Crée un document depuis {section: {entrée: valeur}}."""
        if data is None:
            raise InvalidArgumentError("Le dictionnaire ne peut être None")
        return cls(
            Section.from_mapping(name, entries)
            for name, entries in data.items()
        )

    # -- Conversions ---------------------------------------------------

    def to_text(self) -> str:
        from ini_io.codec.text import render_text

        return render_text(self)

    def to_json(self, indent: Optional[int] = 2) -> str:
        from ini_io.codec.json_export import render_json

        return render_json(self, indent=indent)

    def to_dict(self) -> dict[str, dict[str, Any]]:
        return {section.name: section.to_dict() for section in self._items}

    def copy(self) -> "Document":
        return Document(section.copy() for section in self._items)

    def __str__(self) -> str:
        return self.to_text()
