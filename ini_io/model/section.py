"""Section INI : un bloc ``[nom]`` et ses entrées ordonnées."""

from collections.abc import Iterable, Mapping
from typing import Any, Optional

from ini_io.errors.exceptions import InvalidArgumentError
from ini_io.model.collection import NamedCollection
from ini_io.model.entry import Entry
from ini_io.model.value import Value

SECTION_START = "["
SECTION_END = "]"


def split_lines(text: str) -> list[str]:
    """Découpe un texte en lignes après normalisation des fins de ligne.

    ``\\r\\n`` et ``\\r`` seuls sont ramenés à ``\\n`` avant découpage.
    """
    return text.replace("\r\n", "\n").replace("\r", "\n").split("\n")


def is_section_header(line: str) -> bool:
    """Indique si une ligne brute est un en-tête ``[nom]``."""
    return line.startswith(SECTION_START) and line.endswith(SECTION_END)


class Section(NamedCollection[Entry]):
    """Section nommée contenant des entrées à noms uniques.

    Example:
        >>> section = Section("User", [Entry("Name", "Ann")])
        >>> section.append(Entry("Age", 30))
        >>> print(section.to_text())
        [User]
        Name = "Ann"
        Age = 30
    """

    element_type = Entry
    element_label = "entrée"

    def __init__(
        self,
        name: Optional[str],
        entries: Optional[Iterable[Entry]] = None
    ) -> None:
        """Initialise la section.

        Args:
            name: Nom de la section, None devient une chaîne vide.
            entries: Entrées initiales, dans l'ordre.

        Raises:
            DuplicateNameError: Si deux entrées portent le même nom.
        """
        self._name = ""
        self._owner = None
        self._set_name(name)
        super().__init__(entries)

    @property
    def name(self) -> str:
        return self._name

    def _set_name(self, name: Optional[str]) -> None:
        self._name = "" if name is None else str(name)

    # -- Accès aux valeurs --------------------------------------------

    def get_value(self, name: str, default: Any = None) -> Any:
        """Valeur de l'entrée nommée, ou default si elle est absente."""
        index = self._index_of_name(name)
        if index == -1:
            return default
        return self._items[index].value

    def set_value(self, name: str, value: Any) -> Entry:
        """Remplace la valeur d'une entrée, ou l'ajoute en fin de section.

        Returns:
            L'entrée modifiée ou créée.
        """
        index = self._index_of_name(name)
        if index == -1:
            entry = Entry(name, value)
            self.append(entry)
            return entry
        entry = self._items[index]
        entry.value = value
        return entry

    # -- Conversions ---------------------------------------------------

    @classmethod
    def from_mapping(
        cls, name: Optional[str], mapping: Mapping[str, Any]
    ) -> "Section":
        """Crée une section depuis un dictionnaire {nom: valeur}."""
        if mapping is None:
            raise InvalidArgumentError("Le dictionnaire ne peut être None")
        return cls(name, [Entry(k, v) for k, v in mapping.items()])

    @classmethod
    def parse_text(cls, text: str) -> "Section":
        """Lit un bloc de section isolé.

        La première ligne doit être l'en-tête ; chaque ligne non vide
        suivante doit être une ligne d'entrée.

        Args:
            text: Bloc ``[nom]`` suivi de lignes ``nom = littéral``.

        Returns:
            Nouvelle section.

        Raises:
            InvalidArgumentError: Si le texte est None, vide, sans
                en-tête ou contient une ligne qui n'est pas une entrée.
            InvalidValueError: Si un littéral n'est pas reconnu.
            DuplicateNameError: Si deux entrées portent le même nom.
        """
        if text is None:
            raise InvalidArgumentError("Le texte ne peut être None")
        if text == "":
            raise InvalidArgumentError("Le texte est vide")

        lines = split_lines(text)
        header = lines[0].strip()
        if not is_section_header(header) or len(header) < 2:
            raise InvalidArgumentError(
                f"Le texte ne commence pas par un en-tête de section : "
                f"{lines[0]!r}"
            )

        section = cls(header[1:-1])
        for line in lines[1:]:
            if line.strip():
                section.append(Entry.from_line(line))
        return section

    def to_text(self) -> str:
        """Bloc INI : en-tête puis une ligne par entrée."""
        lines = [f"{SECTION_START}{self._name}{SECTION_END}"]
        lines.extend(entry.to_line() for entry in self._items)
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        """Dictionnaire {nom: contenu Python}, dans l'ordre des entrées."""
        return {entry.name: entry.value.payload for entry in self._items}

    def values(self) -> list[Value]:
        return [entry.value for entry in self._items]

    def copy(self) -> "Section":
        return Section(self._name, [entry.copy() for entry in self._items])

    # -- Comparaison ---------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Section):
            return NotImplemented
        return self._name == other._name and self._items == other._items

    __hash__ = None

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"Section({self._name!r}, {self._items!r})"
