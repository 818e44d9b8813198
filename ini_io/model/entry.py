"""Entrée INI : un nom associé à une valeur typée."""

from collections.abc import Mapping, Sequence
from typing import Any, Optional

from ini_io.errors.exceptions import InvalidArgumentError
from ini_io.model.value import Value, ValueKind

KEY_DELIMITER = "="
NAME_COLUMN = "Name"
VALUE_COLUMN = "Value"


class Entry:
    """Couple nom/valeur appartenant à une section.

    Le nom n'est modifiable qu'à travers la section propriétaire
    (Section.rename) ; la valeur peut être remplacée en bloc. Une entrée
    appartient à au plus une section à la fois.

    Attributes:
        name: Nom de l'entrée (jamais None).
        value: Valeur typée (jamais None).

    Example:
        >>> entry = Entry("Age", 30)
        >>> entry.to_line()
        'Age = 30'
    """

    __hash__ = None  # mutable

    def __init__(self, name: Optional[str], value: Any = None) -> None:
        """Initialise l'entrée.

        Args:
            name: Nom de l'entrée, None devient une chaîne vide.
            value: Value ou objet Python converti par Value.of ;
                None devient un texte vide.

        Raises:
            InvalidValueError: Si la valeur n'est pas convertible.
        """
        self._name = ""
        self._owner = None
        self._set_name(name)
        self._value = Value.of(value)

    @property
    def name(self) -> str:
        return self._name

    def _set_name(self, name: Optional[str]) -> None:
        self._name = "" if name is None else str(name)

    @property
    def value(self) -> Value:
        return self._value

    @value.setter
    def value(self, value: Any) -> None:
        self._value = Value.of(value)

    @property
    def kind(self) -> ValueKind:
        """Type de la valeur courante."""
        return self._value.kind

    # -- Constructeurs alternatifs ------------------------------------

    @classmethod
    def from_line(cls, line: str) -> "Entry":
        """Crée une entrée depuis une ligne ``nom = littéral``.

        Le nom est la partie avant le premier délimiteur, sans les
        espaces qui l'entourent ; le littéral est typé par Value.infer.

        Args:
            line: Ligne d'entrée.

        Returns:
            Nouvelle entrée.

        Raises:
            InvalidArgumentError: Si la ligne ne contient pas de délimiteur.
            InvalidValueError: Si le littéral n'est pas reconnu.
        """
        if line is None or KEY_DELIMITER not in line:
            raise InvalidArgumentError(
                f"La ligne n'est pas une ligne d'entrée : {line!r}"
            )
        name, literal = line.split(KEY_DELIMITER, 1)
        return cls(name.strip(), Value.infer(literal))

    @classmethod
    def from_pair(cls, pair: Sequence[Any]) -> "Entry":
        """Crée une entrée depuis une paire (nom, valeur).

        Raises:
            InvalidArgumentError: Si la séquence n'a pas deux éléments.
        """
        if pair is None or isinstance(pair, str) or len(pair) != 2:
            raise InvalidArgumentError(
                "Une paire doit contenir exactement deux éléments"
            )
        name, value = pair
        if name is None:
            raise InvalidArgumentError("Le nom d'une paire ne peut être None")
        return cls(str(name), value)

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Entry":
        """Crée une entrée depuis une ligne de table (colonnes Name/Value).

        Raises:
            InvalidArgumentError: Si la ligne est None ou incomplète.
        """
        if row is None:
            raise InvalidArgumentError("La ligne de table ne peut être None")
        if NAME_COLUMN not in row or VALUE_COLUMN not in row:
            raise InvalidArgumentError(
                f"La ligne de table doit avoir les colonnes "
                f"{NAME_COLUMN} et {VALUE_COLUMN}"
            )
        return cls(row[NAME_COLUMN], row[VALUE_COLUMN])

    # -- Conversions ---------------------------------------------------

    def to_line(self) -> str:
        """Ligne INI ``nom = littéral``."""
        return f"{self._name} {KEY_DELIMITER} {self._value.format()}"

    def to_pair(self) -> tuple[str, Any]:
        return self._name, self._value.payload

    def to_row(self) -> dict[str, Any]:
        return {NAME_COLUMN: self._name, VALUE_COLUMN: self._value}

    def copy(self) -> "Entry":
        return Entry(self._name, self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entry):
            return NotImplemented
        return self._name == other._name and self._value == other._value

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"Entry({self._name!r}, {self._value!r})"
