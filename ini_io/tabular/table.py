"""Représentation tabulaire des sections.

Chaque section correspond à une table à deux colonnes (Name, Value) et
chaque entrée à une ligne. Un document correspond à une liste de tables.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from ini_io.errors.exceptions import InvalidArgumentError
from ini_io.model.document import Document
from ini_io.model.entry import NAME_COLUMN, VALUE_COLUMN, Entry
from ini_io.model.section import Section

DEFAULT_COLUMNS = (NAME_COLUMN, VALUE_COLUMN)


@dataclass
class Table:
    """Table nommée de lignes {colonne: valeur}.

    Attributes:
        name: Nom de la table (nom de la section).
        columns: Noms des colonnes.
        rows: Lignes, chacune un dictionnaire indexé par colonne.
    """

    name: str
    columns: tuple[str, ...] = DEFAULT_COLUMNS
    rows: list[dict[str, Any]] = field(default_factory=list)

    def add_row(self, row: Mapping[str, Any]) -> None:
        """Ajoute une ligne après vérification des colonnes.

        Raises:
            InvalidArgumentError: Si une colonne est inconnue.
        """
        unknown = set(row) - set(self.columns)
        if unknown:
            raise InvalidArgumentError(
                f"Colonnes inconnues pour la table {self.name!r} : "
                f"{sorted(unknown)}"
            )
        self.rows.append(dict(row))

    def validate(self) -> None:
        """Vérifie que la table porte les colonnes Name et Value.

        Raises:
            InvalidArgumentError: Si une colonne requise manque.
        """
        missing = [c for c in DEFAULT_COLUMNS if c not in self.columns]
        if missing:
            raise InvalidArgumentError(
                f"La table {self.name!r} n'a pas les colonnes {missing}"
            )

    def __len__(self) -> int:
        return len(self.rows)


def section_to_table(section: Section) -> Table:
    """Convertit une section en table (une ligne par entrée)."""
    table = Table(section.name)
    for entry in section:
        table.add_row(entry.to_row())
    return table


def section_from_table(table: Table) -> Section:
    """Convertit une table en section.

    Raises:
        InvalidArgumentError: Si la table est None ou mal formée.
        DuplicateNameError: Si deux lignes portent le même nom.
    """
    if table is None:
        raise InvalidArgumentError("La table ne peut être None")
    table.validate()
    return Section(table.name, [Entry.from_row(row) for row in table.rows])


def document_to_tables(document: Document) -> list[Table]:
    return [section_to_table(section) for section in document]


def document_from_tables(tables: Iterable[Table]) -> Document:
    """Convertit une collection de tables en document chargé.

    Raises:
        InvalidArgumentError: Si tables est None ou une table mal formée.
        DuplicateNameError: Si deux tables portent le même nom.
    """
    if tables is None:
        raise InvalidArgumentError("La collection de tables ne peut être None")
    return Document(section_from_table(table) for table in tables)
