"""Modèle en mémoire d'un document INI.

Trois niveaux imbriqués, chacun propriétaire exclusif du suivant :
- Document : sections ordonnées à noms uniques
- Section : entrées ordonnées à noms uniques
- Entry : un nom et une Value typée
"""

from ini_io.model.collection import NamedCollection
from ini_io.model.document import Document
from ini_io.model.entry import Entry, KEY_DELIMITER
from ini_io.model.section import (
    Section,
    SECTION_END,
    SECTION_START,
    is_section_header,
)
from ini_io.model.value import Value, ValueKind

__all__ = [
    "NamedCollection",
    "Document",
    "Section",
    "Entry",
    "Value",
    "ValueKind",
    "KEY_DELIMITER",
    "SECTION_START",
    "SECTION_END",
    "is_section_header",
]
