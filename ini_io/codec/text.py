"""Lecture et écriture du format texte INI.

Format reconnu :

    [SectionName]
    EntryName = "text value"
    EntryName2 = 'c'
    EntryName3 = 42

La lecture est une passe unique, ligne par ligne :
- une ligne qui commence par ``[`` et finit par ``]`` ouvre une section ;
- une ligne contenant ``=`` dans une section ouverte est une entrée ;
- toute autre ligne (vide, texte libre, entrée hors section) est ignorée.

L'analyse est tout ou rien : la première erreur l'interrompt.
"""

from typing import Optional

from ini_io.errors.exceptions import IniError, InvalidArgumentError
from ini_io.model.document import Document
from ini_io.model.entry import KEY_DELIMITER, Entry
from ini_io.model.section import Section, is_section_header, split_lines

SECTION_SEPARATOR = "\n\n"


def _with_line(error: IniError, line_number: int) -> IniError:
    return type(error)(error.message, line_number=line_number)


def _commit(
    document: Document, section: Optional[Section], header_line: int
) -> None:
    """Ajoute la section en cours au document."""
    if section is None:
        return
    try:
        document.append(section)
    except IniError as e:
        raise _with_line(e, header_line) from e


def parse_text(text: str) -> Document:
    """Analyse un texte INI.

    Args:
        text: Contenu INI complet.

    Returns:
        Document chargé (loaded à True).

    Raises:
        InvalidArgumentError: Si text est None.
        InvalidValueError: Si un littéral n'est pas reconnu.
        DuplicateNameError: Si une section ou une entrée est en double.
    """
    if text is None:
        raise InvalidArgumentError("Le texte INI ne peut être None")

    document = Document()
    current: Optional[Section] = None
    header_line = 0

    for line_number, line in enumerate(split_lines(text), start=1):
        if is_section_header(line):
            _commit(document, current, header_line)
            current = Section(line[1:-1])
            header_line = line_number
        elif KEY_DELIMITER in line and current is not None:
            try:
                current.append(Entry.from_line(line))
            except IniError as e:
                raise _with_line(e, line_number) from e

    _commit(document, current, header_line)
    document._loaded = True
    return document


def render_text(document: Document) -> str:
    """Produit le texte INI d'un document.

    Les sections sont séparées par une ligne vide ; le texte complet
    est débarrassé des espaces de début et de fin.
    """
    return SECTION_SEPARATOR.join(
        section.to_text() for section in document
    ).strip()
