"""Export et import CSV des tables.

Les valeurs sont écrites sous leur forme littérale ("texte", 'c', 42)
et relues par Value.infer, ce qui conserve leur type.
"""

import csv
import io

from ini_io.errors.exceptions import InvalidArgumentError
from ini_io.model.entry import NAME_COLUMN, VALUE_COLUMN
from ini_io.model.value import Value
from ini_io.tabular.table import DEFAULT_COLUMNS, Table


def table_to_csv(table: Table) -> str:
    """Genere le contenu CSV d'une table.

    Args:
        table: Table à exporter.

    Returns:
        Contenu CSV avec une ligne d'en-tête Name,Value.
    """
    table.validate()
    output = io.StringIO()
    writer = csv.writer(output, lineterminator="\n")
    writer.writerow(DEFAULT_COLUMNS)
    for row in table.rows:
        writer.writerow([
            row[NAME_COLUMN],
            Value.of(row[VALUE_COLUMN]).format(),
        ])
    return output.getvalue()


def table_from_csv(name: str, content: str) -> Table:
    """Relit une table depuis un contenu CSV.

    Args:
        name: Nom de la table.
        content: Contenu CSV avec en-tête Name,Value.

    Returns:
        Table dont les valeurs sont typées.

    Raises:
        InvalidArgumentError: Si l'en-tête est absent ou incomplet.
        InvalidValueError: Si une valeur n'est pas un littéral reconnu.
    """
    if content is None:
        raise InvalidArgumentError("Le contenu CSV ne peut être None")

    reader = csv.DictReader(io.StringIO(content))
    fieldnames = reader.fieldnames or []
    if NAME_COLUMN not in fieldnames or VALUE_COLUMN not in fieldnames:
        raise InvalidArgumentError(
            f"En-tête CSV invalide pour {name!r} : {fieldnames}"
        )

    table = Table(name)
    for row in reader:
        table.add_row({
            NAME_COLUMN: row[NAME_COLUMN],
            VALUE_COLUMN: Value.infer(row[VALUE_COLUMN]),
        })
    return table
