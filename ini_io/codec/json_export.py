"""Export JSON d'un document INI.

Export à sens unique : chaque valeur est convertie en chaîne, le type
d'origine n'est pas conservé.

    {
      "Section": {
        "Entry": "value"
      }
    }
"""

import json
from typing import Optional

from ini_io.model.document import Document


def document_to_json_object(document: Document) -> dict[str, dict[str, str]]:
    """Dictionnaire {section: {entrée: valeur en texte}}."""
    return {
        section.name: {entry.name: str(entry.value) for entry in section}
        for section in document
    }


def render_json(document: Document, indent: Optional[int] = 2) -> str:
    """Produit le texte JSON d'un document.

    Args:
        document: Document à exporter.
        indent: Indentation (None pour une sortie compacte).

    Returns:
        Contenu JSON.
    """
    return json.dumps(
        document_to_json_object(document),
        indent=indent,
        ensure_ascii=False,
    )
