"""Interface abstraite pour la lecture/écriture de fichiers INI."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

from ini_io.model.document import Document


class DocumentFileManager(ABC):
    """Interface pour la gestion de fichiers INI.

    Les opérations sont bloquantes et portent sur le fichier entier :
    lecture complète puis analyse, ou rendu complet puis écriture.
    """

    @abstractmethod
    def load(self, path: Union[str, Path]) -> Document:
        """Lit un fichier INI et retourne le document.

        Args:
            path: Chemin du fichier INI.

        Returns:
            Document chargé.

        Raises:
            FileNotFoundError: Si le fichier n'existe pas.
        """
        pass

    @abstractmethod
    def save(self, path: Union[str, Path], document: Document) -> None:
        """Écrit un document dans un fichier INI (contenu écrasé).

        Args:
            path: Chemin du fichier de destination.
            document: Document à écrire.
        """
        pass
