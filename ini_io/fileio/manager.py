"""Gestionnaire de fichiers INI.

Ce module fournit IniFileManager, une implémentation journalisée
pour la lecture, l'écriture et l'export JSON de documents INI.
"""

from pathlib import Path
from typing import Optional, Union

from ini_io.codec.json_export import render_json
from ini_io.codec.text import parse_text, render_text
from ini_io.config.settings import IniIOSettings
from ini_io.errors.exceptions import IniError
from ini_io.fileio.base import DocumentFileManager
from ini_io.logging.base import Logger, NullLogger
from ini_io.model.document import Document


class IniFileManager(DocumentFileManager):
    """Gestionnaire de fichiers INI.

    Attributes:
        logger: Instance de Logger pour tracer les opérations.
        settings: Paramètres (encodage, saut de ligne final, JSON).

    Example:
        >>> from ini_io import FileLogger
        >>> manager = IniFileManager(FileLogger("/tmp/ini_io.log"))
        >>> document = manager.load(Path("app.ini"))
        >>> print(document["User"]["Name"].value)
    """

    def __init__(
        self,
        logger: Optional[Logger] = None,
        settings: Optional[IniIOSettings] = None
    ) -> None:
        """Initialise le gestionnaire.

        Args:
            logger: Logger optionnel (défaut: NullLogger).
            settings: Paramètres optionnels (défaut: IniIOSettings()).
        """
        self.logger = logger or NullLogger()
        self.settings = settings or IniIOSettings()

    def load(self, path: Union[str, Path]) -> Document:
        """Lit un fichier INI et retourne le document.

        Args:
            path: Chemin du fichier INI.

        Returns:
            Document chargé.

        Raises:
            FileNotFoundError: Si le fichier n'existe pas.
            InvalidValueError: Si un littéral n'est pas reconnu.
            DuplicateNameError: Si une section ou une entrée est en double.
        """
        path = Path(path)
        if not path.is_file():
            self.logger.log_error(f"Fichier non trouvé : {path}")
            raise FileNotFoundError(f"Fichier non trouvé : {path}")

        with open(path, "r", encoding=self.settings.encoding) as f:
            text = f.read()

        try:
            document = parse_text(text)
        except IniError as e:
            self.logger.log_error(f"Erreur lors de la lecture de {path}: {e}")
            raise

        self.logger.log_info(
            f"Fichier {path} lu avec succès ({len(document)} section(s))."
        )
        return document

    def save(self, path: Union[str, Path], document: Document) -> None:
        """Écrit un document dans un fichier INI.

        Le fichier est écrasé ; un saut de ligne final est ajouté
        si settings.trailing_newline est vrai.

        Args:
            path: Chemin du fichier de destination.
            document: Document à écrire.
        """
        path = Path(path)
        content = render_text(document)
        if self.settings.trailing_newline:
            content += "\n"

        self._write(path, content)
        self.logger.log_info(f"Fichier {path} écrit avec succès.")

    def export_json(self, path: Union[str, Path], document: Document) -> None:
        """Écrit l'export JSON d'un document.

        Args:
            path: Chemin du fichier JSON.
            document: Document à exporter.
        """
        path = Path(path)
        content = render_json(document, indent=self.settings.json_indent)
        self._write(path, content + "\n")
        self.logger.log_info(f"Export JSON {path} écrit avec succès.")

    def _write(self, path: Path, content: str) -> None:
        try:
            with open(path, "w", encoding=self.settings.encoding,
                      newline="\n") as f:
                f.write(content)
        except OSError as e:
            self.logger.log_error(
                f"Erreur lors de l'écriture du fichier {path}: {e}"
            )
            raise


def load_from_file(
    path: Union[str, Path], logger: Optional[Logger] = None
) -> Document:
    """Charge un fichier INI (fonction utilitaire).

    Utilise l'implémentation IniFileManager par défaut.

    Raises:
        FileNotFoundError: Si le fichier n'existe pas.
    """
    return IniFileManager(logger).load(path)


def save_to_file(
    path: Union[str, Path],
    document: Document,
    logger: Optional[Logger] = None
) -> None:
    """Écrit un document dans un fichier INI (fonction utilitaire)."""
    IniFileManager(logger).save(path, document)
