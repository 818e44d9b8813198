"""
    ConsoleErrorHandler (générique, configurable)
"""
import sys
from typing import TextIO

from ini_io.errors.base import ErrorHandler
from ini_io.errors.exceptions import (ApplicationError,
                                      ConfigurationError,
                                      DuplicateNameError,
                                      EntityNotFoundError,
                                      InvalidArgumentError,
                                      InvalidValueError)


class ConsoleErrorHandler(ErrorHandler):
    """Handler pour afficher les erreurs dans la console.

    Distingue les erreurs connues (ApplicationError et ses dérivées)
    des erreurs inattendues, et affiche un message de solution
    adapté au type d'erreur.
    """

    def __init__(
        self,
        base_error_type: type[Exception] = ApplicationError,
        solutions: dict[type[Exception], str] | None = None,
        stream: TextIO | None = None
    ) -> None:
        """Initialise le handler console.

        Args:
            base_error_type: Classe de base pour distinguer erreurs
                connues/inconnues (défaut: ApplicationError).
            solutions: Dictionnaire {TypeException: "message solution"}
                qui complète ou remplace les solutions par défaut.
            stream: Flux de sortie (défaut: sys.stderr).
        """
        self.base_error_type = base_error_type
        self.solutions = solutions or {}
        self.stream = stream

    def _print(self, message: str) -> None:
        print(message, file=self.stream or sys.stderr)

    def handle(self, error: Exception) -> None:
        """Affiche l'erreur dans la console avec des messages utilisateur.

        Args:
            error: L'exception à afficher.
        """
        if isinstance(error, (self.base_error_type, FileNotFoundError)):
            self._handle_known_error(error)
        else:
            self._handle_unknown_error(error)

    def _solution_for(self, error: Exception) -> str:
        """Choisit la suggestion la plus spécifique pour une erreur."""
        for error_type, solution in self.solutions.items():
            if isinstance(error, error_type):
                return solution

        if isinstance(error, FileNotFoundError):
            return "Vérifiez le chemin du fichier INI."
        if isinstance(error, InvalidValueError):
            return ("Les valeurs doivent être \"texte\", 'c', "
                    "un entier ou un nombre décimal.")
        if isinstance(error, DuplicateNameError):
            return "Les noms de sections et d'entrées doivent être uniques."
        if isinstance(error, EntityNotFoundError):
            return "Vérifiez le nom de la section ou de l'entrée."
        if isinstance(error, InvalidArgumentError):
            return "Vérifiez le format des données converties."
        if isinstance(error, ConfigurationError):
            return "Vérifiez votre fichier de configuration."
        return "Voir les suggestions ci-dessus."

    def _handle_known_error(self, error: Exception) -> None:
        """Gère les erreurs connues du projet.

        Affiche le type et le message de l'erreur, suivi d'une
        suggestion de solution adaptée via isinstance.

        Args:
            error: L'exception métier à traiter.
        """
        self._print(f"\n🛑 {type(error).__name__}: {str(error)}")
        self._print(f"\n🔧 Solution : {self._solution_for(error)}")

    def _handle_unknown_error(self, error: Exception) -> None:
        """Gère les erreurs inattendues.

        Args:
            error: L'exception non prévue à afficher.
        """
        self._print(f"\n💥 Erreur inattendue: {str(error)}")
        self._print(f"Type: {type(error).__name__}")
        self._print(
            "\n📋 Cela peut être un bug. "
            "Veuillez ouvrir une issue avec ces informations."
        )
