"""Interfaces abstraites pour la gestion des erreurs de ini_io."""

import sys
from abc import ABC, abstractmethod

from ini_io.errors.exceptions import ApplicationError


class ErrorHandler(ABC):
    """Interface de base pour les handlers d'erreurs.

    Chaque implémentation concrète définit une stratégie de traitement
    (affichage console, journalisation, etc.) d'une erreur remontée
    par le modèle, les codecs ou les opérations sur fichiers.
    """

    @abstractmethod
    def handle(self, error: Exception) -> None:
        """Traite une erreur.

        Args:
            error: L'exception à traiter.
        """
        pass


class ErrorHandlerChain():
    """Diffuse les erreurs à tous les handlers enregistrés.

    Chaque erreur est transmise à tous les handlers dans l'ordre
    d'ajout (ex: console puis logger).
    """

    def __init__(self, *handlers: ErrorHandler) -> None:
        """Initialise la chaîne.

        Args:
            *handlers: Handlers initiaux, dans l'ordre de diffusion.
        """
        self.handlers: list[ErrorHandler] = list(handlers)

    def add_handler(self, handler: ErrorHandler) -> None:
        """Ajoute un handler à la chaîne.

        Args:
            handler: Le handler d'erreurs à ajouter.
        """
        self.handlers.append(handler)

    def handle(self, error: Exception) -> None:
        """Fait passer l'erreur à travers tous les handlers.

        Args:
            error: L'exception à diffuser.
        """
        for handler in self.handlers:
            handler.handle(error)

    @staticmethod
    def exit_code_for(error: Exception) -> int:
        """Code de sortie associé à une erreur.

        Returns:
            1 pour une erreur connue du projet ou un fichier absent,
            2 pour une erreur inattendue.
        """
        if isinstance(error, (ApplicationError, FileNotFoundError)):
            return 1
        return 2

    def handle_and_exit(self, error: Exception) -> None:
        """Gère l'erreur et termine le programme.

        Args:
            error: L'exception à traiter avant la sortie.
        """
        self.handle(error)
        sys.exit(self.exit_code_for(error))
