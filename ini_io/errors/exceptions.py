"""
Module contenant les exceptions personnalisées pour ini_io.

Ce module suit le principe SRP en isolant la gestion des exceptions.
Les exceptions du modèle héritent aussi de l'exception standard
correspondante (KeyError, IndexError, ValueError) pour rester
utilisables par du code générique.
"""
from typing import Optional


class ApplicationError(Exception):
    """Exception de base pour toutes les applications."""
    pass


class ConfigurationError(ApplicationError):
    """Exception de base pour toutes les Configurations."""
    pass


class IniError(ApplicationError):
    """Exception de base pour les erreurs du document INI.

    Attributes:
        message: Message d'erreur lisible.
        line_number: Numéro de ligne (1-based) lors d'une analyse de
            texte, None sinon.
    """

    def __init__(self, message: str, line_number: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.line_number = line_number

    def __str__(self) -> str:
        if self.line_number is None:
            return self.message
        return f"Ligne {self.line_number} : {self.message}"


class EntityNotFoundError(IniError, KeyError):
    """Aucune entrée, section ou clé ne correspond au nom demandé."""
    pass


class DuplicateNameError(IniError, ValueError):
    """Deux éléments du même niveau partageraient le même nom."""
    pass


class ElementIndexError(IniError, IndexError):
    """Index en dehors des bornes de la collection."""
    pass


class InvalidValueError(IniError, ValueError):
    """Littéral ou objet ne correspondant à aucun type de valeur."""
    pass


class InvalidArgumentError(IniError, ValueError):
    """Entrée externe mal formée fournie à une conversion."""
    pass
