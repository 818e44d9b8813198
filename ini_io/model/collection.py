"""Collection ordonnée d'éléments nommés, à noms uniques.

Ce module fournit NamedCollection, la base commune de Section (entrées)
et de Document (sections). L'ordre d'insertion est significatif et les
noms sont uniques, comparés de façon exacte (sensible à la casse).

Toute opération refusée laisse la collection inchangée. Un élément
n'appartient qu'à une seule collection à la fois : il en est détaché
lorsqu'il est retiré ou remplacé.
"""

from collections.abc import Iterable, Iterator
from typing import Any, Generic, Optional, Protocol, TypeVar, Union

from ini_io.errors.exceptions import (DuplicateNameError,
                                      ElementIndexError,
                                      EntityNotFoundError,
                                      InvalidArgumentError)


class Named(Protocol):
    """Élément possédant un nom renommable par sa collection."""

    @property
    def name(self) -> str: ...

    _owner: Optional[Any]

    def _set_name(self, name: Optional[str]) -> None: ...


E = TypeVar("E", bound=Named)


class NamedCollection(Generic[E]):
    """Séquence ordonnée d'éléments dont les noms sont uniques.

    Les éléments sont accessibles par index (int) ou par nom (str).
    L'itération parcourt un instantané : modifier la collection pendant
    un parcours n'affecte pas le parcours en cours.

    Attributes:
        element_type: Type des éléments acceptés (défini par les
            sous-classes).
        element_label: Libellé utilisé dans les messages d'erreur.
    """

    element_type: type = object
    element_label: str = "élément"

    __hash__ = None  # mutable

    def __init__(self, items: Optional[Iterable[E]] = None) -> None:
        self._items: list[E] = []
        if items is not None:
            self.extend(items)

    # -- Vérifications -------------------------------------------------

    def _check_element(self, item: Any) -> None:
        if not isinstance(item, self.element_type):
            raise InvalidArgumentError(
                f"{type(self).__name__} n'accepte que des "
                f"{self.element_type.__name__}, reçu {type(item).__name__}"
            )
        owner = item._owner
        if owner is not None and owner is not self:
            raise InvalidArgumentError(
                f"'{item.name}' appartient déjà à une autre "
                f"{type(self).__name__}"
            )

    def _check_index(self, index: Any, upper: int) -> int:
        if isinstance(index, bool) or not isinstance(index, int):
            raise InvalidArgumentError(f"Index invalide : {index!r}")
        if index < 0 or index >= upper:
            raise ElementIndexError(
                f"Index {index} hors limites (taille {len(self._items)})"
            )
        return index

    def _attach(self, item: E) -> None:
        item._owner = self

    @staticmethod
    def _detach(item: E) -> E:
        item._owner = None
        return item

    def _duplicate(self, name: str) -> DuplicateNameError:
        return DuplicateNameError(
            f"Le nom de {self.element_label} '{name}' existe déjà"
        )

    def _not_found(self, key: Any) -> EntityNotFoundError:
        return EntityNotFoundError(
            f"Aucun(e) {self.element_label} nommé(e) {key!r}"
        )

    def _resolve(self, key: Union[int, str]) -> int:
        """Convertit un index ou un nom en position.

        Raises:
            ElementIndexError: Si l'index est hors limites.
            EntityNotFoundError: Si le nom est inconnu.
        """
        if isinstance(key, str):
            index = self._index_of_name(key)
            if index == -1:
                raise self._not_found(key)
            return index
        return self._check_index(key, len(self._items))

    def _index_of_name(self, name: str) -> int:
        for i, item in enumerate(self._items):
            if item.name == name:
                return i
        return -1

    # -- Lecture -------------------------------------------------------

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[E]:
        return iter(list(self._items))

    def __getitem__(self, key: Union[int, str]) -> E:
        return self._items[self._resolve(key)]

    def __contains__(self, item: object) -> bool:
        return self.index_of(item) != -1

    def index_of(self, item: object) -> int:
        """Position d'un élément (égalité structurelle) ou d'un nom.

        Returns:
            Index trouvé, ou -1 si absent.
        """
        if isinstance(item, str):
            return self._index_of_name(item)
        for i, current in enumerate(self._items):
            if current == item:
                return i
        return -1

    def names(self) -> list[str]:
        return [item.name for item in self._items]

    def to_list(self) -> list[E]:
        """Copie de la liste des éléments, dans l'ordre."""
        return list(self._items)

    # -- Écriture ------------------------------------------------------

    def __setitem__(self, key: Union[int, str], item: E) -> None:
        """Remplace l'élément désigné par index ou par nom.

        Le remplaçant peut garder le nom de l'élément remplacé ; il ne
        peut pas prendre le nom d'un autre élément.

        Raises:
            DuplicateNameError: Si le nom du remplaçant est déjà porté
                par un autre élément.
        """
        self._check_element(item)
        index = self._resolve(key)
        other = self._index_of_name(item.name)
        if other != -1 and other != index:
            raise self._duplicate(item.name)
        if self._items[index] is not item:
            self._detach(self._items[index])
        self._attach(item)
        self._items[index] = item

    def __delitem__(self, key: Union[int, str]) -> None:
        self.remove_at(self._resolve(key))

    def insert(self, index: int, item: E) -> None:
        """Insère un élément à la position donnée.

        Les éléments situés à partir de index sont décalés d'un rang.

        Args:
            index: Position dans [0, len].
            item: Élément à insérer.

        Raises:
            ElementIndexError: Si index est hors de [0, len].
            DuplicateNameError: Si le nom existe déjà.
        """
        self._check_element(item)
        self._check_index(index, len(self._items) + 1)
        if self._index_of_name(item.name) != -1:
            raise self._duplicate(item.name)
        self._attach(item)
        self._items.insert(index, item)

    def append(self, item: E) -> None:
        self.insert(len(self._items), item)

    def extend(self, items: Iterable[E]) -> None:
        """Ajoute plusieurs éléments, tous ou aucun.

        Raises:
            DuplicateNameError: Si un nom existe déjà ou apparaît
                deux fois dans items.
        """
        pending = list(items)
        seen = set(self.names())
        for item in pending:
            self._check_element(item)
            if item.name in seen:
                raise self._duplicate(item.name)
            seen.add(item.name)
        for item in pending:
            self._attach(item)
        self._items.extend(pending)

    def remove_at(self, index: int) -> E:
        """Retire l'élément à la position donnée et le retourne.

        Raises:
            ElementIndexError: Si index est hors limites.
        """
        index = self._check_index(index, len(self._items))
        return self._detach(self._items.pop(index))

    def remove_by_name(self, name: str) -> bool:
        """Retire l'élément portant ce nom.

        Returns:
            True si un élément a été retiré, False sinon.
        """
        index = self._index_of_name(name)
        if index == -1:
            return False
        self.remove_at(index)
        return True

    def remove(self, item: Union[E, str]) -> bool:
        """Retire le premier élément structurellement égal (ou de ce nom).

        Returns:
            True si un élément a été retiré, False sinon.
        """
        index = self.index_of(item)
        if index == -1:
            return False
        self.remove_at(index)
        return True

    def rename(self, target: Union[E, str], new_name: str) -> None:
        """Renomme un élément sans changer sa position.

        Args:
            target: Élément (égalité structurelle) ou nom actuel.
            new_name: Nouveau nom.

        Raises:
            DuplicateNameError: Si new_name est porté par un autre élément.
            EntityNotFoundError: Si la cible est absente.
        """
        new_name = "" if new_name is None else new_name
        index = self.index_of(target)
        other = self._index_of_name(new_name)
        if other != -1 and other != index:
            raise self._duplicate(new_name)
        if index == -1:
            raise self._not_found(
                target if isinstance(target, str) else target.name
            )
        self._items[index]._set_name(new_name)

    def clear(self) -> None:
        for item in self._items:
            self._detach(item)
        self._items = []

    # -- Comparaison ---------------------------------------------------

    def __eq__(self, other: object) -> bool:
        """Égalité élément par élément, dans l'ordre."""
        if not isinstance(other, NamedCollection):
            return NotImplemented
        if type(self) is not type(other):
            return False
        return self._items == other._items

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"
