from dataclasses import dataclass
from typing import Dict, Hashable, List, Union

from grafos.exceptions import AlreadyUnitedError, DuplicateElement, UnknownElement


@dataclass(frozen=True)
class _Root:
    rank: int = 0


@dataclass(frozen=True)
class _Child:
    parent: int


_Slot = Union[_Root, _Child]


class DisjointSet:
    """
    Implementación de Union–Find (Disjoint Set Union) con compresión de
    caminos y unión por rango.
    Cada elemento recibe un id entero (0, 1, 2, ...) en orden de registro;
    el id nunca cambia. Para cada id se guarda un registro: _Root(rank) si
    es representante de su conjunto, o _Child(parent) si apunta a su padre.
    """

    def __init__(self):
        self._ids: Dict[Hashable, int] = {}
        self._slots: List[_Slot] = []
        self._num_sets = 0

    def __len__(self):
        return len(self._slots)

    def __contains__(self, item):
        return item in self._ids

    @property
    def num_sets(self) -> int:
        return self._num_sets

    def make_set(self, item) -> None:
        """Registra 'item' como un conjunto nuevo de un solo elemento."""
        if item in self._ids:
            raise DuplicateElement(f"{item!r} ya está registrado")
        self._ids[item] = len(self._slots)
        self._slots.append(_Root())
        self._num_sets += 1

    def find_set(self, item) -> int:
        """Devuelve el id del representante (raíz) del conjunto que contiene a 'item'."""
        index = self._index_of(item)

        root = index
        slot = self._slots[root]
        while isinstance(slot, _Child):
            root = slot.parent
            slot = self._slots[root]

        # Compresión de caminos
        while index != root:
            parent = self._slots[index].parent
            if parent != root:
                self._slots[index] = _Child(root)
            index = parent
        return root

    def union(self, item1, item2) -> None:
        """
        Une los conjuntos que contienen a 'item1' y 'item2'.
        Lanza AlreadyUnitedError si ya estaban en el mismo conjunto.
        """
        root1 = self.find_set(item1)
        root2 = self.find_set(item2)
        if root1 == root2:
            raise AlreadyUnitedError(f"{item1!r} y {item2!r} ya están en el mismo conjunto")

        rank1 = self._slots[root1].rank
        rank2 = self._slots[root2].rank
        if rank1 > rank2:
            self._slots[root2] = _Child(root1)
        elif rank2 > rank1:
            self._slots[root1] = _Child(root2)
        else:
            self._slots[root2] = _Child(root1)
            self._slots[root1] = _Root(rank1 + 1)
        self._num_sets -= 1

    def connected(self, item1, item2) -> bool:
        """Verifica si 'item1' y 'item2' pertenecen al mismo conjunto."""
        return self.find_set(item1) == self.find_set(item2)

    def rank(self, item) -> int:
        """Rango de la raíz del conjunto que contiene a 'item'."""
        return self._slots[self.find_set(item)].rank

    def _index_of(self, item) -> int:
        try:
            return self._ids[item]
        except KeyError:
            raise UnknownElement(f"{item!r} no está registrado") from None
