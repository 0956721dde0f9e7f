from typing import Hashable, Protocol

from grafos.exceptions import InvalidArgument


class EdgeLike(Protocol):
    """
    Lo mínimo que Graph necesita de una arista: dos extremos, un peso
    y el extremo opuesto dado uno conocido. Debe ser hashable.
    """

    @property
    def vertex1(self) -> Hashable: ...

    @property
    def vertex2(self) -> Hashable: ...

    @property
    def weight(self) -> float: ...

    def other_vertex(self, vertex: Hashable) -> Hashable: ...


class Edge:
    """
    Arista no dirigida y con peso.
    Dos aristas son iguales si unen el mismo par de vértices (sin importar
    el orden) con el mismo peso. El orden (<, <=, >, >=) es solo por peso.
    Es inmutable: no se pueden reasignar sus atributos.
    """

    __slots__ = ("_vertex1", "_vertex2", "_weight")

    def __init__(self, vertex1, vertex2, weight=1.0):
        object.__setattr__(self, "_vertex1", vertex1)
        object.__setattr__(self, "_vertex2", vertex2)
        object.__setattr__(self, "_weight", weight)

    def __setattr__(self, name, value):
        raise AttributeError(f"Edge es inmutable: no se puede asignar {name!r}")

    def __delattr__(self, name):
        raise AttributeError(f"Edge es inmutable: no se puede borrar {name!r}")

    @property
    def vertex1(self):
        return self._vertex1

    @property
    def vertex2(self):
        return self._vertex2

    @property
    def weight(self):
        return self._weight

    def other_vertex(self, vertex):
        """Devuelve el extremo opuesto a 'vertex'."""
        if vertex == self._vertex1:
            return self._vertex2
        if vertex == self._vertex2:
            return self._vertex1
        raise InvalidArgument(f"{vertex!r} no es extremo de {self!r}")

    def _endpoints(self):
        return frozenset((self._vertex1, self._vertex2))

    def __eq__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return self._weight == other._weight and self._endpoints() == other._endpoints()

    def __hash__(self):
        return hash((self._endpoints(), self._weight))

    def __lt__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return self._weight < other._weight

    def __le__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return self._weight <= other._weight

    def __gt__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return self._weight > other._weight

    def __ge__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return self._weight >= other._weight

    def __repr__(self):
        return f"Edge({self._vertex1!r}, {self._vertex2!r}, {self._weight!r})"
