from typing import Dict, Generic, Hashable, Iterable, List, Set, Tuple, TypeVar

from grafos.algorithms.dijkstra import shortest_path
from grafos.algorithms.kruskal import kruskal
from grafos.edge import EdgeLike
from grafos.exceptions import InvalidArgument

V = TypeVar("V", bound=Hashable)
E = TypeVar("E", bound=EdgeLike)


class Graph(Generic[V, E]):
    """
    Grafo no dirigido y con pesos. Puede tener lazos, aristas paralelas y
    componentes no conexas. No se modifica después de construido.
    """

    def __init__(self, vertices: Iterable[V], edges: Iterable[E]):
        """
        Valida las colecciones y construye el índice vértice -> aristas incidentes.
        Lanza InvalidArgument si:
            - vertices o edges (o alguno de sus elementos) es None
            - alguna arista tiene peso negativo
            - alguna arista conecta con un vértice que no está en 'vertices'
        """
        if vertices is None or edges is None:
            raise InvalidArgument("vertices y edges no pueden ser None")

        self._vertices: Tuple[V, ...] = tuple(vertices)
        self._adjacency: Dict[V, List[E]] = {}
        for v in self._vertices:
            if v is None:
                raise InvalidArgument("los vértices no pueden ser None")
            try:
                self._adjacency.setdefault(v, [])
            except TypeError:
                raise InvalidArgument(f"{v!r} no es hashable") from None

        self._edges: Tuple[E, ...] = tuple(edges)
        for edge in self._edges:
            if edge is None:
                raise InvalidArgument("las aristas no pueden ser None")
            try:
                valid_weight = edge.weight >= 0
            except TypeError:
                valid_weight = False
            if not valid_weight:
                raise InvalidArgument(f"peso inválido en {edge!r}")
            u, v = edge.vertex1, edge.vertex2
            if not (self._is_vertex(u) and self._is_vertex(v)):
                raise InvalidArgument(f"{edge!r} conecta con un vértice fuera del grafo")
            # Un lazo queda dos veces en la lista de su vértice
            self._adjacency[u].append(edge)
            self._adjacency[v].append(edge)

    @property
    def vertices(self) -> Tuple[V, ...]:
        return self._vertices

    @property
    def edges(self) -> Tuple[E, ...]:
        return self._edges

    def __contains__(self, vertex) -> bool:
        return self._is_vertex(vertex)

    def num_vertices(self) -> int:
        return len(self._vertices)

    def num_edges(self) -> int:
        return len(self._edges)

    def incident_edges(self, vertex: V) -> Tuple[E, ...]:
        self._check_vertex(vertex)
        return tuple(self._adjacency[vertex])

    def minimum_spanning_tree(self) -> Set[E]:
        """
        Aristas del árbol de expansión mínima (Kruskal).
        Si el grafo no es conexo se obtiene un bosque, sin error.
        """
        return kruskal(self._vertices, self._edges)

    def shortest_path(self, start: V, end: V) -> List[E]:
        """
        Aristas del camino más corto de 'start' a 'end' (Dijkstra).
        Lista vacía si start == end; NoPathExists si no hay camino.
        """
        self._check_vertex(start)
        self._check_vertex(end)
        return shortest_path(self._adjacency, start, end)

    def _is_vertex(self, vertex) -> bool:
        try:
            return vertex in self._adjacency
        except TypeError:
            # Un valor no hashable nunca es vértice
            return False

    def _check_vertex(self, vertex):
        if vertex is None or not self._is_vertex(vertex):
            raise InvalidArgument(f"{vertex!r} no es un vértice del grafo")

    def __repr__(self):
        return f"Graph(num_vertices={self.num_vertices()}, num_edges={self.num_edges()})"
