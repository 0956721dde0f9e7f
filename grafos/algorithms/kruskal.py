from operator import attrgetter

from grafos.algorithms.sorting import top_k_sort
from grafos.algorithms.union_find import DisjointSet


def kruskal(vertices, edges):
    """
    Implementación del algoritmo de Kruskal.
    Parámetros:
        vertices: secuencia de vértices (puede tener repetidos)
        edges: secuencia de aristas con vertex1, vertex2 y weight
    Retorna:
        set con las aristas del árbol de expansión mínima. Si el grafo no es
        conexo, devuelve un bosque (menos de len(vertices) - 1 aristas).
    """
    components = DisjointSet()
    for v in vertices:
        if v not in components:
            components.make_set(v)

    mst = set()
    for edge in top_k_sort(len(edges), edges, key=attrgetter("weight")):
        u, v = edge.vertex1, edge.vertex2
        # Si ya están conectados, la arista formaría un ciclo
        if components.find_set(u) != components.find_set(v):
            components.union(u, v)
            mst.add(edge)
    return mst
