import heapq
from dataclasses import dataclass, field
from typing import Any

from grafos.exceptions import NoPathExists


@dataclass(frozen=True, order=True)
class _QueueEntry:
    """
    Entrada de la cola de prioridad: (vértice, costo tentativo).
    Se compara solo por costo; los empates se resuelven según la posición
    en el heap, lo que no cambia los costos finales.
    """

    cost: float
    vertex: Any = field(compare=False)


def dijkstra(adjacency, start):
    """
    Implementación del algoritmo de Dijkstra con borrado perezoso.
    Parámetros:
        adjacency: dict { vértice: [arista, ...] } con las aristas incidentes
        start: vértice origen
    Retorna:
        dist: diccionario con las distancias mínimas desde 'start'
        prev: diccionario con la arista por la que se llega a cada vértice
    """
    dist = {v: float('inf') for v in adjacency}
    dist[start] = 0
    prev = {}
    visited = set()
    queue = [_QueueEntry(0, start)]

    while queue:
        entry = heapq.heappop(queue)
        u = entry.vertex
        if u in visited:
            # Entrada obsoleta de una relajación anterior
            continue
        visited.add(u)

        # Relajar las aristas
        for edge in adjacency[u]:
            neighbor = edge.other_vertex(u)
            if neighbor not in visited:
                alt = entry.cost + edge.weight
                if neighbor not in dist or alt < dist[neighbor]:
                    dist[neighbor] = alt
                    prev[neighbor] = edge
                    heapq.heappush(queue, _QueueEntry(alt, neighbor))

    return dist, prev


def reconstruct_path(prev, start, goal):
    """
    Reconstruye el camino más corto (lista de aristas) usando el diccionario
    de aristas predecesoras. La primera arista sale de 'start' y la última
    llega a 'goal'.
    """
    if goal == start:
        return []
    if goal not in prev:
        raise NoPathExists(f"no existe camino de {start!r} a {goal!r}")

    path = []
    node = goal
    while node != start:
        edge = prev[node]
        path.append(edge)
        node = edge.other_vertex(node)
    path.reverse()
    return path


def shortest_path(adjacency, start, end):
    """Camino más corto de 'start' a 'end' como lista de aristas."""
    if start == end:
        return []
    _, prev = dijkstra(adjacency, start)
    return reconstruct_path(prev, start, end)
