import networkx as nx
import pandas as pd

from grafos.edge import Edge
from grafos.exceptions import InvalidArgument
from grafos.graph import Graph

NODE_COLUMN = "node_id"
SOURCE_COLUMN = "source"
TARGET_COLUMN = "target"
WEIGHT_COLUMN = "weight"
DEFAULT_WEIGHT = 1.0


def _require_columns(df, columns, name):
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise InvalidArgument(f"faltan columnas en {name}: {missing}")


def graph_from_frames(
    nodes_df: pd.DataFrame,
    edges_df: pd.DataFrame,
    node_column=NODE_COLUMN,
    source_column=SOURCE_COLUMN,
    target_column=TARGET_COLUMN,
    weight_column=WEIGHT_COLUMN,
    verbose=False,
) -> Graph:
    """
    Construye el grafo no dirigido a partir de dos DataFrames ya cargados.
    - Los nodos provienen de la columna 'node_column' de nodes_df
    - Las aristas provienen de edges_df (origen, destino, peso)
    Retorna: Graph con aristas de tipo Edge
    """
    _require_columns(nodes_df, [node_column], "nodes_df")
    _require_columns(edges_df, [source_column, target_column, weight_column], "edges_df")

    vertices = nodes_df[node_column].tolist()

    edges = [
        Edge(source, target, float(weight))
        for source, target, weight in zip(
            edges_df[source_column].tolist(),
            edges_df[target_column].tolist(),
            edges_df[weight_column].tolist(),
        )
    ]

    graph = Graph(vertices, edges)
    if verbose:
        print(f"Grafo cargado con {graph.num_vertices()} nodos y {graph.num_edges()} aristas.")
    return graph


def graph_from_networkx(G, weight=WEIGHT_COLUMN, default_weight=DEFAULT_WEIGHT, verbose=False) -> Graph:
    """
    Convierte un grafo no dirigido de networkx (Graph o MultiGraph).
    Las aristas sin el atributo 'weight' reciben 'default_weight'.
    """
    if G.is_directed():
        raise InvalidArgument("solo se admiten grafos no dirigidos")

    vertices = list(G.nodes)
    edges = [
        Edge(u, v, data.get(weight, default_weight))
        for u, v, data in G.edges(data=True)
    ]

    graph = Graph(vertices, edges)
    if verbose:
        print(f"Grafo cargado con {graph.num_vertices()} nodos y {graph.num_edges()} aristas.")
    return graph


def to_networkx(graph: Graph, weight=WEIGHT_COLUMN) -> nx.MultiGraph:
    """Devuelve un nx.MultiGraph con los mismos vértices y aristas (incluye paralelas y lazos)."""
    G = nx.MultiGraph()
    G.add_nodes_from(graph.vertices)
    for edge in graph.edges:
        G.add_edge(edge.vertex1, edge.vertex2, **{weight: edge.weight})
    return G
