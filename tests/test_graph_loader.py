import networkx as nx
import pandas as pd
import pytest

from grafos.edge import Edge
from grafos.exceptions import InvalidArgument
from grafos.graph import Graph
from grafos.utils.graph_loader import graph_from_frames, graph_from_networkx, to_networkx


@pytest.fixture
def frames():
    nodes_df = pd.DataFrame({"node_id": ["A", "B", "C"]})
    edges_df = pd.DataFrame(
        {
            "source": ["A", "B", "A"],
            "target": ["B", "C", "C"],
            "weight": [1, 2, 4],
        }
    )
    return nodes_df, edges_df


def test_graph_from_frames(frames):
    graph = graph_from_frames(*frames)
    assert graph.num_vertices() == 3
    assert graph.num_edges() == 3
    assert graph.shortest_path("A", "C") == [Edge("A", "B", 1), Edge("B", "C", 2)]


def test_graph_from_frames_custom_columns():
    nodes_df = pd.DataFrame({"id": [1, 2]})
    edges_df = pd.DataFrame({"u": [1], "v": [2], "longitud_m": [120.5]})
    graph = graph_from_frames(
        nodes_df,
        edges_df,
        node_column="id",
        source_column="u",
        target_column="v",
        weight_column="longitud_m",
    )
    assert graph.edges == (Edge(1, 2, 120.5),)


def test_graph_from_frames_missing_column(frames):
    nodes_df, edges_df = frames
    with pytest.raises(InvalidArgument):
        graph_from_frames(nodes_df, edges_df.drop(columns=["weight"]))


def test_graph_from_frames_unknown_node(frames):
    nodes_df, edges_df = frames
    with pytest.raises(InvalidArgument):
        graph_from_frames(nodes_df[nodes_df["node_id"] != "C"], edges_df)


def test_graph_from_frames_verbose(frames, capsys):
    graph_from_frames(*frames, verbose=True)
    assert "Grafo cargado con 3 nodos y 3 aristas." in capsys.readouterr().out


def test_graph_from_networkx_default_weight():
    G = nx.Graph()
    G.add_edge("A", "B", weight=3)
    G.add_edge("B", "C")
    graph = graph_from_networkx(G)
    assert set(graph.edges) == {Edge("A", "B", 3), Edge("B", "C", 1.0)}


def test_graph_from_networkx_rejects_directed():
    with pytest.raises(InvalidArgument):
        graph_from_networkx(nx.DiGraph([("A", "B")]))


def test_to_networkx_keeps_parallel_edges_and_loops():
    graph = graph_from_networkx(nx.path_graph(3))
    graph_with_extras = Graph(
        graph.vertices,
        graph.edges + (Edge(0, 1, 7), Edge(2, 2, 0)),
    )
    G = to_networkx(graph_with_extras)
    assert G.number_of_nodes() == 3
    assert G.number_of_edges() == 4
    assert nx.number_of_selfloops(G) == 1


def test_round_trip_keeps_shortest_path_cost():
    G = nx.cycle_graph(6)
    for i, (u, v) in enumerate(G.edges):
        G[u][v]["weight"] = i + 1
    graph = graph_from_networkx(G)
    path = graph.shortest_path(0, 3)
    assert sum(e.weight for e in path) == nx.dijkstra_path_length(to_networkx(graph), 0, 3)
