from operator import attrgetter

import pytest

from grafos.algorithms.sorting import top_k_sort
from grafos.edge import Edge
from grafos.exceptions import InvalidArgument


def test_edge_equality_ignores_endpoint_order():
    assert Edge("A", "B", 3) == Edge("B", "A", 3)
    assert hash(Edge("A", "B", 3)) == hash(Edge("B", "A", 3))
    assert Edge("A", "B", 3) != Edge("A", "B", 4)
    assert Edge("A", "B", 3) != Edge("A", "C", 3)


def test_edge_other_vertex():
    edge = Edge("A", "B", 1)
    assert edge.other_vertex("A") == "B"
    assert edge.other_vertex("B") == "A"
    assert Edge("A", "A", 1).other_vertex("A") == "A"
    with pytest.raises(InvalidArgument):
        edge.other_vertex("C")


def test_edges_order_by_weight():
    light = Edge("A", "B", 1)
    heavy = Edge("A", "B", 2)
    assert light < heavy
    assert heavy >= light
    assert Edge("A", "B", 1) <= Edge("C", "D", 1)
    assert sorted([heavy, light]) == [light, heavy]


def test_top_k_sort_returns_k_smallest_ascending():
    assert top_k_sort(3, [5, 1, 4, 2, 3]) == [1, 2, 3]
    assert top_k_sort(10, [3, 1, 2]) == [1, 2, 3]
    assert top_k_sort(0, [3, 1, 2]) == []


def test_top_k_sort_is_stable_with_key():
    edges = [Edge("C", "D", 2), Edge("A", "B", 1), Edge("E", "F", 1), Edge("G", "H", 1)]
    result = top_k_sort(len(edges), edges, key=attrgetter("weight"))
    assert [(e.vertex1, e.weight) for e in result] == [("A", 1), ("E", 1), ("G", 1), ("C", 2)]


def test_top_k_sort_negative_k_raises():
    with pytest.raises(InvalidArgument):
        top_k_sort(-1, [1, 2])


def test_edge_is_immutable():
    edge = Edge("A", "B", 1)
    with pytest.raises(AttributeError):
        edge._weight = 5
    with pytest.raises(AttributeError):
        edge.weight = 5
    with pytest.raises(AttributeError):
        del edge._vertex1
    assert edge == Edge("A", "B", 1)
    assert edge in {Edge("B", "A", 1)}
