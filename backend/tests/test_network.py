"""
Network Tests

Tests for the weighted network and its Dijkstra solver.
"""

import math

import numpy as np
import pytest

from infiltration.core import Network, InvalidVertex


@pytest.fixture
def triangle():
    """A-B 2, B-C 3, A-C 10"""
    net = Network()
    for v in "ABC":
        net.add_vertex(v)
    net.add_edge("A", "B", 2.0)
    net.add_edge("B", "C", 3.0)
    net.add_edge("A", "C", 10.0)
    return net


# =============================================================================
# Weight Tests
# =============================================================================

def test_edge_weights(triangle):
    """Weights are symmetric; unknown pairs are infinite"""
    assert triangle.get_edge_weight("A", "B") == 2.0
    assert triangle.get_edge_weight("B", "A") == 2.0
    assert triangle.get_edge_weight("A", "Z") == math.inf

    matrix = triangle.get_weight_matrix()
    assert matrix.shape == (3, 3)
    assert np.array_equal(matrix, matrix.T)
    assert math.isinf(matrix[0, 0])
    print("✓ Edge weights")


def test_update_edge_weight(triangle):
    """Updating a weight changes the cheapest path"""
    triangle.update_edge_weight("A", "C", 1.0)
    assert triangle.get_edge_weight("C", "A") == 1.0
    assert list(triangle.iterator_shortest_path("A", "C")) == ["A", "C"]
    print("✓ Weight update")


def test_update_missing_edge_is_noop():
    """Updating a pair with no edge changes nothing"""
    net = Network()
    net.add_vertex("A")
    net.add_vertex("B")
    net.update_edge_weight("A", "B", 4.0)
    assert not net.is_adjacent("A", "B")
    assert net.get_edge_weight("A", "B") == math.inf

    with pytest.raises(InvalidVertex):
        net.update_edge_weight("A", "Z", 1.0)
    print("✓ Missing edge update ignored")


def test_edge_without_weight_is_infinite():
    """An edge added without a weight is adjacent but costs +inf"""
    net = Network()
    net.add_vertex("A")
    net.add_vertex("B")
    net.add_edge("A", "B")

    assert net.is_adjacent("A", "B")
    assert net.shortest_path_weight("A", "B") == math.inf
    assert list(net.iterator_shortest_path("A", "B")) == []
    assert list(net.iterator_fewest_hops("A", "B")) == ["A", "B"]
    print("✓ Unweighted edge")


def test_remove_edge_resets_weight(triangle):
    """Removing an edge resets its weight for any later re-add"""
    triangle.remove_edge("A", "B")
    assert triangle.get_edge_weight("A", "B") == math.inf

    triangle.add_edge("A", "B")
    assert triangle.get_weight_matrix()[0, 1] == math.inf
    print("✓ Weight reset on edge removal")


def test_weights_survive_growth():
    """Growing capacity keeps the weight block"""
    net = Network(capacity=1)
    for v in "ABC":
        net.add_vertex(v)
    net.add_edge("A", "B", 1.5)
    net.add_edge("B", "C", 2.5)
    for v in "DE":
        net.add_vertex(v)

    assert net.capacity == 8
    assert net.get_edge_weight("A", "B") == 1.5
    assert net.get_edge_weight("C", "B") == 2.5
    print("✓ Weights kept through growth")


def test_weights_follow_removal(triangle):
    """Removing a vertex compacts the weight matrix with the adjacency"""
    triangle.remove_vertex("A")
    assert triangle.get_weight_matrix().shape == (2, 2)
    assert triangle.get_edge_weight("B", "C") == 3.0
    assert triangle.shortest_path("B", "C") == (["B", "C"], 3.0)
    print("✓ Weights compacted")


def test_middle_removal_keeps_both_sides():
    """Earlier vertices keep their index; later ones drop by one with their weights"""
    net = Network()
    for v in "ABCDE":
        net.add_vertex(v)
    net.add_edge("A", "B", 1.0)
    net.add_edge("B", "C", 2.0)
    net.add_edge("C", "D", 3.0)
    net.add_edge("D", "E", 4.0)
    net.add_edge("B", "D", 5.0)
    net.add_edge("A", "E", 6.0)

    net.remove_vertex("C")

    assert [net.get_index(v) for v in "ABDE"] == [0, 1, 2, 3]
    assert net.get_edge_weight("A", "B") == 1.0
    assert net.get_edge_weight("D", "E") == 4.0
    assert net.get_edge_weight("B", "D") == 5.0
    assert net.get_edge_weight("E", "A") == 6.0
    assert net.get_adjacent_vertices("D") == ["B", "E"]

    matrix = net.get_weight_matrix()
    assert matrix.shape == (4, 4)
    assert np.array_equal(matrix, matrix.T)
    assert matrix[1, 2] == 5.0
    assert matrix[2, 3] == 4.0
    assert net.shortest_path("A", "D") == (["A", "B", "D"], 6.0)
    print("✓ Middle removal compacts both matrices")


# =============================================================================
# Dijkstra Tests
# =============================================================================

def test_dijkstra_prefers_cheaper_detour(triangle):
    """The two-hop route beats the expensive direct edge"""
    path, weight = triangle.shortest_path("A", "C")
    assert path == ["A", "B", "C"]
    assert weight == 5.0
    assert triangle.shortest_path_weight("A", "C") == 5.0
    assert list(triangle.iterator_fewest_hops("A", "C")) == ["A", "C"]
    print("✓ Cheapest path")


def test_dijkstra_tie_goes_to_lowest_index():
    """Equal-cost routes resolve through the lower-index vertex"""
    net = Network()
    for v in "ABCD":
        net.add_vertex(v)
    net.add_edge("A", "C", 1.0)
    net.add_edge("C", "D", 1.0)
    net.add_edge("A", "B", 1.0)
    net.add_edge("B", "D", 1.0)

    assert net.shortest_path("A", "D") == (["A", "B", "D"], 2.0)
    print("✓ Tie broken by index")


def test_dijkstra_start_is_target(triangle):
    path, weight = triangle.shortest_path("B", "B")
    assert path == ["B"]
    assert weight == 0.0


def test_dijkstra_unreachable(triangle):
    """Unreachable targets give an empty path and infinite weight"""
    triangle.add_vertex("D")
    path, weight = triangle.shortest_path("A", "D")
    assert path == []
    assert weight == math.inf
    assert list(triangle.iterator_shortest_path("A", "D")) == []
    print("✓ Unreachable target")


def test_dijkstra_injected_cost(triangle):
    """A cost function replaces the matrix weights"""
    path, weight = triangle.shortest_path("A", "C", cost=lambda _from, to: 1.0)
    assert path == ["A", "C"]
    assert weight == 1.0

    # the matrix itself is untouched
    assert triangle.get_edge_weight("A", "C") == 10.0
    print("✓ Injected cost")


def test_dijkstra_directed_cost():
    """Injected costs may differ by direction"""
    net = Network()
    for v in "ABC":
        net.add_vertex(v)
    net.add_edge("A", "B", 1.0)
    net.add_edge("B", "C", 1.0)
    entry = {"A": 1.0, "B": 5.0, "C": 2.0}

    assert net.shortest_path("A", "C", cost=lambda _f, to: entry[to])[1] == 7.0
    assert net.shortest_path("C", "A", cost=lambda _f, to: entry[to])[1] == 6.0
    print("✓ Directed cost")


def test_shortest_path_invalid_vertex(triangle):
    with pytest.raises(InvalidVertex):
        triangle.shortest_path("A", "Z")


def test_shortest_path_weight_symmetric(triangle):
    for a in "ABC":
        for b in "ABC":
            assert triangle.shortest_path_weight(a, b) == triangle.shortest_path_weight(b, a)
