#!/usr/bin/env python3

"""
Unit tests for search graph node and edge types.
"""

import pytest

from voxnav.navigation.graph_types import Edge, InvalidTopologyError, Node
from voxnav.utils.position import Position


####################
# Helper functions #
####################


def link(first: Node, second: Node, weight: float = 1.0) -> Edge:
    """Wires an edge onto both of its nodes, like a search graph does."""
    edge = Edge(first, second, weight)
    first.add_edge(edge)
    second.add_edge(edge)
    return edge


##############
# Unit tests #
##############


def test_create_node() -> None:
    node = Node(Position(1, 2, 3))
    assert node.position == Position(1, 2, 3)
    assert node.edges == []
    assert node.get_neighbors() == []
    assert str(node) == "Node: [x=1, y=2, z=3, edges=0]"


def test_create_edge() -> None:
    node_a = Node(Position(0, 0, 0))
    node_b = Node(Position(1, 0, 0))

    edge = Edge(node_a, node_b)
    assert edge.weight == 1.0
    assert edge.get_node(0) is node_a
    assert edge.get_node(1) is node_b
    assert edge.nodes == (node_a, node_b)

    # Creating an edge does not wire it into its nodes.
    assert node_a.edges == []
    assert node_b.edges == []


@pytest.mark.parametrize("weight", [0.0, -1.0, float("inf"), float("nan")])
def test_create_edge_invalid_weight(weight: float) -> None:
    with pytest.raises(ValueError) as exc_info:
        Edge(Node(Position(0, 0, 0)), Node(Position(1, 0, 0)), weight)
    assert "Edge weight must be positive and finite" in str(exc_info.value)


def test_edge_get_connected() -> None:
    node_a = Node(Position(0, 0, 0))
    node_b = Node(Position(1, 0, 0))
    outsider = Node(Position(0, 0, 0))
    edge = Edge(node_a, node_b, 2.5)

    assert edge.get_connected(node_a) is node_b
    assert edge.get_connected(node_b) is node_a

    # Nodes are matched by identity, not by position.
    with pytest.raises(InvalidTopologyError):
        edge.get_connected(outsider)


def test_edge_connects() -> None:
    node_a = Node(Position(0, 0, 0))
    node_b = Node(Position(1, 0, 0))
    node_c = Node(Position(2, 0, 0))
    edge = Edge(node_a, node_b)

    assert edge.connects(node_a, node_b)
    assert edge.connects(node_b, node_a)
    assert not edge.connects(node_a, node_c)


def test_node_neighbors_and_costs() -> None:
    center = Node(Position(0, 0, 0))
    east = Node(Position(1, 0, 0))
    up = Node(Position(0, 1, 0))
    far = Node(Position(5, 5, 5))

    link(center, east, 1.0)
    link(up, center, 3.0)

    assert center.get_neighbors() == [east, up]
    assert east.get_neighbors() == [center]
    assert up.get_neighbors() == [center]

    assert center.get_cost_from(east) == 1.0
    assert east.get_cost_from(center) == 1.0
    assert center.get_cost_from(up) == 3.0
    assert center.get_edge_to(far) is None

    with pytest.raises(InvalidTopologyError) as exc_info:
        center.get_cost_from(far)
    assert "No edge connects" in str(exc_info.value)


def test_node_parallel_edges() -> None:
    node_a = Node(Position(0, 0, 0))
    node_b = Node(Position(1, 0, 0))

    link(node_a, node_b, 4.0)
    cheap_edge = link(node_a, node_b, 2.0)

    # Parallel edges are not deduplicated, but the cheapest one sets the cost.
    assert node_a.get_neighbors() == [node_b, node_b]
    assert node_a.get_edge_to(node_b) is cheap_edge
    assert node_a.get_cost_from(node_b) == 2.0
    assert node_b.get_cost_from(node_a) == 2.0
