import pytest

from voxnav.navigation import Node, SearchGraph


@pytest.fixture
def chain_graph() -> tuple[SearchGraph, list[Node]]:
    """Creates a three node chain A(0,0,0) - B(1,0,0) - C(2,0,0) with unit weights."""
    graph = SearchGraph()
    nodes = [graph.add_node([x, 0, 0]) for x in range(3)]
    graph.link_nodes(nodes[0], nodes[1], 1.0)
    graph.link_nodes(nodes[1], nodes[2], 1.0)
    return graph, nodes
