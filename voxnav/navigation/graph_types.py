"""Basic types for search graphs."""

import math

from typing_extensions import Self  # For compatibility with Python <= 3.10

from ..utils.position import Position


class InvalidTopologyError(ValueError):
    """Raised when two nodes are treated as connected but share no edge."""


class Node:
    """
    Graph node representation, bound to a single voxel position.

    Nodes compare by identity. Use the position to look up nodes by value.
    """

    def __init__(self, position: Position) -> None:
        """
        Creates a graph node.

        :param position: Voxel position of the node.
        """
        self.position = position
        self.edges: list["Edge"] = []

    def add_edge(self, edge: "Edge") -> None:
        """
        Registers an incident edge on this node.

        The edge is not validated, so prefer
        :meth:`voxnav.navigation.search_graph.SearchGraph.link_nodes`
        which wires up both endpoints.

        :param edge: The edge to add.
        """
        self.edges.append(edge)

    def get_neighbors(self) -> list[Self]:
        """
        Follow all of the edges to grab any immediately connected nodes.

        Parallel edges yield the same neighbor more than once.

        :return: List of neighboring nodes, in edge order.
        """
        return [edge.get_connected(self) for edge in self.edges]

    def get_edge_to(self, other: Self) -> "Edge | None":
        """
        Finds the edge connecting this node to another node.

        :param other: The other node.
        :return: The cheapest connecting edge, or None if the nodes are not connected.
        """
        best_edge = None
        for edge in self.edges:
            if edge.connects(self, other):
                if best_edge is None or edge.weight < best_edge.weight:
                    best_edge = edge
        return best_edge

    def get_cost_from(self, other: Self) -> float:
        """
        Gets the cost of traversing between another node and this one.

        :param other: The other node.
        :return: The weight of the cheapest edge connecting both nodes.
        :raises InvalidTopologyError: if no edge connects the nodes.
        """
        edge = self.get_edge_to(other)
        if edge is None:
            raise InvalidTopologyError(
                f"No edge connects {other.position} to {self.position}."
            )
        return edge.weight

    def __repr__(self) -> str:
        pos = self.position
        return f"Node: [x={pos.x}, y={pos.y}, z={pos.z}, edges={len(self.edges)}]"


class Edge:
    """Undirected, weighted graph edge representation."""

    def __init__(self, first: Node, second: Node, weight: float = 1.0) -> None:
        """
        Creates a graph edge.

        :param first: First node
        :param second: Second node
        :param weight: Traversal cost of the edge, must be positive and finite.
        :raises ValueError: if the weight is not positive and finite.
        """
        weight = float(weight)
        if not (math.isfinite(weight) and weight > 0.0):
            raise ValueError(f"Edge weight must be positive and finite, got {weight}.")

        self.nodes = (first, second)
        self.weight = weight

    def get_node(self, index: int) -> Node:
        """
        Gets one of the endpoints of this edge.

        :param index: The endpoint index, 0 or 1.
        :return: The node at that index.
        """
        return self.nodes[index]

    def connects(self, first: Node, second: Node) -> bool:
        """
        Checks whether this edge links two nodes, in either order.

        :param first: The first node.
        :param second: The second node.
        :return: True if the edge links both nodes, else False.
        """
        node_a, node_b = self.nodes
        return (node_a is first and node_b is second) or (
            node_a is second and node_b is first
        )

    def get_connected(self, from_node: Node) -> Node:
        """
        Gets the endpoint on the other side of this edge.

        :param from_node: The endpoint to traverse from.
        :return: The other endpoint.
        :raises InvalidTopologyError: if ``from_node`` is not an endpoint of this edge.
        """
        node_a, node_b = self.nodes
        if from_node is node_a:
            return node_b
        if from_node is node_b:
            return node_a
        raise InvalidTopologyError(
            f"Node at {from_node.position} is not an endpoint of this edge."
        )

    def __repr__(self) -> str:
        node_a, node_b = self.nodes
        return (
            f"Edge: [{node_a.position.to_list()} <-> {node_b.position.to_list()}, "
            f"weight={self.weight:.3f}]"
        )
