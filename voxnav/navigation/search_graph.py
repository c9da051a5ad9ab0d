"""Search graph of voxel positions and weighted edges."""

from typing import Any

import numpy as np

from .a_star import AStar
from .graph_types import Edge, Node
from .plan import Plan
from ..utils.logging import get_global_logger
from ..utils.position import Position


class SearchGraph:
    """
    Graph representation class.

    Nodes are keyed by their voxel position, and each position holds at most
    one node. Subclasses describe how a world maps to nodes and edges by
    implementing :meth:`build`, using :meth:`add_node` and :meth:`link_nodes`.
    """

    def __init__(self, heuristic: str = "euclidean") -> None:
        """
        Creates an instance of SearchGraph.

        :param heuristic: The heuristic used by the A* search when finding paths.
        """
        self.nodes: dict[Position, Node] = {}
        self.edges: list[Edge] = []
        self.path_finder = AStar(heuristic=heuristic)
        self.heuristic = self.path_finder.heuristic

    @property
    def num_nodes(self) -> int:
        return len(self.nodes)

    @property
    def num_edges(self) -> int:
        return len(self.edges)

    def build(self) -> None:
        """
        Populates the nodes and edges of the graph, replacing any current contents.
        """
        raise NotImplementedError("Must implement in subclass.")

    def rebuild(self) -> None:
        """
        Destroys the current contents of the graph and builds it again.

        :raises NotImplementedError: if the graph does not know how to build
            itself. The graph is left untouched in that case.
        """
        if type(self).build is SearchGraph.build:
            raise NotImplementedError(
                f"{type(self).__name__} does not implement build(), cannot rebuild."
            )
        self.destroy()
        self.build()

    def destroy(self) -> None:
        """Releases all nodes and edges. The graph can be built again afterwards."""
        for node in self.nodes.values():
            node.edges.clear()
        self.nodes.clear()
        self.edges.clear()

    def add_node(self, position: Any) -> Node:
        """
        Adds a node at a position, unless one already exists there.

        :param position: The position of the node, as a Position or a value
            accepted by :meth:`voxnav.utils.position.Position.construct`.
        :return: The node at that position.
        """
        position = Position.construct(position)
        node = self.nodes.get(position)
        if node is None:
            node = Node(position)
            self.nodes[position] = node
        return node

    def get_node(self, position: Any) -> Node | None:
        """
        Gets the node at exactly the specified position.

        :param position: The query position.
        :return: The node at that position, or None if there is none.
        """
        return self.nodes.get(Position.construct(position))

    def link_nodes(self, first: Any, second: Any, weight: float = 1.0) -> Edge:
        """
        Adds an undirected edge between 2 nodes of this graph.

        :param first: The first node, or its position.
        :param second: The second node, or its position.
        :param weight: The traversal cost of the edge.
        :return: The edge that was created.
        :raises ValueError: if either node does not belong to this graph.
        """
        first = self._resolve_own_node(first)
        second = self._resolve_own_node(second)

        edge = Edge(first, second, weight)
        first.add_edge(edge)
        if second is not first:
            second.add_edge(edge)
        self.edges.append(edge)
        return edge

    def _resolve_own_node(self, node_or_position: Any) -> Node:
        """
        Looks up a node of this graph from a node or a position.

        :param node_or_position: A node, or the position of a node.
        :return: The node owned by this graph.
        :raises ValueError: if there is no such node in this graph.
        """
        if isinstance(node_or_position, Node):
            position = node_or_position.position
        else:
            position = Position.construct(node_or_position)

        node = self.nodes.get(position)
        if node is None or (
            isinstance(node_or_position, Node) and node is not node_or_position
        ):
            raise ValueError(f"No node of this graph is at {position}.")
        return node

    def find_closest(self, position: Any) -> Node | None:
        """
        Get the nearest node in the graph to a specified position.

        :param position: Query position.
        :return: The nearest node to the query position, or None if the graph is empty.
        """
        if len(self.nodes) == 0:
            return None

        position = Position.construct(position)
        node = self.nodes.get(position)
        if node is not None:
            return node

        # Find the nearest node
        min_dist = np.inf
        for n in self.nodes.values():
            dist = position.get_linear_distance(n.position)
            if dist < min_dist:
                min_dist = dist
                n_nearest = n
        return n_nearest

    def find_path(self, start: Any, end: Any) -> Plan | None:
        """
        Finds a path between the nodes closest to two positions.

        :param start: The start position.
        :param end: The end position.
        :return: The plan from start to end, or None if no path exists.
        """
        logger = get_global_logger()

        start_node = self.find_closest(start)
        end_node = self.find_closest(end)
        if start_node is None or end_node is None:
            logger.warning("Cannot find a path in an empty search graph.")
            return None

        plan = self.path_finder.plan(start_node, end_node)
        if plan is None:
            logger.warning(
                f"Could not find a path from {start_node.position} "
                f"to {end_node.position}."
            )
        return plan

    def __contains__(self, position: Any) -> bool:
        return self.get_node(position) is not None

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__} with {self.num_nodes} nodes "
            f"and {self.num_edges} edges"
        )
