"""Utilities to create search graphs from YAML files."""

import copy
from typing import Any

import yaml

from .search_graph import SearchGraph
from .voxel_graph import VoxelGraph
from ..utils.logging import get_global_logger
from ..utils.position import Position

ExplicitEdge = tuple[Position, Position, float]


def parse_edges(edges_data: list[dict[str, Any]]) -> list[ExplicitEdge]:
    """
    Parses the ``edges`` entries of a graph description.

    :param edges_data: List of edge dictionaries, each with a ``nodes`` list of
        exactly two positions and an optional ``weight`` (defaults to 1.0).
    :return: List of ``(first, second, weight)`` tuples.
    :raises ValueError: if an edge does not have exactly two nodes.
    """
    edges = []
    for edge_data in edges_data:
        endpoints = edge_data.get("nodes", [])
        if len(endpoints) != 2:
            raise ValueError(
                f"Edges must have exactly 2 nodes, got {len(endpoints)}: {edge_data}"
            )
        edges.append(
            (
                Position.construct(endpoints[0]),
                Position.construct(endpoints[1]),
                float(edge_data.get("weight", 1.0)),
            )
        )
    return edges


class ExplicitGraphMixin:
    """
    Adds explicitly listed nodes and edges on top of whatever a graph builds,
    and replays them every time the graph is built.
    """

    explicit_nodes: list[Position]
    explicit_edges: list[ExplicitEdge]

    def add_explicit_topology(self) -> None:
        """Adds the explicit nodes and edges, creating missing edge endpoints."""
        for pos in self.explicit_nodes:
            self.add_node(pos)
        for first, second, weight in self.explicit_edges:
            self.link_nodes(self.add_node(first), self.add_node(second), weight)


class ExplicitSearchGraph(ExplicitGraphMixin, SearchGraph):
    """Search graph made only of explicitly listed nodes and edges."""

    def __init__(
        self,
        nodes: list[Position] = [],
        edges: list[ExplicitEdge] = [],
        **kwargs: Any,
    ) -> None:
        """
        Creates and builds a search graph from explicit nodes and edges.

        :param nodes: Positions of the nodes.
        :param edges: ``(first, second, weight)`` tuples.
        :param kwargs: Additional keyword arguments passed to :class:`SearchGraph`.
        """
        super().__init__(**kwargs)
        self.explicit_nodes = list(nodes)
        self.explicit_edges = list(edges)
        self.build()

    def build(self) -> None:
        """Adds the explicit nodes and edges, replacing any current contents."""
        self.destroy()
        self.add_explicit_topology()


class ExplicitVoxelGraph(ExplicitGraphMixin, VoxelGraph):
    """Voxel graph with additional explicitly listed nodes and edges."""

    def __init__(
        self,
        nodes: list[Position] = [],
        edges: list[ExplicitEdge] = [],
        **kwargs: Any,
    ) -> None:
        """
        Creates and builds a voxel graph with extra nodes and edges.

        :param nodes: Positions of the extra nodes.
        :param edges: Extra ``(first, second, weight)`` tuples.
        :param kwargs: Additional keyword arguments passed to :class:`VoxelGraph`.
        """
        # The voxel graph builds itself on construction, so these must exist first.
        self.explicit_nodes = list(nodes)
        self.explicit_edges = list(edges)
        super().__init__(**kwargs)

    def build(self) -> None:
        """Builds the voxel graph, then adds the explicit nodes and edges."""
        super().build()
        self.add_explicit_topology()


class GraphYamlLoader:
    """Creates search graphs from YAML files."""

    def from_yaml(self, graph_dict: dict[str, Any]) -> SearchGraph:
        """
        Load a search graph from a YAML description.

        The returned graph remembers its description, so
        :meth:`voxnav.navigation.search_graph.SearchGraph.rebuild` restores it.

        :param graph_dict: Dictionary containing all the graph information.
        :return: Search graph instance.
        :raises ValueError: if an edge does not have exactly two nodes.
        """
        self.data = graph_dict or {}

        params = copy.deepcopy(self.data.get("params", {}))
        nodes = [Position.construct(pos) for pos in self.data.get("nodes", [])]
        edges = parse_edges(self.data.get("edges", []))

        voxel_data = self.data.get("voxels")
        if voxel_data is None:
            self.graph: SearchGraph = ExplicitSearchGraph(nodes, edges, **params)
        else:
            self.graph = ExplicitVoxelGraph(
                nodes,
                edges,
                walkable=voxel_data.get("positions", []),
                connectivity=voxel_data.get("connectivity", 26),
                **params,
            )

        get_global_logger().debug(f"Loaded {self.graph}.")
        return self.graph

    def from_file(self, filename: str) -> SearchGraph:
        """
        Load a search graph from a YAML file.

        :param filename: Path to YAML file describing the graph.
        :return: Search graph instance.
        """
        with open(filename) as file:
            graph_dict = yaml.load(file, Loader=yaml.FullLoader)
        graph = self.from_yaml(graph_dict)
        graph.source_yaml_file = filename
        return graph
