#!/usr/bin/env python3

"""
Unit tests for loading search graphs from YAML.
"""

import os

import pytest

from voxnav.navigation import GraphYamlLoader, SearchGraph, VoxelGraph
from voxnav.navigation.graph_yaml import ExplicitSearchGraph
from voxnav.utils.general import get_data_folder
from voxnav.utils.position import Position


def test_load_graph_from_dict() -> None:
    graph_dict = {
        "params": {"heuristic": "none"},
        "nodes": [[0, 0, 0], [9, 9, 9]],
        "edges": [
            {"nodes": [[0, 0, 0], [1, 0, 0]], "weight": 2.0},
            {"nodes": [[1, 0, 0], {"x": 1, "y": 1, "z": 0}]},
        ],
    }
    graph = GraphYamlLoader().from_yaml(graph_dict)

    assert isinstance(graph, ExplicitSearchGraph)
    assert isinstance(graph, SearchGraph)
    assert graph.heuristic == "none"
    assert graph.num_nodes == 4
    assert graph.num_edges == 2
    assert [9, 9, 9] in graph
    assert graph.edges[0].weight == 2.0
    assert graph.edges[1].weight == 1.0


def test_load_empty_graph() -> None:
    graph = GraphYamlLoader().from_yaml({})
    assert graph.num_nodes == 0
    assert graph.num_edges == 0


def test_load_graph_invalid_edge() -> None:
    graph_dict = {"edges": [{"nodes": [[0, 0, 0]]}]}
    with pytest.raises(ValueError) as exc_info:
        GraphYamlLoader().from_yaml(graph_dict)
    assert "Edges must have exactly 2 nodes, got 1" in str(exc_info.value)


def test_load_chain_graph_from_file() -> None:
    filename = os.path.join(get_data_folder(), "chain_graph.yaml")
    graph = GraphYamlLoader().from_file(filename)

    assert graph.source_yaml_file == filename
    assert graph.num_nodes == 3
    assert graph.num_edges == 3

    # The chain is cheaper than the direct shortcut.
    plan = graph.find_path([0, 0, 0], [2, 0, 0])
    assert plan.positions == [Position(0, 0, 0), Position(1, 0, 0), Position(2, 0, 0)]
    assert plan.cost == pytest.approx(2.0)


def test_load_voxel_graph_from_file() -> None:
    graph = GraphYamlLoader().from_file(
        os.path.join(get_data_folder(), "voxel_room.yaml")
    )

    assert isinstance(graph, VoxelGraph)
    assert graph.connectivity == 6
    assert graph.num_nodes == 14

    # The wall forces the route through the gap at z=3.
    plan = graph.find_path([0, 64, 0], [3, 64, 0])
    assert Position(2, 64, 3) in plan.positions
    assert plan.cost == pytest.approx(9.0)

    # The ledge is only reachable through its explicit edge.
    plan = graph.find_path([0, 64, 0], [10, 70, 10])
    assert plan.positions[-2:] == [Position(3, 64, 0), Position(10, 70, 10)]
    assert plan.cost == pytest.approx(23.0)


def test_rebuild_chain_graph_keeps_explicit_topology() -> None:
    graph = GraphYamlLoader().from_file(
        os.path.join(get_data_folder(), "chain_graph.yaml")
    )

    graph.rebuild()
    assert graph.num_nodes == 3
    assert graph.num_edges == 3
    plan = graph.find_path([0, 0, 0], [2, 0, 0])
    assert plan.cost == pytest.approx(2.0)


def test_rebuild_voxel_graph_keeps_explicit_topology() -> None:
    graph = GraphYamlLoader().from_file(
        os.path.join(get_data_folder(), "voxel_room.yaml")
    )
    num_nodes = graph.num_nodes
    num_edges = graph.num_edges

    graph.rebuild()
    assert graph.num_nodes == num_nodes
    assert graph.num_edges == num_edges
    assert [10, 70, 10] in graph

    plan = graph.find_path([0, 64, 0], [10, 70, 10])
    assert plan.positions[-2:] == [Position(3, 64, 0), Position(10, 70, 10)]
    assert plan.cost == pytest.approx(23.0)

    # Building again without destroying first must not duplicate anything.
    graph.build()
    assert graph.num_nodes == num_nodes
    assert graph.num_edges == num_edges
