"""Navigation utilities.

This module contains the search graph, A* search, and plan types used to
find and follow routes through a voxel world.
"""

from .graph_types import Edge, InvalidTopologyError, Node
from .plan import Plan, PlanExhaustedError
from .priority_queue import PriorityQueue
from .a_star import AStar, PlanningNode, HEURISTICS
from .search_graph import SearchGraph
from .voxel_graph import VoxelGraph
from .graph_yaml import ExplicitSearchGraph, ExplicitVoxelGraph, GraphYamlLoader
