#!/usr/bin/env python3

"""Builds a small voxel world with a wall, finds a path around it, and shows it."""

from voxnav.navigation import VoxelGraph
from voxnav.navigation.visualization import show_search_graph
from voxnav.utils.position import Position


def is_solid(pos: Position) -> bool:
    """A floor at y=63, with a wall at x=4 that has a gap at z=7."""
    if pos.y == 63:
        return True
    return pos.x == 4 and pos.z != 7 and pos.y >= 64


def demo_voxel_astar():
    """Creates a voxel graph and plans a path across the wall."""
    graph = VoxelGraph.from_solid_fn([0, 62, 0], [8, 66, 8], is_solid, connectivity=26)
    plan = graph.find_path(Position(0, 64, 0), Position.from_world(8.4, 64.0, 0.6))
    if plan:
        plan.print_details()
        while plan.has_next():
            print(f"Moving to {plan.next().position}")
    show_search_graph([graph], plan, title="Voxel A*")


if __name__ == "__main__":
    demo_voxel_astar()
