""" Weighted graph pathfinding for agents navigating 3D voxel worlds. """
