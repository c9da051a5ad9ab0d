"""Search graph built from the walkable voxels of a world."""

import itertools
import math
from typing import Any, Callable, Iterable

from scipy.spatial import cKDTree

from .graph_types import Node
from .search_graph import SearchGraph
from ..utils.logging import get_global_logger
from ..utils.position import Position


def _neighbor_offsets(connectivity: int) -> list[Position]:
    """
    Gets the offsets to neighboring voxels for a given connectivity.

    :param connectivity: 6 (shared faces), 18 (faces and edges),
        or 26 (faces, edges, and corners).
    :return: List of offsets.
    """
    max_nonzero = {6: 1, 18: 2, 26: 3}[connectivity]
    offsets = []
    for delta in itertools.product((-1, 0, 1), repeat=3):
        num_nonzero = sum(1 for d in delta if d != 0)
        if 0 < num_nonzero <= max_nonzero:
            offsets.append(Position(*delta))
    return offsets


VOXEL_CONNECTIVITY = {
    connectivity: _neighbor_offsets(connectivity) for connectivity in (6, 18, 26)
}

# Signature for a block-solid callback:
#   is_solid(position) -> bool
BlockSolidFn = Callable[[Position], bool]

# Signature for an edge cost multiplier:
#   cost_multiplier(position_a, position_b) -> float, at least 1.0
CostMultiplierFn = Callable[[Position, Position], float]


class VoxelGraph(SearchGraph):
    """
    Search graph whose nodes are walkable voxels, linked to their neighbors.

    Edge weights are the straight-line length of the step between voxels,
    optionally scaled up by a cost multiplier, so the Euclidean heuristic
    never overestimates.
    """

    def __init__(
        self,
        walkable: Iterable[Any] = (),
        connectivity: int = 26,
        cost_multiplier: CostMultiplierFn | None = None,
        heuristic: str = "euclidean",
    ) -> None:
        """
        Creates and builds a voxel graph.

        :param walkable: The walkable voxel positions.
        :param connectivity: Which neighboring voxels are linked:
            6 (shared faces), 18 (faces and edges), or 26 (faces, edges, and corners).
        :param cost_multiplier: Optional function scaling the weight of the step
            between two voxels. Must return a value of at least 1.0.
        :param heuristic: The heuristic used by the A* search when finding paths.
        :raises ValueError: if the connectivity is not supported.
        """
        super().__init__(heuristic=heuristic)
        if connectivity not in VOXEL_CONNECTIVITY:
            raise ValueError(
                f"Connectivity must be one of {sorted(VOXEL_CONNECTIVITY)}, "
                f"got {connectivity}."
            )
        self.connectivity = connectivity
        self.cost_multiplier = cost_multiplier
        self.walkable = [Position.construct(pos) for pos in walkable]
        self._kdtree: cKDTree | None = None
        self._kdtree_nodes: list[Node] = []
        self.build()

    @classmethod
    def from_solid_fn(
        cls,
        min_corner: Any,
        max_corner: Any,
        is_solid: BlockSolidFn,
        **kwargs: Any,
    ) -> "VoxelGraph":
        """
        Creates a voxel graph by scanning a box of the world for standing room.

        A voxel is walkable when the block below it is solid, and both the voxel
        and the block above it are not, so a two block tall agent fits.

        :param min_corner: Lowest corner of the box to scan, inclusive.
        :param max_corner: Highest corner of the box to scan, inclusive.
        :param is_solid: Callback deciding whether the block at a position is solid.
        :param kwargs: Additional keyword arguments passed to the constructor.
        :return: The built voxel graph.
        """
        min_corner = Position.construct(min_corner)
        max_corner = Position.construct(max_corner)
        below = Position(0, -1, 0)
        above = Position(0, 1, 0)

        walkable = []
        for x, y, z in itertools.product(
            range(min_corner.x, max_corner.x + 1),
            range(min_corner.y, max_corner.y + 1),
            range(min_corner.z, max_corner.z + 1),
        ):
            pos = Position(x, y, z)
            if (
                is_solid(pos + below)
                and not is_solid(pos)
                and not is_solid(pos + above)
            ):
                walkable.append(pos)
        return cls(walkable, **kwargs)

    def build(self) -> None:
        """
        Adds a node per walkable voxel and links neighboring voxels,
        replacing any current contents.
        """
        self.destroy()
        for pos in self.walkable:
            self.add_node(pos)

        offsets = VOXEL_CONNECTIVITY[self.connectivity]
        for pos, node in self.nodes.items():
            for offset in offsets:
                # Only link towards lexicographically larger positions, so each
                # pair of neighbors gets exactly one edge.
                if offset < Position(0, 0, 0):
                    continue
                other = self.nodes.get(pos + offset)
                if other is None:
                    continue
                self.link_nodes(node, other, self._get_step_cost(pos, other.position))

        self._kdtree = None
        get_global_logger().debug(
            f"Built voxel graph with {self.num_nodes} nodes and {self.num_edges} edges."
        )

    def _get_step_cost(self, pos: Position, other: Position) -> float:
        """
        Computes the weight of the step between two neighboring voxels.

        :param pos: The first voxel.
        :param other: The second voxel.
        :return: The step weight.
        :raises ValueError: if the cost multiplier returns less than 1.0.
        """
        cost = math.sqrt(sum((a - b) ** 2 for a, b in zip(pos, other)))
        if self.cost_multiplier is not None:
            multiplier = self.cost_multiplier(pos, other)
            if multiplier < 1.0:
                raise ValueError(
                    f"Cost multiplier must be at least 1.0, got {multiplier} "
                    f"between {pos} and {other}."
                )
            cost *= multiplier
        return cost

    def add_node(self, position: Any) -> Node:
        self._kdtree = None
        return super().add_node(position)

    def destroy(self) -> None:
        super().destroy()
        self._kdtree = None
        self._kdtree_nodes = []

    def find_closest(self, position: Any) -> Node | None:
        """
        Get the nearest node in the graph to a specified position,
        using a k-d tree over the node positions.

        :param position: Query position.
        :return: The nearest node to the query position, or None if the graph is empty.
        """
        if len(self.nodes) == 0:
            return None

        position = Position.construct(position)
        node = self.nodes.get(position)
        if node is not None:
            return node

        if self._kdtree is None:
            self._kdtree_nodes = list(self.nodes.values())
            self._kdtree = cKDTree([n.position.to_list() for n in self._kdtree_nodes])
        _, index = self._kdtree.query(position.to_list())
        return self._kdtree_nodes[int(index)]
