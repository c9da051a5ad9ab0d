"""
Plan representation for following a route through a search graph.
"""

from typing import Iterator

from .graph_types import Node
from ..utils.position import Position


class PlanExhaustedError(IndexError):
    """Raised when advancing a plan whose cursor is past the last node."""


class Plan:
    """
    An ordered route of graph nodes, from start to goal inclusive,
    with a forward-only cursor for step by step consumption.

    A newly constructed plan has its cursor parked at the end, so
    :meth:`reset` must be called before stepping through it. Plans returned
    by the A* search are already reset.
    """

    def __init__(
        self, nodes: list[Node] | None = None, planning_time: float | None = None
    ) -> None:
        """
        Creates a Plan object instance.

        :param nodes: List of nodes representing the route.
        :param planning_time: The time taken to generate this plan.
        """
        self._nodes: list[Node] = []
        for node in nodes or []:
            self.add_node(node)
        self._cursor = len(self._nodes)
        self.planning_time = planning_time

    def add_node(self, node: Node) -> None:
        """
        Appends a node to the end of the route.
        This is only meant to be used while the plan is being constructed.

        :param node: The node to append.
        """
        self._nodes.append(node)

    def has_next(self) -> bool:
        """
        Checks whether the cursor can advance.

        :return: True if there is a node left to visit, else False.
        """
        return self._cursor < len(self._nodes)

    def next(self) -> Node:
        """
        Returns the node at the cursor and advances the cursor.

        :return: The next node on the route.
        :raises PlanExhaustedError: if there are no nodes left.
        """
        if not self.has_next():
            raise PlanExhaustedError(
                f"Plan with {self.num_nodes} nodes has no next node."
            )
        node = self._nodes[self._cursor]
        self._cursor += 1
        return node

    def reset(self) -> None:
        """Moves the cursor back to the first node."""
        self._cursor = 0

    def get_current(self) -> Node | None:
        """
        Gets the node at the cursor, without advancing.

        :return: The node the next call to :meth:`next` returns, or None if exhausted.
        """
        if not self.has_next():
            return None
        return self._nodes[self._cursor]

    def get_goal(self) -> Node | None:
        """
        Gets the final node of the route.

        :return: The goal node, or None if the plan is empty.
        """
        if not self._nodes:
            return None
        return self._nodes[-1]

    @property
    def nodes(self) -> tuple[Node, ...]:
        return tuple(self._nodes)

    @property
    def positions(self) -> list[Position]:
        return [node.position for node in self._nodes]

    @property
    def num_nodes(self) -> int:
        return len(self._nodes)

    @property
    def cost(self) -> float:
        """Total weight of the edges traversed along the route."""
        return sum(
            (
                current.get_cost_from(previous)
                for previous, current in zip(self._nodes, self._nodes[1:])
            ),
            0.0,
        )

    @property
    def length(self) -> float:
        """Total straight-line distance between consecutive nodes along the route."""
        return sum(
            (
                previous.position.get_linear_distance(current.position)
                for previous, current in zip(self._nodes, self._nodes[1:])
            ),
            0.0,
        )

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        # Iterating does not move the cursor.
        return iter(self._nodes)

    def __bool__(self) -> bool:
        return len(self._nodes) > 0

    def __repr__(self) -> str:
        """Return brief description of the plan."""
        return f"Plan with {self.num_nodes} nodes, Length {self.length:.3f}"

    def print_details(self) -> None:
        """Print detailed description of the plan."""
        print_str = f"Plan with {self.num_nodes} nodes."
        for i, node in enumerate(self._nodes):
            print_str += f"\n  {i + 1}. {node.position}"
        print_str += f"\nTotal Cost: {self.cost:.3f}"
        print_str += f"\nTotal Length: {self.length:.3f}"
        if self.planning_time:
            if self.planning_time > 0.01:
                print_str += f"\nPlanning time: {self.planning_time:3f} seconds"
            else:
                print_str += (
                    f"\nPlanning time: {self.planning_time * 1000.0:3f} milliseconds"
                )
        print(print_str)
