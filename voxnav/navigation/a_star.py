"""Implementation of the A* graph search."""

import time
from typing import Any, Callable

from .graph_types import Node
from .plan import Plan
from .priority_queue import PriorityQueue
from ..utils.logging import get_global_logger
from ..utils.position import Position


HeuristicFunction = Callable[[Position, Position], float]

HEURISTICS: dict[str, HeuristicFunction] = {
    "euclidean": lambda p1, p2: p1.get_linear_distance(p2),
    "manhattan": lambda p1, p2: float(p1.get_manhattan_distance(p2)),
    "chebyshev": lambda p1, p2: float(p1.get_chebyshev_distance(p2)),
    "none": lambda p1, p2: 0.0,
}


class PlanningNode:
    """
    Search-scoped bookkeeping for a single graph node.

    The heuristic cost is computed once on construction. The goal cost and
    fitness cost are recomputed every time the previous node changes.
    """

    def __init__(
        self,
        node: Node,
        goal: Node,
        heuristic: HeuristicFunction,
        previous: "PlanningNode | None" = None,
    ) -> None:
        """
        Creates a planning node.

        :param node: The graph node being tracked.
        :param goal: The goal node of the search.
        :param heuristic: Function estimating the cost between two positions.
        :param previous: The planning node this one is reached from, if any.
        """
        self.node = node
        self.goal = goal
        self.heuristic_cost = heuristic(node.position, goal.position)
        self.closed = False
        self.set_previous(previous)

    def set_previous(self, previous: "PlanningNode | None") -> None:
        """
        Re-points this node to a new predecessor and recomputes its costs.

        :param previous: The new predecessor, or None for the start node.
        """
        self.previous = previous
        if previous is None:
            self.goal_cost = 0.0
        else:
            self.goal_cost = previous.goal_cost + self.node.get_cost_from(
                previous.node
            )
        self.fitness_cost = self.goal_cost + self.heuristic_cost

    def is_better_than(self, other: "PlanningNode") -> bool:
        return self.fitness_cost < other.fitness_cost

    def __repr__(self) -> str:
        return (
            f"PlanningNode: [{self.node.position.to_list()}, "
            f"g={self.goal_cost:.3f}, h={self.heuristic_cost:.3f}, "
            f"f={self.fitness_cost:.3f}, closed={self.closed}]"
        )


def _get_fitness(planning_node: PlanningNode) -> float:
    return planning_node.fitness_cost


class AStar:
    """
    A* search over the nodes and edges of a search graph.

    Stale open set entries are discarded lazily: a node whose cost improves is
    pushed again, and older copies are skipped once the node has been closed.
    Among candidates with equal fitness, expansion order is unspecified.
    """

    def __init__(self, heuristic: str = "euclidean") -> None:
        """
        Creates an instance of the A* search.

        :param heuristic: The metric to be used as heuristic
            ('euclidean', 'manhattan', 'chebyshev', 'none').
        """
        self.heuristic = heuristic
        self._set_heuristic()
        self.node_map: dict[Node, PlanningNode] = {}
        self.open_set: PriorityQueue[PlanningNode] = PriorityQueue(key=_get_fitness)
        self.goal: Node | None = None
        self.num_expanded = 0

    def _set_heuristic(self) -> None:
        """Sets the A* heuristic."""
        logger = get_global_logger()
        if self.heuristic not in HEURISTICS:
            logger.warning(f"Unknown heuristic : {self.heuristic}")
            logger.warning("Defaulting to heuristic : 'none'")
            self.heuristic = "none"
        elif self.heuristic == "manhattan":
            logger.warning(
                "Manhattan distance overestimates costs on graphs with diagonal edges."
            )
        self._heuristic = HEURISTICS[self.heuristic]

    @property
    def num_visited(self) -> int:
        """Number of planning nodes created during the latest search."""
        return len(self.node_map)

    def plan(self, start: Node, goal: Node) -> Plan | None:
        """
        Searches for the cheapest route from start to goal.

        :param start: The start node.
        :param goal: The goal node.
        :return: The plan from start to goal, or None if the goal is unreachable.
        """
        t_start = time.time()
        self.node_map = {}
        self.open_set = PriorityQueue(key=_get_fitness)
        self.goal = goal
        self.num_expanded = 0

        self._add_to_open_set(start, None)

        while not self.open_set.empty():
            current = self.open_set.pop()
            if current.closed:
                continue

            if current.node is goal:
                plan = self._build_path(current)
                plan.planning_time = time.time() - t_start
                get_global_logger().debug(
                    f"Found plan of cost {current.goal_cost:.3f} after expanding "
                    f"{self.num_expanded} of {self.num_visited} visited nodes."
                )
                return plan

            current.closed = True
            self.num_expanded += 1

            for neighbor in current.node.get_neighbors():
                planning_node = self.node_map.get(neighbor)
                if planning_node is None:
                    self._add_to_open_set(neighbor, current)
                    continue
                if planning_node.closed:
                    continue

                tentative_cost = current.goal_cost + neighbor.get_cost_from(
                    current.node
                )
                if tentative_cost < planning_node.goal_cost:
                    planning_node.set_previous(current)
                    self.open_set.push(planning_node)

        get_global_logger().debug(
            f"Open set exhausted after visiting {self.num_visited} nodes."
        )
        return None

    __call__ = plan

    def _add_to_open_set(
        self, node: Node, previous: PlanningNode | None
    ) -> PlanningNode:
        """
        Creates the planning node for a newly discovered graph node and queues it.

        :param node: The graph node.
        :param previous: The planning node it was reached from, if any.
        :return: The new planning node.
        """
        planning_node = PlanningNode(node, self.goal, self._heuristic, previous)
        self.node_map[node] = planning_node
        self.open_set.push(planning_node)
        return planning_node

    def _build_path(self, goal: PlanningNode) -> Plan:
        """
        Backtraces from the goal planning node and reverses into a finished plan.

        :param goal: The planning node of the goal.
        :return: The plan, with its cursor reset to the start node.
        """
        nodes = []
        current: PlanningNode | None = goal
        while current is not None:
            nodes.append(current.node)
            current = current.previous
        nodes.reverse()

        plan = Plan(nodes)
        plan.reset()
        return plan

    def to_dict(self) -> dict[str, Any]:
        """
        Serializes the search settings to a dictionary.

        :return: A dictionary containing the search information.
        """
        return {"type": "astar", "heuristic": self.heuristic}
