""" Visualization utilities for search graphs and plans. """

from typing import Any

import matplotlib.pyplot as plt
from mpl_toolkits.mplot3d.art3d import Line3DCollection

from .plan import Plan
from .search_graph import SearchGraph


def plot_search_graph(
    axes: Any,
    graphs: list[SearchGraph] = [],
    plan: Plan | None = None,
    graph_color: Any = "k",
    graph_alpha: float = 0.3,
    plan_color: Any = "m",
) -> dict[str, list[Any]]:
    """
    Plots search graphs and a plan on a specified set of 3D axes.

    :param axes: The 3D axes on which to draw.
    :param graphs: A list of search graphs to display.
    :param plan: Plan to display.
    :param graph_color: Color of the graph nodes and edges.
    :param graph_alpha: The intensity of the graph color.
    :param plan_color: Color of the plan, as an RGB tuple or string.
    :return: Dictionary of Matplotlib artists containing what was drawn,
        used for bookkeeping.
    """
    graph_artists = []
    plan_artists = []
    artists = {}

    for graph in graphs:
        positions = [node.position for node in graph.nodes.values()]
        (markers,) = axes.plot(
            [p.x for p in positions],
            [p.y for p in positions],
            [p.z for p in positions],
            color=graph_color,
            alpha=graph_alpha,
            linestyle="",
            marker="o",
            markersize=3,
        )
        graph_artists.append(markers)

        edge_coords = [
            [node_a.position.to_list(), node_b.position.to_list()]
            for node_a, node_b in (edge.nodes for edge in graph.edges)
        ]
        if edge_coords:
            line_segments = Line3DCollection(
                edge_coords,
                color=graph_color,
                alpha=graph_alpha,
                linewidth=0.5,
                linestyle="--",
            )
            axes.add_collection3d(line_segments)
            graph_artists.append(line_segments)

    if plan:
        positions = plan.positions
        x = [p.x for p in positions]
        y = [p.y for p in positions]
        z = [p.z for p in positions]
        (route,) = axes.plot(
            x, y, z, linestyle="-", color=plan_color, linewidth=3, alpha=0.5
        )
        (start,) = axes.plot([x[0]], [y[0]], [z[0]], "go")
        (goal,) = axes.plot([x[-1]], [y[-1]], [z[-1]], "rx")
        plan_artists.extend((route, start, goal))

    if graph_artists:
        artists["graph"] = graph_artists
    if plan_artists:
        artists["plan"] = plan_artists
    return artists


def show_search_graph(
    graphs: list[SearchGraph] = [],
    plan: Plan | None = None,
    title: str = "Search Graph",
) -> None:
    """
    Shows search graphs and a plan in a new figure.

    :param graphs: A list of search graphs to display.
    :param plan: Plan to display.
    :param title: Title of the figure.
    """
    f = plt.figure()
    ax = f.add_subplot(111, projection="3d")
    plot_search_graph(ax, graphs=graphs, plan=plan)
    plt.title(title)
    plt.show()
