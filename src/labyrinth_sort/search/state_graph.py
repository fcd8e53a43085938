"""Exhaustive state graph of small puzzles, used as a reference solver."""

from __future__ import annotations

from collections import deque

import networkx as nx

from labyrinth_sort.burrow.geometry import BurrowGeometry, standard_geometry
from labyrinth_sort.burrow.layout import Layout
from labyrinth_sort.search.moves import next_layouts

DEFAULT_MAX_NODES = 200_000


def build_state_graph(
    start: Layout,
    geometry: BurrowGeometry | None = None,
    *,
    max_nodes: int = DEFAULT_MAX_NODES,
) -> nx.DiGraph:
    """Breadth-first expansion of every layout reachable from ``start``.

    Edges carry ``weight`` = move energy; when two moves link the same pair of
    layouts the cheaper one is kept. Nodes are tagged with ``goal``.

    Raises:
        RuntimeError: when more than ``max_nodes`` layouts are reachable.
    """
    geometry = geometry or standard_geometry()
    graph = nx.DiGraph()
    graph.add_node(start, goal=start.is_goal(geometry))
    queue = deque([start])
    while queue:
        layout = queue.popleft()
        for successor, cost in next_layouts(layout, geometry):
            if successor not in graph:
                if graph.number_of_nodes() >= max_nodes:
                    msg = f"state graph exceeds {max_nodes} layouts; use solve() instead"
                    raise RuntimeError(msg)
                graph.add_node(successor, goal=successor.is_goal(geometry))
                queue.append(successor)
            existing = graph.get_edge_data(layout, successor)
            if existing is None or cost < existing["weight"]:
                graph.add_edge(layout, successor, weight=cost)
    return graph


def goal_layouts(graph: nx.DiGraph) -> list[Layout]:
    return [node for node, is_goal in graph.nodes(data="goal") if is_goal]


def reference_min_cost(
    start: Layout,
    geometry: BurrowGeometry | None = None,
    *,
    max_nodes: int = DEFAULT_MAX_NODES,
) -> int | None:
    """Cheapest goal distance over the full state graph, or None if no goal is reachable."""
    graph = build_state_graph(start, geometry, max_nodes=max_nodes)
    distances = nx.single_source_dijkstra_path_length(graph, start, weight="weight")
    costs = [distances[node] for node in goal_layouts(graph) if node in distances]
    return min(costs) if costs else None


__all__ = ["build_state_graph", "goal_layouts", "reference_min_cost"]
