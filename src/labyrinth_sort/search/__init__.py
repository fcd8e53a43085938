"""Search engine: reachability helpers, move generation and the cost search."""

from labyrinth_sort.search.dijkstra import UNSOLVED, SearchResult, min_cost, solve
from labyrinth_sort.search.moves import enter_moves, exit_moves, next_layouts
from labyrinth_sort.search.reachability import free_stops, is_way_blocked
from labyrinth_sort.search.state_graph import build_state_graph, reference_min_cost

__all__ = [
    "SearchResult",
    "UNSOLVED",
    "build_state_graph",
    "enter_moves",
    "exit_moves",
    "free_stops",
    "is_way_blocked",
    "min_cost",
    "next_layouts",
    "reference_min_cost",
    "solve",
]
