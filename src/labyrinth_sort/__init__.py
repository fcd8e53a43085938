"""labyrinth-sort package."""

from labyrinth_sort.benchmarks.puzzle_io import PuzzleEntry, load_layout, parse_layout, unfold
from labyrinth_sort.benchmarks.synthetic_generator import random_layout, synthetic_suite
from labyrinth_sort.burrow.geometry import BurrowGeometry, geometry_for, standard_geometry
from labyrinth_sort.burrow.layout import Layout, LayoutError, format_layout, validate_layout
from labyrinth_sort.search.dijkstra import UNSOLVED, SearchResult, min_cost, solve
from labyrinth_sort.search.moves import next_layouts
from labyrinth_sort.search.state_graph import build_state_graph, reference_min_cost
from labyrinth_sort.eval.run_solve import main as run_solve

__all__ = [
    "BurrowGeometry",
    "Layout",
    "LayoutError",
    "PuzzleEntry",
    "SearchResult",
    "UNSOLVED",
    "build_state_graph",
    "format_layout",
    "geometry_for",
    "load_layout",
    "min_cost",
    "next_layouts",
    "parse_layout",
    "random_layout",
    "reference_min_cost",
    "run_solve",
    "solve",
    "standard_geometry",
    "synthetic_suite",
    "unfold",
    "validate_layout",
    "solve_text",
]


def solve_text(text: str, geometry_name: str | None = None) -> int:
    """Helper: parse a diagram and return its minimum energy (-1 when unsolvable)."""
    geometry = geometry_for(geometry_name)
    return min_cost(parse_layout(text, geometry), geometry)
