"""Uniform-cost search over layouts for the minimum total energy."""

from __future__ import annotations

import heapq
import itertools
import time
from dataclasses import dataclass
from typing import Dict

from labyrinth_sort.burrow.geometry import BurrowGeometry, standard_geometry
from labyrinth_sort.burrow.layout import Layout, validate_layout
from labyrinth_sort.search.moves import next_layouts

UNSOLVED = -1


@dataclass(frozen=True)
class SearchResult:
    """Outcome of one :func:`solve` call."""

    cost: int | None
    expanded: int
    discovered: int
    runtime_s: float

    @property
    def solved(self) -> bool:
        return self.cost is not None

    def as_row(self) -> dict:
        """Flatten into a dictionary suitable for CSV/JSON output."""
        return {
            "min_cost": self.cost if self.cost is not None else UNSOLVED,
            "solved": self.solved,
            "expanded": self.expanded,
            "discovered": self.discovered,
            "runtime_s": self.runtime_s,
        }


def solve(
    start: Layout,
    geometry: BurrowGeometry | None = None,
    *,
    validate: bool = True,
) -> SearchResult:
    """Dijkstra from ``start`` to the first goal layout popped off the frontier.

    Stale frontier entries are skipped on pop rather than decreased in place.
    A successor's best cost is only replaced on strict improvement. Heap
    entries carry an insertion counter so layouts are never compared and
    equal-cost ties pop in insertion order.

    Returns a :class:`SearchResult` whose ``cost`` is None when every reachable
    layout was settled without meeting the goal.
    """
    geometry = geometry or standard_geometry()
    if validate:
        validate_layout(start, geometry)

    began = time.perf_counter()
    counter = itertools.count()
    best: Dict[Layout, int] = {start: 0}
    frontier: list[tuple[int, int, Layout]] = [(0, next(counter), start)]
    expanded = 0

    while frontier:
        cost, _, layout = heapq.heappop(frontier)
        if layout.is_goal(geometry):
            return SearchResult(cost, expanded, len(best), time.perf_counter() - began)
        if cost > best[layout]:
            continue

        expanded += 1
        for successor, step_cost in next_layouts(layout, geometry):
            candidate = cost + step_cost
            known = best.get(successor)
            if known is None or candidate < known:
                best[successor] = candidate
                heapq.heappush(frontier, (candidate, next(counter), successor))

    return SearchResult(None, expanded, len(best), time.perf_counter() - began)


def min_cost(start: Layout, geometry: BurrowGeometry | None = None) -> int:
    """Minimum energy to sort ``start``, or ``UNSOLVED`` (-1) when no goal is reachable."""
    result = solve(start, geometry)
    return result.cost if result.cost is not None else UNSOLVED


__all__ = ["SearchResult", "UNSOLVED", "solve", "min_cost"]
