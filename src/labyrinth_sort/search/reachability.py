"""Corridor reachability helpers used by the move generator."""

from __future__ import annotations

from typing import Iterator, Sequence

from labyrinth_sort.burrow.geometry import EMPTY, BurrowGeometry
from labyrinth_sort.burrow.layout import Layout


def is_way_blocked(corridor: Sequence[str], start: int, end: int, direction: int) -> bool:
    """Return True if any slot strictly between ``start`` and ``end`` is occupied."""
    for idx in range(start + direction, end, direction):
        if corridor[idx] != EMPTY:
            return True
    return False


def free_stops(layout: Layout, start: int, geometry: BurrowGeometry) -> Iterator[int]:
    """Yield corridor indices a token leaving at ``start`` can wait on.

    Walks left then right until the corridor edge or the first occupied slot,
    skipping room entrances.
    """
    corridor = layout.corridor
    for direction in (-1, 1):
        idx = start + direction
        while 0 <= idx < len(corridor):
            if corridor[idx] != EMPTY:
                break
            if not geometry.is_entrance(idx):
                yield idx
            idx += direction


__all__ = ["is_way_blocked", "free_stops"]
