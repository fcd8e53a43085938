"""Successor generation: every legal single-token move and its energy cost."""

from __future__ import annotations

from typing import Iterator, Tuple

from labyrinth_sort.burrow.geometry import EMPTY, BurrowGeometry, standard_geometry
from labyrinth_sort.burrow.layout import Layout
from labyrinth_sort.search.reachability import free_stops, is_way_blocked

Move = Tuple[Layout, int]


def next_layouts(layout: Layout, geometry: BurrowGeometry | None = None) -> Iterator[Move]:
    """Yield ``(successor, cost)`` for every legal move out of ``layout``.

    Room exits come first (rooms in index order), then corridor tokens entering
    their target rooms (corridor left to right).
    """
    geometry = geometry or standard_geometry()
    yield from exit_moves(layout, geometry)
    yield from enter_moves(layout, geometry)


def exit_moves(layout: Layout, geometry: BurrowGeometry) -> Iterator[Move]:
    """Move the topmost token of each unsettled room to every free corridor stop."""
    for room_idx, entrance in enumerate(geometry.entrances):
        top = layout.top_index(room_idx)
        if top is None:
            continue
        room = layout.rooms[room_idx]
        token = room[top]
        if geometry.target_room(token) == room_idx and all(cell == token for cell in room[top:]):
            continue

        step_cost = geometry.cost(token)
        for pos in free_stops(layout, entrance, geometry):
            steps = top + 1 + abs(pos - entrance)
            yield layout.with_exit(room_idx, top, pos), steps * step_cost


def enter_moves(layout: Layout, geometry: BurrowGeometry) -> Iterator[Move]:
    """Move corridor tokens straight into their target room when the way is clear."""
    for pos, token in enumerate(layout.corridor):
        if token == EMPTY:
            continue
        room_idx = geometry.target_room(token)
        target_entrance = geometry.entrances[room_idx]

        direction = 1 if target_entrance > pos else -1
        if is_way_blocked(layout.corridor, pos, target_entrance, direction):
            continue

        room = layout.rooms[room_idx]
        if any(cell != EMPTY and cell != token for cell in room):
            continue

        depth = _deepest_empty(room)
        if depth is None:
            continue

        steps = depth + 1 + abs(pos - target_entrance)
        yield layout.with_entry(pos, room_idx, depth), steps * geometry.cost(token)


def _deepest_empty(room: Tuple[str, ...]) -> int | None:
    for depth in range(len(room) - 1, -1, -1):
        if room[depth] == EMPTY:
            return depth
    return None


__all__ = ["Move", "next_layouts", "exit_moves", "enter_moves"]
