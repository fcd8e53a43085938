"""Layout value type: one arrangement of tokens across the corridor and rooms."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Tuple

from labyrinth_sort.burrow.geometry import EMPTY, BurrowGeometry, standard_geometry

Corridor = Tuple[str, ...]
Room = Tuple[str, ...]


class LayoutError(ValueError):
    """Raised when a layout does not fit its geometry or breaks conservation."""


@dataclass(frozen=True)
class Layout:
    """Immutable corridor + rooms snapshot.

    Room slot 0 is the top (next to the corridor), slot ``depth - 1`` the
    bottom. Equality and hashing are structural over the corridor followed by
    each room in index order, so layouts can key the search cost table.
    """

    corridor: Corridor
    rooms: Tuple[Room, ...]

    # ------------------------------------------------------------------ build
    @classmethod
    def build(cls, corridor: Iterable[str], rooms: Iterable[Iterable[str]]) -> "Layout":
        """Build from any iterables, e.g. ``Layout.build(".....", ["BA", "AB"])``."""
        return cls(tuple(corridor), tuple(tuple(room) for room in rooms))

    # ------------------------------------------------------------------ query
    @property
    def room_depth(self) -> int:
        return len(self.rooms[0]) if self.rooms else 0

    def is_goal(self, geometry: BurrowGeometry | None = None) -> bool:
        """True when the corridor is empty and every room holds only its own type."""
        geometry = geometry or standard_geometry()
        if any(cell != EMPTY for cell in self.corridor):
            return False
        for idx, room in enumerate(self.rooms):
            target = geometry.token_types[idx]
            if any(cell != target for cell in room):
                return False
        return True

    def top_index(self, room: int) -> int | None:
        """Depth of the topmost token in ``room``, or None when the room is empty."""
        for depth, cell in enumerate(self.rooms[room]):
            if cell != EMPTY:
                return depth
        return None

    def token_counts(self) -> Counter:
        counts: Counter = Counter(cell for cell in self.corridor if cell != EMPTY)
        for room in self.rooms:
            counts.update(cell for cell in room if cell != EMPTY)
        return counts

    # -------------------------------------------------------------- transform
    def copy(self) -> "Layout":
        """Equal, independent value; mutating neither can affect the other."""
        return Layout(tuple(self.corridor), tuple(tuple(room) for room in self.rooms))

    def with_exit(self, room: int, depth: int, pos: int) -> "Layout":
        """Successor with the token at ``rooms[room][depth]`` moved to ``corridor[pos]``."""
        token = self.rooms[room][depth]
        corridor = list(self.corridor)
        corridor[pos] = token
        cells = list(self.rooms[room])
        cells[depth] = EMPTY
        return Layout(tuple(corridor), self._replace_room(room, cells))

    def with_entry(self, pos: int, room: int, depth: int) -> "Layout":
        """Successor with the token at ``corridor[pos]`` moved to ``rooms[room][depth]``."""
        token = self.corridor[pos]
        corridor = list(self.corridor)
        corridor[pos] = EMPTY
        cells = list(self.rooms[room])
        cells[depth] = token
        return Layout(tuple(corridor), self._replace_room(room, cells))

    def _replace_room(self, room: int, cells: list[str]) -> Tuple[Room, ...]:
        rooms = list(self.rooms)
        rooms[room] = tuple(cells)
        return tuple(rooms)


# --------------------------------------------------------------------------- #
# Validation


def validate_layout(layout: Layout, geometry: BurrowGeometry | None = None) -> Layout:
    """Check shape, alphabet, gravity packing and conservation; return ``layout``.

    Raises:
        LayoutError: on the first violation found.
    """
    geometry = geometry or standard_geometry()
    if len(layout.corridor) != geometry.corridor_length:
        msg = (
            f"corridor has {len(layout.corridor)} slots, "
            f"geometry '{geometry.name}' expects {geometry.corridor_length}"
        )
        raise LayoutError(msg)
    if len(layout.rooms) != geometry.room_count:
        msg = f"layout has {len(layout.rooms)} rooms, expected {geometry.room_count}"
        raise LayoutError(msg)
    depth = layout.room_depth
    if depth < 1:
        raise LayoutError("rooms must have at least one slot")
    if any(len(room) != depth for room in layout.rooms):
        msg = f"rooms must share one depth, got {[len(room) for room in layout.rooms]}"
        raise LayoutError(msg)

    allowed = set(geometry.token_types) | {EMPTY}
    for pos, cell in enumerate(layout.corridor):
        if cell not in allowed:
            msg = f"unknown token {cell!r} at corridor slot {pos}"
            raise LayoutError(msg)
        if cell != EMPTY and geometry.is_entrance(pos):
            msg = f"token {cell!r} rests on room entrance {pos}"
            raise LayoutError(msg)
    for idx, room in enumerate(layout.rooms):
        seen_token = False
        for depth_idx, cell in enumerate(room):
            if cell not in allowed:
                msg = f"unknown token {cell!r} in room {idx} slot {depth_idx}"
                raise LayoutError(msg)
            if cell != EMPTY:
                seen_token = True
            elif seen_token:
                msg = f"room {idx} has an empty slot {depth_idx} below a token"
                raise LayoutError(msg)

    counts = layout.token_counts()
    for token in geometry.token_types:
        if counts.get(token, 0) != depth:
            msg = f"expected {depth} tokens of type {token!r}, found {counts.get(token, 0)}"
            raise LayoutError(msg)
    return layout


# --------------------------------------------------------------------------- #
# Rendering


def format_layout(layout: Layout, geometry: BurrowGeometry | None = None) -> str:
    """Render ``layout`` as the wall diagram read by the puzzle parser."""
    geometry = geometry or standard_geometry()
    width = len(layout.corridor) + 2
    columns = [entrance + 1 for entrance in geometry.entrances]
    lo, hi = min(columns) - 1, max(columns) + 1

    lines = ["#" * width, "#" + "".join(layout.corridor) + "#"]
    for depth in range(layout.room_depth):
        if depth == 0:
            row = ["#"] * width
        else:
            row = [" "] * lo + ["#"] * (hi - lo + 1)
        for room, col in enumerate(columns):
            row[col] = layout.rooms[room][depth]
        lines.append("".join(row))
    lines.append(" " * lo + "#" * (hi - lo + 1))
    return "\n".join(lines)


__all__ = ["Layout", "LayoutError", "validate_layout", "format_layout"]
