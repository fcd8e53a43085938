"""Fixed burrow geometries: corridor length, room entrances, token types and step costs."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, Tuple

EMPTY = "."
GEOMETRY_ENV = "LABYRINTH_GEOMETRY"
DEFAULT_GEOMETRY = "standard"


@dataclass(frozen=True)
class BurrowGeometry:
    """Domain constants shared by every layout of one puzzle family.

    Room ``i`` opens onto corridor index ``entrances[i]`` and is the target room
    of ``token_types[i]``. ``step_costs`` maps each token type to the energy it
    spends per step.
    """

    name: str
    corridor_length: int
    entrances: Tuple[int, ...]
    token_types: Tuple[str, ...]
    step_costs: Dict[str, int]

    def __post_init__(self) -> None:
        if self.corridor_length < 3:
            msg = f"corridor_length must be >= 3, got {self.corridor_length}"
            raise ValueError(msg)
        if len(self.entrances) != len(self.token_types):
            msg = (
                f"{len(self.entrances)} entrances but {len(self.token_types)} token types; "
                "each room needs exactly one target type"
            )
            raise ValueError(msg)
        if not self.entrances:
            raise ValueError("geometry needs at least one room")
        if len(set(self.entrances)) != len(self.entrances):
            msg = f"entrances must be pairwise distinct, got {self.entrances}"
            raise ValueError(msg)
        for entrance in self.entrances:
            # The corridor ends are the only places a token can always wait.
            if not 0 < entrance < self.corridor_length - 1:
                msg = f"entrance {entrance} must lie strictly inside the corridor"
                raise ValueError(msg)
        if len(set(self.token_types)) != len(self.token_types):
            msg = f"token types must be distinct, got {self.token_types}"
            raise ValueError(msg)
        for token in self.token_types:
            if len(token) != 1 or token == EMPTY or token.isspace() or token == "#":
                msg = f"invalid token type {token!r}"
                raise ValueError(msg)
            cost = self.step_costs.get(token)
            if cost is None or cost <= 0:
                msg = f"token type {token!r} needs a positive step cost"
                raise ValueError(msg)
        costs = [self.step_costs[token] for token in self.token_types]
        if any(lower >= higher for lower, higher in zip(costs, costs[1:])):
            msg = f"step costs must increase strictly with room order, got {costs}"
            raise ValueError(msg)
        extra = set(self.step_costs) - set(self.token_types)
        if extra:
            msg = f"step costs given for unknown token types: {sorted(extra)}"
            raise ValueError(msg)

    # step_costs is a dict; hash on the tuple fields only.
    def __hash__(self) -> int:
        return hash((self.name, self.corridor_length, self.entrances, self.token_types))

    @property
    def room_count(self) -> int:
        return len(self.entrances)

    def target_room(self, token: str) -> int:
        """Index of the room ``token`` belongs in."""
        return self.token_types.index(token)

    def cost(self, token: str) -> int:
        return self.step_costs[token]

    def is_entrance(self, index: int) -> bool:
        return index in self.entrances


def _standard() -> BurrowGeometry:
    return BurrowGeometry(
        name="standard",
        corridor_length=11,
        entrances=(2, 4, 6, 8),
        token_types=("A", "B", "C", "D"),
        step_costs={"A": 1, "B": 10, "C": 100, "D": 1000},
    )


def _compact() -> BurrowGeometry:
    return BurrowGeometry(
        name="compact",
        corridor_length=5,
        entrances=(1, 3),
        token_types=("A", "B"),
        step_costs={"A": 1, "B": 10},
    )


@lru_cache(maxsize=1)
def geometry_registry() -> Dict[str, BurrowGeometry]:
    """Return the known geometries keyed by name."""
    return {
        "standard": _standard(),
        "compact": _compact(),
    }


def geometry_for(name: str | None = None) -> BurrowGeometry:
    """Look up a geometry by name, falling back to ``LABYRINTH_GEOMETRY`` then ``standard``."""
    key = name or os.environ.get(GEOMETRY_ENV) or DEFAULT_GEOMETRY
    reg = geometry_registry()
    if key not in reg:
        msg = f"Unknown geometry '{key}' (known: {', '.join(sorted(reg))})"
        raise KeyError(msg)
    return reg[key]


def standard_geometry() -> BurrowGeometry:
    return geometry_registry()["standard"]

