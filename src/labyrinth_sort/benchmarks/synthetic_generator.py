"""Seeded random start layouts for property checks and benchmarking."""

from __future__ import annotations

import random
from dataclasses import dataclass
from pathlib import Path
from typing import List

from labyrinth_sort.benchmarks.puzzle_io import PuzzleEntry
from labyrinth_sort.burrow.geometry import EMPTY, BurrowGeometry
from labyrinth_sort.burrow.layout import Layout


@dataclass(frozen=True)
class SyntheticSpec:
    """Specification of one synthetic puzzle."""

    name: str
    depth: int
    seed: int


def random_layout(geometry: BurrowGeometry, depth: int, seed: int) -> Layout:
    """Shuffle ``depth`` tokens of every type into the rooms; the corridor starts empty."""
    if depth < 1:
        msg = f"depth must be >= 1, got {depth}"
        raise ValueError(msg)
    rng = random.Random(seed)
    tokens = [token for token in geometry.token_types for _ in range(depth)]
    rng.shuffle(tokens)
    rooms = [tokens[idx * depth : (idx + 1) * depth] for idx in range(geometry.room_count)]
    return Layout.build(EMPTY * geometry.corridor_length, rooms)


def generate_puzzle(spec: SyntheticSpec, geometry: BurrowGeometry) -> PuzzleEntry:
    """Wrap a random layout with a stable synthetic path."""
    layout = random_layout(geometry, spec.depth, spec.seed)
    return PuzzleEntry(spec.name, Path(f"synthetic/{spec.name}.txt"), layout)


def synthetic_suite(
    geometry: BurrowGeometry,
    *,
    depth: int = 2,
    count: int = 5,
    seed: int = 0,
) -> List[PuzzleEntry]:
    """Return ``count`` deterministic puzzles named after their geometry, depth and seed."""
    specs = [
        SyntheticSpec(f"{geometry.name}_d{depth}_s{seed + idx}", depth, seed + idx)
        for idx in range(count)
    ]
    return [generate_puzzle(spec, geometry) for spec in specs]


__all__ = ["SyntheticSpec", "random_layout", "generate_puzzle", "synthetic_suite"]
