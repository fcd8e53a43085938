"""Puzzle sources: diagram parsing, on-disk suites and synthetic layouts."""

from labyrinth_sort.benchmarks.puzzle_io import (
    PuzzleEntry,
    discover_puzzle_files,
    load_layout,
    load_suite,
    parse_layout,
    unfold,
)
from labyrinth_sort.benchmarks.synthetic_generator import random_layout, synthetic_suite

__all__ = [
    "PuzzleEntry",
    "discover_puzzle_files",
    "load_layout",
    "load_suite",
    "parse_layout",
    "random_layout",
    "synthetic_suite",
    "unfold",
]
