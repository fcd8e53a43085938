"""Puzzle diagram parsing and on-disk puzzle discovery."""

from __future__ import annotations

import os
import warnings
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from labyrinth_sort.burrow.geometry import BurrowGeometry, standard_geometry
from labyrinth_sort.burrow.layout import Layout, LayoutError, validate_layout

PUZZLES_ENV = "LABYRINTH_PUZZLES_ROOT"

# Extra rows folded into the standard diagram to make the deep (depth 4) variant.
UNFOLD_ROWS = ("  #D#C#B#A#", "  #D#B#A#C#")


@dataclass(frozen=True)
class PuzzleEntry:
    """Container tying a parsed layout to its source path."""

    puzzle_id: str
    path: Path
    layout: Layout


def _lines(source: str | Sequence[str]) -> list[str]:
    lines = source.splitlines() if isinstance(source, str) else [str(line) for line in source]
    lines = [line.rstrip("\r\n") for line in lines]
    while lines and not lines[-1].strip():
        lines.pop()
    while lines and not lines[0].strip():
        lines.pop(0)
    return lines


def parse_layout(source: str | Sequence[str], geometry: BurrowGeometry | None = None) -> Layout:
    """Parse a wall diagram into a validated :class:`Layout`.

    The second line holds the corridor between ``#`` walls; every line after it
    except the last is one row of rooms, room ``i`` read at column
    ``entrances[i] + 1``.

    Raises:
        LayoutError: when the diagram is malformed or the layout is invalid.
    """
    geometry = geometry or standard_geometry()
    lines = _lines(source)
    if len(lines) < 4:
        msg = f"diagram needs walls, a corridor and room rows; got {len(lines)} lines"
        raise LayoutError(msg)

    corridor = lines[1].strip().strip("#")
    rows = lines[2:-1]
    columns = [entrance + 1 for entrance in geometry.entrances]
    rooms: list[list[str]] = [[] for _ in columns]
    for row_idx, row in enumerate(rows):
        for room_idx, col in enumerate(columns):
            if col >= len(row):
                msg = f"room row {row_idx} is too short to hold room {room_idx}: {row!r}"
                raise LayoutError(msg)
            rooms[room_idx].append(row[col])

    return validate_layout(Layout.build(corridor, rooms), geometry)


def unfold(source: str | Sequence[str]) -> str:
    """Insert the two folded rows below the first room row of a standard diagram."""
    lines = _lines(source)
    if len(lines) < 4:
        raise LayoutError("cannot unfold a diagram without room rows")
    return "\n".join([*lines[:3], *UNFOLD_ROWS, *lines[3:]])


def load_layout(
    path: str | Path,
    geometry: BurrowGeometry | None = None,
    *,
    unfolded: bool = False,
) -> Layout:
    """Read and parse a single puzzle file.

    Raises:
        LayoutError: when the file cannot be read or decoded, or its diagram is invalid.
    """
    file_path = Path(path).expanduser()
    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"{file_path}: {exc}"
        raise LayoutError(msg) from exc
    if unfolded:
        text = unfold(text)
    try:
        return parse_layout(text, geometry)
    except LayoutError as exc:
        msg = f"{file_path}: {exc}"
        raise LayoutError(msg) from exc


def _resolve_root(root: str | Path | None) -> Path:
    """Prefer explicit root, fall back to env var."""
    if root is not None:
        return Path(root).expanduser().resolve()
    env_path = os.environ.get(PUZZLES_ENV)
    if env_path:
        return Path(env_path).expanduser().resolve()
    msg = f"Puzzle root not provided; set {PUZZLES_ENV} or pass a directory."
    raise FileNotFoundError(msg)


def discover_puzzle_files(root: str | Path | None) -> list[Path]:
    """Recursively find ``.txt`` puzzle files beneath ``root``.

    Raises:
        FileNotFoundError: when ``root`` does not exist or no files are found.
    """
    root_path = _resolve_root(root)
    if not root_path.exists():
        msg = f"Puzzle root not found: {root_path}"
        raise FileNotFoundError(msg)
    files = sorted(p for p in root_path.rglob("*.txt") if p.is_file())
    if not files:
        msg = f"No .txt puzzles found under {root_path}"
        raise FileNotFoundError(msg)
    return files


def load_suite(
    root: str | Path | None,
    geometry: BurrowGeometry | None = None,
    *,
    unfolded: bool = False,
) -> list[PuzzleEntry]:
    """Load every parseable puzzle under ``root``; invalid files are skipped with a warning."""
    root_path = _resolve_root(root)
    entries: list[PuzzleEntry] = []
    for path in discover_puzzle_files(root_path):
        try:
            layout = load_layout(path, geometry, unfolded=unfolded)
        except LayoutError as exc:
            warnings.warn(f"[puzzles] skipping invalid puzzle {path}: {exc}")
            continue
        entries.append(PuzzleEntry(_puzzle_id(path, root_path), path, layout))
    return entries


def _puzzle_id(path: Path, root: Path) -> str:
    return path.relative_to(root).with_suffix("").as_posix()


__all__ = [
    "PuzzleEntry",
    "parse_layout",
    "unfold",
    "load_layout",
    "discover_puzzle_files",
    "load_suite",
]
