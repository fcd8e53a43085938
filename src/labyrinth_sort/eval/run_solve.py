"""Solve labyrinth puzzles and report the minimum energy for each."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Iterable

import pandas as pd

from labyrinth_sort.benchmarks.puzzle_io import (
    PuzzleEntry,
    load_layout,
    load_suite,
    parse_layout,
    unfold,
)
from labyrinth_sort.benchmarks.synthetic_generator import synthetic_suite
from labyrinth_sort.burrow.geometry import BurrowGeometry, geometry_for
from labyrinth_sort.burrow.layout import LayoutError, format_layout
from labyrinth_sort.search.dijkstra import UNSOLVED, solve
from labyrinth_sort.search.state_graph import reference_min_cost

STDIN = "-"
RESULTS_NAME = "results.csv"

REQUIRED_COLUMNS = {
    "puzzle_id",
    "geometry",
    "depth",
    "min_cost",
    "solved",
    "expanded",
    "discovered",
    "runtime_s",
}


def _log(msg: str) -> None:
    print(f"[solve] {msg}", file=sys.stderr)


# --------------------------------------------------------------------------- CLI
def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "paths",
        nargs="*",
        help="Puzzle diagram files ('-' for stdin). Reads stdin when nothing else is given.",
    )
    parser.add_argument(
        "--geometry",
        default=None,
        help="Geometry name (defaults to env LABYRINTH_GEOMETRY or 'standard').",
    )
    parser.add_argument(
        "--suite",
        type=Path,
        default=None,
        help="Directory of .txt puzzles to solve.",
    )
    parser.add_argument(
        "--suite-env",
        action="store_true",
        help="Load the puzzle suite from LABYRINTH_PUZZLES_ROOT.",
    )
    parser.add_argument(
        "--synthetic",
        type=int,
        default=0,
        help="Also solve this many seeded random puzzles.",
    )
    parser.add_argument("--depth", type=int, default=2, help="Room depth for synthetic puzzles.")
    parser.add_argument("--seed", type=int, default=0, help="First seed for synthetic puzzles.")
    parser.add_argument(
        "--unfold",
        action="store_true",
        help="Insert the two extra folded rows before parsing (deep variant).",
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Cross-check every answer against the exhaustive state-graph solver.",
    )
    parser.add_argument("--show", action="store_true", help="Echo each parsed layout to stderr.")
    parser.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Output directory for results.csv and summary.json.",
    )
    return parser.parse_args(argv)


def _collect_puzzles(args: argparse.Namespace, geometry: BurrowGeometry) -> list[PuzzleEntry]:
    entries: list[PuzzleEntry] = []
    for raw in args.paths:
        if raw == STDIN:
            entries.append(_stdin_entry(args, geometry))
            continue
        path = Path(raw)
        layout = load_layout(path, geometry, unfolded=args.unfold)
        entries.append(PuzzleEntry(path.stem, path, layout))
    if args.suite is not None or args.suite_env:
        entries.extend(load_suite(args.suite, geometry, unfolded=args.unfold))
    if args.synthetic > 0:
        entries.extend(
            synthetic_suite(geometry, depth=args.depth, count=args.synthetic, seed=args.seed)
        )
    if not entries:
        entries.append(_stdin_entry(args, geometry))
    return entries


def _stdin_entry(args: argparse.Namespace, geometry: BurrowGeometry) -> PuzzleEntry:
    text = sys.stdin.read()
    if args.unfold:
        text = unfold(text)
    return PuzzleEntry("stdin", Path(STDIN), parse_layout(text, geometry))


def solve_entries(
    entries: Iterable[PuzzleEntry],
    geometry: BurrowGeometry,
    *,
    verify: bool = False,
    show: bool = False,
) -> pd.DataFrame:
    """Solve each puzzle and return one result row per puzzle."""
    rows = []
    for entry in entries:
        if show:
            _log(f"{entry.puzzle_id}:\n{format_layout(entry.layout, geometry)}")
        result = solve(entry.layout, geometry)
        row = {
            "puzzle_id": entry.puzzle_id,
            "geometry": geometry.name,
            "depth": entry.layout.room_depth,
            **result.as_row(),
        }
        if verify:
            reference = reference_min_cost(entry.layout, geometry)
            row["reference_cost"] = reference if reference is not None else UNSOLVED
            row["verified"] = row["reference_cost"] == row["min_cost"]
            if not row["verified"]:
                _log(
                    f"{entry.puzzle_id}: search found {row['min_cost']} "
                    f"but the state graph gives {row['reference_cost']}"
                )
        _log(
            f"{entry.puzzle_id}: cost={row['min_cost']} expanded={result.expanded} "
            f"runtime={result.runtime_s:.3f}s"
        )
        rows.append(row)
    return pd.DataFrame(rows, columns=_columns(verify))


def _columns(verify: bool) -> list[str]:
    cols = [
        "puzzle_id",
        "geometry",
        "depth",
        "min_cost",
        "solved",
        "expanded",
        "discovered",
        "runtime_s",
    ]
    if verify:
        cols.extend(["reference_cost", "verified"])
    return cols


def summarize(df: pd.DataFrame) -> dict:
    """Aggregate counts and totals for summary.json."""
    missing = REQUIRED_COLUMNS - set(df.columns)
    if missing:
        msg = f"results missing required columns: {sorted(missing)}"
        raise ValueError(msg)
    summary = {
        "puzzles": int(len(df)),
        "solved": int(df["solved"].sum()),
        "unsolved": int((~df["solved"].astype(bool)).sum()),
        "total_runtime_s": float(df["runtime_s"].sum()),
        "max_expanded": int(df["expanded"].max()) if len(df) else 0,
    }
    if "verified" in df.columns:
        summary["mismatches"] = df.loc[~df["verified"].astype(bool), "puzzle_id"].tolist()
    return summary


def _write_outputs(out_dir: Path, df: pd.DataFrame, summary: dict) -> None:
    out_dir.mkdir(parents=True, exist_ok=True)
    df.to_csv(out_dir / RESULTS_NAME, index=False)
    (out_dir / "summary.json").write_text(json.dumps(summary, indent=2))
    _log(f"wrote {RESULTS_NAME} and summary.json to {out_dir}")


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    try:
        geometry = geometry_for(args.geometry)
        entries = _collect_puzzles(args, geometry)
    except KeyError as exc:
        _log(str(exc.args[0]) if exc.args else str(exc))
        return 2
    except (LayoutError, FileNotFoundError) as exc:
        _log(str(exc))
        return 2

    try:
        df = solve_entries(entries, geometry, verify=args.verify, show=args.show)
    except RuntimeError as exc:
        _log(str(exc))
        return 2
    for cost in df["min_cost"]:
        print(int(cost))

    summary = summarize(df)
    if args.out is not None:
        _write_outputs(args.out, df, summary)
    if args.verify and summary["mismatches"]:
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
