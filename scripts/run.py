"""Cross-platform task runner for labyrinth-sort.

All commands use the currently active Python interpreter (sys.executable) so they work
on POSIX and Windows without Make.
"""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
from pathlib import Path

ARTIFACTS_ENV = "ARTIFACTS"
DEFAULT_ARTIFACTS = "artifacts"


class RunError(Exception):
    """Raised when an invoked command fails."""


def _log(msg: str) -> None:
    print(f"[run] {msg}")


def _run(cmd: list[str]) -> None:
    _log("$ " + " ".join(cmd))
    result = subprocess.run(cmd)
    if result.returncode != 0:
        raise RunError(f"Command failed with exit code {result.returncode}: {' '.join(cmd)}")


def _artifacts_root() -> Path:
    return Path(os.environ.get(ARTIFACTS_ENV, DEFAULT_ARTIFACTS))


def cmd_lint(_: argparse.Namespace) -> None:
    _run([sys.executable, "-m", "ruff", "check", "."])
    _run([sys.executable, "-m", "ruff", "format", "--check", "."])


def cmd_format(_: argparse.Namespace) -> None:
    _run([sys.executable, "-m", "ruff", "format", "."])
    _run([sys.executable, "-m", "ruff", "check", "--fix", "."])


def cmd_test(args: argparse.Namespace) -> None:
    pytest_cmd = [sys.executable, "-m", "pytest"]
    if args.quiet:
        pytest_cmd.append("-q")
    _run(pytest_cmd)


def _solve_cmd(args: argparse.Namespace) -> list[str]:
    cmd = [sys.executable, "-m", "labyrinth_sort.eval.run_solve"]
    if args.geometry:
        cmd += ["--geometry", args.geometry]
    if args.unfold:
        cmd.append("--unfold")
    if args.verify:
        cmd.append("--verify")
    return cmd


def cmd_solve(args: argparse.Namespace) -> None:
    cmd = _solve_cmd(args)
    if args.out:
        cmd += ["--out", str(args.out)]
    cmd += [str(p) for p in args.paths]
    _run(cmd)


def cmd_benchmark(args: argparse.Namespace) -> None:
    out_dir = args.out or (_artifacts_root() / "benchmark")
    cmd = _solve_cmd(args) + [
        "--synthetic",
        str(args.count),
        "--depth",
        str(args.depth),
        "--seed",
        str(args.seed),
        "--out",
        str(out_dir),
    ]
    if args.suite:
        cmd += ["--suite", str(args.suite)]
    _run(cmd)
    _log(f"benchmark results in {out_dir}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    sub = parser.add_subparsers(dest="command", required=True)

    lint_p = sub.add_parser("lint", help="Run ruff checks")
    lint_p.set_defaults(func=cmd_lint)

    fmt_p = sub.add_parser("format", help="Apply ruff format and fixes")
    fmt_p.set_defaults(func=cmd_format)

    test_p = sub.add_parser("test", help="Run pytest")
    test_p.add_argument("--quiet", action="store_true", help="Quiet pytest output")
    test_p.set_defaults(func=cmd_test)

    def add_solver_flags(p: argparse.ArgumentParser) -> None:
        p.add_argument("--geometry", type=str, help="Geometry name (standard/compact)")
        p.add_argument("--unfold", action="store_true", help="Solve the deep variant")
        p.add_argument("--verify", action="store_true", help="Cross-check with the state graph")
        p.add_argument("--out", type=Path, help="Output directory for results.csv")

    solve_p = sub.add_parser("solve", help="Solve puzzle files")
    solve_p.add_argument("paths", type=Path, nargs="+", help="Puzzle diagram files")
    add_solver_flags(solve_p)
    solve_p.set_defaults(func=cmd_solve)

    bench = sub.add_parser("benchmark", help="Solve a seeded synthetic suite")
    bench.add_argument("--count", type=int, default=10)
    bench.add_argument("--depth", type=int, default=2)
    bench.add_argument("--seed", type=int, default=0)
    bench.add_argument("--suite", type=Path, help="Optional directory of puzzle files")
    add_solver_flags(bench)
    bench.set_defaults(func=cmd_benchmark)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        args.func(args)
    except RunError as exc:  # pragma: no cover - simple CLI error
        _log(str(exc))
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
