from pathlib import Path

import pytest

from labyrinth_sort.benchmarks.puzzle_io import (
    PUZZLES_ENV,
    PuzzleEntry,
    discover_puzzle_files,
    load_layout,
    load_suite,
    parse_layout,
    unfold,
)
from labyrinth_sort.burrow.geometry import geometry_for
from labyrinth_sort.burrow.layout import LayoutError


@pytest.fixture(scope="module")
def puzzle_root() -> Path:
    return (Path(__file__).parent / "fixtures" / "puzzles").resolve()


def test_parse_sample_rooms_top_to_bottom(puzzle_root: Path) -> None:
    layout = load_layout(puzzle_root / "sample.txt")
    assert layout.corridor == (".",) * 11
    assert layout.rooms == (("B", "A"), ("C", "D"), ("B", "C"), ("D", "A"))


def test_parse_accepts_line_lists_and_trailing_blank_lines() -> None:
    lines = [
        "#############",
        "#.B.........#",
        "###.#C#B#D###",
        "  #A#D#C#A#",
        "  #########",
        "",
        "   ",
    ]
    layout = parse_layout(lines)
    assert layout.corridor[1] == "B"
    assert layout.rooms[0] == (".", "A")


def test_parse_compact_geometry() -> None:
    compact = geometry_for("compact")
    text = "#######\n#.....#\n##B#A##\n #A#B#\n #####\n"
    layout = parse_layout(text, compact)
    assert layout.rooms == (("B", "A"), ("A", "B"))


def test_unfold_inserts_two_rows(puzzle_root: Path) -> None:
    text = unfold((puzzle_root / "sample.txt").read_text())
    lines = text.splitlines()
    assert lines[3] == "  #D#C#B#A#"
    assert lines[4] == "  #D#B#A#C#"
    layout = parse_layout(text)
    assert layout.rooms[0] == ("B", "D", "D", "A")
    assert layout.rooms[3] == ("D", "A", "C", "A")


def test_load_layout_unfolded_flag(puzzle_root: Path) -> None:
    assert load_layout(puzzle_root / "sample.txt", unfolded=True).room_depth == 4


@pytest.mark.parametrize(
    "text",
    [
        "#############\n#...........#\n",
        "#############\n#...........#\n###B#C#B#D###\n  #A#D#C\n  #########\n",
        "#############\n#..........#\n###B#C#B#D###\n  #A#D#C#A#\n  #########\n",
        "#############\n#...........#\n###B#C#B#E###\n  #A#D#C#A#\n  #########\n",
        "#############\n#...........#\n###B#C#B#B###\n  #A#D#C#A#\n  #########\n",
    ],
)
def test_malformed_diagrams_rejected(text: str) -> None:
    with pytest.raises(LayoutError):
        parse_layout(text)


def test_load_layout_prefixes_path_in_error(tmp_path: Path) -> None:
    bad = tmp_path / "bad.txt"
    bad.write_text("#####\n#...#\n")
    with pytest.raises(LayoutError, match="bad.txt"):
        load_layout(bad)


def test_discover_recurses_and_sorts(puzzle_root: Path) -> None:
    files = discover_puzzle_files(puzzle_root)
    assert [p.name for p in files] == ["one_swap.txt", "sample.txt", "sorted.txt"]


def test_discover_uses_env_root(puzzle_root: Path, monkeypatch) -> None:
    monkeypatch.setenv(PUZZLES_ENV, str(puzzle_root))
    assert len(discover_puzzle_files(None)) == 3


def test_missing_root_raises(monkeypatch) -> None:
    monkeypatch.delenv(PUZZLES_ENV, raising=False)
    with pytest.raises(FileNotFoundError):
        discover_puzzle_files(None)
    with pytest.raises(FileNotFoundError):
        discover_puzzle_files(Path("tests/fixtures/does-not-exist"))


def test_load_suite_skips_invalid_with_warning(tmp_path: Path, puzzle_root: Path) -> None:
    nested = tmp_path / "nested"
    nested.mkdir()
    (nested / "good.txt").write_text((puzzle_root / "sample.txt").read_text())
    (tmp_path / "broken.txt").write_text("not a diagram\n")
    (tmp_path / "junk.txt").write_bytes(b"\xff\xfe")

    with pytest.warns(UserWarning, match="skipping invalid puzzle"):
        suite = load_suite(tmp_path)

    assert [entry.puzzle_id for entry in suite] == ["nested/good"]
    assert all(isinstance(entry, PuzzleEntry) for entry in suite)
