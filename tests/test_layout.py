import pytest

from labyrinth_sort.benchmarks.puzzle_io import parse_layout
from labyrinth_sort.burrow.geometry import geometry_for, standard_geometry
from labyrinth_sort.burrow.layout import Layout, LayoutError, format_layout, validate_layout


@pytest.fixture
def compact():
    return geometry_for("compact")


def test_goal_detection(compact):
    assert Layout.build(".....", ["AA", "BB"]).is_goal(compact)
    assert not Layout.build(".....", ["BA", "AB"]).is_goal(compact)
    # Occupied corridor is never a goal, even if rooms look sorted.
    assert not Layout.build("A....", [".A", "BB"]).is_goal(compact)
    assert not Layout.build(".....", ["AB", "BA"]).is_goal(compact)


def test_goal_detection_standard_default():
    sorted_layout = Layout.build("." * 11, ["AA", "BB", "CC", "DD"])
    assert sorted_layout.is_goal()
    assert sorted_layout.is_goal(standard_geometry())


def test_structural_equality_and_hash():
    a = Layout.build(".....", ["BA", "AB"])
    b = Layout.build(list("....."), [("B", "A"), ("A", "B")])
    c = Layout.build(".....", ["AB", "BA"])
    assert a == b
    assert hash(a) == hash(b)
    assert a != c
    assert len({a, b, c}) == 2


def test_copy_is_equal_and_independent():
    original = Layout.build(".....", ["BA", "AB"])
    clone = original.copy()
    assert clone == original
    assert clone is not original
    moved = clone.with_exit(0, 0, 2)
    assert original.rooms[0] == ("B", "A")
    assert moved.rooms[0] == (".", "A")
    assert moved.corridor[2] == "B"


def test_with_entry_and_top_index():
    layout = Layout.build("..B..", [".A", ".B"])
    assert layout.top_index(0) == 1
    assert Layout.build(".....", ["..", "AB"]).top_index(0) is None
    entered = layout.with_entry(2, 1, 0)
    assert entered.corridor == (".",) * 5
    assert entered.rooms[1] == ("B", "B")


def test_token_counts_cover_corridor_and_rooms():
    layout = Layout.build("A...B", [".A", ".B"])
    counts = layout.token_counts()
    assert counts["A"] == 2
    assert counts["B"] == 2


@pytest.mark.parametrize(
    "corridor, rooms, fragment",
    [
        ("....", ["BA", "AB"], "corridor"),
        (".....", ["BA"], "rooms"),
        (".....", ["BA", "A"], "depth"),
        (".....", ["", ""], "at least one slot"),
        ("....X", [".A", "AB"], "unknown token"),
        (".A...", [".A", "BB"], "entrance"),
        (".....", ["A.", "BB"], "empty slot"),
        ("A....", ["BA", "AB"], "expected"),
    ],
)
def test_validate_layout_rejects(compact, corridor, rooms, fragment):
    with pytest.raises(LayoutError, match=fragment):
        validate_layout(Layout.build(corridor, rooms), compact)


def test_validate_layout_returns_layout(compact):
    layout = Layout.build("A...B", [".A", ".B"])
    assert validate_layout(layout, compact) is layout


def test_format_layout_matches_diagram_convention():
    layout = Layout.build("." * 11, ["BA", "CD", "BC", "DA"])
    text = format_layout(layout)
    assert text.splitlines() == [
        "#############",
        "#...........#",
        "###B#C#B#D###",
        "  #A#D#C#A#",
        "  #########",
    ]
    assert parse_layout(text) == layout


def test_format_layout_compact(compact):
    layout = Layout.build(".....", ["BA", "AB"])
    assert format_layout(layout, compact).splitlines() == [
        "#######",
        "#.....#",
        "##B#A##",
        " #A#B#",
        " #####",
    ]
