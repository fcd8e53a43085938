import pytest

from labyrinth_sort.burrow.geometry import (
    GEOMETRY_ENV,
    BurrowGeometry,
    geometry_for,
    geometry_registry,
    standard_geometry,
)


def test_standard_geometry_constants():
    geo = standard_geometry()
    assert geo.corridor_length == 11
    assert geo.entrances == (2, 4, 6, 8)
    assert geo.token_types == ("A", "B", "C", "D")
    assert [geo.cost(t) for t in geo.token_types] == [1, 10, 100, 1000]
    assert geo.room_count == 4
    assert geo.target_room("C") == 2
    assert geo.is_entrance(6)
    assert not geo.is_entrance(5)


def test_registry_contains_compact_and_standard():
    reg = geometry_registry()
    assert {"standard", "compact"} <= set(reg)
    compact = reg["compact"]
    assert compact.corridor_length == 5
    assert compact.entrances == (1, 3)


def test_geometry_for_uses_env_then_default(monkeypatch):
    monkeypatch.delenv(GEOMETRY_ENV, raising=False)
    assert geometry_for().name == "standard"
    monkeypatch.setenv(GEOMETRY_ENV, "compact")
    assert geometry_for().name == "compact"
    assert geometry_for("standard").name == "standard"


def test_unknown_geometry_raises():
    with pytest.raises(KeyError):
        geometry_for("hexagonal")


def test_geometry_is_hashable():
    assert hash(standard_geometry()) == hash(geometry_for("standard"))


@pytest.mark.parametrize(
    "kwargs",
    [
        {"entrances": (1, 1)},
        {"entrances": (0, 3)},
        {"entrances": (1, 4)},
        {"entrances": (1,)},
        {"token_types": ("A", "A")},
        {"token_types": ("A", ".")},
        {"step_costs": {"A": 1, "B": 0}},
        {"step_costs": {"A": 10, "B": 1}},
        {"step_costs": {"A": 5, "B": 5}},
        {"step_costs": {"A": 1}},
        {"step_costs": {"A": 1, "B": 10, "C": 100}},
        {"corridor_length": 2},
    ],
)
def test_inconsistent_geometry_rejected(kwargs):
    base = {
        "name": "bad",
        "corridor_length": 5,
        "entrances": (1, 3),
        "token_types": ("A", "B"),
        "step_costs": {"A": 1, "B": 10},
    }
    base.update(kwargs)
    with pytest.raises(ValueError):
        BurrowGeometry(**base)
