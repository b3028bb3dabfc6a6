import pytest

from app.layout_defaults import initial_layout
from app.services.validator import ensure_renderable, validate_layout


def test_default_layout_is_clean():
    assert validate_layout(initial_layout()) == []


def test_out_of_bounds_room_is_reported(room, make_layout):
    warnings = validate_layout(make_layout([room("Shed", 70, 50, 10, 5, id="shed")]))
    assert warnings == ['Floor 1: "Shed" (shed) extends outside the land.']


def test_overlap_between_different_rooms(room, make_layout):
    warnings = validate_layout(make_layout([
        room("Kitchen", 0, 0, 10, 10, id="k"),
        room("Dining", 5, 5, 10, 10, id="d"),
    ]))
    assert warnings == ['Floor 1: "Kitchen" overlaps with "Dining".']


def test_touching_rooms_do_not_overlap(room, make_layout):
    assert validate_layout(make_layout([
        room("Kitchen", 0, 0, 10, 10, id="k"),
        room("Dining", 10, 0, 10, 10, id="d"),
    ])) == []


def test_parts_of_one_room_may_overlap(room, make_layout):
    assert validate_layout(make_layout([
        room("Hall", 0, 0, 10, 10, id="h1"),
        room("Hall", 5, 0, 10, 10, id="h2"),
    ])) == []


def test_degenerate_sizes_and_duplicate_ids(room, make_layout):
    warnings = validate_layout(make_layout(
        [room("Void", 0, 0, 0, 10, id="v"), room("Void", 1, 1, 2, 2, id="v")],
        land=(0, 60),
    ))
    assert warnings[0].startswith("Land has non-positive size")
    assert any("non-positive size" in w and "(v)" in w for w in warnings[1:])
    assert any("reuses an id" in w for w in warnings)


def test_ensure_renderable(make_layout):
    ensure_renderable(make_layout([]))
    with pytest.raises(ValueError):
        ensure_renderable(make_layout([], land=(0, 60)))
    with pytest.raises(ValueError):
        ensure_renderable(make_layout([], land=(75, -1)))


@pytest.mark.parametrize("land", [(float("nan"), 60), (75, float("inf"))])
def test_non_finite_land_is_not_renderable(make_layout, land):
    with pytest.raises(ValueError, match="finite"):
        ensure_renderable(make_layout([], land=land))


@pytest.mark.parametrize("geometry", [
    (float("nan"), 0, 10, 10),
    (0, 0, float("inf"), 10),
    (0, float("-inf"), 10, 10),
])
def test_non_finite_room_is_not_renderable(room, make_layout, geometry):
    with pytest.raises(ValueError, match="non-finite"):
        ensure_renderable(make_layout([room("Den", *geometry, id="den")]))
