from blueprint.grouping import group_rooms, round_half_up
from blueprint.labels import draw_labels, feet
from blueprint.rooms import room_rect
from blueprint.scene import Element


def _name_spans(g, name):
    return [t for t in g.find_all("tspan") if t.text == name]


def test_anchor_is_largest_part_and_area_is_group_sum(room, scale):
    parts = [
        room("Guest Room", 0, 0, 4, 10, id="p1"),     # 40
        room("Guest Room", 4, 0, 20, 15, id="p2"),    # 300
        room("Guest Room", 24, 0, 10, 12, id="p3"),   # 120
    ]
    g = Element("g")
    draw_labels(g, parts, scale)

    (name,) = _name_spans(g, "Guest Room")
    anchor = room_rect(parts[1], scale)
    assert name.attrs["x"] == anchor.x + anchor.width / 2
    assert [t.text for t in g.find_all("tspan")][1] == "460 sqft"


def test_anchor_ties_go_to_first_part(room):
    first = room("X", 0, 0, 10, 10, id="first")
    second = room("X", 10, 0, 10, 10, id="second")
    (group,) = group_rooms([first, second])
    assert group.anchor is first


def test_dimensions_use_anchor_sides(room, scale):
    parts = [room("Den", 0, 0, 4, 10, id="a"), room("Den", 4, 0, 20, 15, id="b")]
    g = Element("g")
    draw_labels(g, parts, scale)

    dims = [t.text for t in g.find_all("text") if t.text is not None]
    assert dims == ["20'", "15'"]


def test_small_rooms_get_no_label(room, scale):
    g = Element("g")
    # 2 x 1 ft is about 18 x 9 px at this scale
    draw_labels(g, [room("Closet", 0, 0, 2, 1)], scale)
    assert g.children == []


def test_width_dimension_without_name_label(room, scale):
    g = Element("g")
    # about 27.5 x 13.8 px: wide enough for a width label, too short for the name
    draw_labels(g, [room("Shelf", 0, 0, 3, 1.5)], scale)
    assert g.find_all("tspan") == []
    assert [t.text for t in g.find_all("text")] == ["3'"]


def test_feet_formatting():
    assert feet(20) == "20'"
    assert feet(20.0) == "20'"
    assert feet(12.5) == "12.5'"


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(459.49) == 459
    assert round_half_up(0) == 0
