from blueprint.grouping import area_totals, grand_total_area, group_rooms, is_adu, summarize_floor
from blueprint.layout import Floor


def test_groups_keep_first_appearance_order(room):
    rooms = [room("B", 0, 0, 1, 1, id="b1"), room("A", 1, 0, 1, 1, id="a1"), room("B", 2, 0, 1, 1, id="b2")]
    groups = group_rooms(rooms)
    assert [g.name for g in groups] == ["B", "A"]
    assert [r.id for r in groups[0].parts] == ["b1", "b2"]


def test_floor_summary_uses_first_part_for_color_and_position(room):
    floor = Floor(id="f", name="F", rooms=[
        room("Guest Room 1", 35, 16, 10, 15, id="g_a", color="#fb7185"),
        room("Guest Room 1", 45, 21, 5, 10, id="g_b", color="#000000"),
        room("Master Room", 50, 21, 20, 20, id="m"),
    ])
    guest, master = summarize_floor(floor)
    assert guest.total_area == 200
    assert guest.part_count == 2
    assert guest.color == "#fb7185"
    assert (guest.anchor_x, guest.anchor_y) == (35, 16)
    assert master.part_count == 1
    assert master.color == "#cbd5e1"


def test_adu_rules_are_ored(room):
    assert is_adu(room("ADU Room 1", 0, 0, 1, 1, id="main_x"))
    assert is_adu(room("Kitchenette", 0, 0, 1, 1, id="adu_kitchen"))
    assert not is_adu(room("Garage", 0, 0, 1, 1, id="garage"))
    # prefixes are case sensitive
    assert not is_adu(room("adu room", 0, 0, 1, 1, id="room"))


def test_area_totals_split_covers_every_room(room, make_layout):
    layout = make_layout(
        [room("ADU Room 1", 0, 0, 20, 10, id="main_x"), room("Garage", 20, 0, 20, 22, id="garage")],
        [room("Loft", 0, 0, 10, 16, id="adu_loft"), room("Master Room", 10, 0, 20, 20, id="main_bed")],
    )
    totals = area_totals(layout)
    assert totals.adu == 200 + 160
    assert totals.main == 440 + 400
    assert totals.main + totals.adu == grand_total_area(layout)
    assert totals.total == grand_total_area(layout)


def test_empty_layout_totals(make_layout):
    layout = make_layout()
    assert area_totals(layout) == (0, 0)
    assert grand_total_area(layout) == 0
