import base64

from app.layout_defaults import initial_layout
from app.services.preview import group_label, render_preview_png
from blueprint.grouping import group_rooms


def test_group_label_rounds_half_up(room):
    (den,) = group_rooms([room("Den", 0, 0, 5, 2.5, id="den")])
    assert group_label(den) == "Den\n13 sqft"


def test_group_label_sums_parts(room):
    (hall,) = group_rooms([room("Hall", 0, 0, 5, 0.5, id="h1"), room("Hall", 5, 0, 1, 2, id="h2")])
    assert group_label(hall) == "Hall\n5 sqft"


def test_preview_is_a_png():
    assert base64.b64decode(render_preview_png(initial_layout())).startswith(b"\x89PNG")
