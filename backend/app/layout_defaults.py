# app/layout_defaults.py
# Starting layout for a new editing session: a 75x60 lot, two floors.
# x runs north->south (left->right on screen), y runs east->west (top->bottom).
from blueprint.layout import HouseLayout


def _room(id, name, x, y, width, height, color, description):
    return {
        "id": id, "name": name, "x": x, "y": y,
        "width": width, "height": height,
        "color": color, "description": description,
    }


INITIAL_LAYOUT_DATA = {
    "land": {"width": 75, "height": 60},
    "floors": [
        {
            "id": "floor_1",
            "name": "First Floor",
            "rooms": [
                _room("adu_entry", "ADU Entry", 15, 5, 20, 4, "#a5b4fc", "20x4ft"),
                _room("garage", "Garage", 15, 9, 20, 22, "#94a3b8", "20x22ft"),
                _room("living_room_a", "Living Room", 35, 5, 10, 26, "#38bdf8", "Main"),
                _room("living_room_b", "Living Room", 45, 21, 5, 10, "#38bdf8", "Ext"),
                _room("staircase_1", "Stairs", 45, 5, 10, 16, "#cbd5e1", "10x16ft"),
                _room("bedroom_1", "Living Room", 55, 5, 15, 16, "#38bdf8", "Merged Bed1"),
                _room("bedroom_2", "Playroom", 50, 21, 20, 20, "#facc15", "20x20ft"),
            ],
        },
        {
            "id": "floor_2",
            "name": "Second Floor",
            "rooms": [
                # ADU wing
                _room("adu_loft_stair", "ADU Stair/Loft", 15, 5, 20, 4, "#a5b4fc", "20x4ft"),
                _room("adu_living", "ADU Living", 15, 9, 20, 12, "#818cf8", "20x12ft"),
                _room("adu_bed_1", "ADU Room 1", 15, 21, 20, 10, "#c084fc", "20x10ft"),
                _room("adu_bed_2", "ADU Room 2", 35, 5, 10, 11, "#c084fc", "10x11ft"),
                # main house
                _room("loft_stairs", "Loft / Stairs", 45, 5, 10, 16, "#cbd5e1", "Stair/Loft"),
                _room("main_bed_4", "Guest Room 2", 55, 5, 15, 16, "#fb7185", "15x16ft"),
                _room("main_bed_3_a", "Guest Room 1", 35, 16, 10, 15, "#fb7185", "L-Shape Part 1"),
                _room("main_bed_3_b", "Guest Room 1", 45, 21, 5, 10, "#fb7185", "L-Shape Part 2"),
                _room("main_bed_5", "Master Room", 50, 21, 20, 20, "#fda4af", "20x20ft"),
            ],
        },
    ],
}


def initial_layout() -> HouseLayout:
    """A fresh copy of the starting layout."""
    return HouseLayout.model_validate(INITIAL_LAYOUT_DATA)
