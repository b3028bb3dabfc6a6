# blueprint/rooms.py
# Room fills and outlines.
from typing import NamedTuple

from blueprint.constants import COLORS
from blueprint.scale import BlueprintScale
from blueprint.scene import Element


class PixelRect(NamedTuple):
    x: float
    y: float
    width: float
    height: float


def room_rect(room, scale: BlueprintScale) -> PixelRect:
    return PixelRect(
        x=scale.x(room.x),
        y=scale.y(room.y),
        width=scale.span_x(room.x, room.width),
        height=scale.y(room.height),
    )


def draw_rooms(group: Element, rooms, scale: BlueprintScale) -> None:
    """Paint every fill before any outline so no border gets covered."""
    rects = [(room, room_rect(room, scale)) for room in rooms]
    for room, r in rects:
        group.append(
            "rect", x=r.x, y=r.y, width=r.width, height=r.height,
            fill=room.color or COLORS["room_default"], stroke="none",
        )
    for room, r in rects:
        group.append(
            "rect", x=r.x, y=r.y, width=r.width, height=r.height,
            fill="none", stroke=COLORS["outline"], stroke_width=2,
        )
