# blueprint/labels.py
"""Name/area labels and side dimensions, one set per room group."""
from blueprint.constants import (
    COLORS,
    DIMENSION_MIN_PX,
    DIMENSION_OFFSET_PX,
    LABEL_MIN_HEIGHT_PX,
    LABEL_MIN_WIDTH_PX,
)
from blueprint.grouping import group_rooms, round_half_up
from blueprint.rooms import room_rect
from blueprint.scale import BlueprintScale
from blueprint.scene import Element, fmt_number


def feet(value: float) -> str:
    return f"{fmt_number(value)}'"


def draw_labels(group: Element, rooms, scale: BlueprintScale) -> None:
    for room_group in group_rooms(rooms):
        anchor = room_group.anchor
        r = room_rect(anchor, scale)
        cx = r.x + r.width / 2

        if r.width > LABEL_MIN_WIDTH_PX and r.height > LABEL_MIN_HEIGHT_PX:
            text = group.append(
                "text", x=cx, y=r.y + r.height / 2,
                text_anchor="middle", dominant_baseline="middle",
                pointer_events="none",
            )
            text.append(
                "tspan", room_group.name, x=cx, dy="-0.4em",
                font_size="10px", font_weight="600", fill=COLORS["label"],
            )
            text.append(
                "tspan", f"{round_half_up(room_group.total_area)} sqft", x=cx, dy="1.2em",
                font_size="8px", fill=COLORS["area"],
            )

        # Dimensions show the anchor's own sides, not the group's.
        if r.width > DIMENSION_MIN_PX:
            group.append(
                "text", feet(anchor.width), x=cx, y=r.y - DIMENSION_OFFSET_PX,
                text_anchor="middle", font_size="9px", fill=COLORS["dimension"],
            )
        if r.height > DIMENSION_MIN_PX:
            group.append(
                "text", feet(anchor.height), x=r.x - DIMENSION_OFFSET_PX, y=r.y + r.height / 2,
                text_anchor="end", dominant_baseline="middle",
                font_size="9px", fill=COLORS["dimension"],
            )
