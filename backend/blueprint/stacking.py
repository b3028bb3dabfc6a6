# blueprint/stacking.py
"""Vertical floor stacking, land boundary, grid and rulers."""
import math

from blueprint.constants import (
    COLORS,
    FLOOR_GAP_PX,
    GRID_STEP_FT,
    LEFT_RULER_TICKS,
    MIN_CANVAS_HEIGHT_PX,
    PADDING_FT,
    TOP_RULER_STEP_FT,
)
from blueprint.labels import feet
from blueprint.scale import BlueprintScale, LinearScale, nice_ticks
from blueprint.scene import Element, fmt_number, translate

GRID_PATTERN_ID = "grid"
TICK_SIZE_PX = 6


def floor_height_px(land, scale: BlueprintScale) -> float:
    return scale.y(land.height)


def floor_offset(index: int, land, scale: BlueprintScale) -> float:
    return scale.margin.top + index * (floor_height_px(land, scale) + FLOOR_GAP_PX)


def stacked_floors_height(floor_count: int, land, scale: BlueprintScale) -> float:
    if floor_count == 0:
        return 0.0
    return floor_height_px(land, scale) * floor_count + FLOOR_GAP_PX * (floor_count - 1)


def canvas_height(floor_count: int, land, scale: BlueprintScale) -> float:
    # An empty layout still gets a usable canvas.
    content = (
        scale.margin.top + scale.margin.bottom
        + stacked_floors_height(floor_count, land, scale)
    )
    return max(MIN_CANVAS_HEIGHT_PX, content)


def add_grid_pattern(svg: Element, scale: BlueprintScale) -> None:
    cell_w = scale.span_x(0, GRID_STEP_FT)
    cell_h = scale.y(GRID_STEP_FT)
    pattern = svg.append("defs").append(
        "pattern", id=GRID_PATTERN_ID, width=cell_w, height=cell_h,
        patternUnits="userSpaceOnUse",
    )
    pattern.append(
        "path", d=f"M {fmt_number(cell_w)} 0 L 0 0 0 {fmt_number(cell_h)}",
        fill="none", stroke=COLORS["grid"], stroke_width=1,
    )


def add_floor_group(svg: Element, floor, index: int, land, scale: BlueprintScale) -> Element:
    """Create the translated group for one floor with its title and land boundary."""
    floor_g = svg.append(
        "g", class_="floor", transform=translate(0, floor_offset(index, land, scale)),
    )
    floor_g.set(data_floor_id=floor.id)
    floor_g.append(
        "text", floor.name, x=scale.margin.left, y=-25,
        font_weight="bold", font_size="18px", fill=COLORS["title"],
    )
    floor_g.append(
        "rect", class_="land", x=scale.x(0), y=0,
        width=scale.span_x(0, land.width), height=floor_height_px(land, scale),
        fill=f"url(#{GRID_PATTERN_ID})", stroke=COLORS["land"],
        stroke_width=2, stroke_dasharray="5,5",
    )
    return floor_g


def draw_top_ruler(svg: Element, scale: BlueprintScale, land) -> Element:
    """Feet ruler along the top edge, one tick every TOP_RULER_STEP_FT."""
    axis = svg.append("g", class_="axis-top", transform=translate(0, scale.margin.top),
                      color=COLORS["ruler"])
    lo, hi = -PADDING_FT, land.width + PADDING_FT
    x0, x1 = scale.x(lo), scale.x(hi)
    axis.append(
        "path", class_="domain", stroke="currentColor", fill="none",
        d=f"M{fmt_number(x0)},{-TICK_SIZE_PX}V0H{fmt_number(x1)}V{-TICK_SIZE_PX}",
    )
    first = math.ceil(lo / TOP_RULER_STEP_FT) * TOP_RULER_STEP_FT
    value = first
    while value <= hi:
        tick = axis.append("g", class_="tick", transform=translate(scale.x(value), 0))
        tick.append("line", stroke="currentColor", y2=-TICK_SIZE_PX)
        tick.append("text", feet(value), fill="currentColor", y=-TICK_SIZE_PX - 3,
                    text_anchor="middle", font_size="10px")
        value += TOP_RULER_STEP_FT
    return axis


def draw_left_ruler(floor_g: Element, scale: BlueprintScale, land) -> Element:
    ruler = LinearScale((0, land.height), (0, floor_height_px(land, scale)))
    axis = floor_g.append(
        "g", class_="axis-left", transform=translate(scale.margin.left, 0),
        color=COLORS["ruler_left"], opacity=0.5,
    )
    y1 = ruler(land.height)
    axis.append(
        "path", class_="domain", stroke="currentColor", fill="none",
        d=f"M{-TICK_SIZE_PX},0H0V{fmt_number(y1)}H{-TICK_SIZE_PX}",
    )
    for value in nice_ticks(0, land.height, LEFT_RULER_TICKS):
        tick = axis.append("g", class_="tick", transform=translate(0, ruler(value)))
        tick.append("line", stroke="currentColor", x2=-TICK_SIZE_PX)
        tick.append("text", feet(value), fill="currentColor", x=-TICK_SIZE_PX - 3,
                    text_anchor="end", dominant_baseline="middle", font_size="10px")
    return axis
