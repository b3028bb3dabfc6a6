# blueprint/renderer.py
"""
Full render pass: layout + container width -> SVG scene graph.

Stages run in a fixed order (scaling, rasterization, merge overlay, labels,
stacking/legend) and every call builds a fresh tree, so rendering the same
layout at the same width always yields an equal scene.
"""
import logging

from blueprint.grouping import area_totals
from blueprint.labels import draw_labels
from blueprint.legend import LEGEND_GAP_PX, draw_compass, draw_legend
from blueprint.merge import draw_merge_overlay
from blueprint.rooms import draw_rooms
from blueprint.scale import DEFAULT_MARGIN, BlueprintScale, Margin
from blueprint.scene import Element, svg_root
from blueprint.stacking import (
    add_floor_group,
    add_grid_pattern,
    canvas_height,
    draw_left_ruler,
    draw_top_ruler,
    stacked_floors_height,
)

logger = logging.getLogger(__name__)


def render_blueprint(layout, container_width: float, margin: Margin = DEFAULT_MARGIN) -> Element:
    land = layout.land
    floors = layout.floors
    scale = BlueprintScale.for_land(land, container_width, margin)

    svg = svg_root(container_width, canvas_height(len(floors), land, scale))
    add_grid_pattern(svg, scale)

    for index, floor in enumerate(floors):
        floor_g = add_floor_group(svg, floor, index, land, scale)
        rooms_g = floor_g.append("g", class_="rooms")
        draw_rooms(rooms_g, floor.rooms, scale)
        draw_merge_overlay(rooms_g, floor.rooms, scale)
        draw_labels(rooms_g, floor.rooms, scale)
        draw_left_ruler(floor_g, scale, land)

    draw_top_ruler(svg, scale, land)

    legend_y = margin.top + stacked_floors_height(len(floors), land, scale) + LEGEND_GAP_PX
    draw_legend(svg, area_totals(layout), margin.left, legend_y)
    draw_compass(svg, container_width)

    logger.debug(
        "Rendered %d floor(s) on a %.0fx%.0f canvas (%.3f px/ft)",
        len(floors), container_width, svg.attrs["height"], scale.pixels_per_foot,
    )
    return svg


def render_svg(layout, container_width: float, margin: Margin = DEFAULT_MARGIN) -> str:
    return render_blueprint(layout, container_width, margin).to_svg()
