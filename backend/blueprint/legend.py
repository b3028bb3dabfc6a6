# blueprint/legend.py
# Area legend under the last floor and the compass glyph.
from blueprint.constants import COLORS
from blueprint.grouping import AreaTotals, round_half_up
from blueprint.scene import Element, translate

LEGEND_GAP_PX = 30
COMPASS_INSET_PX = 50
COMPASS_TOP_PX = 40


def draw_legend(svg: Element, totals: AreaTotals, x: float, y: float) -> Element:
    legend = svg.append("g", class_="legend", transform=translate(x, y))
    legend.append(
        "rect", x=-10, y=-15, width=220, height=60,
        fill="white", stroke=COLORS["legend_border"], rx=5,
    )
    legend.append(
        "text", "Total Area Calculation:", x=0, y=0,
        font_weight="bold", font_size="12px", fill=COLORS["legend_title"],
    )
    legend.append(
        "text", f"Main House (+Garage): {round_half_up(totals.main)} sqft", x=0, y=18,
        font_size="11px", fill=COLORS["legend_text"],
    )
    legend.append(
        "text", f"ADU Unit: {round_half_up(totals.adu)} sqft", x=0, y=34,
        font_size="11px", fill=COLORS["legend_text"],
    )
    return legend


def draw_compass(svg: Element, container_width: float) -> Element:
    compass = svg.append(
        "g", class_="compass",
        transform=translate(container_width - COMPASS_INSET_PX, COMPASS_TOP_PX),
    )
    compass.append("circle", r=18, fill="white", stroke=COLORS["compass_ring"])
    # Screen left is north and screen top is east.
    compass.append("text", "N", x=-6, y=5, font_size="12px", font_weight="bold",
                   fill=COLORS["compass_north"])
    compass.append("text", "E", x=0, y=-8, font_size="10px", font_weight="bold",
                   fill=COLORS["compass_east"])
    return compass
