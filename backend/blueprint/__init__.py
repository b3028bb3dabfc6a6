"""Deterministic blueprint renderer for multi-floor house layouts."""
from blueprint.grouping import AreaTotals, RoomSummary, area_totals, grand_total_area, summarize_floor
from blueprint.layout import Floor, HouseLayout, Land, Room
from blueprint.renderer import render_blueprint, render_svg

__all__ = [
    "AreaTotals",
    "Floor",
    "HouseLayout",
    "Land",
    "Room",
    "RoomSummary",
    "area_totals",
    "grand_total_area",
    "render_blueprint",
    "render_svg",
    "summarize_floor",
]
