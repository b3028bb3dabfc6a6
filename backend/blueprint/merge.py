# blueprint/merge.py
"""
Merge overlay for multi-part rooms.

Rooms that share a name are one logical room split into rectangles. Where two
such parts touch, a stroke in the room's own color is painted over the shared
outline so the parts read as a single shape.
"""
from typing import List, NamedTuple, Optional, Set, Tuple

from blueprint.constants import COLORS, EDGE_EPSILON_FT
from blueprint.scale import BlueprintScale
from blueprint.scene import Element

VERTICAL = "vertical"
HORIZONTAL = "horizontal"

OVERLAY_STROKE_PX = 3
CORNER_INSET_PX = 1


class SharedEdge(NamedTuple):
    orientation: str
    position: float  # x of a vertical edge, y of a horizontal one (ft)
    start: float
    end: float
    color: str


def _bounds(room) -> Tuple[float, float, float, float]:
    return room.x, room.y, room.x + room.width, room.y + room.height


def _vertical_edge(r1, r2, color: str) -> Optional[SharedEdge]:
    l1, t1, right1, b1 = _bounds(r1)
    l2, t2, right2, b2 = _bounds(r2)
    start, end = max(t1, t2), min(b1, b2)
    if end <= start:
        return None
    if abs(right1 - l2) < EDGE_EPSILON_FT:
        return SharedEdge(VERTICAL, right1, start, end, color)
    if abs(right2 - l1) < EDGE_EPSILON_FT:
        return SharedEdge(VERTICAL, l1, start, end, color)
    return None


def _horizontal_edge(r1, r2, color: str) -> Optional[SharedEdge]:
    l1, t1, right1, b1 = _bounds(r1)
    l2, t2, right2, b2 = _bounds(r2)
    start, end = max(l1, l2), min(right1, right2)
    if end <= start:
        return None
    if abs(b1 - t2) < EDGE_EPSILON_FT:
        return SharedEdge(HORIZONTAL, b1, start, end, color)
    if abs(b2 - t1) < EDGE_EPSILON_FT:
        return SharedEdge(HORIZONTAL, t1, start, end, color)
    return None


def find_shared_edges(rooms) -> List[SharedEdge]:
    """
    Shared edges between same-name, different-id rooms on one floor.

    Each unordered pair is visited once (keyed by sorted ids). The overlay
    takes the color of the pair's first-listed room. O(n^2) in room count.
    """
    rooms = list(rooms)
    seen: Set[Tuple[str, str]] = set()
    edges: List[SharedEdge] = []
    for r1 in rooms:
        for r2 in rooms:
            if r1.id == r2.id or r1.name != r2.name:
                continue
            key = tuple(sorted((r1.id, r2.id)))
            if key in seen:
                continue
            seen.add(key)

            color = r1.color or COLORS["room_default"]
            for edge in (_vertical_edge(r1, r2, color), _horizontal_edge(r1, r2, color)):
                if edge is not None:
                    edges.append(edge)
    return edges


def draw_merge_overlay(group: Element, rooms, scale: BlueprintScale) -> List[SharedEdge]:
    edges = find_shared_edges(rooms)
    for edge in edges:
        if edge.orientation == VERTICAL:
            x = scale.x(edge.position)
            x1, x2 = x, x
            y1 = scale.y(edge.start) + CORNER_INSET_PX
            y2 = scale.y(edge.end) - CORNER_INSET_PX
        else:
            y = scale.y(edge.position)
            y1, y2 = y, y
            x1 = scale.x(edge.start) + CORNER_INSET_PX
            x2 = scale.x(edge.end) - CORNER_INSET_PX
        group.append(
            "line", x1=x1, y1=y1, x2=x2, y2=y2,
            stroke=edge.color, stroke_width=OVERLAY_STROKE_PX,
        )
    return edges
