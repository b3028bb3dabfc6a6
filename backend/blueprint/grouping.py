# blueprint/grouping.py
"""Room groups (rooms sharing a name on one floor) and area aggregates."""
import math
from typing import Dict, List, NamedTuple

from blueprint.constants import ADU_ID_PREFIX, ADU_NAME_PREFIX, COLORS


def room_area(room) -> float:
    return room.width * room.height


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class RoomGroup:
    """One logical room: every rectangle on a floor carrying the same name."""

    def __init__(self, name: str, parts: List):
        self.name = name
        self.parts = parts

    @property
    def anchor(self):
        # max() keeps the first of equal keys, so ties go to the earliest part
        return max(self.parts, key=room_area)

    @property
    def total_area(self) -> float:
        return sum(room_area(r) for r in self.parts)

    @property
    def color(self) -> str:
        return self.parts[0].color or COLORS["room_default"]

    def __repr__(self) -> str:
        return f"RoomGroup({self.name!r}, parts={len(self.parts)})"


def group_rooms(rooms) -> List[RoomGroup]:
    """Group rooms by name, in order of first appearance."""
    by_name: Dict[str, List] = {}
    for room in rooms:
        by_name.setdefault(room.name, []).append(room)
    return [RoomGroup(name, parts) for name, parts in by_name.items()]


class RoomSummary(NamedTuple):
    name: str
    total_area: float
    color: str
    part_count: int
    anchor_x: float
    anchor_y: float


def summarize_floor(floor) -> List[RoomSummary]:
    """Sidebar rows for one floor. Coordinates are those of the first part."""
    summaries = []
    for group in group_rooms(floor.rooms):
        first = group.parts[0]
        summaries.append(RoomSummary(
            name=group.name,
            total_area=group.total_area,
            color=group.color,
            part_count=len(group.parts),
            anchor_x=first.x,
            anchor_y=first.y,
        ))
    return summaries


def grand_total_area(layout) -> float:
    return sum(room_area(r) for f in layout.floors for r in f.rooms)


def is_adu(room) -> bool:
    return room.name.startswith(ADU_NAME_PREFIX) or room.id.startswith(ADU_ID_PREFIX)


class AreaTotals(NamedTuple):
    main: float
    adu: float

    @property
    def total(self) -> float:
        return self.main + self.adu


def area_totals(layout) -> AreaTotals:
    """Split every room's area between the main house and the ADU."""
    main = adu = 0.0
    for floor in layout.floors:
        for room in floor.rooms:
            if is_adu(room):
                adu += room_area(room)
            else:
                main += room_area(room)
    return AreaTotals(main=main, adu=adu)
