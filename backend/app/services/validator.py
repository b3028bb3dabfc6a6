import math
from typing import List

from shapely.geometry import box

from blueprint.layout import HouseLayout


def _room_box(room):
    return box(room.x, room.y, room.x + room.width, room.y + room.height)


def _in_bounds(land, room) -> bool:
    return (room.x >= 0 and room.y >= 0 and
            room.x + room.width <= land.width and
            room.y + room.height <= land.height)


def validate_layout(layout: HouseLayout) -> List[str]:
    """
    Advisory checks for a layout, typically one returned by the AI.

    Nothing is clamped or rejected: out-of-bounds rooms still render outside
    the land boundary. The warnings are passed to the client as-is.
    """
    warnings: List[str] = []
    land = layout.land
    if land.width <= 0 or land.height <= 0:
        warnings.append(f"Land has non-positive size ({land.width} x {land.height}).")

    for floor in layout.floors:
        seen_ids = set()
        for room in floor.rooms:
            label = f'{floor.name}: "{room.name}" ({room.id})'
            if room.id in seen_ids:
                warnings.append(f"{label} reuses an id already present on this floor.")
            seen_ids.add(room.id)
            if room.width <= 0 or room.height <= 0:
                warnings.append(f"{label} has non-positive size.")
            elif not _in_bounds(land, room):
                warnings.append(f"{label} extends outside the land.")

        # Parts of the same logical room may touch but different rooms should not overlap.
        rooms = [r for r in floor.rooms if r.width > 0 and r.height > 0]
        for i in range(len(rooms)):
            b1 = _room_box(rooms[i])
            for j in range(i + 1, len(rooms)):
                if rooms[i].name == rooms[j].name:
                    continue
                if b1.intersection(_room_box(rooms[j])).area > 0:
                    warnings.append(
                        f'{floor.name}: "{rooms[i].name}" overlaps with "{rooms[j].name}".'
                    )

    return warnings


def ensure_renderable(layout: HouseLayout) -> None:
    """Raise ValueError for geometry the renderer cannot scale."""
    land = layout.land
    if not (math.isfinite(land.width) and math.isfinite(land.height)):
        raise ValueError(f"Land size must be finite, got {land.width} x {land.height}.")
    for floor in layout.floors:
        for room in floor.rooms:
            if not all(math.isfinite(v) for v in (room.x, room.y, room.width, room.height)):
                raise ValueError(f'{floor.name}: "{room.name}" ({room.id}) has non-finite geometry.')
    if land.width <= 0:
        raise ValueError(f"Land width must be positive, got {land.width}.")
    if land.height <= 0:
        raise ValueError(f"Land height must be positive, got {land.height}.")
