# blueprint/layout.py
"""
House layout data model: land, floors and axis-aligned rooms (feet).

The models carry no rendering rules. Positive sizes, in-bounds rooms and
non-overlap are assumptions of the renderer, not validated here; see
app.services.validator for advisory checks.
"""
from typing import List, Optional

from pydantic import BaseModel


class Land(BaseModel):
    width: float
    height: float


class Room(BaseModel):
    id: str
    name: str
    x: float  # distance from the left (north) edge
    y: float  # distance from the top (east) edge
    width: float
    height: float
    color: Optional[str] = None
    description: Optional[str] = None

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def area(self) -> float:
        return self.width * self.height


class Floor(BaseModel):
    id: str
    name: str
    rooms: List[Room] = []


class HouseLayout(BaseModel):
    land: Land
    floors: List[Floor] = []

    def snapshot(self) -> "HouseLayout":
        return self.model_copy(deep=True)
