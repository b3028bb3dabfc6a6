from pydantic import BaseModel
from typing import List, Optional

from blueprint.layout import HouseLayout


class RoomGroupSummary(BaseModel):
    name: str
    totalArea: float
    color: str
    partCount: int
    anchorX: float
    anchorY: float


class FloorSummary(BaseModel):
    id: str
    name: str
    rooms: List[RoomGroupSummary]


class AreaBreakdown(BaseModel):
    main: float
    adu: float


class LayoutResponse(BaseModel):
    sessionId: str
    layout: HouseLayout
    floors: List[FloorSummary]
    totalArea: float
    areas: AreaBreakdown
    warnings: List[str] = []
    image_base64: Optional[str] = None
    status: Optional[str] = None
    message: Optional[str] = None


class PreviewResponse(BaseModel):
    image_base64: str
