# app/models/requests.py
from pydantic import BaseModel, Field
from typing import Optional

from blueprint.layout import HouseLayout

DEFAULT_SESSION = "default"


class SessionRequest(BaseModel):
    sessionId: str = DEFAULT_SESSION


class EditLayoutRequest(SessionRequest):
    instruction: str
    includePreview: bool = False


class ReplaceLayoutRequest(SessionRequest):
    layout: HouseLayout


class RenderRequest(BaseModel):
    # Render an explicit layout, or the session's current one when omitted.
    layout: Optional[HouseLayout] = None
    sessionId: str = DEFAULT_SESSION
    containerWidth: Optional[float] = Field(default=None, gt=0)
