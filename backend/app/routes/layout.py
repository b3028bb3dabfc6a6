# app/routes/layout.py

import logging

from fastapi import APIRouter, HTTPException, Query, Request
from fastapi.responses import Response

from app.config import Config
from app.models.requests import (
    DEFAULT_SESSION,
    EditLayoutRequest,
    RenderRequest,
    ReplaceLayoutRequest,
    SessionRequest,
)
from app.models.responses import (
    AreaBreakdown,
    FloorSummary,
    LayoutResponse,
    PreviewResponse,
    RoomGroupSummary,
)
from app.services.preview import render_preview_png
from app.services.session import EditInProgressError, EditorSession
from app.services.validator import ensure_renderable, validate_layout
from blueprint.grouping import area_totals, grand_total_area, summarize_floor
from blueprint.renderer import render_svg

logger = logging.getLogger(__name__)

router = APIRouter()

SVG_MEDIA_TYPE = "image/svg+xml"


def _session(request: Request, session_id: str) -> EditorSession:
    return request.app.state.sessions.get(session_id)


def _layout_response(session_id: str, session: EditorSession, include_preview: bool = False) -> LayoutResponse:
    layout = session.layout
    floors = [
        FloorSummary(
            id=floor.id,
            name=floor.name,
            rooms=[
                RoomGroupSummary(
                    name=s.name, totalArea=s.total_area, color=s.color,
                    partCount=s.part_count, anchorX=s.anchor_x, anchorY=s.anchor_y,
                )
                for s in summarize_floor(floor)
            ],
        )
        for floor in layout.floors
    ]
    totals = area_totals(layout)
    return LayoutResponse(
        sessionId=session_id,
        layout=layout,
        floors=floors,
        totalArea=grand_total_area(layout),
        areas=AreaBreakdown(main=totals.main, adu=totals.adu),
        warnings=validate_layout(layout),
        image_base64=_preview_or_none(layout) if include_preview else None,
        status="error" if session.error else "ok",
        message=session.error,
    )


def _require_renderable(layout) -> None:
    try:
        ensure_renderable(layout)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


def _preview_or_none(layout):
    # The warnings list already explains why an unrenderable layout has no image.
    try:
        ensure_renderable(layout)
    except ValueError:
        return None
    return render_preview_png(layout)


def _svg(layout, width: float) -> Response:
    _require_renderable(layout)
    return Response(content=render_svg(layout, width), media_type=SVG_MEDIA_TYPE)


@router.get("/layout", response_model=LayoutResponse)
def get_layout(request: Request, sessionId: str = Query(DEFAULT_SESSION)):
    return _layout_response(sessionId, _session(request, sessionId))


@router.put("/layout", response_model=LayoutResponse)
def replace_layout(req: ReplaceLayoutRequest, request: Request):
    session = _session(request, req.sessionId)
    session.replace(req.layout)
    return _layout_response(req.sessionId, session)


@router.post("/layout/edit", response_model=LayoutResponse)
async def edit_layout(req: EditLayoutRequest, request: Request):
    session = _session(request, req.sessionId)
    try:
        await session.submit(req.instruction)
    except EditInProgressError as e:
        raise HTTPException(status_code=409, detail=str(e))
    # A failed transform is not an HTTP error: the prior layout comes back
    # together with the advisory message.
    return _layout_response(req.sessionId, session, include_preview=req.includePreview)


@router.post("/layout/reset", response_model=LayoutResponse)
def reset_layout(req: SessionRequest, request: Request):
    session = _session(request, req.sessionId)
    session.reset()
    return _layout_response(req.sessionId, session)


@router.get("/layout/svg")
def layout_svg(request: Request, sessionId: str = Query(DEFAULT_SESSION),
               width: float = Query(None, gt=0)):
    session = _session(request, sessionId)
    return _svg(session.layout, width or Config.DEFAULT_CANVAS_WIDTH)


@router.post("/render")
def render_layout(req: RenderRequest, request: Request):
    layout = req.layout if req.layout is not None else _session(request, req.sessionId).layout
    return _svg(layout, req.containerWidth or Config.DEFAULT_CANVAS_WIDTH)


@router.post("/render/preview", response_model=PreviewResponse)
def render_preview(req: RenderRequest, request: Request):
    layout = req.layout if req.layout is not None else _session(request, req.sessionId).layout
    _require_renderable(layout)
    return PreviewResponse(image_base64=render_preview_png(layout))
