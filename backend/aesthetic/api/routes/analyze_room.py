"""Room classifier endpoint. Errors answer with a bare ``{error}`` body."""

from __future__ import annotations

import structlog
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from aesthetic.classifier.room_service import RoomClassifierService
from aesthetic.config import settings
from aesthetic.errors import ClassifierRequestError
from aesthetic.models.contracts import RoomClassifierRequest, RoomClassifierVerdict

logger = structlog.get_logger()

router = APIRouter(tags=["room-classifier"])


def _get_service(request: Request) -> RoomClassifierService:
    service = getattr(request.app.state, "room_service", None)
    if service is None:
        service = RoomClassifierService.from_settings(settings)
        request.app.state.room_service = service
    return service


@router.post(
    "/analyze-room",
    response_model=RoomClassifierVerdict,
    response_model_by_alias=True,
)
async def analyze_room(body: RoomClassifierRequest, request: Request):
    service = _get_service(request)
    try:
        return await service.analyze(body.url, body.base64, body.mime_type)
    except ClassifierRequestError as e:
        logger.warning("analyze_room_rejected", status=e.status, error=str(e)[:200])
        return JSONResponse(status_code=e.status, content={"error": str(e)})
