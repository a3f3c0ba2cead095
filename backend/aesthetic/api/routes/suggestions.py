"""Design suggestion endpoint: one photo + brief in, one finalized plan out."""

from __future__ import annotations

import structlog
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from aesthetic.config import settings
from aesthetic.errors import NoImageData
from aesthetic.models.contracts import ErrorResponse, FinalPlan, SuggestionRequest
from aesthetic.synthesis.pipeline import DesignRecommendationEngine, build_engine

logger = structlog.get_logger()

router = APIRouter(tags=["suggestions"])


def _error(status: int, code: str, message: str, *, retryable: bool = False) -> JSONResponse:
    return JSONResponse(
        status_code=status,
        content=ErrorResponse(error=code, message=message, retryable=retryable).model_dump(),
    )


def _get_engine(request: Request) -> DesignRecommendationEngine:
    engine = getattr(request.app.state, "engine", None)
    if engine is None:
        engine = build_engine(settings)
        request.app.state.engine = engine
    return engine


@router.post(
    "/suggestions",
    response_model=FinalPlan,
    response_model_by_alias=True,
    responses={422: {"model": ErrorResponse}},
)
async def create_suggestions(body: SuggestionRequest, request: Request):
    """Synthesize a design plan. Provider failures degrade to a template plan."""
    engine = _get_engine(request)
    try:
        plan = await engine.synthesize(
            prompt=body.prompt,
            image_uri=body.image_uri,
            image_base64=body.image_base64,
            mime_type=body.mime_type,
            request_id=body.request_id,
            deadline_seconds=body.deadline_seconds,
        )
    except NoImageData as e:
        logger.warning("suggestion_no_image_data", image_uri=(body.image_uri or "")[:100])
        return _error(422, "no_image_data", str(e))

    logger.info(
        "suggestion_created",
        style=plan.style_name,
        template=plan.template_info.template_name if plan.template_info else None,
    )
    return plan
