"""Health check endpoint with provider configuration probes.

The engine degrades instead of failing when a provider is missing, so the
health endpoint reports which providers are wired rather than pinging them.
It always returns 200 so load balancers keep routing.
"""

from __future__ import annotations

import asyncio

import structlog
from fastapi import APIRouter

from aesthetic.config import settings

logger = structlog.get_logger()

router = APIRouter(tags=["health"])


async def _check_plan_model() -> str:
    """Which generative provider backs the plan request, if any."""
    if settings.plan_provider == "anthropic" and settings.anthropic_api_key:
        return "anthropic"
    if settings.huggingface_token:
        return "huggingface"
    return "unconfigured"


async def _check_vision() -> str:
    return "configured" if settings.google_vision_api_key else "unconfigured"


async def _check_room_classifier() -> str:
    return "configured" if settings.room_classifier_url else "unconfigured"


async def _check_room_service() -> str:
    """Azure backend of the local ``/api/analyze-room`` route."""
    if settings.azure_vision_endpoint and settings.azure_vision_key:
        return "configured"
    return "unconfigured"


@router.get("/health")
async def health_check() -> dict:
    """Confirm the API process is alive and report which providers are wired."""
    plan_model, vision, room_classifier, room_service = await asyncio.gather(
        _check_plan_model(),
        _check_vision(),
        _check_room_classifier(),
        _check_room_service(),
    )
    logger.debug("health_checked", plan_model=plan_model)

    return {
        "status": "ok",
        "version": "0.1.0",
        "environment": settings.environment,
        "plan_model": plan_model,
        "vision": vision,
        "room_classifier": room_classifier,
        "room_service": room_service,
    }
