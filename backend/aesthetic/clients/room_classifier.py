"""Client for the room classifier service (``POST /api/analyze-room``).

The verdict is a nice-to-have: any failure is logged and becomes ``None``.
"""

from __future__ import annotations

import re
from typing import Any

import httpx
import structlog
from pydantic import ValidationError

from aesthetic.errors import ExternalServiceFailure
from aesthetic.knowledge.base import RoomKnowledgeBase
from aesthetic.models.contracts import ImagePayload, RoomAnalysis

log = structlog.get_logger("aesthetic.room_classifier")

_REMOTE_URI = re.compile(r"^https?://", re.IGNORECASE)


def is_remote_uri(uri: str | None) -> bool:
    return bool(uri) and _REMOTE_URI.match(uri.strip()) is not None  # type: ignore[union-attr]


def parse_room_analysis(data: Any, knowledge: RoomKnowledgeBase) -> RoomAnalysis:
    """Validate a classifier response body into a ``RoomAnalysis``."""
    if not isinstance(data, dict):
        raise ExternalServiceFailure("room_classifier", "Room analysis returned a non-object body")
    if data.get("error"):
        raise ExternalServiceFailure("room_classifier", str(data["error"]))

    raw_room = data.get("roomType") or None
    return RoomAnalysis(
        room_type=knowledge.normalize_room_label(raw_room) or raw_room,
        raw_room_type=raw_room,
        room_confidence=float(data.get("roomConfidence") or 0),
        has_window=bool(data.get("hasWindow")),
        window_confidence=float(data.get("windowConfidence") or 0),
        window_boxes=data.get("windowBoxes") or [],
    )


class RoomClassifierClient:
    def __init__(
        self,
        url: str,
        knowledge: RoomKnowledgeBase,
        *,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._url = url
        self._knowledge = knowledge
        self._timeout = timeout
        self._transport = transport

    async def _post(self, payload: dict[str, Any]) -> Any:
        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            try:
                resp = await client.post(self._url, json=payload)
            except httpx.HTTPError as e:
                raise ExternalServiceFailure("room_classifier", f"Request failed: {e}") from e
        if not resp.is_success:
            raise ExternalServiceFailure(
                "room_classifier",
                resp.text or f"Room analysis failed with status {resp.status_code}",
                status=resp.status_code,
            )
        try:
            return resp.json()
        except ValueError as e:
            raise ExternalServiceFailure(
                "room_classifier", "Room analysis returned invalid JSON", status=resp.status_code
            ) from e

    async def classify(
        self,
        image: ImagePayload | None,
        image_uri: str | None = None,
    ) -> RoomAnalysis | None:
        payload: dict[str, Any] = {}
        if is_remote_uri(image_uri):
            payload["url"] = image_uri
        if image is not None:
            payload["base64"] = image.base64
            if image.mime_type:
                payload["mimeType"] = image.mime_type
        if not payload:
            return None

        try:
            analysis = parse_room_analysis(await self._post(payload), self._knowledge)
        except ExternalServiceFailure as e:
            log.warning("room_classifier_failed", status=e.status, error=str(e)[:200])
            return None
        except (ValidationError, TypeError, ValueError) as e:
            log.warning("room_classifier_malformed", error=str(e)[:200])
            return None

        log.info(
            "room_classifier_verdict",
            room_type=analysis.room_type,
            confidence=analysis.room_confidence,
            has_window=analysis.has_window,
        )
        return analysis
