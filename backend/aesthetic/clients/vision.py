"""Google Cloud Vision annotation and its interpretation into room signals."""

from __future__ import annotations

import re
from typing import Any

import httpx
import structlog
from pydantic import ValidationError

from aesthetic.errors import ExternalServiceFailure
from aesthetic.knowledge.base import RoomKnowledgeBase
from aesthetic.models.contracts import (
    ColorSwatch,
    ImagePayload,
    SceneRoom,
    VisionAnnotation,
    VisionLabel,
    VisionObject,
)
from aesthetic.utils.text import rgb_to_hex

log = structlog.get_logger("aesthetic.vision")

VISION_URL = "https://vision.googleapis.com/v1/images:annotate"
FEATURES = [
    {"type": "LABEL_DETECTION", "maxResults": 30},
    {"type": "OBJECT_LOCALIZATION", "maxResults": 30},
    {"type": "IMAGE_PROPERTIES", "maxResults": 1},
]

DEFAULT_LABEL_SCORE = 0.2
DEFAULT_OBJECT_SCORE = 0.25
INTERIOR_ROOM_SCORE = 0.6
MAX_FURNITURE = 8
DESCRIPTION_LABELS = 5

NO_ROOM_OBSERVATION = (
    "Vision analysis could not confirm a clear room type; relying on your prompt."
)

_INTERIOR_LABEL = re.compile(r"interior|room|indoors", re.IGNORECASE)


def _swatch(entry: dict[str, Any]) -> ColorSwatch:
    color = entry["color"]
    return ColorSwatch(
        hex=rgb_to_hex(color.get("red", 0), color.get("green", 0), color.get("blue", 0)),
        score=entry.get("score") or 0.0,
        pixel_fraction=entry.get("pixelFraction"),
    )


def interpret_vision_response(
    response: dict[str, Any] | None,
    knowledge: RoomKnowledgeBase,
    *,
    mime_type: str | None = None,
) -> VisionAnnotation | None:
    """Score rooms, furniture, lighting and colors from one annotate response."""
    if not response:
        return None

    labels = [
        VisionLabel(description=label.get("description") or "", score=label.get("score") or 0.0)
        for label in response.get("labelAnnotations") or []
    ]
    objects = [
        VisionObject(name=obj.get("name") or "", score=obj.get("score") or 0.0)
        for obj in response.get("localizedObjectAnnotations") or []
    ]
    dominant = (
        (response.get("imagePropertiesAnnotation") or {}).get("dominantColors") or {}
    ).get("colors") or []

    room_scores: dict[str, float] = {}
    lighting: list[str] = []

    def score_room(room: str | None, score: float) -> None:
        name = knowledge.normalize_room_label(room)
        if name:
            room_scores[name] = room_scores.get(name, 0.0) + score

    for label in labels:
        description = label.description.lower()
        for room, cues in knowledge.label_keywords.items():
            if any(cue in description for cue in cues):
                score_room(room, label.score or DEFAULT_LABEL_SCORE)
        for cue, mapped in knowledge.lighting_hints.items():
            if cue.lower() in description and mapped not in lighting:
                lighting.append(mapped)

    furniture_scores: dict[str, float] = {}
    for obj in objects:
        name = knowledge.furniture_names.get(obj.name, obj.name)
        if name:
            furniture_scores[name] = furniture_scores.get(name, 0.0) + (
                obj.score or DEFAULT_OBJECT_SCORE
            )
        score_room(knowledge.object_rooms.get(obj.name), obj.score or DEFAULT_OBJECT_SCORE)

    rooms = [
        SceneRoom(name=name, source="vision", score=score)
        for name, score in sorted(room_scores.items(), key=lambda item: item[1], reverse=True)
    ]
    furniture = [
        name
        for name, _ in sorted(furniture_scores.items(), key=lambda item: item[1], reverse=True)
    ][:MAX_FURNITURE]

    colors = [_swatch(entry) for entry in dominant if entry.get("color")]

    is_interior = (
        any((room.score or 0) > INTERIOR_ROOM_SCORE for room in rooms)
        or any(_INTERIOR_LABEL.search(label.description) for label in labels)
        or any(obj.name in knowledge.object_rooms for obj in objects)
    )

    return VisionAnnotation(
        labels=labels,
        objects=objects,
        rooms=rooms,
        furniture=furniture,
        lighting=lighting,
        colors=colors,
        is_interior=is_interior,
        observations=[] if rooms else [NO_ROOM_OBSERVATION],
        description=", ".join(label.description for label in labels[:DESCRIPTION_LABELS]),
        mime_type=mime_type,
    )


class GoogleVisionClient:
    """Label, object and dominant-color detection via ``images:annotate``."""

    def __init__(
        self,
        api_key: str,
        knowledge: RoomKnowledgeBase,
        *,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self._knowledge = knowledge
        self._timeout = timeout
        self._transport = transport

    async def _request(self, image: ImagePayload) -> dict[str, Any] | None:
        body = {"requests": [{"image": {"content": image.base64}, "features": FEATURES}]}
        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            try:
                resp = await client.post(VISION_URL, params={"key": self._api_key}, json=body)
            except httpx.HTTPError as e:
                raise ExternalServiceFailure("vision", f"Vision request failed: {e}") from e

        try:
            payload = resp.json()
        except ValueError:
            payload = {}
        error = payload.get("error") if isinstance(payload, dict) else None
        if not resp.is_success or error:
            message = error.get("message") if isinstance(error, dict) else error
            raise ExternalServiceFailure(
                "vision", message or f"Vision API error ({resp.status_code})", status=resp.status_code
            )

        responses = (payload.get("responses") or []) if isinstance(payload, dict) else []
        return responses[0] if responses else None

    async def annotate(self, image: ImagePayload) -> VisionAnnotation | None:
        """Interpreted annotation, or ``None`` when the service can't help."""
        try:
            response = await self._request(image)
        except ExternalServiceFailure as e:
            log.warning("vision_annotation_failed", status=e.status, error=str(e))
            return None
        try:
            annotation = interpret_vision_response(
                response, self._knowledge, mime_type=image.mime_type
            )
        except (ValidationError, TypeError, ValueError, AttributeError, KeyError) as e:
            log.warning("vision_annotation_malformed", error=str(e)[:200])
            return None
        if annotation is not None:
            log.info(
                "vision_annotation_complete",
                rooms=[room.name for room in annotation.rooms],
                furniture_count=len(annotation.furniture),
            )
        return annotation
