"""Room classifier service behind ``POST /api/analyze-room``.

Azure AI Vision image analysis supplies the room tag and window evidence.
When Azure is unsure about the room and a Hugging Face token is configured,
a places365 scene classifier gets a second opinion; the more confident
verdict wins.
"""

from __future__ import annotations

import base64
import binascii
from typing import Any

import httpx
import structlog

from aesthetic.config import Settings
from aesthetic.errors import ClassifierRequestError
from aesthetic.models.contracts import RoomClassifierVerdict, WindowBox

log = structlog.get_logger("aesthetic.room_service")

ROOM_SET = ("bedroom", "kitchen", "living room", "bathroom", "dining room", "office")

AZURE_FEATURES = "tags,objects,caption,denseCaptions"
AZURE_API_VERSION = "2023-02-01-preview"

# Below this Azure room confidence, ask places365 as well
SCENE_FALLBACK_THRESHOLD = 0.8
# Window mentioned only in dense captions
CAPTION_WINDOW_CONFIDENCE = 0.5


def _values(section: Any) -> list[dict[str, Any]]:
    values = section.get("values") if isinstance(section, dict) else None
    return [v for v in values if isinstance(v, dict)] if isinstance(values, list) else []


def _score(value: Any) -> float:
    try:
        return float(value or 0)
    except (TypeError, ValueError):
        return 0.0


def interpret_azure_analysis(az: Any) -> RoomClassifierVerdict:
    """Best room tag plus window evidence from an Azure image-analysis body."""
    az = az if isinstance(az, dict) else {}
    room: str | None = None
    room_conf = 0.0
    has_window = False
    window_conf = 0.0
    boxes: list[WindowBox] = []

    for tag in _values(az.get("tagsResult") or az.get("tags")):
        name = str(tag.get("name") or "").lower()
        conf = _score(tag.get("confidence"))
        if name in ROOM_SET and conf > room_conf:
            room, room_conf = name, conf
        if name == "window" and conf > window_conf:
            has_window, window_conf = True, conf

    for obj in _values(az.get("objectsResult") or az.get("objects")):
        name = str(obj.get("name") or "").lower()
        conf = _score(obj.get("confidence"))
        if name == "window" and conf > window_conf:
            has_window, window_conf = True, conf
            box = obj.get("boundingBox")
            if isinstance(box, dict):
                boxes.append(
                    WindowBox(
                        x=_score(box.get("x")),
                        y=_score(box.get("y")),
                        w=_score(box.get("w")),
                        h=_score(box.get("h")),
                    )
                )

    dense = " ".join(
        str(c.get("text") or "")
        for c in _values(az.get("denseCaptionsResult") or az.get("denseCaptions"))
    ).lower()
    if not has_window and "window" in dense:
        has_window = True
        window_conf = max(window_conf, CAPTION_WINDOW_CONFIDENCE)

    return RoomClassifierVerdict(
        room_type=room,
        room_confidence=room_conf,
        has_window=has_window,
        window_confidence=window_conf,
        window_boxes=boxes,
    )


def best_scene_room(rows: Any) -> tuple[str | None, float]:
    """Highest-scoring places365 label that contains a known room name."""
    if isinstance(rows, list) and rows and isinstance(rows[0], list):
        rows = rows[0]
    if not isinstance(rows, list):
        return None, 0.0

    room: str | None = None
    best = 0.0
    for row in rows:
        if not isinstance(row, dict):
            continue
        label = str(row.get("label") or "").lower()
        score = _score(row.get("score"))
        for target in ROOM_SET:
            if target in label and score > best:
                room, best = target, score
    return room, best


def decode_image(value: str, mime_type: str | None) -> tuple[bytes, str | None]:
    """Raw bytes from base64 or a data URI; the data URI's mime type fills a missing one."""
    raw = value.strip()
    if raw.lower().startswith("data:") and ";base64," in raw:
        header, _, raw = raw.partition(",")
        mime_type = mime_type or header[5:].split(";")[0] or None
    try:
        data = base64.b64decode(raw)
    except (binascii.Error, ValueError) as e:
        raise ClassifierRequestError("Invalid base64 image payload.", status=400) from e
    if not data:
        raise ClassifierRequestError("Invalid base64 image payload.", status=400)
    return data, mime_type


class RoomClassifierService:
    def __init__(
        self,
        endpoint: str,
        key: str,
        *,
        huggingface_token: str = "",
        huggingface_base_url: str = "https://api-inference.huggingface.co/models",
        scene_model: str = "zhoubolei/places365-resnet50",
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._endpoint = endpoint.rstrip("/")
        self._key = key
        self._hf_token = huggingface_token
        self._scene_url = f"{huggingface_base_url.rstrip('/')}/{scene_model}"
        self._timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> RoomClassifierService:
        return cls(
            settings.azure_vision_endpoint,
            settings.azure_vision_key,
            huggingface_token=settings.huggingface_token,
            huggingface_base_url=settings.huggingface_base_url,
            scene_model=settings.scene_model,
            timeout=settings.http_timeout_seconds,
        )

    @property
    def configured(self) -> bool:
        return bool(self._endpoint and self._key)

    async def _azure(self, url: str | None, image: bytes | None) -> Any:
        analyze_url = (
            f"{self._endpoint}/computervision/imageanalysis:analyze"
            f"?features={AZURE_FEATURES}&api-version={AZURE_API_VERSION}"
        )
        headers = {"Ocp-Apim-Subscription-Key": self._key}
        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            try:
                if image is not None:
                    headers["Content-Type"] = "application/octet-stream"
                    resp = await client.post(analyze_url, headers=headers, content=image)
                else:
                    resp = await client.post(analyze_url, headers=headers, json={"url": url})
            except httpx.HTTPError as e:
                log.error("azure_vision_request_failed", error=str(e)[:200])
                raise ClassifierRequestError(f"Azure Vision request failed: {e}", status=500) from e

        if not resp.is_success:
            log.warning("azure_vision_error", status=resp.status_code)
            raise ClassifierRequestError(
                resp.text or f"Azure Vision request failed ({resp.status_code})",
                status=resp.status_code,
            )
        try:
            return resp.json()
        except ValueError as e:
            raise ClassifierRequestError("Azure Vision returned invalid JSON", status=502) from e

    async def _scene_classifier(
        self, url: str | None, image: bytes | None, mime_type: str | None
    ) -> Any:
        headers = {"Authorization": f"Bearer {self._hf_token}", "Accept": "application/json"}
        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            if image is not None:
                headers["Content-Type"] = mime_type or "application/octet-stream"
                resp = await client.post(self._scene_url, headers=headers, content=image)
            else:
                resp = await client.post(self._scene_url, headers=headers, json={"inputs": url})
        resp.raise_for_status()
        return resp.json()

    async def analyze(
        self,
        url: str | None = None,
        image_base64: str | None = None,
        mime_type: str | None = None,
    ) -> RoomClassifierVerdict:
        """Room type and window verdict for one image.

        Raises ``ClassifierRequestError`` with 400 for missing input, 500 when
        Azure is not configured, or Azure's own status when it rejects the call.
        """
        has_base64 = bool(image_base64 and image_base64.strip())
        if not url and not has_base64:
            raise ClassifierRequestError("Provide an image url or base64 data.", status=400)
        if not self.configured:
            raise ClassifierRequestError("Azure Vision is not configured.", status=500)

        image: bytes | None = None
        effective_mime = mime_type or "image/jpeg"
        if has_base64:
            image, decoded_mime = decode_image(image_base64 or "", mime_type)
            effective_mime = decoded_mime or effective_mime

        verdict = interpret_azure_analysis(await self._azure(url, image))

        if verdict.room_confidence < SCENE_FALLBACK_THRESHOLD and self._hf_token:
            try:
                scene_room, scene_conf = best_scene_room(
                    await self._scene_classifier(url, image, effective_mime)
                )
            except (httpx.HTTPError, ValueError) as e:
                log.warning("scene_classifier_fallback_failed", error=str(e)[:200])
            else:
                if scene_conf > verdict.room_confidence:
                    log.info(
                        "scene_classifier_override",
                        azure_room=verdict.room_type,
                        azure_confidence=verdict.room_confidence,
                        scene_room=scene_room,
                        scene_confidence=scene_conf,
                    )
                    verdict = verdict.model_copy(
                        update={
                            "room_type": scene_room or verdict.room_type,
                            "room_confidence": scene_conf,
                        }
                    )

        verdict = verdict.model_copy(
            update={
                "room_confidence": round(verdict.room_confidence, 3),
                "window_confidence": round(verdict.window_confidence, 3),
            }
        )
        log.info(
            "room_analyzed",
            room_type=verdict.room_type,
            room_confidence=verdict.room_confidence,
            has_window=verdict.has_window,
            window_boxes=len(verdict.window_boxes),
        )
        return verdict
