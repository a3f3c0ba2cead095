"""DesignRecommendationEngine: one photo + brief in, one finalized plan out.

Stage order per request:
1. Resolve the image reference (the only fatal failure is an unreadable one)
2. Room classifier + vision annotation, concurrently
3. Scene fusion, intent extraction, ready-made template plan
4. Caption, then generative plan, then grounding validation
5. Finalize whichever plan won

Every external call runs under one shared deadline. A classifier or vision
timeout just drops that signal; a caption or plan timeout sends the request
down the template path.
"""

from __future__ import annotations

import asyncio
import time
from collections.abc import Awaitable
from typing import Protocol, TypeVar

import structlog

from aesthetic.clients.anthropic_text import AnthropicTextGenerator
from aesthetic.clients.huggingface import HuggingFaceInferenceClient
from aesthetic.clients.room_classifier import RoomClassifierClient
from aesthetic.clients.vision import GoogleVisionClient
from aesthetic.config import Settings
from aesthetic.errors import GenerativeModelFailure, NoImageData
from aesthetic.knowledge.base import RoomKnowledgeBase, default_knowledge_base
from aesthetic.models.contracts import (
    DesignPlan,
    FinalPlan,
    ImagePayload,
    Intent,
    RoomAnalysis,
    Scene,
    TemplateInfo,
    TemplateReason,
    VisionAnnotation,
)
from aesthetic.synthesis.finalize import FinalizeContext, finalize_plan
from aesthetic.synthesis.generate import GenerativePlanRequester, TextGenerator
from aesthetic.synthesis.intent import extract_intent
from aesthetic.synthesis.scene import analyze_scene, fallback_rooms
from aesthetic.synthesis.template import build_template_plan
from aesthetic.synthesis.validation import validate_plan
from aesthetic.utils.deadline import Deadline
from aesthetic.utils.http import load_image_payload

log = structlog.get_logger("aesthetic.pipeline")

T = TypeVar("T")

TIMEOUT_ISSUE = "Timed out waiting for the AI model."


class RoomClassifier(Protocol):
    async def classify(
        self, image: ImagePayload | None, image_uri: str | None = None
    ) -> RoomAnalysis | None: ...


class VisionAnnotator(Protocol):
    async def annotate(self, image: ImagePayload) -> VisionAnnotation | None: ...


class ImageCaptioner(Protocol):
    async def caption(self, image: ImagePayload) -> str | None: ...


class DesignRecommendationEngine:
    def __init__(
        self,
        knowledge: RoomKnowledgeBase,
        *,
        classifier: RoomClassifier | None = None,
        vision: VisionAnnotator | None = None,
        captioner: ImageCaptioner | None = None,
        planner: GenerativePlanRequester | None = None,
        deadline_seconds: float = 45.0,
        http_timeout: float = 30.0,
    ) -> None:
        self.knowledge = knowledge
        self.classifier = classifier
        self.vision = vision
        self.captioner = captioner
        self.planner = planner
        self.deadline_seconds = deadline_seconds
        self.http_timeout = http_timeout

    async def _optional(
        self, service: str, call: Awaitable[T | None], deadline: Deadline
    ) -> T | None:
        try:
            return await deadline.run(call)
        except TimeoutError:
            log.warning("external_call_timeout", service=service)
            return None

    async def _load_image(
        self,
        image_uri: str | None,
        image_base64: str | None,
        mime_type: str | None,
        deadline: Deadline,
    ) -> ImagePayload | None:
        try:
            return await deadline.run(
                load_image_payload(image_uri, image_base64, mime_type, timeout=self.http_timeout)
            )
        except TimeoutError as e:
            log.warning("image_load_timeout", image_uri=(image_uri or "")[:100])
            raise NoImageData() from e

    async def _gather_signals(
        self,
        image: ImagePayload,
        image_uri: str | None,
        deadline: Deadline,
    ) -> tuple[RoomAnalysis | None, VisionAnnotation | None]:
        async def no_signal() -> None:
            return None

        classify = (
            self._optional("room_classifier", self.classifier.classify(image, image_uri), deadline)
            if self.classifier
            else no_signal()
        )
        annotate = (
            self._optional("vision", self.vision.annotate(image), deadline)
            if self.vision
            else no_signal()
        )
        room_analysis, vision = await asyncio.gather(classify, annotate)
        return room_analysis, vision

    async def synthesize(
        self,
        prompt: str | None = "",
        image_uri: str | None = None,
        image_base64: str | None = None,
        mime_type: str | None = None,
        request_id: int | None = None,
        deadline_seconds: float | None = None,
    ) -> FinalPlan:
        """Produce a finalized design plan. Raises ``NoImageData`` only."""
        prompt = (prompt or "").strip()
        seed = request_id if isinstance(request_id, int) else time.time_ns() // 1_000_000
        deadline = Deadline(deadline_seconds or self.deadline_seconds)
        knowledge = self.knowledge

        log.info(
            "synthesis_start",
            seed=seed,
            has_prompt=bool(prompt),
            has_image=bool(image_uri or image_base64),
            planner=self.planner.provider if self.planner else None,
        )

        image = await self._load_image(image_uri, image_base64, mime_type, deadline)
        room_analysis: RoomAnalysis | None = None
        vision: VisionAnnotation | None = None
        if image is not None:
            room_analysis, vision = await self._gather_signals(image, image_uri, deadline)

        intent = extract_intent(prompt, knowledge)
        scene = analyze_scene(None, prompt, vision, room_analysis, knowledge)
        rooms = fallback_rooms(scene, prompt, knowledge)
        template_plan, _ = build_template_plan(scene, intent, prompt, seed, knowledge, rooms)
        caption: str | None = None

        def context(template: DesignPlan, info: TemplateInfo | None) -> FinalizeContext:
            return FinalizeContext(
                scene=scene,
                intent=intent,
                template=template,
                knowledge=knowledge,
                prompt=prompt,
                source_image=image_uri,
                caption=caption,
                fallback_rooms=tuple(rooms),
                template_info=info,
            )

        def fallback(reason: TemplateReason, seed_offset: int, issues: list[str]) -> FinalPlan:
            plan, info = build_template_plan(
                scene, intent, prompt, seed + seed_offset, knowledge, rooms, issues
            )
            info = info.model_copy(update={"reason": reason})
            log.info(
                "template_fallback",
                reason=reason,
                template=info.template_name,
                primary_room=info.primary_room,
                issues=issues,
            )
            return finalize_plan(plan, context(plan, info))

        if self.planner is None:
            return fallback("model-unavailable", 0, [])

        try:
            if image is not None and self.captioner is not None:
                caption = await deadline.run(self.captioner.caption(image))
                scene = analyze_scene(caption, prompt, vision, room_analysis, knowledge)
                rooms = fallback_rooms(scene, prompt, knowledge)
                template_plan, _ = build_template_plan(
                    scene, intent, prompt, seed, knowledge, rooms
                )

            candidate = await deadline.run(self.planner.request_plan(caption, prompt, scene))
        except (GenerativeModelFailure, TimeoutError) as e:
            issue = str(e) or TIMEOUT_ISSUE
            log.warning("generative_plan_failed", error=issue[:200], error_type=type(e).__name__)
            return fallback("error-fallback", 2, [issue])

        validation = validate_plan(candidate, scene.room_names or rooms, scene.furniture)
        if not validation.valid:
            log.warning("plan_validation_failed", issues=validation.issues)
            return fallback("validation-fallback", 1, validation.issues)

        result = finalize_plan(candidate, context(template_plan, None))
        log.info("synthesis_complete", style=result.style_name, rooms=result.analysis.rooms)
        return result


def build_engine(
    settings: Settings,
    knowledge: RoomKnowledgeBase | None = None,
) -> DesignRecommendationEngine:
    """Engine wired with only the collaborators whose credentials are configured."""
    knowledge = knowledge or default_knowledge_base()
    timeout = settings.http_timeout_seconds

    huggingface = None
    if settings.huggingface_token:
        huggingface = HuggingFaceInferenceClient(
            settings.huggingface_token,
            base_url=settings.huggingface_base_url,
            caption_model=settings.caption_model,
            plan_model=settings.plan_model,
            timeout=timeout,
        )

    generator: TextGenerator | None = huggingface
    if settings.plan_provider == "anthropic" and settings.anthropic_api_key:
        generator = AnthropicTextGenerator(
            settings.anthropic_api_key, model=settings.anthropic_plan_model
        )

    engine = DesignRecommendationEngine(
        knowledge,
        classifier=(
            RoomClassifierClient(settings.room_classifier_url, knowledge, timeout=timeout)
            if settings.room_classifier_url
            else None
        ),
        vision=(
            GoogleVisionClient(settings.google_vision_api_key, knowledge, timeout=timeout)
            if settings.google_vision_api_key
            else None
        ),
        captioner=huggingface,
        planner=GenerativePlanRequester(generator) if generator else None,
        deadline_seconds=settings.request_deadline_seconds,
        http_timeout=timeout,
    )
    log.info(
        "engine_configured",
        classifier=engine.classifier is not None,
        vision=engine.vision is not None,
        captioner=engine.captioner is not None,
        planner=generator.provider if generator else None,
    )
    return engine
