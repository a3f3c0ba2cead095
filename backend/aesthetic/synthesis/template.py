"""TemplatePlanBuilder: deterministic curated plan for when the model can't be used.

Variety comes from rotating the template lists by the caller's seed, so the
same room and seed always produce the same plan.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from aesthetic.knowledge.base import RoomKnowledgeBase
from aesthetic.knowledge.rooms import DEFAULT_TEMPLATE
from aesthetic.models.contracts import (
    DesignPlan,
    Intent,
    LayoutIdea,
    PhotoInsights,
    Scene,
    TemplateInfo,
)
from aesthetic.synthesis.intent import build_observations, derive_palette
from aesthetic.utils.text import dedupe, rotate_list

MAX_LAYOUT_IDEAS = 3
MAX_LIST_ITEMS = 6
DEFAULT_REQUEST = "refresh the space"

_INTENT_PLACEHOLDER = re.compile(r"\{intent\}", re.IGNORECASE)


def compose_layout_summary(room: str, request: str | None, style_name: str) -> str:
    phrase = (request or "refresh the layout").lower()
    return (
        f"Rework the {room.lower()} to {phrase} while reinforcing "
        f"{style_name.lower()} lines, zoning, and lighting."
    )


def build_template_plan(
    scene: Scene,
    intent: Intent,
    prompt: str | None,
    seed: int,
    knowledge: RoomKnowledgeBase,
    fallback_rooms: Sequence[str] = (),
    issues: Sequence[str] = (),
) -> tuple[DesignPlan, TemplateInfo]:
    """Curated plan for the scene's primary room, enriched with the brief's intent."""
    candidates = [name for name in [*scene.room_names, *fallback_rooms] if name]
    primary_room = candidates[0] if candidates else DEFAULT_TEMPLATE
    template = knowledge.template_for(primary_room)
    request = (prompt or "").strip().lower() or DEFAULT_REQUEST

    layout_ideas = []
    for idea in rotate_list(template.layout_ideas, seed)[:MAX_LAYOUT_IDEAS]:
        room = idea.room or primary_room
        summary = idea.summary or compose_layout_summary(room, request, template.style_name)
        layout_ideas.append(LayoutIdea(room=room, summary=_INTENT_PLACEHOLDER.sub(request, summary)))

    preset = knowledge.select_style(scene.combined_text or request)

    decor_tips = dedupe(
        [
            *rotate_list(template.decor_tips, seed + 1),
            *(feature.decor_tip for feature in intent.features),
        ]
    )
    furniture = dedupe(
        [
            *rotate_list(template.furniture_suggestions, seed + 2),
            *(feature.furniture_hint for feature in intent.features),
            *(preset.furniture if preset else ()),
        ]
    )

    plan = DesignPlan(
        style_name=template.style_name,
        style_summary=template.style_summary,
        color_palette=derive_palette(intent, template.color_palette)[:MAX_LIST_ITEMS],
        layout_ideas=layout_ideas,
        decor_tips=decor_tips[:MAX_LIST_ITEMS],
        furniture_suggestions=furniture[:MAX_LIST_ITEMS],
        photo_insights=PhotoInsights(
            observations=dedupe(
                [*template.observations, *build_observations(prompt, scene.style, intent)]
            ),
            recommended_lighting=template.recommended_lighting,
            validation_notes=list(issues),
        ),
    )
    info = TemplateInfo(
        template_name=template.template_name or primary_room,
        primary_room=primary_room,
        issues=list(issues),
    )
    return plan, info
