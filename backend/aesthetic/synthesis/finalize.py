"""PlanFinalizer: turn the winning plan into the response the client renders.

Whatever plan won (validated model output or curated template) is merged
with the primary room's curated knowledge and the scene analysis, then
every list is sanitised, deduplicated and capped.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

from aesthetic.knowledge.base import RoomKnowledgeBase
from aesthetic.knowledge.rooms import FLEXIBLE_SPACE
from aesthetic.models.contracts import (
    DesignPlan,
    FinalPhotoInsights,
    FinalPlan,
    Intent,
    LayoutIdea,
    PlanAnalysis,
    RoomKnowledgeEntry,
    Scene,
    TemplateInfo,
)
from aesthetic.synthesis.scene import NATURAL_LIGHT, determine_primary_room
from aesthetic.synthesis.template import compose_layout_summary
from aesthetic.utils.text import dedupe, is_hex_color, title_case

MAX_PALETTE = 6
MIN_PALETTE = 3
MAX_LAYOUT_IDEAS = 3
MAX_LIST_ITEMS = 6

TEMPLATE_REASONS = {
    "error-fallback": "the AI response was unavailable",
    "validation-fallback": "the AI plan did not align with detected room or furniture cues",
    "model-unavailable": "the AI service is currently unavailable",
}

WINDOW_DETECTED_OBSERVATION = (
    "Detected window - plan includes layered treatments and seating recommendations to "
    "leverage daylight."
)


@dataclass(frozen=True)
class FinalizeContext:
    """Everything the finalizer needs besides the plan itself."""

    scene: Scene
    intent: Intent
    template: DesignPlan
    knowledge: RoomKnowledgeBase
    prompt: str = ""
    source_image: str | None = None
    caption: str | None = None
    fallback_rooms: tuple[str, ...] = ()
    template_info: TemplateInfo | None = None


def sanitize_palette(palette: list[str], fallback: list[str]) -> list[str]:
    cleaned = [value.strip() for value in palette if is_hex_color(value.strip())]
    cleaned = dedupe(cleaned)[:MAX_PALETTE]
    return cleaned if len(cleaned) >= MIN_PALETTE else list(fallback)


def normalize_ideas(
    ideas: list[LayoutIdea],
    *,
    prompt: str,
    style_name: str,
    fallback: list[LayoutIdea],
) -> list[LayoutIdea]:
    """Fill missing rooms and summaries, drop duplicates, cap at three."""
    normalized: list[LayoutIdea] = []
    seen: set[tuple[str, str]] = set()
    for index, idea in enumerate(ideas):
        room = idea.room.strip()
        if not room:
            if index < len(fallback) and fallback[index].room:
                room = fallback[index].room
            elif fallback and fallback[0].room:
                room = fallback[0].room
            else:
                room = FLEXIBLE_SPACE
        room = title_case(room)
        summary = idea.summary.strip() or compose_layout_summary(
            room, prompt, style_name or "Interior"
        )
        if (room, summary) not in seen:
            seen.add((room, summary))
            normalized.append(LayoutIdea(room=room, summary=summary))
    return normalized[:MAX_LAYOUT_IDEAS] or list(fallback)


def cover_scene_rooms(
    ideas: list[LayoutIdea],
    rooms: list[str],
    *,
    prompt: str,
    style_name: str,
) -> list[LayoutIdea]:
    """One idea per detected room first, then the remaining ideas.

    A room the plan already covers keeps the plan's first idea for it; an
    uncovered room gets a synthesised one.
    """
    anchors: list[LayoutIdea] = []
    for room in dedupe(title_case(name) for name in rooms):
        idea = next((i for i in ideas if i.room.lower() == room.lower()), None)
        anchors.append(
            idea or LayoutIdea(room=room, summary=compose_layout_summary(room, prompt, style_name))
        )
    rest = [idea for idea in ideas if idea not in anchors]
    return [*anchors, *rest][:MAX_LAYOUT_IDEAS]


def merge_curated_ideas(
    curated: tuple[LayoutIdea, ...], ideas: list[LayoutIdea], *, keep: int = 0
) -> list[LayoutIdea]:
    """Curated ideas fill the slots after the first ``keep`` ideas."""
    merged: list[LayoutIdea] = []
    seen: set[tuple[str, str]] = set()
    for idea in [*ideas[:keep], *curated, *ideas[keep:]]:
        room = title_case(idea.room or FLEXIBLE_SPACE)
        summary = idea.summary.strip()
        if summary and (room, summary) not in seen:
            seen.add((room, summary))
            merged.append(LayoutIdea(room=room, summary=summary))
    return merged[:MAX_LAYOUT_IDEAS]


def _template_note(info: TemplateInfo) -> str:
    reason = TEMPLATE_REASONS.get(info.reason or "") or (
        f"the scene looks like a {(info.primary_room or info.template_name).lower()}"
    )
    return f"Plan generated from curated template ({info.template_name}) because {reason}."


def _knowledge_observations(
    entry: RoomKnowledgeEntry | None,
    scene: Scene,
    primary_room: str,
    observations: list[str],
) -> list[str]:
    analysis = scene.room_analysis
    if entry is None:
        if analysis and analysis.room_type:
            return dedupe(
                [f"Room analysis suggests this is a {primary_room.lower()}.", *observations]
            )
        return observations

    notes = dedupe([*entry.observations, *observations])
    if analysis and analysis.has_window:
        if entry.window_treatments:
            notes = dedupe([entry.window_treatments, *notes])
        notes = dedupe([WINDOW_DETECTED_OBSERVATION, *notes])
        if analysis.window_confidence:
            notes = dedupe(
                [
                    f"Window detection confidence {analysis.window_confidence:.2f}; "
                    "incorporate glare control and privacy options.",
                    *notes,
                ]
            )
    if analysis and analysis.room_confidence:
        notes = dedupe(
            [
                f"Computer vision confidence {analysis.room_confidence:.2f} "
                f"for {primary_room.lower()}.",
                *notes,
            ]
        )
    return notes


def finalize_plan(plan: DesignPlan, context: FinalizeContext) -> FinalPlan:
    scene = context.scene
    knowledge = context.knowledge
    template = context.template
    prompt = context.prompt

    if scene.style:
        style_name, style_summary = scene.style.name, scene.style.description
    else:
        style_name = plan.style_name or template.style_name
        style_summary = plan.style_summary or template.style_summary

    detected_rooms = scene.room_names or list(context.fallback_rooms)
    analysis = scene.room_analysis
    classifier_room = knowledge.normalize_room_label(analysis.room_type) if analysis else None
    if classifier_room and classifier_room not in {
        knowledge.normalize_room_label(room) for room in detected_rooms
    }:
        detected_rooms.insert(0, classifier_room)

    primary_room = determine_primary_room(scene, knowledge, fallback=detected_rooms)
    entry = knowledge.entry_for(primary_room)

    # Layout ideas
    layout_ideas = normalize_ideas(
        plan.layout_ideas, prompt=prompt, style_name=style_name, fallback=template.layout_ideas
    )
    layout_ideas = cover_scene_rooms(
        layout_ideas, scene.room_names, prompt=prompt, style_name=style_name
    )
    if entry is not None:
        # Detected rooms keep their idea ahead of the curated ones
        covered = len(dedupe(room.lower() for room in scene.room_names))
        layout_ideas = merge_curated_ideas(
            entry.layout_ideas, layout_ideas, keep=min(covered, MAX_LAYOUT_IDEAS)
        )
    if not layout_ideas:
        layout_ideas = list(template.layout_ideas[:MAX_LAYOUT_IDEAS])

    # Palette, decor, furniture
    palette = sanitize_palette(plan.color_palette, template.color_palette)
    decor_tips = dedupe(plan.decor_tips) or list(template.decor_tips)
    furniture = dedupe(plan.furniture_suggestions) or list(template.furniture_suggestions)
    decor_tips = dedupe([*decor_tips, *template.decor_tips])
    furniture = dedupe([*furniture, *template.furniture_suggestions])
    if entry is not None:
        palette = dedupe([*entry.palette, *palette])
        decor_tips = dedupe([*entry.decor_tips, *decor_tips])
        furniture = dedupe([*entry.furniture, *furniture])

    # Analysis
    lighting = list(scene.lighting)
    recommended_lighting = plan.photo_insights.recommended_lighting or (
        lighting[0] if lighting else None
    )
    if entry is not None and entry.lighting:
        recommended_lighting = recommended_lighting or entry.lighting
        lighting = dedupe([entry.lighting, *lighting])
    if analysis and analysis.has_window:
        lighting = dedupe([NATURAL_LIGHT, *lighting])
    if primary_room:
        detected_rooms = dedupe([primary_room, *detected_rooms])
    colors = dedupe(
        [*(swatch.hex for swatch in scene.colors), *(color.hex for color in context.intent.colors)]
    )

    # Observations
    observations = dedupe(
        [
            *plan.photo_insights.observations,
            *scene.observations,
            f"Vision model summary: {context.caption}" if context.caption else None,
        ]
    )
    if primary_room:
        observations = _knowledge_observations(entry, scene, primary_room, observations)
    template_info = context.template_info
    if template_info is not None:
        observations = dedupe([_template_note(template_info), *observations])

    return FinalPlan(
        generated_at=datetime.now(tz=UTC).isoformat(),
        prompt=prompt,
        source_image=context.source_image,
        style_name=style_name,
        style_summary=style_summary,
        color_palette=palette[:MAX_PALETTE],
        layout_ideas=layout_ideas,
        decor_tips=decor_tips[:MAX_LIST_ITEMS],
        furniture_suggestions=furniture[:MAX_LIST_ITEMS],
        photo_insights=FinalPhotoInsights(
            observations=observations,
            recommended_lighting=recommended_lighting,
            validation_notes=list(plan.photo_insights.validation_notes),
            caption=context.caption,
            detected_rooms=detected_rooms,
            detected_furniture=list(scene.furniture),
            detected_lighting=lighting,
            detected_colors=colors,
            room_analysis=analysis,
        ),
        analysis=PlanAnalysis(
            rooms=detected_rooms,
            furniture=list(scene.furniture),
            lighting=lighting,
            colors=colors,
            room_analysis=analysis,
        ),
        template_info=template_info,
    )
