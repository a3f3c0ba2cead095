"""SceneAnalyzer: fuse vision output, caption, prompt and classifier verdict.

Every function here returns a new ``Scene``; nothing is mutated in place, so
the orchestrator can rebuild the scene when the caption arrives without
affecting anything that already holds the earlier one.
"""

from __future__ import annotations

from collections.abc import Sequence

import structlog

from aesthetic.knowledge.base import RoomKnowledgeBase
from aesthetic.knowledge.keywords import PROMPT_GAMING_CUES, SCENE_GAMING_CUES
from aesthetic.models.contracts import RoomAnalysis, Scene, SceneRoom, SceneStyle, VisionAnnotation
from aesthetic.utils.text import contains_any, dedupe

log = structlog.get_logger("aesthetic.scene")

WINDOW_NOOK = "Window Nook"
GAMING_STUDIO = "Gaming Studio"
NATURAL_LIGHT = "Natural light"
DEFAULT_ROOMS = ("Living Room", "Primary Bedroom")
MAX_PROMPT_ROOMS = 3

WINDOW_OBSERVATION = (
    "Image emphasises a window; including treatment and seating recommendations around it."
)
GAMING_OBSERVATION = (
    "Scene highlights a gaming workstation; recommendations focus on ergonomics, lighting, "
    "and tech-friendly storage."
)
NOT_INTERIOR_OBSERVATION = (
    "Photo might not clearly show an interior space, so suggestions lean on your prompt."
)
EXTERIOR_OBSERVATION = (
    "Scene appears exterior-focused; provide a wider interior view for more precise "
    "recommendations."
)
CLASSIFIER_WINDOW_OBSERVATION = (
    "Detected a window; layer treatments to manage natural light and privacy."
)


def _text_rooms(lowered: str, knowledge: RoomKnowledgeBase) -> list[str]:
    return [hint.name for hint in knowledge.scene_room_hints if contains_any(lowered, hint.keywords)]


def analyze_scene(
    caption: str | None,
    prompt: str | None,
    vision: VisionAnnotation | None,
    room_analysis: RoomAnalysis | None,
    knowledge: RoomKnowledgeBase,
) -> Scene:
    """Build the scene for one request from whatever signals are available."""
    parts = [
        (vision.description if vision else "").strip(),
        (caption or "").strip(),
        (prompt or "").strip(),
    ]
    combined = " ".join(part for part in parts if part)
    colors = list(vision.colors) if vision else []

    if not combined:
        return merge_room_analysis(Scene(colors=colors), room_analysis, knowledge)

    lowered = combined.lower()

    rooms: list[SceneRoom] = []
    seen: set[str] = set()

    def add(name: str, source: str, score: float | None = None) -> None:
        if name not in seen:
            seen.add(name)
            rooms.append(SceneRoom(name=name, source=source, score=score))

    for room in vision.rooms if vision else []:
        add(room.name, "vision", room.score)
    for name in _text_rooms(lowered, knowledge):
        add(name, "text")

    references_window = "window" in lowered
    references_gaming = contains_any(lowered, SCENE_GAMING_CUES)
    if references_window:
        add(WINDOW_NOOK, "text")
    if references_gaming:
        add(GAMING_STUDIO, "text")

    has_interior_cue = contains_any(lowered, knowledge.interior_cues) or bool(
        vision and vision.is_interior
    )
    has_exterior_cue = contains_any(lowered, knowledge.exterior_cues)

    observations = list(vision.observations) if vision else []
    if references_window:
        observations.append(WINDOW_OBSERVATION)
    if references_gaming:
        observations.append(GAMING_OBSERVATION)
    if not has_interior_cue:
        observations.append(NOT_INTERIOR_OBSERVATION)
        if has_exterior_cue:
            observations.append(EXTERIOR_OBSERVATION)

    furniture = list(vision.furniture) if vision else []
    if references_gaming:
        furniture += ["Desk", "Monitor"]

    lighting = list(vision.lighting) if vision else []
    if references_window:
        lighting.append(NATURAL_LIGHT)

    preset = knowledge.select_style(combined)
    style = SceneStyle(name=preset.name, description=preset.description) if preset else None

    scene = Scene(
        combined_text=combined,
        rooms=rooms,
        style=style,
        is_interior=has_interior_cue,
        observations=dedupe(observations),
        furniture=dedupe(furniture),
        lighting=dedupe(lighting),
        colors=colors,
    )
    return merge_room_analysis(scene, room_analysis, knowledge)


def merge_room_analysis(
    scene: Scene,
    analysis: RoomAnalysis | None,
    knowledge: RoomKnowledgeBase,
) -> Scene:
    """Put the classifier's verdict ahead of every other room signal."""
    if analysis is None:
        return scene

    rooms = list(scene.rooms)
    observations = list(scene.observations)
    lighting = list(scene.lighting)

    room = knowledge.normalize_room_label(analysis.room_type)
    if room:
        existing = next(
            (item for item in rooms if knowledge.normalize_room_label(item.name) == room), None
        )
        if existing is not None:
            rooms.remove(existing)
        rooms.insert(
            0,
            SceneRoom(
                name=room,
                source="classifier",
                score=analysis.room_confidence or (existing.score if existing else None),
            ),
        )
        observations.insert(0, f"Room classifier identified this as a {room.lower()}.")

    if analysis.has_window:
        observations.insert(0, CLASSIFIER_WINDOW_OBSERVATION)
        lighting.insert(0, NATURAL_LIGHT)

    merged_analysis = analysis.model_copy(
        update={
            "room_type": room or analysis.room_type,
            "raw_room_type": analysis.raw_room_type or analysis.room_type,
        }
    )
    return scene.model_copy(
        update={
            "rooms": rooms,
            "observations": dedupe(observations),
            "lighting": dedupe(lighting),
            "room_analysis": merged_analysis,
        }
    )


def determine_primary_room(
    scene: Scene,
    knowledge: RoomKnowledgeBase,
    fallback: Sequence[str] = (),
) -> str | None:
    """Pick the room a plan is built around.

    Classifier verdict, then the strongest vision room, then text rooms in
    priority order. ``fallback`` is consulted only when the scene has no rooms.
    """
    if scene.room_analysis and scene.room_analysis.room_type:
        room = knowledge.normalize_room_label(scene.room_analysis.room_type)
        if room:
            return room

    for room in scene.rooms:
        if room.source == "vision":
            return knowledge.normalize_room_label(room.name)

    names = [knowledge.normalize_room_label(room.name) for room in scene.rooms] or [
        knowledge.normalize_room_label(name) for name in fallback
    ]
    candidates = [name for name in names if name]
    for room in knowledge.priority:
        if room in candidates:
            return room
    return candidates[0] if candidates else None


def detect_prompt_rooms(prompt: str | None, knowledge: RoomKnowledgeBase) -> list[str]:
    """Rooms the brief alone points at, padded to at least two."""
    lowered = (prompt or "").lower()
    found = [hint.name for hint in knowledge.prompt_room_hints if contains_any(lowered, hint.keywords)]

    if contains_any(lowered, PROMPT_GAMING_CUES):
        found += [GAMING_STUDIO, "Home Office"]
    elif contains_any(lowered, ("desk", "monitor")):
        found.append("Home Office")

    if not found:
        return list(DEFAULT_ROOMS)
    if len(found) == 1:
        found.append("Home Office" if found[0] == "Living Room" else "Living Room")
    return dedupe(found)[:MAX_PROMPT_ROOMS]


def fallback_rooms(scene: Scene, prompt: str | None, knowledge: RoomKnowledgeBase) -> list[str]:
    """Rooms a plan should cover: the scene's, else the brief's, else the defaults."""
    if scene.rooms:
        return scene.room_names
    rooms = detect_prompt_rooms(prompt, knowledge)
    log.debug("scene_rooms_from_prompt", rooms=rooms)
    return rooms
