"""IntentExtractor: read a free-text design brief into structured intent.

Pure functions of the prompt. No I/O, never raises.
"""

from __future__ import annotations

from collections.abc import Sequence

from aesthetic.knowledge.base import RoomKnowledgeBase
from aesthetic.models.contracts import Intent, IntentColor, SceneStyle, StylePreset
from aesthetic.utils.text import contains_any, dedupe, format_list

MAX_OBSERVATIONS = 5


def extract_intent(text: str | None, knowledge: RoomKnowledgeBase) -> Intent:
    """Features, colors, materials and general keywords requested in ``text``."""
    lowered = (text or "").lower()
    if not lowered.strip():
        return Intent()

    features = [rule for rule in knowledge.features if contains_any(lowered, rule.keywords)]

    colors: list[IntentColor] = []
    seen_colors: set[str] = set()
    for entry in knowledge.colors:
        if entry.name not in seen_colors and contains_any(lowered, entry.keywords):
            seen_colors.add(entry.name)
            colors.append(IntentColor(name=entry.name, hex=entry.hex))

    materials = [label for cues, label in knowledge.materials if contains_any(lowered, cues)]
    general = [label for cues, label in knowledge.general_keywords if contains_any(lowered, cues)]

    return Intent(
        text=lowered,
        features=features,
        colors=colors,
        materials=dedupe(materials),
        keywords=dedupe(general),
    )


def derive_palette(intent: Intent, base: Sequence[str]) -> list[str]:
    """Requested hues first, then the base palette, at the longer of the two lengths."""
    if not intent.colors:
        return list(base)
    requested = dedupe(color.hex for color in intent.colors)
    combined = dedupe([*requested, *base])
    return combined[: max(len(base), len(requested)) or 3]


def build_observations(
    prompt: str | None,
    style: SceneStyle | StylePreset | None,
    intent: Intent,
) -> list[str]:
    """Up to five notes that restate the brief back to the client."""
    lowered = (prompt or "").lower()
    notes: list[str] = []
    if contains_any(lowered, ("light", "bright")):
        notes.append("Boost natural light with reflective finishes and layered lighting levels.")
    if contains_any(lowered, ("storage", "clutter")):
        notes.append("Integrate concealed storage to keep the footprint streamlined.")
    if contains_any(lowered, ("cozy", "cosy", "warm")):
        notes.append("Use textured textiles and warm accents to soften the envelope.")
    if contains_any(lowered, ("work", "office", "desk")):
        notes.append("Dedicate a focused workstation with ergonomic lighting and cable management.")
    if contains_any(lowered, ("gaming", "rgb", "monitor")):
        notes.append(
            "Organize the gaming rig with cable trays and add bias lighting behind displays "
            "to reduce eye strain."
        )

    notes.extend(feature.observation for feature in intent.features)
    if intent.colors:
        names = dedupe(color.name for color in intent.colors)
        notes.append(f"Incorporate requested hues: {format_list(names)}.")
    if intent.materials:
        notes.append(f"Feature materials such as {format_list(intent.materials)}.")
    if "sustainable finishes" in intent.keywords:
        notes.append("Select low-VOC paints and eco-conscious materials.")

    if not notes:
        label = style.name.lower() if style else "the selected"
        notes.append(f"Layer {label} accents to anchor the room identity.")
    return dedupe(notes)[:MAX_OBSERVATIONS]
