"""RoomKnowledgeBase: the read-only reference tables every stage consults.

Built once per process by ``default_knowledge_base()`` and passed into the
engine. Tests build smaller instances with ``build_knowledge_base(...)``.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType

from aesthetic.knowledge import keywords, rooms, styles
from aesthetic.models.contracts import (
    ColorKeyword,
    FeatureRule,
    RoomHint,
    RoomKnowledgeEntry,
    RoomTemplate,
    StylePreset,
)
from aesthetic.utils.text import title_case

_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class RoomKnowledgeBase:
    entries: Mapping[str, RoomKnowledgeEntry]
    templates: Mapping[str, RoomTemplate]
    synonyms: Mapping[str, str]
    styles: tuple[StylePreset, ...] = ()
    features: tuple[FeatureRule, ...] = ()
    colors: tuple[ColorKeyword, ...] = ()
    materials: tuple[tuple[tuple[str, ...], str], ...] = ()
    general_keywords: tuple[tuple[tuple[str, ...], str], ...] = ()
    scene_room_hints: tuple[RoomHint, ...] = ()
    prompt_room_hints: tuple[RoomHint, ...] = ()
    priority: tuple[str, ...] = rooms.ROOM_PRIORITY_ORDER
    label_keywords: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    object_rooms: Mapping[str, str] = field(default_factory=dict)
    lighting_hints: Mapping[str, str] = field(default_factory=dict)
    furniture_names: Mapping[str, str] = field(default_factory=dict)
    interior_cues: tuple[str, ...] = keywords.INTERIOR_CUES
    exterior_cues: tuple[str, ...] = keywords.EXTERIOR_CUES

    def __post_init__(self) -> None:
        # Frozen dataclass: swap plain dicts for read-only views.
        for name in (
            "entries",
            "templates",
            "synonyms",
            "label_keywords",
            "object_rooms",
            "lighting_hints",
            "furniture_names",
        ):
            value = getattr(self, name)
            if not isinstance(value, MappingProxyType):
                object.__setattr__(self, name, MappingProxyType(dict(value)))
        if rooms.DEFAULT_TEMPLATE not in self.templates:
            raise ValueError(f"knowledge base needs a '{rooms.DEFAULT_TEMPLATE}' template")

    def normalize_room_label(self, value: object) -> str | None:
        """Canonical room name for a free-text label.

        Synonym lookup on the whitespace-collapsed label, then on the label
        with all spaces removed; otherwise the label title-cased.
        """
        if not value:
            return None
        raw = str(value).lower().strip()
        if not raw:
            return None
        collapsed = _WHITESPACE.sub(" ", raw)
        slug = collapsed.replace(" ", "")
        mapped = self.synonyms.get(collapsed) or self.synonyms.get(slug)
        return mapped or title_case(collapsed)

    def entry_for(self, room: str | None) -> RoomKnowledgeEntry | None:
        if not room:
            return None
        return self.entries.get(room)

    def template_for(self, room: str | None) -> RoomTemplate:
        if room and room in self.templates:
            return self.templates[room]
        return self.templates[rooms.DEFAULT_TEMPLATE]

    def select_style(self, text: str) -> StylePreset | None:
        """First preset with a keyword in ``text``; ``None`` when nothing matches."""
        lowered = (text or "").lower()
        if not lowered:
            return None
        for preset in self.styles:
            if any(keyword in lowered for keyword in preset.keywords):
                return preset
        return None


def build_knowledge_base(**overrides: object) -> RoomKnowledgeBase:
    """Knowledge base from the bundled tables, with any field replaced."""
    tables: dict[str, object] = {
        "entries": rooms.ROOM_KNOWLEDGE,
        "templates": rooms.ROOM_TEMPLATES,
        "synonyms": rooms.ROOM_SYNONYMS,
        "styles": styles.STYLE_PRESETS,
        "features": keywords.FEATURE_RULES,
        "colors": keywords.COLOR_KEYWORDS,
        "materials": keywords.MATERIAL_RULES,
        "general_keywords": keywords.GENERAL_KEYWORD_RULES,
        "scene_room_hints": keywords.SCENE_ROOM_HINTS,
        "prompt_room_hints": keywords.PROMPT_ROOM_HINTS,
        "priority": rooms.ROOM_PRIORITY_ORDER,
        "label_keywords": keywords.ROOM_LABEL_KEYWORDS,
        "object_rooms": keywords.OBJECT_ROOM_HINTS,
        "lighting_hints": keywords.LIGHTING_LABEL_HINTS,
        "furniture_names": keywords.VISION_FURNITURE_NAMES,
    }
    tables.update(overrides)
    return RoomKnowledgeBase(**tables)  # type: ignore[arg-type]


@lru_cache(maxsize=1)
def default_knowledge_base() -> RoomKnowledgeBase:
    return build_knowledge_base()
