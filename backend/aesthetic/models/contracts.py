"""Aesthetic contract models.

Everything the engine passes between stages, returns to callers, or accepts
over HTTP is defined here. Wire models serialize with camelCase aliases so
the mobile client keeps its existing field names; Python code uses
snake_case throughout.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FrozenCamelModel(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


# === Knowledge Tables ===


class LayoutIdea(CamelModel):
    room: str = ""
    summary: str = ""


class StylePreset(FrozenCamelModel):
    """Keyword-selected style family used when the scene names a style."""

    id: str
    name: str
    description: str
    keywords: tuple[str, ...] = ()
    palette: tuple[str, ...] = ()
    furniture: tuple[str, ...] = ()
    decor_tips: tuple[str, ...] = ()


class RoomKnowledgeEntry(FrozenCamelModel):
    """Curated reference data for one canonical room."""

    palette: tuple[str, ...] = Field(min_length=3, max_length=6)
    layout_ideas: tuple[LayoutIdea, ...] = ()
    decor_tips: tuple[str, ...] = ()
    furniture: tuple[str, ...] = ()
    lighting: str = ""
    window_treatments: str = ""
    observations: tuple[str, ...] = ()


class RoomTemplate(FrozenCamelModel):
    """Complete fallback plan for one canonical room (plus ``Default``)."""

    template_name: str
    style_name: str
    style_summary: str
    color_palette: tuple[str, ...] = Field(min_length=3, max_length=6)
    layout_ideas: tuple[LayoutIdea, ...] = Field(min_length=1)
    decor_tips: tuple[str, ...] = ()
    furniture_suggestions: tuple[str, ...] = ()
    recommended_lighting: str | None = None
    observations: tuple[str, ...] = ()


class FeatureRule(FrozenCamelModel):
    """Brief feature: any keyword hit contributes the four hints."""

    id: str
    keywords: tuple[str, ...]
    layout_hint: str
    decor_tip: str
    furniture_hint: str
    observation: str


class ColorKeyword(FrozenCamelModel):
    name: str
    hex: str
    keywords: tuple[str, ...]


class RoomHint(FrozenCamelModel):
    name: str
    keywords: tuple[str, ...]


# === Scene & Intent ===


class IntentColor(CamelModel):
    name: str
    hex: str


class Intent(CamelModel):
    text: str = ""
    features: list[FeatureRule] = []
    colors: list[IntentColor] = []
    materials: list[str] = []
    keywords: list[str] = []


class WindowBox(CamelModel):
    x: float
    y: float
    w: float
    h: float


class RoomAnalysis(CamelModel):
    """Room classifier verdict. A missing verdict is ``None``, never zero confidence."""

    room_type: str | None = None
    raw_room_type: str | None = None
    room_confidence: float = Field(ge=0, le=1, default=0.0)
    has_window: bool = False
    window_confidence: float = Field(ge=0, le=1, default=0.0)
    window_boxes: list[WindowBox] = []


class ColorSwatch(CamelModel):
    hex: str
    score: float = 0.0
    pixel_fraction: float | None = None


class SceneRoom(CamelModel):
    name: str
    source: Literal["classifier", "vision", "text"]
    score: float | None = None


class SceneStyle(CamelModel):
    name: str
    description: str


class VisionLabel(CamelModel):
    description: str
    score: float = 0.0


class VisionObject(CamelModel):
    name: str
    score: float = 0.0


class VisionAnnotation(CamelModel):
    """Vision annotator output after interpretation against the keyword tables."""

    labels: list[VisionLabel] = []
    objects: list[VisionObject] = []
    rooms: list[SceneRoom] = []
    furniture: list[str] = []
    lighting: list[str] = []
    colors: list[ColorSwatch] = []
    is_interior: bool = False
    observations: list[str] = []
    description: str = ""
    mime_type: str | None = None


class Scene(FrozenCamelModel):
    """Fused understanding of one photo + brief. Rebuilt, never mutated."""

    combined_text: str = ""
    rooms: list[SceneRoom] = []
    style: SceneStyle | None = None
    is_interior: bool = False
    observations: list[str] = []
    furniture: list[str] = []
    lighting: list[str] = []
    colors: list[ColorSwatch] = []
    room_analysis: RoomAnalysis | None = None

    @property
    def room_names(self) -> list[str]:
        return [room.name for room in self.rooms]


# === Plans ===


class PhotoInsights(CamelModel):
    observations: list[str] = []
    recommended_lighting: str | None = None
    validation_notes: list[str] = []


class DesignPlan(CamelModel):
    """Candidate plan. Untrusted until validated when it came from a model."""

    style_name: str = ""
    style_summary: str = ""
    color_palette: list[str] = []
    layout_ideas: list[LayoutIdea] = []
    decor_tips: list[str] = []
    furniture_suggestions: list[str] = []
    photo_insights: PhotoInsights = Field(default_factory=PhotoInsights)


class ValidationResult(CamelModel):
    valid: bool
    issues: list[str] = []
    matched_rooms: int = 0
    matched_furniture: int = 0
    required_room_matches: int = 0
    required_furniture_matches: int = 0


TemplateReason = Literal["model-unavailable", "validation-fallback", "error-fallback"]


class TemplateInfo(CamelModel):
    template_name: str
    primary_room: str
    issues: list[str] = []
    reason: TemplateReason | None = None


class PlanAnalysis(CamelModel):
    rooms: list[str] = []
    furniture: list[str] = []
    lighting: list[str] = []
    colors: list[str] = []
    room_analysis: RoomAnalysis | None = None


class FinalPhotoInsights(PhotoInsights):
    caption: str | None = None
    detected_rooms: list[str] = []
    detected_furniture: list[str] = []
    detected_lighting: list[str] = []
    detected_colors: list[str] = []
    room_analysis: RoomAnalysis | None = None


class FinalPlan(DesignPlan):
    generated_at: str
    prompt: str = ""
    source_image: str | None = None
    photo_insights: FinalPhotoInsights = Field(default_factory=FinalPhotoInsights)
    analysis: PlanAnalysis = Field(default_factory=PlanAnalysis)
    template_info: TemplateInfo | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def style(self) -> SceneStyle:
        return SceneStyle(name=self.style_name, description=self.style_summary)


# === Provider Plumbing ===


class ImagePayload(CamelModel):
    base64: str
    mime_type: str = "image/jpeg"
    source_uri: str | None = None

    @property
    def data_uri(self) -> str:
        return f"data:{self.mime_type};base64,{self.base64}"


class ModelTextResponse(CamelModel):
    """Canonical text output of any model provider."""

    kind: Literal["text", "empty"]
    provider: str
    text: str | None = None

    @classmethod
    def of(cls, provider: str, text: str | None) -> ModelTextResponse:
        if text and text.strip():
            return cls(kind="text", provider=provider, text=text)
        return cls(kind="empty", provider=provider)


# === API Request/Response Models ===


class SuggestionRequest(CamelModel):
    prompt: str = ""
    image_uri: str | None = None
    image_base64: str | None = None
    mime_type: str | None = None
    request_id: int | None = None
    deadline_seconds: float | None = Field(default=None, gt=0, le=300)


class RoomClassifierRequest(CamelModel):
    url: str | None = None
    base64: str | None = None
    mime_type: str | None = None


class RoomClassifierVerdict(CamelModel):
    """Wire body of a successful ``POST /api/analyze-room``."""

    room_type: str | None = None
    room_confidence: float = 0.0
    has_window: bool = False
    window_confidence: float = 0.0
    window_boxes: list[WindowBox] = []


class ErrorResponse(BaseModel):
    error: str
    message: str
    retryable: bool
    detail: str | None = None
