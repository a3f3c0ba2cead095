"""GenerativePlanRequester: ask a text model for a plan and make it typed.

The model's JSON is untrusted. It is parsed leniently (fenced block, else the
outermost braces) and coerced field by field into a ``DesignPlan`` before
anything downstream reads it. Parse failures are not retried.
"""

from __future__ import annotations

import json
import re
from typing import Any, Protocol

import structlog

from aesthetic.errors import GenerativeModelFailure
from aesthetic.models.contracts import DesignPlan, LayoutIdea, ModelTextResponse, PhotoInsights, Scene

log = structlog.get_logger("aesthetic.generate")

PLAN_PARAMETERS: dict[str, Any] = {
    "temperature": 0.45,
    "top_p": 0.92,
    "max_new_tokens": 420,
    "return_full_text": False,
    "repetition_penalty": 1.05,
}

_FENCED_JSON = re.compile(r"```json([\s\S]*?)```", re.IGNORECASE)

_IDEA_ROOM_KEYS = ("room", "space", "zone", "area", "name", "title")
_IDEA_SUMMARY_KEYS = ("summary", "description", "text", "plan")


class TextGenerator(Protocol):
    provider: str

    async def generate(self, prompt: str, parameters: dict[str, Any]) -> ModelTextResponse: ...


def build_plan_prompt(
    caption: str | None,
    prompt: str | None,
    style_hint: str | None,
    scene: Scene,
) -> str:
    lines = [
        "You are an interior designer AI that returns strict JSON. The JSON schema is:",
        '{ "styleName": string, "styleSummary": string, "colorPalette": string[3-6],',
        '  "layoutIdeas": [{"room": string, "summary": string}],',
        '  "decorTips": string[3-6],',
        '  "furnitureSuggestions": string[3-6],',
        '  "photoInsights": { "observations": string[0-6], "recommendedLighting": string | null } }',
        "",
        "Rules:",
        "- Use double quotes for all JSON keys and string values.",
        "- No comments or trailing commas.",
        "- Ground recommendations in the detected rooms and furniture outlined below.",
        "",
        f"Photo caption: {caption or 'Not available'}",
        f"User prompt: {prompt or 'Not provided'}",
        f"Style hint: {style_hint or 'Use best judgement'}",
    ]
    if scene.rooms:
        lines.append(f"Detected rooms: {', '.join(scene.room_names)}")
    if scene.furniture:
        lines.append(f"Detected furniture: {', '.join(scene.furniture)}")
    lines.append("Return only JSON.")
    return "\n".join(lines)


def parse_json_from_text(text: str | None) -> Any:
    """JSON object embedded in model output, or ``None`` when there isn't one."""
    if not text:
        return None
    trimmed = text.strip()
    try:
        fenced = _FENCED_JSON.search(trimmed)
        if fenced:
            return json.loads(fenced.group(1))
        start = trimmed.find("{")
        end = trimmed.rfind("}")
        if start >= 0 and end > start:
            return json.loads(trimmed[start : end + 1])
    except json.JSONDecodeError as e:
        log.warning("plan_json_decode_failed", error=str(e), text=trimmed[:200])
    return None


def _string(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def _strings(value: Any) -> list[str]:
    """List of non-empty strings; dict entries contribute their ``text``/``summary``."""
    if not isinstance(value, list):
        return []
    result = []
    for item in value:
        if isinstance(item, dict):
            item = item.get("text") or item.get("summary") or item.get("name")
        text = _string(item)
        if text:
            result.append(text)
    return result


def _first(entry: dict[str, Any], keys: tuple[str, ...]) -> str:
    for key in keys:
        text = _string(entry.get(key))
        if text:
            return text
    return ""


def _layout_idea(entry: Any) -> LayoutIdea | None:
    if isinstance(entry, str):
        return LayoutIdea(summary=entry.strip()) if entry.strip() else None
    if not isinstance(entry, dict):
        return None
    summary = _first(entry, _IDEA_SUMMARY_KEYS)
    if not summary and isinstance(entry.get("steps"), list):
        summary = " ".join(_strings(entry["steps"]))
    return LayoutIdea(room=_first(entry, _IDEA_ROOM_KEYS), summary=summary)


def coerce_plan(data: Any) -> DesignPlan:
    """Typed plan from untrusted model JSON. Unknown or malformed fields are dropped."""
    if not isinstance(data, dict):
        raise GenerativeModelFailure("Design plan JSON was not an object.")

    style = data.get("style") if isinstance(data.get("style"), dict) else {}
    raw_ideas = data.get("layoutIdeas") if isinstance(data.get("layoutIdeas"), list) else []
    ideas = [idea for idea in (_layout_idea(entry) for entry in raw_ideas) if idea is not None]

    insights = data.get("photoInsights")
    if isinstance(insights, list):
        observations, lighting = _strings(insights), None
    elif isinstance(insights, dict):
        observations = _strings(insights.get("observations"))
        lighting = _string(insights.get("recommendedLighting")) or None
    else:
        observations, lighting = [], None

    return DesignPlan(
        style_name=_string(data.get("styleName")) or _string(style.get("name")),
        style_summary=_string(data.get("styleSummary")) or _string(style.get("description")),
        color_palette=_strings(data.get("colorPalette") or data.get("palette")),
        layout_ideas=ideas,
        decor_tips=_strings(data.get("decorTips")),
        furniture_suggestions=_strings(
            data.get("furnitureSuggestions") or data.get("furnitureMatches")
        ),
        photo_insights=PhotoInsights(observations=observations, recommended_lighting=lighting),
    )


class GenerativePlanRequester:
    def __init__(self, generator: TextGenerator) -> None:
        self._generator = generator

    @property
    def provider(self) -> str:
        return self._generator.provider

    async def request_plan(self, caption: str | None, prompt: str | None, scene: Scene) -> DesignPlan:
        style_hint = scene.style.name if scene.style else None
        text_prompt = build_plan_prompt(caption, prompt, style_hint, scene)

        response = await self._generator.generate(text_prompt, dict(PLAN_PARAMETERS))
        if response.kind == "empty" or not response.text:
            raise GenerativeModelFailure("Layout model returned no text.")

        parsed = parse_json_from_text(response.text)
        if parsed is None:
            raise GenerativeModelFailure("Unable to parse design JSON from model output.")

        plan = coerce_plan(parsed)
        log.info(
            "plan_generated",
            provider=response.provider,
            layout_ideas=len(plan.layout_ideas),
            furniture=len(plan.furniture_suggestions),
        )
        return plan
