"""Tests for the generative plan request: prompt, lenient JSON parsing, coercion."""

import pytest
from conftest import FakeGenerator

from aesthetic.errors import GenerativeModelFailure
from aesthetic.models.contracts import Scene, SceneRoom, SceneStyle
from aesthetic.synthesis.generate import (
    PLAN_PARAMETERS,
    GenerativePlanRequester,
    build_plan_prompt,
    coerce_plan,
    parse_json_from_text,
)

SCENE = Scene(
    rooms=[SceneRoom(name="Living Room", source="vision"), SceneRoom(name="Kitchen", source="text")],
    furniture=["Sofa", "Coffee Table"],
    style=SceneStyle(name="Modern Minimalist", description="Clean lines"),
)

PLAN_JSON = {
    "styleName": "Warm Modern",
    "styleSummary": "Soft minimalism.",
    "colorPalette": ["#FFFFFF", "#222222", "#C86A3C"],
    "layoutIdeas": [
        {"room": "Living Room", "summary": "Float the sofa."},
        {"space": "Kitchen", "steps": ["Clear the counters.", "Add stools."]},
        "Open up the entry.",
    ],
    "decorTips": ["Add a rug.", {"text": "Hang art."}, 3],
    "furnitureSuggestions": ["Sofa", "Coffee table"],
    "photoInsights": {"observations": ["Bright room."], "recommendedLighting": "Warm LEDs"},
}


class TestBuildPlanPrompt:
    def test_includes_scene_cues(self):
        prompt = build_plan_prompt("a sunny room", "make it warm", "Modern Minimalist", SCENE)
        assert "Photo caption: a sunny room" in prompt
        assert "User prompt: make it warm" in prompt
        assert "Style hint: Modern Minimalist" in prompt
        assert "Detected rooms: Living Room, Kitchen" in prompt
        assert "Detected furniture: Sofa, Coffee Table" in prompt
        assert prompt.endswith("Return only JSON.")

    def test_placeholders(self):
        prompt = build_plan_prompt(None, "", None, Scene())
        assert "Photo caption: Not available" in prompt
        assert "User prompt: Not provided" in prompt
        assert "Style hint: Use best judgement" in prompt
        assert "Detected rooms" not in prompt


class TestParseJsonFromText:
    def test_fenced_block(self):
        text = 'Here you go:\n```json\n{"styleName": "A"}\n```\nEnjoy!'
        assert parse_json_from_text(text) == {"styleName": "A"}

    def test_outer_braces(self):
        assert parse_json_from_text('Sure! {"a": {"b": 1}} hope that helps') == {"a": {"b": 1}}

    @pytest.mark.parametrize("text", [None, "", "no json here", "{broken: json}", "} backwards {"])
    def test_unparseable(self, text):
        assert parse_json_from_text(text) is None


class TestCoercePlan:
    def test_full_plan(self):
        plan = coerce_plan(PLAN_JSON)
        assert plan.style_name == "Warm Modern"
        assert [i.room for i in plan.layout_ideas] == ["Living Room", "Kitchen", ""]
        assert plan.layout_ideas[1].summary == "Clear the counters. Add stools."
        assert plan.layout_ideas[2].summary == "Open up the entry."
        assert plan.decor_tips == ["Add a rug.", "Hang art."]
        assert plan.photo_insights.recommended_lighting == "Warm LEDs"

    def test_alternative_keys(self):
        plan = coerce_plan(
            {
                "style": {"name": "Boho", "description": "Layered"},
                "palette": ["#000000"],
                "furnitureMatches": [{"name": "Rattan chair"}],
                "photoInsights": ["Lots of plants."],
            }
        )
        assert plan.style_name == "Boho"
        assert plan.style_summary == "Layered"
        assert plan.color_palette == ["#000000"]
        assert plan.furniture_suggestions == ["Rattan chair"]
        assert plan.photo_insights.observations == ["Lots of plants."]

    def test_wrong_types_dropped(self):
        plan = coerce_plan({"styleName": 5, "layoutIdeas": "nope", "decorTips": "one"})
        assert plan.style_name == ""
        assert plan.layout_ideas == []
        assert plan.decor_tips == []

    def test_non_object_raises(self):
        with pytest.raises(GenerativeModelFailure):
            coerce_plan(["not", "a", "plan"])


class TestGenerativePlanRequester:
    @pytest.mark.asyncio
    async def test_request_plan(self):
        generator = FakeGenerator(PLAN_JSON)
        requester = GenerativePlanRequester(generator)
        plan = await requester.request_plan("caption", "prompt", SCENE)

        assert requester.provider == "fake"
        assert plan.style_name == "Warm Modern"
        assert "Style hint: Modern Minimalist" in generator.prompts[0]
        assert generator.parameters[0] == PLAN_PARAMETERS
        assert generator.parameters[0] is not PLAN_PARAMETERS

    @pytest.mark.asyncio
    async def test_empty_text_raises(self):
        requester = GenerativePlanRequester(FakeGenerator("   "))
        with pytest.raises(GenerativeModelFailure, match="returned no text"):
            await requester.request_plan(None, "", SCENE)

    @pytest.mark.asyncio
    async def test_unparseable_raises(self):
        requester = GenerativePlanRequester(FakeGenerator("I cannot help with that."))
        with pytest.raises(GenerativeModelFailure, match="Unable to parse design JSON"):
            await requester.request_plan(None, "", SCENE)

    @pytest.mark.asyncio
    async def test_generator_failure_propagates(self):
        requester = GenerativePlanRequester(FakeGenerator(GenerativeModelFailure("quota")))
        with pytest.raises(GenerativeModelFailure, match="quota"):
            await requester.request_plan(None, "", SCENE)
