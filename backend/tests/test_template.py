"""Tests for the deterministic template plan builder."""

import pytest

from aesthetic.models.contracts import Scene, SceneRoom
from aesthetic.synthesis.intent import extract_intent
from aesthetic.synthesis.scene import analyze_scene
from aesthetic.synthesis.template import build_template_plan, compose_layout_summary
from aesthetic.utils.text import rotate_list


def _scene(*rooms: str) -> Scene:
    return Scene(rooms=[SceneRoom(name=room, source="text") for room in rooms])


class TestRotateList:
    @pytest.mark.parametrize(
        "seed,expected",
        [(0, [1, 2, 3]), (1, [2, 3, 1]), (4, [2, 3, 1]), (-2, [3, 1, 2])],
    )
    def test_rotation(self, seed, expected):
        assert rotate_list([1, 2, 3], seed) == expected

    def test_empty(self):
        assert rotate_list([], 5) == []


class TestComposeLayoutSummary:
    def test_summary(self):
        assert compose_layout_summary("Home Office", "Add Storage", "Modern Workspace") == (
            "Rework the home office to add storage while reinforcing modern workspace lines, "
            "zoning, and lighting."
        )

    def test_default_request(self):
        assert "to refresh the layout while" in compose_layout_summary("Kitchen", None, "X")


class TestBuildTemplatePlan:
    def test_primary_room_selects_template(self, knowledge):
        plan, info = build_template_plan(_scene("Kitchen"), extract_intent("", knowledge), "", 0, knowledge)
        assert info.template_name == "Streamlined Kitchen"
        assert info.primary_room == "Kitchen"
        assert info.reason is None
        assert plan.style_name == "Contemporary Kitchen"
        assert plan.photo_insights.recommended_lighting == "Task lighting with warm ambient pendants"

    def test_fallback_rooms_used_when_scene_empty(self, knowledge):
        _, info = build_template_plan(
            Scene(), extract_intent("", knowledge), "", 0, knowledge, ["Bathroom", "Kitchen"]
        )
        assert info.template_name == "Spa Bathroom Refresh"

    def test_unknown_room_uses_default(self, knowledge):
        plan, info = build_template_plan(_scene("Window Nook"), extract_intent("", knowledge), "", 0, knowledge)
        assert info.template_name == "Versatile Interior Refresh"
        assert info.primary_room == "Window Nook"
        assert all(idea.room == "Flexible Space" for idea in plan.layout_ideas)

    def test_intent_placeholder_substituted(self, knowledge):
        plan, _ = build_template_plan(
            _scene("Attic"), extract_intent("", knowledge), "Host Board Games", 2, knowledge
        )
        assert plan.layout_ideas[0].summary.endswith("as you host board games.")

    def test_intent_placeholder_default_request(self, knowledge):
        plan, _ = build_template_plan(_scene("Attic"), extract_intent("", knowledge), "", 2, knowledge)
        assert plan.layout_ideas[0].summary.endswith("as you refresh the space.")

    def test_rotation_is_deterministic(self, knowledge):
        intent = extract_intent("", knowledge)
        first, _ = build_template_plan(_scene("Living Room"), intent, "", 7, knowledge)
        again, _ = build_template_plan(_scene("Living Room"), intent, "", 7, knowledge)
        other, _ = build_template_plan(_scene("Living Room"), intent, "", 8, knowledge)
        assert first == again
        assert first.layout_ideas != other.layout_ideas

    def test_rotation_offsets(self, knowledge):
        template = knowledge.templates["Living Room"]
        plan, _ = build_template_plan(_scene("Living Room"), extract_intent("", knowledge), "", 1, knowledge)
        assert plan.layout_ideas[0].summary == template.layout_ideas[1].summary
        assert plan.decor_tips[0] == template.decor_tips[2]
        assert plan.furniture_suggestions[0] == template.furniture_suggestions[3]

    def test_intent_enriches_plan(self, knowledge):
        prompt = "cozy reading corner with navy accents"
        scene = analyze_scene(None, prompt, None, None, knowledge)
        plan, _ = build_template_plan(
            scene, extract_intent(prompt, knowledge), prompt, 0, knowledge, ["Living Room"]
        )
        assert "Layer chunky throws, textured pillows, and a high-pile rug." in plan.decor_tips
        assert "Deep-seat sectional sofa" in plan.furniture_suggestions
        assert plan.color_palette[0] == "#1F3A60"
        assert "User emphasises a cozy atmosphere." in plan.photo_insights.observations

    def test_lists_capped(self, knowledge):
        prompt = "cozy minimal storage desk lighting plants pets kids hosting modern"
        plan, _ = build_template_plan(
            _scene("Living Room"), extract_intent(prompt, knowledge), prompt, 0, knowledge
        )
        assert len(plan.layout_ideas) <= 3
        assert len(plan.decor_tips) == 6
        assert len(plan.furniture_suggestions) == 6
        assert 3 <= len(plan.color_palette) <= 6

    def test_issues_recorded(self, knowledge):
        plan, info = build_template_plan(
            _scene("Kitchen"), extract_intent("", knowledge), "", 0, knowledge, issues=["bad"]
        )
        assert info.issues == ["bad"]
        assert plan.photo_insights.validation_notes == ["bad"]
