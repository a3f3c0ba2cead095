"""Tests for plan finalization: merging curated knowledge and sanitising output."""

from aesthetic.models.contracts import (
    DesignPlan,
    LayoutIdea,
    PhotoInsights,
    RoomAnalysis,
    Scene,
    SceneRoom,
    TemplateInfo,
)
from aesthetic.synthesis.finalize import (
    FinalizeContext,
    _template_note,
    cover_scene_rooms,
    finalize_plan,
    normalize_ideas,
    sanitize_palette,
)
from aesthetic.synthesis.intent import extract_intent
from aesthetic.synthesis.scene import analyze_scene
from aesthetic.synthesis.template import build_template_plan
from aesthetic.utils.text import is_hex_color

FALLBACK_PALETTE = ["#111111", "#222222", "#333333"]


def _context(knowledge, scene: Scene, prompt: str = "", **kwargs) -> FinalizeContext:
    intent = extract_intent(prompt, knowledge)
    template, _ = build_template_plan(scene, intent, prompt, 0, knowledge, ["Living Room"])
    return FinalizeContext(
        scene=scene,
        intent=intent,
        template=template,
        knowledge=knowledge,
        prompt=prompt,
        fallback_rooms=("Living Room",),
        **kwargs,
    )


class TestSanitizePalette:
    def test_invalid_entries_dropped(self):
        palette = [" #abc ", "blue", "#12345", "#ABCDEF", "#abcdef12"]
        assert sanitize_palette(palette, FALLBACK_PALETTE) == ["#abc", "#ABCDEF", "#abcdef12"]

    def test_too_few_falls_back(self):
        assert sanitize_palette(["#FFFFFF", "red"], FALLBACK_PALETTE) == FALLBACK_PALETTE

    def test_capped_at_six(self):
        palette = [f"#00000{i}" for i in range(8)]
        assert len(sanitize_palette(palette, FALLBACK_PALETTE)) == 6


class TestNormalizeIdeas:
    def test_missing_room_borrows_from_fallback(self):
        fallback = [LayoutIdea(room="Kitchen", summary="x"), LayoutIdea(room="Bathroom", summary="y")]
        ideas = normalize_ideas(
            [LayoutIdea(room="", summary="a"), LayoutIdea(room=" ", summary="b")],
            prompt="",
            style_name="Modern",
            fallback=fallback,
        )
        assert [i.room for i in ideas] == ["Kitchen", "Bathroom"]

    def test_missing_summary_is_composed(self):
        ideas = normalize_ideas(
            [LayoutIdea(room="home office", summary="")],
            prompt="add shelves",
            style_name="Modern",
            fallback=[],
        )
        assert ideas[0].room == "Home Office"
        assert ideas[0].summary.startswith("Rework the home office to add shelves")

    def test_duplicates_removed_and_capped(self):
        ideas = [LayoutIdea(room="Den", summary=f"s{i % 4}") for i in range(8)]
        assert len(normalize_ideas(ideas, prompt="", style_name="", fallback=[])) == 3

    def test_empty_uses_fallback(self):
        fallback = [LayoutIdea(room="Kitchen", summary="x")]
        assert normalize_ideas([], prompt="", style_name="", fallback=fallback) == fallback


class TestCoverSceneRooms:
    def test_uncovered_room_gets_idea(self):
        ideas = cover_scene_rooms(
            [LayoutIdea(room="Kitchen", summary="x")],
            ["kitchen", "window nook"],
            prompt="",
            style_name="Modern",
        )
        assert [i.room for i in ideas] == ["Kitchen", "Window Nook"]

    def test_detected_rooms_move_ahead_of_the_cap(self):
        ideas = [LayoutIdea(room="Den", summary=f"Den {i}") for i in range(3)]
        ideas = cover_scene_rooms(ideas, ["Kitchen"], prompt="", style_name="Modern")
        assert [i.room for i in ideas] == ["Kitchen", "Den", "Den"]
        assert ideas[1].summary == "Den 0"

    def test_covered_room_keeps_plan_idea(self):
        ideas = [
            LayoutIdea(room="Den", summary="Den idea"),
            LayoutIdea(room="Kitchen", summary="Kitchen idea"),
        ]
        ideas = cover_scene_rooms(ideas, ["kitchen"], prompt="", style_name="Modern")
        assert [i.summary for i in ideas] == ["Kitchen idea", "Den idea"]


class TestTemplateNote:
    def test_reasons(self):
        info = TemplateInfo(template_name="Spa Bathroom Refresh", primary_room="Bathroom")
        assert _template_note(info.model_copy(update={"reason": "validation-fallback"})) == (
            "Plan generated from curated template (Spa Bathroom Refresh) because the AI plan "
            "did not align with detected room or furniture cues."
        )
        assert _template_note(info) == (
            "Plan generated from curated template (Spa Bathroom Refresh) because the scene "
            "looks like a bathroom."
        )


class TestFinalizePlan:
    def test_output_invariants(self, knowledge):
        scene = analyze_scene(None, "modern living room", None, None, knowledge)
        plan = DesignPlan(
            style_name="Ignored",
            color_palette=["not-a-color"],
            layout_ideas=[LayoutIdea(room=f"Room {i}", summary=f"Idea {i}") for i in range(5)],
            decor_tips=[f"Tip {i}" for i in range(9)],
            furniture_suggestions=[f"Piece {i}" for i in range(9)],
        )
        final = finalize_plan(plan, _context(knowledge, scene, "modern living room"))
        assert 3 <= len(final.color_palette) <= 6
        assert all(is_hex_color(c) for c in final.color_palette)
        assert 1 <= len(final.layout_ideas) <= 3
        assert len(final.decor_tips) <= 6
        assert len(final.furniture_suggestions) <= 6
        assert final.generated_at

    def test_scene_style_wins(self, knowledge):
        scene = analyze_scene(None, "modern living room", None, None, knowledge)
        final = finalize_plan(
            DesignPlan(style_name="Plan Style"), _context(knowledge, scene, "modern living room")
        )
        assert final.style_name == "Modern Minimalist"
        assert final.style.name == "Modern Minimalist"

    def test_plan_style_when_scene_has_none(self, knowledge):
        scene = analyze_scene(None, "living room refresh", None, None, knowledge)
        final = finalize_plan(
            DesignPlan(style_name="Plan Style", style_summary="From model"),
            _context(knowledge, scene, "living room refresh"),
        )
        assert final.style_name == "Plan Style"
        assert final.style_summary == "From model"

    def test_curated_knowledge_prepended(self, knowledge):
        scene = analyze_scene(None, "living room refresh", None, None, knowledge)
        entry = knowledge.entries["Living Room"]
        final = finalize_plan(DesignPlan(), _context(knowledge, scene, "living room refresh"))
        assert final.color_palette[:4] == list(entry.palette)
        assert final.decor_tips[0] == entry.decor_tips[0]
        assert final.furniture_suggestions[0] == entry.furniture[0]
        assert final.layout_ideas[0].room == "Living Room"
        assert final.layout_ideas[1:] == list(entry.layout_ideas)
        assert final.analysis.lighting[0] == entry.lighting
        assert final.analysis.rooms[0] == "Living Room"

    def test_detected_rooms_survive_curated_merge(self, knowledge):
        scene = Scene(
            rooms=[
                SceneRoom(name="Living Room", source="text"),
                SceneRoom(name="Window Nook", source="text"),
            ]
        )
        plan = DesignPlan(
            layout_ideas=[
                LayoutIdea(room="Living Room", summary="Model idea for living room."),
                LayoutIdea(room="Window Nook", summary="Model idea for the nook."),
            ]
        )
        final = finalize_plan(plan, _context(knowledge, scene, "living room with a big window"))
        assert [i.room for i in final.layout_ideas] == ["Living Room", "Window Nook", "Living Room"]
        assert final.layout_ideas[2] == knowledge.entries["Living Room"].layout_ideas[0]

    def test_classifier_window_notes(self, knowledge, bathroom_analysis):
        scene = analyze_scene(None, "", None, bathroom_analysis, knowledge)
        final = finalize_plan(DesignPlan(), _context(knowledge, scene))
        observations = final.photo_insights.observations
        assert observations[0] == "Computer vision confidence 0.95 for bathroom."
        assert "Window detection confidence 0.82; incorporate glare control and privacy options." in observations
        assert knowledge.entries["Bathroom"].window_treatments in observations
        assert "Natural light" in final.analysis.lighting
        assert final.analysis.room_analysis.room_type == "Bathroom"
        assert final.photo_insights.detected_rooms[0] == "Bathroom"

    def test_template_note_first(self, knowledge):
        scene = analyze_scene(None, "kitchen", None, None, knowledge)
        info = TemplateInfo(
            template_name="Streamlined Kitchen", primary_room="Kitchen", reason="model-unavailable"
        )
        final = finalize_plan(DesignPlan(), _context(knowledge, scene, "kitchen", template_info=info))
        assert final.photo_insights.observations[0] == (
            "Plan generated from curated template (Streamlined Kitchen) because the AI service "
            "is currently unavailable."
        )
        assert final.template_info == info

    def test_caption_and_colors(self, knowledge):
        scene = Scene(
            rooms=[SceneRoom(name="Kitchen", source="vision", score=0.9)],
            colors=[{"hex": "#FAFAFA"}],
        )
        final = finalize_plan(
            DesignPlan(photo_insights=PhotoInsights(observations=["From model."])),
            _context(knowledge, scene, "teal accents", caption="a white kitchen"),
        )
        assert final.analysis.colors == ["#FAFAFA", "#2A8C82"]
        assert "Vision model summary: a white kitchen" in final.photo_insights.observations
        assert "From model." in final.photo_insights.observations
        assert final.photo_insights.caption == "a white kitchen"

    def test_room_analysis_without_entry(self, knowledge):
        analysis = RoomAnalysis(room_type="Laundry Room", room_confidence=0.7)
        scene = analyze_scene(None, "", None, analysis, knowledge)
        final = finalize_plan(DesignPlan(), _context(knowledge, scene))
        assert "Room analysis suggests this is a laundry room." in final.photo_insights.observations
