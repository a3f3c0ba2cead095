"""Tests for reading a design brief into structured intent."""

from aesthetic.models.contracts import Intent, IntentColor, SceneStyle
from aesthetic.synthesis.intent import build_observations, derive_palette, extract_intent


class TestExtractIntent:
    def test_empty_prompt_is_empty_intent(self, knowledge):
        intent = extract_intent("   ", knowledge)
        assert intent == Intent()

    def test_none_prompt(self, knowledge):
        assert extract_intent(None, knowledge) == Intent()

    def test_features_colors_materials_keywords(self, knowledge):
        intent = extract_intent(
            "A cozy small studio with navy accents, oak shelving and lots of plants", knowledge
        )
        assert [f.id for f in intent.features] == ["storage", "cozy", "plants"]
        assert intent.colors == [IntentColor(name="navy", hex="#1F3A60")]
        assert intent.materials == ["warm wood"]
        assert intent.keywords == ["space-efficient solutions"]
        assert intent.text.startswith("a cozy small studio")

    def test_color_listed_once_even_with_two_cues(self, knowledge):
        intent = extract_intent("sage and sage green walls", knowledge)
        assert [c.name for c in intent.colors] == ["sage"]

    def test_gold_is_both_color_and_material(self, knowledge):
        intent = extract_intent("gold hardware", knowledge)
        assert [c.name for c in intent.colors] == ["gold"]
        assert intent.materials == ["metallic accents"]


class TestDerivePalette:
    def test_no_colors_keeps_base(self):
        assert derive_palette(Intent(), ["#111111", "#222222", "#333333"]) == [
            "#111111",
            "#222222",
            "#333333",
        ]

    def test_requested_hues_lead(self):
        intent = Intent(colors=[IntentColor(name="teal", hex="#2A8C82")])
        palette = derive_palette(intent, ["#111111", "#222222", "#333333", "#444444"])
        assert palette == ["#2A8C82", "#111111", "#222222", "#333333"]

    def test_length_is_max_of_base_and_requested(self):
        intent = Intent(
            colors=[
                IntentColor(name="a", hex="#AAAAAA"),
                IntentColor(name="b", hex="#BBBBBB"),
                IntentColor(name="c", hex="#CCCCCC"),
            ]
        )
        assert len(derive_palette(intent, ["#111111", "#222222"])) == 3


class TestBuildObservations:
    def test_prompt_cues(self, knowledge):
        prompt = "bright cozy office with storage"
        notes = build_observations(prompt, None, extract_intent(prompt, knowledge))
        assert notes[0].startswith("Boost natural light")
        assert len(notes) == 5

    def test_requested_hues_note(self, knowledge):
        intent = extract_intent("navy and teal", knowledge)
        notes = build_observations("navy and teal", None, intent)
        assert "Incorporate requested hues: navy and teal." in notes

    def test_sustainable_note(self, knowledge):
        intent = extract_intent("eco friendly", knowledge)
        notes = build_observations("eco friendly", None, intent)
        assert "Select low-VOC paints and eco-conscious materials." in notes

    def test_style_fallback_note(self):
        style = SceneStyle(name="Coastal Calm", description="")
        assert build_observations("", style, Intent()) == [
            "Layer coastal calm accents to anchor the room identity."
        ]

    def test_no_style_fallback_note(self):
        assert build_observations(None, None, Intent()) == [
            "Layer the selected accents to anchor the room identity."
        ]
