"""Tests for grounding validation of generated plans."""

from aesthetic.models.contracts import DesignPlan, LayoutIdea
from aesthetic.synthesis.validation import validate_plan


def _plan(rooms: list[str], furniture: list[str]) -> DesignPlan:
    return DesignPlan(
        layout_ideas=[LayoutIdea(room=room, summary="Rearrange.") for room in rooms],
        furniture_suggestions=furniture,
    )


class TestValidatePlan:
    def test_missing_plan(self):
        result = validate_plan(None, ["Living Room"], ["Sofa"])
        assert not result.valid
        assert result.issues == ["No design plan returned from the AI model."]

    def test_grounded_plan_passes(self):
        plan = _plan(["Living room", "Kitchen"], ["Modular sofa", "Oak coffee table"])
        result = validate_plan(plan, ["Living Room", "Kitchen", "Bathroom"], ["Sofa", "Coffee Table"])
        assert result.valid
        assert result.matched_rooms == 2
        assert result.matched_furniture == 2
        assert result.required_room_matches == 2

    def test_one_detected_room_needs_one_match(self):
        result = validate_plan(_plan(["Bathroom"], []), ["bathroom"], [])
        assert result.valid
        assert result.required_room_matches == 1
        assert result.required_furniture_matches == 0

    def test_room_mismatch_issue_text(self):
        result = validate_plan(_plan(["Garage"], ["Sofa", "Lamp"]), ["Living Room", "Kitchen"], ["Sofa"])
        assert not result.valid
        assert result.issues == [
            "Plan only referenced 0 of 2 detected room cues (living room, kitchen)."
        ]

    def test_furniture_mismatch_issue_text(self):
        result = validate_plan(
            _plan(["Living Room", "Kitchen"], ["Rug"]),
            ["Living Room", "Kitchen"],
            ["Sofa", "Coffee Table"],
        )
        assert result.issues == [
            "Plan referenced 0 of 2 key furniture items (sofa, coffee table)."
        ]

    def test_matching_is_loose_and_normalized(self):
        plan = _plan(["Home-Office!"], ["L-shaped DESK"])
        result = validate_plan(plan, ["home office"], ["desk"])
        assert result.valid

    def test_nothing_detected_always_valid(self):
        assert validate_plan(DesignPlan(), [], []).valid
