"""PlanValidator: is a candidate plan grounded in what the photo showed?

A plan must mention at least ``min(2, detected)`` of the detected rooms in
its layout ideas and, independently, of the detected furniture in its
furniture suggestions. Matching is loose (either string may contain the
other after normalisation) because models paraphrase.
"""

from __future__ import annotations

from collections.abc import Sequence

from aesthetic.models.contracts import DesignPlan, ValidationResult
from aesthetic.utils.text import normalize_term

REQUIRED_MATCHES = 2


def _matched(detected: Sequence[str], offered: Sequence[str]) -> set[str]:
    hits: set[str] = set()
    for term in detected:
        if not term:
            continue
        if any(item and (term in item or item in term) for item in offered):
            hits.add(term)
    return hits


def validate_plan(
    plan: DesignPlan | None,
    rooms: Sequence[str],
    furniture: Sequence[str],
) -> ValidationResult:
    if plan is None:
        return ValidationResult(valid=False, issues=["No design plan returned from the AI model."])

    detected_rooms = [normalize_term(room) for room in rooms]
    detected_furniture = [normalize_term(item) for item in furniture]
    plan_rooms = [normalize_term(idea.room) for idea in plan.layout_ideas]
    plan_furniture = [normalize_term(item) for item in plan.furniture_suggestions]

    matched_rooms = _matched(detected_rooms, plan_rooms)
    matched_furniture = _matched(detected_furniture, plan_furniture)

    required_rooms = min(REQUIRED_MATCHES, len(detected_rooms))
    required_furniture = min(REQUIRED_MATCHES, len(detected_furniture))

    issues: list[str] = []
    if required_rooms and len(matched_rooms) < required_rooms:
        issues.append(
            f"Plan only referenced {len(matched_rooms)} of {required_rooms} detected room cues "
            f"({', '.join(detected_rooms) or 'none'})."
        )
    if required_furniture and len(matched_furniture) < required_furniture:
        issues.append(
            f"Plan referenced {len(matched_furniture)} of {required_furniture} key furniture items "
            f"({', '.join(detected_furniture) or 'none'})."
        )

    return ValidationResult(
        valid=not issues,
        issues=issues,
        matched_rooms=len(matched_rooms),
        matched_furniture=len(matched_furniture),
        required_room_matches=required_rooms,
        required_furniture_matches=required_furniture,
    )
