"""Recommendation building and prioritization.

Each area that is short of its full weight yields an action. This module
builds those actions and selects the most impactful ones.
"""

from college_planner.core.readiness.types import (
    GPA_SHARE,
    TEST_SCORE_SHARE,
    AreaScore,
    Recommendation,
)


def _plural(count: int, singular: str, plural: str) -> str:
    return singular if count == 1 else plural


def _impact(points: float) -> str:
    return f"+{round(points)}%"


def build_recommendations(
    areas: dict[str, AreaScore],
    missing_gpa: bool,
    missing_test_score: bool,
) -> list[Recommendation]:
    """
    Build one recommendation per unmet goal.

    Priorities are assigned later by select_top_recommendations; every
    candidate starts at priority 1.

    Args:
        areas: Area breakdown from the scorer
        missing_gpa: Whether the profile has no GPA
        missing_test_score: Whether the profile has no SAT/ACT score

    Returns:
        Unsorted recommendations
    """
    recs: list[Recommendation] = []

    academic = areas.get("academic")
    if academic:
        if missing_gpa:
            recs.append(Recommendation(
                action="Add your GPA to your profile",
                impact=_impact(float(GPA_SHARE) * academic.weight),
                area="academic",
                priority=1,
            ))
        if missing_test_score:
            recs.append(Recommendation(
                action="Add your SAT or ACT score to your profile",
                impact=_impact(float(TEST_SCORE_SHARE) * academic.weight),
                area="academic",
                priority=1,
            ))

    counted = {
        "activities": ("Log {n} more {noun}", "activity", "activities"),
        "colleges": ("Add {n} more {noun} to your list", "college", "colleges"),
        "essays": ("Finalize {n} more {noun}", "essay", "essays"),
        "scholarships": (
            "Apply to {n} more {noun}", "scholarship", "scholarships"
        ),
    }
    for area_name, (template, singular, plural) in counted.items():
        area = areas.get(area_name)
        if not area or area.count is None or area.target is None:
            continue
        remaining = area.target - area.count
        gain = area.weight - area.points
        if remaining <= 0 or gain <= 0:
            continue
        recs.append(Recommendation(
            action=template.format(n=remaining, noun=_plural(remaining, singular, plural)),
            impact=_impact(gain),
            area=area_name,
            priority=1,
        ))

    return recs


def select_top_recommendations(
    all_recommendations: list[Recommendation],
    limit: int = 5,
) -> list[Recommendation]:
    """
    Select the top recommendations and number their priorities.

    Ordered by impact (largest first); ties keep build order.

    Args:
        all_recommendations: Candidate recommendations
        limit: Maximum number to return

    Returns:
        Top recommendations with priority 1..n
    """
    if not all_recommendations:
        return []

    def parse_impact(impact: str) -> float:
        """Extract numeric value from impact string like '+10%'."""
        try:
            return float(impact.replace("+", "").replace("%", ""))
        except (ValueError, AttributeError):
            return 0

    sorted_recs = sorted(all_recommendations, key=lambda r: -parse_impact(r.impact))

    # Deduplicate identical actions (keep the first)
    seen_actions: set[str] = set()
    unique_recs: list[Recommendation] = []
    for rec in sorted_recs:
        action_key = rec.action.lower().strip()
        if action_key in seen_actions:
            continue
        seen_actions.add(action_key)
        unique_recs.append(rec)

    return [
        rec.model_copy(update={"priority": idx})
        for idx, rec in enumerate(unique_recs[:limit], start=1)
    ]
