"""Readiness score computation.

The score is a weighted sum over five areas (academic, activities,
colleges, essays, scholarships). The weight set depends on the student's
grade tier. Every input is optional: a missing profile field or an empty
collection contributes nothing and never raises.

Inputs are entity-store rows (mappings) or pydantic models. Arithmetic is
done in Decimal so half-way totals round up deterministically.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from college_planner.core.readiness.recommendations import (
    build_recommendations,
    select_top_recommendations,
)
from college_planner.core.readiness.types import (
    ACTIVITY_TARGET,
    BAND_COPY,
    BUILDING_MOMENTUM_MIN,
    COLLEGE_TARGET,
    FINAL_ESSAY_STATUS,
    FINAL_ESSAY_TARGET,
    GPA_SHARE,
    PARTIAL_ACTIVITY_SHARE,
    SCHOLARSHIP_TARGET,
    STRONG_MIN,
    TEST_SCORE_KEYS,
    TEST_SCORE_SHARE,
    UPPER_TIER_MIN_GRADE,
    WEIGHT_TIERS,
    AreaScore,
    AreaWeights,
    GradeTier,
    ReadinessBand,
    ReadinessReport,
)

# Entity-store row (mapping) or pydantic model
Record = Any


def _field(record: Record | None, name: str) -> Any:
    """Read a field from a mapping row or a model, None when absent."""
    if record is None:
        return None
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def _is_present(value: Any) -> bool:
    """A value counts when it is non-null, non-blank, non-zero and not NaN."""
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, float) and math.isnan(value):
        return False
    if isinstance(value, (int, float)) and value == 0:
        return False
    return True


def _count(records: Iterable[Any] | None) -> int:
    if records is None:
        return 0
    return sum(1 for _ in records)


def _grade(profile: Record | None) -> int | None:
    grade = _field(profile, "grade")
    if grade is None or isinstance(grade, bool):
        return None
    try:
        return int(grade)
    except (TypeError, ValueError, OverflowError):
        return None


def grade_tier(profile: Record | None) -> GradeTier:
    """Upper tier for grade 11 and above; early tier otherwise (including unknown grade)."""
    grade = _grade(profile)
    if grade is not None and grade >= UPPER_TIER_MIN_GRADE:
        return GradeTier.UPPER
    return GradeTier.EARLY


def weights_for(profile: Record | None) -> AreaWeights:
    return WEIGHT_TIERS[grade_tier(profile)]


def has_gpa(profile: Record | None) -> bool:
    return _is_present(_field(profile, "gpa_weighted")) or _is_present(
        _field(profile, "gpa_unweighted")
    )


def has_test_score(profile: Record | None) -> bool:
    test_scores = _field(profile, "test_scores")
    return any(_is_present(_field(test_scores, key)) for key in TEST_SCORE_KEYS)


def count_final_essays(essays: Iterable[Record] | None) -> int:
    if essays is None:
        return 0
    return sum(1 for essay in essays if _field(essay, "status") == FINAL_ESSAY_STATUS)


def _proportional(weight: int, count: int, target: int) -> Decimal:
    """Full weight at or above target, linear share below it."""
    if count >= target:
        return Decimal(weight)
    if count > 0:
        return Decimal(weight) * Decimal(count) / Decimal(target)
    return Decimal(0)


def _activities_points(weight: int, count: int) -> Decimal:
    if count >= ACTIVITY_TARGET:
        return Decimal(weight)
    if count > 0:
        return Decimal(weight) * PARTIAL_ACTIVITY_SHARE
    return Decimal(0)


def _score_areas(
    profile: Record | None,
    activities: Iterable[Record] | None,
    college_list: Iterable[Record] | None,
    essays: Iterable[Record] | None,
    scholarships: Iterable[Record] | None,
) -> tuple[GradeTier, AreaWeights, dict[str, AreaScore], Decimal]:
    tier = grade_tier(profile)
    weights = WEIGHT_TIERS[tier]

    gpa = has_gpa(profile)
    tests = has_test_score(profile)
    academic = Decimal(0)
    if gpa:
        academic += Decimal(weights.academic) * GPA_SHARE
    if tests:
        academic += Decimal(weights.academic) * TEST_SCORE_SHARE

    activity_count = _count(activities)
    college_count = _count(college_list)
    final_essays = count_final_essays(essays)
    scholarship_count = _count(scholarships)

    earned = {
        "academic": academic,
        "activities": _activities_points(weights.activities, activity_count),
        "colleges": _proportional(weights.colleges, college_count, COLLEGE_TARGET),
        "essays": _proportional(weights.essays, final_essays, FINAL_ESSAY_TARGET),
        "scholarships": _proportional(
            weights.scholarships, scholarship_count, SCHOLARSHIP_TARGET
        ),
    }

    academic_parts = [label for label, ok in (("GPA", gpa), ("test scores", tests)) if ok]
    areas = {
        "academic": AreaScore(
            area="academic",
            weight=weights.academic,
            points=float(earned["academic"]),
            details=(
                f"{' and '.join(academic_parts)} on file" if academic_parts
                else "No GPA or test scores on file"
            ),
        ),
        "activities": AreaScore(
            area="activities",
            weight=weights.activities,
            points=float(earned["activities"]),
            count=activity_count,
            target=ACTIVITY_TARGET,
            details=f"{activity_count}/{ACTIVITY_TARGET} activities logged",
        ),
        "colleges": AreaScore(
            area="colleges",
            weight=weights.colleges,
            points=float(earned["colleges"]),
            count=college_count,
            target=COLLEGE_TARGET,
            details=f"{college_count}/{COLLEGE_TARGET} colleges on list",
        ),
        "essays": AreaScore(
            area="essays",
            weight=weights.essays,
            points=float(earned["essays"]),
            count=final_essays,
            target=FINAL_ESSAY_TARGET,
            details=f"{final_essays}/{FINAL_ESSAY_TARGET} essays finalized",
        ),
        "scholarships": AreaScore(
            area="scholarships",
            weight=weights.scholarships,
            points=float(earned["scholarships"]),
            count=scholarship_count,
            target=SCHOLARSHIP_TARGET,
            details=f"{scholarship_count}/{SCHOLARSHIP_TARGET} scholarship applications",
        ),
    }

    return tier, weights, areas, sum(earned.values(), Decimal(0))


def _round_half_up(total: Decimal) -> int:
    rounded = int(total.quantize(Decimal(1), rounding=ROUND_HALF_UP))
    return max(0, min(100, rounded))


def compute_readiness(
    profile: Record | None,
    activities: Iterable[Record] | None,
    college_list: Iterable[Record] | None,
    essays: Iterable[Record] | None,
    scholarships: Iterable[Record] | None,
) -> int:
    """
    Compute the readiness percentage for a student.

    Args:
        profile: Student profile (grade, gpa_weighted, gpa_unweighted, test_scores)
        activities: Activity records (only the count matters)
        college_list: College list entries (only the count matters)
        essays: Essay projects (entries with status "Final" count)
        scholarships: Scholarship applications (only the count matters)

    Returns:
        Integer in [0, 100]
    """
    _, _, _, total = _score_areas(profile, activities, college_list, essays, scholarships)
    return _round_half_up(total)


def readiness_band(score: int) -> ReadinessBand:
    if score >= STRONG_MIN:
        return ReadinessBand.STRONG
    if score >= BUILDING_MOMENTUM_MIN:
        return ReadinessBand.BUILDING_MOMENTUM
    return ReadinessBand.STARTING


def build_readiness_report(
    profile: Record | None,
    activities: Iterable[Record] | None,
    college_list: Iterable[Record] | None,
    essays: Iterable[Record] | None,
    scholarships: Iterable[Record] | None,
    recommendation_limit: int = 5,
) -> ReadinessReport:
    """
    Compute the readiness score together with its breakdown.

    Collections are materialized once so generators are safe to pass.

    Returns:
        ReadinessReport whose score equals compute_readiness() for the same inputs
    """
    activities = list(activities or [])
    college_list = list(college_list or [])
    essays = list(essays or [])
    scholarships = list(scholarships or [])

    tier, weights, areas, total = _score_areas(
        profile, activities, college_list, essays, scholarships
    )
    score = _round_half_up(total)
    band = readiness_band(score)
    title, message = BAND_COPY[band]

    recommendations = select_top_recommendations(
        build_recommendations(
            areas,
            missing_gpa=not has_gpa(profile),
            missing_test_score=not has_test_score(profile),
        ),
        limit=recommendation_limit,
    )

    return ReadinessReport(
        score=score,
        tier=tier,
        weights=weights,
        areas=areas,
        band=band,
        band_title=title,
        band_message=message,
        recommendations=recommendations,
    )
