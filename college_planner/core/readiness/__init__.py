"""Readiness scoring.

Summarizes a student's application preparedness as a 0-100 percentage
across five areas, weighted by grade tier:

- Grades 11-12: academic 25, activities 15, colleges 30, essays 20, scholarships 10
- Earlier grades: academic 40, activities 30, colleges 15, essays 10, scholarships 5

Usage:
    from college_planner.core.readiness import compute_readiness

    score = compute_readiness(profile, activities, college_list, essays, scholarships)
"""

from college_planner.core.readiness.score import (
    build_readiness_report,
    compute_readiness,
    grade_tier,
    readiness_band,
    weights_for,
)
from college_planner.core.readiness.types import (
    WEIGHT_TIERS,
    AreaScore,
    AreaWeights,
    GradeTier,
    ReadinessBand,
    ReadinessReport,
    Recommendation,
)

__all__ = [
    "compute_readiness",
    "build_readiness_report",
    "grade_tier",
    "readiness_band",
    "weights_for",
    "ReadinessReport",
    "AreaScore",
    "AreaWeights",
    "GradeTier",
    "ReadinessBand",
    "Recommendation",
    "WEIGHT_TIERS",
]
