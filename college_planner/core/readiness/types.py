"""Pydantic models and constants for readiness scoring."""

from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class GradeTier(str, Enum):
    """Weight tier selected by grade level."""

    EARLY = "early"  # grades 6-10, or grade unknown
    UPPER = "upper"  # grades 11-12


class ReadinessBand(str, Enum):
    """Qualitative label for a readiness score."""

    STARTING = "starting"  # 0-29
    BUILDING_MOMENTUM = "building_momentum"  # 30-59
    STRONG = "strong"  # 60-100


class AreaWeights(BaseModel):
    """Points available per area. Each tier sums to 100."""

    model_config = ConfigDict(frozen=True)

    academic: int
    activities: int
    colleges: int
    essays: int
    scholarships: int

    @property
    def total(self) -> int:
        return self.academic + self.activities + self.colleges + self.essays + self.scholarships


class AreaScore(BaseModel):
    """Points earned in one readiness area."""

    area: str = Field(..., description="Area name (academic, activities, ...)")
    weight: int = Field(..., ge=0, le=100, description="Points available in this area")
    points: float = Field(..., ge=0, le=100, description="Points earned (unrounded)")
    count: int | None = Field(None, description="Records counted toward this area")
    target: int | None = Field(None, description="Count that earns the full weight")
    details: str | None = Field(None, description="Human-readable explanation")


class Recommendation(BaseModel):
    """A next step that would raise the readiness score."""

    action: str = Field(..., description="What to do")
    impact: str = Field(..., description="Expected improvement (e.g., '+6%')")
    area: str = Field(..., description="Which area this improves")
    priority: int = Field(..., ge=1, description="Priority (1 = highest)")


class ReadinessReport(BaseModel):
    """Readiness score with its per-area breakdown."""

    score: int = Field(..., ge=0, le=100, description="Overall readiness percentage")
    tier: GradeTier
    weights: AreaWeights
    areas: dict[str, AreaScore] = Field(..., description="Breakdown by area")
    band: ReadinessBand
    band_title: str
    band_message: str
    recommendations: list[Recommendation] = Field(
        default_factory=list, description="Top actions to improve readiness"
    )
    computed_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


# =============================================================================
# Weight tiers - each must sum to 100
# =============================================================================

UPPER_TIER_MIN_GRADE = 11

WEIGHT_TIERS: dict[GradeTier, AreaWeights] = {
    GradeTier.UPPER: AreaWeights(
        academic=25, activities=15, colleges=30, essays=20, scholarships=10
    ),
    GradeTier.EARLY: AreaWeights(
        academic=40, activities=30, colleges=15, essays=10, scholarships=5
    ),
}

# Academic split: GPA and test scores contribute independently
GPA_SHARE = Decimal("0.7")
TEST_SCORE_SHARE = Decimal("0.3")
TEST_SCORE_KEYS = ("sat", "act")

# Counts that earn an area's full weight
ACTIVITY_TARGET = 3
COLLEGE_TARGET = 5
FINAL_ESSAY_TARGET = 3
SCHOLARSHIP_TARGET = 5

# Any activity earns half the activities weight
PARTIAL_ACTIVITY_SHARE = Decimal("0.5")

FINAL_ESSAY_STATUS = "Final"

# Band lower bounds
BUILDING_MOMENTUM_MIN = 30
STRONG_MIN = 60

BAND_COPY: dict[ReadinessBand, tuple[str, str]] = {
    ReadinessBand.STARTING: (
        "Just Getting Started",
        "Complete your profile and add your first college to boost your readiness score!",
    ),
    ReadinessBand.BUILDING_MOMENTUM: (
        "Building Momentum",
        "You're making progress! Focus on adding more activities and starting your essays.",
    ),
    ReadinessBand.STRONG: (
        "Looking Strong!",
        "You're well on your way. Keep completing tasks and refining your applications.",
    ),
}
