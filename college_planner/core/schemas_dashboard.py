"""Pydantic schemas for the student dashboard."""

from typing import Optional

from pydantic import BaseModel, Field

from college_planner.core.readiness.types import ReadinessReport
from college_planner.core.schemas_tasks import Task


class DashboardStats(BaseModel):
    """Counts shown on the dashboard cards."""
    readiness: int = Field(..., ge=0, le=100)
    colleges: int = 0
    active_tasks: int = 0
    activities: int = 0
    scholarships: int = 0
    essays: int = 0


class DashboardResponse(BaseModel):
    """Everything the dashboard page renders."""
    first_name: Optional[str] = None
    grade: Optional[int] = None
    readiness: ReadinessReport
    stats: DashboardStats
    upcoming_tasks: list[Task] = Field(default_factory=list)
    overdue_count: int = 0
