"""Dashboard composition.

The six entity-store reads are independent, so they run concurrently in
worker threads; the scorer then works on the resolved snapshots.
"""

import asyncio
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Optional

from college_planner.core.logging import get_logger
from college_planner.core.readiness import ReadinessReport, build_readiness_report
from college_planner.core.schemas_dashboard import DashboardResponse, DashboardStats
from college_planner.core.schemas_tasks import Task
from college_planner.core.timeline import count_overdue, upcoming_tasks
from college_planner.db.colleges import list_student_colleges
from college_planner.db.portfolio import (
    list_activities,
    list_essay_projects,
    list_scholarship_applications,
)
from college_planner.db.student_profiles import get_latest_profile
from college_planner.db.tasks import list_tasks

logger = get_logger(__name__)


@dataclass
class StudentSnapshot:
    """Entity-store rows for one student, read at one point in time."""
    profile: Optional[dict[str, Any]] = None
    college_list: list[dict[str, Any]] = field(default_factory=list)
    tasks: list[dict[str, Any]] = field(default_factory=list)
    activities: list[dict[str, Any]] = field(default_factory=list)
    scholarships: list[dict[str, Any]] = field(default_factory=list)
    essays: list[dict[str, Any]] = field(default_factory=list)


async def load_snapshot(email: str) -> StudentSnapshot:
    """Read the profile and every collection for a student concurrently."""
    profile, college_list, tasks, activities, scholarships, essays = await asyncio.gather(
        asyncio.to_thread(get_latest_profile, email),
        asyncio.to_thread(list_student_colleges, email),
        asyncio.to_thread(list_tasks, email),
        asyncio.to_thread(list_activities, email),
        asyncio.to_thread(list_scholarship_applications, email),
        asyncio.to_thread(list_essay_projects, email),
    )
    return StudentSnapshot(
        profile=profile,
        college_list=college_list,
        tasks=tasks,
        activities=activities,
        scholarships=scholarships,
        essays=essays,
    )


def readiness_for(snapshot: StudentSnapshot) -> ReadinessReport:
    return build_readiness_report(
        profile=snapshot.profile,
        activities=snapshot.activities,
        college_list=snapshot.college_list,
        essays=snapshot.essays,
        scholarships=snapshot.scholarships,
    )


def compose_dashboard(
    snapshot: StudentSnapshot,
    upcoming_limit: int = 5,
    today: Optional[date] = None,
) -> DashboardResponse:
    """Build the dashboard payload from a resolved snapshot."""
    report = readiness_for(snapshot)
    tasks = [Task(**row) for row in snapshot.tasks]
    profile = snapshot.profile or {}

    stats = DashboardStats(
        readiness=report.score,
        colleges=len(snapshot.college_list),
        active_tasks=sum(1 for t in tasks if not t.is_completed),
        activities=len(snapshot.activities),
        scholarships=len(snapshot.scholarships),
        essays=len(snapshot.essays),
    )

    return DashboardResponse(
        first_name=profile.get("first_name"),
        grade=profile.get("grade"),
        readiness=report,
        stats=stats,
        upcoming_tasks=upcoming_tasks(tasks, limit=upcoming_limit),
        overdue_count=count_overdue(tasks, today),
    )


async def build_dashboard(email: str, upcoming_limit: int = 5) -> DashboardResponse:
    snapshot = await load_snapshot(email)
    dashboard = compose_dashboard(snapshot, upcoming_limit=upcoming_limit)
    logger.info(
        f"Dashboard readiness {dashboard.readiness.score}% ({dashboard.readiness.band.value})",
        extra={"extra_data": {"overdue": dashboard.overdue_count}},
    )
    return dashboard
