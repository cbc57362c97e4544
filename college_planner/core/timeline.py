"""Task timeline: filtering, grouping and status changes."""

from datetime import date, datetime, timezone
from typing import Any, Iterable, Optional

from college_planner.core.logging import get_logger
from college_planner.core.schemas_tasks import (
    Task,
    TaskCreate,
    TaskStatus,
    TaskUpdate,
    TimelineResponse,
)
from college_planner.db import tasks as tasks_db

logger = get_logger(__name__)

# Filter value that disables a filter
ALL = "all"


class TaskNotFoundError(Exception):
    """Raised when a task does not exist for the student."""


def _utc_today() -> date:
    return datetime.now(timezone.utc).date()


def is_overdue(task: Task, today: date) -> bool:
    return not task.is_completed and task.due_date is not None and task.due_date < today


def filter_tasks(
    tasks: Iterable[Task],
    status: Optional[str] = None,
    category: Optional[str] = None,
) -> list[Task]:
    """Keep tasks matching both filters. None or "all" disables a filter."""
    result = []
    for task in tasks:
        if status and status != ALL and task.status.value != status:
            continue
        if category and category != ALL and task.category.value != category:
            continue
        result.append(task)
    return result


def group_tasks(tasks: Iterable[Task], today: Optional[date] = None) -> TimelineResponse:
    """
    Split tasks into overdue, upcoming and completed.

    A task without a due date is never overdue. Order within each group
    follows the input order.
    """
    today = today or _utc_today()
    tasks = list(tasks)
    return TimelineResponse(
        total=len(tasks),
        overdue=[t for t in tasks if is_overdue(t, today)],
        upcoming=[t for t in tasks if not t.is_completed and not is_overdue(t, today)],
        completed=[t for t in tasks if t.is_completed],
    )


def upcoming_tasks(tasks: Iterable[Task], limit: int = 5) -> list[Task]:
    """The first not-completed tasks, in input order."""
    return [t for t in tasks if not t.is_completed][:limit]


def count_overdue(tasks: Iterable[Task], today: Optional[date] = None) -> int:
    today = today or _utc_today()
    return sum(1 for t in tasks if is_overdue(t, today))


def status_fields(status: TaskStatus, now: Optional[datetime] = None) -> dict[str, Any]:
    """Row fields for a status change: completion is stamped, anything else clears it."""
    if status == TaskStatus.COMPLETED:
        stamp = now or datetime.now(timezone.utc)
        return {"status": status.value, "completed_at": stamp.isoformat()}
    return {"status": status.value, "completed_at": None}


# ============================================================================
# Service operations
# ============================================================================


def list_student_tasks(email: str) -> list[Task]:
    """The student's tasks ordered by due date."""
    return [Task(**row) for row in tasks_db.list_tasks(email)]


def get_timeline(
    email: str,
    status: Optional[str] = None,
    category: Optional[str] = None,
    today: Optional[date] = None,
) -> TimelineResponse:
    return group_tasks(filter_tasks(list_student_tasks(email), status, category), today)


def add_task(email: str, data: TaskCreate) -> Task:
    """Create a Not Started task for the student."""
    fields = data.model_dump(mode="json")
    fields.update(status_fields(TaskStatus.NOT_STARTED))
    row = tasks_db.create_task(email, fields)
    logger.info(
        f"Created task '{data.title}'",
        extra={"extra_data": {"category": data.category.value}},
    )
    return Task(**row)


def _owned_task(email: str, task_id: str) -> Task:
    row = tasks_db.get_task(task_id)
    if not row or row.get("student_email") != email:
        raise TaskNotFoundError(f"Task {task_id} not found")
    return Task(**row)


def update_task(email: str, task_id: str, data: TaskUpdate) -> Task:
    """
    Update a task the student owns.

    A status in the update also sets or clears completed_at.

    Raises:
        TaskNotFoundError: If the task does not exist or belongs to someone else
    """
    current = _owned_task(email, task_id)

    fields = data.model_dump(mode="json", exclude_unset=True, exclude_none=True)
    if data.status is not None:
        fields.update(status_fields(data.status))
    if not fields:
        return current

    row = tasks_db.update_task(task_id, fields)
    if not row:
        raise TaskNotFoundError(f"Task {task_id} not found")

    if data.status is not None and data.status != current.status:
        logger.info(f"Task {task_id} status {current.status.value} -> {data.status.value}")
    return Task(**row)


def toggle_task(email: str, task_id: str) -> Task:
    """Flip a task between Completed and Not Started."""
    current = _owned_task(email, task_id)
    target = TaskStatus.NOT_STARTED if current.is_completed else TaskStatus.COMPLETED
    return update_task(email, task_id, TaskUpdate(status=target))
