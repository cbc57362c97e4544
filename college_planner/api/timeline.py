"""API endpoints for the student's task timeline."""

from fastapi import APIRouter, Depends, HTTPException, Query

from college_planner.core.auth_middleware import AuthContext, require_auth
from college_planner.core.logging import get_logger
from college_planner.core.schemas_tasks import Task, TaskCreate, TaskUpdate, TimelineResponse
from college_planner.core.timeline import (
    TaskNotFoundError,
    add_task,
    get_timeline,
    toggle_task,
    update_task,
)

logger = get_logger(__name__)

router = APIRouter(prefix="/me/tasks", tags=["timeline"])


@router.get("", response_model=TimelineResponse)
async def list_my_tasks(
    status: str | None = Query(None, description="Not Started, In Progress, Completed or all"),
    category: str | None = Query(None, description="Task category or all"),
    auth: AuthContext = Depends(require_auth),  # noqa: B008
) -> TimelineResponse:
    """Tasks grouped into overdue, upcoming and completed."""
    try:
        return get_timeline(auth.email, status=status, category=category)
    except Exception as e:
        logger.exception(f"Failed to list tasks for user {auth.user_id}")
        raise HTTPException(status_code=500, detail="Failed to list tasks") from e


@router.post("", response_model=Task, status_code=201)
async def create_my_task(
    data: TaskCreate,
    auth: AuthContext = Depends(require_auth),  # noqa: B008
) -> Task:
    """Create a task."""
    try:
        return add_task(auth.email, data)
    except Exception as e:
        logger.exception(f"Failed to create task for user {auth.user_id}")
        raise HTTPException(status_code=500, detail="Failed to create task") from e


@router.patch("/{task_id}", response_model=Task)
async def update_my_task(
    task_id: str,
    data: TaskUpdate,
    auth: AuthContext = Depends(require_auth),  # noqa: B008
) -> Task:
    """Update a task. Setting status Completed stamps completed_at."""
    try:
        return update_task(auth.email, task_id, data)
    except TaskNotFoundError as e:
        raise HTTPException(status_code=404, detail="Task not found") from e
    except Exception as e:
        logger.exception(f"Failed to update task {task_id}")
        raise HTTPException(status_code=500, detail="Failed to update task") from e


@router.post("/{task_id}/toggle", response_model=Task)
async def toggle_my_task(
    task_id: str,
    auth: AuthContext = Depends(require_auth),  # noqa: B008
) -> Task:
    """Check or uncheck a task's completion box."""
    try:
        return toggle_task(auth.email, task_id)
    except TaskNotFoundError as e:
        raise HTTPException(status_code=404, detail="Task not found") from e
    except Exception as e:
        logger.exception(f"Failed to toggle task {task_id}")
        raise HTTPException(status_code=500, detail="Failed to update task") from e
