"""API endpoints for the dashboard and readiness score."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from college_planner.core.auth_middleware import AuthContext, require_auth
from college_planner.core.config import get_settings
from college_planner.core.dashboard import build_dashboard, load_snapshot, readiness_for
from college_planner.core.logging import get_logger, log_with_context
from college_planner.core.readiness import ReadinessReport
from college_planner.core.schemas_dashboard import DashboardResponse

logger = get_logger(__name__)

router = APIRouter(prefix="/me", tags=["dashboard"])


@router.get("/dashboard", response_model=DashboardResponse)
async def get_dashboard(auth: AuthContext = Depends(require_auth)) -> DashboardResponse:  # noqa: B008
    """
    Dashboard summary: readiness, counts, next tasks and overdue count.

    The profile and five collections are read concurrently.
    """
    try:
        return await build_dashboard(
            auth.email, upcoming_limit=get_settings().UPCOMING_TASK_LIMIT
        )
    except Exception as e:
        logger.exception(f"Failed to build dashboard for user {auth.user_id}")
        raise HTTPException(status_code=500, detail="Failed to build dashboard") from e


@router.get("/readiness", response_model=ReadinessReport)
async def get_readiness(auth: AuthContext = Depends(require_auth)) -> ReadinessReport:  # noqa: B008
    """Readiness score with per-area breakdown and recommendations."""
    try:
        snapshot = await load_snapshot(auth.email)
        report = readiness_for(snapshot)
    except Exception as e:
        logger.exception(f"Failed to compute readiness for user {auth.user_id}")
        raise HTTPException(status_code=500, detail="Failed to compute readiness score") from e

    log_with_context(
        logger,
        logging.INFO,
        f"Computed readiness {report.score}%",
        user_id=auth.user_id,
        band=report.band.value,
        tier=report.tier.value,
    )
    return report
