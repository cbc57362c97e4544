"""API router for v1 endpoints."""

from fastapi import APIRouter

from college_planner.api import advice, colleges, dashboard, profile, timeline

router = APIRouter()

# Student profile
router.include_router(profile.router, tags=["profile"])

# College catalog and the student's list
router.include_router(colleges.router, tags=["colleges"])

# Task timeline
router.include_router(timeline.router, tags=["timeline"])

# Dashboard and readiness score
router.include_router(dashboard.router, tags=["dashboard"])

# Advice corner
router.include_router(advice.router, prefix="/advice", tags=["advice"])
