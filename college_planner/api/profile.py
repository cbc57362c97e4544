"""API endpoints for the signed-in student's profile."""

from fastapi import APIRouter, Depends, HTTPException

from college_planner.core.auth_middleware import AuthContext, require_auth
from college_planner.core.logging import get_logger
from college_planner.core.profiles import get_current_profile, save_profile
from college_planner.core.schemas_profiles import StudentProfile, StudentProfileUpdate

logger = get_logger(__name__)

router = APIRouter(prefix="/me/profile", tags=["profile"])


@router.get("", response_model=StudentProfile)
async def get_profile(auth: AuthContext = Depends(require_auth)) -> StudentProfile:  # noqa: B008
    """Get the student's profile. 404 until one has been saved."""
    try:
        profile = get_current_profile(auth.email)
    except Exception as e:
        logger.exception(f"Failed to load profile for user {auth.user_id}")
        raise HTTPException(status_code=500, detail="Failed to load profile") from e

    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found")
    return profile


@router.put("", response_model=StudentProfile)
async def put_profile(
    data: StudentProfileUpdate,
    auth: AuthContext = Depends(require_auth),  # noqa: B008
) -> StudentProfile:
    """Create the profile on first save, update it afterwards."""
    try:
        return save_profile(auth.email, data)
    except Exception as e:
        logger.exception(f"Failed to save profile for user {auth.user_id}")
        raise HTTPException(status_code=500, detail="Failed to save profile") from e
