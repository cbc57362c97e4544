"""Student profile service."""

from typing import Any

from college_planner.core.logging import get_logger
from college_planner.core.schemas_profiles import (
    DEFAULT_GRADE,
    StudentProfile,
    StudentProfileUpdate,
)
from college_planner.db.student_profiles import (
    create_profile,
    get_latest_profile,
    update_profile,
)

logger = get_logger(__name__)

# Values a brand new profile starts with when the form leaves them blank
NEW_PROFILE_DEFAULTS: dict[str, Any] = {"grade": DEFAULT_GRADE, "is_athlete": False}


def get_current_profile(email: str) -> StudentProfile | None:
    """Return the student's newest profile, or None if they have not created one."""
    row = get_latest_profile(email)
    return StudentProfile(**row) if row else None


def save_profile(email: str, data: StudentProfileUpdate) -> StudentProfile:
    """
    Create or update the student's profile.

    Only fields present in the request are written. A new profile is seeded
    with the defaults the profile form shows (grade 9, not an athlete).

    Args:
        email: Student email (profile owner)
        data: Fields to write

    Returns:
        The stored profile
    """
    fields = data.model_dump(mode="json", exclude_unset=True)
    existing = get_latest_profile(email)

    if existing:
        row = update_profile(existing["id"], fields) if fields else existing
        logger.info(
            f"Updated profile {existing['id']}",
            extra={"extra_data": {"fields": sorted(fields)}},
        )
    else:
        row = create_profile(email, {**NEW_PROFILE_DEFAULTS, **fields})

    return StudentProfile(**row)
