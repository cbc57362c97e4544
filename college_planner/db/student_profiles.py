"""Database access layer for student profiles."""

from typing import Any

from college_planner.core.logging import get_logger
from college_planner.db.supabase_client import get_supabase

logger = get_logger(__name__)

TABLE = "student_profiles"


def get_latest_profile(email: str) -> dict | None:
    """Get the newest profile created by a student, or None."""
    client = get_supabase()
    result = (
        client.table(TABLE)
        .select("*")
        .eq("created_by", email)
        .order("created_date", desc=True)
        .limit(1)
        .execute()
    )
    return result.data[0] if result.data else None


def create_profile(email: str, fields: dict[str, Any]) -> dict:
    """Create a profile owned by the student."""
    client = get_supabase()
    data = {**fields, "created_by": email}
    result = client.table(TABLE).insert(data).execute()
    logger.info("Created profile", extra={"extra_data": {"student_email": email}})
    return result.data[0] if result.data else {}


def update_profile(profile_id: str, fields: dict[str, Any]) -> dict:
    """Update an existing profile with the supplied fields."""
    client = get_supabase()
    result = client.table(TABLE).update(fields).eq("id", profile_id).execute()
    return result.data[0] if result.data else {}
