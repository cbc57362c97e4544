"""Database access layer for the college catalog and student college lists."""

from college_planner.db.supabase_client import get_supabase


def list_active_colleges(limit: int = 100) -> list[dict]:
    """List active catalog colleges ordered by name."""
    client = get_supabase()
    result = (
        client.table("colleges")
        .select("*")
        .eq("is_active", True)
        .order("name")
        .limit(limit)
        .execute()
    )
    return result.data or []


def get_college(college_id: str) -> dict | None:
    """Get a catalog college by ID."""
    client = get_supabase()
    result = client.table("colleges").select("*").eq("id", college_id).execute()
    return result.data[0] if result.data else None


def list_student_colleges(email: str) -> list[dict]:
    """List the entries on a student's college list."""
    client = get_supabase()
    result = (
        client.table("student_college_list")
        .select("*")
        .eq("student_email", email)
        .execute()
    )
    return result.data or []


def create_college_list_entry(
    email: str,
    college_id: str,
    category: str,
    application_type: str,
) -> dict:
    """Add a college to a student's list."""
    client = get_supabase()
    data = {
        "student_email": email,
        "college_id": college_id,
        "category": category,
        "application_type": application_type,
    }
    result = client.table("student_college_list").insert(data).execute()
    return result.data[0] if result.data else {}


def get_college_list_entry(entry_id: str) -> dict | None:
    """Get a college list entry by ID."""
    client = get_supabase()
    result = client.table("student_college_list").select("*").eq("id", entry_id).execute()
    return result.data[0] if result.data else None


def delete_college_list_entry(entry_id: str) -> None:
    """Remove a college list entry."""
    client = get_supabase()
    client.table("student_college_list").delete().eq("id", entry_id).execute()
