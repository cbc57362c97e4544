"""Database operations for timeline tasks."""

from typing import Any

from college_planner.db.supabase_client import get_supabase as get_client


def list_tasks(email: str) -> list[dict]:
    """List a student's tasks ordered by due date."""
    client = get_client()
    result = (
        client.table("tasks")
        .select("*")
        .eq("student_email", email)
        .order("due_date")
        .execute()
    )
    return result.data or []


def get_task(task_id: str) -> dict | None:
    """Get a task by ID."""
    client = get_client()
    result = client.table("tasks").select("*").eq("id", task_id).execute()
    return result.data[0] if result.data else None


def create_task(email: str, fields: dict[str, Any]) -> dict:
    """Create a task owned by the student."""
    client = get_client()
    data = {**fields, "student_email": email}
    result = client.table("tasks").insert(data).execute()
    return result.data[0] if result.data else {}


def update_task(task_id: str, fields: dict[str, Any]) -> dict | None:
    """Update a task, returning the stored row."""
    client = get_client()
    result = client.table("tasks").update(fields).eq("id", task_id).execute()
    return result.data[0] if result.data else None
