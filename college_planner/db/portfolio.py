"""Database reads for the records the readiness score counts.

Activities, essay projects and scholarship applications are managed by
their own pages in the client; the service only lists them per student.
"""

from college_planner.db.supabase_client import get_supabase


def _list_for_student(table: str, email: str) -> list[dict]:
    client = get_supabase()
    result = client.table(table).select("*").eq("student_email", email).execute()
    return result.data or []


def list_activities(email: str) -> list[dict]:
    """List a student's activities."""
    return _list_for_student("activities", email)


def list_essay_projects(email: str) -> list[dict]:
    """List a student's essay projects (each carries a status)."""
    return _list_for_student("essay_projects", email)


def list_scholarship_applications(email: str) -> list[dict]:
    """List a student's scholarship applications."""
    return _list_for_student("scholarship_applications", email)
