"""Database access layer for advice articles and community questions."""

from typing import Any

from college_planner.db.supabase_client import get_supabase


# ============================================================================
# Articles
# ============================================================================


def list_published_articles(limit: int = 100) -> list[dict]:
    """List published articles, newest first."""
    client = get_supabase()
    result = (
        client.table("advice_articles")
        .select("*")
        .eq("is_published", True)
        .order("created_date", desc=True)
        .limit(limit)
        .execute()
    )
    return result.data or []


def list_featured_articles(limit: int = 3) -> list[dict]:
    """List published, featured articles, newest first."""
    client = get_supabase()
    result = (
        client.table("advice_articles")
        .select("*")
        .eq("is_featured", True)
        .eq("is_published", True)
        .order("created_date", desc=True)
        .limit(limit)
        .execute()
    )
    return result.data or []


def get_article(article_id: str) -> dict | None:
    """Get a published article by ID."""
    client = get_supabase()
    result = (
        client.table("advice_articles")
        .select("*")
        .eq("id", article_id)
        .eq("is_published", True)
        .execute()
    )
    return result.data[0] if result.data else None


# ============================================================================
# Community questions
# ============================================================================


def list_student_questions(limit: int = 20) -> list[dict]:
    """List community questions, newest first."""
    client = get_supabase()
    result = (
        client.table("student_questions")
        .select("*")
        .order("created_date", desc=True)
        .limit(limit)
        .execute()
    )
    return result.data or []


def get_student_question(question_id: str) -> dict | None:
    client = get_supabase()
    result = client.table("student_questions").select("*").eq("id", question_id).execute()
    return result.data[0] if result.data else None


def create_student_question(fields: dict[str, Any]) -> dict:
    """Store a community question."""
    client = get_supabase()
    result = client.table("student_questions").insert(fields).execute()
    return result.data[0] if result.data else {}


def set_question_upvotes(question_id: str, upvotes: int) -> dict | None:
    client = get_supabase()
    result = (
        client.table("student_questions")
        .update({"upvotes": upvotes})
        .eq("id", question_id)
        .execute()
    )
    return result.data[0] if result.data else None
