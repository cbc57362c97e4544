"""Tests for database operations with mocked Supabase."""

from unittest.mock import MagicMock, patch

import pytest


def _mock_supabase(data=None):
    """Supabase mock with chained query builder."""
    sb = MagicMock()
    chain = MagicMock()
    chain.execute.return_value = MagicMock(data=data if data is not None else [])
    chain.eq.return_value = chain
    chain.order.return_value = chain
    chain.limit.return_value = chain
    chain.select.return_value = chain
    chain.insert.return_value = chain
    chain.update.return_value = chain
    chain.delete.return_value = chain
    sb.table.return_value = chain
    return sb


class TestStudentProfilesDb:
    def test_get_latest_profile(self):
        from college_planner.db.student_profiles import get_latest_profile

        sb = _mock_supabase([{"id": "p1", "created_by": "ana@example.com"}])
        with patch("college_planner.db.student_profiles.get_supabase", return_value=sb):
            row = get_latest_profile("ana@example.com")

        assert row["id"] == "p1"
        sb.table.assert_called_with("student_profiles")
        chain = sb.table.return_value
        chain.eq.assert_called_with("created_by", "ana@example.com")
        chain.order.assert_called_with("created_date", desc=True)
        chain.limit.assert_called_with(1)

    def test_get_latest_profile_none(self):
        from college_planner.db.student_profiles import get_latest_profile

        with patch("college_planner.db.student_profiles.get_supabase", return_value=_mock_supabase()):
            assert get_latest_profile("ana@example.com") is None

    def test_create_profile_sets_owner(self):
        from college_planner.db.student_profiles import create_profile

        sb = _mock_supabase([{"id": "p1"}])
        with patch("college_planner.db.student_profiles.get_supabase", return_value=sb):
            create_profile("ana@example.com", {"grade": 9})

        sb.table.return_value.insert.assert_called_once_with(
            {"grade": 9, "created_by": "ana@example.com"}
        )


class TestCollegesDb:
    def test_list_active_colleges(self):
        from college_planner.db.colleges import list_active_colleges

        sb = _mock_supabase([{"id": "c1", "name": "Amherst College"}])
        with patch("college_planner.db.colleges.get_supabase", return_value=sb):
            rows = list_active_colleges(limit=50)

        assert rows == [{"id": "c1", "name": "Amherst College"}]
        sb.table.assert_called_with("colleges")
        chain = sb.table.return_value
        chain.eq.assert_called_with("is_active", True)
        chain.order.assert_called_with("name")
        chain.limit.assert_called_with(50)

    def test_create_college_list_entry(self):
        from college_planner.db.colleges import create_college_list_entry

        sb = _mock_supabase([{"id": "e1"}])
        with patch("college_planner.db.colleges.get_supabase", return_value=sb):
            row = create_college_list_entry("ana@example.com", "c1", "Reach", "ED")

        assert row == {"id": "e1"}
        sb.table.assert_called_with("student_college_list")
        sb.table.return_value.insert.assert_called_once_with({
            "student_email": "ana@example.com",
            "college_id": "c1",
            "category": "Reach",
            "application_type": "ED",
        })

    def test_delete_college_list_entry(self):
        from college_planner.db.colleges import delete_college_list_entry

        sb = _mock_supabase()
        with patch("college_planner.db.colleges.get_supabase", return_value=sb):
            delete_college_list_entry("e1")

        sb.table.return_value.delete.assert_called_once()
        sb.table.return_value.eq.assert_called_with("id", "e1")


class TestTasksDb:
    def test_list_tasks_ordered_by_due_date(self):
        from college_planner.db.tasks import list_tasks

        sb = _mock_supabase([{"id": "t1"}])
        with patch("college_planner.db.tasks.get_client", return_value=sb):
            rows = list_tasks("ana@example.com")

        assert rows == [{"id": "t1"}]
        sb.table.assert_called_with("tasks")
        sb.table.return_value.order.assert_called_with("due_date")

    def test_update_task_missing(self):
        from college_planner.db.tasks import update_task

        with patch("college_planner.db.tasks.get_client", return_value=_mock_supabase()):
            assert update_task("missing", {"status": "Completed"}) is None


class TestPortfolioDb:
    @pytest.mark.parametrize(
        "func_name, table",
        [
            ("list_activities", "activities"),
            ("list_essay_projects", "essay_projects"),
            ("list_scholarship_applications", "scholarship_applications"),
        ],
    )
    def test_lists_by_student(self, func_name, table):
        from college_planner.db import portfolio

        sb = _mock_supabase([{"id": "x1"}])
        with patch("college_planner.db.portfolio.get_supabase", return_value=sb):
            rows = getattr(portfolio, func_name)("ana@example.com")

        assert rows == [{"id": "x1"}]
        sb.table.assert_called_with(table)
        sb.table.return_value.eq.assert_called_with("student_email", "ana@example.com")


class TestAdviceDb:
    def test_featured_articles_are_published(self):
        from college_planner.db.advice import list_featured_articles

        sb = _mock_supabase([])
        with patch("college_planner.db.advice.get_supabase", return_value=sb):
            list_featured_articles(limit=3)

        chain = sb.table.return_value
        chain.eq.assert_any_call("is_featured", True)
        chain.eq.assert_any_call("is_published", True)
        chain.limit.assert_called_with(3)

    def test_set_question_upvotes(self):
        from college_planner.db.advice import set_question_upvotes

        sb = _mock_supabase([{"id": "q1", "upvotes": 4}])
        with patch("college_planner.db.advice.get_supabase", return_value=sb):
            row = set_question_upvotes("q1", 4)

        assert row["upvotes"] == 4
        sb.table.assert_called_with("student_questions")
        sb.table.return_value.update.assert_called_once_with({"upvotes": 4})
