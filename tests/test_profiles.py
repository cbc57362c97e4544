"""Tests for the student profile service and schema."""

from unittest.mock import patch

import pytest
from pydantic import ValidationError

from college_planner.core.profiles import get_current_profile, save_profile
from college_planner.core.schemas_profiles import StudentProfileUpdate, split_comma_list

EMAIL = "ana@example.com"


def _profile_row(**overrides):
    row = {"id": "p1", "created_by": EMAIL, "grade": 10, "is_athlete": False}
    row.update(overrides)
    return row


class TestProfileSchema:
    def test_state_is_uppercased(self):
        assert StudentProfileUpdate(state="ca").state == "CA"

    def test_unknown_state_rejected(self):
        with pytest.raises(ValidationError):
            StudentProfileUpdate(state="ZZ")

    def test_grade_range(self):
        assert StudentProfileUpdate(grade=12).grade == 12
        with pytest.raises(ValidationError):
            StudentProfileUpdate(grade=13)
        with pytest.raises(ValidationError):
            StudentProfileUpdate(grade=5)

    def test_comma_lists_are_split(self):
        data = StudentProfileUpdate(intended_majors="Biology, , Chemistry ")
        assert data.intended_majors == ["Biology", "Chemistry"]

    def test_split_comma_list(self):
        assert split_comma_list(None) is None
        assert split_comma_list([" West Coast ", ""]) == ["West Coast"]

    def test_financial_aid_importance_range(self):
        with pytest.raises(ValidationError):
            StudentProfileUpdate(financial_aid_importance=6)


class TestProfileService:
    @patch("college_planner.core.profiles.get_latest_profile")
    def test_get_current_profile_none(self, mock_latest):
        mock_latest.return_value = None
        assert get_current_profile(EMAIL) is None

    @patch("college_planner.core.profiles.get_latest_profile")
    def test_get_current_profile(self, mock_latest):
        mock_latest.return_value = _profile_row(first_name="Ana")
        profile = get_current_profile(EMAIL)
        assert profile.first_name == "Ana"
        assert profile.created_by == EMAIL

    @patch("college_planner.core.profiles.create_profile")
    @patch("college_planner.core.profiles.get_latest_profile")
    def test_first_save_creates_with_defaults(self, mock_latest, mock_create):
        mock_latest.return_value = None
        mock_create.return_value = _profile_row(id="new", grade=9, first_name="Ana")

        profile = save_profile(EMAIL, StudentProfileUpdate(first_name="Ana"))

        mock_create.assert_called_once_with(
            EMAIL, {"grade": 9, "is_athlete": False, "first_name": "Ana"}
        )
        assert profile.id == "new"

    @patch("college_planner.core.profiles.create_profile")
    @patch("college_planner.core.profiles.get_latest_profile")
    def test_submitted_grade_overrides_default(self, mock_latest, mock_create):
        mock_latest.return_value = None
        mock_create.return_value = _profile_row(grade=11)

        save_profile(EMAIL, StudentProfileUpdate(grade=11))

        _, fields = mock_create.call_args[0]
        assert fields["grade"] == 11

    @patch("college_planner.core.profiles.update_profile")
    @patch("college_planner.core.profiles.get_latest_profile")
    def test_later_save_updates_only_sent_fields(self, mock_latest, mock_update):
        mock_latest.return_value = _profile_row()
        mock_update.return_value = _profile_row(gpa_weighted=4.1)

        profile = save_profile(EMAIL, StudentProfileUpdate(gpa_weighted=4.1))

        mock_update.assert_called_once_with("p1", {"gpa_weighted": 4.1})
        assert profile.gpa_weighted == 4.1

    @patch("college_planner.core.profiles.update_profile")
    @patch("college_planner.core.profiles.get_latest_profile")
    def test_empty_save_leaves_profile_untouched(self, mock_latest, mock_update):
        mock_latest.return_value = _profile_row()

        profile = save_profile(EMAIL, StudentProfileUpdate())

        mock_update.assert_not_called()
        assert profile.id == "p1"
