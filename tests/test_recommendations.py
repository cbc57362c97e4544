"""Tests for readiness recommendations."""

from college_planner.core.readiness import Recommendation, build_readiness_report
from college_planner.core.readiness.recommendations import select_top_recommendations


def _actions(report):
    return [r.action for r in report.recommendations]


def test_empty_upper_tier_student_gets_top_five_by_impact():
    report = build_readiness_report({"grade": 11}, [], [], [], [])

    assert _actions(report) == [
        "Add 5 more colleges to your list",
        "Finalize 3 more essays",
        "Add your GPA to your profile",
        "Log 3 more activities",
        "Apply to 5 more scholarships",
    ]
    assert report.recommendations[0].impact == "+30%"
    assert report.recommendations[0].area == "colleges"


def test_singular_wording_and_remaining_impact():
    report = build_readiness_report(
        {"grade": 11, "gpa_weighted": 4.0, "test_scores": {"sat": 1400}},
        [{}] * 3,
        [{}] * 4,
        [{"status": "Final"}] * 3,
        [{}] * 5,
    )
    assert len(report.recommendations) == 1
    rec = report.recommendations[0]
    assert rec.action == "Add 1 more college to your list"
    assert rec.impact == "+6%"
    assert rec.priority == 1


def test_recommendation_limit():
    report = build_readiness_report({"grade": 11}, [], [], [], [], recommendation_limit=2)
    assert len(report.recommendations) == 2


def test_select_top_deduplicates_actions():
    recs = [
        Recommendation(action="Log 2 more activities", impact="+10%", area="activities", priority=1),
        Recommendation(action="log 2 more activities ", impact="+5%", area="activities", priority=1),
        Recommendation(action="Finalize 1 more essay", impact="+7%", area="essays", priority=1),
    ]
    top = select_top_recommendations(recs)
    assert [r.action for r in top] == ["Log 2 more activities", "Finalize 1 more essay"]
    assert [r.priority for r in top] == [1, 2]


def test_select_top_empty():
    assert select_top_recommendations([]) == []
