"""Tests for the advice corner service."""

from unittest.mock import AsyncMock, patch

import pytest

from college_planner.core.advice import (
    AdviceNotFoundError,
    article_excerpt,
    filter_articles,
    get_article,
    list_articles,
    post_question,
    upvote_question,
)
from college_planner.core.schemas_advice import (
    AdviceArticle,
    AdviceCategory,
    StudentQuestionCreate,
)


def _article(article_id="a1", **overrides):
    row = {
        "id": article_id,
        "title": "Writing a Standout Personal Essay",
        "summary": "How to pick a topic that shows who you are.",
        "content": "Start with a moment that changed how you think.",
        "category": "Essay Writing",
        "tags": ["essays", "Common App"],
        "is_published": True,
    }
    row.update(overrides)
    return row


@pytest.fixture
def mock_advice_db():
    with patch("college_planner.core.advice.advice_db") as mock_db:
        yield mock_db


class TestArticles:
    def test_excerpt_prefers_summary(self):
        article = AdviceArticle(**_article())
        assert article_excerpt(article) == "How to pick a topic that shows who you are."

    def test_excerpt_falls_back_to_content(self):
        article = AdviceArticle(**_article(summary=None, content="x" * 400))
        excerpt = article_excerpt(article)
        assert excerpt == "x" * 150 + "..."

    def test_null_tags_become_empty(self):
        assert AdviceArticle(**_article(tags=None)).tags == []

    def test_filter_by_category(self):
        articles = [
            AdviceArticle(**_article("a1")),
            AdviceArticle(**_article("a2", category="Test Prep")),
        ]
        assert [a.id for a in filter_articles(articles, category="Test Prep")] == ["a2"]
        assert len(filter_articles(articles, category="all")) == 2

    def test_search_matches_title_summary_and_tags(self):
        articles = [
            AdviceArticle(**_article("a1")),
            AdviceArticle(**_article("a2", title="SAT Basics", summary="Timing", tags=["testing"])),
        ]
        assert [a.id for a in filter_articles(articles, query="PERSONAL")] == ["a1"]
        assert [a.id for a in filter_articles(articles, query="timing")] == ["a2"]
        assert [a.id for a in filter_articles(articles, query="common app")] == ["a1"]
        assert len(filter_articles(articles, query="  ")) == 2

    def test_list_articles_builds_cards(self, mock_advice_db):
        mock_advice_db.list_published_articles.return_value = [
            _article("a1"),
            _article("a2", category="Scholarships"),
        ]

        cards = list_articles(category="Scholarships", limit=25)

        mock_advice_db.list_published_articles.assert_called_once_with(25)
        assert [c.id for c in cards] == ["a2"]
        assert cards[0].excerpt

    def test_get_missing_article(self, mock_advice_db):
        mock_advice_db.get_article.return_value = None
        with pytest.raises(AdviceNotFoundError):
            get_article("nope")


class TestCommunityQuestions:
    def test_upvote_adds_one(self, mock_advice_db):
        mock_advice_db.get_student_question.return_value = {
            "id": "q1", "question": "When should I start?", "upvotes": None,
        }
        mock_advice_db.set_question_upvotes.return_value = {
            "id": "q1", "question": "When should I start?", "upvotes": 1,
        }

        question = upvote_question("q1")

        mock_advice_db.set_question_upvotes.assert_called_once_with("q1", 1)
        assert question.upvotes == 1

    def test_upvote_missing_question(self, mock_advice_db):
        mock_advice_db.get_student_question.return_value = None
        with pytest.raises(AdviceNotFoundError):
            upvote_question("missing")
        mock_advice_db.set_question_upvotes.assert_not_called()

    @pytest.mark.asyncio
    async def test_post_question_stores_ai_answer(self, mock_advice_db):
        mock_advice_db.create_student_question.return_value = {
            "id": "q1",
            "question": "How many APs should I take?",
            "category": "Academic Success",
            "ai_response": "Take what you can handle.",
            "is_answered": True,
        }

        with patch(
            "college_planner.core.advice.answer_student_question",
            new_callable=AsyncMock,
            return_value="Take what you can handle.",
        ):
            question = await post_question(
                StudentQuestionCreate(
                    question="How many APs should I take?",
                    category=AdviceCategory.ACADEMIC_SUCCESS,
                ),
                settings=None,
            )

        fields = mock_advice_db.create_student_question.call_args[0][0]
        assert fields == {
            "question": "How many APs should I take?",
            "category": "Academic Success",
            "ai_response": "Take what you can handle.",
            "is_answered": True,
        }
        assert question.is_answered
        assert question.upvotes == 0

    def test_question_must_not_be_blank(self):
        from pydantic import ValidationError

        with pytest.raises(ValidationError):
            StudentQuestionCreate(question="   ")
