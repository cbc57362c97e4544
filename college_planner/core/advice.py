"""Advice corner: article browsing, the AI advisor and community questions."""

from typing import Any, Iterable, Optional

from college_planner.chains.answer_student_question import (
    AnswerStyle,
    answer_student_question,
)
from college_planner.core.config import Settings
from college_planner.core.logging import get_logger
from college_planner.core.schemas_advice import (
    EXCERPT_LENGTH,
    AdviceArticle,
    AdviceArticleCard,
    AdvisorAnswer,
    StudentQuestion,
    StudentQuestionCreate,
)
from college_planner.db import advice as advice_db

logger = get_logger(__name__)

ALL = "all"


class AdviceNotFoundError(Exception):
    """Raised when an article or community question does not exist."""


# ============================================================================
# Articles
# ============================================================================


def article_excerpt(article: AdviceArticle) -> str:
    """The card text: the summary, or the start of the body."""
    if article.summary:
        return article.summary
    content = article.content or ""
    return content[:EXCERPT_LENGTH] + "..."


def _matches_search(article: AdviceArticle, needle: str) -> bool:
    if needle in article.title.lower():
        return True
    if article.summary and needle in article.summary.lower():
        return True
    return any(needle in tag.lower() for tag in article.tags)


def filter_articles(
    articles: Iterable[AdviceArticle],
    category: Optional[str] = None,
    query: Optional[str] = None,
) -> list[AdviceArticle]:
    """
    Filter articles by category and a case-insensitive search.

    The search matches title, summary and tags. None/"all" disables the
    category filter; a blank query disables the search.
    """
    needle = query.strip().lower() if query else ""
    result = []
    for article in articles:
        if category and category != ALL and article.category != category:
            continue
        if needle and not _matches_search(article, needle):
            continue
        result.append(article)
    return result


def to_card(article: AdviceArticle) -> AdviceArticleCard:
    return AdviceArticleCard(**article.model_dump(), excerpt=article_excerpt(article))


def list_articles(
    category: Optional[str] = None,
    query: Optional[str] = None,
    limit: int = 100,
) -> list[AdviceArticleCard]:
    articles = [AdviceArticle(**row) for row in advice_db.list_published_articles(limit)]
    return [to_card(a) for a in filter_articles(articles, category, query)]


def list_featured(limit: int = 3) -> list[AdviceArticleCard]:
    return [to_card(AdviceArticle(**row)) for row in advice_db.list_featured_articles(limit)]


def get_article(article_id: str) -> AdviceArticleCard:
    row = advice_db.get_article(article_id)
    if not row:
        raise AdviceNotFoundError(f"Article {article_id} not found")
    return to_card(AdviceArticle(**row))


# ============================================================================
# AI advisor and community questions
# ============================================================================


async def ask_advisor(question: str, settings: Settings) -> AdvisorAnswer:
    """Answer a private question from the advisor box."""
    answer = await answer_student_question(question, settings, AnswerStyle.ADVISOR)
    return AdvisorAnswer(question=question, answer=answer)


def list_questions(limit: int = 20) -> list[StudentQuestion]:
    return [StudentQuestion(**row) for row in advice_db.list_student_questions(limit)]


async def post_question(data: StudentQuestionCreate, settings: Settings) -> StudentQuestion:
    """
    Post a community question with an AI answer attached.

    The question is only stored once an answer exists.
    """
    answer = await answer_student_question(data.question, settings, AnswerStyle.COMMUNITY)
    fields: dict[str, Any] = {
        "question": data.question,
        "category": data.category.value,
        "ai_response": answer,
        "is_answered": True,
    }
    row = advice_db.create_student_question(fields)
    logger.info(f"Posted community question in {data.category.value}")
    return StudentQuestion(**row)


def upvote_question(question_id: str) -> StudentQuestion:
    """
    Add one upvote to a community question.

    Raises:
        AdviceNotFoundError: If the question does not exist
    """
    row = advice_db.get_student_question(question_id)
    if not row:
        raise AdviceNotFoundError(f"Question {question_id} not found")

    updated = advice_db.set_question_upvotes(question_id, (row.get("upvotes") or 0) + 1)
    if not updated:
        raise AdviceNotFoundError(f"Question {question_id} not found")
    return StudentQuestion(**updated)
