"""API endpoints for the advice corner: articles, AI advisor and community questions."""

from fastapi import APIRouter, Depends, HTTPException, Query

from college_planner.chains.answer_student_question import AdvisorUnavailableError
from college_planner.core.advice import (
    AdviceNotFoundError,
    ask_advisor,
    get_article,
    list_articles,
    list_featured,
    list_questions,
    post_question,
    upvote_question,
)
from college_planner.core.auth_middleware import AuthContext, require_auth
from college_planner.core.config import get_settings
from college_planner.core.logging import get_logger
from college_planner.core.rate_limiter import check_advisor_rate_limit
from college_planner.core.schemas_advice import (
    AdviceArticleCard,
    AdvisorAnswer,
    AskAdvisorRequest,
    StudentQuestion,
    StudentQuestionCreate,
)

logger = get_logger(__name__)

router = APIRouter()


# ============================================================================
# Articles
# ============================================================================


@router.get("/articles", response_model=list[AdviceArticleCard])
async def list_advice_articles(
    category: str | None = Query(None, description="Article category or all"),
    q: str | None = Query(None, description="Search title, summary and tags"),
    auth: AuthContext = Depends(require_auth),  # noqa: B008
) -> list[AdviceArticleCard]:
    """Published articles, newest first."""
    try:
        return list_articles(category=category, query=q, limit=get_settings().ARTICLE_LIMIT)
    except Exception as e:
        logger.exception("Failed to list advice articles")
        raise HTTPException(status_code=500, detail="Failed to list articles") from e


@router.get("/articles/featured", response_model=list[AdviceArticleCard])
async def list_featured_articles(
    auth: AuthContext = Depends(require_auth),  # noqa: B008
) -> list[AdviceArticleCard]:
    try:
        return list_featured(limit=get_settings().FEATURED_ARTICLE_LIMIT)
    except Exception as e:
        logger.exception("Failed to list featured articles")
        raise HTTPException(status_code=500, detail="Failed to list articles") from e


@router.get("/articles/{article_id}", response_model=AdviceArticleCard)
async def get_advice_article(
    article_id: str,
    auth: AuthContext = Depends(require_auth),  # noqa: B008
) -> AdviceArticleCard:
    try:
        return get_article(article_id)
    except AdviceNotFoundError as e:
        raise HTTPException(status_code=404, detail="Article not found") from e
    except Exception as e:
        logger.exception(f"Failed to get article {article_id}")
        raise HTTPException(status_code=500, detail="Failed to get article") from e


# ============================================================================
# AI advisor
# ============================================================================


@router.post("/ask", response_model=AdvisorAnswer)
async def ask_ai_advisor(
    request: AskAdvisorRequest,
    auth: AuthContext = Depends(require_auth),  # noqa: B008
) -> AdvisorAnswer:
    """
    Ask the AI advisor a private question.

    Rate limited per user. Returns 503 when the advisor is unavailable.
    """
    check_advisor_rate_limit(auth.user_id)

    try:
        return await ask_advisor(request.question, get_settings())
    except AdvisorUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e)) from e
    except Exception as e:
        logger.exception(f"Advisor request failed for user {auth.user_id}")
        raise HTTPException(status_code=500, detail="Failed to answer question") from e


# ============================================================================
# Community questions
# ============================================================================


@router.get("/questions", response_model=list[StudentQuestion])
async def list_community_questions(
    auth: AuthContext = Depends(require_auth),  # noqa: B008
) -> list[StudentQuestion]:
    """Most recent community questions with their answers."""
    try:
        return list_questions(limit=get_settings().COMMUNITY_QUESTION_LIMIT)
    except Exception as e:
        logger.exception("Failed to list community questions")
        raise HTTPException(status_code=500, detail="Failed to list questions") from e


@router.post("/questions", response_model=StudentQuestion, status_code=201)
async def create_community_question(
    data: StudentQuestionCreate,
    auth: AuthContext = Depends(require_auth),  # noqa: B008
) -> StudentQuestion:
    """Post a question to the community board. An AI answer is attached before saving."""
    check_advisor_rate_limit(auth.user_id)

    try:
        return await post_question(data, get_settings())
    except AdvisorUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e)) from e
    except Exception as e:
        logger.exception(f"Failed to post question for user {auth.user_id}")
        raise HTTPException(status_code=500, detail="Failed to post question") from e


@router.post("/questions/{question_id}/upvote", response_model=StudentQuestion)
async def upvote_community_question(
    question_id: str,
    auth: AuthContext = Depends(require_auth),  # noqa: B008
) -> StudentQuestion:
    try:
        return upvote_question(question_id)
    except AdviceNotFoundError as e:
        raise HTTPException(status_code=404, detail="Question not found") from e
    except Exception as e:
        logger.exception(f"Failed to upvote question {question_id}")
        raise HTTPException(status_code=500, detail="Failed to upvote question") from e
