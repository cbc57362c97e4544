"""Answer a student's admissions question with the LLM.

Two framings share one call path: the "Ask AI Advisor" box, which answers
privately, and the community board, whose answer is stored with the
question.
"""

from enum import Enum

from anthropic import APIError, AsyncAnthropic

from college_planner.core.config import Settings
from college_planner.core.logging import get_logger

logger = get_logger(__name__)


class AnswerStyle(str, Enum):
    ADVISOR = "advisor"
    COMMUNITY = "community"


class AdvisorUnavailableError(Exception):
    """Raised when no answer can be produced (missing key or provider error)."""


ADVISOR_PROMPT = """You are a college admissions advisor helping a high school student. \
Answer their question with practical, encouraging advice. Keep it conversational and helpful.

Student's question: {question}

Provide a clear, actionable answer in 2-3 paragraphs. Be supportive and realistic."""

COMMUNITY_PROMPT = """You are a college admissions advisor. A student asked: "{question}"

Provide a helpful, encouraging response in 2-3 paragraphs. Be practical and supportive."""

PROMPTS = {
    AnswerStyle.ADVISOR: ADVISOR_PROMPT,
    AnswerStyle.COMMUNITY: COMMUNITY_PROMPT,
}


def build_prompt(question: str, style: AnswerStyle = AnswerStyle.ADVISOR) -> str:
    return PROMPTS[style].format(question=question.strip())


async def answer_student_question(
    question: str,
    settings: Settings,
    style: AnswerStyle = AnswerStyle.ADVISOR,
) -> str:
    """
    Get a markdown answer to a student's question.

    Args:
        question: The student's question (non-blank)
        settings: App settings (API key, model, max tokens)
        style: Advisor box or community board framing

    Returns:
        Markdown answer text

    Raises:
        AdvisorUnavailableError: If the key is missing or the provider call fails
    """
    if not settings.ANTHROPIC_API_KEY:
        raise AdvisorUnavailableError("AI advisor is not configured")

    client = AsyncAnthropic(api_key=settings.ANTHROPIC_API_KEY)
    try:
        response = await client.messages.create(
            model=settings.ADVISOR_MODEL,
            max_tokens=settings.ADVISOR_MAX_TOKENS,
            messages=[{"role": "user", "content": build_prompt(question, style)}],
        )
    except APIError as e:
        logger.error(f"Advisor call failed: {e}")
        raise AdvisorUnavailableError("AI advisor is unavailable right now") from e

    text = "".join(
        block.text for block in response.content if getattr(block, "type", None) == "text"
    ).strip()
    if not text:
        raise AdvisorUnavailableError("AI advisor returned an empty answer")

    logger.info(
        f"Answered {style.value} question",
        extra={"extra_data": {"model": settings.ADVISOR_MODEL, "chars": len(text)}},
    )
    return text
