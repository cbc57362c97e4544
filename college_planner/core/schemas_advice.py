"""Pydantic schemas for the advice corner."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class AdviceCategory(str, Enum):
    COLLEGE_APPS = "College Apps"
    ESSAY_WRITING = "Essay Writing"
    TIME_MANAGEMENT = "Time Management"
    TEST_PREP = "Test Prep"
    ACTIVITIES = "Activities"
    MENTAL_HEALTH = "Mental Health"
    SCHOLARSHIPS = "Scholarships"
    ATHLETICS = "Athletics"
    ACADEMIC_SUCCESS = "Academic Success"
    CAREER_PLANNING = "Career Planning"
    OTHER = "Other"  # community questions only


EXCERPT_LENGTH = 150


# ============================================================================
# Articles
# ============================================================================


class AdviceArticle(BaseModel):
    id: str
    title: str
    summary: Optional[str] = None
    content: Optional[str] = Field(None, description="Markdown body")
    category: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    author: Optional[str] = None
    is_published: bool = True
    is_featured: bool = False
    created_date: Optional[datetime] = None

    @field_validator("tags", mode="before")
    @classmethod
    def _tags_default(cls, value):
        return value or []


class AdviceArticleCard(AdviceArticle):
    """Article plus the excerpt shown on its card."""
    excerpt: str = ""


# ============================================================================
# AI advisor and community questions
# ============================================================================


class _QuestionText(BaseModel):
    question: str = Field(..., min_length=1, max_length=2000)

    @field_validator("question")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Question must not be blank")
        return value.strip()


class AskAdvisorRequest(_QuestionText):
    """A question for the AI advisor."""


class AdvisorAnswer(BaseModel):
    question: str
    answer: str = Field(..., description="Markdown answer")


class StudentQuestionCreate(_QuestionText):
    """A question posted to the community board."""
    category: AdviceCategory = AdviceCategory.OTHER


class StudentQuestion(BaseModel):
    id: str
    question: str
    category: AdviceCategory = AdviceCategory.OTHER
    ai_response: Optional[str] = None
    is_answered: bool = False
    upvotes: int = 0
    created_date: Optional[datetime] = None

    @field_validator("upvotes", mode="before")
    @classmethod
    def _upvotes_default(cls, value):
        return value or 0
