"""Pydantic schemas for student profiles."""

from datetime import date, datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

US_STATES = [
    "AL", "AK", "AZ", "AR", "CA", "CO", "CT", "DE", "FL", "GA", "HI", "ID", "IL",
    "IN", "IA", "KS", "KY", "LA", "ME", "MD", "MA", "MI", "MN", "MS", "MO", "MT",
    "NE", "NV", "NH", "NJ", "NM", "NY", "NC", "ND", "OH", "OK", "OR", "PA", "RI",
    "SC", "SD", "TN", "TX", "UT", "VT", "VA", "WA", "WV", "WI", "WY",
]

DEFAULT_GRADE = 9


class SchoolType(str, Enum):
    PUBLIC = "Public"
    PRIVATE = "Private"
    CHARTER = "Charter"
    HOMESCHOOL = "Homeschool"


class CollegeTier(str, Enum):
    HIGHLY_SELECTIVE = "Highly Selective"
    SELECTIVE = "Selective"
    OPEN_ADMISSION = "Open Admission"
    UNDECIDED = "Undecided"


def split_comma_list(value: Any) -> Any:
    """Turn "a, b,,c" into ["a", "b", "c"]; lists are trimmed the same way."""
    if value is None:
        return None
    if isinstance(value, str):
        items = value.split(",")
    elif isinstance(value, (list, tuple)):
        items = [str(v) for v in value]
    else:
        return value
    return [item.strip() for item in items if item.strip()]


class StudentProfileFields(BaseModel):
    """Editable profile fields. Everything is optional."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    birthdate: Optional[date] = None
    grade: Optional[int] = Field(None, ge=6, le=12, description="School grade 6-12")
    state: Optional[str] = Field(None, description="Two-letter US state code")
    school_type: Optional[SchoolType] = None
    school_name: Optional[str] = None
    is_athlete: Optional[bool] = None

    gpa_weighted: Optional[float] = Field(None, ge=0)
    gpa_unweighted: Optional[float] = Field(None, ge=0)
    class_rank: Optional[int] = Field(None, ge=1)
    class_size: Optional[int] = Field(None, ge=1)
    test_scores: Optional[dict[str, Any]] = Field(
        None, description="Test scores keyed by test (sat, act, ...)"
    )

    intended_majors: Optional[list[str]] = None
    career_interests: Optional[list[str]] = None
    target_college_tier: Optional[CollegeTier] = None
    geographic_preferences: Optional[list[str]] = None
    financial_aid_importance: Optional[int] = Field(
        None, ge=1, le=5, description="1 = not important, 5 = critical"
    )

    @field_validator(
        "intended_majors", "career_interests", "geographic_preferences", mode="before"
    )
    @classmethod
    def _split_lists(cls, value: Any) -> Any:
        return split_comma_list(value)

    @field_validator("state", mode="before")
    @classmethod
    def _check_state(cls, value: Any) -> Any:
        if value is None or value == "":
            return None
        code = str(value).strip().upper()
        if code not in US_STATES:
            raise ValueError(f"Unknown US state code: {value}")
        return code


class StudentProfileUpdate(StudentProfileFields):
    """Schema for creating or updating the current student's profile."""


class StudentProfile(StudentProfileFields):
    """Full profile row."""

    id: str
    created_by: str
    created_date: Optional[datetime] = None
