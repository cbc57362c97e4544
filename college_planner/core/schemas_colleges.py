"""Pydantic schemas for the college catalog and a student's college list."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CollegeCategory(str, Enum):
    """Where a college sits on the student's list."""
    REACH = "Reach"
    TARGET = "Target"
    SAFETY = "Safety"


class ApplicationType(str, Enum):
    """Admission plan the student intends to use."""
    EARLY_DECISION = "ED"
    EARLY_DECISION_2 = "ED2"
    EARLY_ACTION = "EA"
    RESTRICTIVE_EARLY_ACTION = "REA"
    REGULAR_DECISION = "RD"


class College(BaseModel):
    """Catalog college. Descriptive columns beyond these pass through."""

    model_config = ConfigDict(extra="allow")

    id: str
    name: str
    city: Optional[str] = None
    state: Optional[str] = None
    is_active: bool = True


class CollegeListEntryCreate(BaseModel):
    """Schema for adding a college to the student's list."""
    college_id: str = Field(..., min_length=1)
    category: CollegeCategory = CollegeCategory.TARGET
    application_type: ApplicationType = ApplicationType.REGULAR_DECISION


class CollegeListEntry(BaseModel):
    """A college on a student's list."""
    id: str
    student_email: str
    college_id: str
    category: CollegeCategory
    application_type: ApplicationType = ApplicationType.REGULAR_DECISION


class CollegeListItem(CollegeListEntry):
    """List entry joined with its catalog record (None if the college was removed)."""
    college: Optional[College] = None


class CollegeListResponse(BaseModel):
    """The student's list grouped by category."""
    total: int
    reach: list[CollegeListItem] = Field(default_factory=list)
    target: list[CollegeListItem] = Field(default_factory=list)
    safety: list[CollegeListItem] = Field(default_factory=list)
