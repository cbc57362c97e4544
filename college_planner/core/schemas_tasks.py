"""Pydantic schemas for the task timeline."""

from datetime import date, datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


# ============================================================================
# Enums
# ============================================================================


class TaskStatus(str, Enum):
    """Status of a task in its lifecycle."""
    NOT_STARTED = "Not Started"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"


class TaskCategory(str, Enum):
    """What part of the application a task belongs to."""
    ACADEMIC = "Academic"
    TESTING = "Testing"
    ESSAY = "Essay"
    LETTER_OF_REC = "Letter of Rec"
    ACTIVITY = "Activity"
    FINANCIAL_AID = "Financial Aid"
    ATHLETIC = "Athletic"
    ADMINISTRATIVE = "Administrative"
    SCHOLARSHIP = "Scholarship"


class TaskPriority(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


DEFAULT_TASK_OWNER = "Student"


# ============================================================================
# Task Schemas
# ============================================================================


class TaskCreate(BaseModel):
    """Schema for creating a task. Title and due date are required."""
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    category: TaskCategory = TaskCategory.ACADEMIC
    owner: str = DEFAULT_TASK_OWNER
    priority: TaskPriority = TaskPriority.MEDIUM
    due_date: date

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Title must not be blank")
        return value.strip()


class TaskUpdate(BaseModel):
    """Schema for updating a task."""
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[TaskCategory] = None
    owner: Optional[str] = None
    priority: Optional[TaskPriority] = None
    due_date: Optional[date] = None
    status: Optional[TaskStatus] = None


class Task(BaseModel):
    """Full task schema."""
    id: str
    student_email: str
    title: str
    description: Optional[str] = None
    category: TaskCategory = TaskCategory.ACADEMIC
    owner: str = DEFAULT_TASK_OWNER
    priority: TaskPriority = TaskPriority.MEDIUM
    due_date: Optional[date] = None
    status: TaskStatus = TaskStatus.NOT_STARTED
    completed_at: Optional[datetime] = None

    @property
    def is_completed(self) -> bool:
        return self.status == TaskStatus.COMPLETED


class TimelineResponse(BaseModel):
    """Tasks grouped relative to today."""
    total: int
    overdue: list[Task] = Field(default_factory=list)
    upcoming: list[Task] = Field(default_factory=list)
    completed: list[Task] = Field(default_factory=list)
