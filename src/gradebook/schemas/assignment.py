# File: src/gradebook/schemas/assignment.py

from pydantic import BaseModel, Field, field_validator
from typing import Optional, List
from datetime import datetime

from src.gradebook.models.assignment import AssignmentStatus
from src.gradebook.schemas.common import PartialUpdate
from src.gradebook.utils.time import parse_datetime


class AssignmentCreate(BaseModel):
    title: str = Field(..., example="Variables and Data Types")
    description: str = Field(..., example="Complete exercises on variables and basic operations")
    due_date: datetime = Field(..., example="2024-12-20")
    max_score: int = Field(..., example=100)
    teacher_id: str
    course_id: str
    attachments: List[str] = []

    @field_validator("due_date", mode="before")
    @classmethod
    def parse_due_date(cls, value):
        return parse_datetime(value)


class AssignmentUpdate(PartialUpdate):
    title: Optional[str] = None
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    max_score: Optional[int] = None
    status: Optional[AssignmentStatus] = None
    attachments: Optional[List[str]] = None

    @field_validator("due_date", mode="before")
    @classmethod
    def parse_due_date(cls, value):
        if value is None:
            return value
        return parse_datetime(value)


class SubmissionCreate(BaseModel):
    assignment_id: str
    student_id: str
    content: str
    attachments: List[str] = []


class SubmissionUpdate(PartialUpdate):
    content: Optional[str] = None
    attachments: Optional[List[str]] = None


class SubmissionGrade(BaseModel):
    # Not bounded by max_score; out-of-range scores are accepted as-is.
    score: int
    feedback: Optional[str] = None
