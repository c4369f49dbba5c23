# File: src/gradebook/models/assignment.py
import enum
from typing import List, Optional

from pydantic import NaiveDatetime
from sqlalchemy import DateTime, Enum as SQLAlchemyEnum
from sqlmodel import SQLModel, Field, Column, JSON

from src.gradebook.utils.time import utc_now


class AssignmentStatus(str, enum.Enum):
    DRAFT = "DRAFT"
    PUBLISHED = "PUBLISHED"
    GRADING = "GRADING"
    COMPLETED = "COMPLETED"
    ARCHIVED = "ARCHIVED"


class SubmissionStatus(str, enum.Enum):
    NOT_SUBMITTED = "NOT_SUBMITTED"
    SUBMITTED = "SUBMITTED"
    GRADED = "GRADED"
    LATE = "LATE"


class Assignment(SQLModel, table=True):
    __tablename__ = "assignment"
    __table_args__ = {"extend_existing": True}

    id: str = Field(primary_key=True)
    title: str
    description: str = ""
    # Naive UTC like every timestamp here, compared directly with submitted_at.
    due_date: NaiveDatetime = Field(sa_type=DateTime)
    max_score: int
    status: AssignmentStatus = Field(default=AssignmentStatus.DRAFT, sa_column=Column(SQLAlchemyEnum(AssignmentStatus)))
    teacher_id: str = Field(index=True)
    course_id: str = Field(index=True)
    attachments: List[str] = Field(sa_type=JSON, default_factory=list)
    created_at: NaiveDatetime = Field(default_factory=utc_now, sa_type=DateTime)
    updated_at: NaiveDatetime = Field(default_factory=utc_now, sa_type=DateTime)


class Submission(SQLModel, table=True):
    __tablename__ = "submission"
    __table_args__ = {"extend_existing": True}

    id: str = Field(primary_key=True)
    # No foreign keys: deleting an assignment cascades in the controller.
    assignment_id: str = Field(index=True)
    student_id: str = Field(index=True)
    content: str = ""
    attachments: List[str] = Field(sa_type=JSON, default_factory=list)
    status: SubmissionStatus = Field(default=SubmissionStatus.NOT_SUBMITTED, sa_column=Column(SQLAlchemyEnum(SubmissionStatus)))
    score: Optional[int] = Field(default=None, nullable=True)
    feedback: Optional[str] = Field(default=None, nullable=True)
    submitted_at: Optional[NaiveDatetime] = Field(default=None, sa_type=DateTime)
    graded_at: Optional[NaiveDatetime] = Field(default=None, sa_type=DateTime)
    created_at: NaiveDatetime = Field(default_factory=utc_now, sa_type=DateTime)
    updated_at: NaiveDatetime = Field(default_factory=utc_now, sa_type=DateTime)
