# File: src/gradebook/schemas/events.py
import enum
from typing import Literal, Union

from pydantic import BaseModel

from src.gradebook.models.assignment import Assignment, Submission


class EventKind(str, enum.Enum):
    ASSIGNMENT_UPDATED = "ASSIGNMENT_UPDATED"
    SUBMISSION_CREATED = "SUBMISSION_CREATED"
    SUBMISSION_GRADED = "SUBMISSION_GRADED"


class AssignmentUpdated(BaseModel):
    """Published on create, update and publish of an assignment."""
    kind: Literal[EventKind.ASSIGNMENT_UPDATED] = EventKind.ASSIGNMENT_UPDATED
    assignment: Assignment


class SubmissionCreated(BaseModel):
    kind: Literal[EventKind.SUBMISSION_CREATED] = EventKind.SUBMISSION_CREATED
    submission: Submission


class SubmissionGraded(BaseModel):
    kind: Literal[EventKind.SUBMISSION_GRADED] = EventKind.SUBMISSION_GRADED
    submission: Submission


Event = Union[AssignmentUpdated, SubmissionCreated, SubmissionGraded]
