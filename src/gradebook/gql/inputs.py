# File: src/gradebook/gql/inputs.py

import dataclasses
from typing import Any, Dict, List, Optional

import strawberry

from ..models.assignment import AssignmentStatus
from ..schemas.assignment import AssignmentCreate, AssignmentUpdate, SubmissionCreate, SubmissionUpdate
from ..schemas.course import CourseCreate, CourseUpdate


def _provided_fields(data: Any) -> Dict[str, Any]:
    # Fields the client actually sent; an explicit null is kept as None.
    return {
        field.name: getattr(data, field.name)
        for field in dataclasses.fields(data)
        if getattr(data, field.name) is not strawberry.UNSET
    }


@strawberry.input
class CreateAssignmentInput:
    title: str
    description: str
    due_date: str
    max_score: int
    teacher_id: strawberry.ID
    course_id: strawberry.ID
    attachments: Optional[List[str]] = None

    def to_schema(self) -> AssignmentCreate:
        return AssignmentCreate(
            title=self.title,
            description=self.description,
            due_date=self.due_date,
            max_score=self.max_score,
            teacher_id=self.teacher_id,
            course_id=self.course_id,
            attachments=self.attachments or [],
        )


@strawberry.input
class UpdateAssignmentInput:
    title: Optional[str] = strawberry.UNSET
    description: Optional[str] = strawberry.UNSET
    due_date: Optional[str] = strawberry.UNSET
    max_score: Optional[int] = strawberry.UNSET
    status: Optional[AssignmentStatus] = strawberry.UNSET
    attachments: Optional[List[str]] = strawberry.UNSET

    def to_schema(self) -> AssignmentUpdate:
        return AssignmentUpdate(**_provided_fields(self))


@strawberry.input
class CreateSubmissionInput:
    assignment_id: strawberry.ID
    student_id: strawberry.ID
    content: str
    attachments: Optional[List[str]] = None

    def to_schema(self) -> SubmissionCreate:
        return SubmissionCreate(
            assignment_id=self.assignment_id,
            student_id=self.student_id,
            content=self.content,
            attachments=self.attachments or [],
        )


@strawberry.input
class UpdateSubmissionInput:
    content: Optional[str] = strawberry.UNSET
    attachments: Optional[List[str]] = strawberry.UNSET

    def to_schema(self) -> SubmissionUpdate:
        return SubmissionUpdate(**_provided_fields(self))


@strawberry.input
class CreateCourseInput:
    name: str
    code: str
    description: str
    teacher_id: strawberry.ID
    student_ids: List[strawberry.ID]

    def to_schema(self) -> CourseCreate:
        return CourseCreate(
            name=self.name,
            code=self.code,
            description=self.description,
            teacher_id=self.teacher_id,
            student_ids=list(self.student_ids),
        )


@strawberry.input
class UpdateCourseInput:
    name: Optional[str] = strawberry.UNSET
    code: Optional[str] = strawberry.UNSET
    description: Optional[str] = strawberry.UNSET
    student_ids: Optional[List[strawberry.ID]] = strawberry.UNSET

    def to_schema(self) -> CourseUpdate:
        return CourseUpdate(**_provided_fields(self))
