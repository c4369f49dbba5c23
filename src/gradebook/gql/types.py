# File: src/gradebook/gql/types.py

from typing import List, Optional

import strawberry
from strawberry.types import Info

from ..controllers.analytics_controller import compute_assignment_analytics
from ..controllers.assignment_controller import get_assignment
from ..controllers.course_controller import get_course, list_course_assignments, list_course_students
from ..controllers.submission_controller import list_submissions
from ..controllers.user_controller import get_user
from ..models.assignment import Assignment, AssignmentStatus, Submission, SubmissionStatus
from ..models.course import Course
from ..models.user import User, UserRole
from ..schemas.analytics import AssignmentAnalytics, TeacherAnalytics
from ..utils.time import format_datetime

# The model enums double as GraphQL enums.
strawberry.enum(UserRole, name="UserRole")
strawberry.enum(AssignmentStatus, name="AssignmentStatus")
strawberry.enum(SubmissionStatus, name="SubmissionStatus")


@strawberry.type(name="User")
class UserType:
    id: strawberry.ID
    email: str
    name: str
    role: UserRole
    created_at: str
    updated_at: str

    @classmethod
    def from_model(cls, user: User) -> "UserType":
        return cls(
            id=strawberry.ID(user.id),
            email=user.email,
            name=user.name,
            role=user.role,
            created_at=format_datetime(user.created_at),
            updated_at=format_datetime(user.updated_at),
        )


@strawberry.type(name="Analytics")
class AnalyticsType:
    assignment_id: strawberry.ID
    total_submissions: int
    graded_submissions: int
    average_score: float
    on_time_submissions: int
    late_submissions: int
    not_submitted: int
    completion_rate: float

    @classmethod
    def from_schema(cls, analytics: AssignmentAnalytics) -> "AnalyticsType":
        return cls(**analytics.model_dump())


@strawberry.type(name="Assignment")
class AssignmentType:
    id: strawberry.ID
    title: str
    description: str
    due_date: str
    max_score: int
    status: AssignmentStatus
    teacher_id: strawberry.ID
    course_id: strawberry.ID
    attachments: Optional[List[str]]
    created_at: str
    updated_at: str

    @classmethod
    def from_model(cls, assignment: Assignment) -> "AssignmentType":
        return cls(
            id=strawberry.ID(assignment.id),
            title=assignment.title,
            description=assignment.description,
            due_date=format_datetime(assignment.due_date),
            max_score=assignment.max_score,
            status=assignment.status,
            teacher_id=strawberry.ID(assignment.teacher_id),
            course_id=strawberry.ID(assignment.course_id),
            attachments=list(assignment.attachments or []),
            created_at=format_datetime(assignment.created_at),
            updated_at=format_datetime(assignment.updated_at),
        )

    @strawberry.field
    def teacher(self, info: Info) -> Optional[UserType]:
        user = get_user(info.context["store"], self.teacher_id)
        return UserType.from_model(user) if user else None

    @strawberry.field
    def course(self, info: Info) -> Optional["CourseType"]:
        course = get_course(info.context["store"], self.course_id)
        return CourseType.from_model(course) if course else None

    @strawberry.field
    def submissions(self, info: Info) -> Optional[List["SubmissionType"]]:
        return [
            SubmissionType.from_model(s)
            for s in list_submissions(info.context["store"], assignment_id=self.id)
        ]

    @strawberry.field
    def analytics(self, info: Info) -> Optional[AnalyticsType]:
        analytics = compute_assignment_analytics(info.context["store"], self.id)
        return AnalyticsType.from_schema(analytics) if analytics else None


@strawberry.type(name="Submission")
class SubmissionType:
    id: strawberry.ID
    assignment_id: strawberry.ID
    student_id: strawberry.ID
    content: str
    attachments: Optional[List[str]]
    status: SubmissionStatus
    score: Optional[int]
    feedback: Optional[str]
    submitted_at: Optional[str]
    graded_at: Optional[str]
    created_at: str
    updated_at: str

    @classmethod
    def from_model(cls, submission: Submission) -> "SubmissionType":
        return cls(
            id=strawberry.ID(submission.id),
            assignment_id=strawberry.ID(submission.assignment_id),
            student_id=strawberry.ID(submission.student_id),
            content=submission.content,
            attachments=list(submission.attachments or []),
            status=submission.status,
            score=submission.score,
            feedback=submission.feedback,
            submitted_at=format_datetime(submission.submitted_at),
            graded_at=format_datetime(submission.graded_at),
            created_at=format_datetime(submission.created_at),
            updated_at=format_datetime(submission.updated_at),
        )

    @strawberry.field
    def assignment(self, info: Info) -> Optional[AssignmentType]:
        assignment = get_assignment(info.context["store"], self.assignment_id)
        return AssignmentType.from_model(assignment) if assignment else None

    @strawberry.field
    def student(self, info: Info) -> Optional[UserType]:
        user = get_user(info.context["store"], self.student_id)
        return UserType.from_model(user) if user else None


@strawberry.type(name="Course")
class CourseType:
    id: strawberry.ID
    name: str
    code: str
    description: str
    teacher_id: strawberry.ID
    student_ids: List[strawberry.ID]
    created_at: str
    updated_at: str

    @classmethod
    def from_model(cls, course: Course) -> "CourseType":
        return cls(
            id=strawberry.ID(course.id),
            name=course.name,
            code=course.code,
            description=course.description,
            teacher_id=strawberry.ID(course.teacher_id),
            student_ids=[strawberry.ID(s) for s in course.student_ids or []],
            created_at=format_datetime(course.created_at),
            updated_at=format_datetime(course.updated_at),
        )

    @strawberry.field
    def teacher(self, info: Info) -> Optional[UserType]:
        user = get_user(info.context["store"], self.teacher_id)
        return UserType.from_model(user) if user else None

    @strawberry.field
    def students(self, info: Info) -> Optional[List[UserType]]:
        students = list_course_students(info.context["store"], self.student_ids)
        return [UserType.from_model(u) for u in students]

    @strawberry.field
    def assignments(self, info: Info) -> Optional[List[AssignmentType]]:
        assignments = list_course_assignments(info.context["store"], self.id)
        return [AssignmentType.from_model(a) for a in assignments]


@strawberry.type(name="CourseBreakdown")
class CourseBreakdownType:
    course_id: strawberry.ID
    code: str
    name: str
    roster_size: int
    assignment_count: int
    average_score: float


@strawberry.type(name="GradingProgress")
class GradingProgressType:
    assignment_id: strawberry.ID
    title: str
    graded: int
    pending: int


@strawberry.type(name="TeacherAnalytics")
class TeacherAnalyticsType:
    teacher_id: strawberry.ID
    total_assignments: int
    total_students: int
    total_submissions: int
    total_graded: int
    average_score: float
    on_time_submissions: int
    late_submissions: int
    not_submitted: int
    completion_rate: float
    courses: List[CourseBreakdownType]
    grading: List[GradingProgressType]

    @classmethod
    def from_schema(cls, analytics: TeacherAnalytics) -> "TeacherAnalyticsType":
        data = analytics.model_dump(exclude={"courses", "grading"})
        return cls(
            **data,
            courses=[CourseBreakdownType(**c.model_dump()) for c in analytics.courses],
            grading=[GradingProgressType(**g.model_dump()) for g in analytics.grading],
        )
