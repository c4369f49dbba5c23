# File: src/gradebook/gql/schema.py

from typing import AsyncGenerator, List, Optional

import strawberry
from strawberry.fastapi import GraphQLRouter
from strawberry.types import Info

from ..controllers import (
    analytics_controller,
    assignment_controller,
    course_controller,
    submission_controller,
    user_controller,
)
from ..controllers.subscription_controller import (
    assignment_updates,
    submissions_created,
    submissions_graded,
)
from ..db.store import Store
from ..models.assignment import AssignmentStatus, SubmissionStatus
from ..models.user import UserRole
from ..schemas.assignment import SubmissionGrade
from ..utils.pubsub import EventBus
from .inputs import (
    CreateAssignmentInput,
    CreateCourseInput,
    CreateSubmissionInput,
    UpdateAssignmentInput,
    UpdateCourseInput,
    UpdateSubmissionInput,
)
from .types import (
    AnalyticsType,
    AssignmentType,
    CourseType,
    SubmissionType,
    TeacherAnalyticsType,
    UserType,
)


def _store(info: Info) -> Store:
    return info.context["store"]


def _bus(info: Info) -> EventBus:
    return info.context["bus"]


@strawberry.type
class Query:
    @strawberry.field
    def user(self, info: Info, id: strawberry.ID) -> Optional[UserType]:
        user = user_controller.get_user(_store(info), id)
        return UserType.from_model(user) if user else None

    @strawberry.field
    def users(self, info: Info, role: Optional[UserRole] = None) -> List[UserType]:
        return [UserType.from_model(u) for u in user_controller.list_users(_store(info), role)]

    @strawberry.field
    def assignment(self, info: Info, id: strawberry.ID) -> Optional[AssignmentType]:
        assignment = assignment_controller.get_assignment(_store(info), id)
        return AssignmentType.from_model(assignment) if assignment else None

    @strawberry.field
    def assignments(
        self,
        info: Info,
        teacher_id: Optional[strawberry.ID] = None,
        course_id: Optional[strawberry.ID] = None,
        status: Optional[AssignmentStatus] = None,
    ) -> List[AssignmentType]:
        assignments = assignment_controller.list_assignments(
            _store(info), teacher_id=teacher_id, course_id=course_id, status=status
        )
        return [AssignmentType.from_model(a) for a in assignments]

    @strawberry.field
    def submission(self, info: Info, id: strawberry.ID) -> Optional[SubmissionType]:
        submission = submission_controller.get_submission(_store(info), id)
        return SubmissionType.from_model(submission) if submission else None

    @strawberry.field
    def submissions(
        self,
        info: Info,
        assignment_id: Optional[strawberry.ID] = None,
        student_id: Optional[strawberry.ID] = None,
        status: Optional[SubmissionStatus] = None,
    ) -> List[SubmissionType]:
        submissions = submission_controller.list_submissions(
            _store(info), assignment_id=assignment_id, student_id=student_id, status=status
        )
        return [SubmissionType.from_model(s) for s in submissions]

    @strawberry.field
    def course(self, info: Info, id: strawberry.ID) -> Optional[CourseType]:
        course = course_controller.get_course(_store(info), id)
        return CourseType.from_model(course) if course else None

    @strawberry.field
    def courses(self, info: Info, teacher_id: Optional[strawberry.ID] = None) -> List[CourseType]:
        return [CourseType.from_model(c) for c in course_controller.list_courses(_store(info), teacher_id)]

    @strawberry.field
    def assignment_analytics(self, info: Info, assignment_id: strawberry.ID) -> Optional[AnalyticsType]:
        analytics = analytics_controller.compute_assignment_analytics(_store(info), assignment_id)
        return AnalyticsType.from_schema(analytics) if analytics else None

    @strawberry.field
    def teacher_analytics(
        self,
        info: Info,
        teacher_id: strawberry.ID,
        course_id: Optional[strawberry.ID] = None,
    ) -> TeacherAnalyticsType:
        analytics = analytics_controller.compute_teacher_analytics(_store(info), teacher_id, course_id)
        return TeacherAnalyticsType.from_schema(analytics)


@strawberry.type
class Mutation:
    @strawberry.mutation
    def create_assignment(self, info: Info, input: CreateAssignmentInput) -> AssignmentType:
        assignment = assignment_controller.create_assignment(_store(info), _bus(info), input.to_schema())
        return AssignmentType.from_model(assignment)

    @strawberry.mutation
    def update_assignment(self, info: Info, id: strawberry.ID, input: UpdateAssignmentInput) -> AssignmentType:
        assignment = assignment_controller.update_assignment(_store(info), _bus(info), id, input.to_schema())
        return AssignmentType.from_model(assignment)

    @strawberry.mutation
    def delete_assignment(self, info: Info, id: strawberry.ID) -> bool:
        return assignment_controller.delete_assignment(_store(info), id)

    @strawberry.mutation
    def publish_assignment(self, info: Info, id: strawberry.ID) -> AssignmentType:
        assignment = assignment_controller.publish_assignment(_store(info), _bus(info), id)
        return AssignmentType.from_model(assignment)

    @strawberry.mutation
    def create_submission(self, info: Info, input: CreateSubmissionInput) -> SubmissionType:
        submission = submission_controller.create_submission(_store(info), _bus(info), input.to_schema())
        return SubmissionType.from_model(submission)

    @strawberry.mutation
    def update_submission(self, info: Info, id: strawberry.ID, input: UpdateSubmissionInput) -> SubmissionType:
        submission = submission_controller.update_submission(_store(info), id, input.to_schema())
        return SubmissionType.from_model(submission)

    @strawberry.mutation
    def grade_submission(
        self,
        info: Info,
        id: strawberry.ID,
        score: int,
        feedback: Optional[str] = None,
    ) -> SubmissionType:
        payload = SubmissionGrade(score=score, feedback=feedback)
        submission = submission_controller.grade_submission(_store(info), _bus(info), id, payload)
        return SubmissionType.from_model(submission)

    @strawberry.mutation
    def create_course(self, info: Info, input: CreateCourseInput) -> CourseType:
        course = course_controller.create_course(_store(info), input.to_schema())
        return CourseType.from_model(course)

    @strawberry.mutation
    def update_course(self, info: Info, id: strawberry.ID, input: UpdateCourseInput) -> CourseType:
        course = course_controller.update_course(_store(info), id, input.to_schema())
        return CourseType.from_model(course)


@strawberry.type
class Subscription:
    @strawberry.subscription
    async def assignment_updated(
        self, info: Info, teacher_id: strawberry.ID
    ) -> AsyncGenerator[AssignmentType, None]:
        with assignment_updates(_bus(info), teacher_id) as channel:
            async for assignment in channel:
                yield AssignmentType.from_model(assignment)

    @strawberry.subscription
    async def submission_created(
        self, info: Info, assignment_id: strawberry.ID
    ) -> AsyncGenerator[SubmissionType, None]:
        with submissions_created(_bus(info), assignment_id) as channel:
            async for submission in channel:
                yield SubmissionType.from_model(submission)

    @strawberry.subscription
    async def submission_graded(
        self, info: Info, student_id: strawberry.ID
    ) -> AsyncGenerator[SubmissionType, None]:
        with submissions_graded(_bus(info), student_id) as channel:
            async for submission in channel:
                yield SubmissionType.from_model(submission)


schema = strawberry.Schema(query=Query, mutation=Mutation, subscription=Subscription)


def create_graphql_router(store: Store, bus: EventBus) -> GraphQLRouter:
    """GraphQL over HTTP and websockets, resolving against the given store and bus."""

    async def get_context() -> dict:
        return {"store": store, "bus": bus}

    return GraphQLRouter(schema, context_getter=get_context)
