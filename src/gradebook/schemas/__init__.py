# src/gradebook/schemas/__init__.py

from .assignment import (
    AssignmentCreate, AssignmentUpdate, SubmissionCreate, SubmissionUpdate, SubmissionGrade,
)
from .course import CourseCreate, CourseUpdate
from .analytics import AssignmentAnalytics, CourseBreakdown, GradingProgress, TeacherAnalytics
from .events import AssignmentUpdated, SubmissionCreated, SubmissionGraded, Event, EventKind
