# src/gradebook/models/__init__.py

# Centralizes the table models so SQLModel's metadata knows every table
# before the store calls create_all().

from .user import User, UserRole
from .course import Course
from .assignment import Assignment, AssignmentStatus, Submission, SubmissionStatus


__all__ = [
    "User",
    "UserRole",
    "Course",
    "Assignment",
    "AssignmentStatus",
    "Submission",
    "SubmissionStatus",
]
