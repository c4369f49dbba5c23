# File: src/gradebook/schemas/analytics.py
from pydantic import BaseModel, Field
from typing import List


class AssignmentAnalytics(BaseModel):
    """Submission statistics for one assignment, recomputed on every read."""
    assignment_id: str = Field(..., description="Assignment ID")
    total_submissions: int = Field(..., description="Number of submissions received")
    graded_submissions: int = Field(..., description="Number of GRADED submissions")
    average_score: float = Field(..., description="Mean score of graded submissions, 0 when none")
    on_time_submissions: int = Field(..., description="Submitted on or before the due date")
    late_submissions: int = Field(..., description="Submitted after the due date")
    not_submitted: int = Field(..., description="Roster size minus submissions; may be negative")
    completion_rate: float = Field(..., description="Submissions as a percentage of the roster, 0 for an empty roster")


class CourseBreakdown(BaseModel):
    course_id: str
    code: str
    name: str
    roster_size: int
    assignment_count: int
    average_score: float


class GradingProgress(BaseModel):
    assignment_id: str
    title: str
    graded: int
    pending: int


class TeacherAnalytics(BaseModel):
    """Dashboard totals across a teacher's assignments and courses."""
    teacher_id: str
    total_assignments: int
    total_students: int
    total_submissions: int
    total_graded: int
    average_score: float = Field(..., description="Mean of per-assignment average scores")
    on_time_submissions: int
    late_submissions: int
    not_submitted: int
    completion_rate: float = Field(..., description="Submissions over assignments times students, as a percentage")
    courses: List[CourseBreakdown] = []
    grading: List[GradingProgress] = []
