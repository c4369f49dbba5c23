# File: src/gradebook/controllers/analytics_controller.py

from typing import Optional

from ..db.store import Store
from ..models.assignment import Assignment, Submission, SubmissionStatus
from ..models.course import Course
from ..schemas.analytics import (
    AssignmentAnalytics,
    CourseBreakdown,
    GradingProgress,
    TeacherAnalytics,
)


def _percent(part: int, whole: int) -> float:
    return part / whole * 100 if whole else 0.0


def compute_assignment_analytics(store: Store, assignment_id: str) -> Optional[AssignmentAnalytics]:
    """
    Derive submission statistics for one assignment from the current store.

    Returns None when the assignment does not exist. Nothing is cached: two
    calls with no write in between give the same result.
    """
    # 1️⃣ Load the assignment
    assignment = store.get(Assignment, assignment_id)
    if assignment is None:
        return None

    # 2️⃣ Its submissions and the roster they are measured against
    submissions = store.list(Submission, assignment_id=assignment_id)
    course = store.get(Course, assignment.course_id)
    roster_size = course.roster_size if course else 0

    # 3️⃣ Grading
    graded = [s for s in submissions if s.status == SubmissionStatus.GRADED]
    average_score = sum(s.score or 0 for s in graded) / len(graded) if graded else 0.0

    # 4️⃣ Timeliness; the due date itself still counts as on time
    on_time = [s for s in submissions if s.submitted_at is not None and s.submitted_at <= assignment.due_date]
    late = [s for s in submissions if s.submitted_at is not None and s.submitted_at > assignment.due_date]

    return AssignmentAnalytics(
        assignment_id=assignment_id,
        total_submissions=len(submissions),
        graded_submissions=len(graded),
        average_score=average_score,
        on_time_submissions=len(on_time),
        late_submissions=len(late),
        # Not clamped: a submission from a student outside the roster drives it negative.
        not_submitted=roster_size - len(submissions),
        completion_rate=_percent(len(submissions), roster_size),
    )


def compute_teacher_analytics(store: Store, teacher_id: str, course_id: Optional[str] = None) -> TeacherAnalytics:
    """Dashboard totals for a teacher, optionally narrowed to one course."""
    assignments = store.list(Assignment, teacher_id=teacher_id, course_id=course_id)
    courses = store.list(Course, teacher_id=teacher_id, id=course_id)

    per_assignment = {}
    for assignment in assignments:
        per_assignment[assignment.id] = compute_assignment_analytics(store, assignment.id)
    stats = list(per_assignment.values())

    course_rows = []
    for course in courses:
        course_stats = [per_assignment[a.id] for a in assignments if a.course_id == course.id]
        course_rows.append(CourseBreakdown(
            course_id=course.id,
            code=course.code,
            name=course.name,
            roster_size=course.roster_size,
            assignment_count=len(course_stats),
            average_score=sum(a.average_score for a in course_stats) / (len(course_stats) or 1),
        ))

    grading = [
        GradingProgress(
            assignment_id=a.id,
            title=a.title,
            graded=per_assignment[a.id].graded_submissions,
            pending=per_assignment[a.id].total_submissions - per_assignment[a.id].graded_submissions,
        )
        for a in assignments
    ]

    total_students = sum(c.roster_size for c in courses)
    total_submissions = sum(a.total_submissions for a in stats)

    return TeacherAnalytics(
        teacher_id=teacher_id,
        total_assignments=len(assignments),
        total_students=total_students,
        total_submissions=total_submissions,
        total_graded=sum(a.graded_submissions for a in stats),
        average_score=sum(a.average_score for a in stats) / (len(stats) or 1),
        on_time_submissions=sum(a.on_time_submissions for a in stats),
        late_submissions=sum(a.late_submissions for a in stats),
        not_submitted=sum(a.not_submitted for a in stats),
        completion_rate=_percent(total_submissions, len(assignments) * total_students),
        courses=course_rows,
        grading=grading,
    )
