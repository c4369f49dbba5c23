# File: src/gradebook/db/seed.py
import logging
from datetime import datetime

from src.gradebook.db.store import Store
from src.gradebook.models import (
    Assignment, AssignmentStatus, Course, Submission, SubmissionStatus, User, UserRole,
)

logger = logging.getLogger(__name__)


def seed_store(store: Store) -> None:
    """Load the demo dataset: two teachers, twenty students, two courses, three assignments."""
    created = datetime(2024, 1, 1)

    teachers = [
        User(id="1", email="john.doe@school.edu", name="John Doe", role=UserRole.TEACHER,
             created_at=created, updated_at=created),
        User(id="2", email="jane.smith@school.edu", name="Jane Smith", role=UserRole.TEACHER,
             created_at=created, updated_at=created),
    ]
    students = [
        User(id=f"student-{i}", email=f"student{i}@school.edu", name=f"Student {i}",
             role=UserRole.STUDENT, created_at=created, updated_at=created)
        for i in range(1, 21)
    ]
    for user in teachers + students:
        store.put(user)

    course1 = Course(
        id="course-1",
        name="Introduction to Computer Science",
        code="CS101",
        description="Learn the fundamentals of programming and computer science",
        teacher_id="1",
        student_ids=[s.id for s in students[:10]],
        created_at=created,
        updated_at=created,
    )
    course2 = Course(
        id="course-2",
        name="Web Development",
        code="CS201",
        description="Build modern web applications with React and Node.js",
        teacher_id="1",
        student_ids=[s.id for s in students[10:20]],
        created_at=created,
        updated_at=created,
    )
    store.put(course1)
    store.put(course2)

    assignment1 = Assignment(
        id="assignment-1",
        title="Variables and Data Types",
        description="Complete exercises on variables, data types, and basic operations",
        due_date=datetime(2024, 12, 20),
        max_score=100,
        status=AssignmentStatus.PUBLISHED,
        teacher_id="1",
        course_id=course1.id,
        attachments=[],
        created_at=datetime(2024, 12, 1),
        updated_at=datetime(2024, 12, 1),
    )
    assignment2 = Assignment(
        id="assignment-2",
        title="Build a Todo App",
        description="Create a full-stack todo application with CRUD operations",
        due_date=datetime(2024, 12, 25),
        max_score=150,
        status=AssignmentStatus.PUBLISHED,
        teacher_id="1",
        course_id=course2.id,
        attachments=[],
        created_at=datetime(2024, 12, 5),
        updated_at=datetime(2024, 12, 5),
    )
    assignment3 = Assignment(
        id="assignment-3",
        title="Loops and Functions",
        description="Practice writing loops and functions to solve problems",
        due_date=datetime(2024, 12, 30),
        max_score=100,
        status=AssignmentStatus.DRAFT,
        teacher_id="1",
        course_id=course1.id,
        attachments=[],
        created_at=datetime(2024, 12, 10),
        updated_at=datetime(2024, 12, 10),
    )
    for assignment in (assignment1, assignment2, assignment3):
        store.put(assignment)

    # assignment-1: seven submissions, the first four graded 70..100
    for index, student_id in enumerate(course1.student_ids[:7]):
        graded = index < 4
        store.put(Submission(
            id=f"submission-{assignment1.id}-{student_id}",
            assignment_id=assignment1.id,
            student_id=student_id,
            content=f"This is my submission for {assignment1.title}",
            attachments=[],
            status=SubmissionStatus.GRADED if graded else SubmissionStatus.SUBMITTED,
            score=70 + index * 10 if graded else None,
            feedback="Good work! Keep it up." if graded else None,
            submitted_at=datetime(2024, 12, 18),
            graded_at=datetime(2024, 12, 19) if graded else None,
            created_at=datetime(2024, 12, 18),
            updated_at=datetime(2024, 12, 19),
        ))

    # assignment-2: five submissions, the first two graded 120 and 135
    for index, student_id in enumerate(course2.student_ids[:5]):
        graded = index < 2
        store.put(Submission(
            id=f"submission-{assignment2.id}-{student_id}",
            assignment_id=assignment2.id,
            student_id=student_id,
            content="Here is my todo app implementation",
            attachments=[],
            status=SubmissionStatus.GRADED if graded else SubmissionStatus.SUBMITTED,
            score=120 + index * 15 if graded else None,
            feedback="Excellent implementation!" if graded else None,
            submitted_at=datetime(2024, 12, 23),
            graded_at=datetime(2024, 12, 24) if graded else None,
            created_at=datetime(2024, 12, 23),
            updated_at=datetime(2024, 12, 24),
        ))

    logger.info(f"Seeded store with {len(teachers) + len(students)} users, 2 courses and 3 assignments")
