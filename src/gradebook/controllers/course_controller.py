# File: src/gradebook/controllers/course_controller.py

import logging
import uuid
from typing import List, Optional

from ..db.store import Store
from ..models.assignment import Assignment
from ..models.course import Course
from ..models.user import User
from ..schemas.course import CourseCreate, CourseUpdate
from ..utils.exceptions import NotFoundError
from ..utils.time import utc_now

logger = logging.getLogger(__name__)


def get_course(store: Store, course_id: str) -> Optional[Course]:
    return store.get(Course, course_id)


def list_courses(store: Store, teacher_id: Optional[str] = None) -> List[Course]:
    return store.list(Course, teacher_id=teacher_id)


def list_course_students(store: Store, student_ids: List[str]) -> List[User]:
    """Roster members in enrollment order; ids with no matching user are skipped."""
    students = []
    for student_id in student_ids:
        student = store.get(User, student_id)
        if student is not None:
            students.append(student)
    return students


def list_course_assignments(store: Store, course_id: str) -> List[Assignment]:
    return store.list(Assignment, course_id=course_id)


def create_course(store: Store, payload: CourseCreate) -> Course:
    now = utc_now()
    course = Course(
        id=f"course-{uuid.uuid4().hex[:12]}",
        name=payload.name,
        code=payload.code,
        description=payload.description,
        teacher_id=payload.teacher_id,
        student_ids=list(payload.student_ids),
        created_at=now,
        updated_at=now,
    )
    course = store.put(course)
    logger.info(f"Created course {course.id} ({course.code}) with {course.roster_size} student(s)")
    return course


def update_course(store: Store, course_id: str, payload: CourseUpdate) -> Course:
    course = store.get(Course, course_id)
    if course is None:
        logger.warning(f"Course {course_id} not found for update")
        raise NotFoundError("Course not found")

    update_data = payload.model_dump(exclude_unset=True)
    for key, value in update_data.items():
        setattr(course, key, value)
    course.updated_at = utc_now()

    course = store.put(course)
    logger.info(f"Updated course {course_id}")
    return course
