# File: src/gradebook/controllers/assignment_controller.py

import logging
import uuid
from typing import List, Optional

from ..db.store import Store
from ..models.assignment import Assignment, AssignmentStatus, Submission
from ..schemas.assignment import AssignmentCreate, AssignmentUpdate
from ..schemas.events import AssignmentUpdated
from ..utils.exceptions import NotFoundError
from ..utils.pubsub import EventBus
from ..utils.time import utc_now

logger = logging.getLogger(__name__)


def _get_assignment_or_404(store: Store, assignment_id: str) -> Assignment:
    assignment = store.get(Assignment, assignment_id)
    if assignment is None:
        logger.warning(f"Assignment {assignment_id} not found")
        raise NotFoundError("Assignment not found")
    return assignment


def get_assignment(store: Store, assignment_id: str) -> Optional[Assignment]:
    return store.get(Assignment, assignment_id)


def list_assignments(
    store: Store,
    teacher_id: Optional[str] = None,
    course_id: Optional[str] = None,
    status: Optional[AssignmentStatus] = None,
) -> List[Assignment]:
    """Assignments matching every filter given; filters left as None match everything."""
    return store.list(Assignment, teacher_id=teacher_id, course_id=course_id, status=status)


def create_assignment(store: Store, bus: EventBus, payload: AssignmentCreate) -> Assignment:
    now = utc_now()
    assignment = Assignment(
        id=f"assignment-{uuid.uuid4().hex[:12]}",
        title=payload.title,
        description=payload.description,
        due_date=payload.due_date,
        max_score=payload.max_score,
        # New assignments always start as drafts
        status=AssignmentStatus.DRAFT,
        teacher_id=payload.teacher_id,
        course_id=payload.course_id,
        attachments=list(payload.attachments),
        created_at=now,
        updated_at=now,
    )
    assignment = store.put(assignment)
    logger.info(f"Created assignment {assignment.id} for course {assignment.course_id}")

    bus.publish(AssignmentUpdated(assignment=assignment))
    return assignment


def update_assignment(store: Store, bus: EventBus, assignment_id: str, payload: AssignmentUpdate) -> Assignment:
    assignment = _get_assignment_or_404(store, assignment_id)

    update_data = payload.model_dump(exclude_unset=True)
    logger.debug(f"Assignment {assignment_id} update payload: {update_data}")
    for key, value in update_data.items():
        setattr(assignment, key, value)
    assignment.updated_at = utc_now()

    assignment = store.put(assignment)
    logger.info(f"Updated assignment {assignment_id}")

    bus.publish(AssignmentUpdated(assignment=assignment))
    return assignment


def publish_assignment(store: Store, bus: EventBus, assignment_id: str) -> Assignment:
    assignment = _get_assignment_or_404(store, assignment_id)

    assignment.status = AssignmentStatus.PUBLISHED
    assignment.updated_at = utc_now()
    assignment = store.put(assignment)
    logger.info(f"Published assignment {assignment_id}")

    bus.publish(AssignmentUpdated(assignment=assignment))
    return assignment


def delete_assignment(store: Store, assignment_id: str) -> bool:
    """Delete an assignment and every submission made to it. Returns whether it existed."""
    deleted = store.delete(Assignment, assignment_id)

    submissions = store.list(Submission, assignment_id=assignment_id)
    for submission in submissions:
        store.delete(Submission, submission.id)

    if deleted:
        logger.info(f"Deleted assignment {assignment_id} and {len(submissions)} submission(s)")
    else:
        logger.warning(f"Assignment {assignment_id} not found for deletion")
    return deleted
