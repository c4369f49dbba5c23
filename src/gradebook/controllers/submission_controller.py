# File: src/gradebook/controllers/submission_controller.py

import logging
import uuid
from typing import List, Optional

from ..db.store import Store
from ..models.assignment import Submission, SubmissionStatus
from ..schemas.assignment import SubmissionCreate, SubmissionGrade, SubmissionUpdate
from ..schemas.events import SubmissionCreated, SubmissionGraded
from ..utils.exceptions import NotFoundError
from ..utils.pubsub import EventBus
from ..utils.time import utc_now

logger = logging.getLogger(__name__)


def _get_submission_or_404(store: Store, submission_id: str) -> Submission:
    submission = store.get(Submission, submission_id)
    if submission is None:
        logger.warning(f"Submission {submission_id} not found")
        raise NotFoundError("Submission not found")
    return submission


def get_submission(store: Store, submission_id: str) -> Optional[Submission]:
    return store.get(Submission, submission_id)


def list_submissions(
    store: Store,
    assignment_id: Optional[str] = None,
    student_id: Optional[str] = None,
    status: Optional[SubmissionStatus] = None,
) -> List[Submission]:
    return store.list(Submission, assignment_id=assignment_id, student_id=student_id, status=status)


def create_submission(store: Store, bus: EventBus, payload: SubmissionCreate) -> Submission:
    # The assignment id and roster membership are taken on trust.
    now = utc_now()
    submission = Submission(
        id=f"submission-{uuid.uuid4().hex[:12]}",
        assignment_id=payload.assignment_id,
        student_id=payload.student_id,
        content=payload.content,
        attachments=list(payload.attachments),
        status=SubmissionStatus.SUBMITTED,
        submitted_at=now,
        created_at=now,
        updated_at=now,
    )
    submission = store.put(submission)
    logger.info(f"Student {submission.student_id} submitted {submission.id} for assignment {submission.assignment_id}")

    bus.publish(SubmissionCreated(submission=submission))
    return submission


def update_submission(store: Store, submission_id: str, payload: SubmissionUpdate) -> Submission:
    """Edit a submission's content or attachments. Publishes no event."""
    submission = _get_submission_or_404(store, submission_id)

    update_data = payload.model_dump(exclude_unset=True)
    for key, value in update_data.items():
        setattr(submission, key, value)
    submission.updated_at = utc_now()

    submission = store.put(submission)
    logger.info(f"Updated submission {submission_id}")
    return submission


def grade_submission(store: Store, bus: EventBus, submission_id: str, payload: SubmissionGrade) -> Submission:
    submission = _get_submission_or_404(store, submission_id)

    now = utc_now()
    submission.score = payload.score
    submission.feedback = payload.feedback
    submission.status = SubmissionStatus.GRADED
    submission.graded_at = now
    submission.updated_at = now

    submission = store.put(submission)
    logger.info(f"Graded submission {submission_id} with score {submission.score}")

    bus.publish(SubmissionGraded(submission=submission))
    return submission
