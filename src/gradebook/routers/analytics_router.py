# File: src/gradebook/routers/analytics_router.py

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from ..controllers.analytics_controller import compute_assignment_analytics, compute_teacher_analytics
from ..db.store import Store
from ..schemas.analytics import AssignmentAnalytics, TeacherAnalytics
from ..utils.dependencies import get_store

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Analytics"])


@router.get("/assignments/{assignment_id}", response_model=AssignmentAnalytics)
def assignment_analytics(assignment_id: str, store: Store = Depends(get_store)):
    """Submission statistics for a single assignment."""
    analytics = compute_assignment_analytics(store, assignment_id)
    if analytics is None:
        logger.warning(f"Analytics requested for missing assignment {assignment_id}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Assignment not found")
    return analytics


@router.get("/teachers/{teacher_id}", response_model=TeacherAnalytics)
def teacher_analytics(
    teacher_id: str,
    course_id: Optional[str] = None,
    store: Store = Depends(get_store),
):
    """Dashboard totals across a teacher's assignments, optionally for one course."""
    return compute_teacher_analytics(store, teacher_id, course_id)
