import unittest
from datetime import datetime

from src.gradebook.models import Assignment, Submission
from src.gradebook.schemas.events import AssignmentUpdated, EventKind, SubmissionGraded
from src.gradebook.utils.pubsub import EventBus


def assignment_event(teacher_id="1"):
    return AssignmentUpdated(assignment=Assignment(
        id="a1", title="T", description="", due_date=datetime(2024, 12, 20), max_score=10,
        teacher_id=teacher_id, course_id="c1",
    ))


class EventBusTests(unittest.TestCase):
    def setUp(self):
        self.bus = EventBus()

    def test_publish_reaches_listeners_in_registration_order(self):
        calls = []
        self.bus.subscribe(EventKind.ASSIGNMENT_UPDATED, lambda e: calls.append("first"))
        self.bus.subscribe(EventKind.ASSIGNMENT_UPDATED, lambda e: calls.append("second"))

        self.bus.publish(assignment_event())
        self.assertEqual(calls, ["first", "second"])

    def test_payload_is_passed_by_reference(self):
        received = []
        self.bus.subscribe(EventKind.ASSIGNMENT_UPDATED, received.append)
        event = assignment_event()
        self.bus.publish(event)
        self.assertIs(received[0], event)

    def test_listeners_only_see_their_own_kind(self):
        received = []
        self.bus.subscribe(EventKind.SUBMISSION_GRADED, received.append)
        self.bus.publish(assignment_event())
        self.assertEqual(received, [])

        graded = SubmissionGraded(submission=Submission(id="s1", assignment_id="a1", student_id="student-5"))
        self.bus.publish(graded)
        self.assertEqual(received, [graded])

    def test_publish_without_listeners_is_a_no_op(self):
        self.bus.publish(assignment_event())

    def test_unsubscribe_is_idempotent_and_leaves_others_alone(self):
        first, second = [], []
        unsubscribe = self.bus.subscribe(EventKind.ASSIGNMENT_UPDATED, first.append)
        self.bus.subscribe(EventKind.ASSIGNMENT_UPDATED, second.append)

        unsubscribe()
        unsubscribe()
        self.bus.publish(assignment_event())

        self.assertEqual(first, [])
        self.assertEqual(len(second), 1)
        self.assertEqual(self.bus.listener_count(EventKind.ASSIGNMENT_UPDATED), 1)

    def test_same_listener_registered_twice_is_removed_once_per_handle(self):
        calls = []
        listener = calls.append
        unsubscribe = self.bus.subscribe(EventKind.ASSIGNMENT_UPDATED, listener)
        self.bus.subscribe(EventKind.ASSIGNMENT_UPDATED, listener)

        unsubscribe()
        self.bus.publish(assignment_event())
        self.assertEqual(len(calls), 1)

    def test_listener_errors_propagate_to_publisher(self):
        def broken(event):
            raise RuntimeError("listener failed")

        later = []
        self.bus.subscribe(EventKind.ASSIGNMENT_UPDATED, broken)
        self.bus.subscribe(EventKind.ASSIGNMENT_UPDATED, later.append)

        with self.assertRaises(RuntimeError):
            self.bus.publish(assignment_event())
        self.assertEqual(later, [])

    def test_listener_may_unsubscribe_during_publish(self):
        calls = []

        def once(event):
            calls.append(event)
            unsubscribe()

        unsubscribe = self.bus.subscribe(EventKind.ASSIGNMENT_UPDATED, once)
        self.bus.publish(assignment_event())
        self.bus.publish(assignment_event())
        self.assertEqual(len(calls), 1)
