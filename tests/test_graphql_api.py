import unittest

from fastapi.testclient import TestClient

from src.gradebook.main import create_app
from src.gradebook.utils.pubsub import EventBus

from factories import make_store

GRAPHQL_URL = "/api/graphql"


class GraphQLTestCase(unittest.TestCase):
    def setUp(self):
        self.store = make_store()
        self.bus = EventBus()
        self.client = TestClient(create_app(store=self.store, bus=self.bus, seed=True))

    def tearDown(self):
        self.store.dispose()

    def execute(self, query, variables=None):
        response = self.client.post(GRAPHQL_URL, json={"query": query, "variables": variables or {}})
        self.assertEqual(response.status_code, 200)
        return response.json()


class QueryTests(GraphQLTestCase):
    def test_assignment_filters(self):
        result = self.execute('{ assignments(teacherId: "1", status: DRAFT) { id status } }')
        self.assertEqual(result["data"]["assignments"], [{"id": "assignment-3", "status": "DRAFT"}])

    def test_missing_assignment_is_null_not_an_error(self):
        result = self.execute('{ assignment(id: "nope") { id } assignmentAnalytics(assignmentId: "nope") { totalSubmissions } }')
        self.assertNotIn("errors", result)
        self.assertIsNone(result["data"]["assignment"])
        self.assertIsNone(result["data"]["assignmentAnalytics"])

    def test_assignment_analytics_for_seeded_data(self):
        result = self.execute("""
            {
              assignmentAnalytics(assignmentId: "assignment-1") {
                assignmentId totalSubmissions gradedSubmissions averageScore
                onTimeSubmissions lateSubmissions notSubmitted completionRate
              }
            }
        """)
        self.assertEqual(result["data"]["assignmentAnalytics"], {
            "assignmentId": "assignment-1",
            "totalSubmissions": 7,
            "gradedSubmissions": 4,
            "averageScore": 85.0,
            "onTimeSubmissions": 7,
            "lateSubmissions": 0,
            "notSubmitted": 3,
            "completionRate": 70.0,
        })

    def test_field_resolvers_join_related_records(self):
        result = self.execute("""
            {
              assignment(id: "assignment-2") {
                dueDate
                teacher { name role }
                course { code students { id } }
                submissions { id student { email } }
                analytics { averageScore }
              }
            }
        """)
        assignment = result["data"]["assignment"]
        self.assertEqual(assignment["dueDate"], "2024-12-25T00:00:00")
        self.assertEqual(assignment["teacher"], {"name": "John Doe", "role": "TEACHER"})
        self.assertEqual(assignment["course"]["code"], "CS201")
        self.assertEqual(len(assignment["course"]["students"]), 10)
        self.assertEqual(len(assignment["submissions"]), 5)
        self.assertTrue(assignment["submissions"][0]["student"]["email"].endswith("@school.edu"))
        self.assertEqual(assignment["analytics"]["averageScore"], 127.5)

    def test_users_by_role_and_courses_by_teacher(self):
        result = self.execute('{ users(role: TEACHER) { id } courses(teacherId: "2") { id } }')
        self.assertEqual({u["id"] for u in result["data"]["users"]}, {"1", "2"})
        self.assertEqual(result["data"]["courses"], [])

    def test_submissions_filter(self):
        result = self.execute('{ submissions(assignmentId: "assignment-1", status: GRADED) { score } }')
        self.assertEqual(sorted(s["score"] for s in result["data"]["submissions"]), [70, 80, 90, 100])

    def test_teacher_analytics(self):
        result = self.execute("""
            {
              teacherAnalytics(teacherId: "1", courseId: "course-1") {
                totalAssignments totalStudents totalGraded completionRate
                courses { code assignmentCount }
                grading { assignmentId graded pending }
              }
            }
        """)
        analytics = result["data"]["teacherAnalytics"]
        self.assertEqual(analytics["totalAssignments"], 2)
        self.assertEqual(analytics["totalStudents"], 10)
        self.assertEqual(analytics["totalGraded"], 4)
        self.assertAlmostEqual(analytics["completionRate"], 7 / (2 * 10) * 100)
        self.assertEqual(analytics["courses"], [{"code": "CS101", "assignmentCount": 2}])


class MutationTests(GraphQLTestCase):
    CREATE = """
        mutation Create($input: CreateAssignmentInput!) {
          createAssignment(input: $input) { id status dueDate maxScore attachments }
        }
    """

    def _create(self):
        variables = {"input": {
            "title": "Recursion", "description": "Write recursive functions", "dueDate": "2025-01-15",
            "maxScore": 20, "teacherId": "1", "courseId": "course-1",
        }}
        return self.execute(self.CREATE, variables)["data"]["createAssignment"]

    def test_create_then_publish(self):
        created = self._create()
        self.assertEqual(created["status"], "DRAFT")
        self.assertEqual(created["dueDate"], "2025-01-15T00:00:00")
        self.assertEqual(created["attachments"], [])

        result = self.execute('mutation($id: ID!) { publishAssignment(id: $id) { status } }', {"id": created["id"]})
        self.assertEqual(result["data"]["publishAssignment"]["status"], "PUBLISHED")

    def test_update_keeps_fields_not_sent(self):
        result = self.execute("""
            mutation {
              updateAssignment(id: "assignment-1", input: {title: "Renamed", status: GRADING}) {
                title description status
              }
            }
        """)
        updated = result["data"]["updateAssignment"]
        self.assertEqual(updated["title"], "Renamed")
        self.assertEqual(updated["status"], "GRADING")
        self.assertTrue(updated["description"].startswith("Complete exercises"))

    def test_not_found_surfaces_as_single_error(self):
        result = self.execute('mutation { publishAssignment(id: "missing") { id } }')
        self.assertIsNone(result["data"])
        self.assertEqual(len(result["errors"]), 1)
        self.assertEqual(result["errors"][0]["message"], "Assignment not found")

    def test_grade_submission(self):
        result = self.execute("""
            mutation {
              gradeSubmission(id: "submission-assignment-1-student-5", score: 95, feedback: "Great") {
                status score feedback gradedAt
              }
            }
        """)
        graded = result["data"]["gradeSubmission"]
        self.assertEqual((graded["status"], graded["score"], graded["feedback"]), ("GRADED", 95, "Great"))
        self.assertIsNotNone(graded["gradedAt"])

        analytics = self.execute('{ assignmentAnalytics(assignmentId: "assignment-1") { gradedSubmissions } }')
        self.assertEqual(analytics["data"]["assignmentAnalytics"]["gradedSubmissions"], 5)

    def test_create_and_update_submission(self):
        created = self.execute("""
            mutation {
              createSubmission(input: {assignmentId: "assignment-3", studentId: "student-1", content: "v1"}) {
                id status submittedAt
              }
            }
        """)["data"]["createSubmission"]
        self.assertEqual(created["status"], "SUBMITTED")
        self.assertIsNotNone(created["submittedAt"])

        result = self.execute(
            'mutation($id: ID!) { updateSubmission(id: $id, input: {content: "v2"}) { content status } }',
            {"id": created["id"]},
        )
        self.assertEqual(result["data"]["updateSubmission"], {"content": "v2", "status": "SUBMITTED"})

    def test_delete_assignment_cascades(self):
        result = self.execute('mutation { deleteAssignment(id: "assignment-1") }')
        self.assertTrue(result["data"]["deleteAssignment"])

        after = self.execute('{ assignment(id: "assignment-1") { id } submissions(assignmentId: "assignment-1") { id } }')
        self.assertIsNone(after["data"]["assignment"])
        self.assertEqual(after["data"]["submissions"], [])

        again = self.execute('mutation { deleteAssignment(id: "assignment-1") }')
        self.assertFalse(again["data"]["deleteAssignment"])

    def test_course_create_and_update(self):
        created = self.execute("""
            mutation {
              createCourse(input: {name: "Databases", code: "CS305", description: "SQL", teacherId: "2",
                                   studentIds: ["student-1"]}) { id studentIds }
            }
        """)["data"]["createCourse"]
        self.assertEqual(created["studentIds"], ["student-1"])

        result = self.execute(
            'mutation($id: ID!) { updateCourse(id: $id, input: {studentIds: ["student-2", "ghost"]}) '
            '{ code students { id } } }',
            {"id": created["id"]},
        )
        self.assertEqual(result["data"]["updateCourse"], {"code": "CS305", "students": [{"id": "student-2"}]})

    def test_update_course_not_found(self):
        result = self.execute('mutation { updateCourse(id: "missing", input: {name: "x"}) { id } }')
        self.assertEqual(result["errors"][0]["message"], "Course not found")


class RestEndpointTests(GraphQLTestCase):
    def test_health(self):
        response = self.client.get("/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "ok")

    def test_assignment_analytics(self):
        response = self.client.get("/api/analytics/assignments/assignment-2")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["not_submitted"], 5)

    def test_assignment_analytics_missing(self):
        with self.assertLogs("src.gradebook.routers.analytics_router", level="WARNING") as logs:
            response = self.client.get("/api/analytics/assignments/missing")
        self.assertIn("missing", logs.output[0])
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["detail"], "Assignment not found")

    def test_teacher_analytics(self):
        response = self.client.get("/api/analytics/teachers/1", params={"course_id": "course-2"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["total_assignments"], 1)
        self.assertEqual(response.json()["completion_rate"], 50.0)
