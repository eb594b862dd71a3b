"""API tests for course listing, creation and enrollment."""

from __future__ import annotations

import unittest
from unittest.mock import patch

from sqlalchemy.exc import OperationalError

from app.models.course import Course, Enrollment
from api_case import ApiTestCase


class ListCoursesTests(ApiTestCase):
    def test_list_is_public_and_includes_instructor_name(self) -> None:
        teacher = self.register_instructor(name="Grace Hopper")
        self.create_course(teacher["token"], title="Compilers")
        self.create_course(teacher["token"], title="COBOL")

        response = self.client.get("/api/courses")

        self.assertEqual(response.status_code, 200)
        courses = response.json()
        self.assertEqual([course["title"] for course in courses], ["Compilers", "COBOL"])
        self.assertEqual(courses[0]["instructor"], {"name": "Grace Hopper"})
        self.assertEqual(courses[0]["instructor_id"], teacher["user"]["id"])

    def test_empty_list(self) -> None:
        response = self.client.get("/api/courses")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), [])

    def test_store_failure_is_server_error(self) -> None:
        failure = OperationalError("SELECT", {}, Exception("relation courses does not exist"))
        with patch("app.api.endpoints.courses.crud_course.get_courses", side_effect=failure):
            response = self.client.get("/api/courses")
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"error": "Failed to load data"})


class CreateCourseTests(ApiTestCase):
    def test_instructor_creates_course(self) -> None:
        teacher = self.register_instructor()
        course = self.create_course(teacher["token"], title="Rust", category="systems", level="advanced")

        self.assertEqual(course["title"], "Rust")
        self.assertEqual(course["category"], "systems")
        self.assertEqual(course["level"], "advanced")
        self.assertEqual(course["instructor_id"], teacher["user"]["id"])
        self.assertIn("id", course)

    def test_student_is_forbidden_and_nothing_is_written(self) -> None:
        student = self.register()
        response = self.client.post(
            "/api/courses",
            json={"title": "Sneaky", "description": "", "category": "x", "level": "y"},
            headers=self.auth_headers(student["token"]),
        )

        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.json(), {"error": "Instructor access required"})
        db = self.SessionLocal()
        try:
            self.assertEqual(db.query(Course).count(), 0)
        finally:
            db.close()

    def test_requires_token(self) -> None:
        response = self.client.post("/api/courses", json={"title": "No auth"})
        self.assertEqual(response.status_code, 401)

    def test_requires_title(self) -> None:
        teacher = self.register_instructor()
        response = self.client.post(
            "/api/courses", json={"description": "untitled"}, headers=self.auth_headers(teacher["token"])
        )
        self.assertEqual(response.status_code, 400)
        self.assertTrue(response.json()["error"].startswith("title"))


class EnrollTests(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        teacher = self.register_instructor()
        self.course = self.create_course(teacher["token"])
        self.student = self.register()

    def test_enroll_starts_at_zero_progress(self) -> None:
        enrollment = self.enroll(self.student["token"], self.course["id"])

        self.assertEqual(enrollment["user_id"], self.student["user"]["id"])
        self.assertEqual(enrollment["course_id"], self.course["id"])
        self.assertEqual(enrollment["progress"], 0)
        self.assertIn("created_at", enrollment)

    def test_second_enrollment_is_rejected(self) -> None:
        self.enroll(self.student["token"], self.course["id"])
        response = self.client.post(
            f"/api/courses/{self.course['id']}/enroll", headers=self.auth_headers(self.student["token"])
        )

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "Already enrolled"})
        db = self.SessionLocal()
        try:
            self.assertEqual(db.query(Enrollment).count(), 1)
        finally:
            db.close()

    def test_other_users_can_enroll_in_same_course(self) -> None:
        other = self.register(email="other@example.com")
        self.enroll(self.student["token"], self.course["id"])
        enrollment = self.enroll(other["token"], self.course["id"])
        self.assertEqual(enrollment["user_id"], other["user"]["id"])

    def test_unknown_course_is_a_write_error(self) -> None:
        response = self.client.post("/api/courses/4242/enroll", headers=self.auth_headers(self.student["token"]))
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "Failed to save data"})

    def test_non_numeric_course_id_is_bad_request(self) -> None:
        response = self.client.post("/api/courses/abc/enroll", headers=self.auth_headers(self.student["token"]))
        self.assertEqual(response.status_code, 400)

    def test_requires_token(self) -> None:
        response = self.client.post(f"/api/courses/{self.course['id']}/enroll")
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json(), {"error": "Access denied"})


if __name__ == "__main__":
    unittest.main()
