import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from overseas.core.constants import EnrollmentStatusEnum
from tests.helpers.factories import enroll, make_course


def test_access_requires_authentication(client: TestClient, db_session: Session):
    course = make_course(db_session)
    response = client.get(f"/api/courses/{course.id}/access")
    assert response.status_code == 401


def test_access_to_unpublished_course_is_not_found(client: TestClient, db_session: Session, student_headers):
    course = make_course(db_session, is_published=False)
    response = client.get(f"/api/courses/{course.id}/access", headers=student_headers)
    assert response.status_code == 404
    assert response.json()["error"]["message"] == "Course not found or not published"


def test_free_course_is_open_without_enrollment(client: TestClient, db_session: Session, student_headers):
    course = make_course(db_session)
    response = client.get(f"/api/courses/{course.id}/access", headers=student_headers)
    assert response.status_code == 200, response.text
    body = response.json()
    assert body["hasAccess"] is True
    assert body["reason"] == "Free course"
    assert body["enrollment"] is None
    assert body["course"]["id"] == course.id


def test_paid_course_without_enrollment_is_restricted(client: TestClient, db_session: Session, student_headers):
    course = make_course(db_session, price=4999, currency="INR")
    body = client.get(f"/api/courses/{course.id}/access", headers=student_headers).json()
    assert body["hasAccess"] is False
    assert body["reason"] == "Not enrolled"
    assert body["enrollment"] is None
    assert body["progress"] == 0


@pytest.mark.parametrize("enrollment_status", [EnrollmentStatusEnum.ACTIVE, EnrollmentStatusEnum.COMPLETED])
def test_access_granting_enrollments_open_paid_course(
    client: TestClient, db_session: Session, student, student_headers, enrollment_status
):
    course = make_course(db_session, price=4999, currency="INR")
    enroll(db_session, user=student, course=course, status=enrollment_status, progress=50)

    body = client.get(f"/api/courses/{course.id}/access", headers=student_headers).json()
    assert body["hasAccess"] is True
    assert body["reason"] == "Active enrollment"
    assert body["enrollment"]["status"] == enrollment_status.value
    assert body["progress"] == 50


@pytest.mark.parametrize("enrollment_status", [EnrollmentStatusEnum.SUSPENDED, EnrollmentStatusEnum.CANCELLED])
def test_inactive_enrollment_does_not_open_paid_course(
    client: TestClient, db_session: Session, student, student_headers, enrollment_status
):
    course = make_course(db_session, price=4999, currency="INR")
    enroll(db_session, user=student, course=course, status=enrollment_status, progress=20)

    body = client.get(f"/api/courses/{course.id}/access", headers=student_headers).json()
    assert body["hasAccess"] is False
    assert body["reason"] == "Enrollment not active"
    assert body["enrollment"] is None
    assert body["progress"] == 0


def test_lessons_of_paid_course_need_enrollment(client: TestClient, db_session: Session, student_headers):
    course = make_course(db_session, price=4999, currency="INR")
    response = client.get(f"/api/courses/{course.id}/lessons", headers=student_headers)
    assert response.status_code == 403
    assert response.json()["error"]["message"] == "Access denied - enrollment required"


def test_lessons_tree_is_ordered_and_carries_progress(
    client: TestClient, db_session: Session, student, student_headers
):
    course = make_course(db_session, price=4999, currency="INR", lessons_per_module=(2, 1), unpublished_module=True)
    enroll(db_session, user=student, course=course)

    response = client.get(f"/api/courses/{course.id}/lessons", headers=student_headers)
    assert response.status_code == 200, response.text
    body = response.json()
    assert body["hasAccess"] is True
    assert body["enrollment"]["courseId"] == course.id

    modules = body["modules"]
    assert [m["title"] for m in modules] == ["Module 1", "Module 2"]
    first_lesson = modules[0]["lessons"][0]
    assert first_lesson["title"] == "Lesson 1.1"
    assert first_lesson["type"] == "VIDEO"
    assert first_lesson["orderIndex"] == 0
    assert first_lesson["videoUrl"].endswith("/0/0.mp4")
    assert first_lesson["progress"] == {"isCompleted": False, "progressPercentage": 0, "lastAccessedAt": None}
