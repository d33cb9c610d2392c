from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from overseas.models.course_enrollment import CourseEnrollment
from tests.helpers.factories import enroll, make_course


def test_enroll_in_free_course(client: TestClient, db_session: Session, student, student_headers):
    course = make_course(db_session)

    response = client.post(f"/api/courses/{course.id}/enroll", headers=student_headers)
    assert response.status_code == 201, response.text
    body = response.json()
    assert body["message"] == "Successfully enrolled in the course!"
    assert body["enrollment"]["status"] == "ACTIVE"
    assert body["enrollment"]["userId"] == student.id

    db_session.refresh(course)
    assert course.total_students == 1


def test_enroll_twice_is_rejected(client: TestClient, db_session: Session, student_headers):
    course = make_course(db_session)
    client.post(f"/api/courses/{course.id}/enroll", headers=student_headers)

    response = client.post(f"/api/courses/{course.id}/enroll", headers=student_headers)
    assert response.status_code == 400
    assert response.json()["error"]["message"] == "You are already enrolled in this course"


def test_enroll_in_paid_course_requires_payment(client: TestClient, db_session: Session, student_headers):
    course = make_course(db_session, price=4999, currency="INR")
    response = client.post(f"/api/courses/{course.id}/enroll", headers=student_headers)
    assert response.status_code == 402
    body = response.json()
    assert body["error"]["code"] == "PAYMENT_REQUIRED"
    assert body["error"]["message"] == "Payment required"


def test_only_students_can_enroll(client: TestClient, db_session: Session, admin_headers):
    course = make_course(db_session)
    response = client.post(f"/api/courses/{course.id}/enroll", headers=admin_headers)
    assert response.status_code == 403
    assert response.json()["error"]["message"] == "Only students can enroll in courses"


def test_enroll_in_unpublished_course_is_rejected(client: TestClient, db_session: Session, student_headers):
    course = make_course(db_session, is_published=False)
    response = client.post(f"/api/courses/{course.id}/enroll", headers=student_headers)
    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Course is not available for enrollment"


def test_enroll_in_missing_course_is_not_found(client: TestClient, student_headers):
    response = client.post("/api/courses/9999/enroll", headers=student_headers)
    assert response.status_code == 404


def test_enroll_in_full_course_is_rejected(
    client: TestClient, db_session: Session, other_student, student_headers
):
    course = make_course(db_session, max_students=1)
    enroll(db_session, user=other_student, course=course)

    response = client.post(f"/api/courses/{course.id}/enroll", headers=student_headers)
    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Course is full. Maximum students limit reached."


def test_unenroll_removes_enrollment(client: TestClient, db_session: Session, student, student_headers):
    course = make_course(db_session)
    enroll(db_session, user=student, course=course, progress=50)

    response = client.delete(f"/api/courses/{course.id}/enroll", headers=student_headers)
    assert response.status_code == 200, response.text
    assert response.json()["message"] == "Successfully unenrolled from the course"

    assert db_session.query(CourseEnrollment).filter_by(user_id=student.id).count() == 0
    db_session.refresh(course)
    assert course.total_students == 0


def test_unenroll_past_half_way_is_refused(client: TestClient, db_session: Session, student, student_headers):
    course = make_course(db_session)
    enroll(db_session, user=student, course=course, progress=51)

    response = client.delete(f"/api/courses/{course.id}/enroll", headers=student_headers)
    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Cannot unenroll after completing 50% of the course"


def test_unenroll_without_enrollment_is_not_found(client: TestClient, db_session: Session, student_headers):
    course = make_course(db_session)
    response = client.delete(f"/api/courses/{course.id}/enroll", headers=student_headers)
    assert response.status_code == 404
    assert response.json()["error"]["message"] == "You are not enrolled in this course"
