from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from overseas.models.course_enrollment import CourseEnrollment
from overseas.models.lesson import Lesson
from tests.helpers.factories import enroll, lesson_ids, make_course


def _post_progress(client, course_id, headers, lesson_id, percentage, time_spent=None):
    body = {"lessonId": lesson_id, "progressPercentage": percentage}
    if time_spent is not None:
        body["timeSpent"] = time_spent
    return client.post(f"/api/courses/{course_id}/progress", json=body, headers=headers)


def test_first_progress_on_free_course_enrolls_learner(
    client: TestClient, db_session: Session, student, student_headers
):
    course = make_course(db_session, lessons_per_module=(2,))
    first = lesson_ids(course)[0]

    response = _post_progress(client, course.id, student_headers, first, 30, time_spent=45)
    assert response.status_code == 200, response.text
    body = response.json()
    assert body["message"] == "Progress updated successfully"
    assert body["enrollment"]["status"] == "ACTIVE"
    assert body["enrollment"]["progress"] == 0
    assert body["lessonProgress"]["progressPercentage"] == 30
    assert body["lessonProgress"]["timeSpentSeconds"] == 45

    enrollments = db_session.query(CourseEnrollment).filter_by(user_id=student.id, course_id=course.id).all()
    assert len(enrollments) == 1
    db_session.refresh(course)
    assert course.total_students == 1


def test_progress_on_paid_course_needs_active_enrollment(
    client: TestClient, db_session: Session, student_headers
):
    course = make_course(db_session, price=4999, currency="INR")
    response = _post_progress(client, course.id, student_headers, lesson_ids(course)[0], 50)
    assert response.status_code == 403
    assert response.json()["error"]["message"] == "Access denied - active enrollment required"


def test_progress_for_lesson_of_another_course_is_not_found(
    client: TestClient, db_session: Session, student_headers
):
    course = make_course(db_session)
    other = make_course(db_session, title="GRE Foundations")
    response = _post_progress(client, course.id, student_headers, lesson_ids(other)[0], 50)
    assert response.status_code == 404
    assert response.json()["error"]["message"] == "Lesson not found"


def test_progress_percentage_is_validated(client: TestClient, db_session: Session, student_headers):
    course = make_course(db_session)
    response = _post_progress(client, course.id, student_headers, lesson_ids(course)[0], 150)
    assert response.status_code == 422


def test_completion_is_sticky_and_time_accumulates(
    client: TestClient, db_session: Session, student, student_headers
):
    course = make_course(db_session, price=4999, currency="INR", lessons_per_module=(2,))
    enroll(db_session, user=student, course=course)
    first = lesson_ids(course)[0]

    _post_progress(client, course.id, student_headers, first, 100, time_spent=300)
    response = _post_progress(client, course.id, student_headers, first, 40, time_spent=60)

    lesson_progress = response.json()["lessonProgress"]
    assert lesson_progress["isCompleted"] is True
    assert lesson_progress["progressPercentage"] == 40
    assert lesson_progress["timeSpentSeconds"] == 360
    assert response.json()["enrollment"]["progress"] == 50


def test_course_progress_rounds_half_up_and_completes(
    client: TestClient, db_session: Session, student, student_headers
):
    course = make_course(db_session, price=4999, currency="INR", lessons_per_module=(2, 1))
    enroll(db_session, user=student, course=course)
    ids = lesson_ids(course)

    _post_progress(client, course.id, student_headers, ids[0], 100)
    response = _post_progress(client, course.id, student_headers, ids[1], 100)
    assert response.json()["enrollment"]["progress"] == 67
    assert response.json()["enrollment"]["status"] == "ACTIVE"

    response = _post_progress(client, course.id, student_headers, ids[2], 100)
    enrollment = response.json()["enrollment"]
    assert enrollment["progress"] == 100
    assert enrollment["status"] == "COMPLETED"
    assert enrollment["completedAt"] is not None


def test_get_progress_reports_per_module_counts(
    client: TestClient, db_session: Session, student, student_headers
):
    course = make_course(db_session, price=4999, currency="INR", lessons_per_module=(2, 1))
    enroll(db_session, user=student, course=course)
    _post_progress(client, course.id, student_headers, lesson_ids(course)[0], 100)

    response = client.get(f"/api/courses/{course.id}/progress", headers=student_headers)
    assert response.status_code == 200, response.text
    body = response.json()
    assert body["progress"]["percentage"] == 33
    assert body["progress"]["totalLessons"] == 3
    assert body["progress"]["completedLessons"] == 1
    assert [(m["totalLessons"], m["completedLessons"]) for m in body["modules"]] == [(2, 1), (1, 0)]


def test_get_progress_without_enrollment_is_not_found(client: TestClient, db_session: Session, student_headers):
    course = make_course(db_session)
    response = client.get(f"/api/courses/{course.id}/progress", headers=student_headers)
    assert response.status_code == 404
    assert response.json()["error"]["message"] == "Not enrolled in this course"


def test_new_lesson_reopens_a_completed_course(
    client: TestClient, db_session: Session, student, student_headers
):
    course = make_course(db_session, price=4999, currency="INR", lessons_per_module=(2,))
    enroll(db_session, user=student, course=course)
    first, second = lesson_ids(course)

    _post_progress(client, course.id, student_headers, first, 100)
    completed = _post_progress(client, course.id, student_headers, second, 100).json()["enrollment"]
    assert completed["status"] == "COMPLETED"

    db_session.add(Lesson(module_id=course.modules[0].id, title="Lesson 1.3", order_index=2, is_published=True))
    db_session.commit()

    reopened = _post_progress(client, course.id, student_headers, first, 100).json()["enrollment"]
    assert reopened["progress"] == 67
    assert reopened["status"] == "ACTIVE"
    assert reopened["completedAt"] is None
