import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from overseas.core.constants import EnrollmentStatusEnum
from tests.helpers.factories import auth_headers, enroll, make_course, make_user

REVIEW = {"rating": 5, "review_text": "Clear lessons and great visa tips."}


def test_enrolled_learner_reviews_a_course(client: TestClient, db_session: Session, student, student_headers):
    course = make_course(db_session)
    enroll(db_session, user=student, course=course)

    response = client.post(f"/api/courses/{course.id}/reviews", json=REVIEW, headers=student_headers)
    assert response.status_code == 201, response.text
    review = response.json()["data"]
    assert review["rating"] == 5
    assert review["reviewer_name"] == "Asha Verma"

    listing = client.get(f"/api/courses/{course.id}/reviews").json()["data"]
    assert listing["reviews"]["total"] == 1
    assert listing["statistics"]["average_rating"] == 5
    assert listing["statistics"]["rating_distribution"] == {"1": 0, "2": 0, "3": 0, "4": 0, "5": 1}


def test_course_rating_tracks_reviews(client: TestClient, db_session: Session, student, student_headers):
    course = make_course(db_session)
    enroll(db_session, user=student, course=course, status=EnrollmentStatusEnum.COMPLETED)
    other = make_user(db_session, email="ravi@example.com")
    enroll(db_session, user=other, course=course)

    client.post(f"/api/courses/{course.id}/reviews", json=REVIEW, headers=student_headers)
    client.post(f"/api/courses/{course.id}/reviews", json={"rating": 2}, headers=auth_headers(other))

    detail = client.get(f"/api/courses/{course.id}").json()["data"]
    assert detail["rating"] == 3.5
    assert detail["total_ratings"] == 2


def test_review_requires_enrollment(client: TestClient, db_session: Session, student, student_headers):
    course = make_course(db_session)
    response = client.post(f"/api/courses/{course.id}/reviews", json=REVIEW, headers=student_headers)
    assert response.status_code == 403
    assert response.json()["error"]["message"] == "You must be enrolled in this course to leave a review"

    enroll(db_session, user=student, course=course, status=EnrollmentStatusEnum.CANCELLED)
    response = client.post(f"/api/courses/{course.id}/reviews", json=REVIEW, headers=student_headers)
    assert response.status_code == 403


def test_one_review_per_learner(client: TestClient, db_session: Session, student, student_headers):
    course = make_course(db_session)
    enroll(db_session, user=student, course=course)
    client.post(f"/api/courses/{course.id}/reviews", json=REVIEW, headers=student_headers)

    response = client.post(f"/api/courses/{course.id}/reviews", json=REVIEW, headers=student_headers)
    assert response.status_code == 400
    assert response.json()["error"]["message"] == "You have already reviewed this course"


@pytest.mark.parametrize("body", [
    {"rating": 0},
    {"rating": 6},
    {"rating": 4, "review_text": "Too short"},
    {"rating": 4, "review_text": "x" * 2001},
])
def test_review_body_is_validated(client: TestClient, db_session: Session, student, student_headers, body):
    course = make_course(db_session)
    enroll(db_session, user=student, course=course)
    response = client.post(f"/api/courses/{course.id}/reviews", json=body, headers=student_headers)
    assert response.status_code == 422


def test_reviews_of_unpublished_course_are_hidden(client: TestClient, db_session: Session):
    course = make_course(db_session, is_published=False)
    response = client.get(f"/api/courses/{course.id}/reviews")
    assert response.status_code == 404
    assert response.json()["error"]["message"] == "Course not found"


def test_review_requires_authentication(client: TestClient, db_session: Session):
    course = make_course(db_session)
    assert client.post(f"/api/courses/{course.id}/reviews", json=REVIEW).status_code == 401
