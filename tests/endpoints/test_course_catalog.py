from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from tests.helpers.factories import auth_headers, enroll, lesson_ids, make_course


def test_catalog_lists_only_published_courses(client: TestClient, db_session: Session):
    make_course(db_session, title="IELTS Masterclass")
    make_course(db_session, title="GRE Foundations", price=4999, currency="INR")
    make_course(db_session, title="SOP Writing Draft", is_published=False)

    response = client.get("/api/courses")
    assert response.status_code == 200, response.text
    catalog = response.json()["data"]
    assert catalog["total"] == 2
    assert {c["title"] for c in catalog["items"]} == {"IELTS Masterclass", "GRE Foundations"}


def test_catalog_filters_and_paginates(client: TestClient, db_session: Session):
    make_course(db_session, title="IELTS Masterclass")
    make_course(db_session, title="GRE Foundations", price=4999, currency="INR")
    make_course(db_session, title="GMAT Sprint", price=7999, currency="INR")

    response = client.get("/api/courses", params={"min_price": 1, "limit": 1, "page": 2})
    catalog = response.json()["data"]
    assert catalog["total"] == 2
    assert catalog["pages"] == 2
    assert catalog["page"] == 2
    assert len(catalog["items"]) == 1

    response = client.get("/api/courses", params={"search": "ielts"})
    assert [c["title"] for c in response.json()["data"]["items"]] == ["IELTS Masterclass"]


def test_course_detail_hides_unpublished_modules(client: TestClient, db_session: Session):
    course = make_course(db_session, lessons_per_module=(2, 1), unpublished_module=True)

    response = client.get(f"/api/courses/{course.id}")
    assert response.status_code == 200, response.text
    detail = response.json()["data"]
    assert [m["title"] for m in detail["modules"]] == ["Module 1", "Module 2"]
    assert detail["total_lessons"] == 3


def test_course_detail_for_draft_is_not_found(client: TestClient, db_session: Session):
    course = make_course(db_session, is_published=False)
    response = client.get(f"/api/courses/{course.id}")
    assert response.status_code == 404
    assert response.json()["error"]["message"] == "Course not found"


def test_catalog_is_cached_until_enrollment_changes(
    client: TestClient, db_session: Session, student_headers, fresh_cache
):
    course = make_course(db_session)

    first = client.get("/api/courses").json()["data"]["items"][0]
    assert first["total_students"] == 0

    course.total_students = 40
    db_session.commit()
    cached = client.get("/api/courses").json()["data"]["items"][0]
    assert cached["total_students"] == 0

    response = client.post(f"/api/courses/{course.id}/enroll", headers=student_headers)
    assert response.status_code == 201, response.text

    fresh = client.get("/api/courses").json()["data"]["items"][0]
    assert fresh["total_students"] == 41


def test_my_courses_lists_enrollments_with_counts(
    client: TestClient, db_session: Session, student, student_headers
):
    course = make_course(db_session, lessons_per_module=(3,))
    make_course(db_session, title="GRE Foundations")
    enroll(db_session, user=student, course=course, progress=33)

    response = client.get("/api/courses/my-courses", headers=student_headers)
    assert response.status_code == 200, response.text
    items = response.json()
    assert len(items) == 1
    assert items[0]["course"]["id"] == course.id
    assert items[0]["totalLessons"] == 3
    assert items[0]["completedLessons"] == 0
    assert items[0]["enrollment"]["progress"] == 33


def test_my_courses_is_cached_per_learner(
    client: TestClient, db_session: Session, student, student_headers, other_student
):
    course = make_course(db_session)
    enroll(db_session, user=student, course=course)
    assert len(client.get("/api/courses/my-courses", headers=student_headers).json()) == 1

    # written behind the API, so the cached list is still served
    enroll(db_session, user=student, course=make_course(db_session, title="GRE Foundations"))
    assert len(client.get("/api/courses/my-courses", headers=student_headers).json()) == 1

    assert client.get("/api/courses/my-courses", headers=auth_headers(other_student)).json() == []


def test_enrolling_refreshes_my_courses(client: TestClient, db_session: Session, student, student_headers):
    first = make_course(db_session)
    second = make_course(db_session, title="GRE Foundations")
    enroll(db_session, user=student, course=first)

    assert len(client.get("/api/courses/my-courses", headers=student_headers).json()) == 1

    response = client.post(f"/api/courses/{second.id}/enroll", headers=student_headers)
    assert response.status_code == 201, response.text

    items = client.get("/api/courses/my-courses", headers=student_headers).json()
    assert {item["course"]["id"] for item in items} == {first.id, second.id}


def test_progress_refreshes_my_courses(client: TestClient, db_session: Session, student, student_headers):
    course = make_course(db_session, lessons_per_module=(2,))
    enroll(db_session, user=student, course=course)

    assert client.get("/api/courses/my-courses", headers=student_headers).json()[0]["completedLessons"] == 0

    response = client.post(
        f"/api/courses/{course.id}/progress",
        headers=student_headers,
        json={"lessonId": lesson_ids(course)[0], "progressPercentage": 100},
    )
    assert response.status_code == 200, response.text

    mine = client.get("/api/courses/my-courses", headers=student_headers).json()[0]
    assert mine["completedLessons"] == 1
    assert mine["enrollment"]["progress"] == 50
