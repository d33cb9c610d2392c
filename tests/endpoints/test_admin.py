import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from overseas.core.constants import PaymentGatewayEnum, PaymentStatusEnum
from overseas.models.course import Course
from overseas.models.payment import CoursePayment
from tests.helpers.factories import enroll, make_course


@pytest.mark.parametrize("path", [
    "/api/admin/courses",
    "/api/admin/payments/stats",
    "/api/admin/events",
    "/api/admin/consultation-inquiries",
    "/api/admin/appointments",
    "/api/admin/content/testimonials",
])
def test_admin_routes_reject_students(client: TestClient, student_headers, path):
    response = client.get(path, headers=student_headers)
    assert response.status_code == 403
    assert response.json()["error"]["message"] == "Admin access required"


def test_admin_routes_require_authentication(client: TestClient):
    assert client.get("/api/admin/courses").status_code == 401


def test_admin_builds_and_publishes_a_course(client: TestClient, admin_headers):
    response = client.post("/api/admin/courses", json={
        "title": "Canada Study Permit Essentials",
        "price": 2499,
        "currency": "inr",
        "level": "BEGINNER",
    }, headers=admin_headers)
    assert response.status_code == 201, response.text
    course = response.json()["data"]
    assert course["slug"] == "canada-study-permit-essentials"
    assert course["currency"] == "INR"
    assert course["is_published"] is False

    module = client.post(
        f"/api/admin/courses/{course['id']}/modules",
        json={"title": "Documents", "order_index": 0},
        headers=admin_headers,
    )
    assert module.status_code == 201, module.text
    module_id = module.json()["data"]["id"]

    lesson = client.post(
        f"/api/admin/courses/{course['id']}/modules/{module_id}/lessons",
        json={
            "title": "Proof of funds",
            "lesson_type": "TEXT",
            "content": "GIC and bank statements",
            "resources": [{"title": "Checklist", "url": "https://files.bnoverseas.com/gic.pdf", "type": "pdf"}],
        },
        headers=admin_headers,
    )
    assert lesson.status_code == 201, lesson.text
    assert lesson.json()["data"]["module_id"] == module_id

    modules = client.get(f"/api/admin/courses/{course['id']}/modules", headers=admin_headers).json()["data"]
    assert [m["title"] for m in modules] == ["Documents"]
    assert [l["title"] for l in modules[0]["lessons"]] == ["Proof of funds"]

    published = client.patch(
        f"/api/admin/courses/{course['id']}/status", json={"is_published": True}, headers=admin_headers
    )
    assert published.status_code == 200
    assert published.json()["message"] == "Course published"

    catalog = client.get("/api/courses").json()["data"]
    assert [c["title"] for c in catalog["items"]] == ["Canada Study Permit Essentials"]


def test_duplicate_titles_get_distinct_slugs(client: TestClient, admin_headers):
    first = client.post("/api/admin/courses", json={"title": "IELTS Masterclass"}, headers=admin_headers)
    second = client.post("/api/admin/courses", json={"title": "IELTS Masterclass"}, headers=admin_headers)
    assert first.json()["data"]["slug"] == "ielts-masterclass"
    assert second.json()["data"]["slug"] == "ielts-masterclass-2"


def test_update_course(client: TestClient, db_session: Session, admin_headers):
    course = make_course(db_session)
    response = client.put(
        f"/api/admin/courses/{course.id}", json={"price": 999, "max_students": 25}, headers=admin_headers
    )
    assert response.status_code == 200, response.text
    assert response.json()["data"]["price"] == 999
    assert response.json()["data"]["max_students"] == 25


def test_delete_course_is_soft(client: TestClient, db_session: Session, admin_headers):
    course = make_course(db_session)
    response = client.delete(f"/api/admin/courses/{course.id}", headers=admin_headers)
    assert response.status_code == 200

    assert client.get(f"/api/admin/courses/{course.id}", headers=admin_headers).status_code == 404
    row = db_session.get(Course, course.id)
    db_session.refresh(row)
    assert row.deleted_at is not None


def test_module_of_another_course_is_not_found(client: TestClient, db_session: Session, admin_headers):
    course = make_course(db_session)
    other = make_course(db_session, title="GRE Foundations")
    module_id = other.modules[0].id

    response = client.put(
        f"/api/admin/courses/{course.id}/modules/{module_id}", json={"title": "Moved"}, headers=admin_headers
    )
    assert response.status_code == 404
    assert response.json()["error"]["message"] == "Module not found"


def test_delete_lesson(client: TestClient, db_session: Session, admin_headers):
    course = make_course(db_session, lessons_per_module=(2,))
    module = course.modules[0]
    lesson_id = module.lessons[0].id

    response = client.delete(
        f"/api/admin/courses/{course.id}/modules/{module.id}/lessons/{lesson_id}", headers=admin_headers
    )
    assert response.status_code == 200, response.text
    modules = client.get(f"/api/admin/courses/{course.id}/modules", headers=admin_headers).json()["data"]
    assert len(modules[0]["lessons"]) == 1


def test_course_and_payment_stats(client: TestClient, db_session: Session, admin_headers, student):
    course = make_course(db_session, price=4999, currency="INR")
    make_course(db_session, title="Draft", is_published=False)
    enroll(db_session, user=student, course=course)
    db_session.add_all([
        CoursePayment(id="pay_done", user_id=student.id, course_id=course.id, amount=4999, currency="INR",
                      gateway=PaymentGatewayEnum.RAZORPAY, status=PaymentStatusEnum.COMPLETED),
        CoursePayment(id="pay_open", user_id=student.id, course_id=course.id, amount=4999, currency="INR",
                      gateway=PaymentGatewayEnum.RAZORPAY, status=PaymentStatusEnum.PENDING),
    ])
    db_session.commit()

    stats = client.get("/api/admin/courses/stats", headers=admin_headers).json()["data"]
    assert stats == {
        "total_courses": 2,
        "published_courses": 1,
        "draft_courses": 1,
        "total_enrollments": 1,
        "total_revenue": 4999.0,
    }

    payment_stats = client.get("/api/admin/payments/stats", headers=admin_headers).json()["data"]
    assert payment_stats["completed_payments"] == 1
    assert payment_stats["pending_payments"] == 1

    transactions = client.get(
        "/api/admin/payments/transactions", params={"status_filter": "COMPLETED"}, headers=admin_headers
    ).json()["data"]
    assert [t["id"] for t in transactions] == ["pay_done"]
    assert transactions[0]["user_email"] == student.email
    assert transactions[0]["course_title"] == course.title
