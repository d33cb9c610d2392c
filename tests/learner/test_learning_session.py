import pytest

from overseas.learner.session import LearningSession, ViewState
from tests.helpers.platform import FakePlatform, enrollment_body, lesson_body

ACCESS_PATH = "/api/courses/3/access"
LESSONS_PATH = "/api/courses/3/lessons"


def _granted():
    return {
        "hasAccess": True,
        "reason": "Enrolled",
        "course": {"id": 3, "title": "UK Visa Basics", "isPublished": True, "price": 0, "currency": "INR"},
        "enrollment": enrollment_body(progress=50),
        "progress": 50,
    }


def _lessons():
    return {
        "hasAccess": True,
        "modules": [
            {"id": 1, "title": "Start", "lessons": [lesson_body(10, completed=True), lesson_body(11)]},
        ],
    }


@pytest.mark.asyncio
async def test_enrolled_learner_gets_lessons():
    platform = FakePlatform()
    platform.on("GET", ACCESS_PATH, json=_granted())
    platform.on("GET", LESSONS_PATH, json=_lessons())

    async with platform.client() as client:
        session = LearningSession(client, 3)
        assert await session.load() == ViewState.READY

    assert session.has_access is True
    assert session.navigator.current_lesson.id == 10
    assert session.overall_progress == 50


@pytest.mark.asyncio
async def test_restricted_learner_never_fetches_lessons():
    platform = FakePlatform()
    platform.on("GET", ACCESS_PATH, json={"hasAccess": False, "reason": "Not enrolled", "progress": 0})

    async with platform.client() as client:
        session = LearningSession(client, 3)
        assert await session.load() == ViewState.RESTRICTED

    assert session.restriction_reason == "Not enrolled"
    assert platform.paths() == [ACCESS_PATH]
    assert session.overall_progress == 0


@pytest.mark.asyncio
async def test_load_is_served_from_memory_after_first_call():
    platform = FakePlatform()
    platform.on("GET", ACCESS_PATH, json=_granted())
    platform.on("GET", LESSONS_PATH, json=_lessons())

    async with platform.client() as client:
        session = LearningSession(client, 3)
        await session.load()
        await session.load()

    assert platform.paths() == [ACCESS_PATH, LESSONS_PATH]


@pytest.mark.asyncio
async def test_refresh_refetches_everything():
    platform = FakePlatform()
    platform.on("GET", ACCESS_PATH, json={"hasAccess": False, "reason": "Not enrolled", "progress": 0})
    platform.on("GET", LESSONS_PATH, json=_lessons())

    async with platform.client() as client:
        session = LearningSession(client, 3)
        await session.load()

        platform.on("GET", ACCESS_PATH, json=_granted())
        assert await session.refresh() == ViewState.READY

    assert platform.paths() == [ACCESS_PATH, ACCESS_PATH, LESSONS_PATH]


@pytest.mark.asyncio
async def test_server_failure_is_an_error_state():
    platform = FakePlatform()
    platform.on("GET", ACCESS_PATH, json=_granted())
    platform.on("GET", LESSONS_PATH, status=500, json={"error": {"code": "INTERNAL_ERROR", "message": "Database unavailable"}})

    async with platform.client() as client:
        session = LearningSession(client, 3)
        assert await session.load() == ViewState.ERROR

    assert session.error == "Database unavailable"
    assert session.navigator is None
