import pytest

from overseas.learner.progress import ProgressRecorder, overall_progress
from overseas.schemas.learn import LearnLesson
from tests.helpers.platform import FakePlatform, enrollment_body, lesson_body

PROGRESS_PATH = "/api/courses/3/progress"


def _saved(percentage=0):
    return {
        "message": "Progress updated successfully",
        "enrollment": enrollment_body(),
        "lessonProgress": {
            "id": 1, "lessonId": 10, "isCompleted": percentage == 100,
            "progressPercentage": percentage, "timeSpentSeconds": 0,
        },
    }


@pytest.mark.asyncio
async def test_record_is_sent_in_the_background():
    platform = FakePlatform()
    platform.on("POST", PROGRESS_PATH, json=_saved(40))

    async with platform.client() as client:
        recorder = ProgressRecorder(client, 3)
        recorder.record(10, 40, time_spent=12)
        assert recorder.in_flight == 1

        await recorder.flush()

    assert recorder.in_flight == 0
    assert platform.calls == [("POST", PROGRESS_PATH, {"lessonId": 10, "progressPercentage": 40, "timeSpent": 12})]


@pytest.mark.asyncio
async def test_percentage_is_clamped_before_sending():
    platform = FakePlatform()
    platform.on("POST", PROGRESS_PATH, json=_saved(100))

    async with platform.client() as client:
        recorder = ProgressRecorder(client, 3)
        recorder.record(10, 140)
        recorder.record(10, -5)
        await recorder.flush()

    assert sorted(body["progressPercentage"] for _, _, body in platform.calls) == [0, 100]


@pytest.mark.asyncio
async def test_failed_write_is_dropped():
    platform = FakePlatform()
    platform.on("POST", PROGRESS_PATH, status=500, json={"error": {"code": "INTERNAL_ERROR", "message": "boom"}})

    async with platform.client() as client:
        recorder = ProgressRecorder(client, 3)
        task = recorder.record(10, 40)
        await recorder.flush()

    assert task.done()
    assert task.exception() is None
    assert len(platform.calls) == 1


@pytest.mark.asyncio
async def test_mark_complete_updates_local_lesson():
    platform = FakePlatform()
    platform.on("POST", PROGRESS_PATH, json=_saved(100))
    lesson = LearnLesson.model_validate(lesson_body(10))

    async with platform.client() as client:
        recorder = ProgressRecorder(client, 3)
        recorder.mark_complete(lesson)
        assert lesson.progress.is_completed is True
        assert lesson.progress.progress_percentage == 100
        await recorder.flush()

    assert platform.calls[0][2]["progressPercentage"] == 100


def test_overall_progress_counts_completed_lessons():
    lessons = [LearnLesson.model_validate(lesson_body(i, completed=i < 3)) for i in range(8)]
    assert overall_progress(lessons) == 38
    assert overall_progress([]) == 0


@pytest.mark.asyncio
async def test_malformed_success_body_is_dropped():
    platform = FakePlatform()
    platform.on("POST", PROGRESS_PATH, json="<html>ok</html>")

    async with platform.client() as client:
        recorder = ProgressRecorder(client, 3)
        task = recorder.record(10, 40)
        await recorder.flush()

    assert task.exception() is None
    assert recorder.in_flight == 0
