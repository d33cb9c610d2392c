import asyncio
import logging
from typing import Iterable, Optional, Set

from overseas.learner.api import APIError, PlatformClient
from overseas.schemas.learn import LearnLesson
from overseas.utils.progress import completion_percentage

logger = logging.getLogger(__name__)


def overall_progress(lessons: Iterable[LearnLesson]) -> int:
    lessons = list(lessons)
    completed = sum(1 for lesson in lessons if lesson.progress.is_completed)
    return completion_percentage(completed, len(lessons))


class ProgressRecorder:
    """
    Sends lesson progress without making the learner wait for it.

    Writes are fire-and-forget: a failed POST is logged and dropped, never
    retried or surfaced. ``flush`` waits for whatever is still in flight.
    """

    def __init__(self, client: PlatformClient, course_id: int):
        self.client = client
        self.course_id = course_id
        self._pending: Set[asyncio.Task] = set()

    def record(self, lesson_id: int, percentage: int, time_spent: Optional[int] = None) -> asyncio.Task:
        task = asyncio.create_task(self._send(lesson_id, max(0, min(100, int(percentage))), time_spent))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    def mark_complete(self, lesson: LearnLesson, time_spent: Optional[int] = None) -> asyncio.Task:
        lesson.progress.is_completed = True
        lesson.progress.progress_percentage = 100
        return self.record(lesson.id, 100, time_spent)

    async def _send(self, lesson_id: int, percentage: int, time_spent: Optional[int]) -> None:
        try:
            await self.client.record_progress(self.course_id, lesson_id, percentage, time_spent)
        except APIError as e:
            logger.warning(f"Progress for lesson {lesson_id} in course {self.course_id} was not saved: {e.message}")

    @property
    def in_flight(self) -> int:
        return len(self._pending)

    async def flush(self) -> None:
        if self._pending:
            await asyncio.gather(*list(self._pending))
