import logging
from enum import Enum
from typing import List, Optional

from overseas.learner.api import APIError, PlatformClient
from overseas.learner.navigator import LessonNavigator
from overseas.learner.progress import ProgressRecorder, overall_progress
from overseas.schemas.learn import AccessResponse, LearnModule

logger = logging.getLogger(__name__)

ACCESS_RESTRICTED = "Access Restricted"


class ViewState(str, Enum):
    NOT_LOADED = "not_loaded"
    RESTRICTED = "restricted"
    READY = "ready"
    ERROR = "error"


class LearningSession:
    """
    Server-derived learning state for one course page.

    A read-through cache: ``load`` asks the server once, later calls reuse the
    answer, and ``refresh`` is the only invalidation (a full refetch, like a
    page reload).
    """

    def __init__(self, client: PlatformClient, course_id: int):
        self.client = client
        self.course_id = course_id
        self.recorder = ProgressRecorder(client, course_id)
        self._reset()

    def _reset(self) -> None:
        self.state = ViewState.NOT_LOADED
        self.access: Optional[AccessResponse] = None
        self.modules: List[LearnModule] = []
        self.navigator: Optional[LessonNavigator] = None
        self.error: Optional[str] = None

    @property
    def has_access(self) -> bool:
        return bool(self.access and self.access.has_access)

    @property
    def restriction_reason(self) -> Optional[str]:
        if self.state == ViewState.RESTRICTED and self.access:
            return self.access.reason
        return None

    async def load(self) -> ViewState:
        if self.state != ViewState.NOT_LOADED:
            return self.state

        try:
            self.access = await self.client.check_access(self.course_id)
        except APIError as e:
            self.error = e.message
            self.state = ViewState.ERROR
            return self.state

        if not self.access.has_access:
            self.state = ViewState.RESTRICTED
            return self.state

        try:
            lessons = await self.client.get_lessons(self.course_id)
        except APIError as e:
            self.error = e.message
            self.state = ViewState.ERROR
            return self.state

        self.modules = lessons.modules
        self.navigator = LessonNavigator(self.modules)
        self.state = ViewState.READY
        return self.state

    async def refresh(self) -> ViewState:
        await self.recorder.flush()
        self._reset()
        return await self.load()

    @property
    def overall_progress(self) -> int:
        return overall_progress(self.navigator.lessons) if self.navigator else 0
