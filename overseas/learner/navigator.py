from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional, Sequence

from overseas.schemas.learn import LearnLesson, LearnModule


class Direction(IntEnum):
    PREVIOUS = -1
    NEXT = 1


@dataclass
class LessonViewState:
    """Per-lesson transient player state, discarded whenever the selection changes."""
    playback_position: float = 0.0


def flatten(modules: Sequence[LearnModule]) -> List[LearnLesson]:
    """Every module's lessons in the order the server sent them."""
    return [lesson for module in modules for lesson in module.lessons]


class LessonNavigator:
    def __init__(self, modules: Sequence[LearnModule]):
        self.lessons = flatten(modules)
        self.current_lesson_id: Optional[int] = self.lessons[0].id if self.lessons else None
        self.view_state = LessonViewState()

    @property
    def current_index(self) -> int:
        for index, lesson in enumerate(self.lessons):
            if lesson.id == self.current_lesson_id:
                return index
        return -1

    @property
    def current_lesson(self) -> Optional[LearnLesson]:
        index = self.current_index
        return self.lessons[index] if index >= 0 else None

    @property
    def can_go_previous(self) -> bool:
        return self.current_index > 0

    @property
    def can_go_next(self) -> bool:
        index = self.current_index
        return 0 <= index < len(self.lessons) - 1

    def select(self, lesson_id: int) -> None:
        if lesson_id != self.current_lesson_id:
            self.view_state = LessonViewState()
        self.current_lesson_id = lesson_id

    def navigate(self, direction: Direction) -> Optional[LearnLesson]:
        """Step one lesson; at either end (or on a stale selection) nothing changes."""
        allowed = self.can_go_next if direction == Direction.NEXT else self.can_go_previous
        if not allowed:
            return self.current_lesson
        self.select(self.lessons[self.current_index + int(direction)].id)
        return self.current_lesson
