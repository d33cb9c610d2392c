from sqlalchemy.orm import Session
from typing import Dict, Iterable, Optional

from overseas.crud.base import CRUDBase
from overseas.models.lesson_progress import LessonProgress
from overseas.schemas.learn import LessonProgress as LessonProgressSchema

class CRUDLessonProgress(CRUDBase[LessonProgress, LessonProgressSchema, LessonProgressSchema]):

    def get_by_user_and_lesson(self, db: Session, user_id: int, lesson_id: int) -> Optional[LessonProgress]:
        return (
            db.query(LessonProgress)
            .filter(LessonProgress.user_id == user_id)
            .filter(LessonProgress.lesson_id == lesson_id)
            .first()
        )

    def get_map_for_lessons(self, db: Session, user_id: int, lesson_ids: Iterable[int]) -> Dict[int, LessonProgress]:
        lesson_ids = list(lesson_ids)
        if not lesson_ids:
            return {}
        records = (
            db.query(LessonProgress)
            .filter(LessonProgress.user_id == user_id)
            .filter(LessonProgress.lesson_id.in_(lesson_ids))
            .all()
        )
        return {record.lesson_id: record for record in records}

    def count_completed(self, db: Session, user_id: int, lesson_ids: Iterable[int]) -> int:
        lesson_ids = list(lesson_ids)
        if not lesson_ids:
            return 0
        return (
            db.query(LessonProgress)
            .filter(LessonProgress.user_id == user_id)
            .filter(LessonProgress.lesson_id.in_(lesson_ids))
            .filter(LessonProgress.is_completed.is_(True))
            .count()
        )

lesson_progress = CRUDLessonProgress(LessonProgress)
