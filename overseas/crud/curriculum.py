from typing import List, Optional
from sqlalchemy.orm import Session, selectinload

from overseas.crud.base import CRUDBase
from overseas.models.course_module import CourseModule
from overseas.models.lesson import Lesson
from overseas.schemas.curriculum import ModuleCreate, ModuleUpdate, LessonCreate, LessonUpdate

class CRUDCourseModule(CRUDBase[CourseModule, ModuleCreate, ModuleUpdate]):

    def get_for_course(self, db: Session, *, module_id: int, course_id: int) -> Optional[CourseModule]:
        return (
            db.query(CourseModule)
            .filter(CourseModule.id == module_id)
            .filter(CourseModule.course_id == course_id)
            .first()
        )

    def get_by_course(self, db: Session, course_id: int) -> List[CourseModule]:
        return (
            db.query(CourseModule)
            .options(selectinload(CourseModule.lessons))
            .filter(CourseModule.course_id == course_id)
            .order_by(CourseModule.order_index, CourseModule.id)
            .all()
        )

    def get_published_by_course(self, db: Session, course_id: int) -> List[CourseModule]:
        return (
            db.query(CourseModule)
            .options(selectinload(CourseModule.lessons))
            .filter(CourseModule.course_id == course_id)
            .filter(CourseModule.is_published.is_(True))
            .order_by(CourseModule.order_index, CourseModule.id)
            .all()
        )


class CRUDLesson(CRUDBase[Lesson, LessonCreate, LessonUpdate]):

    def get_for_module(self, db: Session, *, lesson_id: int, module_id: int) -> Optional[Lesson]:
        return (
            db.query(Lesson)
            .filter(Lesson.id == lesson_id)
            .filter(Lesson.module_id == module_id)
            .first()
        )

    def get_in_course(self, db: Session, *, lesson_id: int, course_id: int) -> Optional[Lesson]:
        return (
            db.query(Lesson)
            .join(CourseModule, CourseModule.id == Lesson.module_id)
            .filter(Lesson.id == lesson_id)
            .filter(CourseModule.course_id == course_id)
            .first()
        )

    def get_published_ids_for_course(self, db: Session, course_id: int) -> List[int]:
        rows = (
            db.query(Lesson.id)
            .join(CourseModule, CourseModule.id == Lesson.module_id)
            .filter(CourseModule.course_id == course_id)
            .filter(CourseModule.is_published.is_(True))
            .filter(Lesson.is_published.is_(True))
            .all()
        )
        return [row[0] for row in rows]

course_module = CRUDCourseModule(CourseModule)
lesson = CRUDLesson(Lesson)
