from typing import List
from sqlalchemy.orm import Session
from fastapi import HTTPException, status

from overseas.crud.course import course as crud_course
from overseas.crud.curriculum import course_module as crud_module, lesson as crud_lesson
from overseas.crud.lesson_progress import lesson_progress as crud_lesson_progress
from overseas.models.course_module import CourseModule
from overseas.models.lesson import Lesson
from overseas.schemas.curriculum import ModuleCreate, ModuleUpdate, LessonCreate, LessonUpdate
from overseas.schemas.learn import LearnLesson, LearnModule, LessonProgressState


class CurriculumService:

    def _require_course(self, db: Session, course_id: int):
        course = crud_course.get(db, id=course_id)
        if not course:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Course not found")
        return course

    def _get_module_or_404(self, db: Session, course_id: int, module_id: int) -> CourseModule:
        module = crud_module.get_for_course(db, module_id=module_id, course_id=course_id)
        if not module:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Module not found")
        return module

    def _get_lesson_or_404(self, db: Session, module_id: int, lesson_id: int) -> Lesson:
        lesson = crud_lesson.get_for_module(db, lesson_id=lesson_id, module_id=module_id)
        if not lesson:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Lesson not found")
        return lesson

    def get_modules(self, db: Session, *, course_id: int) -> List[CourseModule]:
        self._require_course(db, course_id)
        return crud_module.get_by_course(db, course_id=course_id)

    def create_module(self, db: Session, *, course_id: int, module_in: ModuleCreate) -> CourseModule:
        self._require_course(db, course_id)
        return crud_module.create(db, obj_in={**module_in.model_dump(), "course_id": course_id})

    def update_module(self, db: Session, *, course_id: int, module_id: int, module_in: ModuleUpdate) -> CourseModule:
        module = self._get_module_or_404(db, course_id, module_id)
        return crud_module.update(db, db_obj=module, obj_in=module_in)

    def delete_module(self, db: Session, *, course_id: int, module_id: int) -> CourseModule:
        module = self._get_module_or_404(db, course_id, module_id)
        return crud_module.delete(db, id=module.id)

    def create_lesson(self, db: Session, *, course_id: int, module_id: int, lesson_in: LessonCreate) -> Lesson:
        self._get_module_or_404(db, course_id, module_id)
        return crud_lesson.create(db, obj_in={**lesson_in.model_dump(), "module_id": module_id})

    def update_lesson(
        self, db: Session, *, course_id: int, module_id: int, lesson_id: int, lesson_in: LessonUpdate
    ) -> Lesson:
        self._get_module_or_404(db, course_id, module_id)
        lesson = self._get_lesson_or_404(db, module_id, lesson_id)
        return crud_lesson.update(db, db_obj=lesson, obj_in=lesson_in)

    def delete_lesson(self, db: Session, *, course_id: int, module_id: int, lesson_id: int) -> Lesson:
        self._get_module_or_404(db, course_id, module_id)
        lesson = self._get_lesson_or_404(db, module_id, lesson_id)
        return crud_lesson.delete(db, id=lesson.id)

    def build_learner_tree(self, db: Session, *, course_id: int, user_id: int) -> List[LearnModule]:
        """Published modules and lessons in display order, each lesson carrying the learner's progress."""
        modules = crud_module.get_published_by_course(db, course_id=course_id)
        lessons_by_module = {
            module.id: [lesson for lesson in module.lessons if lesson.is_published]
            for module in modules
        }
        progress_by_lesson = crud_lesson_progress.get_map_for_lessons(
            db,
            user_id=user_id,
            lesson_ids=[lesson.id for lessons in lessons_by_module.values() for lesson in lessons],
        )

        tree = []
        for module in modules:
            lessons = []
            for lesson in lessons_by_module[module.id]:
                record = progress_by_lesson.get(lesson.id)
                progress = (
                    LessonProgressState(
                        is_completed=bool(record.is_completed),
                        progress_percentage=record.progress_percentage or 0,
                        last_accessed_at=record.last_accessed_at,
                    )
                    if record
                    else LessonProgressState()
                )
                lessons.append(LearnLesson(
                    id=lesson.id,
                    title=lesson.title,
                    description=lesson.description,
                    type=lesson.lesson_type,
                    duration=lesson.duration or 0,
                    order_index=lesson.order_index,
                    is_free=bool(lesson.is_free),
                    video_url=lesson.video_url,
                    content=lesson.content,
                    resources=lesson.resources,
                    progress=progress,
                ))
            tree.append(LearnModule(
                id=module.id,
                title=module.title,
                description=module.description,
                order_index=module.order_index,
                lessons=lessons,
            ))
        return tree


curriculum_service = CurriculumService()
