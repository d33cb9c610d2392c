from datetime import datetime
from sqlalchemy.orm import Session
from fastapi import HTTPException, status

from overseas.core.constants import EnrollmentStatusEnum, ACCESS_GRANTING_STATUSES
from overseas.crud.course_enrollment import course_enrollment as crud_enrollment
from overseas.crud.curriculum import course_module as crud_module, lesson as crud_lesson
from overseas.crud.lesson_progress import lesson_progress as crud_lesson_progress
from overseas.models.course_enrollment import CourseEnrollment
from overseas.models.user import User
from overseas.schemas.learn import (
    CourseProgressResponse,
    CourseSummary,
    Enrollment,
    LessonProgress,
    ModuleProgress,
    ProgressSummary,
    ProgressUpdateRequest,
    ProgressUpdateResponse,
)
from overseas.services.course_access import course_access_service
from overseas.services.enrollment import enrollment_service
from overseas.utils.progress import completion_percentage


class CourseProgressService:

    def _update_course_progress(self, db: Session, enrollment: CourseEnrollment, now: datetime) -> None:
        lesson_ids = crud_lesson.get_published_ids_for_course(db, course_id=enrollment.course_id)
        completed = crud_lesson_progress.count_completed(db, user_id=enrollment.user_id, lesson_ids=lesson_ids)

        enrollment.progress = completion_percentage(completed, len(lesson_ids))
        enrollment.last_accessed_at = now
        if enrollment.progress >= 100 and enrollment.status != EnrollmentStatusEnum.COMPLETED:
            enrollment.status = EnrollmentStatusEnum.COMPLETED
            enrollment.completed_at = now
        elif enrollment.progress < 100 and enrollment.status == EnrollmentStatusEnum.COMPLETED:
            # lessons published after completion reopen the course
            enrollment.status = EnrollmentStatusEnum.ACTIVE
            enrollment.completed_at = None
        db.add(enrollment)

    def record_progress(
        self, db: Session, *, course_id: int, user: User, progress_in: ProgressUpdateRequest
    ) -> ProgressUpdateResponse:
        course = course_access_service.get_published_course(db, course_id)

        lesson = crud_lesson.get_in_course(db, lesson_id=progress_in.lesson_id, course_id=course.id)
        if not lesson:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Lesson not found")

        enrollment = crud_enrollment.get_by_user_and_course(db, user_id=user.id, course_id=course.id)
        if enrollment is None and course.is_free:
            enrollment = enrollment_service.activate_enrollment(db, course=course, user_id=user.id)
        if enrollment is None or enrollment.status not in ACCESS_GRANTING_STATUSES:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Access denied - active enrollment required"
            )

        now = datetime.utcnow()
        record = crud_lesson_progress.get_by_user_and_lesson(db, user_id=user.id, lesson_id=lesson.id)
        if record is None:
            record = crud_lesson_progress.create(
                db,
                obj_in={
                    "user_id": user.id,
                    "lesson_id": lesson.id,
                    "enrollment_id": enrollment.id,
                    "is_completed": False,
                    "progress_percentage": 0,
                    "time_spent_seconds": 0,
                },
                commit=False,
            )

        # Latest value wins; completion stays once reached
        record.progress_percentage = progress_in.progress_percentage
        record.time_spent_seconds = (record.time_spent_seconds or 0) + (progress_in.time_spent or 0)
        record.last_accessed_at = now
        if progress_in.progress_percentage >= 100 and not record.is_completed:
            record.is_completed = True
            record.completed_at = now
        db.add(record)
        db.flush()

        self._update_course_progress(db, enrollment, now)
        db.commit()
        db.refresh(enrollment)
        db.refresh(record)

        return ProgressUpdateResponse(
            message="Progress updated successfully",
            enrollment=Enrollment.model_validate(enrollment),
            lesson_progress=LessonProgress.model_validate(record),
        )

    def get_progress(self, db: Session, *, course_id: int, user: User) -> CourseProgressResponse:
        enrollment = crud_enrollment.get_by_user_and_course(db, user_id=user.id, course_id=course_id)
        if not enrollment:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not enrolled in this course")

        modules = crud_module.get_published_by_course(db, course_id=course_id)
        lesson_ids_by_module = {
            module.id: [lesson.id for lesson in module.lessons if lesson.is_published]
            for module in modules
        }
        all_ids = [lesson_id for ids in lesson_ids_by_module.values() for lesson_id in ids]
        progress_map = crud_lesson_progress.get_map_for_lessons(db, user_id=user.id, lesson_ids=all_ids)

        def completed_in(ids):
            return sum(1 for lesson_id in ids if progress_map.get(lesson_id) and progress_map[lesson_id].is_completed)

        return CourseProgressResponse(
            enrollment=Enrollment.model_validate(enrollment),
            progress=ProgressSummary(
                percentage=enrollment.progress or 0,
                total_lessons=len(all_ids),
                completed_lessons=completed_in(all_ids),
                enrolled_at=enrollment.enrolled_at,
                last_accessed_at=enrollment.last_accessed_at,
                completed_at=enrollment.completed_at,
                status=enrollment.status,
            ),
            course=CourseSummary.model_validate(enrollment.course),
            modules=[
                ModuleProgress(
                    id=module.id,
                    title=module.title,
                    total_lessons=len(lesson_ids_by_module[module.id]),
                    completed_lessons=completed_in(lesson_ids_by_module[module.id]),
                )
                for module in modules
            ],
        )


course_progress_service = CourseProgressService()
