import logging
from datetime import datetime
from typing import List, Optional
from sqlalchemy.orm import Session
from fastapi import HTTPException, status

from overseas.core.config import settings
from overseas.core.constants import EnrollmentStatusEnum, ACCESS_GRANTING_STATUSES
from overseas.crud.course import course as crud_course
from overseas.crud.course_enrollment import course_enrollment as crud_enrollment
from overseas.crud.curriculum import lesson as crud_lesson
from overseas.crud.lesson_progress import lesson_progress as crud_lesson_progress
from overseas.models.course import Course
from overseas.models.course_enrollment import CourseEnrollment
from overseas.models.user import User
from overseas.schemas.learn import CourseSummary, Enrollment, MyCourse
from overseas.utils.permission import PermissionHelper as permission_helper

logger = logging.getLogger(__name__)


class EnrollmentService:

    def ensure_enrollable(self, db: Session, *, course_id: int, user: User) -> Course:
        """Checks shared by free enrollment and purchase: role, course state, duplicates and capacity."""
        permission_helper.require_student(user)

        course = crud_course.get(db, id=course_id)
        if not course:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Course not found")
        if not course.is_published:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Course is not available for enrollment"
            )

        if crud_enrollment.get_by_user_and_course(db, user_id=user.id, course_id=course.id):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="You are already enrolled in this course"
            )

        if course.is_full:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Course is full. Maximum students limit reached."
            )
        return course

    def activate_enrollment(
        self,
        db: Session,
        *,
        course: Course,
        user_id: int,
        payment_id: Optional[str] = None,
    ) -> CourseEnrollment:
        """
        Create an ACTIVE enrollment, or return the existing one.

        Called by both payment verification and webhooks for the same purchase;
        total_students only moves when a row is actually created.
        The caller commits.
        """
        enrollment = crud_enrollment.get_by_user_and_course(db, user_id=user_id, course_id=course.id)
        if enrollment:
            if enrollment.status not in ACCESS_GRANTING_STATUSES:
                enrollment.status = EnrollmentStatusEnum.ACTIVE
            if payment_id and not enrollment.payment_id:
                enrollment.payment_id = payment_id
            db.add(enrollment)
            db.flush()
            return enrollment

        enrollment = crud_enrollment.create(
            db,
            obj_in={
                "user_id": user_id,
                "course_id": course.id,
                "payment_id": payment_id,
                "status": EnrollmentStatusEnum.ACTIVE,
                "progress": 0,
                "enrolled_at": datetime.utcnow(),
            },
            commit=False,
        )
        crud_course.adjust_total_students(db, course, 1)
        logger.info(f"User {user_id} enrolled in course {course.id} (payment: {payment_id or 'free'})")
        return enrollment

    def enroll_free(self, db: Session, *, course_id: int, user: User) -> CourseEnrollment:
        course = self.ensure_enrollable(db, course_id=course_id, user=user)
        if not course.is_free:
            raise HTTPException(status_code=status.HTTP_402_PAYMENT_REQUIRED, detail="Payment required")

        enrollment = self.activate_enrollment(db, course=course, user_id=user.id)
        db.commit()
        db.refresh(enrollment)
        return enrollment

    def unenroll(self, db: Session, *, course_id: int, user: User) -> None:
        enrollment = crud_enrollment.get_by_user_and_course(db, user_id=user.id, course_id=course_id)
        if not enrollment:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="You are not enrolled in this course")

        if (enrollment.progress or 0) > settings.UNENROLL_PROGRESS_LIMIT:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Cannot unenroll after completing {settings.UNENROLL_PROGRESS_LIMIT}% of the course"
            )

        course = enrollment.course
        db.delete(enrollment)
        if course is not None:
            crud_course.adjust_total_students(db, course, -1)
        db.commit()
        logger.info(f"User {user.id} unenrolled from course {course_id}")

    def get_my_courses(self, db: Session, *, user: User) -> List[MyCourse]:
        result = []
        for enrollment in crud_enrollment.get_by_user(db, user_id=user.id):
            course = enrollment.course
            if course is None or course.deleted_at is not None:
                continue
            lesson_ids = crud_lesson.get_published_ids_for_course(db, course_id=course.id)
            result.append(MyCourse(
                enrollment=Enrollment.model_validate(enrollment),
                course=CourseSummary.model_validate(course),
                slug=course.slug,
                thumbnail_url=course.thumbnail_url,
                instructor_name=course.instructor_name,
                total_lessons=len(lesson_ids),
                completed_lessons=crud_lesson_progress.count_completed(db, user_id=user.id, lesson_ids=lesson_ids),
            ))
        return result


enrollment_service = EnrollmentService()
