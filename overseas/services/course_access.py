from typing import Optional, Tuple
from sqlalchemy.orm import Session
from fastapi import HTTPException, status

from overseas.core.constants import ACCESS_GRANTING_STATUSES
from overseas.crud.course import course as crud_course
from overseas.crud.course_enrollment import course_enrollment as crud_enrollment
from overseas.models.course import Course
from overseas.models.course_enrollment import CourseEnrollment
from overseas.models.user import User
from overseas.schemas.learn import AccessResponse, CourseSummary, Enrollment, LessonsResponse
from overseas.services.curriculum import curriculum_service

FREE_COURSE = "Free course"
ACTIVE_ENROLLMENT = "Active enrollment"
ENROLLMENT_NOT_ACTIVE = "Enrollment not active"
NOT_ENROLLED = "Not enrolled"


class CourseAccessService:
    """Decides whether a learner may open a course's lesson content.

    A published free course is open to every signed-in learner. A paid course
    is open only through an enrollment whose status grants access.
    """

    def get_published_course(self, db: Session, course_id: int) -> Course:
        course = crud_course.get(db, id=course_id)
        if not course or not course.is_published:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Course not found or not published"
            )
        return course

    def _decide(self, course: Course, enrollment: Optional[CourseEnrollment]) -> Tuple[bool, str]:
        if course.is_free:
            return True, FREE_COURSE
        if enrollment and enrollment.status in ACCESS_GRANTING_STATUSES:
            return True, ACTIVE_ENROLLMENT
        return False, ENROLLMENT_NOT_ACTIVE if enrollment else NOT_ENROLLED

    def check_access(self, db: Session, *, course_id: int, user: User) -> AccessResponse:
        course = self.get_published_course(db, course_id)
        enrollment = crud_enrollment.get_by_user_and_course(db, user_id=user.id, course_id=course.id)
        has_access, reason = self._decide(course, enrollment)

        visible_enrollment = enrollment if has_access else None
        return AccessResponse(
            has_access=has_access,
            reason=reason,
            course=CourseSummary.model_validate(course),
            enrollment=Enrollment.model_validate(visible_enrollment) if visible_enrollment else None,
            progress=visible_enrollment.progress if visible_enrollment else 0,
        )

    def get_lessons(self, db: Session, *, course_id: int, user: User) -> LessonsResponse:
        access = self.check_access(db, course_id=course_id, user=user)
        if not access.has_access:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Access denied - enrollment required"
            )

        modules = curriculum_service.build_learner_tree(db, course_id=course_id, user_id=user.id)
        return LessonsResponse(modules=modules, has_access=True, enrollment=access.enrollment)


course_access_service = CourseAccessService()
