from sqlalchemy.orm import Session, selectinload
from typing import List, Optional

from overseas.crud.base import CRUDBase
from overseas.models.course_enrollment import CourseEnrollment
from overseas.schemas.learn import Enrollment

class CRUDCourseEnrollment(CRUDBase[CourseEnrollment, Enrollment, Enrollment]):

    def _query_with_relationships(self, db: Session):
        return db.query(CourseEnrollment).options(
            selectinload(CourseEnrollment.course),
        )

    def get_by_user_and_course(self, db: Session, user_id: int, course_id: int) -> Optional[CourseEnrollment]:
        return (
            self._query_with_relationships(db)
            .filter(CourseEnrollment.user_id == user_id)
            .filter(CourseEnrollment.course_id == course_id)
            .first()
        )

    def get_by_user(self, db: Session, user_id: int, skip: int = 0, limit: int = 100) -> List[CourseEnrollment]:
        return (
            self._query_with_relationships(db)
            .filter(CourseEnrollment.user_id == user_id)
            .order_by(CourseEnrollment.last_accessed_at.desc(), CourseEnrollment.enrolled_at.desc())
            .offset(skip)
            .limit(limit)
            .all()
        )

    def count_by_course(self, db: Session, course_id: int) -> int:
        return db.query(CourseEnrollment).filter(CourseEnrollment.course_id == course_id).count()

course_enrollment = CRUDCourseEnrollment(CourseEnrollment)
