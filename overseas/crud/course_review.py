from typing import Dict, List, Optional, Tuple
from sqlalchemy import func
from sqlalchemy.orm import Session, selectinload

from overseas.crud.base import CRUDBase
from overseas.models.course_review import CourseReview
from overseas.schemas.review import ReviewCreate

class CRUDCourseReview(CRUDBase[CourseReview, ReviewCreate, ReviewCreate]):

    def _published(self, db: Session, course_id: int):
        return (
            db.query(CourseReview)
            .filter(CourseReview.course_id == course_id)
            .filter(CourseReview.is_published.is_(True))
        )

    def get_by_user_and_course(self, db: Session, *, user_id: int, course_id: int) -> Optional[CourseReview]:
        return (
            db.query(CourseReview)
            .filter(CourseReview.user_id == user_id)
            .filter(CourseReview.course_id == course_id)
            .first()
        )

    def get_published_page(
        self, db: Session, *, course_id: int, skip: int = 0, limit: int = 10
    ) -> Tuple[List[CourseReview], int]:
        query = self._published(db, course_id)
        total = query.count()
        items = (
            query.options(selectinload(CourseReview.user))
            .order_by(CourseReview.created_at.desc(), CourseReview.id.desc())
            .offset(skip)
            .limit(limit)
            .all()
        )
        return items, total

    def rating_counts(self, db: Session, *, course_id: int) -> Dict[int, int]:
        rows = (
            self._published(db, course_id)
            .with_entities(CourseReview.rating, func.count(CourseReview.id))
            .group_by(CourseReview.rating)
            .all()
        )
        return {rating: count for rating, count in rows}

course_review = CRUDCourseReview(CourseReview)
