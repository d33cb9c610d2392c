from typing import List, Optional, Tuple
from sqlalchemy import or_
from sqlalchemy.orm import Session, selectinload

from overseas.crud.base import CRUDBase
from overseas.core.constants import CourseLevelEnum
from overseas.models.course import Course
from overseas.models.course_module import CourseModule
from overseas.schemas.course import CourseCreate, CourseUpdate

class CRUDCourse(CRUDBase[Course, CourseCreate, CourseUpdate]):

    def _query_with_relationships(self, db: Session):
        return self._query(db).options(
            selectinload(Course.modules).selectinload(CourseModule.lessons)
        )

    def get_with_curriculum(self, db: Session, id: int) -> Optional[Course]:
        return self._query_with_relationships(db).filter(Course.id == id).first()

    def get_published(self, db: Session, id: int) -> Optional[Course]:
        return (
            self._query_with_relationships(db)
            .filter(Course.id == id)
            .filter(Course.is_published.is_(True))
            .first()
        )

    def get_by_slug(self, db: Session, slug: str) -> Optional[Course]:
        return self._query(db).filter(Course.slug == slug).first()

    def get_catalog(
        self,
        db: Session,
        *,
        search: Optional[str] = None,
        level: Optional[CourseLevelEnum] = None,
        featured: Optional[bool] = None,
        min_price: Optional[float] = None,
        max_price: Optional[float] = None,
        skip: int = 0,
        limit: int = 12,
    ) -> Tuple[List[Course], int]:
        query = self._query(db).filter(Course.is_published.is_(True))
        if search:
            pattern = f"%{search}%"
            query = query.filter(or_(Course.title.ilike(pattern), Course.description.ilike(pattern)))
        if level:
            query = query.filter(Course.level == level)
        if featured is not None:
            query = query.filter(Course.is_featured.is_(featured))
        if min_price is not None:
            query = query.filter(Course.price >= min_price)
        if max_price is not None:
            query = query.filter(Course.price <= max_price)

        total = query.count()
        items = (
            query.order_by(Course.is_featured.desc(), Course.created_at.desc(), Course.id.desc())
            .offset(skip)
            .limit(limit)
            .all()
        )
        return items, total

    def get_all_for_admin(
        self, db: Session, *, search: Optional[str] = None, is_published: Optional[bool] = None,
        skip: int = 0, limit: int = 100
    ) -> List[Course]:
        query = self._query_with_relationships(db)
        if search:
            query = query.filter(Course.title.ilike(f"%{search}%"))
        if is_published is not None:
            query = query.filter(Course.is_published.is_(is_published))
        return query.order_by(Course.id.desc()).offset(skip).limit(limit).all()

    def count_published(self, db: Session) -> int:
        return self._query(db).filter(Course.is_published.is_(True)).count()

    def adjust_total_students(self, db: Session, course: Course, delta: int) -> Course:
        course.total_students = max(0, (course.total_students or 0) + delta)
        db.add(course)
        db.flush()
        return course

course = CRUDCourse(Course)
