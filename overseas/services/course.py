import math
from typing import List, Optional
from sqlalchemy.orm import Session
from fastapi import HTTPException, status

from overseas.core.constants import CourseLevelEnum
from overseas.crud.course import course as crud_course
from overseas.crud.course_enrollment import course_enrollment as crud_enrollment
from overseas.crud.payment import course_payment as crud_payment
from overseas.models.course import Course
from overseas.schemas.course import (
    Course as CourseSchema,
    CourseAdmin,
    CourseCreate,
    CourseDetail,
    CourseStats,
    CourseUpdate,
    LessonOutline,
    ModuleOutline,
)
from overseas.schemas.response import PaginatedData
from overseas.utils.identifiers import unique_slug


class CourseService:

    def _get_or_404(self, db: Session, course_id: int) -> Course:
        course = crud_course.get_with_curriculum(db, id=course_id)
        if not course:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Course not found")
        return course

    def _slug_for(self, db: Session, requested: Optional[str], title: str, current_id: Optional[int] = None) -> str:
        def exists(candidate: str) -> bool:
            found = crud_course.get_by_slug(db, candidate)
            return found is not None and found.id != current_id
        return unique_slug(requested or title, exists)

    def get_catalog(
        self,
        db: Session,
        *,
        search: Optional[str] = None,
        level: Optional[CourseLevelEnum] = None,
        featured: Optional[bool] = None,
        min_price: Optional[float] = None,
        max_price: Optional[float] = None,
        page: int = 1,
        limit: int = 12,
    ) -> PaginatedData[CourseSchema]:
        items, total = crud_course.get_catalog(
            db,
            search=search,
            level=level,
            featured=featured,
            min_price=min_price,
            max_price=max_price,
            skip=(page - 1) * limit,
            limit=limit,
        )
        return PaginatedData[CourseSchema](
            items=[CourseSchema.model_validate(c) for c in items],
            total=total,
            page=page,
            limit=limit,
            pages=math.ceil(total / limit) if limit else 0,
        )

    def get_course_detail(self, db: Session, *, course_id: int) -> CourseDetail:
        course = crud_course.get_published(db, id=course_id)
        if not course:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Course not found")

        modules = [
            ModuleOutline(
                id=module.id,
                title=module.title,
                description=module.description,
                order_index=module.order_index,
                lessons=[LessonOutline.model_validate(l) for l in module.lessons if l.is_published],
            )
            for module in course.modules
            if module.is_published
        ]
        return CourseDetail(
            **CourseSchema.model_validate(course).model_dump(),
            modules=modules,
            total_lessons=sum(len(m.lessons) for m in modules),
        )

    # Admin

    def get_all_for_admin(
        self, db: Session, *, search: Optional[str] = None, is_published: Optional[bool] = None,
        skip: int = 0, limit: int = 100
    ) -> List[CourseAdmin]:
        courses = crud_course.get_all_for_admin(db, search=search, is_published=is_published, skip=skip, limit=limit)
        result = []
        for course in courses:
            item = CourseAdmin.model_validate(course)
            item.enrollment_count = crud_enrollment.count_by_course(db, course.id)
            item.module_count = len(course.modules)
            result.append(item)
        return result

    def get_for_admin(self, db: Session, *, course_id: int) -> Course:
        return self._get_or_404(db, course_id)

    def create_course(self, db: Session, *, course_in: CourseCreate) -> Course:
        data = course_in.model_dump()
        data["slug"] = self._slug_for(db, course_in.slug, course_in.title)
        if data.get("currency"):
            data["currency"] = data["currency"].upper()
        return crud_course.create(db, obj_in=data)

    def update_course(self, db: Session, *, course_id: int, course_in: CourseUpdate) -> Course:
        course = self._get_or_404(db, course_id)
        data = course_in.model_dump(exclude_unset=True)
        if "slug" in data and data["slug"]:
            data["slug"] = self._slug_for(db, data["slug"], course.title, current_id=course.id)
        if data.get("currency"):
            data["currency"] = data["currency"].upper()
        return crud_course.update(db, db_obj=course, obj_in=data)

    def set_publish_status(self, db: Session, *, course_id: int, is_published: bool) -> Course:
        course = self._get_or_404(db, course_id)
        return crud_course.update(db, db_obj=course, obj_in={"is_published": is_published})

    def delete_course(self, db: Session, *, course_id: int) -> Course:
        self._get_or_404(db, course_id)
        return crud_course.delete(db, id=course_id)

    def get_stats(self, db: Session) -> CourseStats:
        total = crud_course.count(db)
        published = crud_course.count_published(db)
        return CourseStats(
            total_courses=total,
            published_courses=published,
            draft_courses=total - published,
            total_enrollments=crud_enrollment.count(db),
            total_revenue=crud_payment.total_revenue(db),
        )


course_service = CourseService()
