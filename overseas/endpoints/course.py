from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy.orm import Session

from overseas.core.cache import cache, COURSE_CATALOG_PREFIX, MY_COURSES_PREFIX
from overseas.core.constants import CourseLevelEnum
from overseas.core.decorators import cache_endpoint
from overseas.models.user import User
from overseas.schemas.course import Course, CourseDetail
from overseas.schemas.learn import MyCourse
from overseas.schemas.response import APIResponse, PaginatedData
from overseas.schemas.review import CourseReviews, Review, ReviewCreate
from overseas.services.course import course_service
from overseas.services.enrollment import enrollment_service
from overseas.services.review import review_service
from overseas.utils import deps

router = APIRouter()


@router.get("", response_model=APIResponse[PaginatedData[Course]])
@cache_endpoint(ttl=300, key_prefix=f"{COURSE_CATALOG_PREFIX}:list")
async def list_courses(
    request: Request,
    db: Session = Depends(deps.get_db),
    search: Optional[str] = None,
    level: Optional[CourseLevelEnum] = None,
    featured: Optional[bool] = None,
    min_price: Optional[float] = Query(None, ge=0),
    max_price: Optional[float] = Query(None, ge=0),
    page: int = Query(1, ge=1),
    limit: int = Query(12, ge=1, le=100),
):
    catalog = course_service.get_catalog(
        db,
        search=search,
        level=level,
        featured=featured,
        min_price=min_price,
        max_price=max_price,
        page=page,
        limit=limit,
    )
    return APIResponse(message="Courses retrieved successfully", data=catalog)


@router.get("/my-courses", response_model=List[MyCourse])
@cache_endpoint(ttl=120, key_prefix=MY_COURSES_PREFIX)
async def get_my_courses(
    request: Request,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user)
):
    return enrollment_service.get_my_courses(db, user=current_user)


@router.get("/{course_id}", response_model=APIResponse[CourseDetail])
@cache_endpoint(ttl=300, key_prefix=f"{COURSE_CATALOG_PREFIX}:detail")
async def read_course(
    *,
    request: Request,
    db: Session = Depends(deps.get_db),
    course_id: int
):
    course = course_service.get_course_detail(db, course_id=course_id)
    return APIResponse(message="Course retrieved successfully", data=course)


@router.get("/{course_id}/reviews", response_model=APIResponse[CourseReviews])
@cache_endpoint(ttl=300, key_prefix=f"{COURSE_CATALOG_PREFIX}:reviews")
async def list_course_reviews(
    *,
    request: Request,
    db: Session = Depends(deps.get_db),
    course_id: int,
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=50)
):
    reviews = review_service.list_reviews(db, course_id=course_id, page=page, limit=limit)
    return APIResponse(message="Reviews retrieved successfully", data=reviews)


@router.post("/{course_id}/reviews", response_model=APIResponse[Review], status_code=status.HTTP_201_CREATED)
async def create_course_review(
    *,
    db: Session = Depends(deps.get_transactional_db),
    course_id: int,
    review_in: ReviewCreate,
    current_user: User = Depends(deps.get_current_user)
):
    review = review_service.create_review(db, course_id=course_id, user=current_user, review_in=review_in)
    await cache.invalidate_course_catalog()
    return APIResponse(message="Review created successfully", data=Review.model_validate(review))
