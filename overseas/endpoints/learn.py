from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from overseas.core.cache import cache
from overseas.models.user import User
from overseas.schemas.learn import (
    AccessResponse,
    CourseProgressResponse,
    Enrollment,
    EnrollResponse,
    LessonsResponse,
    MessageResponse,
    ProgressUpdateRequest,
    ProgressUpdateResponse,
)
from overseas.schemas.payment import PurchaseResponse, VerifyPaymentRequest, VerifyPaymentResponse
from overseas.services.course_access import course_access_service
from overseas.services.course_progress import course_progress_service
from overseas.services.enrollment import enrollment_service
from overseas.services.payments.registry import GatewayRegistry, get_gateway_registry
from overseas.services.purchase import purchase_service
from overseas.utils import deps

router = APIRouter()


@router.get("/{course_id}/access", response_model=AccessResponse)
def check_course_access(
    *,
    db: Session = Depends(deps.get_db),
    course_id: int,
    current_user: User = Depends(deps.get_current_user)
):
    return course_access_service.check_access(db, course_id=course_id, user=current_user)


@router.get("/{course_id}/lessons", response_model=LessonsResponse)
def get_course_lessons(
    *,
    db: Session = Depends(deps.get_db),
    course_id: int,
    current_user: User = Depends(deps.get_current_user)
):
    return course_access_service.get_lessons(db, course_id=course_id, user=current_user)


@router.get("/{course_id}/progress", response_model=CourseProgressResponse)
def get_course_progress(
    *,
    db: Session = Depends(deps.get_db),
    course_id: int,
    current_user: User = Depends(deps.get_current_user)
):
    return course_progress_service.get_progress(db, course_id=course_id, user=current_user)


@router.post("/{course_id}/progress", response_model=ProgressUpdateResponse)
async def update_lesson_progress(
    *,
    db: Session = Depends(deps.get_transactional_db),
    course_id: int,
    progress_in: ProgressUpdateRequest,
    current_user: User = Depends(deps.get_current_user)
):
    result = course_progress_service.record_progress(
        db, course_id=course_id, user=current_user, progress_in=progress_in
    )
    await cache.invalidate_user_cache(current_user.id)
    return result


@router.post("/{course_id}/enroll", response_model=EnrollResponse, status_code=status.HTTP_201_CREATED)
async def enroll_in_course(
    *,
    db: Session = Depends(deps.get_transactional_db),
    course_id: int,
    current_user: User = Depends(deps.get_current_user)
):
    enrollment = enrollment_service.enroll_free(db, course_id=course_id, user=current_user)
    await cache.invalidate_course_catalog()
    await cache.invalidate_user_cache(current_user.id)
    return EnrollResponse(
        message="Successfully enrolled in the course!",
        enrollment=Enrollment.model_validate(enrollment),
    )


@router.delete("/{course_id}/enroll", response_model=MessageResponse)
async def unenroll_from_course(
    *,
    db: Session = Depends(deps.get_transactional_db),
    course_id: int,
    current_user: User = Depends(deps.get_current_user)
):
    enrollment_service.unenroll(db, course_id=course_id, user=current_user)
    await cache.invalidate_course_catalog()
    await cache.invalidate_user_cache(current_user.id)
    return MessageResponse(message="Successfully unenrolled from the course")


@router.post("/{course_id}/purchase", response_model=PurchaseResponse)
async def purchase_course(
    *,
    db: Session = Depends(deps.get_transactional_db),
    course_id: int,
    current_user: User = Depends(deps.get_current_user),
    registry: GatewayRegistry = Depends(get_gateway_registry)
):
    return await purchase_service.create_purchase(db, course_id=course_id, user=current_user, registry=registry)


@router.post("/{course_id}/verify-payment", response_model=VerifyPaymentResponse)
async def verify_course_payment(
    *,
    db: Session = Depends(deps.get_transactional_db),
    course_id: int,
    verification: VerifyPaymentRequest,
    current_user: User = Depends(deps.get_current_user),
    registry: GatewayRegistry = Depends(get_gateway_registry)
):
    result = await purchase_service.verify_payment(
        db, course_id=course_id, user=current_user, verification=verification, registry=registry
    )
    await cache.invalidate_course_catalog()
    await cache.invalidate_user_cache(current_user.id)
    return result
