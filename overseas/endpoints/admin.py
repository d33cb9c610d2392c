from typing import List, Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from overseas.core.cache import cache, EVENTS_PREFIX
from overseas.core.constants import AppointmentStatusEnum, InquiryQueryTypeEnum, InquiryStatusEnum, PaymentStatusEnum
from overseas.schemas.appointment import Appointment, AppointmentUpdate
from overseas.schemas.consultation_inquiry import ConsultationInquiry, ConsultationInquiryUpdate
from overseas.schemas.course import Course, CourseAdmin, CourseCreate, CourseStats, CourseStatusUpdate, CourseUpdate
from overseas.schemas.curriculum import Lesson, LessonCreate, LessonUpdate, Module, ModuleCreate, ModuleUpdate
from overseas.schemas.event import Event, EventCreate, EventUpdate
from overseas.schemas.payment import PaymentStats, PaymentTransaction
from overseas.schemas.response import APIResponse
from overseas.services.appointment import appointment_service
from overseas.services.consultation_inquiry import consultation_inquiry_service
from overseas.services.course import course_service
from overseas.services.curriculum import curriculum_service
from overseas.services.event import event_service
from overseas.services.purchase import purchase_service
from overseas.utils import deps

router = APIRouter(dependencies=[Depends(deps.require_admin)])


# Courses

@router.get("/courses", response_model=APIResponse[List[CourseAdmin]])
def list_courses_admin(
    db: Session = Depends(deps.get_db),
    search: Optional[str] = None,
    is_published: Optional[bool] = None,
    skip: int = 0,
    limit: int = 100
):
    courses = course_service.get_all_for_admin(db, search=search, is_published=is_published, skip=skip, limit=limit)
    return APIResponse(message="Courses retrieved successfully", data=courses)


@router.get("/courses/stats", response_model=APIResponse[CourseStats])
def get_course_stats(db: Session = Depends(deps.get_db)):
    return APIResponse(message="Course statistics retrieved successfully", data=course_service.get_stats(db))


@router.post("/courses", response_model=APIResponse[Course], status_code=status.HTTP_201_CREATED)
async def create_course(
    *,
    db: Session = Depends(deps.get_transactional_db),
    course_in: CourseCreate
):
    course = course_service.create_course(db, course_in=course_in)
    await cache.invalidate_course_catalog()
    return APIResponse(message="Course created successfully", data=Course.model_validate(course))


@router.get("/courses/{course_id}", response_model=APIResponse[Course])
def read_course_admin(
    *,
    db: Session = Depends(deps.get_db),
    course_id: int
):
    course = course_service.get_for_admin(db, course_id=course_id)
    return APIResponse(message="Course retrieved successfully", data=Course.model_validate(course))


@router.put("/courses/{course_id}", response_model=APIResponse[Course])
async def update_course(
    *,
    db: Session = Depends(deps.get_transactional_db),
    course_id: int,
    course_in: CourseUpdate
):
    course = course_service.update_course(db, course_id=course_id, course_in=course_in)
    await cache.invalidate_course_catalog()
    return APIResponse(message="Course updated successfully", data=Course.model_validate(course))


@router.patch("/courses/{course_id}/status", response_model=APIResponse[Course])
async def set_course_status(
    *,
    db: Session = Depends(deps.get_transactional_db),
    course_id: int,
    status_in: CourseStatusUpdate
):
    course = course_service.set_publish_status(db, course_id=course_id, is_published=status_in.is_published)
    await cache.invalidate_course_catalog()
    state = "published" if course.is_published else "moved to draft"
    return APIResponse(message=f"Course {state}", data=Course.model_validate(course))


@router.delete("/courses/{course_id}", response_model=APIResponse[Course])
async def delete_course(
    *,
    db: Session = Depends(deps.get_transactional_db),
    course_id: int
):
    course = course_service.delete_course(db, course_id=course_id)
    await cache.invalidate_course_catalog()
    return APIResponse(message="Course deleted successfully", data=Course.model_validate(course))


# Modules & lessons

@router.get("/courses/{course_id}/modules", response_model=APIResponse[List[Module]])
def list_modules(
    *,
    db: Session = Depends(deps.get_db),
    course_id: int
):
    modules = curriculum_service.get_modules(db, course_id=course_id)
    return APIResponse(message="Modules retrieved successfully", data=[Module.model_validate(m) for m in modules])


@router.post("/courses/{course_id}/modules", response_model=APIResponse[Module], status_code=status.HTTP_201_CREATED)
async def create_module(
    *,
    db: Session = Depends(deps.get_transactional_db),
    course_id: int,
    module_in: ModuleCreate
):
    module = curriculum_service.create_module(db, course_id=course_id, module_in=module_in)
    await cache.invalidate_course_catalog()
    return APIResponse(message="Module created successfully", data=Module.model_validate(module))


@router.put("/courses/{course_id}/modules/{module_id}", response_model=APIResponse[Module])
async def update_module(
    *,
    db: Session = Depends(deps.get_transactional_db),
    course_id: int,
    module_id: int,
    module_in: ModuleUpdate
):
    module = curriculum_service.update_module(db, course_id=course_id, module_id=module_id, module_in=module_in)
    await cache.invalidate_course_catalog()
    return APIResponse(message="Module updated successfully", data=Module.model_validate(module))


@router.delete("/courses/{course_id}/modules/{module_id}", response_model=APIResponse[None])
async def delete_module(
    *,
    db: Session = Depends(deps.get_transactional_db),
    course_id: int,
    module_id: int
):
    curriculum_service.delete_module(db, course_id=course_id, module_id=module_id)
    await cache.invalidate_course_catalog()
    return APIResponse(message="Module deleted successfully")


@router.post(
    "/courses/{course_id}/modules/{module_id}/lessons",
    response_model=APIResponse[Lesson],
    status_code=status.HTTP_201_CREATED
)
async def create_lesson(
    *,
    db: Session = Depends(deps.get_transactional_db),
    course_id: int,
    module_id: int,
    lesson_in: LessonCreate
):
    lesson = curriculum_service.create_lesson(db, course_id=course_id, module_id=module_id, lesson_in=lesson_in)
    await cache.invalidate_course_catalog()
    return APIResponse(message="Lesson created successfully", data=Lesson.model_validate(lesson))


@router.put("/courses/{course_id}/modules/{module_id}/lessons/{lesson_id}", response_model=APIResponse[Lesson])
async def update_lesson(
    *,
    db: Session = Depends(deps.get_transactional_db),
    course_id: int,
    module_id: int,
    lesson_id: int,
    lesson_in: LessonUpdate
):
    lesson = curriculum_service.update_lesson(
        db, course_id=course_id, module_id=module_id, lesson_id=lesson_id, lesson_in=lesson_in
    )
    await cache.invalidate_course_catalog()
    return APIResponse(message="Lesson updated successfully", data=Lesson.model_validate(lesson))


@router.delete("/courses/{course_id}/modules/{module_id}/lessons/{lesson_id}", response_model=APIResponse[None])
async def delete_lesson(
    *,
    db: Session = Depends(deps.get_transactional_db),
    course_id: int,
    module_id: int,
    lesson_id: int
):
    curriculum_service.delete_lesson(db, course_id=course_id, module_id=module_id, lesson_id=lesson_id)
    await cache.invalidate_course_catalog()
    return APIResponse(message="Lesson deleted successfully")


# Payments

@router.get("/payments/transactions", response_model=APIResponse[List[PaymentTransaction]])
def list_payment_transactions(
    db: Session = Depends(deps.get_db),
    status_filter: Optional[PaymentStatusEnum] = None,
    skip: int = 0,
    limit: int = 100
):
    payments = purchase_service.list_transactions(db, status_filter=status_filter, skip=skip, limit=limit)
    return APIResponse(message="Payments retrieved successfully", data=payments)


@router.get("/payments/stats", response_model=APIResponse[PaymentStats])
def get_payment_stats(db: Session = Depends(deps.get_db)):
    return APIResponse(message="Payment statistics retrieved successfully", data=purchase_service.get_stats(db))


# Events

@router.get("/events", response_model=APIResponse[List[Event]])
def list_events_admin(
    db: Session = Depends(deps.get_db),
    skip: int = 0,
    limit: int = 100
):
    events = event_service.list_for_admin(db, skip=skip, limit=limit)
    return APIResponse(message="Events retrieved successfully", data=[Event.model_validate(e) for e in events])


@router.post("/events", response_model=APIResponse[Event], status_code=status.HTTP_201_CREATED)
async def create_event(
    *,
    db: Session = Depends(deps.get_transactional_db),
    event_in: EventCreate
):
    event = event_service.create_event(db, event_in=event_in)
    await cache.invalidate_prefix(EVENTS_PREFIX)
    return APIResponse(message="Event created successfully", data=Event.model_validate(event))


@router.put("/events/{event_id}", response_model=APIResponse[Event])
async def update_event(
    *,
    db: Session = Depends(deps.get_transactional_db),
    event_id: int,
    event_in: EventUpdate
):
    event = event_service.update_event(db, event_id=event_id, event_in=event_in)
    await cache.invalidate_prefix(EVENTS_PREFIX)
    return APIResponse(message="Event updated successfully", data=Event.model_validate(event))


@router.delete("/events/{event_id}", response_model=APIResponse[Event])
async def delete_event(
    *,
    db: Session = Depends(deps.get_transactional_db),
    event_id: int
):
    event = event_service.delete_event(db, event_id=event_id)
    await cache.invalidate_prefix(EVENTS_PREFIX)
    return APIResponse(message="Event deleted successfully", data=Event.model_validate(event))


# Consultation inquiries

@router.get("/consultation-inquiries", response_model=APIResponse[List[ConsultationInquiry]])
def list_inquiries(
    db: Session = Depends(deps.get_db),
    status_filter: Optional[InquiryStatusEnum] = None,
    query_type: Optional[InquiryQueryTypeEnum] = None,
    search: Optional[str] = None,
    skip: int = 0,
    limit: int = 100
):
    inquiries = consultation_inquiry_service.list_for_admin(
        db, status_filter=status_filter, query_type=query_type, search=search, skip=skip, limit=limit
    )
    return APIResponse(
        message="Inquiries retrieved successfully",
        data=[ConsultationInquiry.model_validate(i) for i in inquiries]
    )


@router.patch("/consultation-inquiries/{inquiry_id}", response_model=APIResponse[ConsultationInquiry])
def update_inquiry(
    *,
    db: Session = Depends(deps.get_transactional_db),
    inquiry_id: int,
    inquiry_in: ConsultationInquiryUpdate
):
    inquiry = consultation_inquiry_service.update(db, inquiry_id=inquiry_id, inquiry_in=inquiry_in)
    return APIResponse(message="Inquiry updated successfully", data=ConsultationInquiry.model_validate(inquiry))


# Appointments

@router.get("/appointments", response_model=APIResponse[List[Appointment]])
def list_appointments(
    db: Session = Depends(deps.get_db),
    status_filter: Optional[AppointmentStatusEnum] = None,
    skip: int = 0,
    limit: int = 100
):
    appointments = appointment_service.list_for_admin(db, status_filter=status_filter, skip=skip, limit=limit)
    return APIResponse(
        message="Appointments retrieved successfully",
        data=[Appointment.model_validate(a) for a in appointments]
    )


@router.patch("/appointments/{appointment_id}", response_model=APIResponse[Appointment])
async def update_appointment(
    *,
    db: Session = Depends(deps.get_transactional_db),
    appointment_id: int,
    appointment_in: AppointmentUpdate
):
    appointment = await appointment_service.update(db, appointment_id=appointment_id, appointment_in=appointment_in)
    return APIResponse(message="Appointment updated successfully", data=Appointment.model_validate(appointment))
