from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from overseas.models.user import User
from overseas.schemas.appointment import Appointment, AppointmentCreate
from overseas.schemas.response import APIResponse
from overseas.services.appointment import appointment_service
from overseas.utils import deps

router = APIRouter()


@router.post("", response_model=APIResponse[Appointment], status_code=status.HTTP_201_CREATED)
def book_appointment(
    *,
    db: Session = Depends(deps.get_transactional_db),
    appointment_in: AppointmentCreate,
    current_user: User = Depends(deps.get_current_user)
):
    appointment = appointment_service.book(db, user=current_user, appointment_in=appointment_in)
    return APIResponse(message="Appointment booked successfully", data=Appointment.model_validate(appointment))


@router.get("", response_model=APIResponse[List[Appointment]])
def list_my_appointments(
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user)
):
    appointments = appointment_service.list_own(db, user=current_user)
    return APIResponse(
        message="Appointments retrieved successfully",
        data=[Appointment.model_validate(a) for a in appointments]
    )
