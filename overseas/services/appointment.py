import logging
from typing import List, Optional
from sqlalchemy.orm import Session
from fastapi import HTTPException, status

from overseas.core.constants import AppointmentStatusEnum
from overseas.crud.appointment import appointment as crud_appointment
from overseas.models.appointment import Appointment
from overseas.models.user import User
from overseas.schemas.appointment import AppointmentCreate, AppointmentUpdate
from overseas.services.email import EmailService

logger = logging.getLogger(__name__)


class AppointmentService:

    def book(self, db: Session, *, user: User, appointment_in: AppointmentCreate) -> Appointment:
        """Book a consultation slot; contact details default to the caller's account."""
        data = appointment_in.model_dump()
        data["full_name"] = data.get("full_name") or user.full_name
        data["email"] = data.get("email") or user.email
        data["phone"] = data.get("phone") or user.phone
        data["user_id"] = user.id
        data["status"] = AppointmentStatusEnum.SCHEDULED

        appointment = crud_appointment.create(db, obj_in=data)
        logger.info(f"Appointment {appointment.id} booked by user {user.id} for {appointment.scheduled_at}")
        return appointment

    def list_own(self, db: Session, *, user: User) -> List[Appointment]:
        return crud_appointment.get_by_user(db, user_id=user.id)

    def list_for_admin(
        self, db: Session, *, status_filter: Optional[AppointmentStatusEnum] = None, skip: int = 0, limit: int = 100
    ) -> List[Appointment]:
        return crud_appointment.get_filtered(db, status=status_filter, skip=skip, limit=limit)

    async def update(self, db: Session, *, appointment_id: int, appointment_in: AppointmentUpdate) -> Appointment:
        appointment = crud_appointment.get(db, id=appointment_id)
        if not appointment:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Appointment not found")

        previous_status = appointment.status
        appointment = crud_appointment.update(db, db_obj=appointment, obj_in=appointment_in)

        if appointment.status != previous_status:
            await EmailService.send_email(
                to_email=appointment.email,
                subject=f"Your appointment is {appointment.status.value.replace('_', ' ').lower()}",
                template_name="appointment_update.html",
                template_context={
                    "full_name": appointment.full_name,
                    "appointment_type": appointment.appointment_type,
                    "scheduled_at": appointment.scheduled_at.strftime("%d %b %Y, %H:%M"),
                    "status": appointment.status.value.replace("_", " ").title(),
                    "meeting_link": appointment.meeting_link,
                },
            )
        return appointment


appointment_service = AppointmentService()
