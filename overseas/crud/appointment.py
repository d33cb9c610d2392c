from typing import List, Optional
from sqlalchemy.orm import Session

from overseas.crud.base import CRUDBase
from overseas.core.constants import AppointmentStatusEnum
from overseas.models.appointment import Appointment
from overseas.schemas.appointment import AppointmentCreate, AppointmentUpdate

class CRUDAppointment(CRUDBase[Appointment, AppointmentCreate, AppointmentUpdate]):

    def get_by_user(self, db: Session, user_id: int) -> List[Appointment]:
        return (
            db.query(Appointment)
            .filter(Appointment.user_id == user_id)
            .order_by(Appointment.scheduled_at.desc())
            .all()
        )

    def get_filtered(
        self, db: Session, *, status: Optional[AppointmentStatusEnum] = None, skip: int = 0, limit: int = 100
    ) -> List[Appointment]:
        query = db.query(Appointment)
        if status:
            query = query.filter(Appointment.status == status)
        return query.order_by(Appointment.scheduled_at.asc()).offset(skip).limit(limit).all()

    def count_by_status(self, db: Session, status: AppointmentStatusEnum) -> int:
        return db.query(Appointment).filter(Appointment.status == status).count()

appointment = CRUDAppointment(Appointment)
