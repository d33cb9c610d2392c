from pydantic import BaseModel, ConfigDict, EmailStr, Field
from typing import Optional
from datetime import datetime
from overseas.core.constants import AppointmentStatusEnum


class AppointmentCreate(BaseModel):
    full_name: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    appointment_type: str = "consultation"
    scheduled_at: datetime
    duration_minutes: int = Field(30, ge=15, le=240)
    notes: Optional[str] = None


class AppointmentUpdate(BaseModel):
    status: Optional[AppointmentStatusEnum] = None
    scheduled_at: Optional[datetime] = None
    consultant_name: Optional[str] = None
    meeting_link: Optional[str] = None
    admin_notes: Optional[str] = None


class Appointment(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: Optional[int] = None
    full_name: str
    email: str
    phone: Optional[str] = None
    appointment_type: str
    scheduled_at: datetime
    duration_minutes: int
    status: AppointmentStatusEnum
    consultant_name: Optional[str] = None
    meeting_link: Optional[str] = None
    notes: Optional[str] = None
    admin_notes: Optional[str] = None
    created_at: Optional[datetime] = None
