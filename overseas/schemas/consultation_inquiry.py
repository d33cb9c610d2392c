from pydantic import BaseModel, ConfigDict, EmailStr, field_validator
from typing import Optional
from datetime import datetime
from overseas.core.constants import InquiryQueryTypeEnum, InquiryStatusEnum


class ConsultationInquiryCreate(BaseModel):
    full_name: str
    email: EmailStr
    phone: str
    query_type: InquiryQueryTypeEnum = InquiryQueryTypeEnum.GENERAL_INQUIRY
    study_destination: Optional[str] = None
    current_education: Optional[str] = None
    message: Optional[str] = None
    source: Optional[str] = "website"

    @field_validator("full_name", "phone")
    def not_blank(cls, v):
        if not v or not v.strip():
            raise ValueError("Field cannot be empty.")
        return v.strip()


class ConsultationInquiryUpdate(BaseModel):
    status: Optional[InquiryStatusEnum] = None
    admin_notes: Optional[str] = None


class ConsultationInquiry(ConsultationInquiryCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int
    status: InquiryStatusEnum
    admin_notes: Optional[str] = None
    created_at: Optional[datetime] = None
