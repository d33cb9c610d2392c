from sqlalchemy import Column, Integer, String, Text, DateTime, Enum
from sqlalchemy.sql import func
from overseas.core.database import Base
from overseas.core.constants import InquiryQueryTypeEnum, InquiryStatusEnum

class ConsultationInquiry(Base):
    __tablename__ = "consultation_inquiries"

    id = Column(Integer, primary_key=True, index=True)
    full_name = Column(String, nullable=False)
    email = Column(String, nullable=False, index=True)
    phone = Column(String, nullable=False)
    query_type = Column(Enum(InquiryQueryTypeEnum), nullable=False, default=InquiryQueryTypeEnum.GENERAL_INQUIRY)
    study_destination = Column(String, nullable=True)
    current_education = Column(String, nullable=True)
    message = Column(Text, nullable=True)
    source = Column(String, nullable=True, default="website")
    status = Column(Enum(InquiryStatusEnum), nullable=False, default=InquiryStatusEnum.NEW)
    admin_notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
