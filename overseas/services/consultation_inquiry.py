import logging
from typing import List, Optional
from sqlalchemy.orm import Session
from fastapi import HTTPException, status

from overseas.core.constants import InquiryQueryTypeEnum, InquiryStatusEnum
from overseas.crud.consultation_inquiry import consultation_inquiry as crud_inquiry
from overseas.models.consultation_inquiry import ConsultationInquiry
from overseas.schemas.consultation_inquiry import ConsultationInquiryCreate, ConsultationInquiryUpdate
from overseas.services.email import EmailService

logger = logging.getLogger(__name__)

QUERY_TYPE_LABELS = {
    InquiryQueryTypeEnum.UNIVERSITY_SELECTION: "University Selection",
    InquiryQueryTypeEnum.VISA_GUIDANCE: "Visa Guidance",
    InquiryQueryTypeEnum.DOCUMENT_HELP: "Document Help",
    InquiryQueryTypeEnum.GENERAL_INQUIRY: "General Inquiry",
}


class ConsultationInquiryService:

    async def submit(self, db: Session, *, inquiry_in: ConsultationInquiryCreate) -> ConsultationInquiry:
        data = inquiry_in.model_dump()
        data["email"] = data["email"].lower()
        data["status"] = InquiryStatusEnum.NEW
        inquiry = crud_inquiry.create(db, obj_in=data)
        logger.info(f"Consultation inquiry {inquiry.id} received ({inquiry.query_type.value})")

        await EmailService.send_email(
            to_email=inquiry.email,
            subject="We received your consultation request",
            template_name="consultation_received.html",
            template_context={
                "full_name": inquiry.full_name,
                "query_type_label": QUERY_TYPE_LABELS[inquiry.query_type],
                "study_destination": inquiry.study_destination,
            },
        )
        return inquiry

    def list_for_admin(
        self,
        db: Session,
        *,
        status_filter: Optional[InquiryStatusEnum] = None,
        query_type: Optional[InquiryQueryTypeEnum] = None,
        search: Optional[str] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> List[ConsultationInquiry]:
        return crud_inquiry.get_filtered(
            db, status=status_filter, query_type=query_type, search=search, skip=skip, limit=limit
        )

    def update(self, db: Session, *, inquiry_id: int, inquiry_in: ConsultationInquiryUpdate) -> ConsultationInquiry:
        inquiry = crud_inquiry.get(db, id=inquiry_id)
        if not inquiry:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Inquiry not found")
        return crud_inquiry.update(db, db_obj=inquiry, obj_in=inquiry_in)


consultation_inquiry_service = ConsultationInquiryService()
