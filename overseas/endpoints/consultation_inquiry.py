from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from overseas.schemas.consultation_inquiry import ConsultationInquiry, ConsultationInquiryCreate
from overseas.schemas.response import APIResponse
from overseas.services.consultation_inquiry import consultation_inquiry_service
from overseas.utils import deps

router = APIRouter()


@router.post("", response_model=APIResponse[ConsultationInquiry], status_code=status.HTTP_201_CREATED)
async def submit_consultation_inquiry(
    *,
    db: Session = Depends(deps.get_transactional_db),
    inquiry_in: ConsultationInquiryCreate
):
    """Public consultation request form; no account needed."""
    inquiry = await consultation_inquiry_service.submit(db, inquiry_in=inquiry_in)
    return APIResponse(
        message="Thank you! Our counsellors will contact you shortly.",
        data=ConsultationInquiry.model_validate(inquiry)
    )
