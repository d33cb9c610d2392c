from typing import List, Optional
from sqlalchemy import or_
from sqlalchemy.orm import Session

from overseas.crud.base import CRUDBase
from overseas.core.constants import InquiryStatusEnum, InquiryQueryTypeEnum
from overseas.models.consultation_inquiry import ConsultationInquiry
from overseas.schemas.consultation_inquiry import ConsultationInquiryCreate, ConsultationInquiryUpdate

class CRUDConsultationInquiry(CRUDBase[ConsultationInquiry, ConsultationInquiryCreate, ConsultationInquiryUpdate]):

    def get_filtered(
        self,
        db: Session,
        *,
        status: Optional[InquiryStatusEnum] = None,
        query_type: Optional[InquiryQueryTypeEnum] = None,
        search: Optional[str] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> List[ConsultationInquiry]:
        query = db.query(ConsultationInquiry)
        if status:
            query = query.filter(ConsultationInquiry.status == status)
        if query_type:
            query = query.filter(ConsultationInquiry.query_type == query_type)
        if search:
            pattern = f"%{search}%"
            query = query.filter(or_(ConsultationInquiry.full_name.ilike(pattern), ConsultationInquiry.email.ilike(pattern)))
        return query.order_by(ConsultationInquiry.created_at.desc(), ConsultationInquiry.id.desc()).offset(skip).limit(limit).all()

consultation_inquiry = CRUDConsultationInquiry(ConsultationInquiry)
