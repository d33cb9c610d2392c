from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session, selectinload

from overseas.crud.base import CRUDBase
from overseas.core.constants import PaymentStatusEnum
from overseas.models.payment import CoursePayment
from overseas.schemas.payment import Payment

class CRUDCoursePayment(CRUDBase[CoursePayment, Payment, Payment]):

    def get_by_gateway_order_id(self, db: Session, order_id: str) -> Optional[CoursePayment]:
        return db.query(CoursePayment).filter(CoursePayment.gateway_order_id == order_id).first()

    def get_multi_filtered(
        self, db: Session, *, status: Optional[PaymentStatusEnum] = None, skip: int = 0, limit: int = 100
    ) -> List[CoursePayment]:
        query = db.query(CoursePayment).options(
            selectinload(CoursePayment.user),
            selectinload(CoursePayment.course),
        )
        if status:
            query = query.filter(CoursePayment.status == status)
        return query.order_by(CoursePayment.created_at.desc()).offset(skip).limit(limit).all()

    def count_by_status(self, db: Session, status: PaymentStatusEnum) -> int:
        return db.query(CoursePayment).filter(CoursePayment.status == status).count()

    def total_revenue(self, db: Session) -> float:
        total = (
            db.query(func.coalesce(func.sum(CoursePayment.amount), 0))
            .filter(CoursePayment.status == PaymentStatusEnum.COMPLETED)
            .scalar()
        )
        return float(total or 0)

    def hard_delete(self, db: Session, payment: CoursePayment) -> None:
        db.delete(payment)
        db.commit()

course_payment = CRUDCoursePayment(CoursePayment)
