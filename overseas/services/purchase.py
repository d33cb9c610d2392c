import logging
from datetime import datetime
from typing import List, Optional, Tuple
from sqlalchemy.orm import Session
from fastapi import HTTPException, status

from overseas.core.cache import cache
from overseas.core.config import settings
from overseas.core.constants import PaymentGatewayEnum, PaymentStatusEnum
from overseas.crud.course import course as crud_course
from overseas.crud.payment import course_payment as crud_payment
from overseas.models.course import Course
from overseas.models.course_enrollment import CourseEnrollment
from overseas.models.payment import CoursePayment
from overseas.models.user import User
from overseas.schemas.learn import Enrollment
from overseas.schemas.payment import (
    PaymentStats,
    PaymentTransaction,
    PurchaseCourse,
    PurchaseResponse,
    VerifyPaymentRequest,
    VerifyPaymentResponse,
    WebhookAck,
)
from overseas.services.email import EmailService
from overseas.services.enrollment import enrollment_service
from overseas.services.payments.base import PaymentGatewayError, WebhookVerificationError
from overseas.services.payments.registry import GatewayRegistry
from overseas.utils.identifiers import generate_payment_id

logger = logging.getLogger(__name__)


def course_learn_path(course_id: int) -> str:
    return f"/courses/{course_id}/learn"


class PurchaseService:

    async def create_purchase(
        self, db: Session, *, course_id: int, user: User, registry: GatewayRegistry
    ) -> PurchaseResponse:
        """Open a PENDING payment and the matching gateway order for a paid course."""
        course = enrollment_service.ensure_enrollable(db, course_id=course_id, user=user)
        if course.is_free:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="This course is free. Use the enroll endpoint instead."
            )

        currency = (course.currency or settings.DEFAULT_CURRENCY).upper()
        gateway = registry.select(currency)

        payment = crud_payment.create(
            db,
            obj_in={
                "id": generate_payment_id(),
                "user_id": user.id,
                "course_id": course.id,
                "amount": course.price,
                "currency": currency,
                "gateway": gateway.name,
                "status": PaymentStatusEnum.PENDING,
            },
        )

        try:
            order = await gateway.create_order(
                amount=course.price,
                currency=currency,
                receipt=payment.id,
                notes={"course_id": course.id, "user_id": user.id},
            )
        except PaymentGatewayError as e:
            logger.error(f"Creating {gateway.name.value} order for payment {payment.id} failed: {e}")
            crud_payment.hard_delete(db, payment)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to create payment order"
            )

        payment = crud_payment.update(
            db,
            db_obj=payment,
            obj_in={"gateway_order_id": order.order_id, "gateway_response": order.raw or None},
        )
        logger.info(f"Payment {payment.id} opened for course {course.id} via {gateway.name.value}")

        return PurchaseResponse(
            course=PurchaseCourse(id=course.id, title=course.title, price=course.price, currency=currency),
            payment=gateway.checkout_payload(payment, order),
        )

    def _get_payment_for_caller(self, db: Session, *, payment_id: str, course_id: int, user: User) -> CoursePayment:
        payment = crud_payment.get(db, id=payment_id)
        if not payment or payment.course_id != course_id:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Payment not found")
        if payment.user_id != user.id:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Unauthorized access to payment")
        if payment.status == PaymentStatusEnum.COMPLETED:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Payment already verified")
        return payment

    async def verify_payment(
        self,
        db: Session,
        *,
        course_id: int,
        user: User,
        verification: VerifyPaymentRequest,
        registry: GatewayRegistry,
    ) -> VerifyPaymentResponse:
        payment = self._get_payment_for_caller(db, payment_id=verification.payment_id, course_id=course_id, user=user)

        if payment.gateway == PaymentGatewayEnum.RAZORPAY and not (
            verification.razorpay_order_id and verification.razorpay_payment_id and verification.razorpay_signature
        ):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Missing Razorpay verification data"
            )

        gateway = registry.get(payment.gateway)
        try:
            gateway_payment_id = await gateway.verify_payment(payment, verification)
        except PaymentGatewayError as e:
            logger.error(f"Verifying payment {payment.id} failed: {e}")
            raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail="Payment provider unavailable")

        if not gateway_payment_id:
            logger.warning(f"Payment verification failed for {payment.id} (user {user.id})")
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Payment verification failed")

        enrollment, newly_completed = self.complete_payment(
            db,
            payment,
            gateway_payment_id=gateway_payment_id,
            details=verification.model_dump(exclude_none=True),
        )
        if newly_completed:
            await self._send_confirmation(payment, enrollment)

        return VerifyPaymentResponse(
            success=True,
            message="Payment verified and enrollment successful",
            enrollment=Enrollment.model_validate(enrollment),
            course_url=course_learn_path(course_id),
        )

    def complete_payment(
        self,
        db: Session,
        payment: CoursePayment,
        *,
        gateway_payment_id: Optional[str],
        details: Optional[dict] = None,
    ) -> Tuple[CourseEnrollment, bool]:
        """
        Mark a payment COMPLETED and activate the buyer's enrollment.

        Returns the enrollment and whether this call did the completion. An
        already COMPLETED payment is left as it is.
        """
        course = crud_course.get(db, id=payment.course_id)
        if course is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Course not found")

        if payment.status == PaymentStatusEnum.COMPLETED:
            enrollment = enrollment_service.activate_enrollment(
                db, course=course, user_id=payment.user_id, payment_id=payment.id
            )
            db.commit()
            return enrollment, False

        payment.status = PaymentStatusEnum.COMPLETED
        payment.gateway_payment_id = gateway_payment_id or payment.gateway_payment_id
        payment.paid_at = datetime.utcnow()
        payment.failure_reason = None
        if details:
            payment.gateway_response = {**(payment.gateway_response or {}), "verification": details}
        db.add(payment)
        db.flush()

        enrollment = enrollment_service.activate_enrollment(
            db, course=course, user_id=payment.user_id, payment_id=payment.id
        )
        db.commit()
        db.refresh(enrollment)
        logger.info(f"Payment {payment.id} completed, user {payment.user_id} enrolled in course {course.id}")
        return enrollment, True

    def fail_payment(self, db: Session, payment: CoursePayment, *, reason: Optional[str] = None) -> CoursePayment:
        if payment.status == PaymentStatusEnum.COMPLETED:
            logger.warning(f"Ignoring failure notice for completed payment {payment.id}")
            return payment
        return crud_payment.update(
            db,
            db_obj=payment,
            obj_in={"status": PaymentStatusEnum.FAILED, "failure_reason": reason or "Payment failed"},
        )

    async def _send_confirmation(self, payment: CoursePayment, enrollment: CourseEnrollment) -> None:
        user = payment.user
        course: Course = enrollment.course
        await EmailService.send_email(
            to_email=user.email,
            subject=f"You're enrolled in {course.title}",
            template_name="enrollment_confirmation.html",
            template_context={
                "first_name": user.first_name,
                "course_title": course.title,
                "amount": float(payment.amount),
                "currency": payment.currency,
                "payment_id": payment.id,
                "course_url": f"{settings.APP_URL}{course_learn_path(course.id)}",
            },
        )

    async def handle_webhook(
        self,
        db: Session,
        *,
        gateway_name: PaymentGatewayEnum,
        payload: bytes,
        signature: Optional[str],
        registry: GatewayRegistry,
    ) -> WebhookAck:
        gateway = registry.get(gateway_name)
        try:
            event = gateway.parse_webhook(payload, signature)
        except WebhookVerificationError as e:
            logger.warning(f"Rejected {gateway_name.value} webhook: {e}")
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid webhook signature")

        if event.outcome == "ignored":
            logger.info(f"Unhandled {gateway_name.value} webhook event type: {event.type}")
            return WebhookAck(handled=False)

        payment = crud_payment.get(db, id=event.reference) if event.reference else None
        if payment is None and event.order_id:
            payment = crud_payment.get_by_gateway_order_id(db, order_id=event.order_id)
        if payment is None:
            logger.warning(f"No payment matches {gateway_name.value} event {event.type} (order {event.order_id})")
            return WebhookAck(handled=False)

        if event.outcome == "succeeded":
            enrollment, newly_completed = self.complete_payment(
                db, payment, gateway_payment_id=event.gateway_payment_id, details={"webhook_event": event.type}
            )
            if newly_completed:
                await self._send_confirmation(payment, enrollment)
            await cache.invalidate_course_catalog()
            await cache.invalidate_user_cache(payment.user_id)
        else:
            self.fail_payment(db, payment, reason=event.failure_reason)

        return WebhookAck(handled=True)

    # Admin

    def list_transactions(
        self, db: Session, *, status_filter: Optional[PaymentStatusEnum] = None, skip: int = 0, limit: int = 100
    ) -> List[PaymentTransaction]:
        payments = crud_payment.get_multi_filtered(db, status=status_filter, skip=skip, limit=limit)
        result = []
        for payment in payments:
            item = PaymentTransaction.model_validate(payment)
            item.user_email = payment.user.email if payment.user else None
            item.course_title = payment.course.title if payment.course else None
            result.append(item)
        return result

    def get_stats(self, db: Session) -> PaymentStats:
        return PaymentStats(
            total_revenue=crud_payment.total_revenue(db),
            completed_payments=crud_payment.count_by_status(db, PaymentStatusEnum.COMPLETED),
            pending_payments=crud_payment.count_by_status(db, PaymentStatusEnum.PENDING),
            failed_payments=crud_payment.count_by_status(db, PaymentStatusEnum.FAILED),
        )


purchase_service = PurchaseService()
