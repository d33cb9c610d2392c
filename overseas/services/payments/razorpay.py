import hashlib
import hmac
import json
import logging
from typing import Any, Dict, Optional

import httpx

from overseas.core.constants import PaymentGatewayEnum
from overseas.models.payment import CoursePayment
from overseas.schemas.payment import RazorpayCheckout, VerifyPaymentRequest
from overseas.services.payments.base import (
    GatewayOrder,
    PaymentGateway,
    PaymentGatewayError,
    WebhookEvent,
    WebhookVerificationError,
    to_minor_units,
)

logger = logging.getLogger(__name__)

SUCCEEDED_EVENTS = {"payment.captured", "order.paid"}
FAILED_EVENTS = {"payment.failed"}


def _hmac_sha256(secret: str, message: bytes) -> str:
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).hexdigest()


class RazorpayGateway(PaymentGateway):
    name = PaymentGatewayEnum.RAZORPAY

    def __init__(
        self,
        key_id: str,
        key_secret: str,
        webhook_secret: Optional[str] = None,
        base_url: str = "https://api.razorpay.com/v1",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.key_id = key_id
        self.key_secret = key_secret
        self.webhook_secret = webhook_secret
        self.base_url = base_url.rstrip("/")
        self._transport = transport

    async def _make_request(self, method: str, path: str, payload: Optional[dict] = None) -> Dict[str, Any]:
        async with httpx.AsyncClient(
            base_url=self.base_url,
            auth=(self.key_id, self.key_secret),
            timeout=15.0,
            transport=self._transport,
        ) as client:
            try:
                response = await client.request(method, path, json=payload)
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                raise PaymentGatewayError(
                    f"Razorpay API error {e.response.status_code}: {e.response.text}"
                ) from e
            except httpx.RequestError as e:
                raise PaymentGatewayError(f"Razorpay network error: {e}") from e

            return response.json()

    async def create_order(self, *, amount, currency, receipt, notes=None) -> GatewayOrder:
        data = await self._make_request(
            "POST",
            "/orders",
            {
                "amount": to_minor_units(amount),
                "currency": currency,
                "receipt": receipt,
                "notes": {"payment_id": receipt, **(notes or {})},
            },
        )
        logger.debug(f"Razorpay order {data.get('id')} created for {receipt}")
        return GatewayOrder(
            order_id=data["id"],
            amount=int(data["amount"]),
            currency=data.get("currency", currency),
            raw=data,
        )

    def checkout_payload(self, payment: CoursePayment, order: GatewayOrder) -> RazorpayCheckout:
        return RazorpayCheckout(
            order_id=order.order_id,
            amount=order.amount,
            currency=order.currency,
            key_id=self.key_id,
            payment_id=payment.id,
        )

    def payment_signature(self, order_id: str, payment_id: str) -> str:
        return _hmac_sha256(self.key_secret, f"{order_id}|{payment_id}".encode("utf-8"))

    async def verify_payment(self, payment: CoursePayment, verification: VerifyPaymentRequest) -> Optional[str]:
        order_id = verification.razorpay_order_id
        gateway_payment_id = verification.razorpay_payment_id
        signature = verification.razorpay_signature
        if not (order_id and gateway_payment_id and signature):
            return None
        if payment.gateway_order_id and order_id != payment.gateway_order_id:
            logger.warning(f"Razorpay order mismatch for {payment.id}: {order_id} != {payment.gateway_order_id}")
            return None

        expected = self.payment_signature(order_id, gateway_payment_id)
        if not hmac.compare_digest(expected, signature):
            return None
        return gateway_payment_id

    def parse_webhook(self, payload: bytes, signature: Optional[str]) -> WebhookEvent:
        if not self.webhook_secret:
            raise WebhookVerificationError("Razorpay webhook secret is not configured")
        if not signature or not hmac.compare_digest(_hmac_sha256(self.webhook_secret, payload), signature):
            raise WebhookVerificationError("Invalid Razorpay webhook signature")

        try:
            body = json.loads(payload)
        except ValueError as e:
            raise WebhookVerificationError(f"Malformed Razorpay webhook body: {e}") from e

        event_type = body.get("event", "")
        entities = body.get("payload", {})
        payment_entity = entities.get("payment", {}).get("entity", {})
        order_entity = entities.get("order", {}).get("entity", {})

        if event_type in SUCCEEDED_EVENTS:
            outcome = "succeeded"
        elif event_type in FAILED_EVENTS:
            outcome = "failed"
        else:
            outcome = "ignored"

        notes = payment_entity.get("notes") or order_entity.get("notes") or {}
        return WebhookEvent(
            type=event_type,
            outcome=outcome,
            order_id=payment_entity.get("order_id") or order_entity.get("id"),
            gateway_payment_id=payment_entity.get("id"),
            reference=notes.get("payment_id") if isinstance(notes, dict) else None,
            failure_reason=payment_entity.get("error_description"),
            raw=body,
        )
