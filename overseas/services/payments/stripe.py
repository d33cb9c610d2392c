import asyncio
import logging
from typing import Any, Optional

import stripe
from stripe import SignatureVerificationError

from overseas.core.constants import PaymentGatewayEnum
from overseas.models.payment import CoursePayment
from overseas.schemas.payment import StripeCheckout, VerifyPaymentRequest
from overseas.services.payments.base import (
    GatewayOrder,
    PaymentGateway,
    PaymentGatewayError,
    WebhookEvent,
    WebhookVerificationError,
    to_minor_units,
)

logger = logging.getLogger(__name__)


def _field(obj: Any, key: str, default=None):
    try:
        value = obj[key]
    except (KeyError, TypeError):
        return default
    return default if value is None else value


class StripeGateway(PaymentGateway):
    name = PaymentGatewayEnum.STRIPE

    def __init__(self, secret_key: str, public_key: Optional[str] = None, webhook_secret: Optional[str] = None):
        self.secret_key = secret_key
        self.public_key = public_key
        self.webhook_secret = webhook_secret

    async def _make_request(self, stripe_api_call, *args, **kwargs):
        try:
            return await asyncio.to_thread(stripe_api_call, *args, api_key=self.secret_key, **kwargs)
        except stripe.StripeError as e:
            raise PaymentGatewayError(f"Stripe error: {e.user_message or e}") from e

    async def create_order(self, *, amount, currency, receipt, notes=None) -> GatewayOrder:
        intent = await self._make_request(
            stripe.PaymentIntent.create,
            amount=to_minor_units(amount),
            currency=currency.lower(),
            metadata={"payment_id": receipt, **{k: str(v) for k, v in (notes or {}).items()}},
            automatic_payment_methods={"enabled": True},
        )
        logger.debug(f"Stripe PaymentIntent {intent.id} created for {receipt}")
        return GatewayOrder(
            order_id=intent.id,
            amount=int(intent.amount),
            currency=currency,
            client_secret=intent.client_secret,
            raw={"id": intent.id, "status": intent.status},
        )

    def checkout_payload(self, payment: CoursePayment, order: GatewayOrder) -> StripeCheckout:
        return StripeCheckout(
            client_secret=order.client_secret,
            payment_intent_id=order.order_id,
            public_key=self.public_key,
            payment_id=payment.id,
            amount=order.amount,
            currency=order.currency,
        )

    async def verify_payment(self, payment: CoursePayment, verification: VerifyPaymentRequest) -> Optional[str]:
        intent_id = verification.stripe_payment_intent_id
        if not intent_id or intent_id != payment.gateway_order_id:
            return None

        intent = await self._make_request(stripe.PaymentIntent.retrieve, intent_id)
        if intent.status != "succeeded":
            logger.info(f"Stripe PaymentIntent {intent_id} is {intent.status}, not succeeded")
            return None
        return _field(intent, "latest_charge", intent.id)

    def parse_webhook(self, payload: bytes, signature: Optional[str]) -> WebhookEvent:
        if not self.webhook_secret:
            raise WebhookVerificationError("Stripe webhook secret is not configured")
        if not signature:
            raise WebhookVerificationError("Missing Stripe-Signature header")
        try:
            event = stripe.Webhook.construct_event(payload, signature, self.webhook_secret)
        except ValueError as e:
            raise WebhookVerificationError(str(e)) from e
        except SignatureVerificationError as e:
            raise WebhookVerificationError(str(e)) from e

        event_type = event["type"]
        obj = event["data"]["object"]

        if event_type == "payment_intent.succeeded":
            outcome = "succeeded"
        elif event_type == "payment_intent.payment_failed":
            outcome = "failed"
        else:
            outcome = "ignored"

        metadata = _field(obj, "metadata", {})
        last_error = _field(obj, "last_payment_error", {})
        return WebhookEvent(
            type=event_type,
            outcome=outcome,
            order_id=_field(obj, "id"),
            gateway_payment_id=_field(obj, "latest_charge"),
            reference=_field(metadata, "payment_id"),
            failure_reason=_field(last_error, "message"),
        )
