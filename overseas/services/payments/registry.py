import logging
from functools import lru_cache
from typing import Dict, Optional

from fastapi import HTTPException, status

from overseas.core.config import settings
from overseas.core.constants import PaymentGatewayEnum
from overseas.services.payments.base import PaymentGateway
from overseas.services.payments.razorpay import RazorpayGateway
from overseas.services.payments.stripe import StripeGateway

logger = logging.getLogger(__name__)


class GatewayRegistry:
    def __init__(self, gateways: Optional[Dict[PaymentGatewayEnum, PaymentGateway]] = None):
        self._gateways: Dict[PaymentGatewayEnum, PaymentGateway] = dict(gateways or {})

    @property
    def available(self):
        return list(self._gateways)

    def register(self, gateway: PaymentGateway) -> None:
        self._gateways[gateway.name] = gateway

    def get(self, name: PaymentGatewayEnum) -> PaymentGateway:
        gateway = self._gateways.get(PaymentGatewayEnum(name))
        if gateway is None:
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail=f"Payment gateway '{PaymentGatewayEnum(name).value}' is not configured"
            )
        return gateway

    def select(self, currency: str) -> PaymentGateway:
        """Razorpay settles INR; Stripe takes every other currency, with Razorpay as the last resort."""
        razorpay = self._gateways.get(PaymentGatewayEnum.RAZORPAY)
        stripe_gateway = self._gateways.get(PaymentGatewayEnum.STRIPE)

        if currency.upper() == "INR" and razorpay:
            return razorpay
        if stripe_gateway:
            return stripe_gateway
        if razorpay:
            return razorpay

        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="No payment gateway is configured"
        )


def build_gateway_registry() -> GatewayRegistry:
    registry = GatewayRegistry()
    if settings.razorpay_enabled:
        registry.register(RazorpayGateway(
            key_id=settings.RAZORPAY_KEY_ID,
            key_secret=settings.RAZORPAY_KEY_SECRET,
            webhook_secret=settings.RAZORPAY_WEBHOOK_SECRET,
            base_url=settings.RAZORPAY_API_URL,
        ))
    if settings.stripe_enabled:
        registry.register(StripeGateway(
            secret_key=settings.STRIPE_SECRET_KEY,
            public_key=settings.STRIPE_PUBLIC_KEY,
            webhook_secret=settings.STRIPE_WEBHOOK_SECRET,
        ))
    if not registry.available:
        logger.warning("No payment gateway configured; paid courses cannot be purchased")
    return registry


@lru_cache
def get_gateway_registry() -> GatewayRegistry:
    return build_gateway_registry()
