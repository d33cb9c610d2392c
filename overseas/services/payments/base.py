"""
Payment gateway abstraction.

Every hosted checkout provider the platform sells courses through implements
PaymentGateway. The purchase service only talks to this interface, so tests and
new providers plug in without touching enrollment logic.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, Optional, Union

from overseas.core.constants import PaymentGatewayEnum
from overseas.models.payment import CoursePayment
from overseas.schemas.payment import RazorpayCheckout, StripeCheckout, VerifyPaymentRequest


class PaymentGatewayError(Exception):
    """The provider rejected a call or could not be reached."""


class WebhookVerificationError(Exception):
    """A webhook body did not carry a valid provider signature."""


@dataclass
class GatewayOrder:
    order_id: str
    amount: int
    currency: str
    client_secret: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict)


@dataclass
class WebhookEvent:
    type: str
    outcome: str  # "succeeded", "failed" or "ignored"
    order_id: Optional[str] = None
    gateway_payment_id: Optional[str] = None
    reference: Optional[str] = None
    failure_reason: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict)


def to_minor_units(amount: Union[float, Decimal, int]) -> int:
    """Convert a major-unit amount (rupees, dollars) to the provider's integer minor unit."""
    return int((Decimal(str(amount)) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class PaymentGateway(ABC):
    name: PaymentGatewayEnum

    @abstractmethod
    async def create_order(
        self,
        *,
        amount: float,
        currency: str,
        receipt: str,
        notes: Optional[Dict[str, Any]] = None,
    ) -> GatewayOrder:
        """
        Create an order (or intent) the hosted checkout will collect against.

        Args:
            amount: Amount in major units
            currency: ISO currency code
            receipt: Our payment id, echoed back by the provider in webhooks
            notes: Extra metadata stored with the provider

        Raises:
            PaymentGatewayError: the provider call failed
        """

    @abstractmethod
    def checkout_payload(self, payment: CoursePayment, order: GatewayOrder) -> Union[RazorpayCheckout, StripeCheckout]:
        """Parameters the front-end checkout widget needs to open."""

    @abstractmethod
    async def verify_payment(self, payment: CoursePayment, verification: VerifyPaymentRequest) -> Optional[str]:
        """
        Check the tokens the checkout widget returned.

        Returns:
            The provider's payment id when the payment is genuine, otherwise None
        """

    @abstractmethod
    def parse_webhook(self, payload: bytes, signature: Optional[str]) -> WebhookEvent:
        """
        Authenticate and decode a webhook body.

        Raises:
            WebhookVerificationError: missing or invalid signature
        """
