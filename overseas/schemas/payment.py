from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Literal, Union, Annotated
from datetime import datetime
from overseas.core.constants import PaymentGatewayEnum, PaymentStatusEnum
from overseas.schemas.camel import CamelModel
from overseas.schemas.learn import Enrollment


class PurchaseCourse(CamelModel):
    id: int
    title: str
    price: float
    currency: str


class RazorpayCheckout(CamelModel):
    gateway: Literal["razorpay"] = "razorpay"
    order_id: str
    amount: int = Field(..., description="Amount in the currency's minor unit (paise for INR)")
    currency: str
    key_id: str
    payment_id: str


class StripeCheckout(CamelModel):
    gateway: Literal["stripe"] = "stripe"
    client_secret: str
    payment_intent_id: str
    public_key: Optional[str] = None
    payment_id: str
    amount: int
    currency: str


CheckoutPayload = Annotated[Union[RazorpayCheckout, StripeCheckout], Field(discriminator="gateway")]


class PurchaseResponse(CamelModel):
    success: bool = True
    course: PurchaseCourse
    payment: CheckoutPayload


class VerifyPaymentRequest(BaseModel):
    """Gateway callback tokens forwarded by the checkout widget, plus our payment id."""
    model_config = ConfigDict(populate_by_name=True)

    payment_id: str = Field(..., alias="paymentId")
    razorpay_order_id: Optional[str] = None
    razorpay_payment_id: Optional[str] = None
    razorpay_signature: Optional[str] = None
    stripe_payment_intent_id: Optional[str] = Field(None, alias="stripePaymentIntentId")


class VerifyPaymentResponse(CamelModel):
    success: bool
    message: str
    enrollment: Enrollment
    course_url: str


class Payment(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: int
    course_id: int
    amount: float
    currency: str
    gateway: PaymentGatewayEnum
    status: PaymentStatusEnum
    gateway_order_id: Optional[str] = None
    gateway_payment_id: Optional[str] = None
    failure_reason: Optional[str] = None
    paid_at: Optional[datetime] = None
    created_at: Optional[datetime] = None


class PaymentTransaction(Payment):
    user_email: Optional[str] = None
    course_title: Optional[str] = None


class PaymentStats(BaseModel):
    total_revenue: float
    completed_payments: int
    pending_payments: int
    failed_payments: int


class WebhookAck(BaseModel):
    status: str = "success"
    handled: bool = False
