import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, List, Optional, Protocol
from urllib.parse import quote

from overseas.learner.api import APIError, PlatformClient
from overseas.learner.checkout import (
    CheckoutDismissed,
    CheckoutLoader,
    CheckoutOptions,
    CheckoutWidgetError,
)
from overseas.schemas.auth import SessionUser

logger = logging.getLogger(__name__)

REDIRECT_DELAY_SECONDS = 1.5
STRIPE_COMING_SOON = "Stripe payment integration coming soon"
PAYMENT_SUCCESS = "Payment successful. You are now enrolled in the course!"
PAYMENT_FAILED = "Payment failed. Please try again or contact support."
CHECKOUT_FAILED = "Failed to process payment"


class EnrollmentState(str, Enum):
    IDLE = "idle"
    CHECKING_AUTH = "checking-auth"
    FREE_ENROLL = "free-enroll"
    AWAITING_PAYMENT = "awaiting-payment"
    VERIFYING = "verifying"
    SUCCESS = "success"
    FAILED = "failed"


class EnrollmentUI(Protocol):
    def notify(self, title: str, message: str, destructive: bool = False) -> None: ...

    def redirect(self, url: str) -> None: ...

    def reload(self) -> None: ...

    def show_payment_modal(self, visible: bool) -> None: ...


@dataclass
class CourseOffer:
    id: int
    title: str
    price: float
    currency: str = "INR"


def login_url(course_id: int) -> str:
    return f"/auth/login?returnTo={quote(f'/courses/{course_id}', safe='/')}"


def learn_url(course_id: int) -> str:
    return f"/courses/{course_id}/learn"


class EnrollmentOrchestrator:
    """
    Drives one course's "enroll" button from click to access.

    Free courses enroll directly and reload. Paid courses open the payment
    modal; ``pay`` then places the order and runs the gateway checkout.
    While the modal is open, ``pay`` and ``cancel`` stay available after a
    dismissed or failed attempt. Calls made while an attempt is in flight
    are ignored.
    """

    def __init__(
        self,
        client: PlatformClient,
        course: CourseOffer,
        ui: EnrollmentUI,
        checkout_loader: CheckoutLoader,
        *,
        brand_name: str = "BnOverseas",
        theme_color: Optional[str] = "#E31E24",
        redirect_delay: float = REDIRECT_DELAY_SECONDS,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.client = client
        self.course = course
        self.ui = ui
        self.checkout_loader = checkout_loader
        self.brand_name = brand_name
        self.theme_color = theme_color
        self.redirect_delay = redirect_delay
        self._sleep = sleep
        self._busy = False
        self._modal_open = False
        self.state = EnrollmentState.IDLE
        self.history: List[EnrollmentState] = [self.state]

    @property
    def busy(self) -> bool:
        return self._busy

    @property
    def modal_open(self) -> bool:
        return self._modal_open

    def _set_modal(self, visible: bool) -> None:
        self._modal_open = visible
        self.ui.show_payment_modal(visible)

    def _can_pay(self) -> bool:
        if self.state == EnrollmentState.AWAITING_PAYMENT:
            return True
        return self._modal_open and self.state in (EnrollmentState.IDLE, EnrollmentState.FAILED)

    def _transition(self, state: EnrollmentState) -> None:
        logger.debug(f"Course {self.course.id}: {self.state.value} -> {state.value}")
        self.state = state
        self.history.append(state)

    def _fail(self, message: str) -> EnrollmentState:
        self._transition(EnrollmentState.FAILED)
        self.ui.notify("Error", message, destructive=True)
        return self.state

    async def _current_user(self) -> Optional[SessionUser]:
        try:
            return (await self.client.get_session()).user
        except APIError as e:
            logger.info(f"Session lookup failed: {e.message}")
            return None

    async def enroll(self) -> EnrollmentState:
        if self._busy or self.state not in (EnrollmentState.IDLE, EnrollmentState.FAILED):
            logger.debug(f"Ignoring enroll for course {self.course.id} while {self.state.value}")
            return self.state

        self._busy = True
        try:
            self._transition(EnrollmentState.CHECKING_AUTH)
            if await self._current_user() is None:
                self.ui.redirect(login_url(self.course.id))
                self._transition(EnrollmentState.IDLE)
                return self.state

            if not self.course.price:
                self._transition(EnrollmentState.FREE_ENROLL)
                try:
                    await self.client.enroll(self.course.id)
                except APIError as e:
                    self.ui.notify("Error", e.message, destructive=True)
                    self._transition(EnrollmentState.IDLE)
                    return self.state
                self.ui.reload()
                self._transition(EnrollmentState.IDLE)
                return self.state

            self._transition(EnrollmentState.AWAITING_PAYMENT)
            self._set_modal(True)
            return self.state
        finally:
            self._busy = False

    def cancel(self) -> EnrollmentState:
        """Close the payment modal without paying."""
        if self._busy or not self._can_pay():
            return self.state
        self._set_modal(False)
        if self.state != EnrollmentState.IDLE:
            self._transition(EnrollmentState.IDLE)
        return self.state

    async def pay(self) -> EnrollmentState:
        if self._busy or not self._can_pay():
            logger.debug(f"Ignoring pay for course {self.course.id} while {self.state.value}")
            return self.state

        self._busy = True
        try:
            return await self._run_checkout()
        finally:
            self._busy = False

    async def _run_checkout(self) -> EnrollmentState:
        try:
            order = await self.client.purchase(self.course.id)
        except APIError as e:
            return self._fail(e.message)

        payment = order.payment
        if payment.gateway == "stripe":
            # Stripe checkout is not wired on the client yet
            self.ui.notify("Info", STRIPE_COMING_SOON)
            self._transition(EnrollmentState.IDLE)
            return self.state

        try:
            widget = await self.checkout_loader.load()
        except CheckoutWidgetError as e:
            return self._fail(str(e))

        user = await self._current_user()
        prefill = {
            "name": f"{user.first_name} {user.last_name or ''}".strip() if user else "",
            "email": user.email if user else "",
            "contact": (user.phone or "") if user else "",
        }
        try:
            result = await widget.open(CheckoutOptions(
                key_id=payment.key_id,
                order_id=payment.order_id,
                amount=payment.amount,
                currency=payment.currency,
                name=self.brand_name,
                description=f"Payment for {self.course.title}",
                prefill=prefill,
                theme_color=self.theme_color,
            ))
        except Exception as e:
            logger.error(f"Checkout widget failed for course {self.course.id}: {e}", exc_info=True)
            return self._fail(CHECKOUT_FAILED)

        if isinstance(result, CheckoutDismissed):
            self._transition(EnrollmentState.IDLE)
            return self.state

        self._transition(EnrollmentState.VERIFYING)
        try:
            verified = await self.client.verify_payment(self.course.id, {
                "paymentId": payment.payment_id,
                "razorpay_order_id": result.razorpay_order_id,
                "razorpay_payment_id": result.razorpay_payment_id,
                "razorpay_signature": result.razorpay_signature,
            })
        except APIError as e:
            return self._fail(e.message)

        if not verified.success:
            return self._fail(verified.message or PAYMENT_FAILED)

        self._transition(EnrollmentState.SUCCESS)
        self._set_modal(False)
        self.ui.notify("Success!", PAYMENT_SUCCESS)
        await self._sleep(self.redirect_delay)
        self.ui.redirect(verified.course_url or learn_url(self.course.id))
        return self.state
