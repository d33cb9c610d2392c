"""
Hosted checkout widget seam.

The browser widget of the payment gateway is an external, side-effecting
capability. The orchestrator only sees the CheckoutWidget interface; the
loader fetches a widget at most once and hands back the same instance after.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Dict, Optional, Union

logger = logging.getLogger(__name__)


@dataclass
class CheckoutOptions:
    key_id: str
    order_id: str
    amount: int
    currency: str
    name: str
    description: str
    prefill: Dict[str, str] = field(default_factory=dict)
    theme_color: Optional[str] = None


@dataclass
class CheckoutSuccess:
    razorpay_order_id: str
    razorpay_payment_id: str
    razorpay_signature: str


@dataclass
class CheckoutDismissed:
    """The learner closed the widget before paying."""


CheckoutResult = Union[CheckoutSuccess, CheckoutDismissed]


class CheckoutWidgetError(Exception):
    """The widget could not be loaded or opened."""


class CheckoutWidget(ABC):
    @abstractmethod
    async def open(self, options: CheckoutOptions) -> CheckoutResult:
        """Show the checkout and resolve once the learner pays or closes it."""


class CheckoutLoader:
    """Lazily builds the checkout widget on first use and memoizes it."""

    def __init__(self, factory: Callable[[], Awaitable[CheckoutWidget]]):
        self._factory = factory
        self._widget: Optional[CheckoutWidget] = None
        self._lock = asyncio.Lock()
        self.load_count = 0

    async def load(self) -> CheckoutWidget:
        async with self._lock:
            if self._widget is None:
                try:
                    self._widget = await self._factory()
                except Exception as e:
                    raise CheckoutWidgetError("Failed to load Razorpay SDK") from e
                self.load_count += 1
                logger.debug("Checkout widget loaded")
            return self._widget
