"""
Order submission capability.

The presentation layer owns order placement; the calculators never call it.
The shipped implementation is the prototype one: it accepts nothing and
tells the user so.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from .calculators.price_estimator import PriceBreakdown
from .config import settings
from .models import ConfigurationInput

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OrderReceipt:
    accepted: bool
    message: str
    order_id: Optional[str] = None
    total: Optional[int] = None


class OrderSubmission(ABC):

    @abstractmethod
    def submit(self, config: ConfigurationInput, breakdown: PriceBreakdown) -> OrderReceipt:
        """Hand a priced configuration to whatever takes orders."""
        pass


class DemoOrderSubmission(OrderSubmission):
    """Prototype stand-in: every order is declined with a notice."""

    def __init__(self, notice: Optional[str] = None):
        self.notice = notice or settings.ORDER_NOTICE

    def submit(self, config: ConfigurationInput, breakdown: PriceBreakdown) -> OrderReceipt:
        logger.info("Demo order for %s (%s), not submitted", config.product_type.value, breakdown.total)
        return OrderReceipt(accepted=False, message=self.notice, total=breakdown.total)


def get_order_submission() -> OrderSubmission:
    """FastAPI dependency. Override in app.dependency_overrides to plug in a real backend."""
    return DemoOrderSubmission()
