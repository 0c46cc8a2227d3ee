"""Display formatting for money and sizes. Presentation only, never fed back into math."""

from typing import Optional

from .calculators.base import round_half_away
from .config import settings

NBSP = "\u00a0"


def format_sum(amount, currency: Optional[str] = None) -> str:
    """Format a so'm amount with space-grouped thousands: 1437000 -> '1 437 000 so'm'."""
    currency = settings.CURRENCY_LABEL if currency is None else currency
    try:
        value = round_half_away(float(amount))
    except (ValueError, TypeError, OverflowError):
        value = 0
    grouped = f"{value:,}".replace(",", NBSP)
    return f"{grouped} {currency}" if currency else grouped


def format_size(width_cm, height_cm) -> str:
    """'120 × 150 cm' with trailing .0 dropped."""
    return f"{float(width_cm):g} × {float(height_cm):g} cm"
