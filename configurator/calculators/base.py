"""
Shared helpers for the configurator calculators.

Input: raw form values, whatever the widget sent (str, int, float, None)
Output: finite numbers and enum members, never an exception.

The live preview recomputes on every keystroke, so nothing here raises for
bad input. Missing or garbage values resolve to the caller's default.
"""

import logging
import math
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)

# Upper bound on bars per direction
MAX_BAR_COUNT = 1000

# Thicker than this is treated as this, cm
MAX_THICKNESS_CM = 1000.0


def parse_number(value, default: float = 0.0, finite: bool = True) -> float:
    """Parse a float from user input. Empty, junk and NaN give default; so does inf unless finite=False."""
    if value is None or isinstance(value, bool):
        return default
    try:
        number = float(str(value).strip().replace(",", "."))
    except (ValueError, TypeError):
        return default
    if math.isnan(number) or (finite and math.isinf(number)):
        return default
    return number


def parse_count(value, default: int = 0) -> int:
    """Parse a whole bar count in [0, MAX_BAR_COUNT]. Fractions truncate, negatives become 0."""
    number = parse_number(value, default=float(default))
    return int(clamp(number, 0, MAX_BAR_COUNT))


def parse_choice(value, enum_cls, default):
    """
    Resolve a raw value to a member of enum_cls.

    Exact value match first, then case-insensitive. Anything else
    falls back to default with a warning.
    """
    if isinstance(value, enum_cls):
        return value
    if value is None or value == "":
        return default
    raw = str(value).strip()
    for member in enum_cls:
        if member.value == raw:
            return member
    for member in enum_cls:
        if member.value.lower() == raw.lower():
            return member
    logger.warning("Unknown %s %r, falling back to %s", enum_cls.__name__, value, default.value)
    return default


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def parse_thickness(value) -> float:
    """Frame or bar thickness in cm; junk is 0, absurd values cap at MAX_THICKNESS_CM."""
    return min(MAX_THICKNESS_CM, parse_number(value))


class BaseCalculator(ABC):
    """Both configurator calculators inherit from this."""

    @abstractmethod
    def calculate(self, config):
        """Takes a ConfigurationInput, returns a freshly derived result."""
        pass

    def parse_number(self, value, default: float = 0.0) -> float:
        return parse_number(value, default)

    def round_half_away(self, value: float) -> int:
        return round_half_away(value)
