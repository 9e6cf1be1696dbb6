"""
Three-tier concern classification shared by every tracked signal.
"""

import math
from enum import Enum

from dietary_insights.config import ConcernBounds


class ConcernLevel(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    ELEVATED = "elevated"


def classify_concern(value: float, bounds: ConcernBounds) -> ConcernLevel:
    """Classify a metric against exclusive lower bounds.

    A value equal to a bound falls into the lower tier.
    """
    if value > bounds.elevated:
        return ConcernLevel.ELEVATED
    if value > bounds.moderate:
        return ConcernLevel.MODERATE
    return ConcernLevel.LOW


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


def percent_of(part: int, whole: int) -> int:
    """Integer percentage with the denominator floored at 1."""
    return round_half_up(part / max(1, whole) * 100)
