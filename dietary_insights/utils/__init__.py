"""Utility functions for dietary analysis."""

from dietary_insights.utils.concern import (
    ConcernLevel,
    classify_concern,
    percent_of,
    round_half_up,
)
from dietary_insights.utils.frames import meals_to_frame, flagged
from dietary_insights.utils.timefmt import (
    DAY_NAMES,
    format_clock,
    format_date_range,
    parse_timestamp,
    short_date,
    sunday_index,
)

__all__ = [
    "ConcernLevel",
    "classify_concern",
    "percent_of",
    "round_half_up",
    "meals_to_frame",
    "flagged",
    "DAY_NAMES",
    "format_clock",
    "format_date_range",
    "parse_timestamp",
    "short_date",
    "sunday_index",
]
