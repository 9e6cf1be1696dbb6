"""
Timestamp parsing and human-readable date/clock formatting.
"""

from datetime import date, datetime
from typing import Any, Optional, Union

import pandas as pd

from dietary_insights.utils.concern import round_half_up

# Index 0 is Sunday, matching the weekday numbering used across analyzers
DAY_NAMES = ['Sunday', 'Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday']


def sunday_index(moment: Union[date, datetime]) -> int:
    """Day of week with 0=Sunday ... 6=Saturday."""
    return (moment.weekday() + 1) % 7


def is_weekend(moment: Union[date, datetime]) -> bool:
    return sunday_index(moment) in (0, 6)


def parse_timestamp(value: Any, tz: Optional[str] = None) -> datetime:
    """Parse a timestamp from an export into a datetime.

    Accepts datetimes, dates, ISO-8601 strings, epoch milliseconds and
    Firestore ``{"seconds": ..., "nanoseconds": ...}`` mappings.

    Args:
        value: Raw timestamp.
        tz: Optional zone name; timezone-aware values are converted to it.

    Raises:
        ValueError: if the value cannot be parsed.
    """
    try:
        if isinstance(value, dict) and 'seconds' in value:
            ts = pd.Timestamp(value['seconds'], unit='s', tz='UTC')
            ts += pd.Timedelta(microseconds=int(value.get('nanoseconds', 0)) // 1000)
        elif isinstance(value, (int, float)) and not isinstance(value, bool):
            ts = pd.Timestamp(value, unit='ms', tz='UTC')
        else:
            ts = pd.Timestamp(value)
    except (TypeError, OverflowError) as exc:
        raise ValueError(f"unparseable timestamp {value!r}") from exc

    if pd.isna(ts):
        raise ValueError(f"empty timestamp {value!r}")

    if tz is not None and ts.tzinfo is not None:
        ts = ts.tz_convert(tz)

    return ts.floor('us').to_pydatetime()


def format_clock(total_minutes: float) -> str:
    """Format minutes since midnight as a 12-hour clock, e.g. ``7:05 PM``."""
    hours, minutes = divmod(round_half_up(total_minutes), 60)
    hours %= 24
    suffix = 'PM' if hours >= 12 else 'AM'
    display = hours - 12 if hours > 12 else (12 if hours == 0 else hours)
    return f"{display}:{minutes:02d} {suffix}"


def short_date(day: Union[date, datetime]) -> str:
    """``Jan 5``"""
    return f"{day:%b} {day.day}"


def format_date_range(first: Union[date, datetime], last: Union[date, datetime]) -> str:
    """``Jan 5 - Feb 2, 2025``"""
    return f"{short_date(first)} - {short_date(last)}, {last.year}"
