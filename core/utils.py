from __future__ import annotations

import datetime as dt
import math
from typing import Optional, Union

from dateutil.relativedelta import relativedelta

DateLike = Union[dt.date, str, None]


def round_half_up(x: float) -> int:
    """Round half up (JavaScript Math.round), not Python's banker's rounding."""
    return int(math.floor(x + 0.5))


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def to_date(value: DateLike) -> dt.date:
    """Coerce an ISO string / date / datetime to a date. None means today."""
    if value is None:
        return dt.date.today()
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    return dt.date.fromisoformat(str(value)[:10])


def add_months(start: DateLike, months: int) -> dt.date:
    """
    Calendar month arithmetic. Month-end days clamp to the last day of the
    target month (Jan 31 + 1 month -> Feb 28/29). Results past the calendar
    range saturate at dt.date.max / dt.date.min.
    """
    try:
        return to_date(start) + relativedelta(months=int(months))
    except (ValueError, OverflowError):
        return dt.date.max if months > 0 else dt.date.min


def safe_ratio(numerator: float, denominator: float) -> Optional[float]:
    """numerator / denominator, or None when the denominator is zero."""
    if denominator == 0:
        return None
    return numerator / denominator
