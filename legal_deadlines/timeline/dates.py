"""Whole-day date arithmetic for deadline calculation.

Calendar-day, calendar-month and business-day offsets, days-remaining
against an injected "today", and long-form display formatting.

Business days exclude Saturday and Sunday only. UK bank holidays are
not excluded.
"""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Callable, Optional, Union

from dateutil.relativedelta import relativedelta

from ..errors import InvalidDate

Clock = Callable[[], date]

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class OffsetUnit(str, Enum):
    """Unit in which a rule's offset is expressed."""

    DAYS = "days"
    BUSINESS_DAYS = "business_days"
    MONTHS = "months"


def system_clock() -> date:
    """Today's date from the local system clock."""
    return date.today()


def fixed_clock(today: date) -> Clock:
    """Return a clock that always reports ``today``."""

    def _clock() -> date:
        return today

    return _clock


def parse_iso_date(value: Optional[Union[str, date]], field: str) -> date:
    """Parse a ``YYYY-MM-DD`` string.

    Args:
        value: The raw string from the request.
        field: Request field name, reported in the error.

    Raises:
        InvalidDate: If the value is missing, malformed or not a real date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not value or not isinstance(value, str):
        raise InvalidDate(f"{field} is required and must be YYYY-MM-DD", [field])
    # fromisoformat also accepts YYYYMMDD and week dates on 3.11+
    if not _ISO_DATE.match(value.strip()):
        raise InvalidDate(f"{field} must be YYYY-MM-DD, got {value!r}", [field])
    try:
        return date.fromisoformat(value.strip())
    except ValueError as exc:
        raise InvalidDate(f"{field} is not a valid date: {value!r}", [field]) from exc


def add_calendar_days(start: date, days: int) -> date:
    return start + timedelta(days=days)


def add_calendar_months(start: date, months: int) -> date:
    """Shift by whole months, clamping to the last day of the target month."""
    return start + relativedelta(months=months)


def is_business_day(d: date) -> bool:
    return d.weekday() < 5


def add_business_days(start: date, days: int) -> date:
    """Add ``days`` business days to ``start``, skipping weekends.

    The start date itself is never counted.
    """
    if days < 0:
        raise ValueError(f"Business-day offset must be non-negative, got {days}")
    current = start
    added = 0
    while added < days:
        current += timedelta(days=1)
        if is_business_day(current):
            added += 1
    return current


def apply_offset(start: date, amount: int, unit: OffsetUnit, less_days: int = 0) -> date:
    """Apply a rule offset expressed in ``unit`` then step back ``less_days``."""
    if unit is OffsetUnit.DAYS:
        result = add_calendar_days(start, amount)
    elif unit is OffsetUnit.BUSINESS_DAYS:
        result = add_business_days(start, amount)
    elif unit is OffsetUnit.MONTHS:
        result = add_calendar_months(start, amount)
    else:
        raise ValueError(f"Unsupported offset unit: {unit}")
    if less_days:
        result = add_calendar_days(result, -less_days)
    return result


def days_until(deadline: date, today: date) -> int:
    """Signed whole days from ``today`` to ``deadline``.

    Zero when the deadline is today, negative once it has passed.
    """
    return (deadline - today).days


def format_date(d: date) -> str:
    """Long-form British display, e.g. ``Monday, 1 January 2024``."""
    return f"{d:%A}, {d.day} {d:%B} {d.year}"
