"""
Date helpers: truncating inputs to calendar days and month ranges.
"""

from __future__ import annotations

import calendar
from datetime import date, datetime, timezone
from typing import Optional, Tuple, Union

from dayboard.exceptions import DayBoardValidationError

DayLike = Union[date, datetime, str]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _utc_day(value: datetime) -> date:
    if value.tzinfo is None:
        return value.date()
    return value.astimezone(timezone.utc).date()


def to_day(value: DayLike) -> date:
    """
    Truncate a date, datetime or ISO string to its calendar day.

    Accepts "YYYY-MM-DD" as well as full ISO datetimes such as
    "2024-02-01T15:30:00Z". Datetimes carrying an offset are moved to UTC
    before the time part is dropped.
    """
    if isinstance(value, datetime):
        return _utc_day(value)
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise DayBoardValidationError("Date is required")
        try:
            if len(text) == 10:
                return date.fromisoformat(text)
            # fromisoformat before 3.11 rejects a trailing "Z"
            if text.endswith("Z"):
                text = text[:-1] + "+00:00"
            return _utc_day(datetime.fromisoformat(text))
        except ValueError as e:
            raise DayBoardValidationError(f"Invalid date: {value}") from e
    raise DayBoardValidationError(f"Invalid date: {value!r}")


def month_bounds(
    month: Optional[int] = None,
    year: Optional[int] = None,
    today: Optional[date] = None,
) -> Tuple[date, date]:
    """
    First and last day (inclusive) of a month.

    Missing month or year default to the ones of ``today``.
    """
    today = today or utc_now().date()
    month = month if month is not None else today.month
    year = year if year is not None else today.year

    if not 1 <= month <= 12:
        raise DayBoardValidationError("Month must be between 1 and 12")
    if not 1 <= year <= 9999:
        raise DayBoardValidationError("Year is out of range")

    last = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last)
