"""Date parsing utilities for invoice dates and reporting periods."""

from datetime import date, timedelta
from typing import Optional

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

WEEKDAYS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]

PERIODS = ("this-month", "this-year", "this-week", "last-month", "last-year", "last-week")


def _start_of_week(day: date) -> date:
    return day - timedelta(days=day.weekday())


def _period_start(direction: str, period: str, today: date) -> Optional[date]:
    """Return the first day of a period relative to today.

    ``direction`` is one of "last", "this" or "next"; ``period`` is "week",
    "month", "year", or a weekday name (only valid with "last").
    """
    shift = {"last": -1, "this": 0, "next": 1}[direction]

    if period == "week":
        return _start_of_week(today) + timedelta(weeks=shift)
    if period == "month":
        return today.replace(day=1) + relativedelta(months=shift)
    if period == "year":
        return today.replace(month=1, day=1) + relativedelta(years=shift)
    if direction == "last" and period in WEEKDAYS:
        days_ago = (today.weekday() - WEEKDAYS.index(period)) % 7 or 7
        return today - timedelta(days=days_ago)
    return None


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports absolute dates ("2025-01-15", "January 15, 2025") and relative
    ones ("today", "yesterday", "tomorrow", "last month", "this week",
    "next year", "last friday").

    Args:
        date_str: Date string

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_days = {"today": 0, "yesterday": -1, "tomorrow": 1}
    if date_str in relative_days:
        return today + timedelta(days=relative_days[date_str])

    direction, _, period = date_str.partition(" ")
    if direction in ("last", "this", "next") and period:
        start = _period_start(direction, period, today)
        if start is not None:
            return start

    try:
        return date_parser.parse(date_str).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}") from e


def get_date_range(period: str) -> tuple[date, date]:
    """Get start and end dates for a reporting period.

    "this-*" periods end today; "last-*" periods cover the whole previous
    week, month or year.

    Args:
        period: One of this-month, this-year, this-week, last-month,
            last-year, last-week

    Returns:
        Tuple of (start_date, end_date)

    Raises:
        ValueError: If period string is not recognized
    """
    period = period.strip().lower()
    today = date.today()

    if period not in PERIODS:
        raise ValueError(f"Unknown period: '{period}'. Supported periods: {', '.join(PERIODS)}")

    direction, unit = period.split("-")
    start = _period_start(direction, unit, today)

    if direction == "this":
        return (start, today)

    # End of the previous period is the day before the current one starts
    current_start = _period_start("this", unit, today)
    return (start, current_start - timedelta(days=1))
