"""Date parsing utilities."""

from datetime import date, timedelta
from typing import Optional
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta


def parse_date(date_str: str, today: Optional[date] = None) -> date:
    """Parse a date string into a date object.

    Supports various formats including relative dates:
    - Absolute dates: "2024-01-15", "January 15, 2024", "15/01/2024"
    - Relative dates: "today", "yesterday", "tomorrow", "this month",
      "last month", "next month" (first day of that month)

    Args:
        date_str: Date string in various formats
        today: Reference date for relative dates (defaults to date.today())

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    if today is None:
        today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
        "this month": today.replace(day=1),
        "last month": (today - relativedelta(months=1)).replace(day=1),
        "next month": (today + relativedelta(months=1)).replace(day=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    if date_str.startswith(("last ", "this ", "next ")):
        raise ValueError(f"Could not parse date '{date_str}': unknown relative period")

    try:
        dt = date_parser.parse(date_str, dayfirst=_looks_dayfirst(date_str))
        return dt.date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def _looks_dayfirst(date_str: str) -> bool:
    # "15/01/2024" style slips; ISO strings stay year-first
    return "/" in date_str
