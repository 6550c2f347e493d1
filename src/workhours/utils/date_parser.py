"""Date and time parsing utilities."""

from datetime import date, datetime, time, timedelta
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

WEEKDAYS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports various formats including relative dates:
    - Absolute dates: "2024-01-15", "January 15, 2024", etc.
    - Relative dates: "today", "yesterday", "last month", "last friday", etc.

    Args:
        date_str: Date string in various formats

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    # Handle relative dates
    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    # Handle "last/this/next" + time period
    if date_str.startswith("last "):
        period = date_str[5:]
        if period == "month":
            return (today - relativedelta(months=1)).replace(day=1)
        elif period == "week":
            # Monday of last week
            return today - timedelta(days=today.weekday() + 7)
        elif period in WEEKDAYS:
            days_ago = (today.weekday() - WEEKDAYS.index(period)) % 7
            if days_ago == 0:
                days_ago = 7
            return today - timedelta(days=days_ago)

    elif date_str.startswith("this "):
        period = date_str[5:]
        if period == "month":
            return today.replace(day=1)
        elif period == "week":
            return today - timedelta(days=today.weekday())

    elif date_str.startswith("next "):
        period = date_str[5:]
        if period == "month":
            return (today + relativedelta(months=1)).replace(day=1)

    # Try parsing as absolute date
    try:
        dt = date_parser.parse(date_str)
        return dt.date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def parse_time(time_str: str) -> time:
    """Parse a time of day such as "09:00", "17:30" or "5:30pm".

    Raises:
        ValueError: If the string is not a time of day
    """
    cleaned = time_str.strip()
    if not cleaned:
        raise ValueError("Empty time string")
    try:
        dt = date_parser.parse(cleaned, default=datetime(2000, 1, 1))
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse time '{time_str}': {e}")
    if dt.date() != date(2000, 1, 1):
        raise ValueError(f"Could not parse time '{time_str}': expected a time of day")
    return dt.time()


def session_bounds(day: date, start: str, end: str) -> tuple[datetime, datetime]:
    """Build start and end instants of a session on ``day``.

    An end time earlier than the start time is kept on the same day, so the
    session counts as zero hours rather than spilling into the next day.
    """
    return (
        datetime.combine(day, parse_time(start)),
        datetime.combine(day, parse_time(end)),
    )
