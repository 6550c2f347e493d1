"""Billing period resolution.

A company invoices either per calendar month (cycle anchored on the 1st) or
on a mid-month cycle running from the 16th of one month through the 15th of
the next. Month arithmetic is done with ``relativedelta`` so year rollover
and month lengths (including leap years) come out right.
"""

import logging
from datetime import date, datetime

from dateutil.relativedelta import relativedelta

from workhours.domain.entities import DateRange
from workhours.domain.errors import ValidationError, invalid_month_start_day

logger = logging.getLogger(__name__)

CALENDAR_MONTH_START = 1
MID_MONTH_START = 16
VALID_MONTH_START_DAYS = (CALENDAR_MONTH_START, MID_MONTH_START)


def validate_month_start_day(month_start_day: int) -> int:
    """Return ``month_start_day`` if it is a supported cycle anchor.

    Raises:
        ValidationError: If the anchor is not 1 or 16
    """
    if month_start_day not in VALID_MONTH_START_DAYS:
        raise ValidationError(invalid_month_start_day(month_start_day))
    return month_start_day


def resolve_period(month_start_day: int, reference_date: date) -> DateRange:
    """Get the billing period enclosing a reference date.

    Args:
        month_start_day: Cycle anchor, 1 (calendar month) or 16 (mid-month)
        reference_date: Any day inside the wanted period. Datetimes are
            reduced to their date.

    Returns:
        Inclusive DateRange of the billing period. If the calendar cannot
        represent the period (edges of the supported date range), a
        single-day range on ``reference_date`` flagged with
        ``is_fallback=True`` is returned instead.

    Raises:
        ValidationError: If month_start_day is not 1 or 16
    """
    validate_month_start_day(month_start_day)
    if isinstance(reference_date, datetime):
        reference_date = reference_date.date()

    try:
        if month_start_day == MID_MONTH_START:
            if reference_date.day < MID_MONTH_START:
                start = reference_date + relativedelta(months=-1, day=16)
                end = reference_date.replace(day=15)
            else:
                start = reference_date.replace(day=16)
                end = reference_date + relativedelta(months=1, day=15)
        else:
            start = reference_date.replace(day=1)
            # day=31 is clamped to the last day of the month
            end = start + relativedelta(day=31)
    except (ValueError, OverflowError) as e:
        logger.warning(
            "Could not resolve billing period (start day %s, reference %s): %s; "
            "falling back to a single-day period",
            month_start_day,
            reference_date.isoformat(),
            e,
        )
        return DateRange(start=reference_date, end=reference_date, is_fallback=True)

    return DateRange(start=start, end=end)


def previous_period(month_start_day: int, period: DateRange) -> DateRange:
    """Get the billing period immediately before ``period``."""
    return resolve_period(month_start_day, period.start - relativedelta(days=1))


def custom_range(first: date, second: date) -> DateRange:
    """Build an explicit range from two days given in any order."""
    if isinstance(first, datetime):
        first = first.date()
    if isinstance(second, datetime):
        second = second.date()
    return DateRange(start=min(first, second), end=max(first, second))
