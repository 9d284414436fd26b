"""Datetime utilities with consistent local timezone handling.

Every date shown or compared by todolist is the calendar date in the local
timezone. Timestamps are stored as integer epoch seconds.
"""

from datetime import date, datetime
from typing import Optional

DATE_FORMAT = "%d/%m/%Y"


def now_local() -> datetime:
    """Return the current local datetime.

    Returns:
        Current naive datetime in the local timezone
    """
    return datetime.now()


def current_timestamp(now: Optional[datetime] = None) -> int:
    """Return epoch seconds for ``now`` (or the current moment)."""
    if now is None:
        now = now_local()
    return int(now.timestamp())


def date_of(timestamp: int) -> date:
    """Return the local calendar date of an epoch-seconds timestamp.

    Args:
        timestamp: Seconds since the Unix epoch

    Returns:
        Calendar date in the local timezone
    """
    return datetime.fromtimestamp(timestamp).date()


def format_date(day: date) -> str:
    """Format a date as zero-padded day/month/year, e.g. ``05/03/2024``."""
    return day.strftime(DATE_FORMAT)
