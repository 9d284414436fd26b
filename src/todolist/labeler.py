"""Relative day labels for todo timestamps."""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Optional

from .utils.datetime import date_of, format_date, now_local


class TimestampCategory(Enum):
    """Day category of a timestamp relative to now."""
    TODAY = "today"
    YESTERDAY = "yesterday"
    OTHER = "other"


@dataclass(frozen=True)
class TimestampLabel:
    """Category of a timestamp plus the calendar date it falls on."""

    category: TimestampCategory
    date: date

    @property
    def is_recent(self) -> bool:
        return self.category in (TimestampCategory.TODAY, TimestampCategory.YESTERDAY)

    def __str__(self) -> str:
        if self.category == TimestampCategory.TODAY:
            return "Today"
        if self.category == TimestampCategory.YESTERDAY:
            return "Yesterday"
        return format_date(self.date)


def categorize_timestamp(timestamp: int, now: Optional[datetime] = None) -> TimestampLabel:
    """Label an epoch-seconds timestamp as Today, Yesterday or its date.

    Args:
        timestamp: Seconds since the Unix epoch
        now: Reference moment; the current local time when omitted

    Returns:
        TimestampLabel for the timestamp's local calendar date
    """
    if now is None:
        now = now_local()

    day = date_of(timestamp)
    today = now.date()

    if day == today:
        category = TimestampCategory.TODAY
    elif day == today - timedelta(days=1):
        category = TimestampCategory.YESTERDAY
    else:
        category = TimestampCategory.OTHER

    return TimestampLabel(category=category, date=day)
