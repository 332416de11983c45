"""
Business-calendar helpers.

The cash register day is keyed by the shop's local date, not UTC.
"""

from datetime import date
from typing import Optional

from django.utils import timezone


def business_today() -> date:
    """Current date in the business time zone (``TIME_ZONE`` setting)."""
    return timezone.localdate()


def date_key(day: date) -> str:
    """Day key in ``YYYY-MM-DD`` form."""
    return day.isoformat()


def days_overdue(promised: Optional[date], today: Optional[date] = None) -> Optional[int]:
    """Days elapsed since a promised payment date (negative if still ahead)."""
    if promised is None:
        return None
    today = today or business_today()
    return (today - promised).days


def is_overdue(promised: Optional[date], today: Optional[date] = None) -> bool:
    """A promise is overdue once its date is strictly in the past."""
    overdue = days_overdue(promised, today)
    return overdue is not None and overdue > 0
