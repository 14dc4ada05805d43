"""Support window arithmetic: deadlines, expiry checks and day countdowns."""

from __future__ import annotations

import calendar
from datetime import datetime, tzinfo
from typing import Optional

from .models import SupportDate

SECONDS_PER_DAY = 86400


def deadline(date: SupportDate, tz: Optional[tzinfo] = None) -> datetime:
    """23:59:59 on the last calendar day of ``date``'s month."""
    last_day = calendar.monthrange(date.year, date.month)[1]
    return datetime(date.year, date.month, last_day, 23, 59, 59, tzinfo=tz)


def is_expired(date: SupportDate, now: datetime) -> bool:
    return now > deadline(date, now.tzinfo)


def days_remaining(date: SupportDate, now: datetime) -> int:
    """Whole days between ``now`` and the deadline, truncated toward zero.

    Positive while the deadline is ahead, 0 on the deadline day itself and
    negative once it has passed.
    """
    seconds = (deadline(date, now.tzinfo) - now).total_seconds()
    if seconds >= 0:
        return int(seconds // SECONDS_PER_DAY)
    return -int(-seconds // SECONDS_PER_DAY)


def format_days(days: int) -> str:
    if days < 0:
        return f"{-days} days ago"
    return f"in {days} days"


def describe(date: SupportDate, now: datetime) -> str:
    """Table value for a support date: expiry marker or countdown."""
    if is_expired(date, now):
        return f"{date} [red]Expired[/]"
    return f"{date} ([yellow]{format_days(days_remaining(date, now))}[/])"
