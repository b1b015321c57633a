"""
Countdown shown on the public invitation page.
"""

import datetime as dt
from typing import Optional

from pydantic import BaseModel


class Countdown(BaseModel):
    days: int
    hours: int
    minutes: int
    seconds: int
    expired: bool


def compute_countdown(
    event_date: Optional[dt.date],
    event_time: Optional[dt.time],
    now: dt.datetime,
    tz: dt.tzinfo = dt.timezone.utc,
) -> Optional[Countdown]:
    """
    Remaining time until the event.

    Args:
        event_date: Calendar date of the event
        event_time: Wall-clock time of the event, interpreted in tz
        now: Current moment (timezone-aware)
        tz: Timezone the event date/time are expressed in

    Returns:
        Countdown, or None when date or time is missing
    """
    if event_date is None or event_time is None:
        return None

    event_at = dt.datetime.combine(event_date, event_time.replace(tzinfo=None), tzinfo=tz)
    remaining = int((event_at - now).total_seconds())
    if remaining <= 0:
        return Countdown(days=0, hours=0, minutes=0, seconds=0, expired=True)

    days, rest = divmod(remaining, 86400)
    hours, rest = divmod(rest, 3600)
    minutes, seconds = divmod(rest, 60)
    return Countdown(days=days, hours=hours, minutes=minutes, seconds=seconds, expired=False)
