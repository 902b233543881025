"""Shared utility functions."""
import math
from datetime import datetime, timedelta, timezone

from hncli.errors import FutureTimestampError

_DAY = timedelta(days=1)
_MONTH = 30 * _DAY
_YEAR = 12 * _MONTH


def utcnow() -> datetime:
    """Default clock for the renderers."""
    return datetime.now(timezone.utc)


def from_unix(seconds: int) -> datetime:
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


def relative_time(now: datetime, past: datetime) -> str:
    """Return a coarse human-friendly age like 'a day ago' or '3 months ago'.

    Counts are rounded up. A month is 30 days and a year is 12 of those, so
    the buckets are approximate on purpose. Raises FutureTimestampError when
    ``past`` is after ``now``.
    """
    if past > now:
        raise FutureTimestampError(f"cannot get relative time for future time {past.isoformat()}")

    elapsed = now - past
    hours = elapsed.total_seconds() / 3600

    if elapsed < timedelta(seconds=90):
        return "a minute ago"
    if elapsed < timedelta(minutes=50):
        return f"{math.ceil(elapsed.total_seconds() / 60)} min ago"
    if elapsed < timedelta(minutes=90):
        return "an hour ago"
    if elapsed < timedelta(hours=21):
        return f"{math.ceil(hours)} hours ago"
    if elapsed < timedelta(hours=36):
        return "a day ago"
    if elapsed < 25 * _DAY:
        return f"{math.ceil(hours / 24)} days ago"
    if elapsed < 45 * _DAY:
        return "a month ago"
    if elapsed < 11 * _MONTH:
        return f"{math.ceil(hours / (24 * 30))} months ago"
    if elapsed < 17 * _MONTH:
        return "a year ago"
    return f"{math.ceil(hours / (24 * 30 * 12))} years ago"
