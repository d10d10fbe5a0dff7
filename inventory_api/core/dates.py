from __future__ import annotations

from datetime import date, datetime, timedelta, timezone


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def isoformat(dt: datetime) -> str:
    """UTC ISO-8601 with milliseconds and a `Z` suffix, e.g. 2024-01-31T00:00:00.000Z."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"


def add_months(dt: datetime, months: int) -> datetime:
    """
    Advances `dt` by calendar months. A day that does not exist in the target
    month rolls over into the following month instead of being clamped:
    2024-01-31 + 1 month -> 2024-03-02, 2024-01-31 + 3 months -> 2024-05-01.
    """
    total = dt.year * 12 + (dt.month - 1) + months
    year, month = divmod(total, 12)
    first = date(year, month + 1, 1)
    target = first + timedelta(days=dt.day - 1)
    return dt.replace(year=target.year, month=target.month, day=target.day)
