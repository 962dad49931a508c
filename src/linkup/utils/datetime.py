"""Date-time helpers for naive-UTC storage columns."""

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Return the current UTC time without tzinfo, matching stored column values."""

    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_naive_utc(value: datetime) -> datetime:
    """Convert an aware timestamp to naive UTC; naive values are assumed to be UTC already."""

    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)
