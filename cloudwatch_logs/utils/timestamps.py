"""
Epoch Millisecond Utilities

CloudWatch Logs expresses every timestamp as milliseconds since the Unix
epoch (UTC). These helpers convert between that wire form and datetimes.

Naive datetimes are assumed to already be in UTC.
"""

from datetime import datetime, timezone
from typing import Optional, Union

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

TimestampLike = Union[int, datetime]


def to_utc(dt: datetime) -> datetime:
    """Convert datetime to UTC.

    Args:
        dt: Timezone-aware or naive datetime

    Returns:
        Datetime in UTC timezone

    Examples:
        >>> to_utc(datetime(2024, 1, 1, 10, 0))
        datetime.datetime(2024, 1, 1, 10, 0, tzinfo=datetime.timezone.utc)
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def to_epoch_millis(dt: datetime) -> int:
    """Convert a datetime to integer epoch milliseconds."""
    delta = to_utc(dt) - EPOCH
    return (delta.days * 86_400 + delta.seconds) * 1000 + delta.microseconds // 1000


def from_epoch_millis(millis: int) -> datetime:
    """Convert epoch milliseconds to a UTC datetime."""
    return datetime.fromtimestamp(millis / 1000, tz=timezone.utc)


def normalize_timestamp(value: Optional[TimestampLike]) -> Optional[int]:
    """Accept epoch milliseconds or a datetime and return epoch milliseconds.

    Raises:
        TypeError: If value is neither an int nor a datetime
    """
    if value is None:
        return None
    # bool is an int subclass
    if isinstance(value, bool):
        raise TypeError("Timestamp must be epoch milliseconds or a datetime, got bool")
    if isinstance(value, datetime):
        return to_epoch_millis(value)
    if isinstance(value, int):
        return value
    raise TypeError(f"Timestamp must be epoch milliseconds or a datetime, got {type(value).__name__}")


def now_millis() -> int:
    """Current time as epoch milliseconds."""
    return to_epoch_millis(datetime.now(timezone.utc))
