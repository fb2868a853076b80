from .pagination import collect_pages
from .timestamps import (
    TimestampLike,
    from_epoch_millis,
    normalize_timestamp,
    now_millis,
    to_epoch_millis,
    to_utc,
)

__all__ = [
    "TimestampLike",
    "collect_pages",
    "from_epoch_millis",
    "normalize_timestamp",
    "now_millis",
    "to_epoch_millis",
    "to_utc",
]
