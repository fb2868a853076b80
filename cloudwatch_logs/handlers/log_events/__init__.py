"""
Log Events APIs

Read API:
- GetLogEvents, one batch per call with forward/backward tokens

Write API:
- PutLogEvents with sort-before-send ordering and sequence token threading
"""

from .queries import LogEventsReadApi
from .commands import LogEventsWriteApi, sort_log_events

__all__ = [
    "LogEventsReadApi",
    "LogEventsWriteApi",
    "sort_log_events",
]
