"""
Log Streams APIs

Read API:
- DescribeLogStreams with automatic pagination
- Exact-name lookup on top of DescribeLogStreams

Write API:
- CreateLogStream
"""

from .queries import LogStreamsReadApi
from .commands import LogStreamsWriteApi

__all__ = [
    "LogStreamsReadApi",
    "LogStreamsWriteApi",
]
