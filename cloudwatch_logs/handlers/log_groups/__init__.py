"""
Log Groups APIs

Read API:
- DescribeLogGroups with automatic pagination

Write API:
- CreateLogGroup
"""

from .queries import LogGroupsReadApi
from .commands import LogGroupsWriteApi

__all__ = [
    "LogGroupsReadApi",
    "LogGroupsWriteApi",
]
