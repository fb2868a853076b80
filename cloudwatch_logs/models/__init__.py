from .base import WireModel
from .domain_models import Event, LogEvent, LogGroup, LogStream, RejectedLogEventsInfo
from .dtos import (
    CreateLogGroupRequest,
    CreateLogStreamRequest,
    DescribeLogGroupsRequest,
    DescribeLogStreamsRequest,
    GetLogEventsRequest,
    PutLogEventsRequest,
)
from .views import (
    DescribeLogGroupsResponse,
    DescribeLogStreamsResponse,
    GetLogEventsResponse,
    PutLogEventsResponse,
)

__all__ = [
    "WireModel",
    # Domain models
    "Event",
    "LogEvent",
    "LogGroup",
    "LogStream",
    "RejectedLogEventsInfo",
    # Request DTOs
    "CreateLogGroupRequest",
    "CreateLogStreamRequest",
    "DescribeLogGroupsRequest",
    "DescribeLogStreamsRequest",
    "GetLogEventsRequest",
    "PutLogEventsRequest",
    # Response views
    "DescribeLogGroupsResponse",
    "DescribeLogStreamsResponse",
    "GetLogEventsResponse",
    "PutLogEventsResponse",
]
