"""
Request DTOs (Data Transfer Objects)

One model per operation, serialized with WireModel.to_wire(). Field names
map to the service's camelCase wire names.

Validation here enforces the service's documented parameter limits so that
obviously invalid requests fail before a network round trip.
"""

from typing import List, Optional

from pydantic import Field, field_validator

from .base import WireModel
from .domain_models import LogEvent

LOG_GROUP_NAME_PATTERN = r'^[\.\-_/#A-Za-z0-9]+$'
LOG_STREAM_NAME_PATTERN = r'^[^:*]*$'


def _empty_to_none(v):
    """Treat an empty string as an absent optional value."""
    return None if v == "" else v


class DescribeLogGroupsRequest(WireModel):
    """Filter for DescribeLogGroups."""

    limit: Optional[int] = Field(None, ge=1, le=50, description="Page size")
    log_group_name_prefix: Optional[str] = Field(None, min_length=1, max_length=512, description="Log group name prefix")
    next_token: Optional[str] = Field(None, description="Continuation token")

    @field_validator('log_group_name_prefix', 'next_token', mode='before')
    @classmethod
    def empty_as_none(cls, v):
        return _empty_to_none(v)


class DescribeLogStreamsRequest(WireModel):
    """Filter for DescribeLogStreams."""

    log_group_name: str = Field(..., min_length=1, max_length=512, pattern=LOG_GROUP_NAME_PATTERN,
                                description="Log group containing the streams")
    limit: Optional[int] = Field(None, ge=1, le=50, description="Page size")
    log_stream_name_prefix: Optional[str] = Field(None, min_length=1, max_length=512, description="Log stream name prefix")
    next_token: Optional[str] = Field(None, description="Continuation token")

    @field_validator('log_stream_name_prefix', 'next_token', mode='before')
    @classmethod
    def empty_as_none(cls, v):
        return _empty_to_none(v)


class GetLogEventsRequest(WireModel):
    """Query for GetLogEvents.

    ``start_from_head`` is always sent; the service reads newest events first
    when it is False.
    """

    log_group_name: str = Field(..., min_length=1, max_length=512, pattern=LOG_GROUP_NAME_PATTERN,
                                description="Log group name")
    log_stream_name: str = Field(..., min_length=1, max_length=512, pattern=LOG_STREAM_NAME_PATTERN,
                                 description="Log stream name")
    limit: Optional[int] = Field(None, ge=1, le=10000, description="Maximum number of events")
    start_time: Optional[int] = Field(None, ge=0, description="Inclusive start in epoch milliseconds")
    end_time: Optional[int] = Field(None, ge=0, description="Exclusive end in epoch milliseconds")
    next_token: Optional[str] = Field(None, description="Forward or backward token from a previous call")
    start_from_head: bool = Field(False, description="Read from the oldest event first")

    @field_validator('next_token', mode='before')
    @classmethod
    def empty_as_none(cls, v):
        return _empty_to_none(v)


class CreateLogGroupRequest(WireModel):
    """Payload for CreateLogGroup."""

    log_group_name: str = Field(..., min_length=1, max_length=512, pattern=LOG_GROUP_NAME_PATTERN,
                                description="Log group name")


class CreateLogStreamRequest(WireModel):
    """Payload for CreateLogStream."""

    log_group_name: str = Field(..., min_length=1, max_length=512, pattern=LOG_GROUP_NAME_PATTERN,
                                description="Log group name")
    log_stream_name: str = Field(..., min_length=1, max_length=512, pattern=LOG_STREAM_NAME_PATTERN,
                                 description="Log stream name")


class PutLogEventsRequest(WireModel):
    """Payload for PutLogEvents.

    ``log_events`` is serialized in the order given; callers go through
    LogEventsWriteApi, which sorts the batch first.
    """

    log_group_name: str = Field(..., min_length=1, max_length=512, pattern=LOG_GROUP_NAME_PATTERN,
                                description="Log group name")
    log_stream_name: str = Field(..., min_length=1, max_length=512, pattern=LOG_STREAM_NAME_PATTERN,
                                 description="Log stream name")
    log_events: List[LogEvent] = Field(default_factory=list, description="Events to append")
    sequence_token: Optional[str] = Field(None, description="Token returned by the previous append")

    @field_validator('sequence_token', mode='before')
    @classmethod
    def empty_as_none(cls, v):
        return _empty_to_none(v)
