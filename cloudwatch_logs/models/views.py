"""
Response View Models

Typed shapes of the JSON bodies returned for each operation. Missing lists
default to empty and missing tokens to None, so an empty ``{}`` body decodes
cleanly.
"""

from typing import List, Optional

from pydantic import Field

from .base import WireModel
from .domain_models import Event, LogGroup, LogStream, RejectedLogEventsInfo


class DescribeLogGroupsResponse(WireModel):
    """One page of DescribeLogGroups."""

    log_groups: List[LogGroup] = Field(default_factory=list, description="Log groups on this page")
    next_token: Optional[str] = Field(None, description="Continuation token, empty when exhausted")


class DescribeLogStreamsResponse(WireModel):
    """One page of DescribeLogStreams."""

    log_streams: List[LogStream] = Field(default_factory=list, description="Log streams on this page")
    next_token: Optional[str] = Field(None, description="Continuation token, empty when exhausted")


class GetLogEventsResponse(WireModel):
    """Events plus forward/backward tokens for caller-driven paging."""

    events: List[Event] = Field(default_factory=list, description="Retrieved events")
    next_forward_token: Optional[str] = Field(None, description="Token for the next page forward in time")
    next_backward_token: Optional[str] = Field(None, description="Token for the next page backward in time")


class PutLogEventsResponse(WireModel):
    """Result of PutLogEvents."""

    next_sequence_token: Optional[str] = Field(None, description="Sequence token for the next append")
    rejected_log_events_info: Optional[RejectedLogEventsInfo] = Field(None, description="Events dropped by the service")
