"""
Domain Models for CloudWatch Logs

Resources returned by the service (LogGroup, LogStream, Event) are immutable
snapshots. LogEvent is the outgoing (timestamp, message) pair appended to a
stream.

All timestamps are epoch milliseconds and all byte counts are plain ints.
"""

from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field

from ..utils import from_epoch_millis, to_epoch_millis
from .base import WireModel


class LogGroup(WireModel):
    """Named container for log streams."""

    model_config = ConfigDict(frozen=True)

    log_group_name: str = Field(..., description="Name of the log group")
    arn: Optional[str] = Field(None, description="Amazon Resource Name of the log group")
    creation_time: Optional[int] = Field(None, description="Creation time in epoch milliseconds")
    retention_in_days: Optional[int] = Field(None, description="Retention setting in days (None means never expire)")
    metric_filter_count: Optional[int] = Field(None, description="Number of metric filters")
    stored_bytes: Optional[int] = Field(None, description="Number of bytes stored")

    @property
    def created_at(self) -> Optional[datetime]:
        if self.creation_time is None:
            return None
        return from_epoch_millis(self.creation_time)


class LogStream(WireModel):
    """
    Appendable sequence of log events within a log group.

    ``upload_sequence_token`` must be sent with the next PutLogEvents call
    against this stream.
    """

    model_config = ConfigDict(frozen=True)

    log_stream_name: str = Field(..., description="Name of the log stream")
    arn: Optional[str] = Field(None, description="Amazon Resource Name of the log stream")
    creation_time: Optional[int] = Field(None, description="Creation time in epoch milliseconds")
    first_event_timestamp: Optional[int] = Field(None, description="Timestamp of the first event")
    last_event_timestamp: Optional[int] = Field(None, description="Timestamp of the last event")
    last_ingestion_time: Optional[int] = Field(None, description="Last ingestion time")
    stored_bytes: Optional[int] = Field(None, description="Number of bytes stored")
    upload_sequence_token: Optional[str] = Field(None, description="Sequence token for the next append")


class Event(WireModel):
    """Log event retrieved from a stream."""

    model_config = ConfigDict(frozen=True)

    timestamp: int = Field(..., description="Event time in epoch milliseconds")
    ingestion_time: Optional[int] = Field(None, description="Ingestion time in epoch milliseconds")
    message: str = Field("", description="Event message")

    @property
    def event_time(self) -> datetime:
        return from_epoch_millis(self.timestamp)


class LogEvent(WireModel):
    """Log event to append to a stream."""

    timestamp: int = Field(..., ge=0, description="Event time in epoch milliseconds")
    message: str = Field(..., min_length=1, description="Event message")

    @classmethod
    def at(cls, message: str, when: datetime) -> 'LogEvent':
        """Build a LogEvent from a datetime (naive datetimes are taken as UTC)."""
        return cls(timestamp=to_epoch_millis(when), message=message)


class RejectedLogEventsInfo(WireModel):
    """Index ranges of events the service dropped from a PutLogEvents batch."""

    model_config = ConfigDict(frozen=True)

    too_new_log_event_start_index: Optional[int] = Field(None, description="First index of events too far in the future")
    too_old_log_event_end_index: Optional[int] = Field(None, description="Last index of events too old")
    expired_log_event_end_index: Optional[int] = Field(None, description="Last index of events past retention")
