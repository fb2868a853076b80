"""
Log Events Write API

PutLogEvents appends a batch to a stream. The service requires the batch in
ascending timestamp order, so the batch is sorted here before it is sent.
The sort is stable: events sharing a timestamp keep their input order.

The sequence token returned by one call must be passed to the next call on
the same stream. Serializing concurrent appends to one stream is the
caller's job.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Union

from ...config import CloudWatchLogsConfig
from ...core import LogsGateway, create_logs_gateway
from ...models import LogEvent, PutLogEventsRequest, PutLogEventsResponse

logger = logging.getLogger(__name__)

LogEventInput = Union[LogEvent, Dict[str, Any]]


def sort_log_events(events: Iterable[LogEventInput]) -> List[LogEvent]:
    """Validate events and return them in ascending timestamp order (stable)."""
    log_events = [
        event if isinstance(event, LogEvent) else LogEvent.model_validate(event)
        for event in events
    ]
    return sorted(log_events, key=lambda event: event.timestamp)


class LogEventsWriteApi:
    """Write API for appending events to a stream."""

    OPERATION = "PutLogEvents"

    def __init__(self, config: CloudWatchLogsConfig, gateway: Optional[LogsGateway] = None):
        """Initialize write API with configuration."""
        self.config = config
        self.gateway = gateway or create_logs_gateway(config)

    def put_log_events(
        self,
        log_group_name: str,
        log_stream_name: str,
        log_events: Iterable[LogEventInput],
        sequence_token: Optional[str] = None
    ) -> Optional[str]:
        """
        Append a batch of events to a stream.

        Args:
            log_group_name: Log group name
            log_stream_name: Log stream name
            log_events: LogEvent instances or dicts with timestamp and message
            sequence_token: Token from the previous append (omitted when None)

        Returns:
            The sequence token to pass to the next append on this stream

        Raises:
            InvalidSequenceTokenError: If sequence_token is not the expected one
            DataAlreadyAcceptedError: If this batch was already accepted

        Examples:
            >>> token = api.put_log_events("app", "web-1", [LogEvent(timestamp=1700000000000, message="up")])
            >>> token = api.put_log_events("app", "web-1", more_events, sequence_token=token)
        """
        request = PutLogEventsRequest(
            log_group_name=log_group_name,
            log_stream_name=log_stream_name,
            log_events=sort_log_events(log_events),
            sequence_token=sequence_token
        )
        data = self.gateway.call(self.OPERATION, request)
        response = PutLogEventsResponse.from_wire(data, self.OPERATION)

        rejected = response.rejected_log_events_info
        if rejected is not None:
            logger.warning(
                f"{self.OPERATION} to {log_group_name}/{log_stream_name} rejected events: "
                f"too_new_start={rejected.too_new_log_event_start_index}, "
                f"too_old_end={rejected.too_old_log_event_end_index}, "
                f"expired_end={rejected.expired_log_event_end_index}"
            )

        logger.info(f"Put {len(request.log_events)} events to {log_group_name}/{log_stream_name}")
        return response.next_sequence_token
