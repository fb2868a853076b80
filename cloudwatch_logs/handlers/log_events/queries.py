"""
Log Events Read API

GetLogEvents is not auto-paginated: each call returns one batch plus
forward/backward tokens, and the caller decides whether to follow them.
"""

import logging
from typing import Optional

from ...config import CloudWatchLogsConfig
from ...core import LogsGateway, create_logs_gateway
from ...models import GetLogEventsRequest, GetLogEventsResponse
from ...utils import TimestampLike, normalize_timestamp

logger = logging.getLogger(__name__)


class LogEventsReadApi:
    """Read-only API for retrieving events from a stream."""

    OPERATION = "GetLogEvents"

    def __init__(self, config: CloudWatchLogsConfig, gateway: Optional[LogsGateway] = None):
        """Initialize read API with configuration."""
        self.config = config
        self.gateway = gateway or create_logs_gateway(config)

    def get_log_events(
        self,
        log_group_name: str,
        log_stream_name: str,
        start_time: Optional[TimestampLike] = None,
        end_time: Optional[TimestampLike] = None,
        start_from_head: bool = False,
        limit: Optional[int] = None,
        next_token: Optional[str] = None
    ) -> GetLogEventsResponse:
        """
        Fetch one batch of events from a log stream.

        Args:
            log_group_name: Log group name
            log_stream_name: Log stream name
            start_time: Inclusive start (epoch ms or datetime)
            end_time: Exclusive end (epoch ms or datetime)
            start_from_head: Read oldest events first when True
            limit: Maximum number of events (1-10000)
            next_token: next_forward_token or next_backward_token from a previous call

        Returns:
            GetLogEventsResponse with events and both continuation tokens

        Examples:
            >>> page = api.get_log_events("app", "web-1", start_from_head=True)
            >>> more = api.get_log_events("app", "web-1", start_from_head=True,
            ...                           next_token=page.next_forward_token)
        """
        request = GetLogEventsRequest(
            log_group_name=log_group_name,
            log_stream_name=log_stream_name,
            start_time=normalize_timestamp(start_time),
            end_time=normalize_timestamp(end_time),
            start_from_head=start_from_head,
            limit=limit,
            next_token=next_token
        )
        data = self.gateway.call(self.OPERATION, request)
        response = GetLogEventsResponse.from_wire(data, self.OPERATION)
        logger.debug(f"{self.OPERATION} {log_group_name}/{log_stream_name}: {len(response.events)} events")
        return response
