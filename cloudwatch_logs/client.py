"""
CloudWatch Logs Client

Single entry point exposing every operation. All read and write APIs share
one LogsGateway, so they share the configuration, signer and transport.
"""

import logging
from typing import Iterable, List, Optional

from .config import CloudWatchLogsConfig
from .core import LogsGateway, Transport
from .handlers import (
    LogEventsReadApi,
    LogEventsWriteApi,
    LogGroupsReadApi,
    LogGroupsWriteApi,
    LogStreamsReadApi,
    LogStreamsWriteApi,
)
from .handlers.log_events.commands import LogEventInput
from .models import GetLogEventsResponse, LogGroup, LogStream
from .utils import TimestampLike

logger = logging.getLogger(__name__)


class CloudWatchLogsClient:
    """
    Client for log groups, log streams and log events.

    Example:
        client = CloudWatchLogsClient(CloudWatchLogsConfig.from_env())
        client.create_log_group("app")
        client.create_log_stream("app", "web-1")
        token = client.put_log_events("app", "web-1", events)
    """

    def __init__(self, config: CloudWatchLogsConfig, transport: Optional[Transport] = None):
        self.config = config
        self.gateway = LogsGateway(config, transport=transport)

        self.log_groups = LogGroupsReadApi(config, self.gateway)
        self.log_groups_writer = LogGroupsWriteApi(config, self.gateway)
        self.log_streams = LogStreamsReadApi(config, self.gateway)
        self.log_streams_writer = LogStreamsWriteApi(config, self.gateway)
        self.log_events = LogEventsReadApi(config, self.gateway)
        self.log_events_writer = LogEventsWriteApi(config, self.gateway)

    def describe_log_groups(
        self,
        name_prefix: Optional[str] = None,
        limit: Optional[int] = None,
        next_token: Optional[str] = None
    ) -> List[LogGroup]:
        return self.log_groups.describe_log_groups(name_prefix, limit, next_token)

    def describe_log_streams(
        self,
        log_group_name: str,
        name_prefix: Optional[str] = None,
        limit: Optional[int] = None,
        next_token: Optional[str] = None
    ) -> List[LogStream]:
        return self.log_streams.describe_log_streams(log_group_name, name_prefix, limit, next_token)

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
        return self.log_events.get_log_events(
            log_group_name, log_stream_name,
            start_time=start_time,
            end_time=end_time,
            start_from_head=start_from_head,
            limit=limit,
            next_token=next_token
        )

    def create_log_group(self, log_group_name: str) -> None:
        self.log_groups_writer.create_log_group(log_group_name)

    def create_log_stream(self, log_group_name: str, log_stream_name: str) -> None:
        self.log_streams_writer.create_log_stream(log_group_name, log_stream_name)

    def put_log_events(
        self,
        log_group_name: str,
        log_stream_name: str,
        log_events: Iterable[LogEventInput],
        sequence_token: Optional[str] = None
    ) -> Optional[str]:
        return self.log_events_writer.put_log_events(log_group_name, log_stream_name, log_events, sequence_token)


def create_client(
    config: Optional[CloudWatchLogsConfig] = None,
    transport: Optional[Transport] = None
) -> CloudWatchLogsClient:
    """
    Factory function to create a CloudWatchLogsClient.

    Args:
        config: Configuration (read from the environment when None)
        transport: Optional transport override

    Returns:
        Configured CloudWatchLogsClient
    """
    return CloudWatchLogsClient(config or CloudWatchLogsConfig.from_env(), transport=transport)
