"""
Log Streams Read API

DescribeLogStreams returns streams of one log group a page at a time. This
API concatenates every page; a failure on any page aborts the listing.
"""

import logging
from typing import List, Optional, Tuple

from ...config import CloudWatchLogsConfig
from ...core import LogsGateway, create_logs_gateway
from ...models import DescribeLogStreamsRequest, DescribeLogStreamsResponse, LogStream
from ...utils import collect_pages

logger = logging.getLogger(__name__)


class LogStreamsReadApi:
    """Read-only API for log stream listing."""

    OPERATION = "DescribeLogStreams"

    def __init__(self, config: CloudWatchLogsConfig, gateway: Optional[LogsGateway] = None):
        """Initialize read API with configuration."""
        self.config = config
        self.gateway = gateway or create_logs_gateway(config)

    def _describe_page(self, request: DescribeLogStreamsRequest) -> Tuple[List[LogStream], Optional[str]]:
        data = self.gateway.call(self.OPERATION, request)
        page = DescribeLogStreamsResponse.from_wire(data, self.OPERATION)
        logger.debug(f"{self.OPERATION} page for {request.log_group_name}: {len(page.log_streams)} streams")
        return page.log_streams, page.next_token

    def describe_log_streams(
        self,
        log_group_name: str,
        name_prefix: Optional[str] = None,
        limit: Optional[int] = None,
        next_token: Optional[str] = None
    ) -> List[LogStream]:
        """
        List the streams of a log group across all pages.

        Args:
            log_group_name: Group whose streams to list
            name_prefix: Only streams whose name starts with this prefix
            limit: Page size for each request (1-50)
            next_token: Token to start from instead of the first page

        Returns:
            All log streams, in page order

        Examples:
            >>> streams = api.describe_log_streams("app", name_prefix="web-")
            >>> token = streams[0].upload_sequence_token
        """
        request = DescribeLogStreamsRequest(
            log_group_name=log_group_name,
            log_stream_name_prefix=name_prefix,
            limit=limit,
            next_token=next_token
        )
        return collect_pages(self._describe_page, request)

    def get_log_stream(self, log_group_name: str, log_stream_name: str) -> Optional[LogStream]:
        """
        Find a single stream by exact name.

        Lists with the name as prefix and picks the exact match.

        Returns:
            LogStream if found, None otherwise
        """
        for stream in self.describe_log_streams(log_group_name, name_prefix=log_stream_name):
            if stream.log_stream_name == log_stream_name:
                return stream
        return None
