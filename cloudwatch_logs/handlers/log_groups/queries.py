"""
Log Groups Read API

DescribeLogGroups is paginated by the service. This API follows the
continuation token and returns every matching group as one list.
"""

import logging
from typing import List, Optional, Tuple

from ...config import CloudWatchLogsConfig
from ...core import LogsGateway, create_logs_gateway
from ...models import DescribeLogGroupsRequest, DescribeLogGroupsResponse, LogGroup
from ...utils import collect_pages

logger = logging.getLogger(__name__)


class LogGroupsReadApi:
    """Read-only API for log group listing."""

    OPERATION = "DescribeLogGroups"

    def __init__(self, config: CloudWatchLogsConfig, gateway: Optional[LogsGateway] = None):
        """Initialize read API with configuration."""
        self.config = config
        self.gateway = gateway or create_logs_gateway(config)

    def _describe_page(self, request: DescribeLogGroupsRequest) -> Tuple[List[LogGroup], Optional[str]]:
        data = self.gateway.call(self.OPERATION, request)
        page = DescribeLogGroupsResponse.from_wire(data, self.OPERATION)
        return page.log_groups, page.next_token

    def describe_log_groups(
        self,
        name_prefix: Optional[str] = None,
        limit: Optional[int] = None,
        next_token: Optional[str] = None
    ) -> List[LogGroup]:
        """
        List log groups, following continuation tokens until exhausted.

        Args:
            name_prefix: Only groups whose name starts with this prefix
            limit: Page size for each request (1-50)
            next_token: Token to start from instead of the first page

        Returns:
            All log groups across all pages, in page order

        Examples:
            >>> groups = api.describe_log_groups(name_prefix="/aws/lambda/")
        """
        request = DescribeLogGroupsRequest(
            log_group_name_prefix=name_prefix,
            limit=limit,
            next_token=next_token
        )
        return collect_pages(self._describe_page, request)
