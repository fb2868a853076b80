"""
Log Groups Write API

CreateLogGroup returns an empty body on success; any failure is raised.
"""

import logging
from typing import Optional

from ...config import CloudWatchLogsConfig
from ...core import LogsGateway, create_logs_gateway
from ...models import CreateLogGroupRequest

logger = logging.getLogger(__name__)


class LogGroupsWriteApi:
    """Write API for log groups."""

    def __init__(self, config: CloudWatchLogsConfig, gateway: Optional[LogsGateway] = None):
        """Initialize write API with configuration."""
        self.config = config
        self.gateway = gateway or create_logs_gateway(config)

    def create_log_group(self, log_group_name: str) -> None:
        """
        Create a log group.

        Args:
            log_group_name: Name of the new group

        Raises:
            ResourceAlreadyExistsError: If the group already exists
            ServiceError: For any other service failure
        """
        request = CreateLogGroupRequest(log_group_name=log_group_name)
        self.gateway.query("CreateLogGroup", request)
        logger.info(f"Created log group {log_group_name}")
