"""
Log Streams Write API

CreateLogStream returns an empty body on success; any failure is raised.
"""

import logging
from typing import Optional

from ...config import CloudWatchLogsConfig
from ...core import LogsGateway, create_logs_gateway
from ...models import CreateLogStreamRequest

logger = logging.getLogger(__name__)


class LogStreamsWriteApi:
    """Write API for log streams."""

    def __init__(self, config: CloudWatchLogsConfig, gateway: Optional[LogsGateway] = None):
        """Initialize write API with configuration."""
        self.config = config
        self.gateway = gateway or create_logs_gateway(config)

    def create_log_stream(self, log_group_name: str, log_stream_name: str) -> None:
        """
        Create a log stream in an existing log group.

        Args:
            log_group_name: Parent group
            log_stream_name: Name of the new stream

        Raises:
            ResourceNotFoundError: If the group does not exist
            ResourceAlreadyExistsError: If the stream already exists
        """
        request = CreateLogStreamRequest(log_group_name=log_group_name, log_stream_name=log_stream_name)
        self.gateway.query("CreateLogStream", request)
        logger.info(f"Created log stream {log_group_name}/{log_stream_name}")
