"""
CloudWatch Logs Client Library

A Python client for the AWS CloudWatch Logs JSON API built on requests,
botocore SigV4 signing and Pydantic models: typed requests and responses,
typed errors, automatic pagination of group and stream listings, and
timestamp-ordered event submission.
"""

from .client import CloudWatchLogsClient, create_client
from .config import CloudWatchLogsConfig
from .core import (
    HttpRequest,
    HttpResponse,
    LogsGateway,
    RequestsTransport,
    Transport,
    create_logs_gateway,
)
from .exceptions import (
    AccessDeniedError,
    CloudWatchLogsError,
    DataAlreadyAcceptedError,
    DecodeError,
    InvalidParameterError,
    InvalidSequenceTokenError,
    LimitExceededError,
    ResourceAlreadyExistsError,
    ResourceNotFoundError,
    ServiceError,
    TransportError,
)
from .handlers import (
    LogEventsReadApi,
    LogEventsWriteApi,
    LogGroupsReadApi,
    LogGroupsWriteApi,
    LogStreamsReadApi,
    LogStreamsWriteApi,
)
from .models import (
    Event,
    GetLogEventsResponse,
    LogEvent,
    LogGroup,
    LogStream,
    RejectedLogEventsInfo,
)

__version__ = "1.0.0"
__all__ = [
    # Client
    "CloudWatchLogsClient",
    "create_client",

    # Configuration
    "CloudWatchLogsConfig",

    # Core
    "HttpRequest",
    "HttpResponse",
    "LogsGateway",
    "RequestsTransport",
    "Transport",
    "create_logs_gateway",

    # Exceptions
    "AccessDeniedError",
    "CloudWatchLogsError",
    "DataAlreadyAcceptedError",
    "DecodeError",
    "InvalidParameterError",
    "InvalidSequenceTokenError",
    "LimitExceededError",
    "ResourceAlreadyExistsError",
    "ResourceNotFoundError",
    "ServiceError",
    "TransportError",

    # Read/write APIs
    "LogEventsReadApi",
    "LogEventsWriteApi",
    "LogGroupsReadApi",
    "LogGroupsWriteApi",
    "LogStreamsReadApi",
    "LogStreamsWriteApi",

    # Models
    "Event",
    "GetLogEventsResponse",
    "LogEvent",
    "LogGroup",
    "LogStream",
    "RejectedLogEventsInfo",
]
