# Base exception class
from .base import CloudWatchLogsError

from .service_exceptions import (
    AccessDeniedError,
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

__all__ = [
    # Base exception
    "CloudWatchLogsError",

    # Service errors
    "ServiceError",
    "AccessDeniedError",
    "DataAlreadyAcceptedError",
    "InvalidParameterError",
    "InvalidSequenceTokenError",
    "LimitExceededError",
    "ResourceAlreadyExistsError",
    "ResourceNotFoundError",

    # Transport and decode errors
    "DecodeError",
    "TransportError",
]
