"""
Typed Exceptions for CloudWatch Logs

This module holds every exception raised by the client beyond the base
CloudWatchLogsError.

Organized by category:
1. Service Errors (non-200 responses with a structured error body)
2. Transport and Decode Errors
"""

from typing import Any, Dict, Optional

from .base import CloudWatchLogsError


# =============================================================================
# Service Errors
# =============================================================================

class ServiceError(CloudWatchLogsError):
    """Raised when the service answers with a non-200 status.

    Built from the response status line and the JSON error body
    ``{"__type": <code>, "message": <text>}``.

    Attributes:
        status_code: HTTP status code (400, 403, ...)
        status: HTTP status text ("Bad Request", ...)
        code: Service error code exactly as sent in ``__type``
        error_message: Service error message
        operation: Operation that failed (e.g., "PutLogEvents")
        body: The decoded error body
    """

    def __init__(
        self,
        status_code: int,
        status: str,
        code: str,
        error_message: str,
        operation: Optional[str] = None,
        body: Optional[Dict[str, Any]] = None,
    ):
        self.status_code = status_code
        self.status = status
        self.code = code
        self.error_message = error_message
        self.body = body or {}
        super().__init__(f"[HTTP {status_code}] {code}: {error_message}", operation)

    @property
    def short_code(self) -> str:
        """Error code without any ``namespace#`` prefix."""
        return self.code.rsplit('#', 1)[-1]


class ResourceNotFoundError(ServiceError):
    """The log group or log stream does not exist."""


class ResourceAlreadyExistsError(ServiceError):
    """The log group or log stream already exists."""


class InvalidParameterError(ServiceError):
    """A request parameter was rejected by the service."""


class AccessDeniedError(ServiceError):
    """Credentials or signature were rejected."""


class LimitExceededError(ServiceError):
    """A service quota or request rate limit was exceeded."""


class SequenceTokenMixin:
    """Exposes the ``expectedSequenceToken`` PutLogEvents errors may carry."""

    body: Dict[str, Any]

    @property
    def expected_sequence_token(self) -> Optional[str]:
        """Token the service expects on the next append, if the body has one."""
        return self.body.get('expectedSequenceToken')


class InvalidSequenceTokenError(SequenceTokenMixin, ServiceError):
    """The sequence token sent with PutLogEvents is not the expected one."""


class DataAlreadyAcceptedError(SequenceTokenMixin, ServiceError):
    """The batch was already accepted; resend is not needed."""


# =============================================================================
# Transport and Decode Errors
# =============================================================================

class TransportError(CloudWatchLogsError):
    """Raised when a request cannot be sent or signed.

    Used for:
    - Network connectivity issues and timeouts
    - Missing AWS credentials
    """


class DecodeError(CloudWatchLogsError):
    """Raised when a response body cannot be decoded.

    Used for:
    - Malformed JSON in success or error bodies
    - Bodies that do not match the expected response or error shape
    """

    def __init__(
        self,
        message: str,
        body: Optional[bytes] = None,
        operation: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.body = body
        context = {'body_length': len(body)} if body is not None else None
        super().__init__(message, operation, original_error, context)
