"""
CloudWatch Logs Request Gateway

This module executes a single operation against the CloudWatch Logs JSON API:

1. Serialize the payload to a JSON body
2. Add Content-Type, X-Amz-Target and X-Amz-Date headers
3. Sign the request (SigV4, service "logs")
4. Send it through the Transport seam
5. Decode a 200 body, or map a non-200 body to a typed ServiceError

One network round trip per call and no retries. Every failure is raised to
the caller immediately.

Read/write APIs compose gateway calls; they never build HTTP requests
themselves.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Union

import requests
from pydantic import BaseModel

from ..config import CloudWatchLogsConfig
from ..exceptions import (
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
from ..models import WireModel
from .signer import RequestSigner
from .transport import HttpRequest, HttpResponse, RequestsTransport, Transport

logger = logging.getLogger(__name__)

CONTENT_TYPE = "application/x-amz-json-1.1"
AMZ_DATE_FORMAT = "%Y%m%dT%H%M%SZ"

Payload = Union[WireModel, BaseModel, Dict[str, Any], None]

ERROR_CODE_MAP = {
    'ResourceNotFoundException': ResourceNotFoundError,
    'ResourceAlreadyExistsException': ResourceAlreadyExistsError,
    'InvalidSequenceTokenException': InvalidSequenceTokenError,
    'DataAlreadyAcceptedException': DataAlreadyAcceptedError,
    'InvalidParameterException': InvalidParameterError,
    'ValidationException': InvalidParameterError,
    'AccessDeniedException': AccessDeniedError,
    'UnrecognizedClientException': AccessDeniedError,
    'InvalidSignatureException': AccessDeniedError,
    'IncompleteSignatureException': AccessDeniedError,
    'ExpiredTokenException': AccessDeniedError,
    'LimitExceededException': LimitExceededError,
    'ThrottlingException': LimitExceededError,
    'ServiceQuotaExceededException': LimitExceededError,
}


def _decode_json(body: bytes) -> Any:
    return json.loads(body.decode('utf-8'))


def map_service_error(response: HttpResponse, operation: str) -> CloudWatchLogsError:
    """Map a non-200 response to a typed exception.

    The body is expected to be ``{"__type": <code>, "message": <text>}``.
    The exception class is picked from the code with any ``namespace#``
    prefix removed; the raw code is kept on the exception.

    Args:
        response: The non-200 response
        operation: The operation that failed (e.g., "PutLogEvents")

    Returns:
        ServiceError (or subclass), or DecodeError when the body is not a JSON
        object with string ``__type`` and ``message``
    """
    if not response.body.strip():
        return ServiceError(response.status_code, response.reason, "", response.reason, operation)

    try:
        body = _decode_json(response.body)
    except (UnicodeDecodeError, ValueError) as e:
        logger.error(f"Failed to parse {operation} error body as JSON (HTTP {response.status_code})")
        return DecodeError(f"Failed to parse {operation} error body as JSON: {e}", response.body, operation, e)

    if not isinstance(body, dict):
        return DecodeError(f"{operation} error body is not a JSON object", response.body, operation)

    code = body.get('__type')
    message = body.get('message', body.get('Message'))
    code = '' if code is None else code
    message = '' if message is None else message
    if not isinstance(code, str) or not isinstance(message, str):
        logger.error(f"{operation} error body has a non-string __type or message (HTTP {response.status_code})")
        return DecodeError(f"{operation} error body does not match the error shape", response.body, operation)

    short_code = code.rsplit('#', 1)[-1]

    error_class = ERROR_CODE_MAP.get(short_code)
    if error_class is None:
        logger.debug(f"Unmapped CloudWatch Logs error code '{code}' raised as ServiceError")
        error_class = ServiceError

    return error_class(response.status_code, response.reason, code, message, operation, body)


class LogsGateway:
    """
    Request executor for the CloudWatch Logs JSON API.

    The transport and signer are created lazily from the configuration unless
    supplied. Pass a Transport to substitute the network (tests do this).
    """

    def __init__(
        self,
        config: CloudWatchLogsConfig,
        transport: Optional[Transport] = None,
        signer: Optional[RequestSigner] = None
    ):
        """Initialize the gateway.

        Args:
            config: CloudWatch Logs configuration
            transport: Optional transport (RequestsTransport by default)
            signer: Optional request signer (RequestSigner by default)
        """
        self.config = config
        self._transport = transport
        self._signer = signer

    @property
    def transport(self) -> Transport:
        if self._transport is None:
            self._transport = RequestsTransport(self.config.timeout_seconds)
        return self._transport

    @property
    def signer(self) -> RequestSigner:
        if self._signer is None:
            self._signer = RequestSigner(self.config)
        return self._signer

    @property
    def url(self) -> str:
        return self.config.get_endpoint() + "/"

    def build_request(self, operation: str, payload: Payload = None) -> HttpRequest:
        """
        Build the signed POST request for an operation.

        Args:
            operation: Operation name (e.g., "DescribeLogStreams")
            payload: Request DTO, pydantic model, dict or None

        Returns:
            Signed HttpRequest
        """
        if isinstance(payload, WireModel):
            data = payload.to_wire()
        elif isinstance(payload, BaseModel):
            data = payload.model_dump(by_alias=True, exclude_none=True)
        else:
            data = payload or {}

        headers = {
            'Content-Type': CONTENT_TYPE,
            'X-Amz-Date': datetime.now(timezone.utc).strftime(AMZ_DATE_FORMAT),
            'X-Amz-Target': self.config.get_target(operation),
        }
        request = HttpRequest(
            method='POST',
            url=self.url,
            headers=headers,
            body=json.dumps(data).encode('utf-8')
        )
        return self.signer.sign(request)

    def query(self, operation: str, payload: Payload = None) -> bytes:
        """
        Send an operation and return the raw response body on HTTP 200.

        Args:
            operation: Operation name
            payload: Request payload

        Returns:
            Raw response body

        Raises:
            ServiceError: For non-200 responses with a structured error body
            DecodeError: For non-200 responses whose body is not JSON
            TransportError: For network failures or missing credentials
        """
        try:
            request = self.build_request(operation, payload)
        except TransportError as e:
            e.for_operation(operation)
            raise

        if self.config.enable_debug_logging:
            logger.debug(f"{request.headers['X-Amz-Target']} -> {request.url}: {request.body!r}")

        try:
            response = self.transport.send(request)
        except (requests.RequestException, OSError) as e:
            logger.error(f"Error calling CloudWatch Logs {operation}: {e}")
            raise TransportError(f"Error calling CloudWatch Logs {operation}: {e}", operation, e) from e

        if self.config.enable_debug_logging:
            logger.debug(f"{operation} <- HTTP {response.status_code}: {response.body!r}")

        if response.status_code != 200:
            raise map_service_error(response, operation)

        return response.body

    def call(self, operation: str, payload: Payload = None) -> Dict[str, Any]:
        """
        Send an operation and return the decoded JSON object.

        An empty 200 body decodes to an empty dict.

        Raises:
            DecodeError: If the 200 body is malformed JSON or not an object
            (plus everything query() raises)
        """
        body = self.query(operation, payload)
        if not body.strip():
            return {}

        try:
            data = _decode_json(body)
        except (UnicodeDecodeError, ValueError) as e:
            logger.error(f"Failed to parse {operation} response body as JSON")
            raise DecodeError(f"Failed to parse {operation} response body as JSON: {e}", body, operation, e) from e

        if not isinstance(data, dict):
            raise DecodeError(f"{operation} response body is not a JSON object", body, operation)
        return data


def create_logs_gateway(config: CloudWatchLogsConfig, transport: Optional[Transport] = None) -> LogsGateway:
    """
    Factory function to create a LogsGateway instance.

    Args:
        config: CloudWatch Logs configuration
        transport: Optional transport override

    Returns:
        Configured LogsGateway instance
    """
    return LogsGateway(config, transport=transport)
