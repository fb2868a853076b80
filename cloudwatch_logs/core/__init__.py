"""
Core infrastructure components for CloudWatch Logs operations.

This module contains the foundational components used by every handler:
- LogsGateway: Request executor (serialize, sign, send, decode)
- RequestSigner: SigV4 signing through botocore
- Transport: Seam between the gateway and the network
"""

from .logs_gateway import LogsGateway, create_logs_gateway, map_service_error
from .signer import RequestSigner
from .transport import HttpRequest, HttpResponse, RequestsTransport, Transport

__all__ = [
    "HttpRequest",
    "HttpResponse",
    "LogsGateway",
    "RequestSigner",
    "RequestsTransport",
    "Transport",
    "create_logs_gateway",
    "map_service_error",
]
