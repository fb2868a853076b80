"""
HTTP Transport Seam

The gateway never talks to the network directly. It hands a fully signed
HttpRequest to a Transport and gets an HttpResponse back. RequestsTransport is
the production implementation; tests substitute a Transport that returns
canned responses.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict

import requests

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HttpRequest:
    """Signed request ready to send."""

    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: bytes = b""


@dataclass(frozen=True)
class HttpResponse:
    """Raw response: status line and undecoded body."""

    status_code: int
    reason: str = ""
    body: bytes = b""


class Transport(ABC):
    """Sends one HttpRequest and returns its HttpResponse.

    Implementations raise on network failure; they never retry.
    """

    @abstractmethod
    def send(self, request: HttpRequest) -> HttpResponse:
        ...


class RequestsTransport(Transport):
    """Transport backed by ``requests``, one call per request."""

    def __init__(self, timeout_seconds: float = 30.0):
        self.timeout_seconds = timeout_seconds

    def send(self, request: HttpRequest) -> HttpResponse:
        response = requests.request(
            request.method,
            request.url,
            data=request.body,
            headers=request.headers,
            timeout=self.timeout_seconds,
        )
        return HttpResponse(
            status_code=response.status_code,
            reason=response.reason or "",
            body=response.content,
        )
