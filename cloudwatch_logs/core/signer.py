"""
SigV4 Request Signing

Credentials are resolved once through a boto3 Session: explicit keys from
the configuration when present, otherwise the standard AWS credential chain
(environment, shared config, instance profile). Signing itself is delegated
to botocore's SigV4Auth.
"""

import logging

import boto3
from botocore.auth import SigV4Auth
from botocore.awsrequest import AWSRequest

from ..config import SERVICE_NAME, CloudWatchLogsConfig
from ..exceptions import TransportError
from .transport import HttpRequest

logger = logging.getLogger(__name__)


class RequestSigner:
    """Signs HttpRequests for the CloudWatch Logs service in the configured region."""

    def __init__(self, config: CloudWatchLogsConfig):
        self.config = config
        self._credentials = None

    @property
    def credentials(self):
        """Lazily resolved botocore credentials."""
        if self._credentials is None:
            try:
                session = boto3.Session(
                    aws_access_key_id=self.config.aws_access_key_id,
                    aws_secret_access_key=self.config.aws_secret_access_key,
                    aws_session_token=self.config.aws_session_token,
                    region_name=self.config.region_name
                )
                credentials = session.get_credentials()
            except Exception as e:
                logger.error(f"Failed to resolve AWS credentials: {e}")
                raise TransportError(f"Failed to resolve AWS credentials: {e}", original_error=e) from e

            if credentials is None:
                logger.error("No AWS credentials found for CloudWatch Logs")
                raise TransportError(
                    "No AWS credentials found for CloudWatch Logs",
                    context={'region': self.config.region_name}
                )
            self._credentials = credentials
        return self._credentials

    def sign(self, request: HttpRequest) -> HttpRequest:
        """
        Return a copy of the request carrying SigV4 authentication headers.

        SigV4Auth rewrites X-Amz-Date with the signing time and adds
        Authorization (and X-Amz-Security-Token for temporary credentials).

        Args:
            request: Unsigned request

        Returns:
            Signed request
        """
        aws_request = AWSRequest(
            method=request.method,
            url=request.url,
            data=request.body,
            headers=dict(request.headers)
        )
        auth = SigV4Auth(self.credentials.get_frozen_credentials(), SERVICE_NAME, self.config.region_name)
        auth.add_auth(aws_request)

        return HttpRequest(
            method=request.method,
            url=request.url,
            headers=dict(aws_request.headers.items()),
            body=request.body
        )
