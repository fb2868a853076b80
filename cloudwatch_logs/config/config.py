import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file if it exists
load_dotenv()

SERVICE_NAME = "logs"
API_VERSION = "20140328"
TARGET_PREFIX = f"Logs_{API_VERSION}"


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    return float(value) if value else default


class CloudWatchLogsConfig(BaseModel):
    """Configuration for CloudWatch Logs connection and request signing."""

    aws_access_key_id: Optional[str] = Field(
        default_factory=lambda: os.getenv("AWS_ACCESS_KEY_ID"),
        description="AWS access key ID"
    )

    aws_secret_access_key: Optional[str] = Field(
        default_factory=lambda: os.getenv("AWS_SECRET_ACCESS_KEY"),
        description="AWS secret access key"
    )

    aws_session_token: Optional[str] = Field(
        default_factory=lambda: os.getenv("AWS_SESSION_TOKEN"),
        description="AWS session token for temporary credentials"
    )

    region_name: str = Field(
        default_factory=lambda: os.getenv("AWS_REGION", "us-east-1"),
        description="AWS region name, also used as the signing region"
    )

    # Service endpoint
    endpoint_url: Optional[str] = Field(
        default_factory=lambda: os.getenv("CLOUDWATCH_LOGS_ENDPOINT_URL"),
        description="CloudWatch Logs endpoint URL (regional endpoint when unset)"
    )

    # Connection settings
    timeout_seconds: float = Field(
        default_factory=lambda: _env_float("CLOUDWATCH_LOGS_TIMEOUT", 30.0),
        description="Request timeout in seconds"
    )

    # Logging settings
    enable_debug_logging: bool = Field(
        default_factory=lambda: os.getenv("CLOUDWATCH_LOGS_DEBUG_LOGGING", "false").lower() == "true",
        description="Log request and response bodies at DEBUG level"
    )

    @field_validator('region_name')
    @classmethod
    def validate_region(cls, v):
        """Validate AWS region name."""
        if not v:
            raise ValueError("AWS region name is required")
        return v

    @field_validator('endpoint_url')
    @classmethod
    def validate_endpoint_url(cls, v):
        """Validate endpoint URL and strip any trailing slash."""
        if v is None:
            return v
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Endpoint URL must start with http:// or https://: {v}")
        return v.rstrip("/")

    @field_validator('timeout_seconds')
    @classmethod
    def validate_timeout(cls, v):
        """Validate request timeout."""
        if v <= 0:
            raise ValueError("Timeout must be greater than zero")
        return v

    def get_endpoint(self) -> str:
        """Get the service endpoint without a trailing slash.

        Returns:
            The configured endpoint URL, or the regional AWS endpoint
        """
        if self.endpoint_url:
            return self.endpoint_url
        return f"https://{SERVICE_NAME}.{self.region_name}.amazonaws.com"

    def get_target(self, operation: str) -> str:
        """Get the X-Amz-Target header value for an operation.

        Args:
            operation: Operation name (e.g., "DescribeLogGroups")

        Returns:
            Target string such as "Logs_20140328.DescribeLogGroups"
        """
        return f"{TARGET_PREFIX}.{operation}"

    @classmethod
    def from_env(cls) -> 'CloudWatchLogsConfig':
        """Create configuration from environment variables.

        Returns:
            CloudWatchLogsConfig instance
        """
        return cls()

    @classmethod
    def for_local_development(cls) -> 'CloudWatchLogsConfig':
        """Create configuration for a local LocalStack endpoint.

        Returns:
            CloudWatchLogsConfig instance configured for local development
        """
        return cls(
            aws_access_key_id="test",
            aws_secret_access_key="test",
            aws_session_token=None,
            region_name="us-east-1",
            endpoint_url="http://localhost:4566",
            enable_debug_logging=True
        )

    model_config = ConfigDict(
        validate_assignment=True,
        validate_default=True
    )
