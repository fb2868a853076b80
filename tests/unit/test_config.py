import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from cloudwatch_logs.config import CloudWatchLogsConfig


class TestCloudWatchLogsConfig:
    """Test cases for CloudWatchLogsConfig."""

    def test_default_config(self):
        """Test default configuration values."""
        with patch.dict(os.environ, {"AWS_REGION": "us-west-2"}, clear=True):
            config = CloudWatchLogsConfig()

            assert config.region_name == "us-west-2"
            assert config.timeout_seconds == 30.0
            assert config.endpoint_url is None
            assert config.enable_debug_logging is False
            assert config.aws_access_key_id is None

    def test_config_from_env_vars(self):
        """Test configuration from environment variables."""
        env_vars = {
            "AWS_ACCESS_KEY_ID": "test_key",
            "AWS_SECRET_ACCESS_KEY": "test_secret",
            "AWS_SESSION_TOKEN": "test_token",
            "AWS_REGION": "eu-west-1",
            "CLOUDWATCH_LOGS_ENDPOINT_URL": "http://localhost:4566/",
            "CLOUDWATCH_LOGS_TIMEOUT": "12.5",
            "CLOUDWATCH_LOGS_DEBUG_LOGGING": "TRUE"
        }

        with patch.dict(os.environ, env_vars, clear=True):
            config = CloudWatchLogsConfig.from_env()

            assert config.aws_access_key_id == "test_key"
            assert config.aws_secret_access_key == "test_secret"
            assert config.aws_session_token == "test_token"
            assert config.region_name == "eu-west-1"
            assert config.endpoint_url == "http://localhost:4566"
            assert config.timeout_seconds == 12.5
            assert config.enable_debug_logging is True

    def test_regional_endpoint(self):
        """Test endpoint derived from the region when none is configured."""
        config = CloudWatchLogsConfig(region_name="ap-southeast-2", endpoint_url=None)

        assert config.get_endpoint() == "https://logs.ap-southeast-2.amazonaws.com"

    def test_explicit_endpoint_strips_trailing_slash(self):
        """Test trailing slashes are removed from an explicit endpoint."""
        config = CloudWatchLogsConfig(endpoint_url="https://logs.example.com//")

        assert config.get_endpoint() == "https://logs.example.com"

    def test_target_header_value(self):
        """Test X-Amz-Target value for an operation."""
        config = CloudWatchLogsConfig(region_name="us-east-1")

        assert config.get_target("PutLogEvents") == "Logs_20140328.PutLogEvents"

    def test_local_development_config(self):
        """Test local development configuration."""
        config = CloudWatchLogsConfig.for_local_development()

        assert config.aws_access_key_id == "test"
        assert config.aws_secret_access_key == "test"
        assert config.get_endpoint() == "http://localhost:4566"
        assert config.enable_debug_logging is True

    def test_invalid_region(self):
        """Test validation of an empty region."""
        with pytest.raises(ValidationError, match="AWS region name is required"):
            CloudWatchLogsConfig(region_name="")

    def test_invalid_endpoint(self):
        """Test validation of an endpoint without a scheme."""
        with pytest.raises(ValidationError, match="must start with http"):
            CloudWatchLogsConfig(endpoint_url="logs.us-east-1.amazonaws.com")

    def test_invalid_timeout(self):
        """Test validation of a zero timeout."""
        with pytest.raises(ValidationError, match="greater than zero"):
            CloudWatchLogsConfig(timeout_seconds=0)

    def test_validate_assignment(self):
        """Assignments are validated like construction."""
        config = CloudWatchLogsConfig(region_name="us-east-1")

        with pytest.raises(ValidationError):
            config.endpoint_url = "ftp://example.com"

    def test_env_timeout_is_validated(self):
        """Test that a non-positive timeout from the environment is rejected."""
        with patch.dict(os.environ, {"CLOUDWATCH_LOGS_TIMEOUT": "-5"}, clear=True):
            with pytest.raises(ValidationError, match="greater than zero"):
                CloudWatchLogsConfig.from_env()

    def test_env_region_is_validated(self):
        """Test that an empty region from the environment is rejected."""
        with patch.dict(os.environ, {"AWS_REGION": ""}, clear=True):
            with pytest.raises(ValidationError, match="AWS region name is required"):
                CloudWatchLogsConfig.from_env()

    def test_env_endpoint_is_validated(self):
        """Test that an endpoint from the environment must be an http(s) URL."""
        with patch.dict(os.environ, {"CLOUDWATCH_LOGS_ENDPOINT_URL": "localhost:4566"}, clear=True):
            with pytest.raises(ValidationError, match="must start with http"):
                CloudWatchLogsConfig.from_env()
