"""
Test configuration and fixtures for the CloudWatch Logs client.

Unit tests run every API against a FakeTransport returning canned responses.
Integration tests use moto's mock_aws backend through the real transport.
"""

import pytest

from cloudwatch_logs import (
    CloudWatchLogsClient,
    CloudWatchLogsConfig,
    LogEventsReadApi,
    LogEventsWriteApi,
    LogGroupsReadApi,
    LogGroupsWriteApi,
    LogStreamsReadApi,
    LogStreamsWriteApi,
    LogsGateway,
)
from tests.helpers import FakeTransport


@pytest.fixture
def logs_config():
    """Configuration with static test credentials and the regional endpoint."""
    return CloudWatchLogsConfig(
        aws_access_key_id="test_key",
        aws_secret_access_key="test_secret",
        aws_session_token=None,
        region_name="us-east-1",
        endpoint_url=None,
        timeout_seconds=5.0,
        enable_debug_logging=False
    )


@pytest.fixture
def fake_transport():
    """Empty FakeTransport; tests queue responses on it."""
    return FakeTransport()


@pytest.fixture
def gateway(logs_config, fake_transport):
    """LogsGateway wired to the fake transport."""
    return LogsGateway(logs_config, transport=fake_transport)


# Read/write API fixtures

@pytest.fixture
def log_groups_read_api(logs_config, gateway):
    return LogGroupsReadApi(logs_config, gateway)


@pytest.fixture
def log_groups_write_api(logs_config, gateway):
    return LogGroupsWriteApi(logs_config, gateway)


@pytest.fixture
def log_streams_read_api(logs_config, gateway):
    return LogStreamsReadApi(logs_config, gateway)


@pytest.fixture
def log_streams_write_api(logs_config, gateway):
    return LogStreamsWriteApi(logs_config, gateway)


@pytest.fixture
def log_events_read_api(logs_config, gateway):
    return LogEventsReadApi(logs_config, gateway)


@pytest.fixture
def log_events_write_api(logs_config, gateway):
    return LogEventsWriteApi(logs_config, gateway)


@pytest.fixture
def client(logs_config, fake_transport):
    """Client facade wired to the fake transport."""
    return CloudWatchLogsClient(logs_config, transport=fake_transport)


# Sample wire data

@pytest.fixture
def sample_log_group():
    return {
        "logGroupName": "app",
        "arn": "arn:aws:logs:us-east-1:123456789012:log-group:app:*",
        "creationTime": 1700000000000,
        "retentionInDays": 30,
        "metricFilterCount": 2,
        "storedBytes": 5368709120
    }


@pytest.fixture
def sample_log_stream():
    return {
        "logStreamName": "web-1",
        "arn": "arn:aws:logs:us-east-1:123456789012:log-group:app:log-stream:web-1",
        "creationTime": 1700000000000,
        "firstEventTimestamp": 1700000001000,
        "lastEventTimestamp": 1700000009000,
        "lastIngestionTime": 1700000009500,
        "storedBytes": 1024,
        "uploadSequenceToken": "49590302645937862364839"
    }
