"""
Tests for the log streams read/write APIs.
"""

import pytest

from cloudwatch_logs.core import HttpResponse
from cloudwatch_logs.exceptions import DecodeError, ResourceNotFoundError, ServiceError
from cloudwatch_logs.models import LogStream
from tests.helpers import json_response


def stream(name: str, token: str = None) -> dict:
    data = {"logStreamName": name, "creationTime": 1700000000000, "storedBytes": 0}
    if token:
        data["uploadSequenceToken"] = token
    return data


class TestLogStreamsReadApi:
    """Test DescribeLogStreams with automatic pagination."""

    def test_two_pages_concatenated_in_order(self, log_streams_read_api, fake_transport):
        """Test two pages concatenated in page order."""
        fake_transport.queue(json_response({"logStreams": [stream("s1"), stream("s2")], "nextToken": "T2"}))
        fake_transport.queue(json_response({"logStreams": [stream("s3")], "nextToken": ""}))

        streams = log_streams_read_api.describe_log_streams("app")

        assert [s.log_stream_name for s in streams] == ["s1", "s2", "s3"]
        assert fake_transport.payloads == [
            {"logGroupName": "app"},
            {"logGroupName": "app", "nextToken": "T2"},
        ]

    def test_single_page_makes_one_request(self, log_streams_read_api, fake_transport, sample_log_stream):
        """Test a single page makes one request."""
        fake_transport.queue(json_response({"logStreams": [sample_log_stream], "nextToken": ""}))

        streams = log_streams_read_api.describe_log_streams("app", name_prefix="web", limit=50)

        assert len(fake_transport.requests) == 1
        assert fake_transport.payloads[0] == {"logGroupName": "app", "logStreamNamePrefix": "web", "limit": 50}
        assert isinstance(streams[0], LogStream)
        assert streams[0].upload_sequence_token == "49590302645937862364839"
        assert streams[0].last_ingestion_time == 1700000009500

    def test_empty_prefix_and_token_are_omitted(self, log_streams_read_api, fake_transport):
        """Test that empty prefix and token are left off the wire."""
        fake_transport.queue(json_response({"logStreams": [stream("s1")]}))

        streams = log_streams_read_api.describe_log_streams("app", name_prefix="", next_token="")

        assert [s.log_stream_name for s in streams] == ["s1"]
        assert fake_transport.payloads == [{"logGroupName": "app"}]

    def test_empty_group(self, log_streams_read_api, fake_transport):
        """Test listing a group without streams."""
        fake_transport.queue(json_response({}))

        assert log_streams_read_api.describe_log_streams("app") == []

    def test_error_on_second_page_discards_results(self, log_streams_read_api, fake_transport):
        """Test an error on the second page discards the first."""
        fake_transport.queue(json_response({"logStreams": [stream("s1")], "nextToken": "T2"}))
        fake_transport.queue(json_response(
            {"__type": "ServiceUnavailableException", "message": "try later"},
            status_code=503,
            reason="Service Unavailable"
        ))

        with pytest.raises(ServiceError) as exc_info:
            log_streams_read_api.describe_log_streams("app")

        assert exc_info.value.status_code == 503
        assert len(fake_transport.requests) == 2

    def test_malformed_second_page(self, log_streams_read_api, fake_transport):
        """Test a malformed second page raises DecodeError."""
        fake_transport.queue(json_response({"logStreams": [stream("s1")], "nextToken": "T2"}))
        fake_transport.queue(HttpResponse(200, "OK", b"{not json"))

        with pytest.raises(DecodeError):
            log_streams_read_api.describe_log_streams("app")

    def test_missing_group(self, log_streams_read_api, fake_transport):
        """Test listing streams of a missing group."""
        fake_transport.queue(json_response(
            {"__type": "ResourceNotFoundException", "message": "The specified log group does not exist."},
            status_code=400,
            reason="Bad Request"
        ))

        with pytest.raises(ResourceNotFoundError):
            log_streams_read_api.describe_log_streams("missing")

    def test_get_log_stream_exact_match(self, log_streams_read_api, fake_transport):
        """Test exact name lookup among prefix matches."""
        fake_transport.queue(json_response({"logStreams": [stream("web"), stream("web-1", "tok")]}))

        found = log_streams_read_api.get_log_stream("app", "web-1")

        assert found.log_stream_name == "web-1"
        assert found.upload_sequence_token == "tok"
        assert fake_transport.payloads == [{"logGroupName": "app", "logStreamNamePrefix": "web-1"}]

    def test_get_log_stream_not_found(self, log_streams_read_api, fake_transport):
        """Test lookup of a stream that does not exist."""
        fake_transport.queue(json_response({"logStreams": [stream("web-10")]}))

        assert log_streams_read_api.get_log_stream("app", "web-1") is None


class TestLogStreamsWriteApi:
    """Test CreateLogStream."""

    def test_create_log_stream(self, log_streams_write_api, fake_transport):
        """Test creating a log stream."""
        fake_transport.queue(json_response(None))

        assert log_streams_write_api.create_log_stream("app", "web-1") is None

        assert fake_transport.targets == ["Logs_20140328.CreateLogStream"]
        assert fake_transport.payloads == [{"logGroupName": "app", "logStreamName": "web-1"}]

    def test_create_in_missing_group(self, log_streams_write_api, fake_transport):
        """Test creating a stream in a missing group."""
        fake_transport.queue(json_response(
            {"__type": "ResourceNotFoundException", "message": "The specified log group does not exist."},
            status_code=400,
            reason="Bad Request"
        ))

        with pytest.raises(ResourceNotFoundError) as exc_info:
            log_streams_write_api.create_log_stream("missing", "web-1")

        assert exc_info.value.operation == "CreateLogStream"
