"""
Tests for the CloudWatchLogsClient facade.
"""

import os
from unittest.mock import patch

from cloudwatch_logs import CloudWatchLogsClient, CloudWatchLogsConfig, LogEvent, create_client
from cloudwatch_logs.core import RequestsTransport
from tests.helpers import json_response


class TestCloudWatchLogsClient:

    def test_apis_share_one_gateway(self, client):
        """Test that every API on the client uses the same gateway."""
        gateway = client.gateway

        assert client.log_groups.gateway is gateway
        assert client.log_groups_writer.gateway is gateway
        assert client.log_streams.gateway is gateway
        assert client.log_streams_writer.gateway is gateway
        assert client.log_events.gateway is gateway
        assert client.log_events_writer.gateway is gateway

    def test_end_to_end_flow(self, client, fake_transport):
        """Test create, append and read through the client methods."""
        fake_transport.queue(json_response(None))
        fake_transport.queue(json_response(None))
        fake_transport.queue(json_response({"logStreams": [{"logStreamName": "web-1"}]}))
        fake_transport.queue(json_response({"nextSequenceToken": "seq-1"}))
        fake_transport.queue(json_response({"nextSequenceToken": "seq-2"}))
        fake_transport.queue(json_response({"events": [{"timestamp": 1, "message": "one"}], "nextForwardToken": "f/1"}))
        fake_transport.queue(json_response({"logGroups": [{"logGroupName": "app"}]}))

        client.create_log_group("app")
        client.create_log_stream("app", "web-1")
        streams = client.describe_log_streams("app")
        token = client.put_log_events("app", "web-1", [LogEvent(timestamp=1, message="one")],
                                      streams[0].upload_sequence_token)
        token = client.put_log_events("app", "web-1", [LogEvent(timestamp=2, message="two")], token)
        page = client.get_log_events("app", "web-1", start_from_head=True)
        groups = client.describe_log_groups(name_prefix="a")

        assert token == "seq-2"
        assert page.events[0].message == "one"
        assert [g.log_group_name for g in groups] == ["app"]
        assert [t.split(".")[1] for t in fake_transport.targets] == [
            "CreateLogGroup",
            "CreateLogStream",
            "DescribeLogStreams",
            "PutLogEvents",
            "PutLogEvents",
            "GetLogEvents",
            "DescribeLogGroups",
        ]
        assert "sequenceToken" not in fake_transport.payloads[3]
        assert fake_transport.payloads[4]["sequenceToken"] == "seq-1"


class TestCreateClient:

    def test_with_config(self, logs_config, fake_transport):
        """Test create_client with an explicit configuration."""
        client = create_client(logs_config, fake_transport)

        assert isinstance(client, CloudWatchLogsClient)
        assert client.config is logs_config
        assert client.gateway.transport is fake_transport

    def test_from_env(self):
        """Test create_client falling back to environment configuration."""
        with patch.dict(os.environ, {"AWS_REGION": "eu-central-1"}, clear=True):
            client = create_client()

        assert isinstance(client.config, CloudWatchLogsConfig)
        assert client.config.get_endpoint() == "https://logs.eu-central-1.amazonaws.com"
        assert isinstance(client.gateway.transport, RequestsTransport)
