#!/usr/bin/env python3
"""
Basic usage examples for the CloudWatch Logs client.

This example demonstrates:
1. Setting up configuration
2. Creating a log group and a log stream
3. Appending events while threading the sequence token
4. Reading events back with caller-driven paging
5. Listing groups and streams (pages collected automatically)
"""

import logging
from datetime import datetime, timedelta, timezone

from cloudwatch_logs import (
    CloudWatchLogsConfig,
    LogEvent,
    ResourceAlreadyExistsError,
    ServiceError,
    create_client,
)


def main():
    """Demonstrate basic usage of the CloudWatch Logs client."""
    logging.basicConfig(level=logging.INFO)

    # 1. Configure the client (LocalStack; use CloudWatchLogsConfig.from_env() for AWS)
    print("1. Setting up CloudWatch Logs configuration...")
    config = CloudWatchLogsConfig.for_local_development()
    client = create_client(config)

    # 2. Create group and stream, tolerating reruns
    print("2. Creating log group and stream...")
    for create in (lambda: client.create_log_group("example-app"),
                   lambda: client.create_log_stream("example-app", "web-1")):
        try:
            create()
        except ResourceAlreadyExistsError as e:
            print(f"   already exists: {e.error_message}")

    # 3. Append two batches; events are sorted by timestamp before sending
    print("3. Putting log events...")
    now = datetime.now(timezone.utc)
    stream = client.log_streams.get_log_stream("example-app", "web-1")
    token = stream.upload_sequence_token if stream else None
    token = client.put_log_events("example-app", "web-1", [
        LogEvent.at("request handled", now),
        LogEvent.at("server started", now - timedelta(seconds=5)),
    ], sequence_token=token)
    token = client.put_log_events("example-app", "web-1", [
        LogEvent.at("shutting down", now + timedelta(seconds=1)),
    ], sequence_token=token)
    print(f"   next sequence token: {token}")

    # 4. Read events from the head, following forward tokens until they stop changing
    print("4. Reading events...")
    next_token = None
    while True:
        page = client.get_log_events("example-app", "web-1", start_from_head=True,
                                     limit=2, next_token=next_token)
        for event in page.events:
            print(f"   {event.event_time.isoformat()} {event.message}")
        if not page.events or page.next_forward_token == next_token:
            break
        next_token = page.next_forward_token

    # 5. List groups and streams
    print("5. Listing groups and streams...")
    try:
        for group in client.describe_log_groups(name_prefix="example-"):
            streams = client.describe_log_streams(group.log_group_name)
            print(f"   {group.log_group_name}: {[s.log_stream_name for s in streams]}")
    except ServiceError as e:
        print(f"   listing failed: {e}")


if __name__ == "__main__":
    main()
