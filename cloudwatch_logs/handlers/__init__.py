"""
Handler Layer for the CloudWatch Logs client

Each resource has its own subdirectory with queries.py (read operations) and
commands.py (write operations). Handlers build request DTOs, call the
gateway and decode responses into models.

Architecture:
handlers/ (this layer) -> core/ (gateway, signer, transport) -> CloudWatch Logs
handlers/ (this layer) <- models/ (DTOs and views)
"""

from .log_events.queries import LogEventsReadApi
from .log_events.commands import LogEventsWriteApi
from .log_groups.queries import LogGroupsReadApi
from .log_groups.commands import LogGroupsWriteApi
from .log_streams.queries import LogStreamsReadApi
from .log_streams.commands import LogStreamsWriteApi

__all__ = [
    'LogEventsReadApi',
    'LogEventsWriteApi',
    'LogGroupsReadApi',
    'LogGroupsWriteApi',
    'LogStreamsReadApi',
    'LogStreamsWriteApi',
]
