from .config import API_VERSION, SERVICE_NAME, TARGET_PREFIX, CloudWatchLogsConfig

__all__ = [
    "API_VERSION",
    "SERVICE_NAME",
    "TARGET_PREFIX",
    "CloudWatchLogsConfig",
]
