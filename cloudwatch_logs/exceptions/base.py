"""
Base error for the CloudWatch Logs client.

Every client error names the API operation it came from once that is known,
so a failure reads the same whether it was raised by the service, the
network or the decoder:

    [HTTP 400] ResourceNotFoundException: ... (Context: operation=CreateLogStream)
"""

from typing import Any, Dict, Optional


class CloudWatchLogsError(Exception):
    """Base exception for all CloudWatch Logs client errors.

    Attributes:
        message: Human-readable error message
        operation: API operation that failed (e.g., "PutLogEvents"), if known
        original_error: The exception that caused this error, if any
        context: Extra details; ``operation`` is always the first entry when set
    """

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        original_error: Optional[Exception] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.operation = None
        self.original_error = original_error
        self.context: Dict[str, Any] = dict(context or {})
        if operation:
            self.for_operation(operation)
        super().__init__(message)

    def for_operation(self, operation: str) -> 'CloudWatchLogsError':
        """Record the failing operation if the raiser did not know it.

        Credential lookup, for one, fails before any operation is attached.
        An operation already set is left alone.

        Returns:
            This error
        """
        if self.operation is None:
            self.operation = operation
            self.context = {'operation': operation, **self.context}
        return self

    def __str__(self) -> str:
        if not self.context:
            return self.message
        context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
        return f"{self.message} (Context: {context_str})"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(message={self.message!r}, operation={self.operation!r}, "
            f"original_error={self.original_error!r})"
        )
