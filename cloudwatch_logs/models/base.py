"""
Base Model Components

Every request and response model shares one wire convention: Python
attributes are snake_case while the JSON body uses camelCase names.
WireModel centralizes that mapping so models only declare fields.

## Serialization

    request = DescribeLogStreamsRequest(log_group_name="app", limit=10)
    request.to_wire()
    # {'logGroupName': 'app', 'limit': 10}

Unset optional fields are dropped (``exclude_none``) so the service never sees
explicit nulls.

## Deserialization

    response = DescribeLogStreamsResponse.from_wire({'logStreams': [...], 'nextToken': 'T2'})

Unknown wire fields are ignored. A body that does not match the model raises
DecodeError rather than pydantic's ValidationError, since the data came from
the service and not from the caller.
"""

import logging
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)


class WireModel(BaseModel):
    """
    Mixin providing camelCase JSON serialization and deserialization.

    Features:
    - camelCase aliases generated from snake_case field names
    - Construction by either field name or alias
    - Unknown fields ignored on input
    - None values omitted on output
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra='ignore',
    )

    def to_wire(self) -> Dict[str, Any]:
        """
        Convert model to the JSON-ready wire payload.

        Returns:
            Dictionary keyed by camelCase wire names, without None values
        """
        return self.model_dump(by_alias=True, exclude_none=True)

    @classmethod
    def from_wire(cls, data: Dict[str, Any], operation: Optional[str] = None):
        """
        Create model instance from a decoded response body.

        Args:
            data: Decoded JSON object
            operation: Operation the body answered, recorded on DecodeError

        Returns:
            Model instance

        Raises:
            DecodeError: If data does not match the model
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            logger.error(f"Failed to convert response body to {cls.__name__}: {e}")
            from ..exceptions import DecodeError
            raise DecodeError(f"Failed to convert response body to {cls.__name__}: {e}",
                              operation=operation, original_error=e) from e
