"""
Base models and utility classes for the Jira SDK schemes.

Every scheme mirrors a Jira JSON resource: attributes are snake_case in
Python and camelCase on the wire, and fields Jira adds later are kept
instead of being dropped.
"""

import logging
from datetime import datetime
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .constants import EMPTY_STRING

logger = logging.getLogger(__name__)

# Type variable for the return type of from_api_response
T = TypeVar("T", bound="ApiModel")


class ApiModel(BaseModel):
    """
    Base model for all Jira schemes.

    Provides the conversions shared by every scheme: building a model from
    a raw API response, serialising a payload for the API, and producing a
    simplified dictionary.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        coerce_numbers_to_str=True,
    )

    @classmethod
    def from_api_response(cls: type[T], data: dict[str, Any], **kwargs: Any) -> T:
        """
        Convert an API response to a model instance.

        Args:
            data: The API response data
            **kwargs: Additional context parameters

        Returns:
            An instance of the model, or a default instance for empty or
            non-dictionary data
        """
        if not data:
            return cls()

        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        return cls.model_validate(data)

    def to_api_payload(self) -> dict[str, Any]:
        """Serialise the model into the JSON body Jira expects."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")

    def to_simplified_dict(self) -> dict[str, Any]:
        """
        Convert the model to a simplified dictionary.

        Returns:
            A dictionary with only the fields that carry a value
        """
        return self.model_dump(exclude_none=True)


class TimestampMixin:
    """
    Mixin for handling Atlassian API timestamp formats.
    """

    @staticmethod
    def _normalize_timestamp(timestamp: str) -> str:
        # "2024-01-01T10:00:00.000+0000" -> "2024-01-01T10:00:00.000+00:00"
        ts = timestamp.replace("Z", "+00:00")
        if "+" in ts and ":" not in ts[-5:]:
            tz_pos = ts.rfind("+")
            if tz_pos != -1 and len(ts) >= tz_pos + 5:
                ts = ts[: tz_pos + 3] + ":" + ts[tz_pos + 3 :]
        elif "-" in ts and ":" not in ts[-5:]:
            tz_pos = ts.rfind("-")
            if tz_pos != -1 and len(ts) >= tz_pos + 5:
                ts = ts[: tz_pos + 3] + ":" + ts[tz_pos + 3 :]
        return ts

    @classmethod
    def format_timestamp(cls, timestamp: str | None) -> str:
        """
        Format an Atlassian timestamp to a human-readable format.

        Args:
            timestamp: An ISO 8601 timestamp string

        Returns:
            A formatted date string, the input unchanged if it cannot be
            parsed, or an empty string for no input
        """
        if not timestamp:
            return EMPTY_STRING

        try:
            dt = datetime.fromisoformat(cls._normalize_timestamp(timestamp))
            return dt.strftime("%Y-%m-%d %H:%M:%S")
        except (ValueError, TypeError):
            return timestamp or EMPTY_STRING

    @classmethod
    def is_valid_timestamp(cls, timestamp: str | None) -> bool:
        """
        Check if a string is a valid ISO 8601 timestamp.

        Args:
            timestamp: The string to check

        Returns:
            True if the string is a valid timestamp, False otherwise
        """
        if not timestamp:
            return False

        try:
            datetime.fromisoformat(cls._normalize_timestamp(timestamp))
            return True
        except (ValueError, TypeError):
            return False
