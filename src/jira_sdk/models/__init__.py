"""
Pydantic models for Jira REST API resources.

This package provides type-safe models for working with Jira API data,
including conversion methods from API responses to structured models and
serialisation of request payloads.
"""

from .base import ApiModel, TimestampMixin
from .constants import (  # noqa: F401 - Keep constants available
    DEFAULT_MAX_RESULTS,
    DEFAULT_START_AT,
    EMPTY_STRING,
    JIRA_API_VERSIONS,
    JIRA_DEFAULT_API_VERSION,
    UNASSIGNED,
)
from .response import ResponseScheme

__all__ = [
    "ApiModel",
    "TimestampMixin",
    "ResponseScheme",
]
