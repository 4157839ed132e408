"""Typed client library for the Jira REST API (v2 and v3)."""

import logging
import os

from jira_sdk.utils.logging import setup_logging

__version__ = "0.1.0"

# Initialize logging only when asked to; otherwise leave it to the application
if os.getenv("JIRA_SDK_VERBOSE", "").lower() in ("true", "1", "yes"):
    logger = setup_logging(logging.DEBUG)
else:
    logger = logging.getLogger("jira-sdk")
    logger.addHandler(logging.NullHandler())

from jira_sdk.exceptions import JiraSDKError  # noqa: E402
from jira_sdk.jira import Jira, JiraConfig, JiraConnector  # noqa: E402
from jira_sdk.models import ResponseScheme  # noqa: E402

__all__ = [
    "Jira",
    "JiraConfig",
    "JiraConnector",
    "JiraSDKError",
    "ResponseScheme",
    "__version__",
]
