"""
Utility functions for the Jira SDK.
"""

from .date import format_query_date
from .logging import log_config_param, mask_sensitive, setup_logging
from .ssl import SSLIgnoreAdapter, configure_ssl_verification
from .urls import is_atlassian_cloud_url, normalize_site

__all__ = [
    "SSLIgnoreAdapter",
    "configure_ssl_verification",
    "format_query_date",
    "is_atlassian_cloud_url",
    "log_config_param",
    "mask_sensitive",
    "normalize_site",
    "setup_logging",
]
