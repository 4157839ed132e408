"""URL-related utility functions for the Jira SDK."""

import re
from urllib.parse import urlparse


def is_atlassian_cloud_url(url: str) -> bool:
    """Determine if a URL belongs to Atlassian Cloud or Server/Data Center.

    Args:
        url: The URL to check

    Returns:
        True if the URL is for an Atlassian Cloud instance, False for Server/Data Center
    """
    # Localhost and IP-based URLs are always Server/Data Center
    if not url:
        return False

    hostname = urlparse(url).hostname or ""

    if (
        hostname == "localhost"
        or re.match(r"^127\.", hostname)
        or re.match(r"^192\.168\.", hostname)
        or re.match(r"^10\.", hostname)
        or re.match(r"^172\.(1[6-9]|2[0-9]|3[0-1])\.", hostname)
    ):
        return False

    return (
        ".atlassian.net" in hostname
        or ".jira.com" in hostname
        or ".jira-dev.com" in hostname
    )


def normalize_site(site: str) -> str:
    """Return the site URL with exactly one trailing slash.

    Endpoints are resolved relative to the site, so a site such as
    ``https://jira.example.com/jira`` must end with ``/`` to keep its path.
    """
    return site.rstrip("/") + "/"
