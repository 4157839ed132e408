"""Utility functions for date query parameters."""

from datetime import date, datetime

import dateutil.parser

DATE_FORMAT = "%Y-%m-%d"


def format_query_date(value: date | datetime | str | None) -> str:
    """
    Format a date for a Jira query parameter (``YYYY-MM-DD``).

    The input accepts:
    - None or an empty string (returns an empty string)
    - ``date`` or ``datetime`` objects
    - Strings in any format supported by ``dateutil.parser``

    Args:
        value: The date to format

    Returns:
        The formatted date, or an empty string when no date was given
    """
    if not value:
        return ""
    if isinstance(value, str):
        value = dateutil.parser.parse(value)
    return value.strftime(DATE_FORMAT)
