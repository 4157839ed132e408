"""Module for Jira audit record operations."""

from ..models.jira import AuditRecordGetOptions, AuditRecordPageScheme
from ..models.response import ResponseScheme
from ..utils.date import format_query_date
from .service import JiraService


class AuditRecordService(JiraService):
    """Service for the Jira audit log."""

    def get(
        self,
        options: AuditRecordGetOptions | None = None,
        offset: int = 0,
        limit: int = 1000,
    ) -> tuple[AuditRecordPageScheme, ResponseScheme]:
        """
        Get audit records.

        The text filter is sent under an empty query key, so a filter of
        ``summary`` produces ``?=summary``; ``from`` and ``to`` are sent as
        ``YYYY-MM-DD`` dates.

        Args:
            options: Optional filter and date range
            offset: Number of records to skip
            limit: Maximum number of records to return

        Returns:
            The page of audit records and the response
        """
        params: dict[str, object] = {"offset": offset, "limit": limit}

        if options is not None:
            if options.filter:
                params[""] = options.filter
            if options.from_:
                params["from"] = format_query_date(options.from_)
            if options.to:
                params["to"] = format_query_date(options.to)

        endpoint = self._endpoint("auditing/record", params)
        return self._call("GET", endpoint, target=AuditRecordPageScheme)
