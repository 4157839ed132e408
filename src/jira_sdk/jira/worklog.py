"""Module for Jira worklog operations."""

from typing import Any

from ..exceptions import NoIssueKeyOrIDError, NoWorklogIDError, NoWorklogsError
from ..models.constants import DEFAULT_MAX_RESULTS, DEFAULT_START_AT
from ..models.jira import (
    ChangedWorklogPageScheme,
    IssueWorklogADFPageScheme,
    IssueWorklogADFScheme,
    IssueWorklogRichTextPageScheme,
    IssueWorklogRichTextScheme,
    WorklogADFPayloadScheme,
    WorklogOptionsScheme,
    WorklogRichTextPayloadScheme,
)
from ..models.response import ResponseScheme
from .service import JiraService


def _options_params(options: WorklogOptionsScheme | None) -> dict[str, Any]:
    if options is None:
        return {}

    params: dict[str, Any] = {
        "notifyUsers": options.notify,
        "overrideEditableFlag": options.override_editable_flag,
    }
    if options.adjust_estimate:
        params["adjustEstimate"] = options.adjust_estimate
    if options.new_estimate:
        params["newEstimate"] = options.new_estimate
    if options.reduce_by:
        params["reduceBy"] = options.reduce_by
    if options.expand:
        params["expand"] = ",".join(options.expand)
    return params


class _WorklogService(JiraService):
    """Worklog operations shared by the ADF and rich text services."""

    worklog_scheme: type = IssueWorklogADFScheme
    page_scheme: type = IssueWorklogADFPageScheme

    def gets(
        self, worklog_ids: list[int], expand: list[str] | None = None
    ) -> tuple[list[Any], ResponseScheme]:
        """
        Get worklogs by ID.

        Args:
            worklog_ids: IDs of the worklogs to fetch (at most 1000)
            expand: Optional expansions, e.g. ['properties']

        Returns:
            The worklogs and the response

        Raises:
            NoWorklogsError: If no worklog IDs are given
        """
        if not worklog_ids:
            raise NoWorklogsError()

        params = {"expand": ",".join(expand)} if expand else None
        endpoint = self._endpoint("worklog/list", params)
        return self._call(
            "POST",
            endpoint,
            {"ids": list(worklog_ids)},
            target=list[self.worklog_scheme],  # type: ignore[valid-type]
        )

    def get(
        self,
        issue_key_or_id: str,
        worklog_id: str,
        expand: list[str] | None = None,
    ) -> tuple[Any, ResponseScheme]:
        """Get a worklog of an issue."""
        if not issue_key_or_id:
            raise NoIssueKeyOrIDError()
        if not worklog_id:
            raise NoWorklogIDError()

        params = {"expand": ",".join(expand)} if expand else None
        endpoint = self._endpoint(
            f"issue/{issue_key_or_id}/worklog/{worklog_id}", params
        )
        return self._call("GET", endpoint, target=self.worklog_scheme)

    def issue(
        self,
        issue_key_or_id: str,
        start_at: int = DEFAULT_START_AT,
        max_results: int = DEFAULT_MAX_RESULTS,
        after: int = 0,
        expand: list[str] | None = None,
    ) -> tuple[Any, ResponseScheme]:
        """
        Get a page of worklogs for an issue.

        Args:
            issue_key_or_id: The issue key (e.g. 'PROJ-123') or ID
            start_at: Index of the first worklog to return
            max_results: Maximum number of worklogs to return
            after: Only worklogs started after this UNIX time in milliseconds;
                0 means no lower bound
            expand: Optional expansions

        Returns:
            The worklog page and the response
        """
        if not issue_key_or_id:
            raise NoIssueKeyOrIDError()

        params: dict[str, Any] = {"startAt": start_at, "maxResults": max_results}
        if after:
            params["startedAfter"] = after
        if expand:
            params["expand"] = ",".join(expand)

        endpoint = self._endpoint(f"issue/{issue_key_or_id}/worklog", params)
        return self._call("GET", endpoint, target=self.page_scheme)

    def delete(
        self,
        issue_key_or_id: str,
        worklog_id: str,
        options: WorklogOptionsScheme | None = None,
    ) -> ResponseScheme:
        """Delete a worklog, adjusting the remaining estimate per ``options``."""
        if not issue_key_or_id:
            raise NoIssueKeyOrIDError()
        if not worklog_id:
            raise NoWorklogIDError()

        endpoint = self._endpoint(
            f"issue/{issue_key_or_id}/worklog/{worklog_id}", _options_params(options)
        )
        _, response = self._call("DELETE", endpoint)
        return response

    def deleted(self, since: int = 0) -> tuple[ChangedWorklogPageScheme, ResponseScheme]:
        """Get IDs of worklogs deleted since a UNIX time in milliseconds."""
        params = {"since": since} if since else None
        endpoint = self._endpoint("worklog/deleted", params)
        return self._call("GET", endpoint, target=ChangedWorklogPageScheme)

    def updated(
        self, since: int = 0, expand: list[str] | None = None
    ) -> tuple[ChangedWorklogPageScheme, ResponseScheme]:
        """Get IDs of worklogs updated since a UNIX time in milliseconds."""
        params: dict[str, Any] = {}
        if since:
            params["since"] = since
        if expand:
            params["expand"] = ",".join(expand)

        endpoint = self._endpoint("worklog/updated", params)
        return self._call("GET", endpoint, target=ChangedWorklogPageScheme)

    def _add(
        self,
        issue_key_or_id: str,
        payload: Any,
        options: WorklogOptionsScheme | None,
    ) -> tuple[Any, ResponseScheme]:
        if not issue_key_or_id:
            raise NoIssueKeyOrIDError()

        endpoint = self._endpoint(
            f"issue/{issue_key_or_id}/worklog", _options_params(options)
        )
        return self._call("POST", endpoint, payload, target=self.worklog_scheme)

    def _update(
        self,
        issue_key_or_id: str,
        worklog_id: str,
        payload: Any,
        options: WorklogOptionsScheme | None,
    ) -> tuple[Any, ResponseScheme]:
        if not issue_key_or_id:
            raise NoIssueKeyOrIDError()
        if not worklog_id:
            raise NoWorklogIDError()

        endpoint = self._endpoint(
            f"issue/{issue_key_or_id}/worklog/{worklog_id}", _options_params(options)
        )
        return self._call("PUT", endpoint, payload, target=self.worklog_scheme)


class WorklogADFService(_WorklogService):
    """Worklogs with Atlassian Document Format comments (REST API v3)."""

    worklog_scheme = IssueWorklogADFScheme
    page_scheme = IssueWorklogADFPageScheme

    def add(
        self,
        issue_key_or_id: str,
        payload: WorklogADFPayloadScheme,
        options: WorklogOptionsScheme | None = None,
    ) -> tuple[IssueWorklogADFScheme, ResponseScheme]:
        """
        Add a worklog to an issue.

        Args:
            issue_key_or_id: The issue key (e.g. 'PROJ-123') or ID
            payload: The worklog; ``time_spent_seconds`` or ``time_spent`` is required
            options: Optional estimate adjustment and notification settings

        Returns:
            The created worklog and the response
        """
        return self._add(issue_key_or_id, payload, options)

    def update(
        self,
        issue_key_or_id: str,
        worklog_id: str,
        payload: WorklogADFPayloadScheme,
        options: WorklogOptionsScheme | None = None,
    ) -> tuple[IssueWorklogADFScheme, ResponseScheme]:
        return self._update(issue_key_or_id, worklog_id, payload, options)


class WorklogRichTextService(_WorklogService):
    """Worklogs with plain text comments (REST API v2)."""

    worklog_scheme = IssueWorklogRichTextScheme
    page_scheme = IssueWorklogRichTextPageScheme

    def add(
        self,
        issue_key_or_id: str,
        payload: WorklogRichTextPayloadScheme,
        options: WorklogOptionsScheme | None = None,
    ) -> tuple[IssueWorklogRichTextScheme, ResponseScheme]:
        return self._add(issue_key_or_id, payload, options)

    def update(
        self,
        issue_key_or_id: str,
        worklog_id: str,
        payload: WorklogRichTextPayloadScheme,
        options: WorklogOptionsScheme | None = None,
    ) -> tuple[IssueWorklogRichTextScheme, ResponseScheme]:
        return self._update(issue_key_or_id, worklog_id, payload, options)
