"""Module for Jira issue operations."""

from typing import Any

from ..exceptions import (
    NoAccountIDError,
    NoIssueKeyOrIDError,
    NoIssuesError,
    NoTransitionIDError,
)
from ..models.jira import (
    CustomFields,
    IssueBulkResponseScheme,
    IssueBulkScheme,
    IssueMoveOptions,
    IssueNotifyOptionsScheme,
    IssueResponseScheme,
    IssueScheme,
    IssueSchemeV2,
    IssueTransitionsScheme,
    UpdateOperations,
    build_issue_payload,
    deep_merge,
)
from ..models.response import ResponseScheme
from .service import JiraService


class _IssueService(JiraService):
    """Issue operations shared by the ADF and rich text services.

    Create, update and move accept the issue as a scheme plus optional
    ``CustomFields`` and ``UpdateOperations``; these are merged into one
    JSON body before the request is sent.
    """

    issue_scheme: type = IssueScheme

    def delete(self, issue_key_or_id: str, delete_sub_tasks: bool = False) -> ResponseScheme:
        """
        Delete an issue.

        Args:
            issue_key_or_id: The issue key (e.g. 'PROJ-123') or ID
            delete_sub_tasks: Also delete the subtasks; Jira refuses to delete
                an issue with subtasks otherwise

        Returns:
            The response
        """
        if not issue_key_or_id:
            raise NoIssueKeyOrIDError()

        endpoint = self._endpoint(
            f"issue/{issue_key_or_id}", {"deleteSubtasks": delete_sub_tasks}
        )
        _, response = self._call("DELETE", endpoint)
        return response

    def assign(self, issue_key_or_id: str, account_id: str) -> ResponseScheme:
        """Assign an issue to the user with the given account ID."""
        if not issue_key_or_id:
            raise NoIssueKeyOrIDError()
        if not account_id:
            raise NoAccountIDError()

        endpoint = self._endpoint(f"issue/{issue_key_or_id}/assignee")
        _, response = self._call("PUT", endpoint, {"accountId": account_id})
        return response

    def notify(
        self, issue_key_or_id: str, options: IssueNotifyOptionsScheme
    ) -> ResponseScheme:
        """
        Queue an e-mail notification about an issue.

        Args:
            issue_key_or_id: The issue key (e.g. 'PROJ-123') or ID
            options: Subject, bodies and recipients of the notification

        Returns:
            The response; Jira answers 204 once the notification is queued
        """
        if not issue_key_or_id:
            raise NoIssueKeyOrIDError()

        endpoint = self._endpoint(f"issue/{issue_key_or_id}/notify")
        _, response = self._call("POST", endpoint, options)
        return response

    def transitions(
        self, issue_key_or_id: str
    ) -> tuple[IssueTransitionsScheme, ResponseScheme]:
        """Get the transitions available to the current user for an issue."""
        if not issue_key_or_id:
            raise NoIssueKeyOrIDError()

        endpoint = self._endpoint(f"issue/{issue_key_or_id}/transitions")
        return self._call("GET", endpoint, target=IssueTransitionsScheme)

    def _create(
        self, payload: Any, custom_fields: CustomFields | None
    ) -> tuple[IssueResponseScheme, ResponseScheme]:
        body = build_issue_payload(payload, custom_fields=custom_fields)

        endpoint = self._endpoint("issue")
        return self._call("POST", endpoint, body, target=IssueResponseScheme)

    def creates(
        self, payloads: list[IssueBulkScheme]
    ) -> tuple[IssueBulkResponseScheme, ResponseScheme]:
        """
        Create up to 50 issues in one request.

        Entries without a payload are skipped. Issues that fail validation
        are reported in the ``errors`` of the result; the others are created.

        Args:
            payloads: The issues to create, each with optional custom fields

        Returns:
            The created issues, the per-issue errors and the response

        Raises:
            NoIssuesError: If no issue is given
        """
        if not payloads:
            raise NoIssuesError()

        issue_updates = [
            build_issue_payload(entry.payload, custom_fields=entry.custom_fields)
            for entry in payloads
            if entry.payload is not None
        ]

        endpoint = self._endpoint("issue/bulk")
        return self._call(
            "POST",
            endpoint,
            {"issueUpdates": issue_updates},
            target=IssueBulkResponseScheme,
        )

    def get(
        self,
        issue_key_or_id: str,
        fields: list[str] | None = None,
        expand: list[str] | None = None,
    ) -> tuple[Any, ResponseScheme]:
        """
        Get an issue.

        Args:
            issue_key_or_id: The issue key (e.g. 'PROJ-123') or ID
            fields: Optional fields to return, e.g. ['summary', '-comment']
            expand: Optional expansions, e.g. ['renderedFields', 'changelog']

        Returns:
            The issue and the response
        """
        if not issue_key_or_id:
            raise NoIssueKeyOrIDError()

        params: dict[str, Any] = {}
        if expand:
            params["expand"] = ",".join(expand)
        if fields:
            params["fields"] = ",".join(fields)

        endpoint = self._endpoint(f"issue/{issue_key_or_id}", params)
        return self._call("GET", endpoint, target=self.issue_scheme)

    def _update(
        self,
        issue_key_or_id: str,
        notify: bool,
        payload: Any,
        custom_fields: CustomFields | None,
        operations: UpdateOperations | None,
    ) -> ResponseScheme:
        if not issue_key_or_id:
            raise NoIssueKeyOrIDError()

        body = build_issue_payload(payload, custom_fields, operations)

        endpoint = self._endpoint(f"issue/{issue_key_or_id}", {"notifyUsers": notify})
        _, response = self._call("PUT", endpoint, body)
        return response

    def move(
        self,
        issue_key_or_id: str,
        transition_id: str,
        options: IssueMoveOptions | None = None,
    ) -> ResponseScheme:
        """
        Transition an issue, optionally setting fields on the way.

        Args:
            issue_key_or_id: The issue key (e.g. 'PROJ-123') or ID
            transition_id: The ID of the transition, see ``transitions``
            options: Fields, custom fields and edit operations to send with
                the transition; ignored unless ``options.fields`` is set

        Returns:
            The response
        """
        if not issue_key_or_id:
            raise NoIssueKeyOrIDError()
        if not transition_id:
            raise NoTransitionIDError()

        body: dict[str, Any] = {}
        if options is not None and options.fields is not None:
            body = build_issue_payload(
                options.fields, options.custom_fields, options.operations
            )
        deep_merge(body, {"transition": {"id": transition_id}})

        endpoint = self._endpoint(f"issue/{issue_key_or_id}/transitions")
        _, response = self._call("POST", endpoint, body)
        return response


class IssueADFService(_IssueService):
    """Issues with Atlassian Document Format descriptions (REST API v3)."""

    issue_scheme = IssueScheme

    def create(
        self, payload: IssueScheme, custom_fields: CustomFields | None = None
    ) -> tuple[IssueResponseScheme, ResponseScheme]:
        """
        Create an issue or subtask.

        Args:
            payload: The issue; project, issue type and summary are required
            custom_fields: Optional custom field values to merge in

        Returns:
            The key and ID of the new issue, and the response
        """
        return self._create(payload, custom_fields)

    def update(
        self,
        issue_key_or_id: str,
        notify: bool = True,
        payload: IssueScheme | None = None,
        custom_fields: CustomFields | None = None,
        operations: UpdateOperations | None = None,
    ) -> ResponseScheme:
        """Edit an issue's fields, custom fields and array values."""
        return self._update(issue_key_or_id, notify, payload, custom_fields, operations)


class IssueRichTextService(_IssueService):
    """Issues with plain text or wiki markup descriptions (REST API v2)."""

    issue_scheme = IssueSchemeV2

    def create(
        self, payload: IssueSchemeV2, custom_fields: CustomFields | None = None
    ) -> tuple[IssueResponseScheme, ResponseScheme]:
        return self._create(payload, custom_fields)

    def update(
        self,
        issue_key_or_id: str,
        notify: bool = True,
        payload: IssueSchemeV2 | None = None,
        custom_fields: CustomFields | None = None,
        operations: UpdateOperations | None = None,
    ) -> ResponseScheme:
        return self._update(issue_key_or_id, notify, payload, custom_fields, operations)
