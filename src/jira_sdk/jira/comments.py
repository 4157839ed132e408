"""Module for Jira comment operations."""

from typing import Any

from ..exceptions import NoCommentIDError, NoIssueKeyOrIDError
from ..models.constants import DEFAULT_MAX_RESULTS, DEFAULT_START_AT
from ..models.jira import (
    CommentPayloadScheme,
    CommentPayloadSchemeV2,
    IssueCommentPageScheme,
    IssueCommentPageSchemeV2,
    IssueCommentScheme,
    IssueCommentSchemeV2,
)
from ..models.response import ResponseScheme
from .service import JiraService


class _CommentService(JiraService):
    """Comment operations shared by the ADF and rich text services.

    Subclasses pick the schemes the comment bodies decode into.
    """

    comment_scheme: type = IssueCommentScheme
    page_scheme: type = IssueCommentPageScheme

    def delete(self, issue_key_or_id: str, comment_id: str) -> ResponseScheme:
        """
        Delete a comment.

        Args:
            issue_key_or_id: The issue key (e.g. 'PROJ-123') or ID
            comment_id: The ID of the comment

        Returns:
            The response

        Raises:
            NoIssueKeyOrIDError: If the issue key is empty
            NoCommentIDError: If the comment ID is empty
        """
        if not issue_key_or_id:
            raise NoIssueKeyOrIDError()
        if not comment_id:
            raise NoCommentIDError()

        endpoint = self._endpoint(f"issue/{issue_key_or_id}/comment/{comment_id}")
        _, response = self._call("DELETE", endpoint)
        return response

    def gets(
        self,
        issue_key_or_id: str,
        order_by: str = "",
        expand: list[str] | None = None,
        start_at: int = DEFAULT_START_AT,
        max_results: int = DEFAULT_MAX_RESULTS,
    ) -> tuple[Any, ResponseScheme]:
        """
        Get a page of comments for an issue.

        Args:
            issue_key_or_id: The issue key (e.g. 'PROJ-123') or ID
            order_by: Optional ordering, e.g. '-created'
            expand: Optional expansions, e.g. ['renderedBody']
            start_at: Index of the first comment to return
            max_results: Maximum number of comments to return

        Returns:
            The comment page and the response
        """
        if not issue_key_or_id:
            raise NoIssueKeyOrIDError()

        params: dict[str, Any] = {"startAt": start_at, "maxResults": max_results}
        if expand:
            params["expand"] = ",".join(expand)
        if order_by:
            params["orderBy"] = order_by

        endpoint = self._endpoint(f"issue/{issue_key_or_id}/comment", params)
        return self._call("GET", endpoint, target=self.page_scheme)

    def get(self, issue_key_or_id: str, comment_id: str) -> tuple[Any, ResponseScheme]:
        """Get a single comment."""
        if not issue_key_or_id:
            raise NoIssueKeyOrIDError()
        if not comment_id:
            raise NoCommentIDError()

        endpoint = self._endpoint(f"issue/{issue_key_or_id}/comment/{comment_id}")
        return self._call("GET", endpoint, target=self.comment_scheme)

    def _add(
        self, issue_key_or_id: str, payload: Any, expand: list[str] | None
    ) -> tuple[Any, ResponseScheme]:
        if not issue_key_or_id:
            raise NoIssueKeyOrIDError()

        params = {"expand": ",".join(expand)} if expand else None
        endpoint = self._endpoint(f"issue/{issue_key_or_id}/comment", params)
        return self._call("POST", endpoint, payload, target=self.comment_scheme)

    def _update(
        self,
        issue_key_or_id: str,
        comment_id: str,
        payload: Any,
        notify_users: bool,
        expand: list[str] | None,
    ) -> tuple[Any, ResponseScheme]:
        if not issue_key_or_id:
            raise NoIssueKeyOrIDError()
        if not comment_id:
            raise NoCommentIDError()

        params: dict[str, Any] = {"notifyUsers": notify_users}
        if expand:
            params["expand"] = ",".join(expand)

        endpoint = self._endpoint(
            f"issue/{issue_key_or_id}/comment/{comment_id}", params
        )
        return self._call("PUT", endpoint, payload, target=self.comment_scheme)


class CommentADFService(_CommentService):
    """Comments with Atlassian Document Format bodies (REST API v3)."""

    comment_scheme = IssueCommentScheme
    page_scheme = IssueCommentPageScheme

    def add(
        self,
        issue_key_or_id: str,
        payload: CommentPayloadScheme,
        expand: list[str] | None = None,
    ) -> tuple[IssueCommentScheme, ResponseScheme]:
        """
        Add a comment to an issue.

        Args:
            issue_key_or_id: The issue key (e.g. 'PROJ-123') or ID
            payload: The comment, its body an ADF document
            expand: Optional expansions for the returned comment

        Returns:
            The created comment and the response
        """
        return self._add(issue_key_or_id, payload, expand)

    def update(
        self,
        issue_key_or_id: str,
        comment_id: str,
        payload: CommentPayloadScheme,
        notify_users: bool = True,
        expand: list[str] | None = None,
    ) -> tuple[IssueCommentScheme, ResponseScheme]:
        """Replace the body or visibility of a comment."""
        return self._update(issue_key_or_id, comment_id, payload, notify_users, expand)


class CommentRichTextService(_CommentService):
    """Comments with plain text or wiki markup bodies (REST API v2)."""

    comment_scheme = IssueCommentSchemeV2
    page_scheme = IssueCommentPageSchemeV2

    def add(
        self,
        issue_key_or_id: str,
        payload: CommentPayloadSchemeV2,
        expand: list[str] | None = None,
    ) -> tuple[IssueCommentSchemeV2, ResponseScheme]:
        return self._add(issue_key_or_id, payload, expand)

    def update(
        self,
        issue_key_or_id: str,
        comment_id: str,
        payload: CommentPayloadSchemeV2,
        notify_users: bool = True,
        expand: list[str] | None = None,
    ) -> tuple[IssueCommentSchemeV2, ResponseScheme]:
        return self._update(issue_key_or_id, comment_id, payload, notify_users, expand)
