"""
Jira issue search models.

Search results embed whole issues, so every page exists in an ADF flavour
(REST API v3) and a rich-text flavour (REST API v2).
"""

from typing import Any

from pydantic import Field

from ..base import ApiModel
from .issue import IssueScheme, IssueSchemeV2


class _SearchPageBase(ApiModel):
    expand: str | None = None
    start_at: int | None = None
    max_results: int | None = None
    total: int | None = None
    warning_messages: list[str] | None = None
    names: dict[str, str] | None = None
    schema_: dict[str, Any] | None = Field(default=None, alias="schema")


class IssueSearchScheme(_SearchPageBase):
    issues: list[IssueScheme] | None = None


class IssueSearchSchemeV2(_SearchPageBase):
    issues: list[IssueSchemeV2] | None = None


class IssueSearchJQLScheme(ApiModel):
    """A page of the token-paginated ``search/jql`` endpoint."""

    issues: list[IssueScheme] | None = None
    next_page_token: str | None = None
    is_last: bool | None = None


class IssueSearchJQLSchemeV2(ApiModel):
    issues: list[IssueSchemeV2] | None = None
    next_page_token: str | None = None
    is_last: bool | None = None


class IssueSearchApproximateCountScheme(ApiModel):
    count: int | None = None


class IssueBulkFetchErrorScheme(ApiModel):
    issue_id_or_key: str | None = None
    errors: list[str] | None = None


class IssueBulkFetchScheme(ApiModel):
    expand: str | None = None
    issues: list[IssueScheme] | None = None
    issue_errors: list[IssueBulkFetchErrorScheme] | None = None


class IssueBulkFetchSchemeV2(ApiModel):
    expand: str | None = None
    issues: list[IssueSchemeV2] | None = None
    issue_errors: list[IssueBulkFetchErrorScheme] | None = None


class IssueSearchCheckPayloadScheme(ApiModel):
    """Issue IDs to check against one or more JQL queries."""

    issue_ids: list[int] | None = None
    jqls: list[str] | None = None


class IssueMatchesScheme(ApiModel):
    matched_issues: list[int] | None = None
    errors: list[str] | None = None


class IssueMatchesPageScheme(ApiModel):
    matches: list[IssueMatchesScheme] | None = None
