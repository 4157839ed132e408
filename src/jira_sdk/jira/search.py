"""Module for Jira issue search operations."""

from typing import Any

from ..exceptions import NoIssuesError, NoJQLError
from ..models.constants import DEFAULT_MAX_RESULTS, DEFAULT_START_AT
from ..models.jira import (
    IssueBulkFetchScheme,
    IssueBulkFetchSchemeV2,
    IssueMatchesPageScheme,
    IssueSearchApproximateCountScheme,
    IssueSearchCheckPayloadScheme,
    IssueSearchJQLScheme,
    IssueSearchJQLSchemeV2,
    IssueSearchScheme,
    IssueSearchSchemeV2,
)
from ..models.response import ResponseScheme
from .service import JiraService


def _compact(body: dict[str, Any]) -> dict[str, Any]:
    """Drop empty values from a request body."""
    return {key: value for key, value in body.items() if value}


class _SearchService(JiraService):
    """Search operations; subclasses pick the issue flavour of the results."""

    page_scheme: type = IssueSearchScheme
    jql_page_scheme: type = IssueSearchJQLScheme
    bulk_scheme: type = IssueBulkFetchScheme

    def checks(
        self, payload: IssueSearchCheckPayloadScheme
    ) -> tuple[IssueMatchesPageScheme, ResponseScheme]:
        """Check which of the given issues match each JQL query."""
        endpoint = self._endpoint("jql/match")
        return self._call("POST", endpoint, payload, target=IssueMatchesPageScheme)

    def get(
        self,
        jql: str,
        fields: list[str] | None = None,
        expand: list[str] | None = None,
        start_at: int = DEFAULT_START_AT,
        max_results: int = DEFAULT_MAX_RESULTS,
        validate: str = "",
    ) -> tuple[Any, ResponseScheme]:
        """
        Search issues with JQL through a GET request.

        Args:
            jql: The JQL query, e.g. 'project = DUMMY ORDER BY created DESC'
            fields: Optional fields to return for each issue
            expand: Optional expansions, e.g. ['changelog']
            start_at: Index of the first issue to return
            max_results: Maximum number of issues to return
            validate: Optional JQL validation: 'strict', 'warn' or 'none'

        Returns:
            The search page and the response

        Raises:
            NoJQLError: If the query is empty
        """
        if not jql:
            raise NoJQLError()

        params: dict[str, Any] = {
            "jql": jql,
            "startAt": start_at,
            "maxResults": max_results,
        }
        if expand:
            params["expand"] = ",".join(expand)
        if validate:
            params["validateQuery"] = validate
        if fields:
            params["fields"] = ",".join(fields)

        endpoint = self._endpoint("search", params)
        return self._call("GET", endpoint, target=self.page_scheme)

    def post(
        self,
        jql: str,
        fields: list[str] | None = None,
        expand: list[str] | None = None,
        start_at: int = DEFAULT_START_AT,
        max_results: int = DEFAULT_MAX_RESULTS,
        validate: str = "",
    ) -> tuple[Any, ResponseScheme]:
        """Search issues with JQL sent in the request body, for long queries."""
        if not jql:
            raise NoJQLError()

        body = _compact(
            {
                "expand": expand,
                "jql": jql,
                "maxResults": max_results,
                "fields": fields,
                "startAt": start_at,
                "validateQuery": validate,
            }
        )

        endpoint = self._endpoint("search")
        return self._call("POST", endpoint, body, target=self.page_scheme)

    def search_jql(
        self,
        jql: str,
        fields: list[str] | None = None,
        expand: list[str] | None = None,
        max_results: int = DEFAULT_MAX_RESULTS,
        next_page_token: str = "",
    ) -> tuple[Any, ResponseScheme]:
        """
        Search issues with the token-paginated ``search/jql`` endpoint.

        Pass the ``next_page_token`` of a page to get the following one; the
        last page has ``is_last`` set.

        Raises:
            NoJQLError: If the query is empty
        """
        if not jql:
            raise NoJQLError()

        body = _compact(
            {
                "jql": jql,
                "maxResults": max_results,
                "fields": fields,
                "expand": ",".join(expand) if expand else "",
                "nextPageToken": next_page_token,
            }
        )

        endpoint = self._endpoint("search/jql")
        return self._call("POST", endpoint, body, target=self.jql_page_scheme)

    def approximate_count(
        self, jql: str
    ) -> tuple[IssueSearchApproximateCountScheme, ResponseScheme]:
        """Get an estimate of the number of issues a JQL query matches."""
        if not jql:
            raise NoJQLError()

        endpoint = self._endpoint("search/approximate-count")
        return self._call(
            "POST", endpoint, {"jql": jql}, target=IssueSearchApproximateCountScheme
        )

    def bulk_fetch(
        self, issue_ids_or_keys: list[str], fields: list[str] | None = None
    ) -> tuple[Any, ResponseScheme]:
        """
        Get up to 100 issues by key or ID in one request.

        Args:
            issue_ids_or_keys: The issues to fetch
            fields: Optional fields to return for each issue

        Returns:
            The issues, the keys that could not be fetched and the response

        Raises:
            NoIssuesError: If no issue is given
        """
        if not issue_ids_or_keys:
            raise NoIssuesError()

        body = _compact({"issueIdsOrKeys": list(issue_ids_or_keys), "fields": fields})

        endpoint = self._endpoint("issue/bulkfetch")
        return self._call("POST", endpoint, body, target=self.bulk_scheme)


class SearchADFService(_SearchService):
    """Issue search returning ADF issues (REST API v3)."""

    page_scheme = IssueSearchScheme
    jql_page_scheme = IssueSearchJQLScheme
    bulk_scheme = IssueBulkFetchScheme


class SearchRichTextService(_SearchService):
    """Issue search returning rich text issues (REST API v2)."""

    page_scheme = IssueSearchSchemeV2
    jql_page_scheme = IssueSearchJQLSchemeV2
    bulk_scheme = IssueBulkFetchSchemeV2
