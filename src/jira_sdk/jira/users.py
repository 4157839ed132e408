"""Module for Jira user operations."""

from typing import Any

from ..exceptions import NoAccountIDError, NoAccountSliceError
from ..models.constants import DEFAULT_MAX_RESULTS, DEFAULT_START_AT
from ..models.jira import (
    GroupScheme,
    UserPayloadScheme,
    UserScheme,
    UserSearchPageScheme,
)
from ..models.response import ResponseScheme
from .service import JiraService


class UserService(JiraService):
    """Service for users, addressed by Atlassian account ID."""

    def get(
        self, account_id: str, expand: list[str] | None = None
    ) -> tuple[UserScheme, ResponseScheme]:
        """
        Get a user.

        Args:
            account_id: The account ID of the user
            expand: Optional expansions: 'groups' and/or 'applicationRoles'

        Returns:
            The user and the response
        """
        if not account_id:
            raise NoAccountIDError()

        params: dict[str, Any] = {"accountId": account_id}
        if expand:
            params["expand"] = ",".join(expand)

        endpoint = self._endpoint("user", params)
        return self._call("GET", endpoint, target=UserScheme)

    def create(self, payload: UserPayloadScheme) -> tuple[UserScheme, ResponseScheme]:
        endpoint = self._endpoint("user")
        return self._call("POST", endpoint, payload, target=UserScheme)

    def delete(self, account_id: str) -> ResponseScheme:
        """Delete a user from the site."""
        if not account_id:
            raise NoAccountIDError()

        endpoint = self._endpoint("user", {"accountId": account_id})
        _, response = self._call("DELETE", endpoint)
        return response

    def find(
        self,
        account_ids: list[str],
        start_at: int = DEFAULT_START_AT,
        max_results: int = DEFAULT_MAX_RESULTS,
    ) -> tuple[UserSearchPageScheme, ResponseScheme]:
        """
        Get a page of the users with the given account IDs.

        Raises:
            NoAccountSliceError: If no account ID is given
        """
        if not account_ids:
            raise NoAccountSliceError()

        params = {
            "startAt": start_at,
            "maxResults": max_results,
            "accountId": list(account_ids),
        }
        endpoint = self._endpoint("user/bulk", params)
        return self._call("GET", endpoint, target=UserSearchPageScheme)

    def groups(self, account_id: str) -> tuple[list[GroupScheme], ResponseScheme]:
        """Get the groups a user belongs to."""
        if not account_id:
            raise NoAccountIDError()

        endpoint = self._endpoint("user/groups", {"accountId": account_id})
        return self._call("GET", endpoint, target=list[GroupScheme])

    def gets(
        self,
        start_at: int = DEFAULT_START_AT,
        max_results: int = DEFAULT_MAX_RESULTS,
    ) -> tuple[list[UserScheme], ResponseScheme]:
        """Get a page of all users, including inactive and app users."""
        params = {"startAt": start_at, "maxResults": max_results}
        endpoint = self._endpoint("users/search", params)
        return self._call("GET", endpoint, target=list[UserScheme])
