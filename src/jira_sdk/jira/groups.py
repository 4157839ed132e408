"""Module for Jira group operations."""

from typing import Any

from ..exceptions import NoAccountIDError, NoGroupNameError
from ..models.constants import DEFAULT_MAX_RESULTS, DEFAULT_START_AT
from ..models.jira import (
    BulkGroupScheme,
    GroupBulkOptionsScheme,
    GroupDetailScheme,
    GroupMemberPageScheme,
)
from ..models.response import ResponseScheme
from .service import JiraService


class GroupService(JiraService):
    """Service for Jira groups and their members."""

    def create(self, group_name: str) -> tuple[GroupDetailScheme, ResponseScheme]:
        if not group_name:
            raise NoGroupNameError()

        endpoint = self._endpoint("group")
        return self._call("POST", endpoint, {"name": group_name}, target=GroupDetailScheme)

    def delete(self, group_name: str) -> ResponseScheme:
        if not group_name:
            raise NoGroupNameError()

        endpoint = self._endpoint("group", {"groupname": group_name})
        _, response = self._call("DELETE", endpoint)
        return response

    def bulk(
        self,
        options: GroupBulkOptionsScheme | None = None,
        start_at: int = DEFAULT_START_AT,
        max_results: int = DEFAULT_MAX_RESULTS,
    ) -> tuple[BulkGroupScheme, ResponseScheme]:
        """
        Get groups by ID or name.

        Args:
            options: Optional group IDs and names; each one is sent as its
                own query parameter
            start_at: Index of the first group to return
            max_results: Maximum number of groups to return

        Returns:
            The group page and the response
        """
        params: dict[str, Any] = {"startAt": start_at, "maxResults": max_results}

        if options is not None:
            if options.group_ids:
                params["groupId"] = list(options.group_ids)
            if options.group_names:
                params["groupName"] = list(options.group_names)

        endpoint = self._endpoint("group/bulk", params)
        return self._call("GET", endpoint, target=BulkGroupScheme)

    def members(
        self,
        group_name: str,
        inactive: bool = False,
        start_at: int = DEFAULT_START_AT,
        max_results: int = DEFAULT_MAX_RESULTS,
    ) -> tuple[GroupMemberPageScheme, ResponseScheme]:
        """Get a page of the members of a group."""
        if not group_name:
            raise NoGroupNameError()

        params = {
            "startAt": start_at,
            "maxResults": max_results,
            "groupname": group_name,
            "includeInactiveUsers": inactive,
        }
        endpoint = self._endpoint("group/member", params)
        return self._call("GET", endpoint, target=GroupMemberPageScheme)

    def add(
        self, group_name: str, account_id: str
    ) -> tuple[GroupDetailScheme, ResponseScheme]:
        """
        Add a user to a group.

        Args:
            group_name: The name of the group
            account_id: The account ID of the user

        Returns:
            The group and the response
        """
        if not group_name:
            raise NoGroupNameError()
        if not account_id:
            raise NoAccountIDError()

        endpoint = self._endpoint("group/user", {"groupname": group_name})
        return self._call(
            "POST", endpoint, {"accountId": account_id}, target=GroupDetailScheme
        )

    def remove(self, group_name: str, account_id: str) -> ResponseScheme:
        if not group_name:
            raise NoGroupNameError()
        if not account_id:
            raise NoAccountIDError()

        params = {"groupname": group_name, "accountId": account_id}
        endpoint = self._endpoint("group/user", params)
        _, response = self._call("DELETE", endpoint)
        return response
