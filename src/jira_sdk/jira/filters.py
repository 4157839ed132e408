"""Module for Jira filter and filter sharing operations."""

from typing import Any

from ..exceptions import NoAccountIDError, NoFilterIDError, NoPermissionGrantIDError
from ..models.constants import DEFAULT_MAX_RESULTS, DEFAULT_START_AT
from ..models.jira import (
    FilterPayloadScheme,
    FilterScheme,
    FilterSearchOptionScheme,
    FilterSearchPageScheme,
    PermissionFilterPayloadScheme,
    SharePermissionScheme,
    ShareFilterScopeScheme,
)
from ..models.response import ResponseScheme
from .protocols import Connector
from .service import JiraService


class FilterShareService(JiraService):
    """Service for the share permissions of filters."""

    def scope(self) -> tuple[ShareFilterScopeScheme, ResponseScheme]:
        """Get the default sharing scope for new filters."""
        endpoint = self._endpoint("filter/defaultShareScope")
        return self._call("GET", endpoint, target=ShareFilterScopeScheme)

    def set_scope(self, scope: str) -> ResponseScheme:
        """
        Set the default sharing scope for new filters.

        Args:
            scope: One of ``GLOBAL``, ``AUTHENTICATED`` or ``PRIVATE``
        """
        endpoint = self._endpoint("filter/defaultShareScope")
        _, response = self._call("PUT", endpoint, {"scope": scope})
        return response

    def gets(self, filter_id: int) -> tuple[list[SharePermissionScheme], ResponseScheme]:
        """Get the share permissions of a filter."""
        if not filter_id:
            raise NoFilterIDError()

        endpoint = self._endpoint(f"filter/{filter_id}/permission")
        return self._call("GET", endpoint, target=list[SharePermissionScheme])

    def add(
        self, filter_id: int, payload: PermissionFilterPayloadScheme
    ) -> tuple[list[SharePermissionScheme], ResponseScheme]:
        """
        Share a filter.

        Args:
            filter_id: The ID of the filter
            payload: The share permission to add

        Returns:
            All share permissions of the filter after the change, and the response
        """
        if not filter_id:
            raise NoFilterIDError()

        endpoint = self._endpoint(f"filter/{filter_id}/permission")
        return self._call("POST", endpoint, payload, target=list[SharePermissionScheme])

    def get(
        self, filter_id: int, permission_id: int
    ) -> tuple[SharePermissionScheme, ResponseScheme]:
        """Get one share permission of a filter."""
        if not filter_id:
            raise NoFilterIDError()
        if not permission_id:
            raise NoPermissionGrantIDError()

        endpoint = self._endpoint(f"filter/{filter_id}/permission/{permission_id}")
        return self._call("GET", endpoint, target=SharePermissionScheme)

    def delete(self, filter_id: int, permission_id: int) -> ResponseScheme:
        """Remove a share permission from a filter."""
        if not filter_id:
            raise NoFilterIDError()
        if not permission_id:
            raise NoPermissionGrantIDError()

        endpoint = self._endpoint(f"filter/{filter_id}/permission/{permission_id}")
        _, response = self._call("DELETE", endpoint)
        return response


class FilterService(JiraService):
    """Service for Jira filters.

    Share permissions are handled by ``share``, a ``FilterShareService``
    bound to the same connector and version.
    """

    def __init__(self, connector: Connector, version: str) -> None:
        super().__init__(connector, version)
        self.share = FilterShareService(connector, version)

    def create(self, payload: FilterPayloadScheme) -> tuple[FilterScheme, ResponseScheme]:
        """Create a filter owned by the current user."""
        endpoint = self._endpoint("filter")
        return self._call("POST", endpoint, payload, target=FilterScheme)

    def favorite(self) -> tuple[list[FilterScheme], ResponseScheme]:
        """Get the user's favourite filters."""
        endpoint = self._endpoint("filter/favourite")
        return self._call("GET", endpoint, target=list[FilterScheme])

    def my(
        self, favorites: bool = False, expand: list[str] | None = None
    ) -> tuple[list[FilterScheme], ResponseScheme]:
        """
        Get the filters owned by the user.

        Args:
            favorites: Also include the user's favourite filters
            expand: Optional expansions, e.g. ['sharedUsers']

        Returns:
            The filters and the response
        """
        params: dict[str, Any] = {"includeFavourites": favorites}
        if expand:
            params["expand"] = ",".join(expand)

        endpoint = self._endpoint("filter/my", params)
        return self._call("GET", endpoint, target=list[FilterScheme])

    def search(
        self,
        options: FilterSearchOptionScheme | None = None,
        start_at: int = DEFAULT_START_AT,
        max_results: int = DEFAULT_MAX_RESULTS,
    ) -> tuple[FilterSearchPageScheme, ResponseScheme]:
        """
        Search filters.

        Args:
            options: Optional search criteria; each filter ID is sent as its
                own ``id`` parameter
            start_at: Index of the first filter to return
            max_results: Maximum number of filters to return

        Returns:
            The search page and the response
        """
        params: dict[str, Any] = {"startAt": start_at, "maxResults": max_results}

        if options is not None:
            if options.expand:
                params["expand"] = ",".join(options.expand)
            if options.name:
                params["filterName"] = options.name
            if options.account_id:
                params["accountId"] = options.account_id
            if options.group:
                params["groupname"] = options.group
            if options.project_id:
                params["projectId"] = options.project_id
            if options.ids:
                params["id"] = list(options.ids)
            if options.order_by:
                params["orderBy"] = options.order_by

        endpoint = self._endpoint("filter/search", params)
        return self._call("GET", endpoint, target=FilterSearchPageScheme)

    def get(
        self, filter_id: int, expand: list[str] | None = None
    ) -> tuple[FilterScheme, ResponseScheme]:
        """Get a filter, e.g. with expand=['sharedUsers', 'subscriptions']."""
        if not filter_id:
            raise NoFilterIDError()

        params = {"expand": ",".join(expand)} if expand else None
        endpoint = self._endpoint(f"filter/{filter_id}", params)
        return self._call("GET", endpoint, target=FilterScheme)

    def update(
        self, filter_id: int, payload: FilterPayloadScheme
    ) -> tuple[FilterScheme, ResponseScheme]:
        """Update the name, JQL, description or sharing of a filter."""
        if not filter_id:
            raise NoFilterIDError()

        endpoint = self._endpoint(f"filter/{filter_id}")
        return self._call("PUT", endpoint, payload, target=FilterScheme)

    def delete(self, filter_id: int) -> ResponseScheme:
        """Delete a filter."""
        if not filter_id:
            raise NoFilterIDError()

        endpoint = self._endpoint(f"filter/{filter_id}")
        _, response = self._call("DELETE", endpoint)
        return response

    def change(self, filter_id: int, account_id: str) -> ResponseScheme:
        """
        Change the owner of a filter.

        Args:
            filter_id: The ID of the filter
            account_id: The account ID of the new owner

        Raises:
            NoFilterIDError: If the filter ID is zero
            NoAccountIDError: If the account ID is empty
        """
        if not filter_id:
            raise NoFilterIDError()
        if not account_id:
            raise NoAccountIDError()

        endpoint = self._endpoint(f"filter/{filter_id}/owner")
        _, response = self._call("PUT", endpoint, {"accountId": account_id})
        return response
