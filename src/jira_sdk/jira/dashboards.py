"""Module for Jira dashboard operations."""

from typing import Any

from ..exceptions import NoDashboardIDError
from ..models.constants import DEFAULT_MAX_RESULTS, DEFAULT_START_AT
from ..models.jira import (
    DashboardPageScheme,
    DashboardPayloadScheme,
    DashboardScheme,
    DashboardSearchOptionsScheme,
    DashboardSearchPageScheme,
)
from ..models.response import ResponseScheme
from .service import JiraService


class DashboardService(JiraService):
    """Service for Jira dashboards."""

    def gets(
        self,
        start_at: int = DEFAULT_START_AT,
        max_results: int = DEFAULT_MAX_RESULTS,
        filter: str = "",
    ) -> tuple[DashboardPageScheme, ResponseScheme]:
        """
        Get the dashboards visible to the user.

        Args:
            start_at: Index of the first dashboard to return
            max_results: Maximum number of dashboards to return
            filter: Optional ``favourite`` or ``my``

        Returns:
            The dashboard page and the response
        """
        params: dict[str, Any] = {"startAt": start_at, "maxResults": max_results}
        if filter:
            params["filter"] = filter

        endpoint = self._endpoint("dashboard", params)
        return self._call("GET", endpoint, target=DashboardPageScheme)

    def create(
        self, payload: DashboardPayloadScheme
    ) -> tuple[DashboardScheme, ResponseScheme]:
        endpoint = self._endpoint("dashboard")
        return self._call("POST", endpoint, payload, target=DashboardScheme)

    def search(
        self,
        options: DashboardSearchOptionsScheme | None = None,
        start_at: int = DEFAULT_START_AT,
        max_results: int = DEFAULT_MAX_RESULTS,
    ) -> tuple[DashboardSearchPageScheme, ResponseScheme]:
        """
        Search dashboards by name, owner or group.

        Args:
            options: Optional search criteria
            start_at: Index of the first dashboard to return
            max_results: Maximum number of dashboards to return

        Returns:
            The search page and the response
        """
        params: dict[str, Any] = {"startAt": start_at, "maxResults": max_results}

        if options is not None:
            if options.owner_account_id:
                params["accountId"] = options.owner_account_id
            if options.dashboard_name:
                params["dashboardName"] = options.dashboard_name
            if options.group_permission_name:
                params["groupname"] = options.group_permission_name
            if options.order_by:
                params["orderBy"] = options.order_by
            if options.expand:
                params["expand"] = ",".join(options.expand)

        endpoint = self._endpoint("dashboard/search", params)
        return self._call("GET", endpoint, target=DashboardSearchPageScheme)

    def get(self, dashboard_id: str) -> tuple[DashboardScheme, ResponseScheme]:
        if not dashboard_id:
            raise NoDashboardIDError()

        endpoint = self._endpoint(f"dashboard/{dashboard_id}")
        return self._call("GET", endpoint, target=DashboardScheme)

    def delete(self, dashboard_id: str) -> ResponseScheme:
        if not dashboard_id:
            raise NoDashboardIDError()

        endpoint = self._endpoint(f"dashboard/{dashboard_id}")
        _, response = self._call("DELETE", endpoint)
        return response

    def copy(
        self, dashboard_id: str, payload: DashboardPayloadScheme
    ) -> tuple[DashboardScheme, ResponseScheme]:
        """Copy a dashboard; the payload overrides the copied fields."""
        if not dashboard_id:
            raise NoDashboardIDError()

        endpoint = self._endpoint(f"dashboard/{dashboard_id}/copy")
        return self._call("POST", endpoint, payload, target=DashboardScheme)

    def update(
        self, dashboard_id: str, payload: DashboardPayloadScheme
    ) -> tuple[DashboardScheme, ResponseScheme]:
        if not dashboard_id:
            raise NoDashboardIDError()

        endpoint = self._endpoint(f"dashboard/{dashboard_id}")
        return self._call("PUT", endpoint, payload, target=DashboardScheme)
