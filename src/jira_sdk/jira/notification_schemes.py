"""Module for Jira notification scheme operations."""

from typing import Any

from ..exceptions import NoNotificationIDError, NoNotificationSchemeIDError
from ..models.constants import DEFAULT_MAX_RESULTS, DEFAULT_START_AT
from ..models.jira import (
    NotificationSchemeCreatedPayload,
    NotificationSchemeEventsPayloadScheme,
    NotificationSchemePageScheme,
    NotificationSchemePayloadScheme,
    NotificationSchemeProjectPageScheme,
    NotificationSchemeScheme,
    NotificationSchemeSearchOptions,
)
from ..models.response import ResponseScheme
from .service import JiraService


class NotificationSchemeService(JiraService):
    """Service for notification schemes and the notifications they hold."""

    def search(
        self,
        options: NotificationSchemeSearchOptions | None = None,
        start_at: int = DEFAULT_START_AT,
        max_results: int = DEFAULT_MAX_RESULTS,
    ) -> tuple[NotificationSchemePageScheme, ResponseScheme]:
        """
        Get a page of notification schemes.

        Args:
            options: Optional scheme IDs, project IDs, default-only flag and
                expansions
            start_at: Index of the first scheme to return
            max_results: Maximum number of schemes to return

        Returns:
            The scheme page and the response
        """
        params: dict[str, Any] = {"startAt": start_at, "maxResults": max_results}

        if options is not None:
            if options.notification_scheme_ids:
                params["id"] = list(options.notification_scheme_ids)
            if options.project_ids:
                params["projectId"] = list(options.project_ids)
            if options.only_default:
                params["onlyDefault"] = True
            if options.expand:
                params["expand"] = ",".join(options.expand)

        endpoint = self._endpoint("notificationscheme", params)
        return self._call("GET", endpoint, target=NotificationSchemePageScheme)

    def create(
        self, payload: NotificationSchemePayloadScheme
    ) -> tuple[NotificationSchemeCreatedPayload, ResponseScheme]:
        endpoint = self._endpoint("notificationscheme")
        return self._call(
            "POST", endpoint, payload, target=NotificationSchemeCreatedPayload
        )

    def projects(
        self,
        scheme_ids: list[str] | None = None,
        project_ids: list[str] | None = None,
        start_at: int = DEFAULT_START_AT,
        max_results: int = DEFAULT_MAX_RESULTS,
    ) -> tuple[NotificationSchemeProjectPageScheme, ResponseScheme]:
        """Get the projects mapped to notification schemes."""
        params: dict[str, Any] = {"startAt": start_at, "maxResults": max_results}
        if scheme_ids:
            params["notificationSchemeId"] = list(scheme_ids)
        if project_ids:
            params["projectId"] = list(project_ids)

        endpoint = self._endpoint("notificationscheme/project", params)
        return self._call("GET", endpoint, target=NotificationSchemeProjectPageScheme)

    def get(
        self, scheme_id: str, expand: list[str] | None = None
    ) -> tuple[NotificationSchemeScheme, ResponseScheme]:
        if not scheme_id:
            raise NoNotificationSchemeIDError()

        params = {"expand": ",".join(expand)} if expand else None
        endpoint = self._endpoint(f"notificationscheme/{scheme_id}", params)
        return self._call("GET", endpoint, target=NotificationSchemeScheme)

    def update(
        self, scheme_id: str, payload: NotificationSchemePayloadScheme
    ) -> ResponseScheme:
        """Update the name or description of a notification scheme."""
        if not scheme_id:
            raise NoNotificationSchemeIDError()

        endpoint = self._endpoint(f"notificationscheme/{scheme_id}")
        _, response = self._call("PUT", endpoint, payload)
        return response

    def append(
        self, scheme_id: str, payload: NotificationSchemeEventsPayloadScheme
    ) -> ResponseScheme:
        """Add notifications to a notification scheme."""
        if not scheme_id:
            raise NoNotificationSchemeIDError()

        endpoint = self._endpoint(f"notificationscheme/{scheme_id}/notification")
        _, response = self._call("PUT", endpoint, payload)
        return response

    def delete(self, scheme_id: str) -> ResponseScheme:
        if not scheme_id:
            raise NoNotificationSchemeIDError()

        endpoint = self._endpoint(f"notificationscheme/{scheme_id}")
        _, response = self._call("DELETE", endpoint)
        return response

    def remove(self, scheme_id: str, notification_id: str) -> ResponseScheme:
        """Remove a single notification from a notification scheme."""
        if not scheme_id:
            raise NoNotificationSchemeIDError()
        if not notification_id:
            raise NoNotificationIDError()

        endpoint = self._endpoint(
            f"notificationscheme/{scheme_id}/notification/{notification_id}"
        )
        _, response = self._call("DELETE", endpoint)
        return response
