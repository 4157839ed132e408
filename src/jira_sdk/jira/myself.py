"""Module for the current user and their preferences."""

from typing import Any

from ..exceptions import NoKeyError, NoPropertyValueError
from ..models.jira import UserScheme
from ..models.response import ResponseScheme
from .service import JiraService


class MySelfService(JiraService):
    """Service for the user whose credentials the connector uses."""

    def details(
        self, expand: list[str] | None = None
    ) -> tuple[UserScheme, ResponseScheme]:
        """
        Get the current user.

        Args:
            expand: Optional expansions: 'groups' and/or 'applicationRoles'

        Returns:
            The user and the response
        """
        params = {"expand": ",".join(expand)} if expand else None
        endpoint = self._endpoint("myself", params)
        return self._call("GET", endpoint, target=UserScheme)

    def get(self, key: str = "") -> tuple[Any, ResponseScheme]:
        """Get a preference of the current user, or all of them without a key."""
        params = {"key": key} if key else None
        endpoint = self._endpoint("mypreferences", params)
        return self._call("GET", endpoint, target=Any)

    def set(self, key: str, value: Any) -> ResponseScheme:
        """Store a preference. The value is any JSON value except None."""
        if not key:
            raise NoKeyError()
        if value is None:
            raise NoPropertyValueError()

        endpoint = self._endpoint("mypreferences", {"key": key})
        _, response = self._call("PUT", endpoint, value)
        return response

    def delete(self, key: str) -> ResponseScheme:
        if not key:
            raise NoKeyError()

        endpoint = self._endpoint("mypreferences", {"key": key})
        _, response = self._call("DELETE", endpoint)
        return response
