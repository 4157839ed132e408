"""Module for Jira application role operations."""

from ..exceptions import NoApplicationRoleError
from ..models.jira import ApplicationRoleScheme
from ..models.response import ResponseScheme
from .service import JiraService


class ApplicationRoleService(JiraService):
    """Service for Jira application roles (e.g. ``jira-software``)."""

    def gets(self) -> tuple[list[ApplicationRoleScheme], ResponseScheme]:
        """Get all application roles."""
        endpoint = self._endpoint("applicationrole")
        return self._call("GET", endpoint, target=list[ApplicationRoleScheme])

    def get(self, key: str) -> tuple[ApplicationRoleScheme, ResponseScheme]:
        """
        Get an application role.

        Args:
            key: The key of the application role

        Raises:
            NoApplicationRoleError: If the key is empty
        """
        if not key:
            raise NoApplicationRoleError()

        endpoint = self._endpoint(f"applicationrole/{key}")
        return self._call("GET", endpoint, target=ApplicationRoleScheme)
