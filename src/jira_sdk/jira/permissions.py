"""Module for Jira permissions, permission schemes and their grants."""

from ..exceptions import (
    NoPermissionGrantIDError,
    NoPermissionKeysError,
    NoPermissionSchemeIDError,
)
from ..models.jira import (
    AllPermissionsScheme,
    PermissionCheckPayload,
    PermissionGrantPayloadScheme,
    PermissionGrantScheme,
    PermissionGrantsScheme,
    PermissionSchemeGrantsScheme,
    PermissionSchemePageScheme,
    PermissionSchemeScheme,
    PermittedProjectsScheme,
)
from ..models.response import ResponseScheme
from .protocols import Connector
from .service import JiraService


class PermissionService(JiraService):
    """Service for global and project permissions."""

    def gets(self) -> tuple[AllPermissionsScheme, ResponseScheme]:
        """Get every permission defined on the instance."""
        endpoint = self._endpoint("permissions")
        return self._call("GET", endpoint, target=AllPermissionsScheme)

    def check(
        self, payload: PermissionCheckPayload
    ) -> tuple[PermissionGrantsScheme, ResponseScheme]:
        """
        Check which of the given permissions a user holds.

        Args:
            payload: Global and project permissions to check, optionally for
                another user's account ID

        Returns:
            The permissions granted and the response
        """
        endpoint = self._endpoint("permissions/check")
        return self._call("POST", endpoint, payload, target=PermissionGrantsScheme)

    def projects(
        self, permissions: list[str]
    ) -> tuple[PermittedProjectsScheme, ResponseScheme]:
        """Get the projects where the user holds all of the given permissions."""
        if not permissions:
            raise NoPermissionKeysError()

        endpoint = self._endpoint("permissions/project")
        return self._call(
            "POST",
            endpoint,
            {"permissions": list(permissions)},
            target=PermittedProjectsScheme,
        )


class PermissionSchemeGrantService(JiraService):
    """Service for the permission grants of a permission scheme."""

    def create(
        self, scheme_id: int, payload: PermissionGrantPayloadScheme
    ) -> tuple[PermissionGrantScheme, ResponseScheme]:
        """Add a grant (a holder and a permission key) to a permission scheme."""
        if not scheme_id:
            raise NoPermissionSchemeIDError()

        endpoint = self._endpoint(f"permissionscheme/{scheme_id}/permission")
        return self._call("POST", endpoint, payload, target=PermissionGrantScheme)

    def gets(
        self, scheme_id: int, expand: list[str] | None = None
    ) -> tuple[PermissionSchemeGrantsScheme, ResponseScheme]:
        """
        Get all grants of a permission scheme.

        Args:
            scheme_id: The ID of the permission scheme
            expand: Optional expansions, e.g. ['user', 'group']

        Returns:
            The grants and the response
        """
        if not scheme_id:
            raise NoPermissionSchemeIDError()

        params = {"expand": ",".join(expand)} if expand else None
        endpoint = self._endpoint(f"permissionscheme/{scheme_id}/permission", params)
        return self._call("GET", endpoint, target=PermissionSchemeGrantsScheme)

    def get(
        self, scheme_id: int, grant_id: int, expand: list[str] | None = None
    ) -> tuple[PermissionGrantScheme, ResponseScheme]:
        """Get one grant of a permission scheme."""
        if not scheme_id:
            raise NoPermissionSchemeIDError()
        if not grant_id:
            raise NoPermissionGrantIDError()

        params = {"expand": ",".join(expand)} if expand else None
        endpoint = self._endpoint(
            f"permissionscheme/{scheme_id}/permission/{grant_id}", params
        )
        return self._call("GET", endpoint, target=PermissionGrantScheme)

    def delete(self, scheme_id: int, grant_id: int) -> ResponseScheme:
        """Remove a grant from a permission scheme."""
        if not scheme_id:
            raise NoPermissionSchemeIDError()
        if not grant_id:
            raise NoPermissionGrantIDError()

        endpoint = self._endpoint(f"permissionscheme/{scheme_id}/permission/{grant_id}")
        _, response = self._call("DELETE", endpoint)
        return response


class PermissionSchemeService(JiraService):
    """Service for permission schemes.

    Grants are handled by ``grant``, a ``PermissionSchemeGrantService``
    bound to the same connector and version.
    """

    def __init__(self, connector: Connector, version: str) -> None:
        super().__init__(connector, version)
        self.grant = PermissionSchemeGrantService(connector, version)

    def gets(self) -> tuple[PermissionSchemePageScheme, ResponseScheme]:
        """Get every permission scheme."""
        endpoint = self._endpoint("permissionscheme")
        return self._call("GET", endpoint, target=PermissionSchemePageScheme)

    def get(
        self, scheme_id: int, expand: list[str] | None = None
    ) -> tuple[PermissionSchemeScheme, ResponseScheme]:
        """Get a permission scheme, optionally expanding its grants."""
        if not scheme_id:
            raise NoPermissionSchemeIDError()

        params = {"expand": ",".join(expand)} if expand else None
        endpoint = self._endpoint(f"permissionscheme/{scheme_id}", params)
        return self._call("GET", endpoint, target=PermissionSchemeScheme)

    def delete(self, scheme_id: int) -> ResponseScheme:
        """Delete a permission scheme."""
        if not scheme_id:
            raise NoPermissionSchemeIDError()

        endpoint = self._endpoint(f"permissionscheme/{scheme_id}")
        _, response = self._call("DELETE", endpoint)
        return response

    def create(
        self, payload: PermissionSchemeScheme
    ) -> tuple[PermissionSchemeScheme, ResponseScheme]:
        """Create a permission scheme, optionally with its grants."""
        endpoint = self._endpoint("permissionscheme")
        return self._call("POST", endpoint, payload, target=PermissionSchemeScheme)

    def update(
        self, scheme_id: int, payload: PermissionSchemeScheme
    ) -> tuple[PermissionSchemeScheme, ResponseScheme]:
        """
        Update a permission scheme.

        Grants included in the payload replace all existing grants of the
        scheme.
        """
        if not scheme_id:
            raise NoPermissionSchemeIDError()

        endpoint = self._endpoint(f"permissionscheme/{scheme_id}")
        return self._call("PUT", endpoint, payload, target=PermissionSchemeScheme)
